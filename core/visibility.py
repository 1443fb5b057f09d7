import logging
import math

from core.geometry import Point
from core.ray import Ray
from core.shape import Shape
from data.light_stats import LIGHT_STATS, OFFSET_FAN

log = logging.getLogger("visibility")

SAMPLING_MODES = ("angular", "offset")


def cast_rays(source, shapes, sampling=None):
    """Cast a small fan of rays from `source` toward every obstacle vertex.

    Each vertex gets five rays so the nearest-hit pass samples both sides
    of the shadow edge it may create. The fan is controlled by `sampling`:

      {"mode": "angular", "step": s}  angles a, a +/- s, a +/- 2s
      {"mode": "offset",  "step": s}  vertex shifted by OFFSET_FAN * s

    Vertices sitting exactly on the source are skipped.
    """
    sampling = sampling or LIGHT_STATS["sampling"]
    mode = sampling.get("mode", "angular")
    step = sampling.get("step", LIGHT_STATS["sampling"]["step"])
    if mode not in SAMPLING_MODES:
        raise ValueError(f"Unknown sampling mode {mode!r}, expected one of {SAMPLING_MODES}")

    rays = []
    for shape in shapes:
        if not shape.occludes:
            continue
        for vertex in shape.points:
            if mode == "angular":
                rays.extend(_angular_fan(source, vertex, step))
            else:
                rays.extend(_offset_fan(source, vertex, step))
    return rays


def _angular_fan(source, vertex, step):
    if vertex.x == source.x and vertex.y == source.y:
        return []
    base = Ray(source, vertex)
    return [base] + [
        Ray.from_angle(source, base.d + k * step) for k in (2, 1, -1, -2)
    ]


def _offset_fan(source, vertex, step):
    rays = []
    for ox, oy in OFFSET_FAN:
        target = Point(vertex.x + ox * step, vertex.y + oy * step)
        if target.x == source.x and target.y == source.y:
            continue
        rays.append(Ray(source, target))
    return rays


def trace_rays(source, shapes, sampling=None, strict_parallel=True):
    """Cast, sort by angle and resolve rays. Returns [(ray, hit_point)].

    The sort is stable, so rays with equal angles keep their cast order.
    Raises UnboundedRayError if any ray escapes the scene.
    """
    rays = cast_rays(source, shapes, sampling)
    rays.sort(key=lambda ray: ray.d)
    hits = [(ray, ray.find_closest(shapes, strict_parallel)) for ray in rays]
    log.debug(f"Traced {len(hits)} rays from ({source.x:.1f}, {source.y:.1f})")
    return hits


def polygon_from_hits(hits, simplify_tolerance=None):
    points = [point for _, point in hits]
    if simplify_tolerance:
        points = simplify_polygon(points, simplify_tolerance)
    return Shape(points, with_lines=False)


def compute_visibility_polygon(source, shapes, sampling=None,
                               strict_parallel=True, simplify_tolerance=None):
    """Return the region visible from `source` as a point-only Shape.

    Points are ordered by ray angle; joining them cyclically gives the
    polygon to fill. The result depends only on the source position and
    the obstacles.
    """
    hits = trace_rays(source, shapes, sampling, strict_parallel)
    return polygon_from_hits(hits, simplify_tolerance)


def simplify_polygon(points, tolerance):
    """Collapse jitter clusters and drop vertices lying on a straight edge.

    Consecutive points closer than `tolerance` are merged (wrapping around),
    then any vertex within `tolerance` of the line through its neighbours
    is removed.
    """
    merged = []
    for p in points:
        if merged and _distance(merged[-1], p) < tolerance:
            continue
        merged.append(p)
    while len(merged) > 1 and _distance(merged[-1], merged[0]) < tolerance:
        merged.pop()

    changed = True
    while changed and len(merged) > 3:
        changed = False
        n = len(merged)
        for i in range(n):
            a, b, c = merged[i - 1], merged[i], merged[(i + 1) % n]
            if _line_distance(b, a, c) < tolerance:
                del merged[i]
                changed = True
                break
    return merged


def point_in_polygon(x, y, polygon):
    """Ray-casting point-in-polygon test."""
    n = len(polygon)
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside


def is_simple_polygon(points):
    """True when no two non-adjacent edges of the closed polygon cross."""
    pts = [tuple(p) for p in points]
    n = len(pts)
    if n < 4:
        return n == 3
    edges = [(pts[i], pts[(i + 1) % n]) for i in range(n)]
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if _segments_cross(*edges[i], *edges[j]):
                return False
    return True


# -------------------------
# Helpers
# -------------------------

def _distance(a, b):
    return math.hypot(a.x - b.x, a.y - b.y)


def _line_distance(p, a, b):
    """Distance of p from the line through a and b."""
    length = _distance(a, b)
    if length == 0:
        return _distance(p, a)
    return abs((b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x)) / length


def _orient(a, b, c):
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _segments_cross(a, b, c, d):
    return (_orient(a, b, c) * _orient(a, b, d) < 0 and
            _orient(c, d, a) * _orient(c, d, b) < 0)
