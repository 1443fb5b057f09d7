import math

import pygame

from core.geometry import Point

TAU = 2 * math.pi

# Sine of the smallest angle between a ray and a segment still treated as crossing
PARALLEL_EPSILON = 1e-12
# Max distance of a segment from the ray's line for the two to count as colinear
COLINEAR_TOLERANCE = 1e-9
# Slack on the segment span so rays aimed exactly at a shared vertex still hit
SPAN_EPSILON = 1e-9


class UnboundedRayError(RuntimeError):
    """A cast ray escaped the scene without hitting any obstacle."""


def normalize_angle(d):
    """Wrap an angle into [0, 2*pi)."""
    d = d % TAU
    # tiny negative angles round up to exactly TAU
    if d >= TAU:
        return 0.0
    return d


class Ray:
    """A half-line from `source` with direction angle `d` and unit vector `r`.

    Built from a source and a target point; the target only fixes the
    direction and is not kept.
    """

    def __init__(self, source, towards):
        dx = towards.x - source.x
        dy = towards.y - source.y
        if dx == 0 and dy == 0:
            raise ValueError(
                f"Ray source and target coincide at ({source.x}, {source.y})"
            )
        self.source = source
        self.d = normalize_angle(math.atan2(dy, dx))
        self.r = pygame.Vector2(dx, dy).normalize()
        self.hit_distance = None

    @classmethod
    def from_angle(cls, source, d):
        ray = cls(source, Point(source.x + math.cos(d), source.y + math.sin(d)))
        ray.set_direction(d)
        return ray

    def set_source(self, p):
        self.source = p

    def set_direction(self, d):
        """Point the ray at angle d, discarding the original target."""
        self.d = normalize_angle(d)
        self.r = pygame.Vector2(math.cos(self.d), math.sin(self.d))

    # -------------------------
    # Intersection
    # -------------------------

    def ray_line_intersection(self, line, strict_parallel=True):
        """Return the distance t along the ray to `line`, or None for no hit.

        Solves source + t*r = p1 + u*s with s = p2 - p1. A hit needs
        0 <= u <= 1 and t >= 0. Parallel segments never hit while
        strict_parallel is set, even when they lie on the ray itself.
        """
        px, py = self.source.x, self.source.y
        rx, ry = self.r.x, self.r.y
        qx, qy = line.p1.x, line.p1.y
        sx = line.p2.x - qx
        sy = line.p2.y - qy

        denom = rx * sy - ry * sx
        s_len = math.hypot(sx, sy)
        if abs(denom) <= PARALLEL_EPSILON * s_len:
            if strict_parallel:
                return None
            return self._colinear_hit(line)

        t = ((qx - px) * sy - (qy - py) * sx) / denom
        u = ((qx - px) * ry - (qy - py) * rx) / denom

        if u > 1 + SPAN_EPSILON or u < -SPAN_EPSILON or t < 0:
            return None
        return t

    def _colinear_hit(self, line):
        px, py = self.source.x, self.source.y
        rx, ry = self.r.x, self.r.y

        # Distance of p1 from the ray's supporting line
        off = (line.p1.x - px) * ry - (line.p1.y - py) * rx
        if abs(off) > COLINEAR_TOLERANCE:
            return None

        t1 = (line.p1.x - px) * rx + (line.p1.y - py) * ry
        t2 = (line.p2.x - px) * rx + (line.p2.y - py) * ry
        near, far = min(t1, t2), max(t1, t2)
        if far < 0:
            return None
        return max(near, 0.0)

    def find_closest(self, shapes, strict_parallel=True):
        """Return the nearest point where this ray meets any shape's boundary."""
        closest = None
        for shape in shapes:
            for line in shape.lines:
                t = self.ray_line_intersection(line, strict_parallel)
                if t is not None and (closest is None or t < closest):
                    closest = t

        self.hit_distance = closest
        if closest is None:
            raise UnboundedRayError(
                f"Ray from ({self.source.x}, {self.source.y}) at angle "
                f"{self.d:.6f} hit no obstacle; is the scene border missing?"
            )
        return Point(
            self.source.x + self.r.x * closest,
            self.source.y + self.r.y * closest,
        )

    def __repr__(self):
        return f"Ray(source={self.source!r}, d={self.d:.6f})"
