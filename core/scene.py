import logging
import math

from core.geometry import Point
from core.shape import Shape
from core.visibility import point_in_polygon, polygon_from_hits, trace_rays
from data.light_stats import LIGHT_STATS
from settings import BACKGROUND_COLOR

log = logging.getLogger("scene")


def buddy_offsets(distance):
    """Light source offsets used for the soft penumbra, primary first."""
    diag = math.sqrt(0.5) * distance
    return [
        (0, 0),
        (distance, 0),
        (-distance, 0),
        (0, distance),
        (0, -distance),
        (diag, diag),
        (diag, -diag),
        (-diag, diag),
        (-diag, -diag),
    ]


class Scene:
    """Owns the obstacles and the light, and composes each frame.

    The light Point is mutated by the input handler between frames; every
    frame works on a copy taken at the start of compute_polygons().
    """

    def __init__(self, light, width, height, stats=None):
        self.light = light
        self.width = width
        self.height = height
        self.stats = stats or LIGHT_STATS
        self.shapes = []
        self.rays = []

        self.sampling = dict(self.stats["sampling"])
        self.strict_parallel = True
        self.buddies_enabled = True
        self.show_hits = False

        self._hit_points = []
        self._primary_polygon = None

    # -------------------------
    # Obstacles
    # -------------------------

    def add_shape(self, s):
        self.shapes.append(s)

    def add_shapes(self, shapes):
        self.shapes.extend(shapes)

    def add_border(self):
        """Close the scene with four border shapes so every ray hits something."""
        w, h = self.width, self.height
        self.add_shapes([
            Shape([Point(0, h), Point(0, 0)]),   # left
            Shape([Point(0, h), Point(w, h)]),   # bottom
            Shape([Point(w, h), Point(w, 0)]),   # right
            Shape([Point(0, 0), Point(w, 0)]),   # top
        ])

    @property
    def has_border(self):
        corners = {(0, 0), (self.width, 0), (self.width, self.height), (0, self.height)}
        seen = set()
        for shape in self.shapes:
            seen.update(p.as_tuple() for p in shape.points)
        return corners <= seen

    # -------------------------
    # Rays
    # -------------------------

    def add_ray(self, r):
        self.rays.append(r)

    def add_rays(self, rays):
        self.rays.extend(rays)

    def clear_rays(self):
        self.rays = []
        self._hit_points = []

    # -------------------------
    # Light
    # -------------------------

    def set_light(self, x, y):
        self.light.set(x, y)

    def contains(self, x, y):
        return 0 <= x <= self.width and 0 <= y <= self.height

    def light_sources(self):
        """Offset copies of the light, primary first.

        The primary is clamped into the scene. Buddies that land outside
        it are dropped.
        """
        origin = self.light.copy()
        origin.x = max(0, min(self.width, origin.x))
        origin.y = max(0, min(self.height, origin.y))
        sources = [origin]
        if not self.buddies_enabled:
            return sources
        for dx, dy in buddy_offsets(self.stats["buddy_distance"])[1:]:
            x, y = origin.x + dx, origin.y + dy
            if self.contains(x, y):
                sources.append(Point(x, y, origin.radius))
        return sources

    # -------------------------
    # Frame
    # -------------------------

    def compute_polygons(self):
        """Visibility polygon for each light source, as [(source, Shape)]."""
        self.clear_rays()
        results = []
        for i, source in enumerate(self.light_sources()):
            hits = trace_rays(source, self.shapes, self.sampling, self.strict_parallel)
            if i == 0:
                self.add_rays([ray for ray, _ in hits])
                self._hit_points = [point for _, point in hits]
            results.append((source, polygon_from_hits(hits)))

        self._primary_polygon = results[0][1]
        log.debug(f"Composed {len(results)} polygons, {len(self.rays)} primary rays")
        return results

    def is_lit(self, x, y):
        """Whether (x, y) lies inside the last primary visibility polygon."""
        if self._primary_polygon is None:
            return False
        return point_in_polygon(x, y, self._primary_polygon.points)

    def draw(self, surface):
        stats = self.stats
        surface.clear(BACKGROUND_COLOR)
        for shape in self.shapes:
            surface.stroke_polygon(shape.points, stats["outline_color"], stats["outline_width"])

        for i, (_, polygon) in enumerate(self.compute_polygons()):
            color = stats["buddy_color"] if i else stats["primary_color"]
            surface.fill_polygon(polygon.points, color)

        if self.show_hits:
            for point in self._hit_points:
                point.radius = 2
                surface.draw_point(point, stats["hit_color"])

        self.light.radius = stats["point_radius"]
        surface.draw_point(self.light, stats["point_color"])
