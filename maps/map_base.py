import json
import logging

from core.geometry import Point
from core.scene import Scene
from core.shape import Shape

log = logging.getLogger("maps")


class MapBase:
    """Static scene description: canvas size plus obstacle vertex lists."""

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"Map size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.obstacles = []

    @classmethod
    def from_json(cls, path):
        """Construct a MapBase from a JSON file.

        Format: {"width": w, "height": h, "obstacles": [[[x, y], ...], ...]}
        """
        with open(path, "r") as f:
            data = json.load(f)

        map_obj = cls(width=data["width"], height=data["height"])
        for i, coords in enumerate(data.get("obstacles", [])):
            try:
                map_obj.add_obstacle(coords)
            except ValueError as exc:
                raise ValueError(f"{path}: obstacle {i}: {exc}") from exc

        log.info(f"Loaded {path}: {map_obj.width}x{map_obj.height}, "
                 f"{len(map_obj.obstacles)} obstacles")
        return map_obj

    def add_obstacle(self, coords):
        coords = [(float(x), float(y)) for x, y in coords]
        if len(coords) < 2:
            raise ValueError(f"An obstacle needs at least 2 points, got {len(coords)}")
        self.obstacles.append(coords)

    def build_scene(self, light=None, stats=None):
        """Create a Scene with the border first, then every obstacle."""
        if light is None:
            light = Point(self.width / 2, self.height / 2)
        scene = Scene(light, self.width, self.height, stats)
        scene.add_border()
        scene.add_shapes([Shape.from_coords(coords) for coords in self.obstacles])
        return scene
