import math

import pytest

from core.geometry import Point
from core.ray import UnboundedRayError
from core.scene import Scene, buddy_offsets
from core.shape import Shape
from data.light_stats import LIGHT_STATS


class RecordingSurface:
    """Stand-in drawing surface that records every call."""

    size = (1000, 600)

    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_polygon(self, points, color):
        self.calls.append(("fill", [tuple(p) for p in points], color))

    def stroke_polygon(self, points, color, width=1):
        self.calls.append(("stroke", [tuple(p) for p in points], color))

    def draw_point(self, point, color):
        self.calls.append(("point", (point.x, point.y), color))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def scene():
    scene = Scene(Point(500, 300), 1000, 600)
    scene.add_border()
    scene.add_shape(Shape.from_coords([(450, 100), (550, 100), (500, 150)]))
    return scene


def test_buddy_offsets():
    offsets = buddy_offsets(7)
    assert len(offsets) == 9
    assert offsets[0] == (0, 0)
    for dx, dy in offsets[1:]:
        assert math.hypot(dx, dy) == pytest.approx(7)
    assert offsets[6] == pytest.approx((7 * math.sqrt(0.5), -7 * math.sqrt(0.5)))


def test_border_is_four_shapes():
    scene = Scene(Point(10, 10), 200, 100)
    assert not scene.has_border
    scene.add_border()
    assert len(scene.shapes) == 4
    assert scene.has_border


def test_set_light_mutates_in_place(scene):
    light = scene.light
    scene.set_light(120, 80)
    assert scene.light is light
    assert light.as_tuple() == (120, 80)


def test_compute_polygons_one_per_source(scene):
    results = scene.compute_polygons()
    assert len(results) == 9
    source, primary = results[0]
    assert source.as_tuple() == (500, 300)
    assert source is not scene.light
    assert not primary.occludes
    # 4 border shapes x 2 points + 3 triangle points, five rays each
    assert len(scene.rays) == 11 * 5


def test_buddies_disabled(scene):
    scene.buddies_enabled = False
    assert len(scene.compute_polygons()) == 1


def test_buddies_outside_scene_are_dropped(scene):
    scene.set_light(2, 2)
    sources = scene.light_sources()
    assert len(sources) == 4
    for source in sources:
        assert scene.contains(source.x, source.y)


def test_primary_light_is_clamped(scene):
    scene.set_light(-50, 700)
    assert scene.light_sources()[0].as_tuple() == (0, 600)
    # the stored light itself is untouched
    assert scene.light.as_tuple() == (-50, 700)


def test_recompute_after_move_is_repeatable(scene):
    scene.set_light(250, 450)
    first = [poly.as_tuples() for _, poly in scene.compute_polygons()]
    scene.set_light(700, 80)
    scene.compute_polygons()
    scene.set_light(250, 450)
    second = [poly.as_tuples() for _, poly in scene.compute_polygons()]
    assert first == second


def test_is_lit(scene):
    assert not scene.is_lit(100, 500)
    scene.compute_polygons()
    assert scene.is_lit(100, 500)
    assert not scene.is_lit(500, 50)


def test_missing_border_is_fatal():
    scene = Scene(Point(500, 300), 1000, 600)
    scene.add_shape(Shape.from_coords([(450, 100), (550, 100), (500, 150)]))
    with pytest.raises(UnboundedRayError):
        scene.compute_polygons()


def test_draw_order(scene):
    surface = RecordingSurface()
    scene.draw(surface)

    assert surface.calls[0][0] == "clear"
    assert len(surface.named("stroke")) == len(scene.shapes)

    fills = surface.named("fill")
    assert len(fills) == 9
    assert fills[0][2] == LIGHT_STATS["primary_color"]
    assert all(fill[2] == LIGHT_STATS["buddy_color"] for fill in fills[1:])

    assert surface.calls[-1] == ("point", (500, 300), LIGHT_STATS["point_color"])


def test_draw_hits(scene):
    scene.buddies_enabled = False
    scene.show_hits = True
    surface = RecordingSurface()
    scene.draw(surface)
    hits = [call for call in surface.named("point") if call[2] == LIGHT_STATS["hit_color"]]
    assert len(hits) == len(scene.rays)


def test_ray_working_set(scene):
    scene.compute_polygons()
    count = len(scene.rays)
    scene.add_ray(scene.rays[0])
    assert len(scene.rays) == count + 1
    scene.clear_rays()
    assert scene.rays == []
