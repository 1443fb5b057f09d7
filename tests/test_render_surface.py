import os

import pygame
import pytest

from core.geometry import Point
from core.render_surface import PygameSurface

SQUARE = [(5, 5), (35, 5), (35, 35), (5, 35)]


@pytest.fixture
def surface():
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    yield PygameSurface(pygame.Surface((40, 40)))
    pygame.quit()


def test_size(surface):
    assert surface.size == (40, 40)


def test_opaque_fill(surface):
    surface.clear((0, 0, 0))
    surface.fill_polygon(SQUARE, (255, 255, 255, 255))
    assert surface.screen.get_at((20, 20))[:3] == (255, 255, 255)
    assert surface.screen.get_at((1, 1))[:3] == (0, 0, 0)


def test_translucent_fill_blends(surface):
    surface.clear((0, 0, 0))
    surface.fill_polygon([Point(x, y) for x, y in SQUARE], (255, 255, 255, 51))
    r, g, b = surface.screen.get_at((20, 20))[:3]
    assert 45 <= r <= 57
    assert r == g == b


def test_degenerate_polygon_is_skipped(surface):
    surface.clear((0, 0, 0))
    surface.fill_polygon([(1, 1), (30, 30)], (255, 255, 255))
    assert surface.screen.get_at((15, 15))[:3] == (0, 0, 0)


def test_stroke_and_point(surface):
    surface.clear((0, 0, 0))
    surface.stroke_polygon(SQUARE, (255, 0, 0), 1)
    assert surface.screen.get_at((20, 5))[:3] == (255, 0, 0)
    assert surface.screen.get_at((20, 20))[:3] == (0, 0, 0)

    surface.draw_point(Point(20, 20, radius=3), (0, 255, 0))
    assert surface.screen.get_at((20, 20))[:3] == (0, 255, 0)
