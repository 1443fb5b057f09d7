import pygame


class RenderSurface:
    """Drawing capability handed to the scene each frame.

    Points may be Point objects or (x, y) tuples. Colors are (r, g, b) or
    (r, g, b, a); alpha below 255 blends over what is already drawn.
    """

    size = (0, 0)

    def clear(self, color):
        pass

    def fill_polygon(self, points, color):
        pass

    def stroke_polygon(self, points, color, width=1):
        pass

    def draw_point(self, point, color):
        pass


class PygameSurface(RenderSurface):
    def __init__(self, screen):
        self.screen = screen

    @property
    def size(self):
        return self.screen.get_size()

    def clear(self, color):
        self.screen.fill(color)

    def fill_polygon(self, points, color):
        poly = [tuple(p) for p in points]
        if len(poly) < 3:
            return
        if len(color) == 4 and color[3] < 255:
            # pygame.draw ignores alpha on plain surfaces, so blend an overlay
            overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            pygame.draw.polygon(overlay, color, poly)
            self.screen.blit(overlay, (0, 0))
        else:
            pygame.draw.polygon(self.screen, color[:3], poly)

    def stroke_polygon(self, points, color, width=1):
        poly = [tuple(p) for p in points]
        if len(poly) < 2:
            return
        pygame.draw.lines(self.screen, color[:3], True, poly, width)

    def draw_point(self, point, color):
        radius = getattr(point, "radius", 4)
        pygame.draw.circle(self.screen, color[:3], (point.x, point.y), radius)
