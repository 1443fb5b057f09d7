from core.geometry import LineSegment, Point


class Shape:
    """An ordered list of points, closed into a boundary of line segments.

    with_lines=False keeps the points only. That variant is used for the
    computed visibility polygon, which is drawn but never occludes.
    """

    def __init__(self, points, with_lines=True):
        self.points = list(points)
        self.lines = []
        if with_lines:
            if len(self.points) < 2:
                raise ValueError(
                    f"An obstacle needs at least 2 points, got {len(self.points)}"
                )
            n = len(self.points)
            self.lines = [
                LineSegment(p, self.points[(i + 1) % n])
                for i, p in enumerate(self.points)
            ]

    @classmethod
    def from_coords(cls, coords, with_lines=True):
        return cls([Point(x, y) for x, y in coords], with_lines)

    @property
    def occludes(self):
        return bool(self.lines)

    def as_tuples(self):
        return [p.as_tuple() for p in self.points]

    def bounds(self):
        """(min_x, min_y, max_x, max_y) of the points."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return min(xs), min(ys), max(xs), max(ys)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return f"Shape({self.as_tuples()!r}, with_lines={self.occludes})"
