class Point:
    """A mutable 2D point with a display radius.

    Points compare by identity. Use as_tuple() for value comparisons.
    """

    __slots__ = ("x", "y", "radius")

    def __init__(self, x, y, radius=4):
        self.x = x
        self.y = y
        self.radius = radius

    def set(self, x, y):
        self.x = x
        self.y = y

    def copy(self):
        return Point(self.x, self.y, self.radius)

    def as_tuple(self):
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Point({self.x!r}, {self.y!r})"


class LineSegment:
    __slots__ = ("p1", "p2")

    def __init__(self, p1, p2):
        self.p1 = p1
        self.p2 = p2

    def as_tuples(self):
        return self.p1.as_tuple(), self.p2.as_tuple()

    def __repr__(self):
        return f"LineSegment({self.p1!r}, {self.p2!r})"
