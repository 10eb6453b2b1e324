"""
Vector and rectangle helpers shared by every entity.
"""
import pygame


class Vector(pygame.Vector2):
    def add(self, other):
        """Sum other into this vector in place."""
        self.x += other.x
        self.y += other.y


class AxisRect:
    """Read-only rectangle view over an owner's position and a size.

    pygame.Rect truncates to integers, so edges are kept as floats here.

    Every edge is recomputed from the live position, so a rect taken before a
    move reflects the move.
    """

    def __init__(self, position: Vector, width: float, height: float):
        self.position = position
        self.width = width
        self.height = height

    @property
    def left(self): return self.position.x
    @property
    def right(self): return self.position.x + self.width
    @property
    def top(self): return self.position.y
    @property
    def bottom(self): return self.position.y + self.height

    @property
    def center(self) -> Vector:
        return Vector(self.position.x + self.width / 2, self.position.y + self.height / 2)

    def as_tuple(self):
        return (self.left, self.top, self.width, self.height)
