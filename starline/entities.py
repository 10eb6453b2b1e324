"""
Game entities: sprite assets (player and enemies), lasers and stars.

Motion is explicit Euler integration. Rotation, laser and star motion scale
with the elapsed milliseconds; velocity and position integration do not.
"""
import math
import random

from starline import settings
from starline.geometry import AxisRect, Vector


class Asset:
    """A sprite with position, velocity, acceleration and spin."""

    def __init__(self, image, scale=1.0):
        self.image = image
        self.position = Vector(0, 0)
        self.velocity = Vector(0, 0)
        self.acceleration = Vector(0, 0)
        self.rotation = 0.0
        self.rotation_speed = 0.0
        self.scale = scale
        self.visible = True
        self.draw_rect = settings.FEATURES["DEBUG_RECTS"]

    @property
    def rect(self) -> AxisRect:
        return AxisRect(self.position, self.image.width * self.scale, self.image.height * self.scale)

    def move(self, elapsed_ms: float):
        self.rotation += self.rotation_speed * elapsed_ms
        # one subtraction only: a frame that adds more than 360 stays above it
        if self.rotation >= 360:
            self.rotation -= 360
        self.velocity.add(self.acceleration)
        self.position.add(self.velocity)

    def reset_motion(self):
        self.velocity = Vector(0, 0)
        self.acceleration = Vector(0, 0)

    def draw(self, surface):
        if not self.visible:
            return
        rect = self.rect.as_tuple()
        with surface.rotated(self.rotation):
            surface.draw_image(self.image, rect)
            if self.draw_rect:
                surface.stroke_rect(rect, settings.WHITE, 1)


class Laser:
    def __init__(self, x, y, speed=settings.LASER_SPEED):
        self.x = x
        self.y = y
        self.speed = speed

    def move(self, elapsed_ms: float):
        self.y -= self.speed * elapsed_ms

    @property
    def off_screen(self):
        return self.y < settings.LASER_CULL_Y

    def outline(self, steps=8):
        """Lens outline: lower cap, cross line, upper cap, cross line."""
        r = settings.LASER_RADIUS
        half = settings.LASER_HALF_LENGTH
        points = []
        for i in range(steps + 1):
            a = math.pi * i / steps
            points.append((self.x + r * math.cos(a), self.y + half + r * math.sin(a)))
        points.append((self.x + r, self.y))
        for i in range(steps + 1):
            a = math.pi + math.pi * i / steps
            points.append((self.x + r * math.cos(a), self.y - half + r * math.sin(a)))
        points.append((self.x - r, self.y))
        return points

    def draw(self, surface):
        surface.fill_polygon(self.outline(), settings.LASER_COLOR)


class Star:
    """Background particle; its radius doubles as its parallax speed factor."""

    def __init__(self, x, y, rng=None):
        self.rng = rng or random
        self.x = x
        self.y = y
        self.radius = self.rng.random() * settings.STAR_MAX_RADIUS
        self.speed = settings.STAR_SPEED

    def move(self, elapsed_ms: float, viewport):
        self.y += self.speed * self.radius * elapsed_ms
        if self.y > viewport.height + settings.STAR_MARGIN:
            self.x = self.rng.random() * viewport.width
            self.y = -settings.STAR_MARGIN

    def draw(self, surface):
        surface.fill_circle((self.x, self.y), self.radius, settings.WHITE)
