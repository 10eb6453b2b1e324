import os
import random
from contextlib import contextmanager

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from starline.entities import Asset
from starline.host import FrameScheduler, ViewportConfig
from starline.session import GameSession


class FakeImage:
    def __init__(self, width=100, height=50, ok=True, path="fake.png"):
        self.width = width
        self.height = height
        self.complete = True
        self.ok = ok
        self.path = path


class RecordingSurface:
    """Drawing surface that records every call instead of painting."""

    def __init__(self, width=600, height=400):
        self.size = (width, height)
        self.calls = []
        self.depth = 0

    def viewport(self):
        return ViewportConfig(*self.size)

    def resize(self, width, height):
        self.calls.append(("resize", width, height))

    def fill_rect(self, rect, color):
        self.calls.append(("fill_rect", tuple(rect), color))

    def stroke_rect(self, rect, color, width=1):
        self.calls.append(("stroke_rect", tuple(rect), color, width))

    def draw_image(self, image, rect):
        self.calls.append(("image", image, tuple(rect), self.depth))

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", list(points), color))

    def fill_circle(self, center, radius, color):
        self.calls.append(("circle", center, radius, color))

    def draw_text(self, text, pos, size, color):
        self.calls.append(("text", text, pos, size, color))

    @contextmanager
    def rotated(self, degrees):
        self.calls.append(("rotate", degrees))
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1
            self.calls.append(("restore",))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]

    def texts(self):
        return [c[1] for c in self.named("text")]


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def ship():
    return Asset(FakeImage(100, 50), 0.3)


@pytest.fixture
def enemies():
    return [Asset(FakeImage(200, 200, path="enemy1.png"), 0.1), Asset(FakeImage(160, 160, path="enemy2.png"), 0.3)]


@pytest.fixture
def session(surface, scheduler, ship, enemies):
    return GameSession(surface, scheduler, ship, enemies, rng=random.Random(7))
