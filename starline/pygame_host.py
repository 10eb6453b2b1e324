"""
pygame implementation of the drawing surface contract.
"""
from contextlib import contextmanager

import pygame

from starline.host import ViewportConfig


def key_name(event):
    """pygame KEYDOWN event -> key name ("a", "space", "escape", ...)."""
    return pygame.key.name(event.key)


class PygameSurface:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._rotation = [0.0]
        self._fonts = {}
        self._scaled = {}

    @property
    def rotation(self):
        return self._rotation[-1]

    def viewport(self) -> ViewportConfig:
        w, h = self.screen.get_size()
        return ViewportConfig(w, h)

    def resize(self, width, height):
        self.screen.set_clip(pygame.Rect(0, 0, max(0, int(width)), max(0, int(height))))

    @contextmanager
    def rotated(self, degrees):
        self._rotation.append(self._rotation[-1] + degrees)
        try:
            yield
        finally:
            self._rotation.pop()

    def _corners(self, rect):
        x, y, w, h = rect
        center = pygame.Vector2(x + w / 2, y + h / 2)
        pts = [pygame.Vector2(x, y), pygame.Vector2(x + w, y),
               pygame.Vector2(x + w, y + h), pygame.Vector2(x, y + h)]
        if self.rotation:
            pts = [center + (p - center).rotate(self.rotation) for p in pts]
        return pts

    def fill_rect(self, rect, color):
        x, y, w, h = rect
        if w <= 0 or h <= 0:
            return
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(round(w)), int(round(h))))

    def stroke_rect(self, rect, color, width=1):
        pygame.draw.polygon(self.screen, color, self._corners(rect), width)

    def draw_image(self, image, rect):
        x, y, w, h = rect
        size = (max(1, int(round(w))), max(1, int(round(h))))
        key = (id(image.surface), size)
        surf = self._scaled.get(key)
        if surf is None:
            surf = pygame.transform.smoothscale(image.surface, size) \
                if image.surface.get_bitsize() >= 24 else pygame.transform.scale(image.surface, size)
            self._scaled[key] = surf
        if self.rotation:
            # screen y points down, so a clockwise canvas angle is negative here
            surf = pygame.transform.rotate(surf, -self.rotation)
        self.screen.blit(surf, surf.get_rect(center=(x + w / 2, y + h / 2)))

    def fill_polygon(self, points, color):
        pygame.draw.polygon(self.screen, color, points)

    def fill_circle(self, center, radius, color):
        if radius <= 0:
            return
        pygame.draw.circle(self.screen, color, (int(center[0]), int(center[1])), max(1, int(radius)))

    def font(self, size) -> pygame.font.Font:
        size = max(1, int(size))
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def draw_text(self, text, pos, size, color):
        font = self.font(size)
        surf = font.render(text, True, color)
        # pos is the baseline origin, as with canvas fillText
        self.screen.blit(surf, (int(pos[0]), int(pos[1] - font.get_ascent())))
