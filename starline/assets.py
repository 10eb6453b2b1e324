"""
Image loading without blocking the frame loop.

Handles are returned immediately and filled in by AssetLoader.poll(), which
decodes a bounded number of images per call. A handle is "complete" once it
has settled either way; only "ok" handles carry pixels.
"""
import logging
from pathlib import Path
from typing import Callable, List, Optional

import pygame

from starline import settings
from starline.errors import AssetLoadError

logger = logging.getLogger(__name__)


class ImageHandle:
    def __init__(self, path):
        self.path = path
        self.surface: Optional[pygame.Surface] = None
        self.error: Optional[Exception] = None
        self.complete = False

    @property
    def ok(self):
        return self.complete and self.surface is not None

    @property
    def width(self):
        return self.surface.get_width() if self.surface is not None else 0

    @property
    def height(self):
        return self.surface.get_height() if self.surface is not None else 0

    def __repr__(self):
        state = "ok" if self.ok else ("failed" if self.complete else "pending")
        return f"<ImageHandle {self.path} {state}>"


def load_surface(path) -> pygame.Surface:
    img = pygame.image.load(str(path))
    # convert() needs a display mode; tests load images without a window
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        img = img.convert_alpha() if img.get_alpha() is not None else img.convert()
    if img.get_alpha() is None:
        img.set_colorkey(settings.COLORKEY)
    return img


class AssetLoader:
    def __init__(self, base_dir=None, loader: Callable = load_surface):
        self.base_dir = Path(base_dir) if base_dir is not None else Path(settings.ASSET_DIR)
        self._load = loader
        self._handles: List[ImageHandle] = []
        self._pending: List[ImageHandle] = []
        self._callbacks: List[Callable] = []
        self._notified = False

    def resolve(self, path) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self.base_dir / p

    def request(self, path) -> ImageHandle:
        logger.info(f"Loading {path}")
        handle = ImageHandle(self.resolve(path))
        self._handles.append(handle)
        self._pending.append(handle)
        self._notified = False
        return handle

    def poll(self, budget: int = settings.LOAD_BUDGET) -> bool:
        """Decode up to budget pending images. Returns done()."""
        while self._pending and budget > 0:
            handle = self._pending.pop(0)
            budget -= 1
            try:
                handle.surface = self._load(handle.path)
            except (pygame.error, OSError) as e:
                handle.error = e
                logger.error(f"Could not load {handle.path}: {e}")
            handle.complete = True
        if self.done() and not self._notified:
            self._notified = True
            self._fire_callbacks()
        return self.done()

    def done(self) -> bool:
        return not self._pending

    @property
    def failures(self) -> List[ImageHandle]:
        return [h for h in self._handles if h.complete and not h.ok]

    def result(self) -> List[ImageHandle]:
        if not self.done():
            raise RuntimeError("assets are still loading")
        failed = self.failures
        if failed:
            raise AssetLoadError([h.path for h in failed])
        return list(self._handles)

    def add_done_callback(self, callback: Callable[["AssetLoader"], None]):
        self._callbacks.append(callback)
        if self._notified:
            callback(self)

    def _fire_callbacks(self):
        logger.info("Loaded" if not self.failures else f"Loaded with {len(self.failures)} failure(s)")
        for callback in self._callbacks:
            callback(self)
