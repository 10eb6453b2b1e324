"""
Host contracts: the viewport snapshot, the drawing surface protocol and the
frame scheduler. Nothing here depends on pygame.
"""
from dataclasses import dataclass
from typing import Callable, ContextManager, List, Protocol, Sequence, Tuple

from starline import settings

Color = Tuple[int, int, int]
RectTuple = Tuple[float, float, float, float]


@dataclass(frozen=True)
class ViewportConfig:
    width: int
    height: int

    @property
    def canvas_size(self) -> Tuple[int, int]:
        mx, my = settings.CANVAS_MARGIN
        return (self.width - mx, self.height - my)


class HostSurface(Protocol):
    def viewport(self) -> ViewportConfig: ...
    def resize(self, width: int, height: int) -> None: ...
    def fill_rect(self, rect: RectTuple, color: Color) -> None: ...
    def stroke_rect(self, rect: RectTuple, color: Color, width: int = 1) -> None: ...
    def draw_image(self, image, rect: RectTuple) -> None: ...
    def fill_polygon(self, points: Sequence[Tuple[float, float]], color: Color) -> None: ...
    def fill_circle(self, center: Tuple[float, float], radius: float, color: Color) -> None: ...
    def draw_text(self, text: str, pos: Tuple[float, float], size: float, color: Color) -> None: ...
    def rotated(self, degrees: float) -> ContextManager[None]: ...


FrameCallback = Callable[[float], None]


class FrameScheduler:
    """Runs callbacks once on the next frame, like requestAnimationFrame."""

    def __init__(self):
        self._queue: List[FrameCallback] = []

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request(self, callback: FrameCallback) -> None:
        self._queue.append(callback)

    def dispatch(self, now_ms: float) -> int:
        # callbacks requested while dispatching wait for the next frame
        batch, self._queue = self._queue, []
        for callback in batch:
            callback(now_ms)
        return len(batch)
