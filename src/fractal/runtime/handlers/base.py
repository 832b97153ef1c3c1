from __future__ import annotations

from abc import ABC, abstractmethod

from fractal.runtime.sink import RenderSink


class WindowHandler(ABC):
    """Draws one buffer per displayed frame; buffers alternate with frame parity."""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def render_frame(self, sink: RenderSink, frame_number: int) -> None: ...

    @abstractmethod
    def window_resized(self) -> None: ...


def buffer_index(frame_number: int) -> int:
    return frame_number % 2
