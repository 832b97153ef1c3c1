import os

from fractal.utilities.env.enums import RenderMode
from fractal.utilities.env.parsing import _env_float, _env_int

DEFAULT_MAX_FPS = 60
DEFAULT_WINDOW_WIDTH = 800
DEFAULT_WINDOW_HEIGHT = 800
DEFAULT_LINES_PER_FRAME = 1
DEFAULT_DOT_RADIUS = 0.5
DEFAULT_RENDER_MODE = RenderMode.ANIMATED


class RenderingConfiguration:
    @classmethod
    def max_fps(cls) -> int:
        return _env_int("FRACTAL_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def window_size(cls) -> tuple[int, int]:
        width = _env_int(
            "FRACTAL_WINDOW_WIDTH", default=DEFAULT_WINDOW_WIDTH, minimum=1
        )
        height = _env_int(
            "FRACTAL_WINDOW_HEIGHT", default=DEFAULT_WINDOW_HEIGHT, minimum=1
        )
        return width, height

    @classmethod
    def lines_per_frame(cls) -> int:
        return _env_int(
            "FRACTAL_LINES_PER_FRAME", default=DEFAULT_LINES_PER_FRAME, minimum=1
        )

    @classmethod
    def dot_radius(cls) -> float:
        return _env_float("FRACTAL_DOT_RADIUS", default=DEFAULT_DOT_RADIUS, minimum=0.0)

    @classmethod
    def render_mode(cls) -> RenderMode:
        mode = os.environ.get(
            "FRACTAL_RENDER_MODE", DEFAULT_RENDER_MODE.value
        ).strip().lower()
        try:
            return RenderMode(mode)
        except ValueError as exc:
            raise ValueError(
                "FRACTAL_RENDER_MODE must be 'animated' or 'static'"
            ) from exc
