"""Frame handler that plays a chaos game into a double-buffered window."""

from __future__ import annotations

from fractal import RenderPhase
from fractal.chaosgame.base import ChaosGame, ChaosGameMoveIterator
from fractal.geometry import Point
from fractal.runtime.handlers.base import WindowHandler
from fractal.runtime.sink import RenderSink
from fractal.utilities.env.rendering import DEFAULT_DOT_RADIUS
from fractal.utilities.logging import get_logger

logger = get_logger(__name__)


class ChaosGameWindowHandler(WindowHandler):
    """Plot ``dots_per_frame`` new points per frame.

    The points drawn on one frame are kept in ``last_moves`` so the next frame,
    which lands on the other buffer, can draw them too before adding its own.
    Both buffers read the same seeded point stream.
    """

    def __init__(
        self,
        game: ChaosGame,
        dots_per_frame: int,
        *,
        seed: int | None = None,
        dot_radius: float = DEFAULT_DOT_RADIUS,
    ) -> None:
        if dots_per_frame < 1:
            raise ValueError("dots_per_frame must be at least 1")
        self.game = game
        self.dots_per_frame = dots_per_frame
        self.seed = seed
        self.dot_radius = dot_radius
        self.phase = RenderPhase.FIRST_FRAME
        self.moves: ChaosGameMoveIterator | None = None
        self.last_moves: list[Point] = []

    def __repr__(self) -> str:
        return (
            f"ChaosGameWindowHandler(game={self.game.name}, "
            f"dots_per_frame={self.dots_per_frame}, phase={self.phase})"
        )

    def window_resized(self) -> None:
        logger.debug("Window resized, restarting %s", self.game.name)
        self.phase = RenderPhase.FIRST_FRAME
        self.moves = None
        self.last_moves = []

    def render_frame(self, sink: RenderSink, frame_number: int) -> None:
        match self.phase:
            case RenderPhase.FIRST_FRAME:
                sink.clear()
                self.moves = ChaosGameMoveIterator.seeded(self.game, self.seed)
                self._draw_new_moves(sink)
                self.phase = RenderPhase.SECOND_FRAME
            case RenderPhase.SECOND_FRAME:
                sink.clear()
                self._catch_up(sink)
                self._draw_new_moves(sink)
                self.phase = RenderPhase.STEADY_STATE
            case RenderPhase.STEADY_STATE:
                self._catch_up(sink)
                self._draw_new_moves(sink)

    def _catch_up(self, sink: RenderSink) -> None:
        for point in self.last_moves:
            sink.draw_dot(point, self.dot_radius)
        self.last_moves = []

    def _draw_new_moves(self, sink: RenderSink) -> None:
        assert self.moves is not None
        for _ in range(self.dots_per_frame):
            point = next(self.moves)
            sink.draw_dot(point, self.dot_radius)
            self.last_moves.append(point)
