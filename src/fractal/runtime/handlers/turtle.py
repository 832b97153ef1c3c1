"""Frame handlers that draw turtle programs into a double-buffered window."""

from __future__ import annotations

from dataclasses import dataclass, field

from fractal import RenderPhase
from fractal.geometry import Point
from fractal.runtime.handlers.base import WindowHandler, buffer_index
from fractal.runtime.sink import RenderSink
from fractal.turtle.base import StateTurtle, TurtleProgram
from fractal.turtle.chunks import TurtleCollectToNextForwardIterator
from fractal.turtle.state import TurtleState
from fractal.utilities.logging import get_logger

logger = get_logger(__name__)


class SinkTurtle(StateTurtle):
    """Turtle whose visible moves land on a render sink."""

    def __init__(self, state: TurtleState, sink: RenderSink) -> None:
        super().__init__(state)
        self.sink = sink

    def _draw_line(self, start: Point, end: Point) -> None:
        self.sink.draw_line(start, end)


def construct_turtle_window_handler(
    program: TurtleProgram, animate: int
) -> WindowHandler:
    """Pick the static handler for ``animate == 0``, else animate ``animate`` lines per frame."""

    if animate < 0:
        raise ValueError("animate must be >= 0")
    if animate == 0:
        return DoubleBufferedWindowHandler(program)
    return DoubleBufferedAnimatedWindowHandler(program, lines_per_frame=animate)


class DoubleBufferedWindowHandler(WindowHandler):
    """Draw the whole program once into each buffer, then leave both alone until a resize."""

    def __init__(self, program: TurtleProgram) -> None:
        self.program = program
        self.redraw = [True, True]

    def __repr__(self) -> str:
        return f"DoubleBufferedWindowHandler(program={self.program.name}, redraw={self.redraw})"

    def window_resized(self) -> None:
        self.redraw = [True, True]

    def render_frame(self, sink: RenderSink, frame_number: int) -> None:
        index = buffer_index(frame_number)
        if not self.redraw[index]:
            return

        logger.debug("Redrawing buffer %d", index)
        sink.clear()
        turtle = SinkTurtle(TurtleState.initial(), sink)
        for action in self.program.init_turtle():
            turtle.perform(action)
        for action in self.program.turtle_program_iter():
            turtle.perform(action)
        turtle.pen_up()
        logger.debug("Done redrawing buffer %d", index)
        self.redraw[index] = False


@dataclass
class TurtleBufferSlot:
    state: TurtleState = field(default_factory=TurtleState.initial)
    chunks: TurtleCollectToNextForwardIterator = field(
        default_factory=TurtleCollectToNextForwardIterator.null
    )
    chunks_drawn: int = 0

    def draw_moves(self, turtle: SinkTurtle, count: int) -> int:
        """Perform up to ``count`` chunks and return how many there were."""

        drawn = 0
        for _ in range(count):
            chunk = self.chunks.next_chunk()
            if chunk is None:
                break
            for action in chunk:
                turtle.perform(action)
            drawn += 1
        self.chunks_drawn += drawn
        return drawn


class DoubleBufferedAnimatedWindowHandler(WindowHandler):
    """Animate a turtle program a few line segments per frame.

    Each buffer keeps its own turtle and position in the program. The first
    frame only sets up buffer one; the second frame sets up buffer two and
    draws one extra segment so the buffers stay one step apart. From then on
    a buffer catches up on the segments the other buffer drew while it was
    hidden, then draws ``lines_per_frame`` new ones.
    """

    def __init__(self, program: TurtleProgram, lines_per_frame: int = 1) -> None:
        if lines_per_frame < 1:
            raise ValueError("lines_per_frame must be at least 1")
        self.program = program
        self.lines_per_frame = lines_per_frame
        self.phase = RenderPhase.FIRST_FRAME
        self.slots = [TurtleBufferSlot(), TurtleBufferSlot()]

    def __repr__(self) -> str:
        return (
            f"DoubleBufferedAnimatedWindowHandler(program={self.program.name}, "
            f"slots={self.slots}, phase={self.phase})"
        )

    def window_resized(self) -> None:
        logger.debug("Window resized, restarting %s", self.program.name)
        self.phase = RenderPhase.FIRST_FRAME
        self.slots = [TurtleBufferSlot(), TurtleBufferSlot()]

    def render_frame(self, sink: RenderSink, frame_number: int) -> None:
        index = buffer_index(frame_number)

        match self.phase:
            case RenderPhase.FIRST_FRAME:
                self._start_buffer(sink, index)
                self.phase = RenderPhase.SECOND_FRAME
            case RenderPhase.SECOND_FRAME:
                slot, turtle = self._start_buffer(sink, index)
                slot.draw_moves(turtle, 1)
                self.phase = RenderPhase.STEADY_STATE
            case RenderPhase.STEADY_STATE:
                slot = self.slots[index]
                if slot.chunks.exhausted:
                    return
                turtle = SinkTurtle(slot.state, sink)
                catch_up = slot.draw_moves(turtle, self.lines_per_frame)
                advanced = slot.draw_moves(turtle, self.lines_per_frame)
                if catch_up + advanced < 2 * self.lines_per_frame:
                    logger.debug(
                        "Buffer %d finished after %d chunks", index, slot.chunks_drawn
                    )

    def _start_buffer(
        self, sink: RenderSink, index: int
    ) -> tuple[TurtleBufferSlot, SinkTurtle]:
        logger.debug("Starting buffer %d in phase %s", index, self.phase)
        sink.clear()
        slot = TurtleBufferSlot()
        self.slots[index] = slot
        turtle = SinkTurtle(slot.state, sink)
        for action in self.program.init_turtle():
            turtle.perform(action)
        slot.chunks = self.program.collect_to_next_forward()
        return slot, turtle
