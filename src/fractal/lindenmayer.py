"""Lindenmayer systems and the turtle programs that draw them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

from fractal.geometry import Point
from fractal.turtle.actions import (PenDown, PenUp, SetHeading, SetPosition,
                                    TurtleAction)
from fractal.turtle.base import TurtleProgram
from fractal.utilities.logging import get_logger

logger = get_logger(__name__)

SymbolT = TypeVar("SymbolT")


class LindenmayerSystem(ABC, Generic[SymbolT]):
    """A rewriting grammar over a closed alphabet (usually an ``Enum``).

    Subclasses provide the initial sequence and a total rewrite rule; every
    symbol must map to something, even if only to itself.
    """

    @abstractmethod
    def initial(self) -> list[SymbolT]:
        """Return the sequence for iteration 0."""

    @abstractmethod
    def apply_rule(self, symbol: SymbolT) -> list[SymbolT]:
        """Return the replacement for ``symbol``."""

    def generate(self, iteration: int) -> list[SymbolT]:
        """Return the full sequence for ``iteration``.

        Starts from ``initial()`` and rewrites every symbol ``iteration`` times.
        Each generation is a new list.
        """

        if iteration < 0:
            raise ValueError("iteration must be >= 0")

        sequence = list(self.initial())
        for _ in range(iteration):
            expanded: list[SymbolT] = []
            for symbol in sequence:
                expanded.extend(self.apply_rule(symbol))
            sequence = expanded
        return sequence

    def iter_generation(self, iteration: int) -> Iterator[SymbolT]:
        """Yield the symbols of ``generate(iteration)`` without building the sequence.

        Uses an explicit stack of (sequence, index, depth) frames, so only one
        rewrite per depth is alive at a time.
        """

        if iteration < 0:
            raise ValueError("iteration must be >= 0")

        stack: list[tuple[list[SymbolT], int, int]] = [(list(self.initial()), 0, 0)]
        while stack:
            sequence, index, depth = stack.pop()
            if index >= len(sequence):
                continue

            symbol = sequence[index]
            stack.append((sequence, index + 1, depth))
            if depth < iteration:
                # Replacement goes on top so it is fully walked before the continuation.
                stack.append((self.apply_rule(symbol), 0, depth + 1))
            else:
                yield symbol


class LindenmayerSystemTurtleProgram(LindenmayerSystem[SymbolT], TurtleProgram):
    """Grammar-backed turtle program.

    Subclasses describe the grammar and how each symbol moves the turtle; this
    class turns a generation into a stream of turtle actions.
    """

    def __init__(self, iteration: int) -> None:
        self.iteration = iteration

    @abstractmethod
    def initialize_turtle(self) -> list[TurtleAction]:
        """Return the pose setup, applied after the turtle is placed at the origin."""

    @abstractmethod
    def interpret_symbol(self, symbol: SymbolT) -> list[TurtleAction]:
        """Translate one symbol into zero or more turtle actions."""

    def init_turtle(self) -> list[TurtleAction]:
        return [
            PenUp(),
            SetPosition(Point(0.0, 0.0)),
            SetHeading(0.0),
            *self.initialize_turtle(),
            PenDown(),
        ]

    def turtle_program_iter(self) -> Iterator[TurtleAction]:
        logger.debug("Streaming %s iteration %d", self.name, self.iteration)
        for symbol in self.iter_generation(self.iteration):
            yield from self.interpret_symbol(symbol)
        yield PenUp()
