from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np

from fractal.geometry import Point

CHOICE_BATCH_SIZE = 1024


@dataclass(frozen=True)
class AffineTransform:
    """``p -> matrix @ p + offset``"""

    matrix: tuple[tuple[float, float], tuple[float, float]]
    offset: tuple[float, float] = (0.0, 0.0)


class ChaosGame(ABC):
    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def initial_point(self) -> Point:
        """Where the game starts. The starting point itself is never drawn."""

    @abstractmethod
    def choose(self, rng: np.random.Generator, count: int) -> np.ndarray:
        """Return ``count`` transform indices."""

    @abstractmethod
    def apply(self, index: int, point: Point) -> Point:
        """Apply transform ``index`` to ``point``."""

    def next_point(self, point: Point, rng: np.random.Generator) -> Point:
        return self.apply(int(self.choose(rng, 1)[0]), point)


class AffineChaosGame(ChaosGame):
    """Iterated function system made of affine maps picked with fixed weights."""

    def __init__(
        self,
        transforms: Sequence[AffineTransform],
        weights: Sequence[float] | None = None,
        initial: Point = Point(0.0, 0.0),
    ) -> None:
        if not transforms:
            raise ValueError("A chaos game needs at least one transform")
        self.transforms = tuple(transforms)
        self._matrices = np.array([t.matrix for t in transforms], dtype=np.float64)
        self._offsets = np.array([t.offset for t in transforms], dtype=np.float64)

        if weights is None:
            weights = [1.0] * len(transforms)
        if len(weights) != len(transforms):
            raise ValueError("weights and transforms must have the same length")
        probabilities = np.asarray(weights, dtype=np.float64)
        if np.any(probabilities < 0) or probabilities.sum() <= 0:
            raise ValueError("weights must be non-negative and not all zero")
        self.probabilities = probabilities / probabilities.sum()
        self._initial = initial

    def initial_point(self) -> Point:
        return self._initial

    def choose(self, rng: np.random.Generator, count: int) -> np.ndarray:
        return rng.choice(len(self.transforms), size=count, p=self.probabilities)

    def apply(self, index: int, point: Point) -> Point:
        x, y = self._matrices[index] @ np.array([point.x, point.y]) + self._offsets[index]
        return Point(float(x), float(y))


class ChaosGameMoveIterator(Iterator[Point]):
    """Unbounded stream of chaos game points.

    Transform choices are drawn from ``rng`` in batches so the per-point cost
    stays flat.
    """

    def __init__(self, game: ChaosGame, rng: np.random.Generator | None = None) -> None:
        self.game = game
        self._rng = rng if rng is not None else np.random.default_rng()
        self._current = game.initial_point()
        self._choices: list[int] = []

    @classmethod
    def seeded(cls, game: ChaosGame, seed: int | None) -> "ChaosGameMoveIterator":
        return cls(game, np.random.default_rng(seed))

    def __next__(self) -> Point:
        if not self._choices:
            self._choices = self.game.choose(self._rng, CHOICE_BATCH_SIZE).tolist()
            self._choices.reverse()
        self._current = self.game.apply(self._choices.pop(), self._current)
        return self._current
