from __future__ import annotations

from collections.abc import Iterable, Iterator

from fractal.turtle.actions import Forward, TurtleAction

ActionChunk = tuple[TurtleAction, ...]


class TurtleCollectToNextForwardIterator(Iterator[ActionChunk]):
    """Group a turtle action stream into chunks that each end with one ``Forward``.

    Whatever follows the last ``Forward`` is emitted once as a final chunk
    without one. After that the iterator stays exhausted.
    """

    def __init__(self, actions: Iterable[TurtleAction] | None) -> None:
        self._actions: Iterator[TurtleAction] | None = (
            iter(actions) if actions is not None else None
        )

    @classmethod
    def null(cls) -> "TurtleCollectToNextForwardIterator":
        return cls(None)

    @property
    def exhausted(self) -> bool:
        return self._actions is None

    def next_chunk(self) -> ActionChunk | None:
        if self._actions is None:
            return None

        chunk: list[TurtleAction] = []
        for action in self._actions:
            chunk.append(action)
            if isinstance(action, Forward):
                return tuple(chunk)

        self._actions = None
        if chunk:
            return tuple(chunk)
        return None

    def __next__(self) -> ActionChunk:
        chunk = self.next_chunk()
        if chunk is None:
            raise StopIteration
        return chunk
