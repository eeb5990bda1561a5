from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

logger = logging.getLogger(__name__)


class Cursor(ABC, Generic[T]):
    """
    single-use, forward-only position within a sequence.

    each advance() consumes exactly one element or reports END. once END has
    been returned the cursor stays exhausted and never touches its upstream
    again. a cursor belongs to the one consumer that opened it: sharing it
    between consumers (or threads) is not supported.
    """

    def __init__(self):
        self._exhausted = False

    @abstractmethod
    def _pull(self) -> Step[T]:
        """produce the next step. only called while not exhausted."""
        pass

    def advance(self) -> Step[T]:
        if self._exhausted:
            return END
        step = self._pull()
        if step is END:
            self._exhausted = True
            logger.debug("%s exhausted", type(self).__name__)
        return step

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        step = self.advance()
        if step is END:
            raise StopIteration
        return step.value


class IterCursor(Cursor[T]):
    """leaf cursor over a native python iterator"""

    def __init__(self, iterator: Iterator[T]):
        super().__init__()
        self._iterator = iterator

    def _pull(self) -> Step[T]:
        try:
            value = next(self._iterator)
        except StopIteration:
            # drop the iterator so a finished generator can be collected
            self._iterator = None
            return END
        return Item(value)


class EmptyCursor(Cursor[Any]):
    def _pull(self) -> Step[Any]:
        return END
