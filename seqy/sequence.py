from __future__ import annotations

from .cursor import Cursor
from .types import *

# --- chainable combinators ---
from .extensions.combinators import _CombinatorOperations

# --- eager terminals and accessor ---
from .extensions.terminal import _TerminalOperations, TerminalAccessor


class Sequence(
    _CombinatorOperations[T],
    _TerminalOperations[T]
):
    """
    a lazy, possibly infinite sequence. it stores no elements, only a factory
    that opens a fresh cursor on demand. combinators wrap that factory and
    return new sequences; nothing is pulled until a terminal runs.
    """

    def __init__(self, cursor_factory: Callable[[], Cursor[T]]):
        self._cursor_factory = cursor_factory
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def cursor(self) -> Cursor[T]:
        """open a new, independent cursor positioned before the first element"""
        return self._cursor_factory()

    def __iter__(self) -> Iterator[T]:
        return self.cursor()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {id(self):#x}>"
