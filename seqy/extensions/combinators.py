from __future__ import annotations
import logging
import operator
import typing
from ..cursor import Cursor
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


# --- combinator cursors ---

class TakeCursor(Cursor[T]):
    """pulls upstream at most `count` times"""

    def __init__(self, source: Cursor[T], count: int):
        super().__init__()
        self._source = source
        self._remaining = max(count, 0)

    def _pull(self) -> Step[T]:
        if self._remaining <= 0:
            return END
        self._remaining -= 1
        return self._source.advance()


class SkipCursor(Cursor[T]):
    """discards `count` elements when constructed, then forwards"""

    def __init__(self, source: Cursor[T], count: int):
        super().__init__()
        self._source = source
        for skipped in range(count):
            if self._source.advance() is END:
                logger.debug("skip(%d) ran past the end after %d elements", count, skipped)
                break

    def _pull(self) -> Step[T]:
        return self._source.advance()


class FilterCursor(Cursor[T]):
    def __init__(self, source: Cursor[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate

    def _pull(self) -> Step[T]:
        while True:
            step = self._source.advance()
            if step is END or self._predicate(step.value):
                return step


class MapCursor(Cursor[U]):
    def __init__(self, source: Cursor[T], selector: Selector[T, U]):
        super().__init__()
        self._source = source
        self._selector = selector

    def _pull(self) -> Step[U]:
        step = self._source.advance()
        if step is END:
            return END
        return Item(self._selector(step.value))


class SkipWhileCursor(Cursor[T]):
    """
    discards elements while the predicate holds, at construction time.
    the first element failing the predicate is consumed and discarded as well,
    so [1, 2, 3, 4, 5] skipping while x < 3 resumes at 4.
    """

    def __init__(self, source: Cursor[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        while True:
            step = self._source.advance()
            if step is END:
                logger.debug("skip_while consumed the whole source")
                break
            if not predicate(step.value):
                break

    def _pull(self) -> Step[T]:
        return self._source.advance()


class TakeWhileCursor(Cursor[T]):
    """
    yields elements while the predicate holds. the first failing element is
    consumed and dropped, and the cursor is exhausted from then on.
    """

    def __init__(self, source: Cursor[T], predicate: Predicate[T]):
        super().__init__()
        self._source = source
        self._predicate = predicate

    def _pull(self) -> Step[T]:
        step = self._source.advance()
        if step is END or not self._predicate(step.value):
            return END
        return step


# --- chainable operations ---

class _CombinatorOperations(Generic[T]):
    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """take at most the first 'count' elements"""
        from ..sequence import Sequence
        return Sequence(lambda: TakeCursor(self.cursor(), count))

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        from ..sequence import Sequence
        return Sequence(lambda: SkipCursor(self.cursor(), count))

    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """keep elements for which the predicate is true"""
        from ..sequence import Sequence
        return Sequence(lambda: FilterCursor(self.cursor(), predicate))

    def reject(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """opposite of filter: drop elements for which the predicate is true"""
        return self.filter(lambda item: not predicate(item))

    def map(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..sequence import Sequence
        return Sequence(lambda: MapCursor(self.cursor(), selector))

    def skip_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """
        skip elements while the predicate is true. the element that ends the
        skipping is dropped too.
        """
        from ..sequence import Sequence
        return Sequence(lambda: SkipWhileCursor(self.cursor(), predicate))

    def take_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """take elements while the predicate is true"""
        from ..sequence import Sequence
        return Sequence(lambda: TakeWhileCursor(self.cursor(), predicate))

    def get(self: 'Sequence[T]', index: Union[int, range, slice]) -> Union[Optional[T], 'Sequence[T]']:
        """
        element at a zero-based index (None when out of range), or the
        sub-sequence covered by a range or slice.
        get(range(1, 3)) is skip(1).take(2).
        """
        if isinstance(index, bool):
            raise TypeError("get() index must be an int, range or slice, not bool")
        if isinstance(index, range):
            if index.step != 1:
                raise ValueError("get() only supports ranges with a step of 1")
            if index.start < 0 or index.stop < 0:
                raise ValueError("get() range bounds must be non-negative")
            return self.skip(index.start).take(index.stop - index.start)
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise ValueError("get() only supports slices with a step of 1")
            start = 0 if index.start is None else operator.index(index.start)
            stop = None if index.stop is None else operator.index(index.stop)
            # counting from the end would need the whole sequence
            if start < 0 or (stop is not None and stop < 0):
                raise ValueError("get() slice bounds must be non-negative")
            if stop is None:
                return self.skip(start)
            return self.skip(start).take(stop - start)
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeError(f"get() index must be an int, range or slice, not {type(index).__name__}") from None
        if position < 0:
            return None
        step = SkipCursor(self.cursor(), position).advance()
        return None if step is END else step.value

    # linq-style aliases
    where = filter
    select = map
