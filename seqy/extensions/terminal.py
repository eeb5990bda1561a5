from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..errors import EmptySequenceError
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

_NO_SEED = object()


class _TerminalOperations(Generic[T]):
    """
    eager operations. each one opens a fresh cursor and pulls only as far as
    it needs to. draining terminals (to_list, count, reduce) never finish on an
    infinite sequence, so put a take() in front of those.
    """

    def first(self: 'Sequence[T]', count: Optional[int] = None) -> Union[Optional[T], List[T]]:
        """first element (None when empty), or a list of the first 'count' elements"""
        if count is not None:
            return self.take(count).to_list()
        step = self.cursor().advance()
        return None if step is END else step.value

    def to_list(self: 'Sequence[T]') -> List[T]:
        return list(self.cursor())

    def index_of(self: 'Sequence[T]', item: Any) -> Optional[int]:
        """zero-based position of the first element equal to item, or None"""
        for index, current in enumerate(self.cursor()):
            if current == item:
                return index
        return None

    def contains(self: 'Sequence[T]', item: Any) -> bool:
        return any(current == item for current in self.cursor())

    def any(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies the predicate (or if there is any element at all)"""
        if predicate is None:
            return self.cursor().advance() is not END
        return any(predicate(x) for x in self.cursor())

    def all(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        return all(predicate(x) for x in self.cursor())

    def count(self: 'Sequence[T]') -> int:
        return sum(1 for _ in self.cursor())

    def reduce(self: 'Sequence[T]', accumulator: Accumulator[U, T], seed: U = _NO_SEED) -> U:
        """
        left fold in source order. without a seed the first element is used
        as the seed, and an empty sequence raises EmptySequenceError.
        """
        cursor = self.cursor()
        if seed is _NO_SEED:
            step = cursor.advance()
            if step is END:
                raise EmptySequenceError("cannot reduce an empty sequence without a seed")
            seed = step.value
        return reduce(accumulator, cursor, seed)

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)


class TerminalAccessor(Generic[T]):
    """realizes a sequence into concrete collections: seq.to.list(), seq.to.array(), ..."""

    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        return self._sequence.to_list()

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._sequence.cursor())

    def set(self) -> Set[T]:
        return set(self._sequence.cursor())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence.cursor()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence.to_list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence.to_list())

    def frame(self) -> pd.DataFrame:
        """convert to pandas dataframe (elements are rows)"""
        return pd.DataFrame(self._sequence.to_list())
