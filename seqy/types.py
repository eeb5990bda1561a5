from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]


class Item(Generic[T]):
    """a single element produced by one cursor advance"""

    __slots__ = ('value',)

    def __init__(self, value: T):
        self.value = value

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Item) and self.value == other.value

    __hash__ = None

    def __repr__(self) -> str:
        return f"Item({self.value!r})"


class _End:
    """marker returned by an exhausted cursor. falsy, one instance only."""

    _instance: Optional['_End'] = None

    def __new__(cls) -> '_End':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "END"


END = _End()

# result of Cursor.advance(): element present or exhausted
Step = Union[Item[T], _End]
