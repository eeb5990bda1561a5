import itertools
import typing
from .cursor import IterCursor, EmptyCursor
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence


def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """
    create a sequence over an iterable. every cursor calls iter(data), so
    lists, tuples and ranges replay while one-shot iterators are used up by
    the first cursor.
    """
    from .sequence import Sequence
    return Sequence(lambda: IterCursor(iter(data)))

def from_generator(generator_func: Callable[..., Iterable[T]], *args: Any, **kwargs: Any) -> 'Sequence[T]':
    """create a replayable sequence from a function returning a fresh iterable per cursor"""
    from .sequence import Sequence
    return Sequence(lambda: IterCursor(iter(generator_func(*args, **kwargs))))

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence from range"""
    return from_iterable(range(start, start + count))

def count_from(start: int = 0, step: int = 1) -> 'Sequence[int]':
    """infinite arithmetic sequence start, start + step, ..."""
    return from_generator(itertools.count, start, step)

def iterate(seed: T, func: Callable[[T], T]) -> 'Sequence[T]':
    """infinite sequence seed, func(seed), func(func(seed)), ..."""
    def iterate_values():
        value = seed
        while True:
            yield value
            value = func(value)
    return from_generator(iterate_values)

def repeat(item: T, count: Optional[int] = None) -> 'Sequence[T]':
    """repeat an item 'count' times, or forever"""
    if count is None:
        return from_generator(itertools.repeat, item)
    return from_generator(itertools.repeat, item, max(count, 0))

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Sequence[T]':
    """call generator_func once per pulled element, 'count' times or forever"""
    sequence = from_generator(lambda: iter(generator_func, object()))
    return sequence if count is None else sequence.take(count)

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence(EmptyCursor)

# --- aliases ---
seq = from_iterable
S = from_iterable
