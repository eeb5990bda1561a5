r"""
'    ______ ____  ____  __  __
'   / ___// __ \/ __ \/ / / /
'   \__ \/ ___/ /_/ / /_/ /
'  ___/ /\___/\__, /\__, /
' /____/        /_/ /____/
"""
import logging

# expose the main classes
from .sequence import Sequence
from .cursor import Cursor, IterCursor, EmptyCursor

# expose the factory functions
from .factories import (
    from_iterable,
    from_generator,
    from_range,
    count_from,
    iterate,
    repeat,
    generate,
    empty,
    seq,
    S
)

# expose the pull protocol and errors
from .types import Item, END, Step
from .errors import SequenceError, EmptySequenceError

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sequence",
    "Cursor",
    "IterCursor",
    "EmptyCursor",
    "from_iterable",
    "from_generator",
    "from_range",
    "count_from",
    "iterate",
    "repeat",
    "generate",
    "empty",
    "seq",
    "S",
    "Item",
    "END",
    "Step",
    "SequenceError",
    "EmptySequenceError"
]
