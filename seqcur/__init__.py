r"""
 ___  ___  __ _  ___ _   _ _ __
/ __|/ _ \/ _` |/ __| | | | '__|
\__ \  __/ (_| | (__| |_| | |
|___/\___|\__, |\___|\__,_|_|
             |_|
"""
import logging

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# expose the contract
from .cursor import ICursor, Cursor
from .types import (
    Tier,
    SequenceError,
    ExhaustedError,
    CapabilityError,
    IncompatibleCursorError
)
from .config import Settings, settings, configure

# expose the sequences and adaptors
from .extensions.pointer import Ptr, empty
from .extensions.bounded import Interval, Counted, array, make_interval, take
from .extensions.numeric import Iota, Power, Factorial, Choose, Constant, once
from .extensions.structural import Concatenate2, concatenate, Merge2, merge, Cycle, cycle
from .extensions.functional import Apply, Filter, Until, Fold, Delta, uptick, downtick
from .extensions.inserters import BackInserter, FrontInserter, back_inserter, front_inserter

# expose the algorithms
from .extensions.algorithms import (
    compare,
    equal,
    equal_list,
    starts_with,
    copy,
    copy_n,
    back,
    end,
    size,
    drop,
    total,
    product
)

# expose the factory functions
from .factories import (
    IterCursor,
    Generate,
    from_iterable,
    from_list,
    from_range,
    repeat,
    generate,
    seq,
    S
)

# define what `import *` does
__all__ = [
    "ICursor", "Cursor", "Tier",
    "SequenceError", "ExhaustedError", "CapabilityError", "IncompatibleCursorError",
    "Settings", "settings", "configure",
    "Ptr", "empty",
    "Interval", "Counted", "array", "make_interval", "take",
    "Iota", "Power", "Factorial", "Choose", "Constant", "once",
    "Concatenate2", "concatenate", "Merge2", "merge", "Cycle", "cycle",
    "Apply", "Filter", "Until", "Fold", "Delta", "uptick", "downtick",
    "BackInserter", "FrontInserter", "back_inserter", "front_inserter",
    "compare", "equal", "equal_list", "starts_with", "copy", "copy_n",
    "back", "end", "size", "drop", "total", "product",
    "IterCursor", "Generate",
    "from_iterable", "from_list", "from_range", "repeat", "generate", "seq", "S"
]
