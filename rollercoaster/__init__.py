"""
     _ __ ___ | | | ___ _ __ ___ ___   __ _ ___| |_ ___ _ __
    | '__/ _ \| | |/ _ \ '__/ __/ _ \ / _` / __| __/ _ \ '__|
    | | | (_) | | |  __/ | | (_| (_) | (_| \__ \ ||  __/ |
    |_|  \___/|_|_|\___|_|  \___\___/ \__,_|___/\__\___|_|
"""

# expose the main classes
from .coaster import Coaster

# expose the combinators
from .extensions.memory import Memory
from .extensions.grouping import GroupBy
from .extensions.unique import Unique
from .extensions.concat import Concat

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    coaster,
    C,
    # free-function forms
    memory,
    group_by,
    unique,
    unique_by,
    append,
    prepend
)

# expose supporting data classes
from .types import (
    Group,
    ConcatSide
)

# define what `import *` does
__all__ = [
    "Coaster",
    "Memory",
    "GroupBy",
    "Unique",
    "Concat",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "coaster",
    "C",
    "memory",
    "group_by",
    "unique",
    "unique_by",
    "append",
    "prepend",
    "Group",
    "ConcatSide"
]
