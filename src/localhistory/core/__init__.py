"""Core utilities package.

This package contains pure string and path functions with no external
dependencies. They are used to compare, normalize and extend the path and
text strings that identify files in the history store.
"""

from localhistory.core.errors import (
    ArgumentError,
    InvalidArgumentError,
    NullInputError,
)
from localhistory.core.path_utils import (
    get_full_path,
    is_absolute_path,
    is_sub_path_of,
    normalize_path,
)
from localhistory.core.string_utils import (
    StringComparison,
    index_of,
    replace_with_comparison,
    right,
    starts_with,
    with_ending,
)

__all__ = [
    # errors
    "ArgumentError",
    "InvalidArgumentError",
    "NullInputError",
    # path_utils
    "get_full_path",
    "is_absolute_path",
    "is_sub_path_of",
    "normalize_path",
    # string_utils
    "StringComparison",
    "index_of",
    "replace_with_comparison",
    "right",
    "starts_with",
    "with_ending",
]
