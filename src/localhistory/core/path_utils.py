"""Path string utilities.

Paths are handled purely as strings so that Windows-style paths
(``C:\\foo\\bar``) and POSIX paths can be compared on any host. Both
``/`` and ``\\`` are treated as folder separators and normalized to ``/``.
"""

from __future__ import annotations

import logging
import os
import posixpath
import re
from collections.abc import Callable

from localhistory.core.errors import require
from localhistory.core.string_utils import StringComparison, starts_with

logger = logging.getLogger(__name__)

SEPARATOR = "/"

# Leading drive letter, e.g. "C:"
_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")


def _split_drive(path: str) -> tuple[str, str]:
    match = _DRIVE_PATTERN.match(path)
    if match:
        return match.group(0), path[match.end() :]
    return "", path


def normalize_path(path: str) -> str:
    """Normalize a path string for prefix comparison.

    Converts backslashes to forward slashes, collapses repeated
    separators, resolves ``.`` and ``..`` segments and removes a trailing
    separator (except on a root). Drive letters and UNC prefixes are kept.

    Args:
        path: Path string to normalize.

    Returns:
        Normalized path string. An empty string is returned unchanged.

    Raises:
        NullInputError: If path is None.

    Example:
        >>> normalize_path("C:\\\\foo\\\\..\\\\bar\\\\")
        'C:/bar'
        >>> normalize_path("//server/share//dir")
        '//server/share/dir'
    """
    require(path, "path")
    unified = path.replace("\\", SEPARATOR)
    if not unified:
        return unified

    drive, rest = _split_drive(unified)
    if not rest:
        return drive
    return drive + posixpath.normpath(rest)


def is_absolute_path(path: str) -> bool:
    """Check if a normalized path is rooted (``/...`` or ``X:...``)."""
    require(path, "path")
    return path.startswith(SEPARATOR) or bool(_DRIVE_PATTERN.match(path))


def get_full_path(path: str, cwd: str | None = None) -> str:
    """Resolve a path to its normalized absolute form.

    Args:
        path: Path string to resolve.
        cwd: Directory that relative paths are resolved against.
            Defaults to the process working directory.

    Returns:
        Normalized absolute path string.

    Raises:
        NullInputError: If path is None.
    """
    normalized = normalize_path(path)
    if is_absolute_path(normalized):
        return normalized
    base = normalize_path(cwd if cwd is not None else os.getcwd())
    return normalize_path(f"{base}{SEPARATOR}{normalized}")


def is_sub_path_of(
    path: str,
    base_dir_path: str,
    *,
    strict_boundary: bool = True,
    normalize: Callable[[str], str] = normalize_path,
    resolve: Callable[[str], str] = get_full_path,
) -> bool:
    """Check if path lies within (or equals) base_dir_path.

    The comparison is case-insensitive and treats ``/`` and ``\\`` as
    separators. path is only normalized, while base_dir_path is normalized
    and then resolved to its absolute form.

    With strict_boundary (the default) the base folder name must match
    exactly: ``C:\\foobar\\file.txt`` is not a sub-path of ``C:\\foo``.
    With strict_boundary=False a plain prefix match is enough, so
    ``C:\\foobarX`` is considered a sub-path of ``C:\\foobar``.

    Args:
        path: Candidate path.
        base_dir_path: Base directory path.
        strict_boundary: Require a folder boundary after the matched prefix.
        normalize: Path normalizer applied to both arguments.
        resolve: Absolute-path resolver applied to the normalized base.

    Returns:
        True if path is a sub-path of base_dir_path.

    Raises:
        NullInputError: If either argument is None.
    """
    require(path, "path")
    require(base_dir_path, "base_dir_path")

    normalized_path = normalize(path)
    normalized_base = resolve(normalize(base_dir_path))

    if not starts_with(
        normalized_path, normalized_base, StringComparison.ORDINAL_IGNORE_CASE
    ):
        return False
    if not strict_boundary:
        return True

    remainder = normalized_path[len(normalized_base) :]
    if (
        not remainder
        or remainder.startswith(SEPARATOR)
        or normalized_base.endswith(SEPARATOR)
    ):
        return True

    logger.debug(
        "Prefix %s matches %s but not on a folder boundary",
        normalized_base,
        normalized_path,
        extra={"base": normalized_base, "path": normalized_path},
    )
    return False
