"""Small helpers shared across the package."""

from __future__ import annotations

import os
import random
import re
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

_U256_LIMIT = 1 << 256
_HEX_DIGITS = re.compile(r"\+?[0-9a-fA-F]+")
_MISSING = object()


def u256_to_hex(value: int) -> str:
    """Format a 256-bit unsigned value as ``0x`` followed by at least two hex digits."""
    if not 0 <= value < _U256_LIMIT:
        raise ValueError(f"{value} does not fit in 256 unsigned bits")
    return f"0x{value:02x}"


def remove_0x(s: str) -> str:
    """Strip one leading ``0x`` if present."""
    return s[2:] if s.startswith("0x") else s


def hex_to_int(hex_str: str) -> int:
    """Parse a hexadecimal string, with or without a ``0x`` prefix."""
    digits = remove_0x(hex_str)
    if not _HEX_DIGITS.fullmatch(digits):
        raise ValueError(f"invalid hexadecimal number: {hex_str!r}")
    return int(digits, 16)


def int_to_hex(n: int) -> str:
    """Format a non-negative integer as ``0x`` followed by lower-case hex digits."""
    if n < 0:
        raise ValueError(f"{n} is negative")
    return f"0x{n:x}"


def remove_value(values: list[T], value: T) -> None:
    """Remove ``value`` from ``values``; it must occur exactly once."""
    values.remove(value)
    if value in values:
        raise ValueError(f"{value!r} occurred more than once")


def get_sorted_keys(mapping: Mapping[K, Any]) -> list[K]:
    """Return the keys of ``mapping`` in ascending order."""
    return sorted(mapping)


def max_mapped_value(elements: Iterable[T], key: Callable[[T], V]) -> V | None:
    """Return the largest ``key(e)`` over ``elements``, or None if there are none."""
    return max(map(key, elements), default=None)


def map_values_to_index(values: Iterable[K]) -> dict[K, int]:
    """Map each value to its position; a repeated value keeps its last position."""
    return {value: index for index, value in enumerate(values)}


def iter_int(beginning: int, end: int) -> range:
    """Count from ``beginning`` towards ``end``, excluding ``end``, in either direction."""
    if beginning <= end:
        return range(beginning, end)
    return range(beginning, end, -1)


def get_max_key(mapping: Mapping[K, Any]) -> K | None:
    """Return the largest key of ``mapping``, or None if it is empty."""
    return max(mapping, default=None)


def random_u8(low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``, both within the byte range."""
    if not (0 <= low <= 255 and 0 <= high <= 255):
        raise ValueError("bounds must lie between 0 and 255")
    return random.randrange(low, high)


def hash_set(values: Iterable[Hashable]) -> int:
    """Hash a collection of hashable values regardless of their order."""
    return hash(tuple(sorted(hash(value) for value in values)))


def is_empty_iter(iterable: Iterable[Any]) -> bool:
    """Tell whether ``iterable`` yields nothing (one element may be consumed)."""
    return next(iter(iterable), _MISSING) is _MISSING


def write_file(path: str | os.PathLike[str], data: str) -> None:
    """Write ``data`` to ``path`` as UTF-8 text."""
    Path(path).write_text(data, encoding="utf-8")


def read_file(path: str | os.PathLike[str]) -> str:
    """Read the UTF-8 text of ``path``."""
    return Path(path).read_text(encoding="utf-8")


def file_exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` exists."""
    return os.path.exists(path)


def _walk_entries(path: str) -> Iterator[tuple[str, str]]:
    try:
        entries = sorted(os.scandir(path), key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        yield entry.path, entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _walk_entries(entry.path)


def _walk(root: str) -> Iterator[tuple[str, str]]:
    if not os.path.lexists(root):
        return
    yield root, os.path.basename(os.path.normpath(root))
    if os.path.isdir(root):
        yield from _walk_entries(root)


def find_files(
    directory: str | os.PathLike[str], condition: Callable[[str], bool]
) -> list[str]:
    """List every path under ``directory`` (itself included) whose name satisfies ``condition``."""
    return [path for path, name in _walk(os.fspath(directory)) if condition(name)]


def shift_text(text: str) -> str:
    """Indent every line of ``text`` by four spaces, ending each with a newline."""
    return "".join(f"    {line}\n" for line in text.split("\n"))


def concat_to_str(values: Iterable[Any], sep: str) -> str:
    """Join the string forms of ``values`` with ``sep``."""
    return sep.join(str(value) for value in values)


def rename_keys(
    mapping: Mapping[K, V], key_mapping: Mapping[K, K], delete_missing_keys: bool
) -> dict[K, V]:
    """Return a copy of ``mapping`` with keys renamed through ``key_mapping``.

    Keys absent from ``key_mapping`` are dropped when ``delete_missing_keys``
    is true, and kept unchanged otherwise.
    """
    renamed: dict[K, V] = {}
    for key, value in mapping.items():
        if key in key_mapping:
            renamed[key_mapping[key]] = value
        elif not delete_missing_keys:
            renamed[key] = value
    return renamed


def dedup_all(values: Iterable[T]) -> list[T]:
    """Return the values without repeats, keeping each first occurrence in order."""
    return list(dict.fromkeys(values))