"""
Ordering contract shared by the searching, sorting and tree modules.

Everything generic in this package is parameterised by `OrderedT`, a type
variable bound to `Comparable`: any type whose instances support `<` between
themselves (ints, floats, strings, tuples, dataclasses with `order=True`...).
Equality always goes through `==`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Comparable(Protocol):
    """Values that can be totally ordered with `<`."""

    def __lt__(self, other: Any, /) -> bool: ...


OrderedT = TypeVar("OrderedT", bound=Comparable)


def is_sorted(sequence: Sequence[OrderedT]) -> bool:
    """
    Returns True if the sequence is non-decreasing.

    Only `<` is used, so equal neighbours are accepted.

    Example:
        >>> is_sorted([1, 2, 2, 3])
        True
        >>> is_sorted(["b", "a"])
        False
        >>> is_sorted([])
        True
    """
    return all(
        not sequence[i + 1] < sequence[i] for i in range(len(sequence) - 1)
    )
