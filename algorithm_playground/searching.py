"""
Searching over flat sequences.

Functions:
    linear_search(sequence, target) - First index equal to target, any order
    binary_search(sequence, target) - Some index equal to target, sorted input
"""

from collections.abc import Sequence
from typing import TypeVar

from algorithm_playground.ordering import OrderedT

T = TypeVar("T")


def linear_search(sequence: Sequence[T], target: T) -> int | None:
    """
    Returns the index of the first element equal to target, or None.

    Example:
        >>> linear_search([1, 2, 3, 4, 5], 3)
        2
        >>> linear_search(["apple", "banana"], "cherry") is None
        True
    """
    for index, item in enumerate(sequence):
        if item == target:
            return index
    return None


def binary_search(sequence: Sequence[OrderedT], target: OrderedT) -> int | None:
    """
    Returns an index of an element equal to target in an ascending sequence.

    The closed window [low, high] is halved around its midpoint until the
    probe matches or the window is empty. The first probed index that matches
    is returned, which is not necessarily the lowest one when duplicates are
    present.

    The sequence must be sorted in ascending order. This is not checked: on
    unsorted input the result is unspecified.

    Example:
        >>> binary_search([1, 2, 3, 4, 5], 3)
        2
        >>> binary_search([], 1) is None
        True
    """
    if not sequence:
        return None

    low, high = 0, len(sequence) - 1
    while low <= high:
        mid = (low + high) // 2
        probe = sequence[mid]
        if probe == target:
            return mid
        if probe < target:
            low = mid + 1
        else:
            high = mid - 1
    return None
