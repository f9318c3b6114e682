"""
In-place comparison sorts.

Sorts:
    merge_sort(sequence)     - Stable, O(n log n), O(n) auxiliary buffers
    heap_sort(sequence)      - O(n log n), O(1) auxiliary space
    quick_sort(sequence)     - Middle-element pivot, O(n log n) average, O(n²) worst
    insertion_sort(sequence) - Stable, O(n²), O(n) on nearly sorted input
    selection_sort(sequence) - O(n²), minimal number of swaps
    bubble_sort(sequence)    - Stable, O(n²), stops after a pass without swaps

Dispatch:
    SortAlgorithm            - Enum naming the six sorts
    sort_with(sequence, algorithm) - Sort with an algorithm chosen by name

Every sort mutates the caller's sequence, returns None, and only uses `<`
to compare elements.
"""

import logging
from collections.abc import Callable, MutableSequence
from enum import Enum

from algorithm_playground.ordering import OrderedT

logger = logging.getLogger(__name__)


# =============================================================================
# Merge sort
# =============================================================================


def merge_sort(sequence: MutableSequence[OrderedT]) -> None:
    """
    Sorts by recursively sorting copies of both halves and merging them back.

    On ties the left half wins, so equal elements keep their input order.

    Example:
        >>> values = [3, 2, 1]
        >>> merge_sort(values)
        >>> values
        [1, 2, 3]
    """
    length = len(sequence)
    if length <= 1:
        return

    mid = length // 2
    left = list(sequence[:mid])
    right = list(sequence[mid:])
    merge_sort(left)
    merge_sort(right)

    i = j = k = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            sequence[k] = right[j]
            j += 1
        else:
            sequence[k] = left[i]
            i += 1
        k += 1

    # At most one of the two tails is non-empty
    for value in left[i:]:
        sequence[k] = value
        k += 1
    for value in right[j:]:
        sequence[k] = value
        k += 1


# =============================================================================
# Heap sort
# =============================================================================


def _sift_down(sequence: MutableSequence[OrderedT], size: int, root: int) -> None:
    """Restores the max-heap property below root within sequence[:size]."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1

        if left < size and sequence[largest] < sequence[left]:
            largest = left
        if right < size and sequence[largest] < sequence[right]:
            largest = right
        if largest == root:
            return

        sequence[root], sequence[largest] = sequence[largest], sequence[root]
        root = largest


def heap_sort(sequence: MutableSequence[OrderedT]) -> None:
    """
    Builds a max-heap in place, then repeatedly moves the root to the end
    of the shrinking unsorted prefix.

    Example:
        >>> values = ["c", "b", "a"]
        >>> heap_sort(values)
        >>> values
        ['a', 'b', 'c']
    """
    length = len(sequence)
    if length <= 1:
        return

    for parent in range(length // 2 - 1, -1, -1):
        _sift_down(sequence, length, parent)

    for end in range(length - 1, 0, -1):
        sequence[0], sequence[end] = sequence[end], sequence[0]
        _sift_down(sequence, end, 0)


# =============================================================================
# Quick sort
# =============================================================================


def _partition(sequence: MutableSequence[OrderedT], low: int, high: int) -> int:
    """
    Partitions sequence[low:high] around its middle element.

    The pivot is parked at the last position while elements not greater than
    it are swapped into a growing prefix, then it is swapped right after that
    prefix. Returns the settled pivot index.
    """
    last = high - 1
    middle = low + (high - low) // 2
    sequence[middle], sequence[last] = sequence[last], sequence[middle]
    pivot = sequence[last]

    boundary = low
    for j in range(low, last):
        if not pivot < sequence[j]:
            sequence[boundary], sequence[j] = sequence[j], sequence[boundary]
            boundary += 1

    sequence[boundary], sequence[last] = sequence[last], sequence[boundary]
    return boundary


def _quick_sort_range(
    sequence: MutableSequence[OrderedT], low: int, high: int
) -> None:
    # Recurse into the smaller side, loop on the larger one: depth stays O(log n)
    while high - low > 1:
        pivot = _partition(sequence, low, high)
        if pivot - low < high - pivot - 1:
            _quick_sort_range(sequence, low, pivot)
            low = pivot + 1
        else:
            _quick_sort_range(sequence, pivot + 1, high)
            high = pivot


def quick_sort(sequence: MutableSequence[OrderedT]) -> None:
    """
    Sorts by partitioning around the middle element and sorting both sides.

    No randomised or median-of-three pivot: adversarial inputs hit the
    quadratic worst case.

    Example:
        >>> values = [5, 1, 4, 2, 3]
        >>> quick_sort(values)
        >>> values
        [1, 2, 3, 4, 5]
    """
    _quick_sort_range(sequence, 0, len(sequence))


# =============================================================================
# Quadratic sorts
# =============================================================================


def insertion_sort(sequence: MutableSequence[OrderedT]) -> None:
    """Swaps each element backward while it is smaller than its left neighbour."""
    for i in range(1, len(sequence)):
        j = i
        while j > 0 and sequence[j] < sequence[j - 1]:
            sequence[j - 1], sequence[j] = sequence[j], sequence[j - 1]
            j -= 1


def selection_sort(sequence: MutableSequence[OrderedT]) -> None:
    """Swaps the leftmost minimum of the unsorted suffix into each position."""
    length = len(sequence)
    for i in range(length):
        min_index = i
        for j in range(i + 1, length):
            if sequence[j] < sequence[min_index]:
                min_index = j
        if min_index != i:
            sequence[i], sequence[min_index] = sequence[min_index], sequence[i]


def bubble_sort(sequence: MutableSequence[OrderedT]) -> None:
    """Bubbles the largest remaining element to the end of each pass."""
    length = len(sequence)
    for i in range(length):
        swapped = False
        for j in range(length - 1 - i):
            if sequence[j + 1] < sequence[j]:
                sequence[j], sequence[j + 1] = sequence[j + 1], sequence[j]
                swapped = True
        if not swapped:
            return


# =============================================================================
# Dispatch
# =============================================================================


class SortAlgorithm(Enum):
    """Available sorting algorithms."""

    MERGE = "merge"
    HEAP = "heap"
    QUICK = "quick"
    INSERTION = "insertion"
    SELECTION = "selection"
    BUBBLE = "bubble"

    @property
    def sort(self) -> Callable[[MutableSequence], None]:
        return _SORTS[self]

    @property
    def is_stable(self) -> bool:
        """Whether equal elements keep their relative input order."""
        return self in _STABLE


_SORTS: dict[SortAlgorithm, Callable[[MutableSequence], None]] = {
    SortAlgorithm.MERGE: merge_sort,
    SortAlgorithm.HEAP: heap_sort,
    SortAlgorithm.QUICK: quick_sort,
    SortAlgorithm.INSERTION: insertion_sort,
    SortAlgorithm.SELECTION: selection_sort,
    SortAlgorithm.BUBBLE: bubble_sort,
}

_STABLE = frozenset({SortAlgorithm.MERGE, SortAlgorithm.INSERTION, SortAlgorithm.BUBBLE})


def sort_with(
    sequence: MutableSequence[OrderedT], algorithm: SortAlgorithm | str
) -> None:
    """
    Sorts sequence in place with the given algorithm.

    Args:
        sequence: Mutable sequence to sort.
        algorithm: A SortAlgorithm or its name, e.g. "quick".

    Raises:
        ValueError: If the name does not match any algorithm.
    """
    if not isinstance(algorithm, SortAlgorithm):
        try:
            algorithm = SortAlgorithm(algorithm)
        except ValueError:
            choices = ", ".join(a.value for a in SortAlgorithm)
            raise ValueError(
                f"Unknown sort algorithm {algorithm!r}, expected one of: {choices}"
            ) from None

    logger.debug(f"Sorting {len(sequence)} elements with {algorithm.value} sort")
    algorithm.sort(sequence)
