"""In-place sorting algorithms over mutable integer sequences.

Every sort function takes a mutable sequence, rearranges it into
non-decreasing order and returns None, like ``list.sort``. Use ``sort`` for
a sorted copy instead.
"""

from typing import Callable, MutableSequence, Sequence

from .measurement import Algorithm


def insertion_sort(seq: MutableSequence[int]) -> None:
    """Shift-and-insert sort. O(n) on already sorted input."""
    for i in range(1, len(seq)):
        current = seq[i]
        j = i - 1
        while j >= 0 and seq[j] > current:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = current


def shell_sort(seq: MutableSequence[int]) -> None:
    """Shell sort with the halving gap sequence n//2, n//4, ..., 1."""
    gap = len(seq) // 2
    while gap > 0:
        for i in range(gap, len(seq)):
            current = seq[i]
            j = i
            while j >= gap and seq[j - gap] > current:
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = current
        gap //= 2


def merge_sort(seq: MutableSequence[int]) -> None:
    """Top-down merge sort.

    One auxiliary buffer of len(seq) is allocated per call and shared by all
    merges of that call.
    """
    n = len(seq)
    if n < 2:
        return
    buffer = [0] * n
    _merge_sort(seq, buffer, 0, n - 1)


def _merge_sort(seq, buffer, lo, hi):
    if lo >= hi:
        return
    mid = lo + (hi - lo) // 2
    _merge_sort(seq, buffer, lo, mid)
    _merge_sort(seq, buffer, mid + 1, hi)
    _merge(seq, buffer, lo, mid, hi)


def _merge(seq, buffer, lo, mid, hi):
    """Merge the sorted runs [lo, mid] and [mid + 1, hi]."""
    buffer[lo:hi + 1] = seq[lo:hi + 1]
    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            seq[k] = buffer[j]
            j += 1
        elif j > hi:
            seq[k] = buffer[i]
            i += 1
        elif buffer[j] < buffer[i]:
            seq[k] = buffer[j]
            j += 1
        else:
            seq[k] = buffer[i]
            i += 1


def quick_sort(seq: MutableSequence[int]) -> None:
    """Quick sort with a median-of-three pivot and Hoare partitioning.

    Taking the median of the first, middle and last elements keeps sorted
    and reverse-sorted inputs (common for CSV columns) at O(n log n), and
    Hoare partitioning splits runs of equal values evenly. Recursion goes
    into the smaller partition only, so stack depth stays O(log n).
    """
    if len(seq) < 2:
        return
    _quick_sort(seq, 0, len(seq) - 1)


def _quick_sort(seq, lo, hi):
    while lo < hi:
        split = _partition(seq, lo, hi)
        if split - lo < hi - split:
            _quick_sort(seq, lo, split)
            lo = split + 1
        else:
            _quick_sort(seq, split + 1, hi)
            hi = split


def _partition(seq, lo, hi):
    """Hoare partition of [lo, hi].

    Returns an index ``split`` with lo <= split < hi such that every element
    of [lo, split] is <= every element of [split + 1, hi].
    """
    mid = lo + (hi - lo) // 2
    if seq[mid] < seq[lo]:
        seq[lo], seq[mid] = seq[mid], seq[lo]
    if seq[hi] < seq[lo]:
        seq[lo], seq[hi] = seq[hi], seq[lo]
    if seq[hi] < seq[mid]:
        seq[mid], seq[hi] = seq[hi], seq[mid]
    pivot = seq[mid]

    i = lo - 1
    j = hi + 1
    while True:
        i += 1
        while seq[i] < pivot:
            i += 1
        j -= 1
        while seq[j] > pivot:
            j -= 1
        if i >= j:
            return j
        seq[i], seq[j] = seq[j], seq[i]


def heap_sort(seq: MutableSequence[int]) -> None:
    """Heap sort: build a max-heap in place, then move the max to the tail."""
    n = len(seq)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(seq, root, n)
    for end in range(n - 1, 0, -1):
        seq[0], seq[end] = seq[end], seq[0]
        _sift_down(seq, 0, end)


def _sift_down(seq, root, size):
    """Restore the max-heap property for the subtree at root within [0, size)."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and seq[left] > seq[largest]:
            largest = left
        if right < size and seq[right] > seq[largest]:
            largest = right
        if largest == root:
            return
        seq[root], seq[largest] = seq[largest], seq[root]
        root = largest


SORTERS: dict[Algorithm, Callable[[MutableSequence[int]], None]] = {
    Algorithm.INSERTION: insertion_sort,
    Algorithm.SHELL: shell_sort,
    Algorithm.MERGE: merge_sort,
    Algorithm.QUICK: quick_sort,
    Algorithm.HEAP: heap_sort,
}


def get_sorter(algorithm) -> Callable[[MutableSequence[int]], None]:
    """Return the in-place sort function for an algorithm or algorithm name.

    Raises:
        UnknownAlgorithmError: If the algorithm is not supported.
    """
    return SORTERS[Algorithm.from_name(algorithm)]


def sort(sequence: Sequence[int], algorithm) -> list[int]:
    """Return a sorted copy of sequence using the given algorithm."""
    result = list(sequence)
    get_sorter(algorithm)(result)
    return result
