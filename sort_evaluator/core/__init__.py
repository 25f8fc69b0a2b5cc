"""Core components: sorting algorithms and the performance evaluator."""

from sort_evaluator.core.algorithms import (
    SORTERS,
    get_sorter,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    shell_sort,
    sort,
)
from sort_evaluator.core.evaluator import evaluate_all, measure
from sort_evaluator.core.measurement import (
    Algorithm,
    Measurement,
    ResultSet,
    select_best,
)

__all__ = [
    "SORTERS",
    "get_sorter",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "shell_sort",
    "sort",
    "evaluate_all",
    "measure",
    "Algorithm",
    "Measurement",
    "ResultSet",
    "select_best",
]
