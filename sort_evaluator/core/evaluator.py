"""Performance evaluator: times each sorting algorithm on private copies of one input."""

import logging
import time
from typing import Sequence

from .algorithms import SORTERS
from .measurement import Algorithm, Measurement, ResultSet

logger = logging.getLogger(__name__)


def measure(sequence: Sequence[int], algorithm) -> int:
    """Time one algorithm on a copy of sequence.

    The caller's sequence is never modified; the sorted copy is discarded.

    Args:
        sequence: Integers to sort. Any length, including zero.
        algorithm: An Algorithm member or a name accepted by
            Algorithm.from_name.

    Returns:
        Elapsed monotonic time of the sort call in nanoseconds.

    Raises:
        UnknownAlgorithmError: If algorithm is not one of the supported sorts.
    """
    algorithm = Algorithm.from_name(algorithm)
    sorter = SORTERS[algorithm]

    working_copy = list(sequence)

    start_ns = time.perf_counter_ns()
    sorter(working_copy)
    end_ns = time.perf_counter_ns()

    duration_ns = end_ns - start_ns
    logger.debug("%s sorted %d elements in %d ns",
                 algorithm.display_name, len(working_copy), duration_ns)
    return duration_ns


def evaluate_all(sequence: Sequence[int]) -> ResultSet:
    """Time every algorithm on the same input.

    Algorithms run one after another, each on its own fresh copy of the
    original unsorted data.

    Args:
        sequence: Integers to sort.

    Returns:
        A ResultSet with one measurement per algorithm; ``best`` holds the
        fastest.
    """
    original = tuple(sequence)
    logger.info("Evaluating %d algorithms on %d elements", len(SORTERS), len(original))

    measurements = []
    for algorithm in Algorithm.canonical_order():
        duration_ns = measure(original, algorithm)
        measurements.append(Measurement(algorithm=algorithm, duration_ns=duration_ns))

    result_set = ResultSet(size=len(original), measurements=tuple(measurements))
    best = result_set.best
    logger.info("Best performing algorithm: %s (%d ns)", best.name, best.duration_ns)
    return result_set
