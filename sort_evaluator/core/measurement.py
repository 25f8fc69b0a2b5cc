"""Value types for timing runs: algorithm identifiers, measurements, result sets."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from ..errors import UnknownAlgorithmError


class Algorithm(Enum):
    """The closed set of sorting algorithms the evaluator can time.

    Member values are the display names used in reports.
    """
    INSERTION = "Insertion Sort"
    SHELL = "Shell Sort"
    MERGE = "Merge Sort"
    QUICK = "Quick Sort"
    HEAP = "Heap Sort"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def canonical_order(cls) -> list["Algorithm"]:
        """All algorithms ordered lexicographically by display name."""
        return sorted(cls, key=lambda a: a.value)

    @classmethod
    def from_name(cls, name) -> "Algorithm":
        """Resolve an algorithm from a display name or member name.

        Args:
            name: An Algorithm member, a display name such as "Quick Sort",
                or a member name such as "quick" (case-insensitive).

        Returns:
            The matching Algorithm member.

        Raises:
            UnknownAlgorithmError: If the name matches no algorithm.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            wanted = name.strip().lower()
            for algorithm in cls:
                if wanted in (algorithm.value.lower(), algorithm.name.lower()):
                    return algorithm
        raise UnknownAlgorithmError(f"Unknown sorting algorithm: {name}")


@dataclass(frozen=True)
class Measurement:
    """One algorithm's execution time for one input.

    Attributes:
        algorithm: The algorithm that was timed.
        duration_ns: Elapsed monotonic time in nanoseconds.
    """
    algorithm: Algorithm
    duration_ns: int

    def __post_init__(self):
        """Validate measurement values."""
        if not isinstance(self.algorithm, Algorithm):
            raise TypeError("algorithm must be an Algorithm member")

        if self.duration_ns < 0:
            raise ValueError("duration_ns must be non-negative")

    @property
    def name(self) -> str:
        return self.algorithm.display_name


def select_best(measurements: Iterable[Measurement]) -> Measurement:
    """Pick the fastest measurement.

    Exact ties go to the algorithm whose display name sorts first, so the
    result does not depend on the order measurements were collected in.

    Args:
        measurements: Measurements to choose from (a ResultSet works too).

    Returns:
        The measurement with the smallest duration.

    Raises:
        ValueError: If there are no measurements.
    """
    candidates = list(measurements)
    if not candidates:
        raise ValueError("Cannot select the best of zero measurements")
    return min(candidates, key=lambda m: (m.duration_ns, m.name))


@dataclass(frozen=True)
class ResultSet:
    """All measurements of one analysis run, one per algorithm.

    Attributes:
        size: Number of elements in the measured input.
        measurements: The measurements, stored in canonical name order.
    """
    size: int
    measurements: tuple[Measurement, ...]

    def __post_init__(self):
        """Validate and normalise the measurements."""
        if self.size < 0:
            raise ValueError("size must be non-negative")

        algorithms = [m.algorithm for m in self.measurements]
        if len(set(algorithms)) != len(algorithms):
            raise ValueError("ResultSet cannot hold two measurements of the same algorithm")

        missing = set(Algorithm) - set(algorithms)
        if missing:
            names = ", ".join(sorted(a.display_name for a in missing))
            raise ValueError(f"ResultSet is missing measurements for: {names}")

        ordered = tuple(sorted(self.measurements, key=lambda m: m.name))
        object.__setattr__(self, "measurements", ordered)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self.measurements)

    def __len__(self) -> int:
        return len(self.measurements)

    def __getitem__(self, algorithm) -> Measurement:
        algorithm = Algorithm.from_name(algorithm)
        for measurement in self.measurements:
            if measurement.algorithm is algorithm:
                return measurement
        raise KeyError(algorithm.display_name)

    @property
    def best(self) -> Measurement:
        return select_best(self.measurements)

    def as_dict(self) -> dict[str, int]:
        """Map display name to duration in nanoseconds, in canonical order."""
        return {m.name: m.duration_ns for m in self.measurements}
