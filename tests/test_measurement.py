import pytest

from sort_evaluator.core.measurement import Algorithm, Measurement, ResultSet, select_best
from sort_evaluator.errors import SortEvaluatorError, UnknownAlgorithmError


def make_result_set(durations, size=10):
    return ResultSet(
        size=size,
        measurements=tuple(Measurement(a, d) for a, d in durations.items()),
    )


def test_algorithm_values_are_display_names():
    assert [a.display_name for a in Algorithm.canonical_order()] == [
        "Heap Sort", "Insertion Sort", "Merge Sort", "Quick Sort", "Shell Sort",
    ]


@pytest.mark.parametrize("name,expected", [
    ("Insertion Sort", Algorithm.INSERTION),
    ("shell sort", Algorithm.SHELL),
    ("MERGE", Algorithm.MERGE),
    (" quick ", Algorithm.QUICK),
    (Algorithm.HEAP, Algorithm.HEAP),
])
def test_from_name_resolves(name, expected):
    assert Algorithm.from_name(name) is expected


@pytest.mark.parametrize("name", ["Bubble Sort", "", None, 3])
def test_from_name_rejects_unknown(name):
    with pytest.raises(UnknownAlgorithmError):
        Algorithm.from_name(name)


def test_unknown_algorithm_error_is_value_error():
    assert issubclass(UnknownAlgorithmError, ValueError)
    assert issubclass(UnknownAlgorithmError, SortEvaluatorError)


def test_measurement_rejects_negative_duration():
    with pytest.raises(ValueError):
        Measurement(Algorithm.QUICK, -1)


def test_measurement_allows_zero_duration():
    assert Measurement(Algorithm.QUICK, 0).duration_ns == 0


def test_select_best_unique_minimum():
    result_set = make_result_set({
        Algorithm.INSERTION: 500,
        Algorithm.SHELL: 300,
        Algorithm.MERGE: 120,
        Algorithm.QUICK: 90,
        Algorithm.HEAP: 200,
    })
    assert result_set.best.algorithm is Algorithm.QUICK
    assert select_best(result_set).algorithm is Algorithm.QUICK


def test_select_best_tie_goes_to_first_name():
    measurements = [
        Measurement(Algorithm.SHELL, 0),
        Measurement(Algorithm.QUICK, 0),
        Measurement(Algorithm.INSERTION, 0),
        Measurement(Algorithm.MERGE, 5),
    ]
    assert select_best(measurements).algorithm is Algorithm.INSERTION
    assert select_best(reversed(measurements)).algorithm is Algorithm.INSERTION


def test_select_best_all_tied_picks_heap_sort():
    result_set = make_result_set({a: 0 for a in Algorithm})
    assert result_set.best.name == "Heap Sort"


def test_select_best_empty_raises():
    with pytest.raises(ValueError):
        select_best([])


def test_result_set_rejects_duplicates():
    with pytest.raises(ValueError):
        ResultSet(size=1, measurements=(
            Measurement(Algorithm.QUICK, 1),
            Measurement(Algorithm.QUICK, 2),
        ))


def test_result_set_rejects_missing_algorithms():
    with pytest.raises(ValueError, match="Heap Sort, Insertion Sort, Merge Sort, Shell Sort"):
        ResultSet(size=3, measurements=(Measurement(Algorithm.QUICK, 5),))

    with pytest.raises(ValueError, match="missing"):
        ResultSet(size=0, measurements=())


def test_result_set_orders_and_indexes_measurements():
    result_set = make_result_set({
        Algorithm.SHELL: 3,
        Algorithm.HEAP: 1,
        Algorithm.QUICK: 2,
        Algorithm.INSERTION: 9,
        Algorithm.MERGE: 4,
    })
    assert [m.name for m in result_set] == [
        "Heap Sort", "Insertion Sort", "Merge Sort", "Quick Sort", "Shell Sort",
    ]
    assert len(result_set) == len(Algorithm)
    assert result_set[Algorithm.QUICK].duration_ns == 2
    assert result_set["Shell Sort"].duration_ns == 3
    assert result_set.as_dict() == {
        "Heap Sort": 1,
        "Insertion Sort": 9,
        "Merge Sort": 4,
        "Quick Sort": 2,
        "Shell Sort": 3,
    }
    with pytest.raises(UnknownAlgorithmError):
        result_set["Bubble Sort"]


def test_result_set_is_immutable():
    result_set = make_result_set({a: 1 for a in Algorithm})
    with pytest.raises(AttributeError):
        result_set.size = 5
