import logging

import pytest

from sort_evaluator.data.csv_handler import (
    column_labels,
    load_csv_column,
    load_preview_data,
    resolve_column,
)
from sort_evaluator.errors import DataSourceError, InvalidColumnError

SAMPLE = """id,name,score
1,alpha,42
2,beta, 17
3,gamma,n/a
4,delta,-8
5,epsilon,3.5
6,zeta
7,eta,1000
"""


def test_load_csv_column_skips_header_and_invalid_cells(write_csv):
    path = write_csv(SAMPLE)
    assert load_csv_column(path, 2) == [42, 17, -8, 1000]


def test_load_csv_column_first_column(write_csv):
    path = write_csv(SAMPLE)
    assert load_csv_column(path, 0) == [1, 2, 3, 4, 5, 6, 7]


def test_load_csv_column_text_column_is_empty(write_csv):
    path = write_csv(SAMPLE)
    assert load_csv_column(path, 1) == []


def test_load_csv_column_beyond_row_width_is_empty(write_csv):
    path = write_csv(SAMPLE)
    assert load_csv_column(path, 9) == []


def test_load_csv_column_logs_skipped_cells(write_csv, caplog):
    path = write_csv(SAMPLE)
    with caplog.at_level(logging.WARNING, logger="sort_evaluator.data.csv_handler"):
        load_csv_column(path, 2)
    skipped = [r for r in caplog.records if "Skipping invalid number" in r.getMessage()]
    assert len(skipped) == 2


def test_load_csv_column_header_only(write_csv):
    path = write_csv("a,b\n")
    assert load_csv_column(path, 0) == []


def test_load_csv_column_negative_index(write_csv):
    path = write_csv(SAMPLE)
    with pytest.raises(InvalidColumnError):
        load_csv_column(path, -1)


def test_load_csv_column_missing_file(tmp_path):
    with pytest.raises(DataSourceError, match="not found"):
        load_csv_column(tmp_path / "missing.csv", 0)


def test_load_preview_data_limits_rows(write_csv):
    path = write_csv(SAMPLE)
    rows = load_preview_data(path, 3)
    assert rows == [["id", "name", "score"], ["1", "alpha", "42"], ["2", "beta", " 17"]]


def test_load_preview_data_default_is_five_rows(write_csv):
    path = write_csv(SAMPLE)
    assert len(load_preview_data(path)) == 5


def test_load_preview_data_short_file(write_csv):
    path = write_csv("x\n1\n")
    assert load_preview_data(path, 10) == [["x"], ["1"]]


def test_load_preview_data_empty_file(write_csv):
    path = write_csv("")
    with pytest.raises(DataSourceError, match="empty"):
        load_preview_data(path)


def test_load_preview_data_rejects_zero_rows(write_csv):
    path = write_csv(SAMPLE)
    with pytest.raises(ValueError):
        load_preview_data(path, 0)


def test_load_preview_data_directory(tmp_path):
    with pytest.raises(DataSourceError):
        load_preview_data(tmp_path)


def test_column_labels():
    assert column_labels(["id", "score"]) == ["id (Column 0)", "score (Column 1)"]


@pytest.mark.parametrize("column,expected", [
    (0, 0),
    (2, 2),
    ("1", 1),
    ("score", 2),
    (" name ", 1),
])
def test_resolve_column(column, expected):
    assert resolve_column(["id", "name", "score"], column) == expected


@pytest.mark.parametrize("column", [3, -1, "7", "total", ""])
def test_resolve_column_invalid(column):
    with pytest.raises(InvalidColumnError):
        resolve_column(["id", "name", "score"], column)


def test_resolve_column_prefers_header_name_over_index():
    assert resolve_column(["2", "x", "y"], "2") == 0


def test_load_csv_column_accepts_only_plain_integers(write_csv):
    path = write_csv("value\n1_000\n+7\n-3\n0x10\n1e3\n 12 \n")
    assert load_csv_column(path, 0) == [7, -3, 12]


def test_utf8_bom_is_not_part_of_first_header(write_csv):
    path = write_csv("\ufeffid,score\n1,5\n2,3\n")
    headers = load_preview_data(path)[0]
    assert headers == ["id", "score"]
    assert resolve_column(headers, "id") == 0
    assert load_csv_column(path, 0) == [1, 2]
