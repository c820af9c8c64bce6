import pandas as pd
import pytest

from column_window import ColumnWindow
from page_source import PageSource
from pagination import RowWindow
from view_state import build_view_state, range_label, row_parity


def _source(rows, cols):
    df = pd.DataFrame({f"c{c}": [r * 100 + c for r in range(rows)] for c in range(cols)})
    return PageSource.from_frame(df)


def _state(rows, cols, page=0, page_size=10, visible=10, offset=0):
    source = _source(rows, cols)
    row_window = RowWindow(source.total_rows, max_page_size=10)
    row_window.set_page_size(page_size)
    row_window.set_page_number(page)
    col_window = ColumnWindow(source.columns, default_visible_columns=10)
    col_window.set_visible_columns(visible)
    col_window.shift(offset)
    return build_view_state(source, row_window, col_window)


def test_last_page_label_and_rows():
    state = _state(25, 3, page=5)
    assert state.controls.current == 2
    assert state.label == "21-25 of 25"
    assert len(state.rows) == 5
    assert state.rows[0]["c0"] == 2000
    assert (state.row_start, state.row_end) == (20, 25)


def test_label_with_column_range():
    state = _state(25, 12)
    assert state.label == "1-10 of 25 | 1-10 of 12"
    assert state.long_label == "1-10 of 25 Rows | 1-10 of 12 Columns"


def test_label_with_shifted_columns():
    state = _state(25, 12, visible=5, offset=9)
    assert state.label == "1-10 of 25 | 8-12 of 12"
    assert (state.column_start, state.column_end) == (7, 12)
    assert state.navigation.left
    assert not state.navigation.right


@pytest.mark.parametrize(
    "total, expected",
    [
        (0, "0 Records"),
        (1, "1 Record"),
        (7, "7 Records"),
        (10, "1-10 of 10"),
    ],
)
def test_record_count_label(total, expected):
    state = _state(total, 2)
    assert state.label == expected


def test_long_label_without_extra_columns_has_no_suffix():
    state = _state(3, 2)
    assert state.long_label == "3 Records"


def test_empty_dataset_omits_page_controls():
    state = _state(0, 3)
    assert state.is_empty
    assert state.rows == []
    assert not state.controls.visible
    assert not state.controls.previous_enabled
    assert not state.controls.next_enabled
    assert state.label == "0 Records"


def test_controls_omitted_when_single_page_fits():
    state = _state(10, 2)
    assert not state.controls.visible


def test_controls_enablement():
    first = _state(25, 2, page=0)
    assert first.controls.visible
    assert not first.controls.previous_enabled
    assert first.controls.next_enabled

    middle = _state(25, 2, page=1)
    assert middle.controls.previous_enabled
    assert middle.controls.next_enabled

    last = _state(25, 2, page=2)
    assert last.controls.previous_enabled
    assert not last.controls.next_enabled
    assert last.controls.links == (0, 1, 2)


def test_padding_count_for_narrow_tables():
    assert _state(5, 3).padding_count == 2
    assert _state(5, 12).padding_count == 0


def test_row_parity_counts_from_one():
    assert [row_parity(i) for i in range(4)] == ["odd", "even", "odd", "even"]
    assert _state(3, 1).parities == ["odd", "even", "odd"]


def test_range_label_long_variant():
    source = _source(40, 6)
    rows = RowWindow(source.total_rows)
    rows.set_page_number(3)
    columns = ColumnWindow(source.columns)
    columns.set_visible_columns(4)
    assert range_label(rows, columns) == "31-40 of 40 | 1-4 of 6"
    assert range_label(rows, columns, long=True) == "31-40 of 40 Rows | 1-4 of 6 Columns"
