from dataclasses import dataclass

from column_window import ColumnNavigation, ColumnWindow
from pagination import RowWindow


@dataclass(frozen=True)
class PageControls:
    visible: bool  # omitted entirely when everything fits on one page
    previous_enabled: bool
    next_enabled: bool
    links: tuple
    current: int


@dataclass(frozen=True)
class ViewState:
    rows: list
    columns: tuple
    padding_count: int
    navigation: ColumnNavigation
    controls: PageControls
    row_start: int
    row_end: int
    total_rows: int
    column_start: int
    column_end: int
    total_columns: int
    label: str
    long_label: str

    @property
    def is_empty(self) -> bool:
        return self.total_rows == 0

    @property
    def parities(self) -> list[str]:
        return [row_parity(i) for i in range(len(self.rows))]


def row_parity(idx: int) -> str:
    # striping counts rows from one
    return "even" if idx % 2 != 0 else "odd"


def range_label(rows: RowWindow, columns: ColumnWindow, long: bool = False) -> str:
    start = rows.page_start
    end = min((rows.page_index + 1) * rows.page_size, rows.total_rows)
    total = rows.total_rows

    if total < rows.page_size:
        text = f"{total} Record" + ("s" if total != 1 else "")
    else:
        text = f"{start + 1}-{end} of {total}"

    if columns.total > columns.visible_count:
        col_end = min(columns.offset + columns.visible_count, columns.total)
        text = (
            text
            + (" Rows" if long else "")
            + f" | {columns.offset + 1}-{col_end} of {columns.total}"
            + (" Columns" if long else "")
        )
    return text


def page_controls(rows: RowWindow) -> PageControls:
    start, end = rows.visible_page_range()
    return PageControls(
        visible=rows.total_rows > rows.page_size,
        previous_enabled=not rows.is_first_page,
        next_enabled=not rows.is_last_page,
        links=tuple(range(start, end)),
        current=rows.page_index,
    )


def build_view_state(source, rows: RowWindow, columns: ColumnWindow) -> ViewState:
    start = rows.page_start
    end = rows.page_end
    return ViewState(
        rows=source.rows(start, end),
        columns=columns.subset,
        padding_count=columns.padding_count(),
        navigation=columns.navigation(),
        controls=page_controls(rows),
        row_start=start,
        row_end=end,
        total_rows=rows.total_rows,
        column_start=columns.offset,
        column_end=columns.slice_end,
        total_columns=columns.total,
        label=range_label(rows, columns),
        long_label=range_label(rows, columns, long=True),
    )
