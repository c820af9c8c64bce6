from typing import Protocol, Sequence

from column_window import ColumnNavigation
from page_source import ColumnSpec
from view_state import PageControls


class Renderer(Protocol):
    """Drawing surface the orchestrator redraws after every state change.

    Implementations get plain data only; they own widths, attributes and
    whatever else it takes to put the table on screen.
    """

    def draw_header(
        self,
        columns: Sequence[ColumnSpec],
        padding_count: int,
        navigation: ColumnNavigation,
    ) -> None: ...

    def draw_body(
        self,
        rows: Sequence[dict],
        columns: Sequence[ColumnSpec],
        padding_count: int,
        parities: Sequence[str],
    ) -> None: ...

    def draw_footer(
        self,
        controls: PageControls,
        current_page: int,
        label: str,
        long_label: str,
    ) -> None: ...
