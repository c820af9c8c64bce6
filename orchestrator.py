import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from column_window import ColumnWindow
from config_paths import TableConfig
from pagination import RowWindow
from renderer import Renderer
from view_state import ViewState, build_view_state

logger = logging.getLogger(__name__)


class NavigationKind(Enum):
    NEXT_PAGE = "next_page"
    PREVIOUS_PAGE = "previous_page"
    GOTO_PAGE = "goto_page"
    SHIFT_COLUMNS = "shift_columns"


@dataclass(frozen=True)
class Navigate:
    kind: NavigationKind
    value: int = 0


class Orchestrator:
    """Drives one table: owns its row and column windows and redraws the
    renderer whenever either of them moves."""

    def __init__(
        self, source, renderer: Renderer, config: TableConfig | None = None
    ):
        self.config = config or TableConfig()
        self.source = source
        self.renderer = renderer
        self.rows = RowWindow(source.total_rows, self.config.max_page_size)
        self.columns = ColumnWindow(
            source.columns, self.config.default_visible_columns
        )
        self._subscribers: list[Callable[[], None]] = []

    @property
    def view_state(self) -> ViewState:
        return build_view_state(self.source, self.rows, self.columns)

    # ---------------- drawing ----------------

    def _draw(self, header=True):
        state = self.view_state
        if header:
            self.renderer.draw_header(
                state.columns, state.padding_count, state.navigation
            )
        self.renderer.draw_body(
            state.rows, state.columns, state.padding_count, state.parities
        )
        self.renderer.draw_footer(
            state.controls, state.controls.current, state.label, state.long_label
        )

    def render(self):
        self._draw(header=True)

    # ---------------- navigation ----------------

    def navigate(self, event: Navigate):
        kind = event.kind
        if kind is NavigationKind.NEXT_PAGE:
            self.rows.next_page()
        elif kind is NavigationKind.PREVIOUS_PAGE:
            self.rows.previous_page()
        elif kind is NavigationKind.GOTO_PAGE:
            self.rows.set_page_number(event.value)
        elif kind is NavigationKind.SHIFT_COLUMNS:
            self.columns.shift(event.value)
        else:
            return

        logger.debug(
            "navigate %s(%s): page=%d offset=%d",
            kind.value,
            event.value,
            self.rows.page_index,
            self.columns.offset,
        )
        # column moves change the header, page moves only body and footer
        self._draw(header=kind is NavigationKind.SHIFT_COLUMNS)
        self._notify()

    def next_page(self):
        self.navigate(Navigate(NavigationKind.NEXT_PAGE))

    def previous_page(self):
        self.navigate(Navigate(NavigationKind.PREVIOUS_PAGE))

    def goto_page(self, number: int):
        self.navigate(Navigate(NavigationKind.GOTO_PAGE, number))

    def shift_columns(self, delta: int):
        self.navigate(Navigate(NavigationKind.SHIFT_COLUMNS, delta))

    def scroll_columns_left(self):
        self.shift_columns(-self.columns.visible_count)

    def scroll_columns_right(self):
        self.shift_columns(self.columns.visible_count)

    # ---------------- resize ----------------

    def resize(self, viewport_width_px: int, body_rows: int | None = None):
        """Derive window sizes from the viewport width.

        ``body_rows`` is how many rows the renderer can show at once; when
        given, the page never holds more rows than that.
        """
        if viewport_width_px <= 0:
            # hidden or detached; a later resize will catch up
            return
        visible = viewport_width_px // self.config.column_width_px
        page_size = viewport_width_px // self.config.row_width_px
        if body_rows is not None:
            page_size = min(page_size, body_rows)
        self.columns.set_visible_columns(visible)
        self.rows.set_page_size(page_size)
        logger.debug(
            "resize %dpx (%s body rows): visible_columns=%d page_size=%d",
            viewport_width_px,
            body_rows,
            self.columns.visible_count,
            self.rows.page_size,
        )
        self._draw(header=True)

    # ---------------- subscribers ----------------

    def on_change(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def dispose():
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        return dispose

    def _notify(self):
        for callback in list(self._subscribers):
            try:
                callback()
            except Exception:
                logger.exception("change subscriber %r failed", callback)
