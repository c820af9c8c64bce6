import curses

from column_window import ColumnNavigation
from page_source import format_cell

NAV_WIDTH = 2
LEFT_ARROW = "<"
RIGHT_ARROW = ">"


class GridPane:
    """Curses renderer for one table.

    Rows 0-1 hold column names and types, the last row holds the footer and
    everything in between is body.
    """

    HEADER_H = 2
    MIN_COL_WIDTH = 3

    def __init__(self, layout, index, char_width_px=8):
        self.layout = layout
        self.index = index
        self.char_width_px = char_width_px
        self._navigation = ColumnNavigation(left=False, right=False)

    @property
    def win(self):
        return self.layout.pane_wins[self.index]

    def viewport_width_px(self) -> int:
        _, w = self.win.getmaxyx()
        return w * self.char_width_px

    def body_height(self) -> int:
        """Rows left for table body between the header and the footer."""
        h, _ = self.win.getmaxyx()
        return max(0, h - self.HEADER_H - 1)

    # ---------------- helpers ----------------

    def _put(self, y, x, text, width, attr=curses.A_NORMAL):
        h, w = self.win.getmaxyx()
        if y < 0 or y >= h or x >= w or width <= 0:
            return
        width = min(width, w - x)
        try:
            self.win.addnstr(y, x, text, width, attr)
        except curses.error:
            # writing the bottom-right cell always reports an error
            pass

    def _clear_line(self, y):
        _, w = self.win.getmaxyx()
        self._put(y, 0, " " * w, w)

    def _slots(self, columns, padding_count, navigation):
        """Lay out the visible columns as (kind, spec, x, width) tuples."""
        _, w = self.win.getmaxyx()
        nav_w = (NAV_WIDTH if navigation.left else 0) + (
            NAV_WIDTH if navigation.right else 0
        )
        count = len(columns) + padding_count
        col_w = 0
        if count:
            col_w = max(self.MIN_COL_WIDTH, (w - nav_w) // count - 1)

        slots = []
        x = 0
        if navigation.left:
            slots.append(("nav_left", None, x, NAV_WIDTH))
            x += NAV_WIDTH
        for spec in columns:
            slots.append(("column", spec, x, col_w))
            x += col_w + 1
        for _ in range(padding_count):
            slots.append(("padding", None, x, col_w))
            x += col_w + 1
        if navigation.right:
            slots.append(("nav_right", None, x, NAV_WIDTH))
        return slots

    @staticmethod
    def _align(text, width, align):
        text = text[:width]
        if align == "right":
            return text.rjust(width)
        if align == "center":
            return text.center(width)
        return text.ljust(width)

    # ---------------- renderer ----------------

    def draw_header(self, columns, padding_count, navigation):
        self._navigation = navigation
        for y in range(self.HEADER_H):
            self._clear_line(y)
        for kind, spec, x, width in self._slots(columns, padding_count, navigation):
            if kind == "nav_left":
                self._put(0, x, LEFT_ARROW, width, curses.A_BOLD)
            elif kind == "nav_right":
                self._put(0, x, RIGHT_ARROW, width, curses.A_BOLD)
            elif kind == "column":
                self._put(0, x, self._align(spec.name, width, spec.align), width, curses.A_BOLD)
                if spec.type is not None:
                    label = f"<{spec.type}>"
                    self._put(1, x, self._align(label, width, spec.align), width, curses.A_DIM)
        self.win.noutrefresh()

    def draw_body(self, rows, columns, padding_count, parities):
        last_body_y = self.HEADER_H + self.body_height() - 1
        for y in range(self.HEADER_H, last_body_y + 1):
            self._clear_line(y)

        if not rows:
            self._put(self.HEADER_H, 0, "No data", 7, curses.A_DIM)
            self.win.noutrefresh()
            return

        slots = self._slots(columns, padding_count, self._navigation)
        for idx, record in enumerate(rows):
            y = self.HEADER_H + idx
            if y > last_body_y:
                break
            attr = curses.A_DIM if parities[idx] == "even" else curses.A_NORMAL
            for kind, spec, x, width in slots:
                if kind != "column":
                    continue
                text = format_cell(record.get(spec.name))
                self._put(y, x, self._align(text, width, spec.align), width, attr)
        self.win.noutrefresh()

    def draw_footer(self, controls, current_page, label, long_label):
        h, w = self.win.getmaxyx()
        y = h - 1
        self._clear_line(y)

        x = 0
        if controls.visible:
            nav_attr = curses.A_NORMAL if controls.previous_enabled else curses.A_DIM
            items = [("Previous", nav_attr)]
            for page in controls.links:
                page_attr = curses.A_REVERSE if page == current_page else curses.A_NORMAL
                items.append((str(page + 1), page_attr))
            nav_attr = curses.A_NORMAL if controls.next_enabled else curses.A_DIM
            items.append(("Next", nav_attr))
            for text, attr in items:
                self._put(y, x, text, len(text), attr)
                x += len(text) + 1

        label_x = max(x + 1, w - len(label) - 1)
        self._put(y, label_x, label, len(label))
        self.win.noutrefresh()
