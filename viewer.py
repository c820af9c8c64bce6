import curses
import logging
import time

from grid_pane import GridPane
from screen_layout import ScreenLayout
from status_bar import render_status
from table_registry import TableRegistry, render_all, resize_all

logger = logging.getLogger(__name__)

KEY_TAB = 9
QUIT_KEYS = {3, 24, ord("q")}  # Ctrl+C, Ctrl+X, q

NEXT_PAGE_KEYS = {ord("n"), ord("j"), curses.KEY_NPAGE, curses.KEY_DOWN}
PREVIOUS_PAGE_KEYS = {ord("p"), ord("k"), curses.KEY_PPAGE, curses.KEY_UP}
LEFT_KEYS = {ord("h"), curses.KEY_LEFT}
RIGHT_KEYS = {ord("l"), curses.KEY_RIGHT}


def dispatch_key(orchestrator, ch) -> bool:
    """Apply a navigation key to one table. Returns False for unknown keys."""
    if ch in NEXT_PAGE_KEYS:
        orchestrator.next_page()
    elif ch in PREVIOUS_PAGE_KEYS:
        orchestrator.previous_page()
    elif ch == ord("g") or ch == curses.KEY_HOME:
        orchestrator.goto_page(0)
    elif ch == ord("G") or ch == curses.KEY_END:
        orchestrator.goto_page(orchestrator.rows.page_count - 1)
    elif ch in LEFT_KEYS:
        orchestrator.scroll_columns_left()
    elif ch in RIGHT_KEYS:
        orchestrator.scroll_columns_right()
    else:
        return False
    return True


class Viewer:
    def __init__(self, stdscr, hosts, config):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.nodelay(False)
        self.stdscr.timeout(100)

        self.config = config
        self.hosts = list(hosts)
        self.layout = ScreenLayout(stdscr, len(self.hosts))
        self.panes: dict[int, GridPane] = {}
        self.focus = 0

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

        # ---- tables ----
        self.registry = TableRegistry()
        self.instances = render_all(
            self.hosts, self.registry, self._make_renderer, config
        )
        self._disposers = [
            instance.orchestrator.on_change(self._on_table_change)
            for instance in self.instances
        ]
        self.failed_count = len(self.hosts) - len(self.instances)
        self._draw_failed_panes()
        resize_all(self.registry)

    # ---------------- helpers ----------------

    def _make_renderer(self, index, host):
        pane = GridPane(self.layout, index, self.config.char_width_px)
        self.panes[index] = pane
        return pane, pane.viewport_width_px

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _focused(self):
        live = list(self.registry)
        if not live:
            return None
        self.focus = min(self.focus, len(live) - 1)
        return live[self.focus]

    def _on_table_change(self):
        instance = self._focused()
        if instance is None:
            return
        rows = instance.orchestrator.rows
        self._set_status(
            f"Page {rows.page_index + 1}/{max(1, rows.page_count)}", 2
        )

    def _draw_failed_panes(self):
        live = {id(instance.host) for instance in self.registry}
        for idx, host in enumerate(self.hosts):
            if id(host) in live:
                continue
            win = self.layout.pane_wins[idx]
            win.erase()
            _, w = win.getmaxyx()
            try:
                win.addnstr(0, 0, f"Unable to render {host.name} (see log)", w)
            except curses.error:
                pass
            win.noutrefresh()

    def _relayout(self):
        try:
            curses.update_lines_cols()
        except curses.error:
            pass
        self.stdscr.clear()
        self.stdscr.noutrefresh()
        self.layout = ScreenLayout(self.stdscr, len(self.hosts))
        for pane in self.panes.values():
            pane.layout = self.layout
        self._draw_failed_panes()
        resize_all(self.registry)

    # ---------------- UI ----------------

    def redraw_status(self):
        instance = self._focused()
        context = {
            "status_msg": self.status_msg,
            "status_until": self.status_msg_until,
            "focus": self.focus,
            "table_count": len(self.registry),
            "failed_count": self.failed_count,
        }
        if instance is not None:
            context["table_name"] = instance.host.name
            context["long_label"] = instance.orchestrator.view_state.long_label

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        try:
            sw.addnstr(0, 0, render_status(context, w), w, curses.A_REVERSE)
        except curses.error:
            pass
        sw.noutrefresh()
        curses.doupdate()

    def handle_key(self, ch):
        if ch == curses.KEY_RESIZE:
            self._relayout()
            return

        count = len(self.registry)
        if ch == KEY_TAB and count:
            self.focus = (self.focus + 1) % count
            return
        if ch == curses.KEY_BTAB and count:
            self.focus = (self.focus - 1) % count
            return

        instance = self._focused()
        if instance is None:
            return
        dispatch_key(instance.orchestrator, ch)

    # ---------------- main loop ----------------

    def run(self):
        self.stdscr.noutrefresh()
        self.redraw_status()

        while True:
            ch = self.stdscr.getch()

            if ch in QUIT_KEYS:
                break

            if ch != -1:
                self.handle_key(ch)

            self.redraw_status()

        for dispose in self._disposers:
            dispose()
        self.registry.clear()
