import curses


class ScreenLayout:
    def __init__(self, stdscr, pane_count=1):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()
        self.pane_count = max(1, pane_count)

        # layout: one pane per table stacked vertically, status bar (1 line)
        self.status_h = 1
        table_h = max(1, self.H - self.status_h)
        base_h = max(1, table_h // self.pane_count)

        self.pane_wins = []
        y = 0
        for idx in range(self.pane_count):
            # the last pane takes the leftover lines
            pane_h = base_h if idx < self.pane_count - 1 else max(1, table_h - y)
            win = curses.newwin(pane_h, self.W, min(y, table_h - 1), 0)
            # panes must never own cursor
            win.leaveok(True)
            self.pane_wins.append(win)
            y += pane_h

        self.status_win = curses.newwin(self.status_h, self.W, table_h, 0)
        self.status_win.leaveok(True)
