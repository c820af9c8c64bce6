import curses
import logging
import os
import sys

from _version import __version__
from config_paths import load_config, setup_logging
from file_type_handler import FileTypeHandler

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

logger = logging.getLogger(__name__)

USAGE = (
    "pagedview - terminal paged table viewer\n\n"
    "Usage:\n  pagedview <path>\n  pagedview -v\n  pagedview -h\n\n"
    "Keys:\n"
    "  n/p, j/k, PgDn/PgUp   next / previous page\n"
    "  g/G                   first / last page\n"
    "  h/l, Left/Right       scroll columns\n"
    "  Tab/Shift-Tab         switch table\n"
    "  q                     quit\n"
)


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args or len(args) != 1:
        print(USAGE)
        return

    path = args[0]
    if not os.path.exists(path):
        print(f"No such file: {path}", file=sys.stderr)
        sys.exit(1)

    config = load_config()
    setup_logging(config.log_level)

    handler = FileTypeHandler(path)
    try:
        hosts = handler.load_hosts()
    except Exception as e:
        logger.exception("failed to load %s", path)
        print(f"Load failed: {e}", file=sys.stderr)
        sys.exit(1)

    if not hosts:
        print(f"No tables found in {path}", file=sys.stderr)
        sys.exit(1)

    from viewer import Viewer

    def curses_main(stdscr):
        Viewer(stdscr, hosts, config).run()

    curses.wrapper(curses_main)


if __name__ == "__main__":
    main()
