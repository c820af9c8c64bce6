import json
import logging
import os
from dataclasses import dataclass, fields

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "pagedview")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "pagedview.log")

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class TableConfig:
    max_page_size: int = 10
    default_visible_columns: int = 10
    # viewport pixels per visible column / per page-size unit
    column_width_px: int = 100
    row_width_px: int = 80
    # terminal cell width used to turn columns into pixels
    char_width_px: int = 8
    log_level: str = "WARNING"


def load_config() -> TableConfig:
    if not os.path.exists(CONFIG_JSON):
        return TableConfig()

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return TableConfig()
    if not isinstance(data, dict):
        return TableConfig()

    overrides = {}
    for f in fields(TableConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "log_level":
            if isinstance(value, str) and value.upper() in LOG_LEVELS:
                overrides[f.name] = value.upper()
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            continue
        overrides[f.name] = value
    return TableConfig(**overrides)


def setup_logging(level: str = "WARNING", path: str | None = None) -> None:
    """Send log records to a file; curses owns the terminal.

    No-op when the root logger already has handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    target = path or LOG_PATH
    try:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
