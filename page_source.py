import json
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
import pandas as pd


ALIGNMENTS = {"left", "right", "center"}


class ConfigurationError(ValueError):
    """Raised when a table has no usable source document."""


@dataclass(frozen=True)
class ColumnSpec:
    name: str
    type: Optional[str] = None
    align: str = "left"


@dataclass
class TableHost:
    """A place in a document where one table should be rendered.

    ``sources`` holds the raw payload of every source element found directly
    under the host; ``frame`` is set instead when the table was loaded
    straight from a data file.
    """

    name: str
    sources: list[str] = field(default_factory=list)
    frame: Optional[pd.DataFrame] = None


def format_cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, (list, dict)):
        return str(value)
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


def dtype_label(dtype) -> str:
    if isinstance(dtype, pd.CategoricalDtype):
        return "fct"
    if pd.api.types.is_bool_dtype(dtype):
        return "lgl"
    if pd.api.types.is_integer_dtype(dtype):
        return "int"
    if pd.api.types.is_float_dtype(dtype):
        return "dbl"
    if pd.api.types.is_complex_dtype(dtype):
        return "cpl"
    if pd.api.types.is_datetime64_any_dtype(dtype):
        return "dttm"
    if pd.api.types.is_timedelta64_dtype(dtype):
        return "drtn"
    return "chr"


def _json_cell(value):
    """Show booleans and nested values the way they were written."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return value


def _parse_column(raw, idx: int) -> ColumnSpec:
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Column {idx} is not an object")
    name = raw.get("name")
    if not isinstance(name, str):
        raise ConfigurationError(f"Column {idx} has no name")
    col_type = raw.get("type")
    if col_type is not None and not isinstance(col_type, str):
        col_type = str(col_type)
    align = raw.get("align") or "left"
    if align not in ALIGNMENTS:
        align = "left"
    return ColumnSpec(name=name, type=col_type, align=align)


class PageSource:
    def __init__(self, columns, data: pd.DataFrame):
        self.columns: list[ColumnSpec] = list(columns)
        self.data = data

    @property
    def total_rows(self) -> int:
        return len(self.data)

    @property
    def total_columns(self) -> int:
        return len(self.columns)

    def rows(self, start: int, end: int) -> list[dict]:
        names = [c.name for c in self.columns]
        df_slice = self.data.iloc[start:end].reindex(columns=names)
        return df_slice.to_dict(orient="records")

    @classmethod
    def from_json(cls, text: str) -> "PageSource":
        try:
            payload = json.loads(text)
        except (TypeError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Malformed table source: {exc}") from exc

        if not isinstance(payload, dict):
            raise ConfigurationError("Table source must be a JSON object")

        raw_columns = payload.get("columns")
        raw_data = payload.get("data")
        if not isinstance(raw_columns, list):
            raise ConfigurationError("Table source has no column list")
        if not isinstance(raw_data, list):
            raise ConfigurationError("Table source has no data list")

        columns = [_parse_column(raw, idx) for idx, raw in enumerate(raw_columns)]
        for idx, record in enumerate(raw_data):
            if not isinstance(record, dict):
                raise ConfigurationError(f"Row {idx} is not an object")

        names = [c.name for c in columns]
        if len(set(names)) != len(names):
            raise ConfigurationError("Table source has duplicate column names")

        records = [
            {key: _json_cell(value) for key, value in record.items()}
            for record in raw_data
        ]
        # object columns keep ints next to nulls and past float precision
        df = pd.DataFrame(records, columns=names, dtype=object)
        return cls(columns, df)

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "PageSource":
        if df is None:
            raise ConfigurationError("No data frame to display")
        df = df.copy()
        df.columns = [str(c) for c in df.columns]
        if not df.columns.is_unique:
            raise ConfigurationError("Data frame has duplicate column names")
        columns = []
        for name, dtype in df.dtypes.items():
            numeric = pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_bool_dtype(dtype)
            columns.append(
                ColumnSpec(
                    name=name,
                    type=dtype_label(dtype),
                    align="right" if numeric else "left",
                )
            )
        return cls(columns, df.reset_index(drop=True))

    @classmethod
    def from_host(cls, host: TableHost) -> "PageSource":
        if host.frame is not None:
            return cls.from_frame(host.frame)
        if host.sources is None or len(host.sources) != 1:
            raise ConfigurationError("A single data-pagedtable-source was not found")
        return cls.from_json(host.sources[0])
