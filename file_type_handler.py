import os
import sys

import pandas as pd

from html_document import discover_tables
from page_source import TableHost

SUPPORTED = {".html", ".htm", ".json", ".csv", ".parquet", ".xlsx", ".h5"}


class FileTypeHandler:
    def __init__(self, path: str):
        self.path = path
        self.name = os.path.basename(path)
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in SUPPORTED:
            print(
                "Unsupported file type (use .html, .json, .csv, .parquet, .xlsx, or .h5)"
            )
            sys.exit(1)

    def load_hosts(self) -> list[TableHost]:
        if self.ext in {".html", ".htm"}:
            return discover_tables(self._read_text())
        if self.ext == ".json":
            return [TableHost(name=self.name, sources=[self._read_text()])]
        if self.ext == ".csv":
            try:
                df = pd.read_csv(self.path)
            except pd.errors.EmptyDataError:
                df = pd.DataFrame()
            return [TableHost(name=self.name, frame=df)]
        if self.ext == ".parquet":
            self._ensure_parquet_engine()
            return [TableHost(name=self.name, frame=pd.read_parquet(self.path))]
        if self.ext == ".xlsx":
            return self._load_excel()
        if self.ext == ".h5":
            return self._load_hdf()
        return []

    def _read_text(self) -> str:
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def _sheet_name(self, sheet) -> str:
        return f"{self.name}:{sheet}"

    def _load_excel(self) -> list[TableHost]:
        self._ensure_excel_engine()
        sheets = pd.read_excel(self.path, sheet_name=None)
        hosts = []
        for name, df in sheets.items():
            if isinstance(df, pd.DataFrame):
                hosts.append(TableHost(name=self._sheet_name(name), frame=df))
        return hosts

    def _load_hdf(self) -> list[TableHost]:
        self._ensure_hdf_engine()
        hosts = []
        with pd.HDFStore(self.path, mode="r") as store:
            for key in store.keys():
                obj = store.get(key)
                if isinstance(obj, pd.DataFrame):
                    name = key.lstrip("/") or "table"
                    hosts.append(TableHost(name=self._sheet_name(name), frame=obj))
        return hosts

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        print("Parquet support requires pyarrow. Install via: pip install pyarrow")
        sys.exit(1)

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        print("XLSX support requires openpyxl. Install via: pip install openpyxl")
        sys.exit(1)

    def _ensure_hdf_engine(self):
        try:
            import tables  # type: ignore  # noqa: F401

            return
        except ImportError:
            pass
        print("HDF5 support requires tables. Install via: pip install tables")
        sys.exit(1)
