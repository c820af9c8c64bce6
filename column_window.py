import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class ColumnNavigation:
    left: bool
    right: bool


class ColumnWindow:
    def __init__(self, columns: Sequence, default_visible_columns: int = 10):
        self.columns = tuple(columns)
        self.default_visible_columns = max(1, default_visible_columns)
        self.visible_count = self.default_visible_columns
        self.offset = 0
        self.subset: tuple = ()
        self.shift(0)

    @property
    def total(self) -> int:
        return len(self.columns)

    def _update_slice(self):
        # pull back instead of leaving a short trailing window
        if self.offset + self.visible_count >= self.total:
            self.offset = self.total - self.visible_count
        if self.offset < 0:
            self.offset = 0
        end = min(self.offset + self.visible_count, self.total)
        self.subset = self.columns[self.offset : end]

    def set_visible_columns(self, count: int):
        self.visible_count = max(1, count)
        self._update_slice()

    def shift(self, delta: int):
        self.offset += delta
        self._update_slice()

    def padding_count(self) -> int:
        """Blank filler columns that keep a narrow window from collapsing."""
        half = math.ceil(self.default_visible_columns / 2)
        return max(half - len(self.subset), 0)

    def navigation(self) -> ColumnNavigation:
        return ColumnNavigation(
            left=self.offset > 0,
            right=self.offset + self.visible_count < self.total,
        )

    @property
    def slice_end(self) -> int:
        return self.offset + len(self.subset)
