import dataclasses

from tabdiff.data.modified_row import ModifiedRow
from tabdiff.data.row import Row

__all__ = ("RowDiff",)


@dataclasses.dataclass(frozen=True, kw_only=True)
class RowDiff:
    added: tuple[Row, ...]
    removed: tuple[Row, ...]
    modified: tuple[ModifiedRow, ...]

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.modified)
