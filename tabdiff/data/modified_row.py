import dataclasses

from tabdiff.data.column_change import ColumnChange
from tabdiff.data.row import Row
from tabdiff.data.row_key import RowKey

__all__ = ("ModifiedRow",)


@dataclasses.dataclass(frozen=True, kw_only=True)
class ModifiedRow:
    key: RowKey
    old_row: Row
    new_row: Row
    changes: tuple[ColumnChange, ...]

    def __post_init__(self) -> None:
        if not self.changes:
            raise ValueError(f"A ModifiedRow requires at least one change, but none were given for {self.key!r}.")
