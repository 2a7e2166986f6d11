import dataclasses
import pathlib

from tabdiff.data.row_diff import RowDiff

__all__ = ("CompareResult",)


@dataclasses.dataclass(frozen=True, kw_only=True)
class CompareResult:
    old_file: pathlib.Path
    new_file: pathlib.Path
    columns: tuple[str, ...]
    key_cols: tuple[str, ...]
    compare_cols: tuple[str, ...]
    diff: RowDiff
    execution_millis: int
