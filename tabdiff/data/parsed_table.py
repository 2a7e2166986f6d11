import dataclasses

from tabdiff.data.row import Row

__all__ = ("ParsedTable",)


@dataclasses.dataclass(frozen=True, kw_only=True)
class ParsedTable:
    columns: tuple[str, ...]
    rows: tuple[Row, ...]
