from __future__ import annotations

import enum

__all__ = ("TableFormat",)


class TableFormat(enum.Enum):
    CSV = "csv"
    TSV = "tsv"

    @staticmethod
    def from_extension(ext: str, /) -> TableFormat:
        """Unrecognized extensions are read as CSV."""
        try:
            return TableFormat(ext.lower().lstrip("."))
        except ValueError:
            return TableFormat.CSV

    def __repr__(self) -> str:
        return f"TableFormat.{self.name}"

    def __str__(self) -> str:
        return self.value
