import pathlib

from tabdiff import data
from tabdiff.service.load_table import load_table

__all__ = ("preview_rows",)


def preview_rows(*, file: pathlib.Path, n: int = 100) -> data.ParsedTable | data.Error:
    if n < 1:
        return data.Error.new(f"n must be at least 1, but got {n}.", file=file)

    table = load_table(file=file)
    if isinstance(table, data.Error):
        return table

    if not table.columns:
        return data.Error.new(f"{file.name} does not have a header row.", file=file)

    return data.ParsedTable(columns=table.columns, rows=table.rows[:n])
