import pathlib

from tabdiff import data
from tabdiff.service.load_table import load_table

__all__ = ("list_columns",)


def list_columns(*, file: pathlib.Path) -> tuple[str, ...] | data.Error:
    table = load_table(file=file)
    if isinstance(table, data.Error):
        return table

    if not table.columns:
        return data.Error.new(f"{file.name} does not have a header row.", file=file)

    return table.columns
