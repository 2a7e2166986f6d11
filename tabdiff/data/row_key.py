import typing

__all__ = ("KEY_SEPARATOR", "RowKey", "build_key")


RowKey: typing.TypeAlias = str

KEY_SEPARATOR: typing.Final[str] = "__"


def build_key(row: typing.Mapping[str, str | None], /, key_cols: typing.Iterable[str]) -> RowKey:
    """Join the row's values for key_cols, in order, into a single key.

    A column missing from the row, or holding None, contributes an empty string.
    """
    return KEY_SEPARATOR.join(row.get(col) or "" for col in key_cols)
