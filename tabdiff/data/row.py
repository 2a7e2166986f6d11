import typing

from tabdiff.data.frozen_dict import FrozenDict

__all__ = ("Row", "to_row")


Row: typing.TypeAlias = FrozenDict


def to_row(row: typing.Mapping[str, str | None], /) -> Row:
    if isinstance(row, FrozenDict):
        return row
    return FrozenDict(row)
