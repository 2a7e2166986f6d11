import typing

from tabdiff.data.error import DuplicateColumn, SchemaMismatch

__all__ = ("check_schema",)


def check_schema(
    *,
    old_columns: typing.Iterable[str],
    new_columns: typing.Iterable[str],
) -> None | DuplicateColumn | SchemaMismatch:
    """Both headers must name the same columns, each exactly once; order may differ."""
    old_cols = tuple(old_columns)
    new_cols = tuple(new_columns)

    for side, cols in (("old", old_cols), ("new", new_cols)):
        repeated = _repeated(cols)
        if repeated:
            return DuplicateColumn(side=side, column_names=repeated)

    old_only = tuple(col for col in old_cols if col not in new_cols)
    new_only = tuple(col for col in new_cols if col not in old_cols)
    if old_only or new_only:
        return SchemaMismatch(old_only=old_only, new_only=new_only)

    return None


def _repeated(cols: tuple[str, ...], /) -> tuple[str, ...]:
    seen: set[str] = set()
    repeated: list[str] = []
    for col in cols:
        if col in seen and col not in repeated:
            repeated.append(col)
        seen.add(col)
    return tuple(repeated)
