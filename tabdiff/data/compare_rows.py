import typing

from tabdiff.data.column_change import ColumnChange
from tabdiff.data.diff_options import DiffOptions
from tabdiff.data.error import DuplicateKey, MissingColumn
from tabdiff.data.modified_row import ModifiedRow
from tabdiff.data.progress import Phase, ProgressInfo
from tabdiff.data.row import Row, to_row
from tabdiff.data.row_diff import RowDiff
from tabdiff.data.row_key import RowKey, build_key

__all__ = ("compare_rows", "iter_compare_rows")


_INDEXED_PERCENT: typing.Final[int] = 5
_SCANNED_PERCENT: typing.Final[int] = 90
_FINALIZING_PERCENT: typing.Final[int] = 95
_DONE_PERCENT: typing.Final[int] = 100


def compare_rows(
    *,
    old_rows: typing.Sequence[typing.Mapping[str, str | None]],
    new_rows: typing.Sequence[typing.Mapping[str, str | None]],
    key_cols: typing.Sequence[str],
    compare_cols: typing.Sequence[str],
    options: DiffOptions | None = None,
) -> RowDiff:
    steps = iter_compare_rows(
        old_rows=old_rows,
        new_rows=new_rows,
        key_cols=key_cols,
        compare_cols=compare_cols,
        options=options,
    )
    while True:
        try:
            next(steps)
        except StopIteration as stop:
            return typing.cast(RowDiff, stop.value)


def iter_compare_rows(
    *,
    old_rows: typing.Sequence[typing.Mapping[str, str | None]],
    new_rows: typing.Sequence[typing.Mapping[str, str | None]],
    key_cols: typing.Sequence[str],
    compare_cols: typing.Sequence[str],
    options: DiffOptions | None = None,
) -> typing.Generator[ProgressInfo, None, RowDiff]:
    """Diff new_rows against old_rows, yielding a ProgressInfo at each step.

    Each yield is a point where the caller may suspend before resuming the scan. The RowDiff
    is the generator's return value.

    Rows are matched on the key built from key_cols. When old_rows holds the same key more
    than once, the last row wins, unless options.duplicate_keys is "error". Matched rows are
    compared on compare_cols only. added and modified follow the order of new_rows; removed
    follows the order in which each leftover key was first indexed.
    """
    opts = options or DiffOptions()
    key_cols = tuple(key_cols)
    compare_cols = tuple(compare_cols)

    old_row_ct = len(old_rows)
    yield ProgressInfo(
        phase=Phase.BUILD_OLD_MAP,
        processed=0,
        total=old_row_ct,
        percent=0,
        message="Indexing the old rows...",
    )

    index = _index_rows(rows=old_rows, key_cols=key_cols, options=opts)

    yield ProgressInfo(
        phase=Phase.BUILD_OLD_MAP,
        processed=old_row_ct,
        total=old_row_ct,
        percent=_INDEXED_PERCENT,
        message=f"Indexed {old_row_ct} old rows.",
    )

    total = len(new_rows)
    batch_size = max(1, total // 100)
    yield ProgressInfo(
        phase=Phase.SCAN_NEW_MAP,
        processed=0,
        total=total,
        percent=_INDEXED_PERCENT,
        message="Scanning the new rows...",
    )

    added: list[Row] = []
    modified: list[ModifiedRow] = []
    for processed, new_row in enumerate(map(to_row, new_rows), start=1):
        key = _row_key(row=new_row, key_cols=key_cols, options=opts)
        old_row = index.pop(key, None)
        if old_row is None:
            added.append(new_row)
        else:
            changes = _compare_row(old_row=old_row, new_row=new_row, compare_cols=compare_cols, options=opts)
            if changes:
                modified.append(ModifiedRow(key=key, old_row=old_row, new_row=new_row, changes=changes))

        if processed % batch_size == 0 or processed == total:
            yield ProgressInfo(
                phase=Phase.SCAN_NEW_MAP,
                processed=processed,
                total=total,
                percent=_INDEXED_PERCENT + processed * (_SCANNED_PERCENT - _INDEXED_PERCENT) // total,
                message=f"Scanning the new rows ({processed}/{total})...",
            )

    if total == 0:
        yield ProgressInfo(
            phase=Phase.SCAN_NEW_MAP,
            processed=0,
            total=0,
            percent=_SCANNED_PERCENT,
            message="There were no new rows to scan.",
        )

    yield ProgressInfo(
        phase=Phase.FINALIZING,
        processed=0,
        total=len(index),
        percent=_FINALIZING_PERCENT,
        message="Collecting the removed rows...",
    )

    removed = tuple(index.values())

    yield ProgressInfo(
        phase=Phase.FINALIZING,
        processed=len(removed),
        total=len(removed),
        percent=_FINALIZING_PERCENT,
        message=f"Collected {len(removed)} removed rows.",
    )

    yield ProgressInfo(
        phase=Phase.DONE,
        processed=total,
        total=total,
        percent=_DONE_PERCENT,
        message=f"{len(added)} added, {len(removed)} removed, {len(modified)} modified.",
    )

    return RowDiff(added=tuple(added), removed=removed, modified=tuple(modified))


def _index_rows(
    *,
    rows: typing.Iterable[typing.Mapping[str, str | None]],
    key_cols: tuple[str, ...],
    options: DiffOptions,
) -> dict[RowKey, Row]:
    index: dict[RowKey, Row] = {}
    for row in map(to_row, rows):
        key = _row_key(row=row, key_cols=key_cols, options=options)
        if options.duplicate_keys == "error" and key in index:
            raise DuplicateKey(key=key)

        index[key] = row
    return index


def _row_key(*, row: Row, key_cols: tuple[str, ...], options: DiffOptions) -> RowKey:
    if options.missing_columns == "error":
        _require_columns(row=row, cols=key_cols, role="key")

    return build_key(row, key_cols)


def _compare_row(
    *,
    old_row: Row,
    new_row: Row,
    compare_cols: tuple[str, ...],
    options: DiffOptions,
) -> tuple[ColumnChange, ...]:
    if options.missing_columns == "error":
        _require_columns(row=old_row, cols=compare_cols, role="compare")
        _require_columns(row=new_row, cols=compare_cols, role="compare")

    changes: list[ColumnChange] = []
    for col in compare_cols:
        old_value = old_row.get(col, "")
        new_value = new_row.get(col, "")
        if old_value != new_value:
            changes.append(ColumnChange(column=col, old_value=old_value, new_value=new_value))
    return tuple(changes)


def _require_columns(*, row: Row, cols: tuple[str, ...], role: typing.Literal["key", "compare"]) -> None:
    for col in cols:
        if col not in row:
            raise MissingColumn(column_name=col, role=role)
