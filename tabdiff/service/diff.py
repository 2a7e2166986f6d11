import asyncio
import typing

from tabdiff import data

__all__ = ("diff",)


async def diff(
    *,
    old_rows: typing.Sequence[typing.Mapping[str, str | None]],
    new_rows: typing.Sequence[typing.Mapping[str, str | None]],
    key_cols: typing.Sequence[str],
    compare_cols: typing.Sequence[str],
    on_progress: data.ProgressCallback | None = None,
    options: data.DiffOptions | None = None,
) -> data.RowDiff:
    """Diff the rows, handing control back to the event loop after every progress step.

    The result is the same as data.compare_rows for the same arguments. Cancelling the task
    that awaits this stops the scan at its next step.
    """
    reporter = data.ProgressReporter(on_progress)

    steps = data.iter_compare_rows(
        old_rows=old_rows,
        new_rows=new_rows,
        key_cols=key_cols,
        compare_cols=compare_cols,
        options=options,
    )
    while True:
        try:
            info = next(steps)
        except StopIteration as stop:
            return typing.cast(data.RowDiff, stop.value)

        reporter.emit(info)

        await asyncio.sleep(0)
