import asyncio
import datetime
import pathlib
import typing

from loguru import logger

from tabdiff import data
from tabdiff.service.diff import diff
from tabdiff.service.load_table import load_table

__all__ = ("compare_files",)


async def compare_files(
    *,
    old_file: pathlib.Path,
    new_file: pathlib.Path,
    key_cols: typing.Sequence[str],
    compare_cols: typing.Sequence[str] | None,
    options: data.DiffOptions,
    on_progress: data.ProgressCallback | None = None,
    timeout_seconds: float | None = None,
) -> data.CompareResult | data.Error:
    """Load both files, check that they line up, then diff them.

    When compare_cols is None, every column that is not a key column is compared.
    """
    try:
        start = datetime.datetime.now()

        if not key_cols:
            return data.Error.new("At least one key column is required.", old_file=old_file, new_file=new_file)

        old_table = load_table(file=old_file)
        if isinstance(old_table, data.Error):
            return old_table

        new_table = load_table(file=new_file)
        if isinstance(new_table, data.Error):
            return new_table

        if not old_table.columns:
            return data.Error.new(f"{old_file.name} does not have a header row.", old_file=old_file)

        schema_error = data.check_schema(old_columns=old_table.columns, new_columns=new_table.columns)
        if schema_error is not None:
            return schema_error

        if compare_cols is None:
            final_compare_cols = tuple(col for col in old_table.columns if col not in key_cols)
        else:
            final_compare_cols = tuple(compare_cols)

        unknown_cols = [col for col in (*key_cols, *final_compare_cols) if col not in old_table.columns]
        if unknown_cols:
            return data.Error.new(
                f"The following columns were not found in the files: {', '.join(unknown_cols)}.",
                columns=old_table.columns,
            )

        logger.info(
            f"Comparing {len(old_table.rows)} rows in {old_file.name} to {len(new_table.rows)} rows in "
            f"{new_file.name} on {', '.join(key_cols)}..."
        )

        row_diff = await asyncio.wait_for(
            diff(
                old_rows=old_table.rows,
                new_rows=new_table.rows,
                key_cols=key_cols,
                compare_cols=final_compare_cols,
                on_progress=on_progress,
                options=options,
            ),
            timeout=timeout_seconds,
        )

        execution_millis = int((datetime.datetime.now() - start).total_seconds() * 1000)

        logger.info(
            f"There were {len(row_diff.added)} rows added, {len(row_diff.modified)} modified, "
            f"and {len(row_diff.removed)} removed ({execution_millis} ms)."
        )

        return data.CompareResult(
            old_file=old_file,
            new_file=new_file,
            columns=old_table.columns,
            key_cols=tuple(key_cols),
            compare_cols=final_compare_cols,
            diff=row_diff,
            execution_millis=execution_millis,
        )
    except asyncio.TimeoutError:
        return data.Error.new(
            f"The comparison did not finish within {timeout_seconds} seconds.",
            old_file=old_file,
            new_file=new_file,
        )
    except data.Error as e:
        return e
    except Exception as e:
        return data.Error.new(
            str(e),
            old_file=old_file,
            new_file=new_file,
            key_cols=tuple(key_cols),
            compare_cols=None if compare_cols is None else tuple(compare_cols),
        )
