import json
import typing

from tabdiff import data

__all__ = ("render_json", "render_table", "render_text")


def render_text(row_diff: data.RowDiff, /, *, group_by: typing.Literal["row", "column"] = "row") -> str:
    lines = [
        f"Added: {len(row_diff.added)}",
        f"Removed: {len(row_diff.removed)}",
        f"Modified: {len(row_diff.modified)}",
        "",
        "[added]",
        *_render_rows(row_diff.added),
        "[removed]",
        *_render_rows(row_diff.removed),
        "[modified]",
    ]

    if not row_diff.modified:
        lines.append("  (none)")
    elif group_by == "column":
        lines.extend(_render_modified_by_column(row_diff.modified))
    else:
        lines.extend(_render_modified_by_row(row_diff.modified))

    return "\n".join(lines)


def render_json(row_diff: data.RowDiff, /) -> str:
    return json.dumps(
        {
            "added": [dict(row) for row in row_diff.added],
            "removed": [dict(row) for row in row_diff.removed],
            "modified": [
                {
                    "key": modified_row.key,
                    "oldRow": dict(modified_row.old_row),
                    "newRow": dict(modified_row.new_row),
                    "changes": [
                        {"column": change.column, "oldValue": change.old_value, "newValue": change.new_value}
                        for change in modified_row.changes
                    ],
                }
                for modified_row in row_diff.modified
            ],
        },
        ensure_ascii=False,
        indent=2,
    )


def _render_rows(rows: tuple[data.Row, ...], /) -> list[str]:
    if not rows:
        return ["  (none)"]
    return ["  " + ", ".join(f"{col}={value}" for col, value in row.items()) for row in rows]


def _render_modified_by_row(modified: tuple[data.ModifiedRow, ...], /) -> list[str]:
    lines: list[str] = []
    for modified_row in modified:
        lines.append(f"  {modified_row.key}")
        for change in modified_row.changes:
            lines.append(f"    {change.column}: {change.old_value!r} -> {change.new_value!r}")
    return lines


def _render_modified_by_column(modified: tuple[data.ModifiedRow, ...], /) -> list[str]:
    by_column: dict[str, list[tuple[data.RowKey, data.ColumnChange]]] = {}
    for modified_row in modified:
        for change in modified_row.changes:
            by_column.setdefault(change.column, []).append((modified_row.key, change))

    lines: list[str] = []
    for column, changes in by_column.items():
        lines.append(f"  {column}")
        for key, change in changes:
            lines.append(f"    {key}: {change.old_value!r} -> {change.new_value!r}")
    return lines


def render_table(table: data.ParsedTable, /) -> str:
    lines = [" | ".join(table.columns)]
    lines.extend(" | ".join(row.get(col) or "" for col in table.columns) for row in table.rows)
    return "\n".join(lines)
