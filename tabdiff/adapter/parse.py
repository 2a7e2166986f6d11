import csv
import io
import typing

from tabdiff import data

__all__ = ("PARSERS", "parse_csv", "parse_text", "parse_tsv")


def parse_csv(text: str, /) -> data.ParsedTable:
    return _parse(text, delimiter=",", quoting=csv.QUOTE_MINIMAL)


def parse_tsv(text: str, /) -> data.ParsedTable:
    return _parse(text, delimiter="\t", quoting=csv.QUOTE_NONE)


PARSERS: typing.Final[dict[data.TableFormat, typing.Callable[[str], data.ParsedTable]]] = {
    data.TableFormat.CSV: parse_csv,
    data.TableFormat.TSV: parse_tsv,
}


def parse_text(text: str, /, ext: str) -> data.ParsedTable:
    return PARSERS[data.TableFormat.from_extension(ext)](text)


def _parse(text: str, /, *, delimiter: str, quoting: int) -> data.ParsedTable:
    """Split text into a header and rows.

    Cells are trimmed. Rows shorter than the header are padded with empty strings, and cells
    beyond the header are dropped.
    """
    stripped = text.strip()
    if not stripped:
        return data.ParsedTable(columns=(), rows=())

    lines = csv.reader(io.StringIO(stripped), delimiter=delimiter, quoting=quoting, strict=True)

    columns = tuple(col.strip() for col in next(lines))

    rows = tuple(
        data.FrozenDict(
            {col: values[i].strip() if i < len(values) else "" for i, col in enumerate(columns)}
        )
        for values in lines
    )

    return data.ParsedTable(columns=columns, rows=rows)
