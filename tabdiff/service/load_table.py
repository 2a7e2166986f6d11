import pathlib

from tabdiff import adapter, data

__all__ = ("load_table",)


def load_table(*, file: pathlib.Path) -> data.ParsedTable | data.Error:
    try:
        text = adapter.fs.load_text(file)
        if isinstance(text, data.Error):
            return text

        return adapter.parse.parse_text(text, ext=adapter.fs.get_extension(file.name))
    except Exception as e:
        return data.Error.new(f"An error occurred while parsing the file: {e!s}", file=file)
