import functools
import os
import pathlib
import sys

from tabdiff import data

__all__ = (
    "decode_text",
    "detect_encoding",
    "get_config_path",
    "get_extension",
    "get_log_folder",
    "load_text",
)


_UTF8_BOM = b"\xef\xbb\xbf"


@functools.lru_cache
def _root_dir() -> pathlib.Path | data.Error:
    if getattr(sys, "frozen", False):
        path = pathlib.Path(os.path.dirname(sys.executable))

        if not path.exists():
            return data.Error.new(
                "os.path.dirname(sys.executable) returned an invalid path for a frozen executable."
            )

        return path
    else:
        try:
            return next(p for p in pathlib.Path(__file__).parents if (p / "tabdiff").exists())
        except StopIteration:
            return data.Error.new(f"tabdiff not found in path, {__file__}.")


@functools.lru_cache
def get_config_path() -> pathlib.Path | data.Error:
    try:
        root = _root_dir()
        if isinstance(root, data.Error):
            return root

        return root / "assets" / "config.json"
    except Exception as e:
        return data.Error.new(str(e))


@functools.lru_cache
def get_log_folder() -> pathlib.Path | data.Error:
    try:
        root = _root_dir()
        if isinstance(root, data.Error):
            return root

        folder = root / "logs"
        folder.mkdir(exist_ok=True)
        return folder
    except Exception as e:
        return data.Error.new(str(e))


def get_extension(file_name: str, /) -> str:
    suffix = pathlib.PurePath(file_name).suffix
    if not suffix:
        return str(data.TableFormat.CSV)
    return suffix[1:].lower()


def detect_encoding(raw: bytes, /) -> str:
    """Guess the encoding of a file's bytes: a UTF-8 BOM, then strict UTF-8, else Windows Shift-JIS (cp932)."""
    if raw.startswith(_UTF8_BOM):
        return "utf-8-sig"

    try:
        raw.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        return "cp932"


def decode_text(raw: bytes, /) -> str:
    return raw.decode(detect_encoding(raw), errors="replace")


def load_text(path: pathlib.Path, /) -> str | data.Error:
    try:
        if not path.exists():
            return data.Error.new(f"The file specified, {path.resolve()!s}, does not exist.", path=path)

        if not path.is_file():
            return data.Error.new(f"The path specified, {path.resolve()!s}, is not a file.", path=path)

        return decode_text(path.read_bytes())
    except Exception as e:
        return data.Error.new(f"An error occurred while reading the file: {e!s}", path=path)
