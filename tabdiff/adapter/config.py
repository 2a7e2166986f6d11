import functools
import json
import pathlib
import typing

import pydantic

from tabdiff import data

__all__ = ("load",)


_KEYS: typing.Final[dict[str, str]] = {
    "duplicate-keys": "duplicate_keys",
    "missing-columns": "missing_columns",
    "timeout-seconds": "timeout_seconds",
    "progress-queue-size": "progress_queue_size",
}


@functools.lru_cache(maxsize=1)
def load(*, config_file: pathlib.Path) -> data.Config | data.Error:
    """Load the json config file.

    Every entry is optional; entries that are left out take the defaults of data.Config.
    """
    try:
        if not config_file.exists():
            return data.Error.new(
                f"The config file specified, {config_file.resolve()!s}, does not exist.",
                config_file=config_file,
            )

        with config_file.open("r", encoding="utf-8") as fh:
            d = json.load(fh)

        if not isinstance(d, dict):
            return data.Error.new(
                f"The config file must contain a json object, but got {type(d).__name__}.",
                config_file=config_file,
            )

        unrecognized = sorted(k for k in d.keys() if k not in _KEYS)
        if unrecognized:
            return data.Error.new(
                f"The config file contains unrecognized entries: {', '.join(unrecognized)}.",
                config_file=config_file,
            )

        return data.Config(**{_KEYS[k]: v for k, v in d.items()})
    except pydantic.ValidationError as e:
        return data.Error.new(f"The config file contains an invalid entry: {e!s}", config_file=config_file)
    except json.JSONDecodeError as e:
        return data.Error.new(f"The config file is not valid json: {e!s}", config_file=config_file)
    except Exception as e:
        return data.Error.new(
            f"An error occurred while loading the config file: {e!s}",
            config_file=config_file,
        )
