import typing

import pydantic

__all__ = ("DiffOptions",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class DiffOptions:
    duplicate_keys: typing.Literal["last", "error"] = "last"
    missing_columns: typing.Literal["empty", "error"] = "empty"
