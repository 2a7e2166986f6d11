import typing

import pydantic

from tabdiff.data.diff_options import DiffOptions

__all__ = ("Config",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class Config:
    duplicate_keys: typing.Literal["last", "error"] = "last"
    missing_columns: typing.Literal["empty", "error"] = "empty"
    timeout_seconds: pydantic.PositiveFloat | None = None
    progress_queue_size: pydantic.PositiveInt = 100

    @property
    def diff_options(self) -> DiffOptions:
        return DiffOptions(duplicate_keys=self.duplicate_keys, missing_columns=self.missing_columns)
