import enum
import typing

import pydantic

__all__ = ("Phase", "ProgressCallback", "ProgressInfo")


class Phase(enum.Enum):
    BUILD_OLD_MAP = "buildOldMap"
    SCAN_NEW_MAP = "scanNewMap"
    FINALIZING = "finalizing"
    DONE = "done"

    def __repr__(self) -> str:
        return f"Phase.{self.name}"

    def __str__(self) -> str:
        return self.value


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class ProgressInfo:
    phase: Phase
    processed: pydantic.NonNegativeInt | None = None
    total: pydantic.NonNegativeInt | None = None
    percent: int | None = pydantic.Field(default=None, ge=0, le=100)
    message: str | None = None


ProgressCallback: typing.TypeAlias = typing.Callable[[ProgressInfo], None]
