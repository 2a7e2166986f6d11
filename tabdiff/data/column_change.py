import pydantic

__all__ = ("ColumnChange",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class ColumnChange:
    column: str
    old_value: str | None
    new_value: str | None
