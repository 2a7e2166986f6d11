from __future__ import annotations

import typing

__all__ = ("DuplicateColumn", "DuplicateKey", "Error", "MissingColumn", "SchemaMismatch")


class Error(Exception):
    """Base class for errors occurring in the tabdiff codebase"""

    def __init__(self, *, message: str, context: dict[str, typing.Any]):
        self.message = message
        self.context = context

        super().__init__(message)

    @staticmethod
    def new(message: str, /, **context: typing.Any) -> Error:
        return Error(message=message, context=context)

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
            return f"{self.message} [{context_str}]"
        return self.message


class DuplicateKey(Error):
    def __init__(self, *, key: str):
        super().__init__(
            message=f"The key, {key!r}, appears more than once in the old rows.",
            context={"key": key},
        )


class MissingColumn(Error):
    def __init__(self, *, column_name: str, role: typing.Literal["key", "compare"]):
        super().__init__(
            message=f"The {role} column, {column_name!r}, is missing from a row.",
            context={"column_name": column_name, "role": role},
        )


class SchemaMismatch(Error):
    def __init__(self, *, old_only: tuple[str, ...], new_only: tuple[str, ...]):
        parts: list[str] = []
        if old_only:
            parts.append(f"columns only in the old file: {', '.join(old_only)}")
        if new_only:
            parts.append(f"columns only in the new file: {', '.join(new_only)}")

        super().__init__(
            message=f"The files do not share the same columns ({'; '.join(parts)}).",
            context={"old_only": old_only, "new_only": new_only},
        )


class DuplicateColumn(Error):
    def __init__(self, *, side: typing.Literal["old", "new"], column_names: tuple[str, ...]):
        super().__init__(
            message=f"The {side} file's header repeats the columns: {', '.join(column_names)}.",
            context={"side": side, "column_names": column_names},
        )
