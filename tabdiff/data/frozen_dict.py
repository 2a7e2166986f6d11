import typing

__all__ = ("FrozenDict",)


class FrozenDict(dict[str, str | None]):
    def __hash__(self) -> int:  # type: ignore
        return hash(frozenset(self.items()))

    def _read_only(self, *args: typing.Any, **kwargs: typing.Any) -> typing.NoReturn:
        raise TypeError(f"{type(self).__name__} is read-only.")

    __setitem__ = _read_only
    __delitem__ = _read_only
    __ior__ = _read_only  # type: ignore
    clear = _read_only
    pop = _read_only
    popitem = _read_only
    setdefault = _read_only
    update = _read_only
