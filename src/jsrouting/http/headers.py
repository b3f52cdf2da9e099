"""Case-insensitive view over ASGI request headers."""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Request headers keyed by lower-cased name.

    Built from the ``(bytes, bytes)`` pairs of an ASGI scope. When a
    name repeats, the first value is kept.
    """

    __slots__ = ("_index",)

    def __init__(self, pairs: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        index: dict[str, str] = {}
        for name, value in pairs:
            index.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        self._index = index

    def __getitem__(self, name: str) -> str:
        return self._index[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Headers({self._index!r})"

    def get(self, name: str, default: str | None = None) -> str | None:  # type: ignore[override]
        return self._index.get(name.lower(), default)
