"""Query string parameters, first value wins."""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs


class QueryParams(Mapping[str, str]):
    """Parsed query string.

    Blank values are kept, so ``?callback=`` reads as ``""`` rather
    than as a missing parameter.
    """

    __slots__ = ("_values",)

    def __init__(self, query_string: bytes = b"") -> None:
        self._values = parse_qs(query_string.decode("latin-1"), keep_blank_values=True)

    def __getitem__(self, name: str) -> str:
        return self._values[name][0]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"QueryParams({dict(self)!r})"
