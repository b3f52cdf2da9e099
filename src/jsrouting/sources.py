"""Exposure configuration sources.

A *config source* produces the parsed exposure document — the mapping
that says which routes are exposed to which groups and how each group's
payload may be cached::

    js_routing:
      routes_to_expose:
        home: true
        admin_dashboard: [staff]
      cache:
        default: {max_age: 600, public: true}

Sources are read once per request; ``ExposureConfig`` is the validated,
read-only view the resolvers work on.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

import yaml

from jsrouting.errors import ConfigurationError

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@runtime_checkable
class ConfigSource(Protocol):
    """Anything that can produce the parsed exposure document."""

    def load(self) -> Mapping[str, Any]: ...


class MappingConfigSource:
    """A config source over an in-memory mapping."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def load(self) -> Mapping[str, Any]:
        return self._data


class YamlConfigSource:
    """Reads the exposure document from a YAML file on every ``load()``.

    The file is re-read each time so edits apply to the next request
    without a restart.
    """

    __slots__ = ("path",)

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> Mapping[str, Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            msg = f"Routing config file not found: {self.path}"
            raise ConfigurationError(msg) from exc
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            msg = f"Routing config file {self.path} is not valid YAML: {exc}"
            raise ConfigurationError(msg) from exc
        if payload is None:
            return {}
        if not isinstance(payload, Mapping):
            msg = f"Routing config file {self.path} must contain a mapping, got {type(payload).__name__}"
            raise ConfigurationError(msg)
        return payload


def _section(data: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        msg = f"{where}{key} must be a mapping, got {type(value).__name__}"
        raise ConfigurationError(msg)
    return value


@dataclass(frozen=True, slots=True)
class ExposureConfig:
    """Validated view of the exposure document.

    ``cache`` is ``None`` when the document has no cache section, which
    is different from an empty one only in intent; both resolve to no
    policy.
    """

    routes_to_expose: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    cache: Mapping[str, Any] | None = None

    @classmethod
    def from_document(cls, document: Mapping[str, Any], key: str = "js_routing") -> "ExposureConfig":
        """Extract the section under *key*.

        A missing section or missing sub-sections mean "nothing exposed,
        no cache policy". A section of the wrong shape is an operator
        mistake and raises ``ConfigurationError``.
        """
        root = _section(document, key, "")
        if root is None:
            return cls()
        routes = _section(root, "routes_to_expose", f"{key}.")
        cache = _section(root, "cache", f"{key}.")
        return cls(routes_to_expose=routes if routes is not None else _EMPTY, cache=cache)

    @classmethod
    def load(cls, source: ConfigSource, key: str = "js_routing") -> "ExposureConfig":
        """Load and validate in one step."""
        return cls.from_document(source.load(), key)
