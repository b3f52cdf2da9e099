"""Per-group cache policy.

The ``cache`` section of the exposure document maps a group name to a
descriptor; this module looks the descriptor up and renders it into
response headers::

    cache:
      default: {max_age: 600, public: true}
      staff: {private: true, max_age: 60, vary: [Cookie]}
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime
from email.utils import format_datetime, formatdate
from typing import Any

from jsrouting.errors import ConfigurationError
from jsrouting.sources import ExposureConfig

# Accepted descriptor keys -> canonical field name
_ALIASES: dict[str, str] = {
    "max_age": "max_age",
    "maxage": "max_age",
    "s_maxage": "s_maxage",
    "smaxage": "s_maxage",
    "public": "public",
    "private": "private",
    "immutable": "immutable",
    "must_revalidate": "must_revalidate",
    "no_cache": "no_cache",
    "no_store": "no_store",
    "etag": "etag",
    "last_modified": "last_modified",
    "vary": "vary",
}

_FLAGS = ("immutable", "must_revalidate", "no_cache", "no_store")


@dataclass(frozen=True, slots=True)
class CachePolicy:
    """Cache directives for one group's payload.

    ``visibility`` is ``"public"``, ``"private"`` or ``None`` (let the
    cache decide). A shared-cache max age implies ``public``.
    """

    max_age: int | None = None
    s_maxage: int | None = None
    visibility: str | None = None
    immutable: bool = False
    must_revalidate: bool = False
    no_cache: bool = False
    no_store: bool = False
    etag: str | None = None
    last_modified: str | None = None
    vary: tuple[str, ...] = ()

    @classmethod
    def from_descriptor(cls, descriptor: Mapping[str, Any], group: str = "") -> "CachePolicy":
        """Validate a descriptor from the config file.

        Raises ``ConfigurationError`` on unknown keys or values of the
        wrong type; a half-understood policy is never returned.
        """
        where = f"cache.{group}" if group else "cache"
        if not isinstance(descriptor, Mapping):
            msg = f"{where} must be a mapping, got {type(descriptor).__name__}"
            raise ConfigurationError(msg)

        values: dict[str, Any] = {}
        for key, value in descriptor.items():
            canonical = _ALIASES.get(str(key).lower())
            if canonical is None:
                known = ", ".join(sorted(_ALIASES))
                msg = f"{where}: unsupported cache option {key!r} (expected one of: {known})"
                raise ConfigurationError(msg)
            values[canonical] = value

        kwargs: dict[str, Any] = {}
        for name in ("max_age", "s_maxage"):
            if values.get(name) is not None:
                kwargs[name] = _seconds(values[name], f"{where}.{name}")

        # private wins when both are set, matching the order they are applied in
        if "public" in values:
            kwargs["visibility"] = "public" if _flag(values["public"], f"{where}.public") else "private"
        if "private" in values:
            kwargs["visibility"] = "private" if _flag(values["private"], f"{where}.private") else "public"
        if kwargs.get("s_maxage") is not None and "visibility" not in kwargs:
            kwargs["visibility"] = "public"

        for name in _FLAGS:
            if name in values:
                kwargs[name] = _flag(values[name], f"{where}.{name}")

        if values.get("etag") is not None:
            kwargs["etag"] = _etag(values["etag"])
        if values.get("last_modified") is not None:
            kwargs["last_modified"] = _http_date(values["last_modified"], f"{where}.last_modified")
        if values.get("vary") is not None:
            vary = values["vary"]
            kwargs["vary"] = (vary,) if isinstance(vary, str) else tuple(str(v) for v in vary)

        return cls(**kwargs)

    @property
    def cache_control(self) -> str:
        """The ``Cache-Control`` header value, or ``""`` for no directives."""
        directives: list[str] = []
        if self.visibility:
            directives.append(self.visibility)
        if self.max_age is not None:
            directives.append(f"max-age={self.max_age}")
        if self.s_maxage is not None:
            directives.append(f"s-maxage={self.s_maxage}")
        if self.must_revalidate:
            directives.append("must-revalidate")
        if self.no_cache:
            directives.append("no-cache")
        if self.no_store:
            directives.append("no-store")
        if self.immutable:
            directives.append("immutable")
        return ", ".join(directives)

    def headers(self) -> tuple[tuple[str, str], ...]:
        """Response headers carrying this policy."""
        result: list[tuple[str, str]] = []
        if self.cache_control:
            result.append(("Cache-Control", self.cache_control))
        if self.etag is not None:
            result.append(("ETag", self.etag))
        if self.last_modified is not None:
            result.append(("Last-Modified", self.last_modified))
        if self.vary:
            result.append(("Vary", ", ".join(self.vary)))
        return tuple(result)


def resolve_cache(config: ExposureConfig, group: str | None) -> CachePolicy | None:
    """Cache policy for *group*, or ``None`` when there is none.

    ``None`` for a missing or empty group, for a document without a
    cache section, and for a group the section does not mention.
    """
    if not group or config.cache is None:
        return None
    if group not in config.cache:
        return None
    return CachePolicy.from_descriptor(config.cache[group], group)


def _seconds(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{where} must be a non-negative integer, got {value!r}"
        raise ConfigurationError(msg)
    return value


def _flag(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        msg = f"{where} must be true or false, got {value!r}"
        raise ConfigurationError(msg)
    return value


def _etag(value: Any) -> str:
    tag = str(value)
    if tag.startswith(('"', 'W/"')):
        return tag
    return f'"{tag}"'


def _http_date(value: Any, where: str) -> str:
    if isinstance(value, datetime):
        aware = value if value.tzinfo else value.replace(tzinfo=UTC)
        return format_datetime(aware.astimezone(UTC), usegmt=True)
    if isinstance(value, date):
        return format_datetime(datetime(value.year, value.month, value.day, tzinfo=UTC), usegmt=True)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return formatdate(value, usegmt=True)
    if isinstance(value, str):
        return value
    msg = f"{where} must be a date, timestamp or HTTP date string, got {value!r}"
    raise ConfigurationError(msg)
