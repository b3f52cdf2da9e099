"""Path parameter patterns.

Built-in converters for route path segments like ``{id:int}``. The
patterns double as the default requirement clients receive for a
parameter that declares none.
"""

# Regex for each supported converter
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "float": r"\d+(?:\.\d+)?",
    "path": r".+",
}

# Host placeholders stop at the next label
HOST_PATTERN = r"[^.]+"


def param_pattern(param_type: str) -> str:
    """Regex for a converter name; unknown names fall back to ``str``."""
    return CONVERTERS.get(param_type, CONVERTERS["str"])
