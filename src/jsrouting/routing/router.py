"""Route table with registration-ordered names and trie-based matching.

Routes are registered during setup and compiled into an immutable
lookup structure. The named view preserves registration order, which
is the order clients receive exposed routes in.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass

from jsrouting.errors import ConfigurationError, MethodNotAllowed, NotFound
from jsrouting.routing.params import HOST_PATTERN, param_pattern
from jsrouting.routing.route import PathSegment, Route, RouteMatch, RouterContext

_PLACEHOLDER = re.compile(r"\{(\w+)(?::(\w+))?\}")

# Characters that may precede a placeholder and become its prefix
_SEPARATORS = "/,;.:-_~+*=@|"

# Key under which method-agnostic routes are stored in the trie
_ANY_METHOD = "*"


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"          -> [PathSegment("users")]
        "/users/{id}"     -> [PathSegment("users"), PathSegment("{id}", is_param=True, ...)]
        "/users/{id:int}" -> [PathSegment("{id:int}", is_param=True, param_type="int")]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            param_name, _, param_type = inner.partition(":")
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type or "str",
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def compile_tokens(
    pattern: str,
    *,
    requirements: Mapping[str, str] | None = None,
    host: bool = False,
) -> list[list[str]]:
    """Compile a path or host pattern into client URL-building tokens.

    Text runs become ``["text", value]``; placeholders become
    ``["variable", prefix, regex, name]`` where *prefix* is the separator
    that precedes the placeholder. Tokens are returned last-first, the
    order URL generators consume them in so optional trailing
    parameters can be dropped.

    Examples::

        compile_tokens("/")             -> [["text", "/"]]
        compile_tokens("/blog/{slug}")  -> [["variable", "/", "[^/]+", "slug"], ["text", "/blog"]]
    """
    requirements = requirements or {}
    tokens: list[list[str]] = []
    pos = 0
    for match in _PLACEHOLDER.finditer(pattern):
        name, param_type = match.group(1), match.group(2) or "str"
        preceding = pattern[pos : match.start()]
        prefix = preceding[-1:] if preceding[-1:] and preceding[-1] in _SEPARATORS else ""
        text = preceding[: len(preceding) - len(prefix)]
        if text:
            tokens.append(["text", text])
        default = HOST_PATTERN if host else param_pattern(param_type)
        tokens.append(["variable", prefix, requirements.get(name, default), name])
        pos = match.end()
    if pos < len(pattern):
        tokens.append(["text", pattern[pos:]])
    tokens.reverse()
    return tokens


def path_variables(pattern: str) -> list[str]:
    """Placeholder names in *pattern*, in order of appearance."""
    return [m.group(1) for m in _PLACEHOLDER.finditer(pattern)]


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all", "children", "param_child", "routes_by_method")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.param_child: _ParamEdge | None = None
        self.catch_all: _CatchAllEdge | None = None
        self.routes_by_method: dict[str, Route] = {}


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """A catch-all (path) edge — consumes remaining path."""

    param_name: str
    routes_by_method: dict[str, Route]


class Router:
    """Named route table plus a compiled trie for matching.

    Usage::

        router = Router(context=RouterContext(host="example.com"))
        router.add(Route("/", name="home", methods=frozenset({"GET"})))
        router.add(Route("/users/{id:int}", name="user_show"))
        router.compile()

        router.route_collection()   # {"home": Route(...), "user_show": Route(...)}
        router.match("GET", "/users/42")
    """

    __slots__ = ("_compiled", "_context", "_named", "_root")

    def __init__(self, context: RouterContext | None = None) -> None:
        self._root = _TrieNode()
        self._compiled = False
        self._context = context or RouterContext()
        self._named: dict[str, Route] = {}

    def add(self, route: Route) -> None:
        """Add a route. Must be called before compile().

        Raises ``ConfigurationError`` when the name is already taken.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if route.name is not None:
            if route.name in self._named:
                msg = f"Duplicate route name {route.name!r} ({route.path!r})."
                raise ConfigurationError(msg)
            self._named[route.name] = route
        self._insert(route)

    def _insert(self, route: Route) -> None:
        methods = route.methods or frozenset({_ANY_METHOD})
        node = self._root
        for seg in parse_path(route.path):
            if seg.is_param and seg.param_type == "path":
                if node.catch_all is None:
                    node.catch_all = _CatchAllEdge(param_name=seg.param_name or "path", routes_by_method={})
                for method in methods:
                    node.catch_all.routes_by_method[method] = route
                return
            if seg.is_param:
                if node.param_child is None:
                    pattern = route.requirements.get(seg.param_name or "", param_pattern(seg.param_type))
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        regex=re.compile(f"^{pattern}$"),
                        node=_TrieNode(),
                    )
                node = node.param_child.node
            else:
                node = node.children.setdefault(seg.value, _TrieNode())
        for method in methods:
            node.routes_by_method[method] = route

    def route_collection(self) -> dict[str, Route]:
        """Named routes in registration order."""
        return dict(self._named)

    def get_context(self) -> RouterContext:
        """The configured router context."""
        return self._context

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against the trie.

        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        parts = [p for p in path.strip("/").split("/") if p]
        result = self._match_node(self._root, parts, 0, {})
        if result is None:
            raise NotFound(f"No route matches {method} {path!r}")

        routes_by_method, params = result
        route = routes_by_method.get(method) or routes_by_method.get(_ANY_METHOD)
        if route is not None:
            return RouteMatch(route=route, path_params=params)
        raise MethodNotAllowed(frozenset(routes_by_method))

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[dict[str, Route], dict[str, str]] | None:
        if index == len(parts):
            if node.routes_by_method:
                return node.routes_by_method, params
            return None

        part = parts[index]

        # Static first, then parameter, then catch-all
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        edge = node.param_child
        if edge is not None and edge.regex.match(part):
            result = self._match_node(edge.node, parts, index + 1, {**params, edge.param_name: part})
            if result is not None:
                return result

        if node.catch_all is not None:
            remaining = "/".join(parts[index:])
            return node.catch_all.routes_by_method, {**params, node.catch_all.param_name: remaining}

        return None

