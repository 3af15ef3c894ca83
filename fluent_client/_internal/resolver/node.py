"""Client nodes and the resolver that extends them.

A node is an immutable handle for "the API rooted at some URL, with some
effective configuration". Attribute access and calls on a node never mutate
it; they go through resolve_access and resolve_invocation, which return
either a new node one or more segments deeper or a bound verb.
"""

from collections.abc import Callable
from typing import Any

from pydantic.alias_generators import to_snake

from fluent_client._internal.debug import log_debug
from fluent_client._internal.dispatch.dispatcher import bind_verb
from fluent_client._internal.dispatch.models import VERBS
from fluent_client.exceptions import WhitelistViolationError


class ClientNode:
    """A URL plus configuration, extended by attribute access and calls.

    Example:
        client.users(1).repos.get()  # GET <base>/users/1/repos
    """

    __slots__ = ("_base_url", "_config")

    def __init__(self, base_url: str, config: dict[str, Any]) -> None:
        object.__setattr__(self, "_base_url", base_url)
        object.__setattr__(self, "_config", config)

    @property
    def _url(self) -> str:
        """The accumulated URL of this node."""
        return self._base_url

    def __getattr__(self, name: str) -> Any:
        return resolve_access(self, name)

    def __call__(self, *segments: Any) -> "ClientNode":
        return resolve_invocation(self, segments)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "ClientNode":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "ClientNode":
        return self

    def __repr__(self) -> str:
        return f"<ClientNode {self._base_url}>"


def _is_introspection_name(name: str) -> bool:
    """Whether name is a hook probed by the interpreter or by IPython."""
    if name.startswith("__") and name.endswith("__"):
        return True
    return name.startswith(("_repr_", "_ipython_"))


def in_whitelist(whitelist: Any, name: str) -> bool:
    """Whether name is allowed by a flat or hierarchical whitelist."""
    if isinstance(whitelist, dict):
        return name in whitelist
    if isinstance(whitelist, (list, tuple)):
        return name in whitelist
    return False


def narrow_whitelist(whitelist: Any, name: str) -> Any:
    """Return the whitelist that applies below the segment name.

    A mapping narrows to the entry under name; an entry that is neither a
    list nor a mapping is a leaf and allows no further segments. A flat list
    applies at every depth.
    """
    if isinstance(whitelist, dict):
        sub = whitelist.get(name)
        if isinstance(sub, (dict, list, tuple)):
            return sub
        return []
    return whitelist


def reserved_members(node: ClientNode) -> dict[str, Callable[..., Any]]:
    """Return the verb and alias callables of a node, keyed by name."""
    members: dict[str, Callable[..., Any]] = {
        verb: bind_verb(node._base_url, node._config, verb.upper()) for verb in VERBS
    }
    for alias, target in (node._config.get("aliases") or {}).items():
        members[alias] = members[target.lower()]
    return members


def resolve_access(node: ClientNode, name: str) -> Any:
    """Resolve node.<name> to a deeper node or a bound verb.

    Args:
        node: The node being accessed.
        name: The attribute name.

    Returns:
        A new ClientNode for path segments, or a dispatch callable for verbs
        and aliases.

    Raises:
        AttributeError: For dunder names probed by Python tooling.
        WhitelistViolationError: If a whitelist is configured and name is
            neither listed nor a verb or alias.
    """
    if _is_introspection_name(name):
        raise AttributeError(name)

    config = node._config
    whitelist = config.get("whitelist")
    segment = to_snake(name) if config.get("camel_case") else name

    if whitelist is not None and in_whitelist(whitelist, segment):
        child_config = dict(config)
        child_config["whitelist"] = narrow_whitelist(whitelist, segment)
        return ClientNode(f"{node._base_url}/{segment}", child_config)

    members = reserved_members(node)
    if segment in members:
        return members[segment]
    # Aliases and verbs keep their spelling even when camel_case renamed them
    if name in members:
        return members[name]
    # Verbs are case-insensitive, aliases are not
    if segment.lower() in VERBS:
        return members[segment.lower()]

    if whitelist is not None:
        log_debug(config, f"Rejected segment {segment!r} at {node._base_url}")
        raise WhitelistViolationError(segment)

    return ClientNode(f"{node._base_url}/{segment}", config)


def resolve_invocation(node: ClientNode, segments: tuple[Any, ...]) -> ClientNode:
    """Resolve node(*segments) to a node with the segments appended.

    Invocation never consults the whitelist and never case-converts.
    """
    path = "/".join(str(segment) for segment in segments)
    return ClientNode(f"{node._base_url}/{path}", node._config)
