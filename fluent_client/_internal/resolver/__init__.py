"""Path resolution for client nodes."""

from fluent_client._internal.resolver.node import (
    ClientNode,
    resolve_access,
    resolve_invocation,
)

__all__ = [
    "ClientNode",
    "resolve_access",
    "resolve_invocation",
]
