"""Request dispatch for client nodes.

WARNING: This is an internal module. Use fluent_client.create_client instead.
"""

from fluent_client._internal.dispatch.casing import (
    convert_to_camel_case,
    convert_to_snake_case,
)
from fluent_client._internal.dispatch.dispatcher import (
    RequestDispatcher,
    bind_verb,
    build_url,
    deep_merge,
)
from fluent_client._internal.dispatch.models import (
    ArgKind,
    ClientOptions,
    RequestCall,
    classify_arg,
)

__all__ = [
    "RequestDispatcher",
    "bind_verb",
    "build_url",
    "deep_merge",
    "convert_to_camel_case",
    "convert_to_snake_case",
    "ArgKind",
    "ClientOptions",
    "RequestCall",
    "classify_arg",
]
