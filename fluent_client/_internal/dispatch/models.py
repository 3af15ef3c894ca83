"""Pydantic models and constants for client configuration and dispatch."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

# =============================================================================
# Constants
# =============================================================================

VERBS = ("get", "post", "put", "patch", "delete", "head", "options")
BODY_VERBS = frozenset({"POST", "PUT", "PATCH"})

# Options consumed by the client itself, never forwarded to the transport
CONFIG_KEYS = (
    "return_body",
    "transport",
    "whitelist",
    "camel_case",
    "extension",
    "aliases",
    "send_as_body",
    "debug",
)

JSON_CONTENT_TYPE = "application/json"

# =============================================================================
# Client Options
# =============================================================================


class ClientOptions(BaseModel):
    """Validation model for the options passed to create_client.

    Only the shape of recognized options is checked here. Unknown keys are
    allowed and reach the transport untouched.
    """

    transport: Callable[..., Any] | None = None
    whitelist: list[str] | dict[str, Any] | None = None
    aliases: dict[str, str] | None = None
    return_body: bool = True
    json_: Any = Field(default=True, alias="json")
    camel_case: bool = False
    extension: str | None = None
    send_as_body: bool = False
    headers: dict[str, Any] | None = None
    debug: bool = False

    model_config = {
        "extra": "allow",
        "arbitrary_types_allowed": True,
        "populate_by_name": True,
    }

    @field_validator("aliases")
    @classmethod
    def aliases_target_verbs(cls, v: dict[str, str] | None) -> dict[str, str] | None:
        if v is None:
            return v
        for name, target in v.items():
            if target.lower() not in VERBS:
                raise ValueError(f"alias {name!r} must point at one of {', '.join(VERBS)}")
        return v

    @field_validator("extension")
    @classmethod
    def extension_without_dot(cls, v: str | None) -> str | None:
        if v is not None and v.startswith("."):
            raise ValueError("extension must not start with a dot")
        return v


# =============================================================================
# Dispatch
# =============================================================================


class ArgKind(str, Enum):
    """Tag for a positional argument passed to a verb."""

    SEGMENT = "segment"
    OPTIONS = "options"
    CALLBACK = "callback"
    OTHER = "other"


def classify_arg(value: Any) -> ArgKind:
    """Tag a verb argument by its type."""
    if isinstance(value, bool):
        return ArgKind.OTHER
    if isinstance(value, (str, int, float)):
        return ArgKind.SEGMENT
    if isinstance(value, dict):
        return ArgKind.OPTIONS
    if callable(value):
        return ArgKind.CALLBACK
    return ArgKind.OTHER


class RequestCall(BaseModel):
    """A single transport invocation, built and consumed by one dispatch.

    Fields:
        url: Final request URL including extension and query string
        method: Upper-case HTTP verb
        options: Sanitized options handed to the transport
        extra_args: Remaining positional arguments for the transport
        callback: Trailing completion callback, if any
        transport: The transport function to call
        return_body: Whether the caller gets the body instead of the response
    """

    url: str
    method: str
    options: dict[str, Any]
    transport: Callable[..., Any]
    extra_args: list[Any] = []
    callback: Callable[..., Any] | None = None
    return_body: bool = True

    model_config = {"arbitrary_types_allowed": True}
