"""Client factory.

Example usage:
    from fluent_client import create_client

    github = create_client("https://api.github.com", camel_case=True)

    # GET https://api.github.com/users/octocat/repos
    repos = github.users("octocat").repos.get()

    # POST https://api.github.com/user/repos
    github.user.repos.post({"json": {"name": "hello", "autoInit": True}})
"""

import os
from typing import Any

from pydantic import ValidationError

from fluent_client._internal.debug import log_debug
from fluent_client._internal.dispatch.models import ClientOptions
from fluent_client._internal.http import (
    USER_AGENT,
    HttpxTransport,
    create_http_client,
    discover_transport,
)
from fluent_client._internal.resolver import ClientNode
from fluent_client.exceptions import (
    FluentConfigError,
    InvalidCamelCaseConfigError,
    MissingTransportError,
    MissingUrlError,
)


def create_client(url: str | None, **options: Any) -> ClientNode:
    """Create the root node of a fluent client.

    Args:
        url: Base URL of the API. A single trailing slash is removed.
        **options: Client options. Recognized options are transport,
            whitelist, aliases, return_body, json, camel_case, extension,
            send_as_body, headers and debug. Anything else is handed to the
            transport with every request.

    Returns:
        The root ClientNode.

    Raises:
        MissingUrlError: If url is empty.
        MissingTransportError: If no transport was given and no default
            transport is available.
        InvalidCamelCaseConfigError: If camel_case is set without both json
            and return_body.
        FluentConfigError: If a recognized option has the wrong shape.
    """
    if not url:
        raise MissingUrlError("a base URL is required")

    try:
        ClientOptions.model_validate(options)
    except ValidationError as e:
        raise FluentConfigError(f"invalid client options: {e}") from e

    config = dict(options)
    config.setdefault("json", True)
    config.setdefault("return_body", True)

    if config.get("camel_case") and not (config["return_body"] and config["json"]):
        raise InvalidCamelCaseConfigError("camel_case must be used with return_body and json")

    if config.get("transport") is None:
        transport = discover_transport()
        if transport is None:
            raise MissingTransportError(
                "no transport available: pass transport=... or set FLUENT_CLIENT_TRANSPORT"
            )
        log_debug(config, f"Using default transport {type(transport).__name__}")
        config["transport"] = transport

    headers = dict(config.get("headers") or {})
    if not any(name.lower() == "user-agent" for name in headers):
        headers["User-Agent"] = USER_AGENT
    config["headers"] = headers

    base_url = url[:-1] if url.endswith("/") else url
    log_debug(config, f"Created client for {base_url}")
    return ClientNode(base_url, config)


def create_client_from_env(**overrides: Any) -> ClientNode:
    """Create a client from environment variables.

    Required environment variables:
        FLUENT_CLIENT_BASE_URL: Base URL of the API.

    Optional environment variables:
        FLUENT_CLIENT_DEBUG: Set to "1" to enable debug logging.
        FLUENT_CLIENT_TIMEOUT_MS: Timeout of the default transport in milliseconds.
        FLUENT_CLIENT_EXTENSION: File extension appended to request paths.

    Args:
        **overrides: Options that take precedence over the environment.

    Returns:
        The root ClientNode.

    Raises:
        MissingUrlError: If FLUENT_CLIENT_BASE_URL is not set.
        ValueError: If FLUENT_CLIENT_TIMEOUT_MS is not a valid integer.
    """
    url = os.environ.get("FLUENT_CLIENT_BASE_URL")
    options: dict[str, Any] = {}

    if os.environ.get("FLUENT_CLIENT_DEBUG", "") == "1":
        options["debug"] = True

    extension = os.environ.get("FLUENT_CLIENT_EXTENSION")
    if extension:
        options["extension"] = extension

    timeout_ms = os.environ.get("FLUENT_CLIENT_TIMEOUT_MS")
    if timeout_ms is not None and "transport" not in overrides:
        timeout = int(timeout_ms) / 1000
        options["transport"] = HttpxTransport(create_http_client(timeout=timeout))

    options.update(overrides)
    return create_client(url, **options)
