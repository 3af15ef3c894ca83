"""Fluent HTTP client builder.

Turns attribute access and calls into URL paths and dispatches requests
through a pluggable transport:

    client = create_client("https://api.example.com")
    client.users(1).repos.get()  # GET https://api.example.com/users/1/repos

Public API:
    create_client - Create a client from a base URL and options
    create_client_from_env - Create a client from environment variables
    HttpxTransport, AsyncHttpxTransport - Transports backed by httpx
"""

from fluent_client._internal.http import AsyncHttpxTransport, HttpxTransport
from fluent_client._internal.resolver import ClientNode
from fluent_client._version import __version__
from fluent_client.client import create_client, create_client_from_env
from fluent_client.exceptions import (
    FluentConfigError,
    FluentError,
    InvalidCamelCaseConfigError,
    MissingTransportError,
    MissingUrlError,
    WhitelistViolationError,
)

__all__ = [
    "__version__",
    "create_client",
    "create_client_from_env",
    "ClientNode",
    "HttpxTransport",
    "AsyncHttpxTransport",
    "FluentError",
    "FluentConfigError",
    "MissingUrlError",
    "MissingTransportError",
    "InvalidCamelCaseConfigError",
    "WhitelistViolationError",
]
