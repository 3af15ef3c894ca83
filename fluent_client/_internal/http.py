"""httpx-backed transports and default transport discovery."""

import os
from collections.abc import Callable
from functools import lru_cache
from typing import Any

import httpx

from fluent_client._version import __version__

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"fluent-client/{__version__}"

# Options forwarded to httpx under the same name
_PASSTHROUGH_OPTIONS = ("params", "cookies", "files", "timeout", "follow_redirects", "auth")


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.
        base_url: Optional base URL for all requests.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": USER_AGENT},
    )


def create_async_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
    base_url: str | None = None,
) -> httpx.AsyncClient:
    """Create configured async HTTP client. See create_http_client."""
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        headers={"User-Agent": USER_AGENT},
    )


def request_kwargs(options: dict[str, Any]) -> dict[str, Any]:
    """Translate client options into keyword arguments for httpx.

    The json option is a request body when it holds a dict or list; set to
    True it only asks for response parsing. A dict or list body is
    JSON-encoded and any other body (str, bytes) is sent as raw content,
    whatever the json option says. The form option becomes form-encoded data.
    """
    kwargs: dict[str, Any] = {"headers": options.get("headers") or {}}

    json_option = options.get("json")
    body = options.get("body")
    if isinstance(json_option, (dict, list)):
        kwargs["json"] = json_option
    elif isinstance(body, (dict, list)):
        kwargs["json"] = body
    elif body is not None:
        kwargs["content"] = body

    if "form" in options:
        kwargs["data"] = options["form"]

    for key in _PASSTHROUGH_OPTIONS:
        if key in options:
            kwargs[key] = options[key]
    return kwargs


class HttpxTransport:
    """Synchronous transport backed by an httpx.Client.

    Called as transport(url, options) it returns the httpx.Response and lets
    httpx errors propagate. Called with a trailing callback it reports
    through callback(error, response) instead of raising.
    """

    auto_serialize = True

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client if client is not None else create_http_client()

    def __call__(
        self,
        url: str,
        options: dict[str, Any],
        callback: Callable[[Exception | None, Any], Any] | None = None,
    ) -> httpx.Response | None:
        method = options.get("method", "GET")
        if callback is None:
            return self._client.request(method, url, **request_kwargs(options))

        try:
            response = self._client.request(method, url, **request_kwargs(options))
        except httpx.HTTPError as e:
            callback(e, None)
            return None
        callback(None, response)
        return None

    def close(self) -> None:
        self._client.close()


class AsyncHttpxTransport:
    """Asynchronous transport backed by an httpx.AsyncClient.

    Returns a coroutine resolving to the httpx.Response.
    """

    auto_serialize = True

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client if client is not None else create_async_http_client()

    def __call__(self, url: str, options: dict[str, Any]) -> Any:
        method = options.get("method", "GET")
        return self._client.request(method, url, **request_kwargs(options))

    async def aclose(self) -> None:
        await self._client.aclose()


TRANSPORTS: dict[str, Callable[[], Any]] = {
    "httpx": HttpxTransport,
    "httpx-async": AsyncHttpxTransport,
}


@lru_cache(maxsize=1)
def discover_transport() -> Any:
    """Return the process-wide default transport.

    FLUENT_CLIENT_TRANSPORT selects one of TRANSPORTS (default: "httpx").
    Set it to "none" to require an explicit transport on every client.
    Resolved once per process and cached.

    Returns:
        A transport instance, or None when no default is available.
    """
    name = os.environ.get("FLUENT_CLIENT_TRANSPORT", "httpx").strip().lower()
    factory = TRANSPORTS.get(name)
    if factory is None:
        return None
    return factory()
