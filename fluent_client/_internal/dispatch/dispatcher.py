"""Request dispatch: turns a verb call on a node into a transport call."""

import inspect
import io
import json
from collections.abc import Callable
from typing import Any

from fluent_client._internal.debug import log_debug
from fluent_client._internal.dispatch.casing import (
    convert_to_camel_case,
    convert_to_snake_case,
)
from fluent_client._internal.dispatch.models import (
    BODY_VERBS,
    CONFIG_KEYS,
    JSON_CONTENT_TYPE,
    ArgKind,
    RequestCall,
    classify_arg,
)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay override onto base, recursing into nested dicts.

    Returns a new dict. Neither argument is mutated and no nested dict or
    list of either argument is shared with the result.
    """
    result = {key: _copy_value(value) for key, value in base.items()}
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = _copy_value(value)
    return result


def _copy_value(value: Any) -> Any:
    """Copy plain containers, keep everything else by reference."""
    if isinstance(value, dict):
        return {key: _copy_value(item) for key, item in value.items()}
    elif isinstance(value, list):
        return [_copy_value(item) for item in value]
    else:
        return value


def build_url(url: str, part: str | None, extension: str | None) -> str:
    """Return the request URL for a base URL, optional path part and extension.

    A part starting with "?" is a query string and is attached without a
    separating slash. The extension always lands on the last path segment,
    before any query string.
    """
    if extension:
        if part is None:
            return f"{url}.{extension}"
        if part.startswith("?"):
            return f"{url}.{extension}{part}"
        return f"{url}/{part}.{extension}"
    if part is None:
        return url
    if part.startswith("?"):
        return f"{url}{part}"
    return f"{url}/{part}"


class RequestDispatcher:
    """Dispatches verb calls for a single node.

    The dispatcher holds no state between calls: every dispatch merges the
    node configuration afresh and hands a new options dict to the transport.
    """

    def __init__(self, base_url: str, config: dict[str, Any]) -> None:
        """Initialize the dispatcher.

        Args:
            base_url: The accumulated URL of the node.
            config: The effective configuration of the node.
        """
        self._base_url = base_url
        self._config = config

    def dispatch(self, method: str, args: tuple[Any, ...]) -> Any:
        """Send a request through the configured transport.

        Args:
            method: Upper-case HTTP verb.
            args: Positional arguments given to the verb: an optional path
                part (or body with send_as_body), an optional options dict,
                any extra transport arguments and an optional callback.

        Returns:
            Whatever the transport returns, with the body extracted when
            return_body is set. Awaitable results stay awaitable.
        """
        call = self._prepare(method, list(args))
        return_body = call.return_body

        transport_args: list[Any] = [call.url, call.options, *call.extra_args]
        if call.callback is not None:
            callback = call.callback
            if return_body:
                transport_args.append(lambda err, res: callback(err, self.get_body(res)))
            else:
                transport_args.append(callback)

        log_debug(self._config, f"{call.method} {call.url}")
        result = call.transport(*transport_args)

        if return_body and inspect.isawaitable(result):
            return self._await_body(result)
        if return_body and call.callback is None:
            return self.get_body(result)
        return result

    def _prepare(self, method: str, args: list[Any]) -> RequestCall:
        """Classify arguments, merge options and build the URL."""
        part: str | None = None
        if args and args[0] is None:
            args.pop(0)
        kind = classify_arg(args[0]) if args else None

        if self._should_wrap_in_body(method, kind):
            args[0] = {"body": args[0]}
        elif kind is ArgKind.SEGMENT:
            part = str(args.pop(0))

        callback = None
        if args and classify_arg(args[-1]) is ArgKind.CALLBACK:
            callback = args.pop()

        call_options: dict[str, Any] = {}
        if args and classify_arg(args[0]) is ArgKind.OPTIONS:
            call_options = args.pop(0)

        options = deep_merge(self._config, call_options)
        options["method"] = method

        url = build_url(self._base_url, part, options.get("extension"))
        transport = options["transport"]
        return_body = bool(options.get("return_body"))

        if options.get("camel_case"):
            self._update_camel_case_request(options)

        for key in CONFIG_KEYS:
            options.pop(key, None)

        return RequestCall(
            url=url,
            method=method,
            options=options,
            extra_args=args,
            callback=callback,
            transport=transport,
            return_body=return_body,
        )

    def _should_wrap_in_body(self, method: str, kind: ArgKind | None) -> bool:
        """Whether the first argument is a bare body under send_as_body."""
        return (
            kind is not None
            and bool(self._config.get("send_as_body"))
            and method in BODY_VERBS
            and kind not in (ArgKind.CALLBACK, ArgKind.OPTIONS)
        )

    def _update_camel_case_request(self, options: dict[str, Any]) -> None:
        """Rename outgoing body keys to snake_case and serialize if needed."""
        if isinstance(options.get("json"), (dict, list)):
            options["json"] = convert_to_snake_case(options["json"])
            return
        if "body" not in options:
            return

        options["body"] = convert_to_snake_case(options["body"])
        if not getattr(options["transport"], "auto_serialize", False):
            options["body"] = json.dumps(options["body"])
            headers = options.get("headers") or {}
            if not any(name.lower() == "content-type" for name in headers):
                headers["content-type"] = JSON_CONTENT_TYPE
            options["headers"] = headers

    async def _await_body(self, pending: Any) -> Any:
        response = await pending
        body = self.get_body(response)
        if inspect.isawaitable(body):
            body = await body
        return body

    def get_body(self, res: Any) -> Any:
        """Return the body of a transport response.

        Text-based responses (an httpx or requests response, or anything with
        a text attribute or text() method) are read, parsed as JSON when the
        json option is set and the text is non-empty, then camel-cased when
        camel_case is set. A text() method returning an awaitable yields an
        awaitable body.

        Other responses carrying an already decoded body attribute return
        that attribute; plain values are their own body.

        Args:
            res: The transport response.

        Returns:
            The extracted body, or an awaitable resolving to it.
        """
        if res is None:
            return None

        if hasattr(res, "text"):
            text = res.text
            if callable(text):
                text = text()
            if inspect.isawaitable(text):
                return self._parse_later(text)
            return self._parse_text(text)

        body = res.body if self._is_response_object(res) else res
        return self._normalize(body)

    async def _parse_later(self, pending: Any) -> Any:
        return self._parse_text(await pending)

    def _parse_text(self, text: str) -> Any:
        # An empty body is not valid JSON
        if not self._config.get("json") or not text:
            return text
        return self._normalize(json.loads(text))

    def _normalize(self, body: Any) -> Any:
        if self._config.get("camel_case"):
            return convert_to_camel_case(body)
        return body

    @staticmethod
    def _is_response_object(res: Any) -> bool:
        """Whether res is a response wrapper whose body attribute is the payload."""
        if not hasattr(res, "body"):
            return False
        return isinstance(res, io.IOBase) or "Response" in type(res).__name__


def bind_verb(base_url: str, config: dict[str, Any], method: str) -> Callable[..., Any]:
    """Return a callable dispatching method against base_url with config."""

    def verb(*args: Any) -> Any:
        return RequestDispatcher(base_url, config).dispatch(method, args)

    verb.__name__ = method.lower()
    verb.__qualname__ = method.lower()
    return verb
