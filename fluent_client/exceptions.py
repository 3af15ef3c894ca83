"""Public exceptions for the fluent client."""


class FluentError(Exception):
    """Base exception for all fluent client errors."""


class FluentConfigError(FluentError):
    """Configuration error raised while creating a client."""


class MissingUrlError(FluentConfigError):
    """No base URL was supplied."""


class MissingTransportError(FluentConfigError):
    """No transport was supplied and none could be discovered."""


class InvalidCamelCaseConfigError(FluentConfigError):
    """camel_case was enabled without both json and return_body."""


class WhitelistViolationError(FluentError):
    """A path segment was accessed that the whitelist does not allow."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"{segment} not listed in the client's whitelist")
        self.segment = segment
