"""Tests for public exceptions."""

import pytest

from fluent_client.exceptions import (
    FluentConfigError,
    FluentError,
    InvalidCamelCaseConfigError,
    MissingTransportError,
    MissingUrlError,
    WhitelistViolationError,
)


class TestFluentError:
    """Tests for base FluentError."""

    def test_is_exception(self):
        """FluentError should be an Exception."""
        assert issubclass(FluentError, Exception)

    def test_can_be_raised(self):
        """FluentError should be raisable with message."""
        with pytest.raises(FluentError) as exc_info:
            raise FluentError("test error")
        assert str(exc_info.value) == "test error"


class TestFluentConfigError:
    """Tests for configuration errors."""

    @pytest.mark.parametrize(
        "error_cls",
        [MissingUrlError, MissingTransportError, InvalidCamelCaseConfigError],
    )
    def test_subclasses_inherit_from_config_error(self, error_cls):
        """Construction errors should all be FluentConfigErrors."""
        assert issubclass(error_cls, FluentConfigError)
        assert issubclass(error_cls, FluentError)

    def test_can_be_caught_as_fluent_error(self):
        """Should be catchable as FluentError."""
        with pytest.raises(FluentError):
            raise MissingUrlError("a base URL is required")


class TestWhitelistViolationError:
    """Tests for WhitelistViolationError."""

    def test_inherits_from_fluent_error(self):
        """WhitelistViolationError should inherit from FluentError."""
        assert issubclass(WhitelistViolationError, FluentError)

    def test_is_not_attribute_error(self):
        """getattr() with a default must not swallow the violation."""
        assert not issubclass(WhitelistViolationError, AttributeError)

    def test_names_segment(self):
        """Should store and mention the rejected segment."""
        error = WhitelistViolationError("admin")
        assert error.segment == "admin"
        assert "admin" in str(error)
