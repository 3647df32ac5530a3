"""Tests for the error taxonomy."""

import pytest

from .lib import (
    ERROR_MESSAGES,
    ConfigurationError,
    EmptyCompletionError,
    ErrorKind,
    ParseError,
    ProviderBillingError,
    ProviderError,
    ProviderRateLimitError,
    RenderError,
    RequestError,
    ValidationError,
    VariantsFailedError,
    describe_error,
)


class TestRetryability:
    """Tests for the retryable discriminant."""

    @pytest.mark.unit
    @pytest.mark.parametrize("error_cls", [ParseError, ValidationError])
    def test_contract_violations_are_retryable(self, error_cls):
        """Malformed model output may be retried."""
        assert error_cls.retryable is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error_cls",
        [
            ConfigurationError,
            ProviderError,
            ProviderRateLimitError,
            ProviderBillingError,
            EmptyCompletionError,
            RenderError,
            RequestError,
        ],
    )
    def test_other_errors_are_fatal(self, error_cls):
        """Provider and programming errors are never retried."""
        assert error_cls.retryable is False


class TestErrorAttributes:
    """Tests for error-specific attributes."""

    @pytest.mark.unit
    def test_validation_error_default_message(self):
        """ValidationError names the empty path."""
        err = ValidationError("pricing.tiers")
        assert err.path == "pricing.tiers"
        assert str(err) == "pricing.tiers is empty"

    @pytest.mark.unit
    def test_rate_limit_retry_after(self):
        """Rate limit errors carry the retry hint."""
        err = ProviderRateLimitError("slow down", retry_after=12.0)
        assert err.retry_after == 12.0

    @pytest.mark.unit
    def test_variants_failed_takes_first_kind(self):
        """Fan-out failure reports the first variant's category."""
        err = VariantsFailedError([ProviderBillingError("x"), ParseError("y")])
        assert err.error_kind == ErrorKind.BILLING
        assert len(err.errors) == 2


class TestDescribeError:
    """Tests for describe_error."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("exc", "kind"),
        [
            (ConfigurationError("ANTHROPIC_API_KEY is not set"), ErrorKind.AUTH_CONFIGURATION),
            (ProviderRateLimitError("429"), ErrorKind.RATE_LIMITED),
            (ProviderBillingError("credit"), ErrorKind.BILLING),
            (ParseError("no JSON found"), ErrorKind.MALFORMED_OUTPUT),
            (ValidationError("hero.headline"), ErrorKind.MALFORMED_OUTPUT),
            (RenderError("broken"), ErrorKind.UNKNOWN),
            (RuntimeError("boom"), ErrorKind.UNKNOWN),
        ],
    )
    def test_kind_mapping(self, exc, kind):
        """Each error resolves to its category and stable message."""
        info = describe_error(exc)
        assert info.error_kind == kind
        assert info.message == ERROR_MESSAGES[kind]

    @pytest.mark.unit
    def test_provider_text_not_leaked(self):
        """Raw provider messages never reach the caller."""
        info = describe_error(ProviderError("upstream 503: internal trace id abc"))
        assert "abc" not in info.message

    @pytest.mark.unit
    def test_request_error_keeps_message(self):
        """Request validation messages are passed through."""
        info = describe_error(RequestError("No messages provided"))
        assert info.to_dict() == {
            "errorKind": "invalid-request",
            "message": "No messages provided",
        }
