"""Typed outcome of a single generation attempt.

An attempt either succeeds, fails in a way worth retrying, or fails for good.
The retry loop branches on the outcome type, never on error text.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ...core.errors import ProviderError, ShopForgeError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Attempt produced a value."""

    value: T


@dataclass(frozen=True)
class Retryable:
    """Attempt failed with model noise (malformed or incomplete output)."""

    error: ShopForgeError


@dataclass(frozen=True)
class Fatal:
    """Attempt failed in a way another attempt cannot fix."""

    error: ShopForgeError


Outcome = Union[Success[T], Retryable, Fatal]


def classify(exc: BaseException) -> Retryable | Fatal:
    """Sort an exception into a retryable or fatal outcome.

    Taxonomy errors carry their own `retryable` flag. Anything else is an
    unexpected failure and is wrapped as a fatal ProviderError with the
    original chained as its cause.
    """
    if isinstance(exc, ShopForgeError):
        return Retryable(exc) if exc.retryable else Fatal(exc)
    wrapped = ProviderError(f"Unexpected error: {type(exc).__name__}: {exc}")
    wrapped.__cause__ = exc
    return Fatal(wrapped)


__all__ = ["Success", "Retryable", "Fatal", "Outcome", "classify"]
