"""Exception hierarchy for resultflow."""

from __future__ import annotations

from typing import Any


class ResultFlowError(Exception):
    """Base exception for all resultflow errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ResultError(ResultFlowError):
    """Unchecked extraction was attempted on a Failure.

    Raised by ``unwrap()`` and ``expect()``. This signals caller misuse, not a
    domain failure: the Failure's own payload is attached as ``error`` so the
    original cause stays inspectable after the raise.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        error: Any = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.error = error


class ConfigurationError(ResultFlowError):
    """Library settings failed validation or resolution."""
