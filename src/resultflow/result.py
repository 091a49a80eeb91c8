"""Result type for explicit error handling.

A ``Result[V, E]`` is either ``Success(value)`` or ``Failure(error)``, never
both. Fallible functions return a Result instead of raising, and callers chain
further steps through combinators that only run on the matching variant:

    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Result.failure("Can't divide by zero!")
        return Result.success(a / b)

    divide(10, 2).map(round).apply(print, log.warning)

The union is closed: ``Success`` and ``Failure`` are the only variants, and
both support structural pattern matching.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, NoReturn, final

from resultflow.config import Settings, current_config
from resultflow.errors import ConfigurationError, ResultError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

UNWRAP_FAILURE_MESSAGE = "Cannot call unwrap() on an Failure value"

_VARIANTS = frozenset({"Success", "Failure"})


class Result[V, E](ABC):
    """Outcome of a fallible computation: a value or an error.

    Combinators never mutate the receiver. When a combinator does not apply to
    the current variant (``map`` on a Failure, ``map_failure`` on a Success,
    ``and_then`` on a Failure) it returns the receiver itself and never calls
    the supplied function.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__name__ not in _VARIANTS:
            raise TypeError(
                f"Result is a closed union of Success and Failure; "
                f"cannot define variant {cls.__qualname__!r}"
            )

    # --- Constructors ---

    @staticmethod
    def success(value: V) -> Result[V, E]:
        """Return a new Success holding ``value``."""
        return Success(value)

    @staticmethod
    def failure(error: E) -> Result[V, E]:
        """Return a new Failure holding ``error``."""
        return Failure(error)

    # --- Accessors ---

    @abstractmethod
    def get_value(self) -> V | None:
        """Return the value, or ``None`` if this is a Failure."""

    @abstractmethod
    def get_error(self) -> E | None:
        """Return the error, or ``None`` if this is a Success."""

    @abstractmethod
    def is_success(self) -> bool: ...

    @abstractmethod
    def is_failure(self) -> bool: ...

    # --- Unsafe extraction ---

    @abstractmethod
    def unwrap(self) -> V:
        """Return the value.

        Raises:
            ResultError: If this is a Failure.
        """

    @abstractmethod
    def expect(self, message: str) -> None:
        """Assert that this is a Success.

        Raises:
            ResultError: Carrying ``message`` verbatim, if this is a Failure.
        """

    def unwrap_or(self, default: V) -> V:
        """Return the value, or ``default`` if this is a Failure."""
        match self:
            case Success(value):
                return value
            case Failure():
                return default
        raise AssertionError("unreachable")

    def unwrap_or_else(self, f: Callable[[E], V]) -> V:
        """Return the value, or ``f(error)`` if this is a Failure."""
        match self:
            case Success(value):
                return value
            case Failure(error):
                return f(error)
        raise AssertionError("unreachable")

    # --- Combinators ---

    def map[U](self, f: Callable[[V], U]) -> Result[U, E]:
        """Transform the value, wrapping the outcome in a new Success."""
        match self:
            case Success(value):
                return Success(f(value))
            case Failure():
                return self  # type: ignore[return-value]
        raise AssertionError("unreachable")

    def map_failure[F](self, f: Callable[[E], F]) -> Result[V, F]:
        """Transform the error, wrapping the outcome in a new Failure."""
        match self:
            case Success():
                return self  # type: ignore[return-value]
            case Failure(error):
                return Failure(f(error))
        raise AssertionError("unreachable")

    def and_then[U](self, f: Callable[[V], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step; ``f``'s Result is returned as is."""
        match self:
            case Success(value):
                return f(value)
            case Failure():
                return self  # type: ignore[return-value]
        raise AssertionError("unreachable")

    def or_else[F](self, f: Callable[[E], Result[V, F]]) -> Result[V, F]:
        """Recover from a Failure with a fallible step; Success passes through."""
        match self:
            case Success():
                return self  # type: ignore[return-value]
            case Failure(error):
                return f(error)
        raise AssertionError("unreachable")

    @abstractmethod
    def flat_map_or_else(
        self,
        on_success: Callable[[V], Result[V, E]],
        on_failure: Callable[[E], Result[V, E]],
    ) -> Result[V, E]:
        """Return ``on_success(value)`` or ``on_failure(error)``."""

    def apply(
        self,
        on_success: Callable[[V], object],
        on_failure: Callable[[E], object],
    ) -> None:
        """Run exactly one effect: ``on_success(value)`` or ``on_failure(error)``."""
        match self:
            case Success(value):
                on_success(value)
            case Failure(error):
                on_failure(error)


@final
@dataclasses.dataclass(frozen=True, repr=False)
class Success[V, E](Result[V, E]):
    """A successful result holding a value."""

    __slots__ = ("value",)

    value: V

    def get_value(self) -> V:
        return self.value

    def get_error(self) -> None:
        return None

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> V:
        return self.value

    def expect(self, message: str) -> None:
        pass

    def flat_map_or_else(
        self,
        on_success: Callable[[V], Result[V, E]],
        on_failure: Callable[[E], Result[V, E]],
    ) -> Result[V, E]:
        return on_success(self.value)

    def __str__(self) -> str:
        return f"Success({self.value})"

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@final
@dataclasses.dataclass(frozen=True, repr=False)
class Failure[V, E](Result[V, E]):
    """A failed result holding an error."""

    __slots__ = ("error",)

    error: E

    def get_value(self) -> None:
        return None

    def get_error(self) -> E:
        return self.error

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self._violation(UNWRAP_FAILURE_MESSAGE)

    def expect(self, message: str) -> NoReturn:
        raise self._violation(message)

    def flat_map_or_else(
        self,
        on_success: Callable[[V], Result[V, E]],
        on_failure: Callable[[E], Result[V, E]],
    ) -> Result[V, E]:
        return on_failure(self.error)

    def _violation(self, message: str) -> ResultError:
        try:
            settings = current_config()
        except ConfigurationError as exc:
            # Invalid settings never change which error is raised.
            logger.warning("Ignoring invalid settings: %s (%s)", exc, exc.hint)
            settings = Settings()
        if settings.log_violations:
            logger.log(
                settings.violation_levelno,
                "Unchecked extraction on %s: %s",
                self,
                message,
            )
        return ResultError(message, error=self.error)

    def __str__(self) -> str:
        return f"Err({self.error})"

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


def success[V, E](value: V) -> Result[V, E]:
    """Return a new Success holding ``value``."""
    return Success(value)


def failure[V, E](error: E) -> Result[V, E]:
    """Return a new Failure holding ``error``."""
    return Failure(error)


__all__ = [
    "UNWRAP_FAILURE_MESSAGE",
    "Failure",
    "Result",
    "Success",
    "failure",
    "success",
]
