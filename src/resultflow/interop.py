"""Bridges between exception-raising code and Results.

``attempt``/``attempting`` capture exceptions as Failures at a boundary,
``from_optional`` lifts ``None``-returning lookups, and ``collect`` folds a
sequence of Results into one, stopping at the first Failure.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

from resultflow.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

type ExceptionTypes = type[BaseException] | tuple[type[BaseException], ...]


def attempt[V](
    fn: Callable[..., V],
    *args: Any,
    catch: ExceptionTypes = Exception,
    **kwargs: Any,
) -> Result[V, BaseException]:
    """Call ``fn`` and capture the outcome as a Result.

    Only exceptions matching ``catch`` become a Failure; anything else
    propagates to the caller.

    Example:
        attempt(int, "42")                   # Success(42)
        attempt(int, "x", catch=ValueError)  # Err(invalid literal ...)
    """
    try:
        value = fn(*args, **kwargs)
    except catch as exc:
        return Failure(exc)
    return Success(value)


def attempting[**P, V](
    catch: ExceptionTypes = Exception,
) -> Callable[[Callable[P, V]], Callable[P, Result[V, BaseException]]]:
    """Decorator form of ``attempt``: the wrapped function returns a Result."""

    def decorator(fn: Callable[P, V]) -> Callable[P, Result[V, BaseException]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[V, BaseException]:
            return attempt(fn, *args, catch=catch, **kwargs)

        return wrapper

    return decorator


def from_optional[V, E](value: V | None, error: E) -> Result[V, E]:
    """Return ``Success(value)``, or ``Failure(error)`` when value is None."""
    if value is None:
        return Failure(error)
    return Success(value)


def collect[V, E](results: Iterable[Result[V, E]]) -> Result[list[V], E]:
    """Gather the values of ``results`` into a single Success.

    The first Failure is returned as is and the remaining items are not
    consumed.
    """
    values: list[V] = []
    for result in results:
        match result:
            case Success(value):
                values.append(value)
            case Failure():
                return result  # type: ignore[return-value]
            case _:
                raise TypeError(f"collect() expects Result items, got {type(result).__name__}")
    return Success(values)


__all__ = ["attempt", "attempting", "collect", "from_optional"]
