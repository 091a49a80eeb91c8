"""Test helpers (small, reusable doubles).

Keep this file tiny: callbacks that record or forbid their own invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def explode(*_args: Any) -> Any:
    """Callback that must never run."""
    raise RuntimeError("should not have been called!")


@dataclass
class Recorder:
    """Callable that records each argument it receives."""

    returns: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        return self.returns
