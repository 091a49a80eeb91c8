"""resultflow: Success/Failure results for explicit error handling.

Public API:
    - Result: The closed Success | Failure union and its combinators
    - success() / failure(): Constructors
    - attempt() / attempting(): Capture exceptions as Failures
    - config_scope(): Scoped library settings
"""

from __future__ import annotations

import logging

from resultflow.config import (
    Settings,
    config_scope,
    current_config,
    reset_config_cache,
    resolve_config,
)
from resultflow.errors import ConfigurationError, ResultError, ResultFlowError
from resultflow.interop import attempt, attempting, collect, from_optional
from resultflow.result import Failure, Result, Success, failure, success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultflow")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultflow").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Failure",
    "Result",
    "ResultError",
    "ResultFlowError",
    "Settings",
    "Success",
    "attempt",
    "attempting",
    "collect",
    "config_scope",
    "current_config",
    "failure",
    "from_optional",
    "reset_config_cache",
    "resolve_config",
    "success",
]
