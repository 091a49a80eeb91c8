"""Library settings: schema, environment resolution, and scoped overrides.

Resolution follows a fixed precedence: Programmatic > Env > Defaults.
Settings are resolved once into a frozen ``Settings`` object; code that needs
them reads ``current_config()``, which honours any active ``config_scope``.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resultflow.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

logger = logging.getLogger(__name__)

ENV_PREFIX = "RESULTFLOW_"

_LEVEL_NAMES: frozenset[str] = frozenset(
    {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
)


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


# --- Schema ---


class Settings(BaseModel):
    """Validated, immutable library settings.

    Controls how contract violations (``unwrap()``/``expect()`` on a Failure)
    are reported on the ``resultflow`` logger. Domain failures are never
    logged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    log_violations: bool = Field(default=True)
    violation_log_level: str = Field(default="DEBUG")

    @field_validator("violation_log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case and reject unknown ones."""
        if not isinstance(v, str):
            return v
        name = v.strip().upper()
        if name not in _LEVEL_NAMES:
            raise ValueError(
                f"violation_log_level must be one of {sorted(_LEVEL_NAMES)}, got {v!r}"
            )
        return name

    @property
    def violation_levelno(self) -> int:
        """Numeric ``logging`` level for violation records."""
        return logging.getLevelNamesMapping()[self.violation_log_level]


# --- Loading ---

_DOTENV_LOADED: bool = False


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


def load_env(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Read ``RESULTFLOW_*`` variables into a settings mapping.

    Unknown ``RESULTFLOW_*`` names are ignored; values are coerced by field.
    """
    source = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = source.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None:
            continue
        values[name] = _coerce_bool(raw) if name == "log_violations" else raw
    return values


def _hint_for(exc: ValidationError, *, from_env: set[str]) -> str:
    fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
    parts = [
        f"check {ENV_PREFIX}{field.upper()}"
        if field in from_env
        else f"check the {field!r} override"
        for field in fields
    ]
    known = ", ".join(sorted(Settings.model_fields))
    return "; ".join([*parts, f"known settings: {known}"])


def resolve_config(
    overrides: Mapping[str, Any] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from defaults, the environment and overrides.

    Args:
        overrides: Programmatic values; these win over the environment.
        env: Explicit environment mapping. When omitted, a ``.env`` file is
            loaded (once) and ``os.environ`` is read.

    Returns:
        The frozen, validated ``Settings``.

    Raises:
        ConfigurationError: If any value is invalid or an override key is
            unknown.
    """
    if env is None:
        _load_dotenv_once()
    env_values = load_env(env)
    merged = {**env_values, **(overrides or {})}
    try:
        settings = Settings(**merged)
    except ValidationError as exc:
        from_env = set(env_values) - set(overrides or {})
        raise ConfigurationError(
            f"Invalid resultflow settings: {exc.error_count()} error(s)",
            hint=_hint_for(exc, from_env=from_env),
        ) from exc
    logger.debug("Resolved settings: %r", settings)
    return settings


@cache
def _default_config() -> Settings:
    # Reads os.environ only; .env files are loaded by explicit resolve_config() calls.
    return resolve_config(env=os.environ)


def reset_config_cache() -> None:
    """Forget the cached process default so the next read re-resolves it."""
    _default_config.cache_clear()


# --- Ambient scope ---

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "resultflow_settings", default=None
)


def current_config() -> Settings:
    """Return the scoped settings, or the process default outside any scope."""
    scoped = _AMBIENT.get()
    if scoped is not None:
        return scoped
    return _default_config()


@contextmanager
def config_scope(
    settings_or_overrides: Settings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Generator[Settings]:
    """Install settings for the duration of a block.

    Thread-safe and async-safe: the active settings live in a ``ContextVar``.

    Example:
        with config_scope(log_violations=False):
            result.unwrap()  # raises without logging
    """
    if isinstance(settings_or_overrides, Settings):
        base = settings_or_overrides.model_dump()
        extra: Mapping[str, Any] = {}
    else:
        base = current_config().model_dump()
        extra = settings_or_overrides or {}

    if isinstance(settings_or_overrides, Settings) and not overrides:
        settings = settings_or_overrides
    else:
        settings = resolve_config({**base, **extra, **overrides}, env={})

    token = _AMBIENT.set(settings)
    try:
        yield settings
    finally:
        _AMBIENT.reset(token)
