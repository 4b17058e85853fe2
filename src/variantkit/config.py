"""Runtime settings for variantkit.

Settings are validated through a Pydantic schema and resolved from the process
environment on first use. A ``.env`` file is only read by an explicit
``Settings.from_env()`` call; install the result with :func:`settings_scope`.
A contextvar-backed scope allows temporary overrides that are thread and async
safe.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from functools import cache
import os
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from variantkit.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

DuplicateCallbackPolicy = Literal["ignore", "warn", "raise"]

# Environment variable names per settings field
ENV_VARS: dict[str, str] = {
    "strict_patterns": "VARIANTKIT_STRICT_PATTERNS",
    "duplicate_callback": "VARIANTKIT_DUPLICATE_CALLBACK",
}


class Settings(BaseModel):
    """Validated, immutable settings.

    Attributes:
        strict_patterns: Reject pattern keys that are not declared cases.
        duplicate_callback: What to do when a single-use task callback is
            completed twice: drop silently, log a warning, or raise.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_patterns: bool = False
    duplicate_callback: DuplicateCallbackPolicy = "warn"

    @field_validator("duplicate_callback", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        """Accept policy names regardless of case or surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ``.

        Without ``environ``, a ``.env`` file is loaded once into ``os.environ``
        and ``os.environ`` is read. Unset or empty variables fall back to the
        schema defaults.
        """
        if environ is None:
            _try_load_dotenv()
            environ = os.environ
        values: dict[str, Any] = {}
        for field_name, env_key in ENV_VARS.items():
            raw = environ.get(env_key)
            if raw is not None and raw.strip():
                values[field_name] = raw
        try:
            return cls(**values)
        except ValidationError as exc:
            keys = ", ".join(ENV_VARS[str(e["loc"][0])] for e in exc.errors())
            raise ConfigurationError(
                f"Invalid variantkit settings in environment: {keys}",
                hint="VARIANTKIT_STRICT_PATTERNS takes a boolean; "
                "VARIANTKIT_DUPLICATE_CALLBACK takes 'ignore', 'warn' or 'raise'",
            ) from exc


_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "variantkit_settings", default=None
)

_DOTENV_LOADED: bool = False


def _try_load_dotenv() -> None:
    """Load a ``.env`` file once; a missing file is not an error."""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    from dotenv import load_dotenv

    load_dotenv()
    _DOTENV_LOADED = True


@cache
def _env_settings() -> Settings:
    # Implicit lookup never touches .env files
    return Settings.from_env(os.environ)


def get_settings() -> Settings:
    """Return the scoped settings if any, else the environment settings."""
    scoped = _AMBIENT.get()
    if scoped is not None:
        return scoped
    return _env_settings()


def reset_settings() -> None:
    """Forget cached environment settings so the next lookup re-reads them."""
    _env_settings.cache_clear()


@contextmanager
def settings_scope(
    settings: Settings | None = None, **overrides: Any
) -> Generator[Settings]:
    """Temporarily install settings for the current context.

    Example:
        with settings_scope(strict_patterns=True):
            Present(1).match(Present=str, Nothing=lambda: "")  # raises PatternError
    """
    base = settings if settings is not None else get_settings()
    try:
        scoped = Settings.model_validate({**base.model_dump(), **overrides})
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid settings overrides: {sorted(overrides)}",
            hint="See variantkit.config.Settings for accepted values",
        ) from exc
    token = _AMBIENT.set(scoped)
    try:
        yield scoped
    finally:
        _AMBIENT.reset(token)
