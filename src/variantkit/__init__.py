"""variantkit: closed variant types with pattern dispatch and combinators.

Public API:
    - Maybe: Absent / Present
    - Outcome: Failure / Success
    - LoadStatus: NotStarted / InProgress / Failed / Succeeded
    - case_of(), fold(): Exhaustive or fallback pattern dispatch
    - maybe, outcome, load_status: Point-free combinator modules
    - task: Deferred-result adapter for callback-style completions
"""

from __future__ import annotations

import logging

from variantkit import load_status, maybe, outcome, task
from variantkit.config import Settings, get_settings, settings_scope
from variantkit.core.functions import compose, const, identity, pipe
from variantkit.core.variant import DEFAULT, Variant, case_of, fold
from variantkit.errors import (
    CallbackReuseError,
    ConfigurationError,
    PatternError,
    UnhandledCaseError,
    UnwrapError,
    VariantError,
)
from variantkit.load_status import (
    IN_PROGRESS,
    NOT_STARTED,
    Failed,
    InProgress,
    LoadStatus,
    NotStarted,
    Succeeded,
)
from variantkit.maybe import ABSENT, Absent, Maybe, Present
from variantkit.outcome import Failure, Outcome, Success

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("variantkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("variantkit").addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "DEFAULT",
    "IN_PROGRESS",
    "NOT_STARTED",
    "Absent",
    "CallbackReuseError",
    "ConfigurationError",
    "Failed",
    "Failure",
    "InProgress",
    "LoadStatus",
    "Maybe",
    "NotStarted",
    "Outcome",
    "PatternError",
    "Present",
    "Settings",
    "Succeeded",
    "Success",
    "UnhandledCaseError",
    "UnwrapError",
    "Variant",
    "VariantError",
    "case_of",
    "compose",
    "const",
    "fold",
    "get_settings",
    "identity",
    "load_status",
    "maybe",
    "outcome",
    "pipe",
    "settings_scope",
    "task",
]
