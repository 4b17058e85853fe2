"""Core building blocks: the tagged-variant engine and composition helpers."""

from .functions import compose, const, identity, pipe
from .variant import DEFAULT, Pattern, Variant, case_of, fold

__all__ = [
    "DEFAULT",
    "Pattern",
    "Variant",
    "case_of",
    "compose",
    "const",
    "fold",
    "identity",
    "pipe",
]
