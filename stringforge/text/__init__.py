"""Placeholder grammar and string normalization components.

This package provides the deterministic per-string rewriting applied to every
localized value before it reaches a resource writer.
"""

from .normalizer import StringNormalizer, normalize_string
from .placeholders import (
    DIRECTIVE_RE,
    LONE_PERCENT_RE,
    NATIVE_OBJECT_DIRECTIVE_RE,
    NON_NUMBERED_DIRECTIVE_RE,
)

__all__ = [
    "StringNormalizer",
    "normalize_string",
    "DIRECTIVE_RE",
    "LONE_PERCENT_RE",
    "NATIVE_OBJECT_DIRECTIVE_RE",
    "NON_NUMBERED_DIRECTIVE_RE",
]
