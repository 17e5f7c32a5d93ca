"""Shared typed data models for stringforge.

This package contains dataclasses used across reader, builder, and writer
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    ConversionManifest,
    Document,
    Key,
    LocalizedString,
    PluralValue,
    PluralValues,
    RawResourceFile,
    RawSection,
    Section,
    SingleValue,
    StringValue,
)

__all__ = [
    "ConversionManifest",
    "Document",
    "Key",
    "LocalizedString",
    "PluralValue",
    "PluralValues",
    "RawResourceFile",
    "RawSection",
    "Section",
    "SingleValue",
    "StringValue",
]
