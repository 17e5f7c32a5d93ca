"""Printf-style placeholder grammar.

A directive is `%`, an optional positional prefix (`2$`), an optional flag,
width, precision and length modifier, and a mandatory type character. The
`@` type is the platform-native object directive; every other type is already
canonical.
"""

from __future__ import annotations

import re

POSITION = r"(\d+\$)?"
FLAGS_WIDTH_PRECISION_LENGTH = r"([-+0#,])?(\d+|\*)?(\.(\d+|\*))?(hh?|ll?|L|z|j|t|q)?"
POSITION_FLAGS_WIDTH_PRECISION_LENGTH = POSITION + FLAGS_WIDTH_PRECISION_LENGTH
TYPES = "[diufFeEgGxXoscpaA@]"

NATIVE_OBJECT_TYPE = "@"
CANONICAL_STRING_TYPE = "s"

DIRECTIVE_RE = re.compile("%" + POSITION_FLAGS_WIDTH_PRECISION_LENGTH + TYPES)

# Group 1 is everything after `%`.
NON_NUMBERED_DIRECTIVE_RE = re.compile("%(" + FLAGS_WIDTH_PRECISION_LENGTH + TYPES + ")")

# Group 1 is the positional prefix plus flags/width/precision/length.
NATIVE_OBJECT_DIRECTIVE_RE = re.compile(
    "%(" + POSITION_FLAGS_WIDTH_PRECISION_LENGTH + ")" + re.escape(NATIVE_OBJECT_TYPE)
)

# A `%` with no `%` neighbour; may still be the start of a directive.
LONE_PERCENT_RE = re.compile(r"(?<!%)%(?!%)")


def directive_starts_at(text: str, offset: int) -> bool:
    """Return whether a full directive begins exactly at `offset`."""

    return DIRECTIVE_RE.match(text, offset) is not None


def contains_directive(text: str) -> bool:
    """Return whether `text` contains at least one directive."""

    return DIRECTIVE_RE.search(text) is not None


def count_non_numbered_directives(text: str) -> int:
    """Return the number of directives lacking a positional prefix."""

    return sum(1 for _ in NON_NUMBERED_DIRECTIVE_RE.finditer(text))
