"""Resource string normalization.

Responsibilities:
- Escape markup-unsafe characters for XML-based resource formats.
- Disambiguate literal `%` characters from directive starts.
- Rewrite platform-native object directives and add positional indices.

Step order is fixed: escaping runs before percent doubling, and percent
doubling runs before any directive rewriting.
"""

from __future__ import annotations

from itertools import count
import re

from .placeholders import (
    CANONICAL_STRING_TYPE,
    LONE_PERCENT_RE,
    NATIVE_OBJECT_DIRECTIVE_RE,
    NON_NUMBERED_DIRECTIVE_RE,
    contains_directive,
    count_non_numbered_directives,
    directive_starts_at,
)


class StringNormalizer:
    """Normalize one raw resource string into canonical platform form."""

    def normalize(self, raw: str) -> str:
        """Apply escaping, percent doubling, directive conversion and numbering."""

        value = self.escape_markup(raw)
        value = self.double_literal_percents(value)
        if not contains_directive(value):
            return value
        value = self.convert_native_directives(value)
        return self.number_directives(value)

    @staticmethod
    def escape_markup(text: str) -> str:
        """Escape `&` and `<`; `>` is left as is."""

        if "&" not in text and "<" not in text:
            return text
        return text.replace("&", "&amp;").replace("<", "&lt;")

    @staticmethod
    def double_literal_percents(text: str) -> str:
        """Double every lone `%` that does not start a directive.

        Candidates come from a coarse lone-percent scan; each one is then
        re-anchored against the full directive pattern at its own offset.
        """

        def _replace(match: re.Match[str]) -> str:
            if directive_starts_at(text, match.start()):
                return match.group(0)
            return "%%"

        return LONE_PERCENT_RE.sub(_replace, text)

    @staticmethod
    def convert_native_directives(text: str) -> str:
        """Rewrite `%…@` directives to `%…s`, keeping the captured prefix verbatim."""

        return NATIVE_OBJECT_DIRECTIVE_RE.sub(rf"%\g<1>{CANONICAL_STRING_TYPE}", text)

    @staticmethod
    def number_directives(text: str) -> str:
        """Insert `N$` positions when two or more directives lack one.

        Already-positioned directives are skipped and do not consume a number.
        """

        if count_non_numbered_directives(text) <= 1:
            return text
        positions = count(1)
        return NON_NUMBERED_DIRECTIVE_RE.sub(
            lambda match: f"%{next(positions)}${match.group(1)}",
            text,
        )


_DEFAULT_NORMALIZER = StringNormalizer()


def normalize_string(raw: str) -> str:
    """Normalize one raw resource string with the default normalizer."""

    return _DEFAULT_NORMALIZER.normalize(raw)
