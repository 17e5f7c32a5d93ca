"""Resource key construction.

Responsibilities:
- Classify a raw key as a simple or plural family.
- Normalize every retained value and drop entries that carry no value.
- Group compound `locale:quantity` tags into per-language plural sets.
"""

from __future__ import annotations

from typing import Mapping

from ..models.datatypes import Key, LocalizedString, PluralValue, PluralValues, SingleValue
from ..telemetry.logger import log_entry_skipped
from ..text.normalizer import StringNormalizer

COMPOUND_TAG_SEPARATOR = ":"

SKIP_REASON_EMPTY_VALUE = "empty_value"
SKIP_REASON_MALFORMED_TAG = "malformed_compound_tag"


def is_plural_family(raw: Mapping[str, str | None]) -> bool:
    """Return whether any raw tag combines a locale with a quantity class."""

    return any(COMPOUND_TAG_SEPARATOR in tag for tag in raw)


def split_compound_tag(tag: str) -> tuple[str, str] | None:
    """Split `locale:quantity` on the first separator, or return `None`."""

    locale, separator, quantity = tag.partition(COMPOUND_TAG_SEPARATOR)
    if not separator:
        return None
    return locale, quantity


class KeyBuilder:
    """Build normalized `Key` records from raw tag/value mappings."""

    def __init__(self, normalizer: StringNormalizer | None = None) -> None:
        """Initialize with a custom or default string normalizer."""

        self._normalizer = normalizer or StringNormalizer()

    def build(self, name: str, raw: Mapping[str, str | None]) -> Key:
        """Build one key, routing to plural construction when any tag is compound."""

        if is_plural_family(raw):
            return self._build_plural(name, raw)
        return self._build_single(name, raw)

    def _build_single(self, name: str, raw: Mapping[str, str | None]) -> Key:
        """Build a key with one value per locale."""

        localizations: list[LocalizedString] = []
        for locale, value in raw.items():
            if value is None:
                log_entry_skipped(name, locale, SKIP_REASON_EMPTY_VALUE)
                continue
            localizations.append(
                LocalizedString(
                    language_code=locale,
                    value=SingleValue(self._normalizer.normalize(value)),
                )
            )
        return Key(name=name, localizations=tuple(localizations))

    def _build_plural(self, name: str, raw: Mapping[str, str | None]) -> Key:
        """Build a key whose locales each carry ordered quantity variants."""

        grouped: dict[str, list[PluralValue]] = {}
        for tag, value in raw.items():
            if value is None:
                log_entry_skipped(name, tag, SKIP_REASON_EMPTY_VALUE)
                continue
            split = split_compound_tag(tag)
            if split is None:
                log_entry_skipped(name, tag, SKIP_REASON_MALFORMED_TAG)
                continue
            locale, quantity = split
            grouped.setdefault(locale, []).append(
                PluralValue(quantity=quantity, text=self._normalizer.normalize(value))
            )
        localizations = tuple(
            LocalizedString(language_code=locale, value=PluralValues(tuple(quantities)))
            for locale, quantities in grouped.items()
        )
        return Key(name=name, localizations=localizations)


_DEFAULT_BUILDER = KeyBuilder()


def build_key(name: str, raw: Mapping[str, str | None]) -> Key:
    """Build one normalized key with the default builder."""

    return _DEFAULT_BUILDER.build(name, raw)
