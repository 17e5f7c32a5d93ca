"""Core datatypes shared across stringforge modules.

Responsibilities:
- Represent the raw key/locale/value triples handed over by a resource reader.
- Represent the immutable normalized document handed to a resource writer.

Key types:
- `RawSection`, `RawResourceFile`: reader output, insertion-ordered mappings.
- `PluralValue`, `SingleValue`, `PluralValues`, `LocalizedString`, `Key`,
  `Section`, and `Document`: normalized data model.
- `ConversionManifest`: summary record of one conversion run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping


@dataclass(frozen=True, slots=True)
class RawSection:
    """Raw keys of one resource-file section, in source order.

    Attributes:
        name: Section header text, or `None` for keys outside any section header.
        keys: Mapping of key name to an ordered mapping of raw tag to optional value.
            A tag is a locale (`en`) or a compound locale/quantity tag (`en:one`);
            `None` marks an entry present in the source with no value.
    """

    name: str | None
    keys: Mapping[str, Mapping[str, str | None]]


@dataclass(frozen=True, slots=True)
class RawResourceFile:
    """Reader output for one resource file.

    Attributes:
        source: Path the sections were read from, when read from disk.
        sections: Ordered raw sections.
    """

    source: Path | None
    sections: tuple[RawSection, ...]


@dataclass(frozen=True, slots=True)
class PluralValue:
    """One quantity variant of a plural string.

    Attributes:
        quantity: Quantity class token (`zero`, `one`, `two`, `few`, `many`, `other`),
            passed through verbatim from the source.
        text: Normalized string text.
    """

    quantity: str
    text: str


@dataclass(frozen=True, slots=True)
class SingleValue:
    """Normalized text of a non-plural localized string."""

    text: str


@dataclass(frozen=True, slots=True)
class PluralValues:
    """Ordered quantity variants of a plural localized string."""

    quantities: tuple[PluralValue, ...]


StringValue = SingleValue | PluralValues


@dataclass(frozen=True, slots=True)
class LocalizedString:
    """One language's value for a resource key."""

    language_code: str
    value: StringValue

    @property
    def is_plural(self) -> bool:
        """Return whether this localization carries quantity variants."""

        return isinstance(self.value, PluralValues)


@dataclass(frozen=True, slots=True)
class Key:
    """A string resource key with its localizations.

    Attributes:
        name: Case-sensitive unique key identifier.
        localizations: Localizations in first-seen language order.
    """

    name: str
    localizations: tuple[LocalizedString, ...]

    @property
    def is_plural(self) -> bool:
        """Return whether the key was built as a plural family."""

        return any(localization.is_plural for localization in self.localizations)

    @property
    def languages(self) -> tuple[str, ...]:
        """Return language codes in localization order."""

        return tuple(localization.language_code for localization in self.localizations)

    def localization_for(self, language_code: str) -> LocalizedString | None:
        """Return the localization for a language code, if present."""

        for localization in self.localizations:
            if localization.language_code == language_code:
                return localization
        return None


@dataclass(frozen=True, slots=True)
class Section:
    """Ordered keys of one document section."""

    keys: tuple[Key, ...]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Document:
    """Normalized resource document built once per conversion run."""

    sections: tuple[Section, ...]

    def iter_keys(self) -> tuple[Key, ...]:
        """Return all keys across sections in document order."""

        return tuple(key for section in self.sections for key in section.keys)

    def languages(self) -> tuple[str, ...]:
        """Return every language code in first-seen order across the document."""

        seen: dict[str, None] = {}
        for key in self.iter_keys():
            for language_code in key.languages:
                seen.setdefault(language_code, None)
        return tuple(seen)


@dataclass(frozen=True, slots=True)
class ConversionManifest:
    """Summary record of one conversion run.

    Attributes:
        input_path: Source resource file.
        output_dir: Root directory for written resource files.
        output_format: Writer identifier used for the run.
        default_language: Language written to the unqualified resource directory.
        section_count: Number of document sections.
        key_count: Number of keys across all sections.
        languages: Languages in first-seen order.
        written_paths: Files written by the writer, in write order.
        extra: Additional implementation-specific metadata.
    """

    input_path: Path
    output_dir: Path
    output_format: str
    default_language: str
    section_count: int
    key_count: int
    languages: tuple[str, ...]
    written_paths: tuple[Path, ...]
    extra: Mapping[str, str] = field(default_factory=dict)
