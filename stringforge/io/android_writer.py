"""Android string resource writer.

Responsibilities:
- Serialize a normalized `Document` into one `strings.xml` per language.
- Map language tags to Android `values[-qualifier]` resource directories.

Values are written as already normalized: markup escaping and placeholder
rewriting happen in the string normalizer, never here.
"""

from __future__ import annotations

from pathlib import Path
import re
from xml.sax.saxutils import quoteattr

from loguru import logger

from ..models.datatypes import Document, LocalizedString, PluralValues, SingleValue
from .storage import ArtifactStore

_XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
_INDENT = "    "
_RESOURCE_FILE_NAME = "strings.xml"
_ANDROID_REGION_RE = re.compile(r"^r[A-Z]{2}$")


def android_language_qualifier(language_code: str) -> str:
    """Return the Android resource qualifier for a language tag.

    `en` stays `en`, `pt-BR`/`pt_BR` becomes `pt-rBR`, and tags with a script
    or numeric region use the BCP-47 form, e.g. `zh-Hans` becomes `b+zh+Hans`.
    """

    parts = [part for part in re.split(r"[-_]", language_code) if part]
    if len(parts) <= 1:
        return language_code
    language, subtag = parts[0], parts[1]
    if len(parts) == 2 and _ANDROID_REGION_RE.fullmatch(subtag):
        return f"{language}-{subtag}"
    if len(parts) == 2 and len(subtag) == 2 and subtag.isalpha():
        return f"{language}-r{subtag.upper()}"
    return "b+" + "+".join(parts)


def android_values_directory(language_code: str, default_language: str) -> str:
    """Return the `values` directory name for a language."""

    if language_code == default_language:
        return "values"
    return f"values-{android_language_qualifier(language_code)}"


class AndroidResourceWriter:
    """Write Android `strings.xml` resources through an artifact store."""

    def __init__(
        self,
        store: ArtifactStore,
        default_language: str,
        section_comments: bool = True,
    ) -> None:
        """Initialize writer output root and default-language mapping."""

        self._store = store
        self._default_language = default_language
        self._section_comments = section_comments

    def write(self, document: Document) -> list[Path]:
        """Write one resource file per document language and return written paths."""

        languages = document.languages()
        if languages and self._default_language not in languages:
            logger.warning(
                f"Default language `{self._default_language}` has no strings; "
                "no unqualified `values` directory will be written."
            )
        written: list[Path] = []
        for language_code in languages:
            relative_path = (
                Path(android_values_directory(language_code, self._default_language))
                / _RESOURCE_FILE_NAME
            )
            written.append(
                self._store.save_text(relative_path, self.render(document, language_code))
            )
        return written

    def render(self, document: Document, language_code: str) -> str:
        """Render the `strings.xml` content for one language."""

        lines = [_XML_DECLARATION, "<resources>"]
        for section in document.sections:
            section_lines: list[str] = []
            for key in section.keys:
                localization = key.localization_for(language_code)
                if localization is None:
                    continue
                section_lines.extend(self._render_localization(key.name, localization))
            if not section_lines:
                continue
            if self._section_comments and section.name:
                lines.append(f"{_INDENT}<!-- {section.name.replace('--', '- -')} -->")
            lines.extend(section_lines)
        lines.append("</resources>")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _render_localization(name: str, localization: LocalizedString) -> list[str]:
        """Render a `<string>` or `<plurals>` element for one key."""

        value = localization.value
        if isinstance(value, SingleValue):
            return [f"{_INDENT}<string name={quoteattr(name)}>{value.text}</string>"]
        if isinstance(value, PluralValues):
            lines = [f"{_INDENT}<plurals name={quoteattr(name)}>"]
            lines.extend(
                f"{_INDENT * 2}<item quantity={quoteattr(plural.quantity)}>{plural.text}</item>"
                for plural in value.quantities
            )
            lines.append(f"{_INDENT}</plurals>")
            return lines
        raise TypeError(f"Unsupported string value type `{type(value).__name__}`.")
