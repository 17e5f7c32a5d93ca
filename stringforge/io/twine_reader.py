"""Twine resource file reader.

Responsibilities:
- Parse Twine-style INI text into ordered raw key/tag/value mappings.
- Group keys under `[[Section]]` headers.

Twine layout::

    [[General]]
      [login_title]
        en = Login
        ru = Логин
      [apples_count]
        en:one = %d apple
        en:other = %d apples

`[[...]]` lines open a section, `[...]` lines open a key, and each
`tag = value` line is one raw entry. An entry with nothing after `=` is kept
with an absent value so the key builder can report it. Indentation carries no
meaning, and a repeated `[[...]]` name opens a new section each time. A key
repeated under a later section merges into its first occurrence.
"""

from __future__ import annotations

import configparser
from pathlib import Path

from loguru import logger

from ..errors import ConversionStageError
from ..models.datatypes import RawResourceFile, RawSection

TWINE_METADATA_ATTRIBUTES = frozenset({"comment", "tags", "ref"})

# Never matches a real header, so no Twine key is treated as shared defaults.
_UNUSED_DEFAULT_SECTION = "\x00defaults"

# Prefix of the internal header standing in for the N-th `[[Name]]` line.
_SECTION_MARKER = "\x00section:"

_COMMENT_PREFIXES = ("#", ";")


def _new_parser() -> configparser.ConfigParser:
    """Create a parser configured for Twine syntax."""

    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=_COMMENT_PREFIXES,
        inline_comment_prefixes=None,
        strict=False,
        allow_no_value=True,
        empty_lines_in_values=False,
        interpolation=None,
        default_section=_UNUSED_DEFAULT_SECTION,
    )
    # Tags are case-sensitive.
    parser.optionxform = str
    return parser


def _flatten_twine_lines(text: str) -> tuple[str, list[str]]:
    """Prepare Twine text for `configparser` and collect section names.

    Indentation is dropped so no line continues the previous value, and every
    `[[Name]]` line becomes a unique internal header so repeated section names
    each open their own section. Returns the prepared text and the section
    names in header order.
    """

    section_names: list[str] = []
    key_sections: dict[str, int] = {}
    lines: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        header_match = None
        if not line.startswith(_COMMENT_PREFIXES):
            header_match = configparser.ConfigParser.SECTCRE.match(line)
        if header_match is None:
            lines.append(line)
            continue

        header = header_match.group("header")
        if header.startswith("[") and header.endswith("]"):
            section_names.append(header[1:-1].strip())
            lines.append(f"[{_SECTION_MARKER}{len(section_names) - 1}]")
            continue

        section_index = len(section_names) - 1
        first_index = key_sections.setdefault(header, section_index)
        if first_index != section_index:
            logger.debug(
                f"Key `{header}` repeats in a later section; "
                "its entries merge into its first occurrence."
            )
        lines.append(line)
    return "\n".join(lines), section_names


def _unquote_value(value: str | None) -> str | None:
    """Map blank values to `None` and strip Twine backtick quoting."""

    if value is None or value == "":
        return None
    if len(value) >= 2 and value.startswith("`") and value.endswith("`"):
        return value[1:-1]
    return value


def parse_twine_text(text: str, source_label: str = "<text>") -> RawResourceFile:
    """Parse Twine text into ordered raw sections."""

    prepared_text, section_names = _flatten_twine_lines(text)
    parser = _new_parser()
    try:
        parser.read_string(prepared_text, source=source_label)
    except configparser.Error as exc:
        raise ConversionStageError(
            stage="read",
            detail=f"Invalid resource file `{source_label}`: {exc}",
            hint="Every entry must follow a `[key]` header and use `tag = value` syntax.",
        ) from exc

    sections: list[RawSection] = []
    current_name: str | None = None
    current_keys: dict[str, dict[str, str | None]] = {}
    started = False

    for header in parser.sections():
        if header.startswith(_SECTION_MARKER):
            if started or current_keys:
                sections.append(RawSection(name=current_name, keys=current_keys))
            current_name = section_names[int(header[len(_SECTION_MARKER) :])]
            current_keys = {}
            started = True
            continue

        entries: dict[str, str | None] = {}
        for tag, value in parser.items(header, raw=True):
            if tag in TWINE_METADATA_ATTRIBUTES:
                logger.debug(f"Ignoring Twine attribute `{tag}` of key `{header}`.")
                continue
            entries[tag] = _unquote_value(value)
        current_keys[header] = entries

    if started or current_keys or not sections:
        sections.append(RawSection(name=current_name, keys=current_keys))
    return RawResourceFile(source=None, sections=tuple(sections))


def read_twine_file(path: Path) -> RawResourceFile:
    """Read and parse a Twine resource file from disk."""

    if not path.exists():
        raise ConversionStageError(
            stage="read",
            detail=f"Resource file not found: `{path}`.",
            hint="Provide an existing Twine resource file path.",
        )
    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ConversionStageError(
            stage="read",
            detail=f"Resource file `{path}` is not valid UTF-8: {exc}",
            hint="Re-save the resource file with UTF-8 encoding.",
        ) from exc

    parsed = parse_twine_text(text, source_label=str(path))
    return RawResourceFile(source=path, sections=parsed.sections)
