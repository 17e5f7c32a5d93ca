"""Resource document assembly.

Responsibilities:
- Build one normalized `Key` per raw key, section by section.
- Preserve source key order, including when keys are built concurrently.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Mapping

from ..models.datatypes import Document, Key, RawResourceFile, RawSection, Section
from .builder import KeyBuilder


class ResourceFileAssembler:
    """Assemble raw reader output into a normalized `Document`."""

    def __init__(self, key_builder: KeyBuilder | None = None, workers: int = 1) -> None:
        """Initialize with an optional custom key builder and worker count."""

        if workers <= 0:
            raise ValueError("`workers` must be a positive integer.")
        self._key_builder = key_builder or KeyBuilder()
        self._workers = workers

    def assemble(self, raw_file: RawResourceFile) -> Document:
        """Build a document with one section per raw section."""

        return Document(
            sections=tuple(self.assemble_section(raw_section) for raw_section in raw_file.sections)
        )

    def assemble_section(self, raw_section: RawSection) -> Section:
        """Build one section, keeping keys in source order."""

        return Section(keys=self._build_keys(raw_section.keys), name=raw_section.name)

    def _build_keys(self, raw_keys: Mapping[str, Mapping[str, str | None]]) -> tuple[Key, ...]:
        """Build keys sequentially or fanned out across workers."""

        items = list(raw_keys.items())
        if self._workers == 1 or len(items) <= 1:
            return tuple(self._key_builder.build(name, raw) for name, raw in items)
        with ThreadPoolExecutor(max_workers=self._workers) as executor:
            # `map` yields results in submission order.
            return tuple(
                executor.map(lambda item: self._key_builder.build(item[0], item[1]), items)
            )


def assemble_document(raw_file: RawResourceFile, workers: int = 1) -> Document:
    """Assemble a document with the default key builder."""

    return ResourceFileAssembler(workers=workers).assemble(raw_file)
