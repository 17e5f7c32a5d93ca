"""Pipeline orchestration for stringforge.

Responsibilities:
- Define the stage order for one conversion run: read, build, write.
- Map stage failures to stage-scoped errors with actionable hints.
- Summarize written outputs in a `ConversionManifest`.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..config import StringforgeConfig
from ..errors import ConversionStageError
from ..io.android_writer import AndroidResourceWriter
from ..io.storage import ArtifactStore
from ..io.twine_reader import read_twine_file
from ..models.datatypes import ConversionManifest, Document, RawResourceFile
from ..resources.assembler import ResourceFileAssembler
from ..telemetry.logger import RunLogger
from .telemetry import PipelineTelemetryMixin


class ConversionPipeline(PipelineTelemetryMixin):
    """Coordinate all stages for a single conversion run."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        stage_progress_callback: Callable[[str, int, int], None] | None = None,
    ) -> None:
        """Initialize optional runtime logging and progress reporting hooks."""

        self._run_logger = run_logger
        self._stage_progress_callback = stage_progress_callback

    def run(self, config: StringforgeConfig) -> ConversionManifest:
        """Read, normalize, and write resources for one config."""

        self._validate_config(config)
        raw_file = self._run_stage("read", lambda: self._read(config))
        document = self._run_stage("build", lambda: self._build(raw_file, config))
        written_paths = self._run_stage("write", lambda: self._write(document, config))
        keys = document.iter_keys()
        return ConversionManifest(
            input_path=config.input_path,
            output_dir=config.output_dir,
            output_format=config.output_format,
            default_language=config.default_language,
            section_count=len(document.sections),
            key_count=len(keys),
            languages=document.languages(),
            written_paths=tuple(written_paths),
            extra={
                "plural_key_count": str(sum(1 for key in keys if key.is_plural)),
                **config.extra,
            },
        )

    def list_keys(self, config: StringforgeConfig) -> Document:
        """Read and normalize resources without writing any output."""

        self._validate_config(config)
        raw_file = self._run_stage("read", lambda: self._read(config))
        return self._run_stage("build", lambda: self._build(raw_file, config))

    def _validate_config(self, config: StringforgeConfig) -> None:
        """Validate config and map failures to a stage-scoped error."""

        try:
            config.validate()
        except ValueError as exc:
            raise ConversionStageError(
                stage="config",
                detail=str(exc),
                hint="Fix config values and rerun.",
            ) from exc

    def _read(self, config: StringforgeConfig) -> RawResourceFile:
        """Read the raw resource file."""

        return read_twine_file(config.input_path)

    def _build(self, raw_file: RawResourceFile, config: StringforgeConfig) -> Document:
        """Build the normalized document."""

        return ResourceFileAssembler(workers=config.workers).assemble(raw_file)

    def _write(self, document: Document, config: StringforgeConfig) -> list[Path]:
        """Write the document with the configured resource writer."""

        writer = self._create_writer(config)
        try:
            return writer.write(document)
        except OSError as exc:
            raise ConversionStageError(
                stage="write",
                detail=f"Failed to write resources to `{config.output_dir}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc

    @staticmethod
    def _create_writer(config: StringforgeConfig) -> AndroidResourceWriter:
        """Create the resource writer for a configured output format."""

        if config.output_format == "android":
            return AndroidResourceWriter(
                store=ArtifactStore(config.output_dir),
                default_language=config.default_language,
                section_comments=config.section_comments,
            )
        raise ConversionStageError(
            stage="write",
            detail=f"Unsupported output format `{config.output_format}`.",
        )
