"""Command-line interface for stringforge.

Responsibilities:
- Expose user-facing commands for resource conversion.
- Convert CLI arguments into `StringforgeConfig` and run the pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_conversion_summary, echo_key_list, exit_with_command_error
from .config import ConfigLoader, StringforgeConfig
from .errors import ConversionStageError
from .pipeline import ConversionPipeline
from .telemetry.logger import RunLogger
from .text.normalizer import normalize_string

app = typer.Typer(
    name="stringforge",
    no_args_is_help=True,
    help="Convert Twine string resources into platform resource files.",
)


class ConvertProgressIndicator:
    """Render deterministic per-stage progress lines for conversion commands."""

    _SPINNER_FRAMES = "|/-\\"

    def __init__(self, command_name: str) -> None:
        """Initialize progress indicator metadata for a command invocation."""

        self._command_name = command_name

    def on_stage_start(self, stage_name: str, stage_index: int, stage_total: int) -> None:
        """Print one progress line for a stage start transition."""

        spinner = self._SPINNER_FRAMES[(stage_index - 1) % len(self._SPINNER_FRAMES)]
        typer.echo(
            f"[progress] command={self._command_name} "
            f"{spinner} {stage_index}/{stage_total} stage={stage_name}"
        )


def _load_yaml_config(config_path: Path | None) -> StringforgeConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise ConversionStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise ConversionStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise ConversionStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    input_path: Path | None,
    output_dir: Path | None,
    default_language: str | None,
    output_format: str | None,
    section_comments: bool | None,
    workers: int | None,
) -> StringforgeConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded_config = _load_yaml_config(config_file)

    if loaded_config is None:
        if input_path is None:
            raise ConversionStageError(
                stage="config",
                detail="Input resource path is required when `--config` is not provided.",
                hint="Pass `<input.twine>` or use `--config <path.yaml>` with `input_path`.",
            )
        loaded_config = StringforgeConfig(input_path=input_path, output_dir=Path("out"))

    return StringforgeConfig(
        input_path=input_path if input_path is not None else loaded_config.input_path,
        output_dir=output_dir if output_dir is not None else loaded_config.output_dir,
        default_language=(
            default_language if default_language is not None else loaded_config.default_language
        ),
        output_format=output_format if output_format is not None else loaded_config.output_format,
        section_comments=(
            section_comments if section_comments is not None else loaded_config.section_comments
        ),
        workers=workers if workers is not None else loaded_config.workers,
        extra=dict(loaded_config.extra),
    )


@app.command("convert")
def convert_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Path to source Twine file. Required unless provided by `--config`.",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Argument(help="Output directory (overrides config file value)."),
    ] = None,
    default_language: Annotated[
        str | None,
        typer.Argument(
            help="Language written to the unqualified `values` directory (default `en`).",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with command defaults.",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", help="Output resource format: `android`."),
    ] = None,
    section_comments: Annotated[
        bool | None,
        typer.Option(
            "--section-comments/--no-section-comments",
            help="Emit a comment with the section name before each section's strings.",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", help="Number of workers used to build keys."),
    ] = None,
) -> None:
    """Convert a Twine file into platform resource files."""

    try:
        config = _resolve_command_config(
            config_file=config_file,
            input_path=input_path,
            output_dir=output_dir,
            default_language=default_language,
            output_format=output_format,
            section_comments=section_comments,
            workers=workers,
        )
        progress = ConvertProgressIndicator(command_name="convert")
        pipeline = ConversionPipeline(
            run_logger=RunLogger(),
            stage_progress_callback=progress.on_stage_start,
        )
        manifest = pipeline.run(config)
    except Exception as exc:
        exit_with_command_error("convert", exc)

    echo_conversion_summary(manifest)


@app.command("list-keys")
def list_keys_command(
    input_path: Annotated[Path, typer.Argument(help="Path to source Twine file.")],
) -> None:
    """List keys with their kind and languages."""

    try:
        pipeline = ConversionPipeline()
        document = pipeline.list_keys(
            StringforgeConfig(input_path=input_path, output_dir=Path("out"))
        )
    except Exception as exc:
        exit_with_command_error("list-keys", exc)

    echo_key_list(document)


@app.command("normalize")
def normalize_command(
    text: Annotated[str, typer.Argument(help="Raw resource string to normalize.")],
) -> None:
    """Print the normalized form of one resource string."""

    typer.echo(normalize_string(text))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
