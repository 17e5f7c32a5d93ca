"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
conversion summaries, and key listing rows.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import ConversionStageError
from .models.datatypes import ConversionManifest, Document


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, ConversionStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_conversion_summary(manifest: ConversionManifest) -> None:
    """Print written files and document counts for a conversion run."""

    for path in manifest.written_paths:
        typer.echo(f"Wrote: {path}")
    typer.echo(f"Sections: {manifest.section_count}")
    typer.echo(f"Keys: {manifest.key_count}")
    typer.echo(f"Plural keys: {manifest.extra.get('plural_key_count', '0')}")
    typer.echo(f"Languages: {', '.join(manifest.languages) or '(none)'}")
    typer.echo(f"Default language: {manifest.default_language}")


def echo_key_list(document: Document) -> None:
    """Print one row per key with its kind and languages, grouped by section."""

    for section in document.sections:
        if section.name:
            typer.echo(f"[{section.name}]")
        for key in section.keys:
            kind = "plural" if key.is_plural else "single"
            languages = ",".join(key.languages) or "-"
            typer.echo(f"{key.name} ({kind}) {languages}")
