"""Basic smoke tests for project wiring.

These tests verify only import-level and basic object creation behavior.
"""

from pathlib import Path

from stringforge import ConversionPipeline, __version__
from stringforge.config import StringforgeConfig


def test_pipeline_can_be_instantiated() -> None:
    """Pipeline class should be constructible."""

    pipeline = ConversionPipeline()
    assert pipeline is not None


def test_config_dataclass_defaults() -> None:
    """Config should keep expected defaults."""

    config = StringforgeConfig(input_path=Path("strings.twine"), output_dir=Path("out"))
    assert config.default_language == "en"
    assert config.output_format == "android"
    assert config.section_comments is True
    assert config.workers == 1


def test_package_version_is_exposed() -> None:
    """Package should expose a version string."""

    assert __version__
