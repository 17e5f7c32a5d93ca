"""Integration tests for the Twine-to-Android convert CLI command."""

from pathlib import Path

from typer.testing import CliRunner

from stringforge.cli import app


def _relative_files(root: Path) -> list[Path]:
    """Return every file below a directory as sorted relative paths."""

    return sorted(path.relative_to(root) for path in root.rglob("*") if path.is_file())


def _assert_tree_matches(actual_root: Path, expected_root: Path) -> None:
    """Assert two resource trees hold the same files with identical content."""

    assert _relative_files(actual_root) == _relative_files(expected_root)
    for relative_path in _relative_files(expected_root):
        expected = (expected_root / relative_path).read_text(encoding="utf-8")
        actual = (actual_root / relative_path).read_text(encoding="utf-8")
        assert actual == expected, relative_path


def test_convert_command_writes_expected_android_resources(
    tmp_path: Path, receipts_twine_path: Path, files_dir: Path
) -> None:
    """Convert should write one normalized `strings.xml` per language."""

    runner = CliRunner()
    out_dir = tmp_path / "res"

    result = runner.invoke(app, ["convert", str(receipts_twine_path), str(out_dir)])

    assert result.exit_code == 0, result.output
    _assert_tree_matches(out_dir, files_dir / "expected" / "receipts_en")
    assert "[progress] command=convert | 1/3 stage=read" in result.output
    assert "[progress] command=convert / 2/3 stage=build" in result.output
    assert "[progress] command=convert - 3/3 stage=write" in result.output
    assert "[phase] level=INFO stage=write event=complete" in result.output
    assert "[skip] key=terms_notice reason=empty_value tag=ru" in result.output
    assert "Keys: 4" in result.output
    assert "Plural keys: 1" in result.output
    assert "Languages: en, ru, pt-BR" in result.output


def test_convert_command_maps_default_language_to_unqualified_directory(
    tmp_path: Path, receipts_twine_path: Path, files_dir: Path
) -> None:
    """The positional default language should decide which strings land in `values`."""

    runner = CliRunner()
    out_dir = tmp_path / "res"

    result = runner.invoke(app, ["convert", str(receipts_twine_path), str(out_dir), "ru"])

    assert result.exit_code == 0, result.output
    _assert_tree_matches(out_dir, files_dir / "expected" / "receipts_ru")
    assert "Default language: ru" in result.output


def test_convert_command_uses_yaml_config_with_cli_overrides(
    tmp_path: Path, receipts_twine_path: Path
) -> None:
    """YAML values should apply unless an explicit CLI option overrides them."""

    config_path = tmp_path / "stringforge.yml"
    config_path.write_text(
        "\n".join(
            [
                f"input_path: {receipts_twine_path.as_posix()}",
                f"output_dir: {(tmp_path / 'from-config').as_posix()}",
                "default_language: ru",
                "section_comments: true",
                "workers: 2",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["convert", "--config", str(config_path), "--no-section-comments"])

    assert result.exit_code == 0, result.output
    default_file = tmp_path / "from-config" / "values" / "strings.xml"
    content = default_file.read_text(encoding="utf-8")
    assert "Логин" in content
    assert "<!--" not in content
    assert (tmp_path / "from-config" / "values-en" / "strings.xml").exists()


def test_convert_command_with_workers_matches_sequential_output(
    tmp_path: Path, receipts_twine_path: Path, files_dir: Path
) -> None:
    """Fanning key building out over workers should not change the output."""

    runner = CliRunner()
    out_dir = tmp_path / "res"

    result = runner.invoke(
        app, ["convert", str(receipts_twine_path), str(out_dir), "--workers", "3"]
    )

    assert result.exit_code == 0, result.output
    _assert_tree_matches(out_dir, files_dir / "expected" / "receipts_en")


def test_list_keys_command_prints_sections_kinds_and_languages(receipts_twine_path: Path) -> None:
    """List-keys should print one row per key grouped by section."""

    runner = CliRunner()

    result = runner.invoke(app, ["list-keys", str(receipts_twine_path)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[lines.index("[General]") + 1 :] == [
        "login_title (single) en,ru,pt-BR",
        "discount_banner (single) en,ru",
        "terms_notice (single) en",
        "[Plurals]",
        "receipt_example (plural) en,ru",
    ]


def test_normalize_command_prints_normalized_string() -> None:
    """Normalize should print the canonical form of one raw string."""

    runner = CliRunner()

    result = runner.invoke(app, ["normalize", "100% Lorem %@ ipsum %.2f & <b>"])

    assert result.exit_code == 0, result.output
    assert result.output == "100%% Lorem %1$s ipsum %2$.2f &amp; &lt;b>\n"
