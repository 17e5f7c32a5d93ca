"""Configuration model and loaders for stringforge.

Responsibilities:
- Define conversion configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `StringforgeConfig`: normalized settings for one conversion run.
- `ConfigLoader`: static construction helpers for `StringforgeConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean, parse_positive_int


_DEFAULT_LANGUAGE = "en"
_DEFAULT_OUTPUT_FORMAT = "android"
SUPPORTED_OUTPUT_FORMATS = frozenset({"android"})


@dataclass(slots=True)
class StringforgeConfig:
    """Runtime configuration for one conversion run.

    Attributes:
        input_path: Path to the source Twine resource file.
        output_dir: Root directory for written resource files.
        default_language: Language written to the unqualified resource directory.
        output_format: Resource writer identifier.
        section_comments: Whether writers emit section-name comments.
        workers: Number of workers used to build keys.
        extra: Additional metadata for future extensions.
    """

    input_path: Path
    output_dir: Path
    default_language: str = _DEFAULT_LANGUAGE
    output_format: str = _DEFAULT_OUTPUT_FORMAT
    section_comments: bool = True
    workers: int = 1
    extra: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate configuration values before conversion."""

        if self.output_format not in SUPPORTED_OUTPUT_FORMATS:
            supported = ", ".join(sorted(SUPPORTED_OUTPUT_FORMATS))
            raise ValueError(
                f"Unsupported `output_format` value `{self.output_format}`; supported: {supported}."
            )
        if not isinstance(self.default_language, str) or not self.default_language.strip():
            raise ValueError("`default_language` must be a non-empty string.")
        if isinstance(self.workers, bool) or not isinstance(self.workers, int) or self.workers <= 0:
            raise ValueError("`workers` must be a positive integer.")


class ConfigLoader:
    """Factory methods for creating `StringforgeConfig` from external sources."""

    _REQUIRED_YAML_KEYS = frozenset({"input_path", "output_dir"})
    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "input_path",
            "output_dir",
            "default_language",
            "output_format",
            "section_comments",
            "workers",
            "extra",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> StringforgeConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> StringforgeConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        input_path = ConfigLoader._required_env_path(env_map, "STRINGFORGE_INPUT")
        output_dir = ConfigLoader._optional_env_path(env_map, "STRINGFORGE_OUTPUT_DIR") or Path(
            "out"
        )
        default_language = (
            ConfigLoader._optional_env_string(env_map, "STRINGFORGE_DEFAULT_LANGUAGE")
            or _DEFAULT_LANGUAGE
        )
        output_format = (
            ConfigLoader._optional_env_string(env_map, "STRINGFORGE_OUTPUT_FORMAT")
            or _DEFAULT_OUTPUT_FORMAT
        )
        section_comments = ConfigLoader._optional_env_boolean(
            env_map, "STRINGFORGE_SECTION_COMMENTS"
        )
        workers = ConfigLoader._optional_env_positive_int(env_map, "STRINGFORGE_WORKERS") or 1

        config = StringforgeConfig(
            input_path=input_path,
            output_dir=output_dir,
            default_language=default_language,
            output_format=output_format,
            section_comments=True if section_comments is None else section_comments,
            workers=workers,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> StringforgeConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        input_path = ConfigLoader._required_path(payload, "input_path", source_label)
        output_dir = ConfigLoader._required_path(payload, "output_dir", source_label)
        default_language = (
            ConfigLoader._optional_non_empty_string(payload, "default_language")
            or _DEFAULT_LANGUAGE
        )
        output_format = (
            ConfigLoader._optional_non_empty_string(payload, "output_format")
            or _DEFAULT_OUTPUT_FORMAT
        )
        section_comments = ConfigLoader._optional_boolean(
            payload, "section_comments", source_label, default=True
        )
        workers = ConfigLoader._optional_positive_int(payload, "workers", source_label, default=1)
        extra = ConfigLoader._optional_string_map(payload, "extra", source_label)

        config = StringforgeConfig(
            input_path=input_path,
            output_dir=output_dir,
            default_language=default_language,
            output_format=output_format,
            section_comments=section_comments,
            workers=workers,
            extra=extra,
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")

    @staticmethod
    def _required_path(payload: Mapping[str, Any], key: str, source_label: str) -> Path:
        """Read a required non-empty path-like field from a payload."""

        value = ConfigLoader._optional_non_empty_string(payload, key)
        if value is None:
            raise ValueError(f"{source_label} requires non-empty `{key}`.")
        return Path(value)

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload or normalize_optional_string(payload[key]) is None:
            return default
        try:
            return parse_positive_int(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.") from exc

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping with non-empty string keys and values."""

        if key not in payload:
            return {}

        raw = payload[key]
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            key_value = normalize_optional_string(raw_key)
            value_value = normalize_optional_string(raw_value)
            if key_value is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            if value_value is None:
                raise ValueError(
                    f"{source_label} field `{key}` contains blank value for `{key_value}`."
                )
            normalized[key_value] = value_value
        return normalized

    @staticmethod
    def _required_env_path(env: Mapping[str, str], key: str) -> Path:
        """Read a required non-empty path value from environment mapping."""

        value = ConfigLoader._optional_env_string(env, key)
        if value is None:
            raise ValueError(f"Environment variable `{key}` is required.")
        return Path(value)

    @staticmethod
    def _optional_env_path(env: Mapping[str, str], key: str) -> Path | None:
        """Read an optional path value from environment mapping."""

        value = ConfigLoader._optional_env_string(env, key)
        if value is None:
            return None
        return Path(value)

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            return parse_positive_int(raw_value, key)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
