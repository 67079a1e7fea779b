"""Configuration loading and validation for memberaccess."""
from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from memberaccess.constants import DEFAULT_EXCLUDES, DEFAULT_INCLUDE, OPTION_TOKENS
from memberaccess.types import ConfigError, MemberAccessConfig


class ConfigLoader:
    """Loads and validates the [tool.memberaccess] table."""

    @staticmethod
    def find_config_file(start_path: Path | None = None) -> Path | None:
        """
        Find pyproject.toml by walking up from start_path.

        Args:
            start_path: Directory to start searching from. Defaults to cwd.

        Returns:
            Path to pyproject.toml if found, None otherwise.
        """
        if start_path is None:
            start_path = Path.cwd()

        start_path = start_path.resolve()

        for directory in [start_path, *start_path.parents]:
            config_path: Path = directory / "pyproject.toml"
            if config_path.is_file():
                return config_path

        return None

    @staticmethod
    def load(path: Path | None = None) -> MemberAccessConfig:
        """
        Load configuration from pyproject.toml.

        Args:
            path: Explicit path to pyproject.toml. If None, searches upward.

        Returns:
            Validated MemberAccessConfig instance.

        Raises:
            ConfigError: If configuration is invalid.
        """
        if path is None:
            path = ConfigLoader.find_config_file()

        if path is None:
            return MemberAccessConfig()

        try:
            with open(path, "rb") as f:
                data: dict[str, Any] = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", path=path) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", path=path) from e

        tool_config: dict[str, Any] = data.get("tool", {}).get("memberaccess", {})

        return ConfigLoader._parse_config(tool_config, config_path=path)

    @staticmethod
    def _parse_config(
        data: dict[str, Any],
        *,
        config_path: Path | None = None,
    ) -> MemberAccessConfig:
        """Parse and validate configuration dictionary."""
        errors: list[str] = []

        options: tuple[str, ...] = ()
        raw_options: Any = data.get("options", [])
        if isinstance(raw_options, list) and all(isinstance(o, str) for o in raw_options):
            unknown: list[str] = [o for o in raw_options if o not in OPTION_TOKENS]
            if unknown:
                errors.append(
                    f"options contains unknown values: {unknown}; "
                    f"must be from {sorted(OPTION_TOKENS)}"
                )
            elif len(set(raw_options)) != len(raw_options):
                errors.append("options must not repeat a value")
            else:
                options = tuple(raw_options)
        else:
            errors.append("options must be a list of strings")

        include: tuple[str, ...] = ConfigLoader._parse_patterns(
            data, "include", DEFAULT_INCLUDE, errors,
        )
        exclude: tuple[str, ...] = ConfigLoader._parse_patterns(
            data, "exclude", DEFAULT_EXCLUDES, errors,
        )

        if errors:
            error_msg: str = "Configuration errors:\n" + "\n".join(
                f"  - {e}" for e in errors
            )
            raise ConfigError(error_msg, path=config_path)

        return MemberAccessConfig(
            config_path=config_path,
            options=options,
            include=include,
            exclude=exclude,
        )

    @staticmethod
    def _parse_patterns(
        data: dict[str, Any],
        key: str,
        default: tuple[str, ...],
        errors: list[str],
    ) -> tuple[str, ...]:
        raw: Any = data.get(key)
        if raw is None:
            return default
        if isinstance(raw, list) and all(isinstance(p, str) for p in raw):
            return tuple(raw)
        errors.append(f"{key} must be a list of strings, got {type(raw).__name__}")
        return default


def load_config(path: Path | None = None) -> MemberAccessConfig:
    """
    Convenience function to load configuration.

    Args:
        path: Optional explicit path to pyproject.toml.

    Returns:
        Validated configuration.
    """
    return ConfigLoader.load(path)
