"""
Pydantic Settings for contentdigest configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .di import get_logger
from .exceptions import ConfigValidationError
from .models.config import DigestConfig, LoggingConfig

CONFIG_DIR_NAME = ".contentdigest"
CONFIG_FILE_NAME = "config.toml"
PYPROJECT_TOOL_KEY = "contentdigest"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .contentdigest/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml carrying a [tool.contentdigest] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if PYPROJECT_TOOL_KEY in data.get("tool", {}):
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                get_logger().debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                get_logger().debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get(PYPROJECT_TOOL_KEY, {})

            self._data = data
            self._data["config_file"] = str(path)

        except tomllib.TOMLDecodeError as e:
            get_logger().warning("Failed to parse config file %s: %s", path, e)
            self._data["config_error"] = f"Failed to parse config file: {e}"
        except OSError as e:
            get_logger().warning("Failed to read config file %s: %s", path, e)
            self._data["config_error"] = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class DigestSettings(BaseSettings):
    """contentdigest configuration with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (CONTENTDIGEST_<section>__<field>)
    3. TOML config file (.contentdigest/config.toml or pyproject.toml
       [tool.contentdigest])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "CONTENTDIGEST_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    digest: DigestConfig = DigestConfig()
    logging: LoggingConfig = LoggingConfig()

    # Populated by the TOML source, never by users
    config_file: str | None = None
    config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        Note: config_path/start_dir cannot be threaded through here, so
        load_settings() passes them via module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert settings to a plain nested dict."""
        result: dict[str, Any] = {
            "digest": self.digest.model_dump(),
            "logging": self.logging.model_dump(),
        }
        if self.config_file:
            result["config_file"] = self.config_file
        if self.config_error:
            result["config_error"] = self.config_error
        return result


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None


def load_settings(config_path: Path | None = None, start_dir: str | None = None) -> DigestSettings:
    """Load contentdigest settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)

    Returns:
        DigestSettings instance with all sources merged

    Raises:
        ConfigValidationError: If a configured value is invalid
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        return DigestSettings()
    except ValidationError as e:
        errors = e.errors()
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
        )
        raise ConfigValidationError(
            f"invalid configuration: {details}",
            key=".".join(str(part) for part in errors[0]["loc"]) if errors else None,
        ) from e
    finally:
        _current_config_path = None
        _current_start_dir = None
