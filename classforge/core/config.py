"""
Configuration management for classforge.

Handles loading and merging configuration from JSON files,
providing defaults and validation for builder settings.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import ForgeError
from .placement import VersionPlacement
from .semver import Change


class ConfigError(ForgeError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class ForgeConfig:
    """Settings applied to builders at construction."""

    # Output settings
    output_root: Optional[str] = None
    language: str = "java"
    file_extension: str = ".java"
    encoding: str = "utf-8"

    # Versioning settings
    default_change: str = "major"  # major, minor, patch
    version_placement: str = "none"  # none, complete, short

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    def get_default_change(self) -> Change:
        try:
            return Change(self.default_change.lower())
        except (AttributeError, ValueError) as e:
            raise ConfigError(f"Invalid default_change: {self.default_change}") from e

    def get_version_placement(self) -> VersionPlacement:
        try:
            return VersionPlacement(self.version_placement.lower())
        except (AttributeError, ValueError) as e:
            raise ConfigError(
                f"Invalid version_placement: {self.version_placement}"
            ) from e


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "language": "java",
            "file_extension": ".java",
            "encoding": "utf-8",
            "default_change": "major",
            "version_placement": "none",
        }

    def get_config(
        self,
        language: str = "java",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> ForgeConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults
        base_config = self._configs.get(language, {"language": language}).copy()

        # Load from file if provided
        if config_file:
            base_config.update(self._load_config_file(config_file))

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> ForgeConfig:
        """Convert dictionary to ForgeConfig instance."""
        known_fields = set(ForgeConfig.__dataclass_fields__)

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return ForgeConfig(**config_args)

    def validate_config(self, config: ForgeConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.default_change not in {c.value for c in Change}:
            warnings.append(f"Invalid default_change: {config.default_change}")

        if config.version_placement not in {p.value for p in VersionPlacement}:
            warnings.append(f"Invalid version_placement: {config.version_placement}")

        if not config.file_extension.startswith("."):
            warnings.append(
                f"file_extension should start with '.': {config.file_extension}"
            )

        if config.language not in self._configs:
            warnings.append(f"No defaults for language: {config.language}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "java",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> ForgeConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)

