"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import re
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, asdict


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


NAMESPACE_PATTERN = re.compile(r"[A-Z]\w*(::[A-Z]\w*)*")

LAYOUTS = ("classes", "namespaces")


@dataclass
class GeneratorConfig:
    """Configuration for the schema generator."""

    # Naming
    namespace: str = ""

    # Input / output locations
    input_file: Optional[str] = None
    output_path: Optional[str] = None
    file_extension: str = ".pm"

    # Layout of the generated classes: "classes" lists every table class
    # in the schema, "namespaces" puts them under Result:: and lets the
    # schema discover them.
    layout: str = "classes"

    # Code style settings
    indent_size: int = 4
    add_comments: bool = False

    # Custom settings (target-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


def validate_namespace(namespace: Optional[str]) -> str:
    """
    Validate a package namespace.

    The namespace is either empty or a ``::`` separated list of segments
    each starting with an uppercase letter, e.g. ``MyApp::DB``.

    Returns:
        The namespace, normalized to "" when None

    Raises:
        ConfigError: If the namespace is not valid
    """
    if namespace is None:
        return ""

    if not isinstance(namespace, str):
        raise ConfigError(f"no valid namespace given: {namespace!r} is not a string")

    if namespace and not NAMESPACE_PATTERN.fullmatch(namespace):
        raise ConfigError(f"no valid namespace given: {namespace!r}")

    return namespace


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete, validated configuration.

        Args:
            custom_config: Configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration

        Raises:
            ConfigError: If the file cannot be loaded or a value is invalid
        """
        # Start with defaults
        base_config = dict(self._defaults)
        base_config["custom"] = {}

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply overrides, ignoring unset values
        if custom_config:
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        config = self._dict_to_config(base_config)
        self.validate_config(config)
        return config

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in GeneratorConfig.__dataclass_fields__.values()}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = config_args.get("custom") or {}
            if not isinstance(existing_custom, dict):
                raise ConfigError(f"Invalid custom settings: {existing_custom!r}")
            existing_custom = dict(existing_custom)
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def validate_config(self, config: GeneratorConfig) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigError: On the first invalid value
        """
        config.namespace = validate_namespace(config.namespace)

        if not isinstance(config.layout, str) or config.layout not in LAYOUTS:
            raise ConfigError(
                f"Invalid layout: {config.layout} (expected one of {', '.join(LAYOUTS)})"
            )

        if not isinstance(config.file_extension, str) or not config.file_extension.startswith("."):
            raise ConfigError(f"Invalid file extension: {config.file_extension}")

        # bool is an int subclass but never a valid indentation
        if (
            not isinstance(config.indent_size, int)
            or isinstance(config.indent_size, bool)
            or config.indent_size < 0
        ):
            raise ConfigError(f"Invalid indent_size: {config.indent_size}")

        if not isinstance(config.add_comments, bool):
            raise ConfigError(f"Invalid add_comments: {config.add_comments!r} (expected true or false)")

        for name in ("input_file", "output_path"):
            value = getattr(config, name)
            if value is not None and not isinstance(value, (str, Path)):
                raise ConfigError(f"Invalid {name}: {value!r} (expected a path)")

        if not isinstance(config.custom, dict):
            raise ConfigError(f"Invalid custom settings: {config.custom!r}")


# Global configuration manager instance
_config_manager = None

def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
