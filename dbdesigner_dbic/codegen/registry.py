"""
Generator registry: maps target names and aliases to generator classes.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry of the available ORM targets."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator for a target.

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias
                already points to another target
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        target_key = target.lower()

        for alias in aliases or []:
            owner = self._aliases.get(alias.lower())
            if owner is not None and owner != target_key:
                raise RegistryError(f"Alias '{alias}' already points to '{owner}'")

        self._generators[target_key] = generator_class
        for alias in aliases or []:
            self._aliases[alias.lower()] = target_key

    def get_generator_class(self, target: str) -> Type[CodeGenerator]:
        """
        Get generator class for a target name or alias.

        Raises:
            RegistryError: If target not found
        """
        target_key = target.lower()
        target_key = self._aliases.get(target_key, target_key)

        if target_key not in self._generators:
            raise RegistryError(
                f"No generator registered for target: {target}. "
                f"Available: {', '.join(self.list_targets())}"
            )
        return self._generators[target_key]

    def create_generator(
        self,
        target: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for target.

        Args:
            target: Target name or alias
            config: Configuration as GeneratorConfig, dict, or file path

        Raises:
            RegistryError: If the target or the config type is unknown
            ConfigError: If the configuration is invalid
        """
        generator_class = self.get_generator_class(target)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(config_file=config)
        elif isinstance(config, dict) or config is None:
            final_config = load_config(custom_config=config)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config)

    def list_targets(self) -> List[str]:
        """Get list of registered primary target names."""
        return sorted(self._generators)

    def get_target_info(self, target: str) -> Dict[str, Any]:
        """
        Get information about a registered target.

        Raises:
            RegistryError: If target not found
        """
        generator_class = self.get_generator_class(target)
        generator = generator_class(load_config())

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": sorted(
                alias for alias, owner in self._aliases.items()
                if self._generators[owner] is generator_class
            ),
            "module": generator_class.__module__,
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the generators shipped with the package."""
    from .languages.dbic import DBICGenerator

    registry.register("dbic", DBICGenerator, aliases=["dbix-class", "perl"])


def get_generator(
    target: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(target, config)


def list_supported_targets() -> List[str]:
    """List all supported targets from global registry."""
    return get_registry().list_targets()


def get_target_info(target: str) -> Dict[str, Any]:
    """Get information about a supported target."""
    return get_registry().get_target_info(target)
