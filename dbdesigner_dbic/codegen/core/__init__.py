"""
Core code generation components.

Provides base classes and utilities used by all target generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    Table,
    RelationshipSet,
    derive_relationships,
    get_table_names,
)
from .naming import (
    MODULE_SEPARATOR,
    SCHEMA_NAME_CANDIDATES,
    choose_schema_name,
    join_module_name,
    split_module_name,
)
from .config import (
    GeneratorConfig,
    ConfigManager,
    ConfigError,
    load_config,
    validate_namespace,
)
from .templates import TemplateEngine, TemplateError, create_template_engine
from .writer import FileWriter, WriteError

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Table model and relationships
    "Table",
    "RelationshipSet",
    "derive_relationships",
    "get_table_names",
    # Naming
    "MODULE_SEPARATOR",
    "SCHEMA_NAME_CANDIDATES",
    "choose_schema_name",
    "join_module_name",
    "split_module_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "validate_namespace",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Output
    "FileWriter",
    "WriteError",
]
