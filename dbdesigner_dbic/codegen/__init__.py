"""
DBDesigner4 code generation module.

Generates ORM classes from DBDesigner4 table definitions.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_target_info,
    list_supported_targets,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.schema import Table, RelationshipSet, derive_relationships
from .core.naming import SCHEMA_NAME_CANDIDATES, choose_schema_name, join_module_name
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .core.writer import FileWriter, WriteError

logger = get_logger(__name__)

ConfigLike = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


def _resolve_config(config: ConfigLike) -> GeneratorConfig:
    """Build a validated GeneratorConfig from any accepted config form."""
    if isinstance(config, GeneratorConfig):
        # Validate explicitly built configs as well
        ConfigManager().validate_config(config)
        return config
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    return load_config(custom_config=config)


def generate_from_tables(
    tables: List[Table], target: str = "dbic", config: ConfigLike = None
) -> GenerationResult:
    """
    Generate code for already parsed tables.

    Args:
        tables: Table definitions, in input order
        target: Target name
        config: Generator configuration (GeneratorConfig, dict, or path)

    Returns:
        GenerationResult with the generated modules
    """
    generator = get_generator(target, _resolve_config(config))
    return generate_code(generator, tables)


def generate_from_file(
    input_file: Optional[Union[str, Path]] = None,
    target: str = "dbic",
    config: ConfigLike = None,
    url: Optional[str] = None,
) -> GenerationResult:
    """
    Read a DBDesigner4 model and generate code, without writing files.

    The input is ``input_file``, ``url`` or the configured ``input_file``,
    in that order.

    Raises:
        ConfigError: If the configuration is invalid
        ReaderError: If no input is given or the model cannot be read
    """
    from ..reader import read_model
    from ..utils import load_model

    final_config = _resolve_config(config)

    if input_file is None and url is None:
        input_file = final_config.input_file

    source, document = load_model(file_path=input_file, url=url)
    tables = read_model(document)

    result = generate_from_tables(tables, target, final_config)
    result.metadata["source"] = source
    return result


def create_scheme(
    input_file: Optional[Union[str, Path]] = None,
    target: str = "dbic",
    config: ConfigLike = None,
    url: Optional[str] = None,
) -> List[Path]:
    """
    Create all files of the schema: the schema class and one class per table.

    Nothing is written unless every module was generated successfully.

    Args:
        input_file: DBDesigner4 XML file (defaults to the configured input_file)
        target: Target name
        config: Generator configuration (GeneratorConfig, dict, or path)
        url: URL of the model, instead of a file

    Returns:
        Paths of the written files

    Raises:
        ConfigError: If the configuration is invalid or no schema name is free
        ReaderError: If the model cannot be read
        GeneratorError: If code generation fails otherwise
        WriteError: On the first file that cannot be written
    """
    final_config = _resolve_config(config)
    result = generate_from_file(input_file, target, final_config, url=url)

    if not result.success:
        if isinstance(result.exception, (ConfigError, GeneratorError)):
            raise result.exception
        raise GeneratorError(result.error_message) from result.exception

    writer = FileWriter(final_config.output_path, final_config.file_extension)
    return writer.write_files(result.files)


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "Table",
    "RelationshipSet",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "FileWriter",
    "WriteError",
    "SCHEMA_NAME_CANDIDATES",
    "choose_schema_name",
    "create_scheme",
    "derive_relationships",
    "generate_code",
    "generate_from_file",
    "generate_from_tables",
    "get_generator",
    "get_target_info",
    "join_module_name",
    "list_supported_targets",
    "load_config",
]
