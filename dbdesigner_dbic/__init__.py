"""
Create DBIx::Class schemas from DBDesigner4 XML models.

    from dbdesigner_dbic import create_scheme

    create_scheme("model.xml", config={"namespace": "MyApp::DB", "output_path": "lib"})
"""

from .codegen import (
    ConfigError,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    WriteError,
    create_scheme,
    generate_from_file,
    generate_from_tables,
)
from .reader import ReaderError, read_model

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "ReaderError",
    "WriteError",
    "create_scheme",
    "generate_from_file",
    "generate_from_tables",
    "read_model",
]
