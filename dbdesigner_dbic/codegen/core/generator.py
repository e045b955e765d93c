"""
Base generator interface for all code generation targets.

Defines the contract that all target generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Tuple
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig
from .naming import MODULE_SEPARATOR, choose_schema_name, join_module_name
from .schema import RelationshipSet, Table, derive_relationships, get_table_names
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    #: Separator between segments of a fully qualified module name
    module_separator = MODULE_SEPARATOR

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target (e.g., 'dbic')."""
        pass

    @property
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.pm')."""
        return self.config.file_extension

    @property
    def namespace(self) -> str:
        return self.config.namespace

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def module_name(self, *parts: str) -> str:
        """Build a fully qualified module name below the configured namespace."""
        return join_module_name(self.namespace, *parts, separator=self.module_separator)

    def generate(self, tables: List[Table]) -> Dict[str, str]:
        """
        Generate the source of every table class and of the schema class.

        Args:
            tables: All tables of the model, in input order

        Returns:
            Dict mapping fully qualified module name to source text,
            table classes first (input order), schema class last
        """
        table_names = get_table_names(tables)
        relations = derive_relationships(tables)

        # Needed before any class is emitted: every package name contains it
        schema_name = choose_schema_name(table_names)
        logger.debug("Using schema name %s for %d tables", schema_name, len(tables))

        files: Dict[str, str] = {}

        for table in tables:
            module, source = self.generate_table_class(
                table, relations.get(table.name, RelationshipSet()), schema_name
            )
            files[module] = source

        module, source = self.generate_schema_module(table_names, schema_name)
        files[module] = source

        return files

    @abstractmethod
    def generate_table_class(
        self, table: Table, relations: RelationshipSet, schema_name: str
    ) -> Tuple[str, str]:
        """
        Generate the class of a single table.

        Args:
            table: Table to generate code for
            relations: Relationships of this table
            schema_name: Name of the aggregate schema class

        Returns:
            Tuple of (fully qualified module name, source text)
        """
        pass

    @abstractmethod
    def generate_schema_module(
        self, table_names: List[str], schema_name: str
    ) -> Tuple[str, str]:
        """
        Generate the aggregate schema class loading all table classes.

        Args:
            table_names: Local names of all table classes, in registration order
            schema_name: Name of the aggregate schema class

        Returns:
            Tuple of (fully qualified module name, source text)
        """
        pass

    def validate_tables(self, tables: List[Table]) -> List[str]:
        """
        Validate tables for basic structural issues.

        Target generators may override this to add their own checks.

        Args:
            tables: Tables to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        known = set(get_table_names(tables))

        for table in tables:
            if not table.columns:
                warnings.append(f"Table '{table.name}' has no columns")

            if not table.primary_key:
                warnings.append(f"Table '{table.name}' has no primary key")

            for referenced, pairs in table.foreign_keys.items():
                if referenced not in known:
                    warnings.append(
                        f"Table '{table.name}' references unknown table '{referenced}'"
                    )

                for _, local_column in pairs:
                    if local_column not in table.columns:
                        warnings.append(
                            f"Foreign key column {table.name}.{local_column} "
                            "is not a column of the table"
                        )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace and collapses runs of blank lines.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated sources keyed by fully qualified module name
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, tables: List[Table]) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        tables: Tables to generate code for

    Returns:
        GenerationResult with generated files, warnings, and metadata
    """
    try:
        warnings = generator.validate_tables(tables)
        for warning in warnings:
            logger.warning(warning)

        files = {
            module: generator.format_code(source)
            for module, source in generator.generate(tables).items()
        }

        # The schema module is always generated last
        schema_module = next(reversed(files))

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "namespace": generator.namespace,
            "table_count": len(tables),
            "schema_module": schema_module,
            "relationship_count": sum(
                len(pairs) for table in tables for pairs in table.foreign_keys.values()
            ),
        }

        logger.info("Generated %d modules (%s)", len(files), schema_module)
        return GenerationResult(files, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
