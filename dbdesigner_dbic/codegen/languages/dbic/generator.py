"""
DBIx::Class code generator implementation.

Generates one DBIx::Class result class per table plus the schema class
loading them, using templates.
"""

from typing import Dict, List, Any, Tuple
from pathlib import Path

from ....logging_config import get_logger
from ...core.generator import CodeGenerator, GeneratorError
from ...core.schema import ColumnPair, RelationshipSet, Table

logger = get_logger(__name__)

# Base class and components per layout
LAYOUT_SETTINGS = {
    "classes": {
        "base_class": "DBIx::Class",
        "load_components": ["PK::Auto", "Core"],
        "result_namespace": None,
    },
    "namespaces": {
        "base_class": "DBIx::Class::Core",
        "load_components": [],
        "result_namespace": "Result",
    },
}


class DBICGenerator(CodeGenerator):
    """Code generator for DBIx::Class schemas."""

    @property
    def language_name(self) -> str:
        """Return the target name."""
        return "dbic"

    def get_template_directory(self) -> Path:
        """Return the DBIx::Class templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def layout(self) -> Dict[str, Any]:
        return LAYOUT_SETTINGS[self.config.layout]

    @property
    def indent(self) -> str:
        return " " * self.config.indent_size

    def table_module_name(self, schema_name: str, table_name: str) -> str:
        """Fully qualified package of a table class."""
        return self.module_name(schema_name, self.layout["result_namespace"], table_name)

    def generate_table_class(
        self, table: Table, relations: RelationshipSet, schema_name: str
    ) -> Tuple[str, str]:
        """Generate the result class of one table."""
        if not table.name:
            raise GeneratorError("Cannot generate a class for a table without name")

        package = self.table_module_name(schema_name, table.name)

        has_many = []
        belongs_to = []

        for other_table, pairs in relations.outgoing.items():
            has_many.extend(
                self._relationship_data("has_many", schema_name, other_table, pairs)
            )

        for other_table, pairs in relations.incoming.items():
            belongs_to.extend(
                self._relationship_data("belongs_to", schema_name, other_table, pairs)
            )

        context = {
            "package": package,
            "table_name": table.name,
            "base_class": self.layout["base_class"],
            "load_components": self.layout["load_components"],
            "columns": table.columns,
            "primary_key": table.primary_key,
            "has_many": has_many,
            "belongs_to": belongs_to,
            "indent": self.indent,
            "add_comments": self.config.add_comments,
        }

        logger.debug(
            "Rendering %s (%d has_many, %d belongs_to)",
            package,
            len(has_many),
            len(belongs_to),
        )
        return package, self.render_template("result_class.pm.j2", context)

    def _relationship_data(
        self,
        kind: str,
        schema_name: str,
        other_table: str,
        pairs: Tuple[ColumnPair, ...],
    ) -> List[Dict[str, str]]:
        """
        Build one relationship declaration per column pair.

        Each declaration is named after its local column; pairs sharing a
        local column produce declarations with the same name.
        """
        package = self.table_module_name(schema_name, other_table)

        return [
            {
                "kind": kind,
                "name": local_column,
                "package": package,
                "foreign_column": foreign_column,
                "local_column": local_column,
            }
            for foreign_column, local_column in pairs
        ]

    def generate_schema_module(
        self, table_names: List[str], schema_name: str
    ) -> Tuple[str, str]:
        """Generate the schema class loading every table class."""
        package = self.module_name(schema_name)

        context = {
            "package": package,
            "classes": table_names,
            "layout": self.config.layout,
            "indent": self.indent,
            "add_comments": self.config.add_comments,
        }

        return package, self.render_template("schema.pm.j2", context)


# Factory functions
def create_dbic_generator(config=None, **overrides) -> DBICGenerator:
    """
    Create a DBIx::Class generator.

    Args:
        config: GeneratorConfig to use (defaults if None)
        **overrides: Configuration values applied on top of ``config``

    Returns:
        Configured DBICGenerator instance
    """
    from ...core.config import load_config
    from dataclasses import asdict

    base = asdict(config) if config is not None else {}
    base.update(overrides)
    return DBICGenerator(load_config(custom_config=base))


def create_namespaces_generator(namespace: str = "", **overrides) -> DBICGenerator:
    """Create a generator using the Result:: / load_namespaces layout."""
    return create_dbic_generator(namespace=namespace, layout="namespaces", **overrides)
