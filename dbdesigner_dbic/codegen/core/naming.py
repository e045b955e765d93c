"""
Naming utilities for generated Perl packages.

Builds fully qualified package names and picks a name for the
aggregate schema class that does not collide with any table class.
"""

from typing import Iterable, List, Optional

from .config import ConfigError

MODULE_SEPARATOR = "::"

# Order matters: the first candidate not used by a table wins
SCHEMA_NAME_CANDIDATES = (
    "DBIC_Scheme",
    "Database",
    "DBIC",
    "MyScheme",
    "MyDatabase",
    "DBIxClass_Scheme",
)


def join_module_name(*parts: Optional[str], separator: str = MODULE_SEPARATOR) -> str:
    """
    Join package name segments, skipping empty ones.

    An empty namespace therefore never leaves a leading separator:

        join_module_name("", "DBIC_Scheme", "Book") == "DBIC_Scheme::Book"

    Args:
        *parts: Name segments (namespace, schema name, local name, ...)
        separator: Module path separator of the target language

    Returns:
        Fully qualified module name
    """
    return separator.join(part for part in parts if part)


def split_module_name(module_name: str, separator: str = MODULE_SEPARATOR) -> List[str]:
    """Split a fully qualified module name into its segments."""
    return [part for part in module_name.split(separator) if part]


def choose_schema_name(
    table_names: Iterable[str], candidates: Iterable[str] = SCHEMA_NAME_CANDIDATES
) -> str:
    """
    Pick the package name for the aggregate schema class.

    Args:
        table_names: Names of all tables (each becomes a class name)
        candidates: Ordered candidate names

    Returns:
        First candidate not used by a table

    Raises:
        ConfigError: If every candidate collides with a table name
    """
    taken = set(table_names)
    candidates = tuple(candidates)

    for candidate in candidates:
        if candidate not in taken:
            return candidate

    raise ConfigError(
        "no available schema name: every candidate "
        f"({', '.join(candidates)}) is already used by a table"
    )
