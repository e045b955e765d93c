"""
DBIx::Class code generator module.

Generates Perl DBIx::Class result classes and the schema class
from DBDesigner4 table definitions.
"""

from .generator import (
    DBICGenerator,
    LAYOUT_SETTINGS,
    create_dbic_generator,
    create_namespaces_generator,
)

__all__ = [
    "DBICGenerator",
    "LAYOUT_SETTINGS",
    "create_dbic_generator",
    "create_namespaces_generator",
]
