"""
Target-specific code generators.

This module contains generators for the supported ORM targets.
"""

from .dbic import DBICGenerator, create_dbic_generator, create_namespaces_generator

__all__ = [
    "DBICGenerator",
    "create_dbic_generator",
    "create_namespaces_generator",
]
