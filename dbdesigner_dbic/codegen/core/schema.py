"""
Core table representation for code generation.

Holds the normalized table descriptors produced by the reader and
derives the has-many / belongs-to relationships between them.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# (foreign_column, local_column)
ColumnPair = Tuple[str, str]


@dataclass
class Table:
    """Represents a single table of the database model."""

    name: str
    columns: List[str] = field(default_factory=list)
    primary_key: List[str] = field(default_factory=list)

    # Maps referenced table name to the column pairs joining the two tables
    foreign_keys: Dict[str, List[ColumnPair]] = field(default_factory=dict)

    def add_column(self, name: str, primary_key: bool = False) -> None:
        """Add a column, registering it as part of the primary key if asked."""
        self.columns.append(name)
        if primary_key:
            self.primary_key.append(name)

    def add_foreign_key(
        self, referenced_table: str, foreign_column: str, local_column: str
    ) -> None:
        """Declare that ``local_column`` references ``referenced_table.foreign_column``."""
        pairs = self.foreign_keys.setdefault(referenced_table, [])
        pairs.append((foreign_column, local_column))


@dataclass
class RelationshipSet:
    """
    Relationships of one table, keyed by the other table's name.

    ``outgoing`` entries become has_many declarations (the other table
    references this one), ``incoming`` entries become belongs_to
    declarations (this table references the other one).
    """

    outgoing: Dict[str, Tuple[ColumnPair, ...]] = field(default_factory=dict)
    incoming: Dict[str, Tuple[ColumnPair, ...]] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.outgoing and not self.incoming


def derive_relationships(tables: List[Table]) -> Dict[str, RelationshipSet]:
    """
    Build the relationship set of every table from the declared foreign keys.

    Every foreign key declared by table T on table R adds an incoming
    entry to T and an outgoing entry to R, sharing the same column pairs.

    Args:
        tables: All tables of the model, in input order

    Returns:
        Dict mapping table name to its RelationshipSet
    """
    relations: Dict[str, RelationshipSet] = {
        table.name: RelationshipSet() for table in tables
    }

    for table in tables:
        for referenced, pairs in table.foreign_keys.items():
            frozen = tuple(tuple(pair) for pair in pairs)
            target = relations.setdefault(referenced, RelationshipSet())
            source = relations[table.name]

            target.outgoing[table.name] = target.outgoing.get(table.name, ()) + frozen
            source.incoming[referenced] = source.incoming.get(referenced, ()) + frozen

    return relations


def get_table_names(tables: List[Table]) -> List[str]:
    """Return table names in registration (input) order."""
    return [table.name for table in tables]
