"""Read table definitions from DBDesigner4 XML models.

DBDesigner4 stores tables under ``DBMODEL/METADATA/TABLES`` and the
relations between them under ``DBMODEL/METADATA/RELATIONS``. A relation
points from the referenced table (``SrcTable``) to the table holding the
foreign key (``DestTable``); ``FKFields`` lists ``foreign=local`` column
pairs, one per line.
"""

import re
import xml.etree.ElementTree as ET

from .codegen.core.schema import Table
from .logging_config import get_logger

logger = get_logger(__name__)

# DBDesigner4 writes the separator as a literal backslash-n
FK_FIELD_SEPARATOR = re.compile(r"\\n|\r?\n")


class ReaderError(Exception):
    """Raised when a model cannot be read or is malformed."""

    pass


def parse_fk_fields(fk_fields: str) -> list[tuple[str, str]]:
    """Parse an ``FKFields`` attribute into (foreign_column, local_column) pairs.

    Args:
        fk_fields: Attribute value, e.g. ``"id=author_id\\n"``.

    Returns:
        Column pairs in declaration order.

    Raises:
        ReaderError: If an entry is not of the form ``foreign=local``.
    """
    pairs = []
    for entry in FK_FIELD_SEPARATOR.split(fk_fields or ""):
        entry = entry.strip()
        if not entry:
            continue

        foreign, sep, local = entry.partition("=")
        if not sep or not foreign.strip() or not local.strip():
            raise ReaderError(f"Invalid foreign key field mapping: {entry!r}")
        pairs.append((foreign.strip(), local.strip()))

    return pairs


def _parse_table(element: ET.Element) -> Table:
    name = (element.get("Tablename") or "").strip()
    if not name:
        raise ReaderError(f"Table {element.get('ID', '?')} has no name")

    table = Table(name=name)
    for column in element.iterfind("COLUMNS/COLUMN"):
        column_name = (column.get("ColName") or "").strip()
        if not column_name:
            raise ReaderError(f"Table {name} has a column without name")
        table.add_column(column_name, primary_key=column.get("PrimaryKey") == "1")

    return table


def read_model(xml_text: str | bytes) -> list[Table]:
    """Read all tables of a DBDesigner4 model.

    Args:
        xml_text: The XML document.

    Returns:
        Tables in document order, foreign keys attached to the tables
        declaring them.

    Raises:
        ReaderError: If the document is not a valid DBDesigner4 model.
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ReaderError(f"Invalid XML: {e}") from e

    if root.tag != "DBMODEL":
        raise ReaderError(f"Not a DBDesigner4 model: root element is <{root.tag}>")

    tables_by_id: dict[str, Table] = {}
    tables: list[Table] = []
    names: set[str] = set()

    for element in root.iterfind("METADATA/TABLES/TABLE"):
        table = _parse_table(element)
        if table.name in names:
            raise ReaderError(f"Duplicate table name: {table.name}")

        names.add(table.name)
        tables.append(table)
        tables_by_id[element.get("ID", table.name)] = table

    for relation in root.iterfind("METADATA/RELATIONS/RELATION"):
        name = relation.get("RelationName", relation.get("ID", "?"))
        src = tables_by_id.get(relation.get("SrcTable", ""))
        dest = tables_by_id.get(relation.get("DestTable", ""))

        if src is None or dest is None:
            raise ReaderError(f"Relation {name} refers to an unknown table")

        for foreign_column, local_column in parse_fk_fields(relation.get("FKFields", "")):
            dest.add_foreign_key(src.name, foreign_column, local_column)

        logger.debug("Relation %s: %s -> %s", name, dest.name, src.name)

    logger.info("Read %d tables", len(tables))
    return tables

