"""Shared fixtures for the test suite."""

import pytest

from dbdesigner_dbic.codegen.core.schema import Table

MODEL_XML = r"""<?xml version="1.0" standalone="yes" ?>
<DBMODEL Version="4.0">
<SETTINGS></SETTINGS>
<METADATA>
<TABLES>
<TABLE ID="1000" Tablename="Author" PrevTableName="Table_01">
<COLUMNS>
<COLUMN ID="1001" ColName="id" PrimaryKey="1" NotNull="1" AutoInc="1" IsForeignKey="0" />
<COLUMN ID="1002" ColName="name" PrimaryKey="0" NotNull="0" AutoInc="0" IsForeignKey="0" />
</COLUMNS>
<RELATIONS_START>
<RELATION_START ID="1010" />
</RELATIONS_START>
</TABLE>
<TABLE ID="1003" Tablename="Book" PrevTableName="Table_02">
<COLUMNS>
<COLUMN ID="1004" ColName="id" PrimaryKey="1" NotNull="1" AutoInc="1" IsForeignKey="0" />
<COLUMN ID="1005" ColName="title" PrimaryKey="0" NotNull="0" AutoInc="0" IsForeignKey="0" />
<COLUMN ID="1006" ColName="author_id" PrimaryKey="0" NotNull="1" AutoInc="0" IsForeignKey="1" />
</COLUMNS>
<RELATIONS_END>
<RELATION_END ID="1010" />
</RELATIONS_END>
</TABLE>
</TABLES>
<RELATIONS>
<RELATION ID="1010" RelationName="Author_has_Book" Kind="2" SrcTable="1000" DestTable="1003" FKFields="id=author_id\n" />
</RELATIONS>
</METADATA>
</DBMODEL>
"""


@pytest.fixture
def model_xml():
    """A DBDesigner4 model with Author and Book, Book referencing Author."""
    return MODEL_XML


@pytest.fixture
def model_file(tmp_path, model_xml):
    """The sample model written to a file."""
    path = tmp_path / "model.xml"
    path.write_text(model_xml, encoding="utf-8")
    return path


@pytest.fixture
def library_tables():
    """Author(id, name) and Book(id, title, author_id) with Book -> Author."""
    author = Table(name="Author", columns=["id", "name"], primary_key=["id"])
    book = Table(
        name="Book",
        columns=["id", "title", "author_id"],
        primary_key=["id"],
        foreign_keys={"Author": [("id", "author_id")]},
    )
    return [author, book]
