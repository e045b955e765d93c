"""Tests for reading DBDesigner4 XML models."""

import pytest

from dbdesigner_dbic.reader import ReaderError, parse_fk_fields, read_model


def test_reads_tables_in_document_order(model_xml):
    tables = read_model(model_xml)

    assert [table.name for table in tables] == ["Author", "Book"]


def test_reads_columns_and_primary_key(model_xml):
    author, book = read_model(model_xml)

    assert author.columns == ["id", "name"]
    assert author.primary_key == ["id"]
    assert book.columns == ["id", "title", "author_id"]
    assert book.primary_key == ["id"]


def test_relation_becomes_foreign_key_of_destination_table(model_xml):
    author, book = read_model(model_xml)

    assert author.foreign_keys == {}
    assert book.foreign_keys == {"Author": [("id", "author_id")]}


def test_reads_bytes(model_xml):
    tables = read_model(model_xml.encode("utf-8"))

    assert len(tables) == 2


def test_parse_fk_fields_literal_and_real_newlines():
    assert parse_fk_fields(r"id=author_id\nlang=lang_code\n") == [
        ("id", "author_id"),
        ("lang", "lang_code"),
    ]
    assert parse_fk_fields("id=author_id\nlang=lang_code") == [
        ("id", "author_id"),
        ("lang", "lang_code"),
    ]
    assert parse_fk_fields("") == []


def test_parse_fk_fields_rejects_malformed_entry():
    with pytest.raises(ReaderError, match="Invalid foreign key"):
        parse_fk_fields("author_id")


def test_invalid_xml():
    with pytest.raises(ReaderError, match="Invalid XML"):
        read_model("<DBMODEL><METADATA>")


def test_wrong_root_element():
    with pytest.raises(ReaderError, match="Not a DBDesigner4 model"):
        read_model("<project/>")


def test_empty_model_has_no_tables():
    assert read_model("<DBMODEL><METADATA><TABLES/></METADATA></DBMODEL>") == []


def test_table_without_name():
    xml = '<DBMODEL><METADATA><TABLES><TABLE ID="1"/></TABLES></METADATA></DBMODEL>'

    with pytest.raises(ReaderError, match="has no name"):
        read_model(xml)


def test_duplicate_table_name():
    xml = (
        "<DBMODEL><METADATA><TABLES>"
        '<TABLE ID="1" Tablename="Book"/><TABLE ID="2" Tablename="Book"/>'
        "</TABLES></METADATA></DBMODEL>"
    )

    with pytest.raises(ReaderError, match="Duplicate table name"):
        read_model(xml)


def test_relation_to_unknown_table():
    xml = (
        "<DBMODEL><METADATA>"
        '<TABLES><TABLE ID="1" Tablename="Book"/></TABLES>'
        '<RELATIONS><RELATION ID="9" RelationName="r" SrcTable="2" DestTable="1" FKFields="id=x"/></RELATIONS>'
        "</METADATA></DBMODEL>"
    )

    with pytest.raises(ReaderError, match="unknown table"):
        read_model(xml)


def test_self_relation():
    xml = (
        "<DBMODEL><METADATA><TABLES>"
        '<TABLE ID="1" Tablename="Category"><COLUMNS>'
        '<COLUMN ColName="id" PrimaryKey="1"/><COLUMN ColName="parent_id" PrimaryKey="0"/>'
        "</COLUMNS></TABLE></TABLES>"
        '<RELATIONS><RELATION ID="2" SrcTable="1" DestTable="1" FKFields="id=parent_id\\n"/></RELATIONS>'
        "</METADATA></DBMODEL>"
    )

    (category,) = read_model(xml)

    assert category.foreign_keys == {"Category": [("id", "parent_id")]}
