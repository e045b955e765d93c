"""Tests for writing generated modules to disk."""

from pathlib import Path

import pytest

from dbdesigner_dbic.codegen.core.writer import FileWriter, WriteError


def test_module_path_below_output_root(tmp_path):
    writer = FileWriter(tmp_path)

    assert writer.module_path("MyApp::DB::DBIC_Scheme::Book") == tmp_path / "MyApp" / "DB" / "DBIC_Scheme" / "Book.pm"


def test_module_path_without_output_root():
    writer = FileWriter()

    assert writer.module_path("DBIC_Scheme") == Path("DBIC_Scheme.pm")
    assert writer.module_path("DBIC_Scheme::Book") == Path("DBIC_Scheme") / "Book.pm"


def test_custom_extension(tmp_path):
    writer = FileWriter(tmp_path, file_extension=".txt")

    assert writer.module_path("A::B").name == "B.txt"


def test_write_files_creates_directories(tmp_path):
    writer = FileWriter(tmp_path / "lib")
    files = {
        "MyApp::DBIC_Scheme::Book": "package MyApp::DBIC_Scheme::Book;\n1;\n",
        "MyApp::DBIC_Scheme": "package MyApp::DBIC_Scheme;\n1;\n",
    }

    paths = writer.write_files(files)

    assert paths == [
        tmp_path / "lib" / "MyApp" / "DBIC_Scheme" / "Book.pm",
        tmp_path / "lib" / "MyApp" / "DBIC_Scheme.pm",
    ]
    assert paths[0].read_text(encoding="utf-8") == files["MyApp::DBIC_Scheme::Book"]
    assert paths[1].read_text(encoding="utf-8") == files["MyApp::DBIC_Scheme"]


def test_write_error_aborts_remaining_files(tmp_path):
    # A regular file where a directory is needed
    (tmp_path / "Blocked").write_text("not a directory")
    writer = FileWriter(tmp_path)
    files = {
        "Blocked::Book": "package Blocked::Book;\n",
        "Other::Book": "package Other::Book;\n",
    }

    with pytest.raises(WriteError, match="Couldn't create"):
        writer.write_files(files)

    assert not (tmp_path / "Other").exists()


def test_empty_module_name_is_rejected(tmp_path):
    with pytest.raises(WriteError):
        FileWriter(tmp_path).module_path("::")
