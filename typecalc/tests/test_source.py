"""
Tests for the character source reader.
"""
import pytest

from typecalc.exceptions import SourceUnavailableException
from typecalc.source import SourceReader


def test_read_until_exhausted():
    reader = SourceReader("ab")
    assert reader.read() == "a"
    assert reader.read() == "b"
    assert reader.read() == ""
    assert reader.read() == ""


def test_unread_returns_character_again():
    reader = SourceReader("xy")
    ch = reader.read()
    reader.unread(ch)
    assert reader.read() == "x"
    assert reader.read() == "y"


def test_only_one_character_of_pushback():
    reader = SourceReader("xy")
    reader.unread(reader.read())
    with pytest.raises(RuntimeError):
        reader.unread("q")


def test_unread_of_end_of_input_is_ignored():
    reader = SourceReader("")
    reader.unread(reader.read())
    assert reader.read() == ""


def test_from_path(tmp_path):
    path = tmp_path / "prog.tc"
    path.write_text("int a = 1;", encoding="utf-8")
    reader = SourceReader.from_path(path)
    assert reader.name == str(path)
    assert reader.read() == "i"


def test_from_missing_path_raises(tmp_path):
    missing = tmp_path / "missing.tc"
    with pytest.raises(SourceUnavailableException) as info:
        SourceReader.from_path(missing)
    assert str(missing) in str(info.value)
    assert str(info.value).startswith("Error opening file:")


def test_from_undecodable_path_raises(tmp_path):
    path = tmp_path / "latin1.tc"
    path.write_bytes(b"int a = 1; \xff\xfe\n")
    with pytest.raises(SourceUnavailableException) as info:
        SourceReader.from_path(path)
    assert isinstance(info.value.reason, UnicodeDecodeError)
    assert str(path) in str(info.value)
