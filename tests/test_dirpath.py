import pytest

from citygraph.dirpath import Dir


def test_parse_splits_parts():
    d = Dir.parse("./input/t2/c1.geo")
    assert d.path == "./input/t2/"
    assert d.file_name == "c1"
    assert d.file_ext == "geo"


def test_parse_without_directory():
    d = Dir.parse("map.via")
    assert d.path == ""
    assert d.file_name == "map"
    assert d.file_ext == "via"


def test_parse_dot_in_directory_only():
    d = Dir.parse("a.b/c")
    assert d.path == "a.b/"
    assert d.file_name == "c"
    assert d.file_ext == ""


def test_parse_uses_last_dot():
    d = Dir.parse("dir/archive.tar.gz")
    assert d.file_name == "archive.tar"
    assert d.file_ext == "gz"


def test_parse_hidden_file():
    d = Dir.parse("dir/.hidden")
    assert d.file_name == ""
    assert d.file_ext == "hidden"


def test_parse_empty_raises():
    with pytest.raises(ValueError):
        Dir.parse("")


@pytest.mark.parametrize("path", ["./input", "./input/"])
def test_combine_inserts_single_slash(path):
    d = Dir.combine(path, "c1.geo")
    assert d.full_path() == "./input/c1.geo"


def test_combine_empty_path():
    d = Dir.combine("", "c1.qry")
    assert d.full_path() == "c1.qry"
    assert d.file_ext == "qry"


def test_full_path_round_trip():
    text = "out/result/c1-00.svg"
    assert Dir.parse(text).full_path() == text
    assert str(Dir.parse(text)) == text


def test_write_then_read(tmp_path):
    d = Dir.combine(str(tmp_path), "report.txt")
    assert not d.exists()
    with d.open_writable() as handle:
        handle.write("hello\n")
    assert d.exists()
    with d.open_readable() as handle:
        assert handle.read() == "hello\n"


def test_open_missing_file_raises(tmp_path):
    d = Dir.combine(str(tmp_path), "missing.geo")
    with pytest.raises(FileNotFoundError):
        d.open_readable()