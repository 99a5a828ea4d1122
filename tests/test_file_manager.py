import pytest

from smarteditor.file_manager import FileManager


@pytest.fixture
def fm():
    return FileManager()


def test_initial_state(fm):
    assert fm.current_file == ""
    assert fm.is_modified is False


def test_save_and_load_round_trip(fm, tmp_path):
    path = tmp_path / "notes.txt"
    lines = ["first", "", "third line"]
    fm.save_file(path, lines)
    assert fm.load_file(path) == lines


def test_save_writes_no_trailing_newline(fm, tmp_path):
    path = tmp_path / "out.txt"
    fm.save_file(path, ["a", "b"])
    assert path.read_bytes() == b"a\nb"


def test_save_sets_current_file_and_clears_modified(fm, tmp_path):
    path = tmp_path / "out.txt"
    fm.is_modified = True
    fm.save_file(path, ["x"])
    assert fm.current_file == str(path)
    assert fm.is_modified is False


def test_save_as_behaves_like_save(fm, tmp_path):
    path = tmp_path / "other.txt"
    fm.is_modified = True
    fm.save_as_file(path, ["one", "two"])
    assert path.read_text() == "one\ntwo"
    assert fm.current_file == str(path)
    assert fm.is_modified is False


def test_load_drops_trailing_newline(fm, tmp_path):
    path = tmp_path / "in.txt"
    path.write_bytes(b"a\nb\n")
    assert fm.load_file(path) == ["a", "b"]


def test_load_empty_file_gives_one_empty_line(fm, tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert fm.load_file(path) == [""]


def test_load_sets_state(fm, tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello")
    fm.is_modified = True
    fm.load_file(path)
    assert fm.current_file == str(path)
    assert fm.is_modified is False


def test_load_missing_file_raises(fm, tmp_path):
    with pytest.raises(FileNotFoundError):
        fm.load_file(tmp_path / "missing.txt")
    assert fm.current_file == ""


def test_save_to_missing_directory_raises(fm, tmp_path):
    with pytest.raises(OSError):
        fm.save_file(tmp_path / "nope" / "file.txt", ["x"])


@pytest.mark.parametrize(
    "path, expected",
    [
        ("main.cpp", ".cpp"),
        ("archive.tar.gz", ".gz"),
        ("Makefile", ""),
    ],
)
def test_file_extension(fm, path, expected):
    assert fm.file_extension(path) == expected


def test_text_is_empty(fm, tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("content")
    fm.load_file(path)
    assert fm.text() == ""