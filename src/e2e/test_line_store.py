from pathlib import Path
import pytest

from spellcheck.errors import FileOpenError
from spellcheck.line_store import LineStore
from spellcheck.loader import read_lines


def _write(tmp: Path, name: str, text: str) -> str:
    p = tmp / name
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_trailing_newline_adds_no_empty_line(tmp_path: Path):
    store = LineStore.load(_write(tmp_path, "a.txt", "one\ntwo\n"))
    assert list(store) == ["one", "two"]
    assert store.count == 2


def test_last_line_without_newline_is_kept(tmp_path: Path):
    assert read_lines(_write(tmp_path, "a.txt", "one\ntwo")) == ["one", "two"]


def test_blank_lines_are_kept(tmp_path: Path):
    assert read_lines(_write(tmp_path, "a.txt", "a\n\nb\n")) == ["a", "", "b"]


def test_crlf_terminators_are_stripped(tmp_path: Path):
    p = tmp_path / "dos.txt"
    p.write_bytes(b"one\r\ntwo\r\n")
    assert read_lines(str(p)) == ["one", "two"]


def test_empty_file(tmp_path: Path):
    assert len(LineStore.load(_write(tmp_path, "e.txt", ""))) == 0


def test_missing_file_raises_file_open_error(tmp_path: Path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(FileOpenError) as ei:
        LineStore.load(missing)
    assert ei.value.path == missing
    assert str(ei.value) == f"Can't open file: {missing}"
    assert isinstance(ei.value.__cause__, OSError)


def test_undecodable_file_raises_file_open_error(tmp_path: Path):
    p = tmp_path / "bin.txt"
    p.write_bytes(b"\xff\xfe\xfa\n")
    with pytest.raises(FileOpenError):
        read_lines(str(p))


def test_get_set_bounds_checked():
    store = LineStore(["a", "b"])
    store.set(1, "B")
    assert store.get(1) == "B"
    with pytest.raises(IndexError):
        store.get(2)
    with pytest.raises(IndexError):
        store.set(-1, "x")


@pytest.mark.parametrize("start, end, text", [(4, 8, "quick"), (0, 3, "A"), (12, 13, "!"), (4, 4, "very ")])
def test_replace_splices_exact_span(start, end, text):
    original = "The qick fox."
    store = LineStore([original])
    assert store.replace(0, start, end, text) == original[:start] + text + original[end:]
    assert store.get(0) == original[:start] + text + original[end:]


def test_replace_rejects_span_outside_line():
    store = LineStore(["short"])
    with pytest.raises(IndexError):
        store.replace(0, 3, 10, "x")


def test_persist_writes_one_newline_per_line(tmp_path: Path):
    out = tmp_path / "out.txt"
    LineStore(["The quick fox.", "", "end"]).persist(str(out))
    assert out.read_bytes() == b"The quick fox.\n\nend\n"
