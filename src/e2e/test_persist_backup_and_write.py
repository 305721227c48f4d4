import errno
import os
import stat
from pathlib import Path
import pytest

from spellcheck.errors import PersistenceError
from spellcheck.line_store import LineStore
from spellcheck.persist import Persister, backup_path


def _seed(tmp: Path, text: str = "The qick fox.\n") -> Path:
    p = tmp / "doc.txt"
    p.write_text(text, encoding="utf-8")
    return p


def test_backup_then_write(tmp_path: Path, capsys):
    doc = _seed(tmp_path)
    bak = Persister().save(LineStore(["The quick fox."]), str(doc))
    assert bak == str(doc) + ".bak" == backup_path(str(doc))
    assert Path(bak).read_text(encoding="utf-8") == "The qick fox.\n"
    assert doc.read_text(encoding="utf-8") == "The quick fox.\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.txt", "doc.txt.bak"]
    out = capsys.readouterr().out
    assert out.startswith("Spellcheck complete.\n")
    assert f"Backing up {doc} to {bak}" in out
    assert f"Writing updated {doc}" in out


def test_existing_backup_fails_loudly(tmp_path: Path):
    doc = _seed(tmp_path)
    old = tmp_path / "doc.txt.bak"
    old.write_text("older backup\n", encoding="utf-8")
    with pytest.raises(PersistenceError) as ei:
        Persister().save(LineStore(["changed"]), str(doc))
    assert "already exists" in str(ei.value)
    assert doc.read_text(encoding="utf-8") == "The qick fox.\n"
    assert old.read_text(encoding="utf-8") == "older backup\n"


def test_existing_backup_overwritten_on_request(tmp_path: Path):
    doc = _seed(tmp_path)
    (tmp_path / "doc.txt.bak").write_text("older backup\n", encoding="utf-8")
    Persister(overwrite_backup=True).save(LineStore(["changed"]), str(doc))
    assert (tmp_path / "doc.txt.bak").read_text(encoding="utf-8") == "The qick fox.\n"
    assert doc.read_text(encoding="utf-8") == "changed\n"


def test_missing_original_is_persistence_error(tmp_path: Path):
    with pytest.raises(PersistenceError) as ei:
        Persister().save(LineStore(["x"]), str(tmp_path / "gone.txt"))
    assert isinstance(ei.value.__cause__, OSError)
    assert not (tmp_path / "gone.txt").exists()


def test_write_failure_is_persistence_error(tmp_path: Path, monkeypatch):
    def no_space(*args, **kwargs):
        raise OSError(errno.ENOSPC, "No space left on device")
    doc = _seed(tmp_path)
    monkeypatch.setattr("spellcheck.persist.tempfile.mkstemp", no_space)
    with pytest.raises(PersistenceError) as ei:
        Persister().save(LineStore(["x"]), str(doc))
    assert "original kept at" in str(ei.value)
    assert (tmp_path / "doc.txt.bak").exists()
    assert "No space left on device" in str(ei.value)


def test_existing_tmp_file_is_left_alone(tmp_path: Path):
    doc = _seed(tmp_path)
    notes = tmp_path / "doc.txt.tmp"
    notes.write_text("my own notes\n", encoding="utf-8")
    Persister().save(LineStore(["The quick fox."]), str(doc))
    assert notes.read_text(encoding="utf-8") == "my own notes\n"
    assert doc.read_text(encoding="utf-8") == "The quick fox.\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.txt", "doc.txt.bak", "doc.txt.tmp"]


def test_undecodable_input_bytes_round_trip(tmp_path: Path):
    # input() hands back byte 0xff as "\udcff" when stdin cannot decode it
    doc = _seed(tmp_path)
    Persister().save(LineStore(["The qu\udcffck fox."]), str(doc))
    assert doc.read_bytes() == b"The qu\xffck fox.\n"


def test_unencodable_text_is_persistence_error(tmp_path: Path):
    doc = _seed(tmp_path)
    with pytest.raises(PersistenceError) as ei:
        Persister().save(LineStore(["bad \ud800 surrogate"]), str(doc))
    assert isinstance(ei.value.__cause__, UnicodeError)
    assert "original kept at" in str(ei.value)
    # only the backup remains; no half-written temp file
    assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.txt.bak"]


def test_rewritten_file_keeps_original_permissions(tmp_path: Path):
    doc = _seed(tmp_path)
    os.chmod(doc, 0o644)
    Persister().save(LineStore(["x"]), str(doc))
    assert stat.S_IMODE(doc.stat().st_mode) == 0o644
