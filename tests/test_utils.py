import os

from reposcan.utils import dir_exists, expand_path, file_exists, hash_string, write_to_file


def test_file_exists(tmp_path):
    target = tmp_path / "a.txt"
    assert file_exists(target) is False
    target.write_text("x")
    assert file_exists(target) is True


def test_dir_exists(tmp_path):
    assert dir_exists(tmp_path) is True
    assert dir_exists(tmp_path / "missing") is False
    f = tmp_path / "file"
    f.write_text("x")
    assert dir_exists(f) is False


def test_expand_path_leaves_plain_paths(tmp_path):
    assert expand_path(str(tmp_path)) == str(tmp_path)


def test_expand_path_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert expand_path("~/docs/f.txt") == os.path.join(str(tmp_path), "docs", "f.txt")


def test_write_to_file_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "out.bin"
    write_to_file(b"payload", str(target))
    assert target.read_bytes() == b"payload"


def test_write_to_file_accepts_text(tmp_path):
    target = tmp_path / "t.txt"
    write_to_file("text", str(target))
    assert target.read_text() == "text"


def test_hash_known_values():
    assert hash_string("") == "cbf29ce484222325"
    assert hash_string("a") == "af63dc4c8601ec8c"


def test_hash_is_stable_and_distinct():
    assert hash_string("/some/path") == hash_string("/some/path")
    assert hash_string("/some/path") != hash_string("/some/other")
    assert all(c in "0123456789abcdef" for c in hash_string("/x"))