import io
import os

import pytest

from pathtool.analysis import (
    Shadow,
    files_in_dir,
    get_duplicate_dirs,
    get_invalid_dirs,
    get_shadowed,
    write_analysis,
)


@pytest.fixture
def root(tmp_path):
    base = tmp_path / "test_dirs"
    (base / "a").mkdir(parents=True)
    (base / "a" / "keepme.txt").write_text("")
    (base / "b" / "bb").mkdir(parents=True)
    (base / "b" / "keepme.txt").write_text("")
    (base / "b" / "x").write_text("")
    (base / "c").mkdir()
    (base / "c" / "keepme.txt").write_text("")
    (base / "c" / "x").write_text("")
    os.symlink("a", base / "la")
    os.symlink("la", base / "laa")
    os.symlink("nonexistent", base / "broken")
    os.symlink("broken", base / "broken2")
    return base


def make_dir(root, name):
    return str(root / name)


def test_get_invalid_dirs(root):
    d = lambda s: make_dir(root, s)  # noqa: E731
    path = ":".join([d("laa"), d("broken"), d("a"), d("c"), d("z")])
    assert get_invalid_dirs(path) == [d("broken"), d("z")]


def test_get_invalid_dirs_keeps_repeats():
    assert get_invalid_dirs("/no/such/dir::/no/such/dir") == ["/no/such/dir", "/no/such/dir"]


def test_get_duplicate_dirs(root):
    d = lambda s: make_dir(root, s)  # noqa: E731
    path = ":".join([d("laa"), d("broken"), d("a"), d("c"), d("laa"), d("a")])
    assert get_duplicate_dirs(path) == [d("laa"), d("a")]


def test_get_duplicate_dirs_counts_each_repeat():
    assert get_duplicate_dirs("/x:/x:/x:/y") == ["/x", "/x"]


def test_files_in_dir(root):
    assert files_in_dir(make_dir(root, "b")) == ["keepme.txt", "x"]
    assert files_in_dir(make_dir(root, "la")) == ["keepme.txt"]


def test_files_in_dir_missing(root):
    assert files_in_dir(make_dir(root, "z")) == []
    assert files_in_dir(make_dir(root, "broken")) == []


def test_files_in_dir_on_file_raises(root):
    with pytest.raises(OSError):
        files_in_dir(make_dir(root, "a/keepme.txt"))


def test_get_shadowed(root):
    d = lambda s: make_dir(root, s)  # noqa: E731
    path = ":".join([d("a"), d("b"), d("c")])
    assert get_shadowed(path) == [
        (d("b"), [Shadow(d("a"), "keepme.txt")]),
        (d("c"), [Shadow(d("a"), "keepme.txt"), Shadow(d("b"), "x")]),
    ]


def test_get_shadowed_none(root):
    assert get_shadowed(make_dir(root, "a")) == []


def test_write_analysis_clean(root):
    out = io.StringIO()
    write_analysis(make_dir(root, "a"), out)
    assert out.getvalue() == (
        "Invalid Directories:\n    None\n\n"
        "Duplicate Directories:\n    None\n\n"
        "Shadowed Files:\n    None\n"
    )