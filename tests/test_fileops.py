import os

import pytest

from ngexplorer.fileops import (
    FileOperationError,
    delete_path,
    rename_keeping_extension,
    resolve_directory,
    split_name,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("archive.tar.gz", ("archive.tar", "gz")),
        ("README", ("README", "")),
        (".bashrc", ("", "bashrc")),
        (os.path.join("dir.d", "file.txt"), ("file", "txt")),
    ],
)
def test_split_name(path, expected):
    assert split_name(path) == expected


def test_rename_keeps_extension(tmp_path):
    old = tmp_path / "a.txt"
    old.write_text("data", encoding="utf-8")
    new_path = rename_keeping_extension(old, "b")
    assert new_path == str(tmp_path / "b.txt")
    assert not old.exists()
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "data"


def test_rename_without_extension(tmp_path):
    old = tmp_path / "notes"
    old.write_text("x", encoding="utf-8")
    assert rename_keeping_extension(old, "memo") == str(tmp_path / "memo")
    assert (tmp_path / "memo").exists()


@pytest.mark.parametrize("new_base", ["", "a"])
def test_rename_with_empty_or_same_name_does_nothing(tmp_path, new_base):
    old = tmp_path / "a.txt"
    old.write_text("x", encoding="utf-8")
    assert rename_keeping_extension(old, new_base) == str(old)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.txt"]


def test_rename_refuses_existing_target(tmp_path):
    (tmp_path / "a.txt").write_text("first", encoding="utf-8")
    (tmp_path / "b.txt").write_text("second", encoding="utf-8")
    with pytest.raises(FileOperationError):
        rename_keeping_extension(tmp_path / "a.txt", "b")
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "first"
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "second"


def test_rename_missing_source(tmp_path):
    with pytest.raises(FileOperationError):
        rename_keeping_extension(tmp_path / "missing.txt", "other")


def test_delete_file(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("x", encoding="utf-8")
    delete_path(target)
    assert not target.exists()


def test_delete_directory_recursively(tmp_path):
    folder = tmp_path / "folder"
    inner_file = folder / "inner" / "f.txt"
    (folder / "inner").mkdir(parents=True)
    inner_file.write_text("x", encoding="utf-8")
    delete_path(folder)
    assert not inner_file.exists()
    assert not folder.exists()
    assert [p.name for p in tmp_path.iterdir()] == []
    with pytest.raises(FileOperationError):
        delete_path(folder)


def test_delete_missing_raises(tmp_path):
    with pytest.raises(FileOperationError):
        delete_path(tmp_path / "missing")


def test_resolve_directory(tmp_path):
    assert resolve_directory(tmp_path) == str(tmp_path)


def test_resolve_directory_rejects_files_and_missing(tmp_path):
    file_path = tmp_path / "a.txt"
    file_path.write_text("x", encoding="utf-8")
    for bad in (file_path, tmp_path / "missing", ""):
        with pytest.raises(FileOperationError):
            resolve_directory(bad)