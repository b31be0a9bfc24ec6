from pathlib import Path

import pytest

from ngexplorer.search import SearchCriteria, file_contains, search_files


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    (tmp_path / "a.txt").write_text("Hello World\nsecond line\n", encoding="utf-8")
    (tmp_path / "b.TXT").write_text("nothing here\n", encoding="utf-8")
    (tmp_path / "notes").write_text("plain notes\n", encoding="utf-8")
    (tmp_path / "archive.tar.gz").write_bytes(b"\x00\x01")
    (tmp_path / ".hidden.txt").write_text("Hello\n", encoding="utf-8")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("a needle inside\n", encoding="utf-8")
    (sub / "d.log").write_text("log line\n", encoding="utf-8")
    git = tmp_path / ".git"
    git.mkdir()
    (git / "config.txt").write_text("Hello\n", encoding="utf-8")
    return tmp_path


def names(paths):
    return sorted(Path(p).name for p in paths)


def test_criteria_text_is_trimmed():
    criteria = SearchCriteria(name="  abc ", extension=" .txt ", content="\tword ")
    assert (criteria.name, criteria.extension, criteria.content) == ("abc", ".txt", "word")


def test_no_filters_lists_visible_files_only(tree):
    assert names(search_files(tree, SearchCriteria())) == [
        "a.txt",
        "archive.tar.gz",
        "b.TXT",
        "notes",
    ]


@pytest.mark.parametrize("extension", [".txt", "txt", ".TXT"])
def test_extension_is_case_insensitive_with_optional_dot(tree, extension):
    found = search_files(tree, SearchCriteria(extension=extension))
    assert names(found) == ["a.txt", "b.TXT"]


def test_extension_uses_last_suffix_only(tree):
    assert names(search_files(tree, SearchCriteria(extension="gz"))) == ["archive.tar.gz"]
    assert list(search_files(tree, SearchCriteria(extension="tar.gz"))) == []


def test_files_without_extension_can_be_included(tree):
    criteria = SearchCriteria(extension=".txt", include_no_extension=True)
    assert names(search_files(tree, criteria)) == ["a.txt", "b.TXT", "notes"]


def test_recursive_search_skips_hidden_directories(tree):
    criteria = SearchCriteria(extension="txt", recursive=True)
    assert names(search_files(tree, criteria)) == ["a.txt", "b.TXT", "c.txt"]


def test_name_fragment_is_case_insensitive(tree):
    assert names(search_files(tree, SearchCriteria(name="A"))) == ["a.txt", "archive.tar.gz"]


def test_content_search_matches_single_lines(tree):
    assert names(search_files(tree, SearchCriteria(content="hello world"))) == ["a.txt"]
    assert list(search_files(tree, SearchCriteria(content="World second"))) == []


def test_recursive_content_search(tree):
    found = list(search_files(tree, SearchCriteria(content="NEEDLE", recursive=True)))
    assert found == [str(tree / "sub" / "c.txt")]


def test_matches_rejects_directories(tree):
    assert SearchCriteria().matches(tree / "sub") is False
    assert SearchCriteria().matches(tree / "sub" / "d.log") is True


def test_missing_root_yields_nothing(tmp_path):
    assert list(search_files(tmp_path / "missing", SearchCriteria())) == []


def test_file_contains(tree):
    assert file_contains(tree / "a.txt", "SECOND") is True
    assert file_contains(tree / "a.txt", "absent") is False
    assert file_contains(tree / "missing.txt", "Hello") is False