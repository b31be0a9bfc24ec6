"""File search by name fragment, extension and text content."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import Iterator


def _suffix(file_name: str) -> str:
    """Return the text after the last dot of a file name, or ''."""
    _, dot, suffix = file_name.rpartition(".")
    return suffix if dot else ""


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def _is_hidden(entry: os.DirEntry) -> bool:
    if entry.name.startswith("."):
        return True
    try:
        attributes = getattr(entry.stat(follow_symlinks=False), "st_file_attributes", 0)
    except OSError:
        return False
    return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def file_contains(path, text: str) -> bool:
    """Tell whether any line of a text file contains ``text``, ignoring case.

    Unreadable files count as not containing the text.
    """
    needle = text.casefold()
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return any(needle in line.rstrip("\r\n").casefold() for line in handle)
    except OSError:
        return False


@dataclass(frozen=True)
class SearchCriteria:
    """Filters applied to each file found; empty text filters are not used."""

    name: str = ""
    extension: str = ""
    content: str = ""
    include_no_extension: bool = False
    recursive: bool = False

    def __post_init__(self) -> None:
        for attribute in ("name", "extension", "content"):
            object.__setattr__(self, attribute, getattr(self, attribute).strip())

    def matches(self, path) -> bool:
        """Tell whether the regular file at ``path`` passes every filter."""
        path = os.fspath(path)
        if not os.path.isfile(path):
            return False
        file_name = os.path.basename(path)

        if self.name and not _contains(file_name, self.name):
            return False

        if self.extension:
            suffix = _suffix(file_name)
            if not suffix:
                if not self.include_no_extension:
                    return False
            elif suffix.casefold() != self.extension.removeprefix(".").casefold():
                return False

        if self.content and not file_contains(path, self.content):
            return False
        return True


def _iter_files(directory: str, recursive: bool) -> Iterator[str]:
    try:
        with os.scandir(directory) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        if _is_hidden(entry):
            continue
        try:
            if entry.is_file():
                yield entry.path
            elif recursive and entry.is_dir(follow_symlinks=False):
                yield from _iter_files(entry.path, recursive)
        except OSError:
            continue


def search_files(root, criteria: SearchCriteria) -> Iterator[str]:
    """Yield the paths of visible files under ``root`` that match ``criteria``."""
    for path in _iter_files(os.fspath(root), criteria.recursive):
        if criteria.matches(path):
            yield path