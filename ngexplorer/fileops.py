"""File operations used by the explorer: rename, delete and path checks."""

from __future__ import annotations

import os
import shutil


class FileOperationError(Exception):
    """Raised when a file operation cannot be carried out."""


def split_name(path) -> tuple[str, str]:
    """Split a file name into the part before its last dot and the suffix."""
    name = os.path.basename(os.fspath(path))
    base, dot, suffix = name.rpartition(".")
    if not dot:
        return name, ""
    return base, suffix


def rename_keeping_extension(path, new_base_name: str) -> str:
    """Rename ``path`` to ``new_base_name`` plus its current suffix.

    An empty or unchanged name leaves the file alone. Returns the resulting
    path; an existing target or a failed rename raises FileOperationError.
    """
    path = os.fspath(path)
    base, suffix = split_name(path)
    if not new_base_name or new_base_name == base:
        return path

    new_name = f"{new_base_name}.{suffix}" if suffix else new_base_name
    new_path = os.path.join(os.path.dirname(os.path.abspath(path)), new_name)
    if not os.path.lexists(path):
        raise FileOperationError(f"{path!r} does not exist")
    if os.path.lexists(new_path):
        raise FileOperationError(f"{new_path!r} already exists")
    try:
        os.rename(path, new_path)
    except OSError as exc:
        raise FileOperationError(f"cannot rename {path!r} to {new_path!r}") from exc
    return new_path


def delete_path(path) -> None:
    """Delete a file, or a directory with everything inside it."""
    path = os.fspath(path)
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except OSError as exc:
        raise FileOperationError(f"cannot delete {path!r}") from exc


def resolve_directory(path) -> str:
    """Return the absolute form of ``path`` if it names an existing directory."""
    text = os.fspath(path)
    if not text or not os.path.isdir(text):
        raise FileOperationError(f"{text!r} does not exist or is not a directory")
    return os.path.abspath(text)