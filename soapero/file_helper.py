"""Path and file-name conventions for generated sources.

Generated files are laid out as ``<base>/<namespace>/<category>/<NS>-<Name>.<ext>``.
Paths are joined with forward slashes so the names written into build files
and ``#include`` lines are the same on every platform.
"""

from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "build_path",
    "create_directory_for_file",
    "build_file_name",
    "is_file_types",
    "is_file_message",
]


def _normalize_dir(path: str) -> str:
    """Return ``path`` as a directory path: '.' when empty, one trailing slash dropped."""
    if os.sep == "\\":
        path = path.replace("\\", "/")
    if not path:
        return "."
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path


def _join(directory: str, name: str) -> str:
    if name.startswith("/"):
        return name
    if not name:
        return directory
    if directory.endswith("/"):
        return directory + name
    return f"{directory}/{name}"


def build_path(
    base_directory: str, file_namespace: str, file_category: str, file_name: str
) -> str:
    """Return the path of a generated file.

    The namespace directory is lower-cased. An empty base directory stands
    for the current directory, so the result then starts with ``./``.
    """
    directory = _normalize_dir(base_directory)
    if file_namespace:
        directory = _normalize_dir(_join(directory, file_namespace.lower()))
    if file_category:
        directory = _normalize_dir(_join(directory, file_category))
    return _join(directory, file_name)


def create_directory_for_file(file_path: str | os.PathLike[str]) -> Path:
    """Create the directory that will hold ``file_path`` and return it.

    Raises :class:`OSError` when the directory cannot be created.
    """
    parent = Path(os.path.dirname(os.fspath(file_path)) or ".")
    parent.mkdir(parents=True, exist_ok=True)
    return parent


def build_file_name(file_namespace: str, base_name: str, extension: str) -> str:
    """Return ``<NAMESPACE>-<base_name>.<extension>``, without prefix for no namespace.

    The namespace prefix keeps file names unique across namespaces, which some
    toolchains require.
    """
    prefix = f"{file_namespace.upper()}-" if file_namespace else ""
    return f"{prefix}{base_name}.{extension}"


def is_file_types(file_path: str) -> bool:
    """Return True for a path inside a ``types`` directory."""
    return "/types/" in file_path


def is_file_message(file_path: str) -> bool:
    """Return True for a path inside a ``messages`` directory."""
    return "/messages/" in file_path