"""Writers for the summary files that list every generated source."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from soapero.file_helper import is_file_message, is_file_types

__all__ = [
    "FileType",
    "FileBuilder",
    "DefaultFileBuilder",
    "CMakeListsFileBuilder",
    "create_file_builder",
]

CRLF = "\r\n"


class FileType(Enum):
    """Kind of summary file to write."""

    DEFAULT = "default"
    CMAKE_LISTS = "cmakelists"


class FileBuilder(ABC):
    """Base of the summary writers.

    The file list is sorted in place when the builder is created, so every
    holder of the same list sees it in order.
    """

    def __init__(self, name: str, dir_name: str | os.PathLike[str], file_list: list[str]) -> None:
        self.name = name
        self.dir_name = os.fspath(dir_name)
        self.file_list = file_list
        self.file_list.sort()

    def _write(self, file_name: str, lines: list[str]) -> Path:
        path = Path(self.dir_name) / file_name
        with open(path, "w", encoding="utf-8", newline="") as stream:
            stream.writelines(line + CRLF for line in lines)
        return path

    @abstractmethod
    def generate_file(self) -> Path:
        """Write the summary file into the output directory and return its path."""


class DefaultFileBuilder(FileBuilder):
    """Writes ``resume.txt``, a plain list of the generated files."""

    def generate_file(self) -> Path:
        lines = ["Generated file list:", ""]
        lines.extend(self.file_list)
        return self._write("resume.txt", lines)


class CMakeListsFileBuilder(FileBuilder):
    """Writes a ``CMakeLists.txt`` that builds the generated sources as a library."""

    def generate_file(self) -> Path:
        types: list[str] = []
        messages: list[str] = []
        services: list[str] = []
        for path in self.file_list:
            if is_file_types(path):
                types.append(path)
            elif is_file_message(path):
                messages.append(path)
            else:
                services.append(path)

        upper = self.name.upper()
        lower = self.name.lower()
        lines: list[str] = []
        for variable, entries in (
            ("TYPES_SRC", types),
            ("MESSAGES_SRC", messages),
            ("SERVICES_SRC", services),
        ):
            lines.append(f"SET({variable}")
            lines.extend(f"\t{entry}" for entry in entries)
            lines.extend([")", ""])

        lines.extend(
            [
                f"SET({upper}_SRC",
                "\t${SERVICES_SRC}",
                "\t${MESSAGES_SRC}",
                "\t${TYPES_SRC}",
                ")",
                "",
                f"add_library ({lower} ${{{upper}_SRC}})",
                "",
                "if(WITH_INSTALL_LIB)",
                f"\tinstall(TARGETS {lower} DESTINATION ${{INSTALL_PATH_LIB}})",
                "endif()",
                "",
            ]
        )
        return self._write("CMakeLists.txt", lines)


def create_file_builder(
    file_type: FileType, name: str, dir_name: str | os.PathLike[str], file_list: list[str]
) -> FileBuilder:
    """Return the builder for ``file_type``; anything but CMake gets the default one."""
    if file_type is FileType.CMAKE_LISTS:
        return CMakeListsFileBuilder(name, dir_name, file_list)
    return DefaultFileBuilder(name, dir_name, file_list)