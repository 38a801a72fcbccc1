"""File locations split into directory, base name and extension."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Dir:
    """A file location: directory part (with trailing slash), name and extension."""

    path: str
    file_name: str
    file_ext: str

    @classmethod
    def parse(cls, full_dir: str) -> "Dir":
        """Split a full file path into its directory, name and extension."""
        if not full_dir:
            raise ValueError("empty path")
        directory, slash, base = full_dir.rpartition("/")
        path = directory + slash
        name, dot, ext = base.rpartition(".")
        if not dot:
            name, ext = base, ""
        return cls(path, name, ext)

    @classmethod
    def combine(cls, path: str, file: str) -> "Dir":
        """Join a directory and a file name, inserting a slash where needed."""
        if not path:
            full = file
        elif path.endswith("/"):
            full = path + file
        else:
            full = f"{path}/{file}"
        return cls.parse(full)

    def full_path(self) -> str:
        """The full path, always written as name.extension."""
        file_part = f"{self.file_name}.{self.file_ext}"
        if not self.path or self.path.endswith("/"):
            return self.path + file_part
        return f"{self.path}/{file_part}"

    def exists(self) -> bool:
        """Whether the file can be opened for reading."""
        try:
            with open(self.full_path(), encoding="utf-8"):
                return True
        except OSError:
            return False

    def open_readable(self) -> TextIO:
        """Open the file for reading text."""
        return open(self.full_path(), "r", encoding="utf-8")

    def open_writable(self) -> TextIO:
        """Create or truncate the file and open it for writing text."""
        return open(self.full_path(), "w", encoding="utf-8")

    def __str__(self) -> str:
        return self.full_path()