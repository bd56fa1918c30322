"""A small binary file handle with explicit failure kinds."""

from __future__ import annotations

import enum
import io
import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class FileMode(enum.Enum):
    """How a file is opened."""

    READ = "rb"
    WRITE = "wb"
    APPEND = "ab"


class FileResult(enum.Enum):
    """Outcome of a file operation."""

    SUCCESS = enum.auto()
    CANNOT_OPEN_PATH = enum.auto()
    FAILED_TO_SEEK = enum.auto()
    FAILED_TO_READ = enum.auto()
    FAILED_TO_GET_POS = enum.auto()
    UNKNOWN_ERROR = enum.auto()
    FILE_NOT_OPEN = enum.auto()
    WRITE_FAILED = enum.auto()
    FAILED_RENAME = enum.auto()


_RESULT_TEXT = {
    FileResult.SUCCESS: "success",
    FileResult.CANNOT_OPEN_PATH: "cannot open path",
    FileResult.FAILED_TO_SEEK: "failed to seek",
    FileResult.FAILED_TO_READ: "failed to read",
    FileResult.FAILED_TO_GET_POS: "failed to get pos",
    FileResult.UNKNOWN_ERROR: "unknown error",
    FileResult.FILE_NOT_OPEN: "file not open",
    FileResult.WRITE_FAILED: "write failed",
    FileResult.FAILED_RENAME: "failed rename",
}


def result_to_string(result: FileResult) -> str:
    """Return a short description of ``result``."""
    return _RESULT_TEXT.get(result, "unknown error")


class FileError(OSError):
    """A file operation failed; ``result`` tells how."""

    def __init__(self, result: FileResult) -> None:
        super().__init__(result_to_string(result))
        self.result = result


class File:
    """A file opened in binary mode; usable as a context manager."""

    def __init__(self) -> None:
        self._handle: io.BufferedIOBase | None = None
        self.path: str = ""

    def __enter__(self) -> File:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        """Whether a file is currently open."""
        return self._handle is not None

    def open(self, path: PathLike, mode: FileMode = FileMode.READ) -> str:
        """Open ``path`` in ``mode`` and return the path."""
        self.close()
        self.path = os.fspath(path)
        try:
            self._handle = open(self.path, mode.value)  # noqa: SIM115
        except OSError as exc:
            raise FileError(FileResult.CANNOT_OPEN_PATH) from exc
        return self.path

    def close(self) -> None:
        """Close the file if it is open."""
        handle = getattr(self, "_handle", None)
        if handle is not None:
            handle.close()
            self._handle = None

    def _open_handle(self):
        if self._handle is None:
            raise FileError(FileResult.FILE_NOT_OPEN)
        return self._handle

    def _read_all(self) -> bytes:
        handle = self._open_handle()
        try:
            handle.seek(0, os.SEEK_END)
        except OSError as exc:
            raise FileError(FileResult.FAILED_TO_SEEK) from exc
        try:
            size = handle.tell()
        except OSError as exc:
            raise FileError(FileResult.FAILED_TO_GET_POS) from exc
        try:
            handle.seek(0)
            data = handle.read(size) if size else b""
        except OSError as exc:
            raise FileError(FileResult.FAILED_TO_READ) from exc
        if len(data) != size:
            raise FileError(FileResult.FAILED_TO_READ)
        return data

    def read(self) -> str:
        """Return the whole file decoded as UTF-8 text."""
        data = self._read_all()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FileError(FileResult.FAILED_TO_READ) from exc

    def load(self) -> bytes:
        """Return the whole file as bytes."""
        return self._read_all()

    def write(self, data: str | bytes | bytearray) -> None:
        """Write text (as UTF-8) or bytes to the file."""
        handle = self._open_handle()
        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        try:
            written = handle.write(payload)
        except OSError as exc:
            raise FileError(FileResult.WRITE_FAILED) from exc
        if written is not None and written != len(payload):
            raise FileError(FileResult.WRITE_FAILED)

    def size(self) -> int:
        """Return the size of the file in bytes, rewinding to the start."""
        handle = self._open_handle()
        try:
            handle.seek(0, os.SEEK_END)
        except OSError as exc:
            raise FileError(FileResult.FAILED_TO_SEEK) from exc
        try:
            size = handle.tell()
        except OSError as exc:
            raise FileError(FileResult.FAILED_TO_GET_POS) from exc
        handle.seek(0)
        return size

    @staticmethod
    def remove(path: PathLike) -> None:
        """Delete the file at ``path``."""
        try:
            os.remove(path)
        except OSError as exc:
            raise FileError(FileResult.CANNOT_OPEN_PATH) from exc

    @staticmethod
    def rename(old_path: PathLike, new_path: PathLike) -> None:
        """Rename ``old_path`` to ``new_path``."""
        try:
            os.rename(old_path, new_path)
        except OSError as exc:
            raise FileError(FileResult.FAILED_RENAME) from exc

    @staticmethod
    def file_exists(path: PathLike) -> bool:
        """Return whether ``path`` can be opened for reading."""
        try:
            with open(path, FileMode.READ.value):
                return True
        except OSError:
            return False