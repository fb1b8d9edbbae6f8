"""A thin binary file object that remembers its path."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional, Union


def file_size(filepath: Union[str, os.PathLike]) -> int:
    """Size of the file in bytes; 0 if it cannot be examined."""
    try:
        return os.stat(filepath).st_size
    except OSError:
        return 0


class HFile:
    """A file opened in binary mode, with whole-file and range reads."""

    def __init__(self) -> None:
        self.filepath = ""
        self._fp: Optional[BinaryIO] = None

    def open(self, filepath: Union[str, os.PathLike], mode: str) -> None:
        """Open ``filepath``; a ``b`` is added to ``mode`` if missing."""
        self.close()
        self.filepath = os.fspath(filepath)
        if "b" not in mode:
            mode += "b"
        self._fp = open(self.filepath, mode)

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def isopen(self) -> bool:
        return self._fp is not None

    def remove(self) -> None:
        """Close the file and delete it."""
        self.close()
        os.remove(self.filepath)

    def rename(self, newpath: Union[str, os.PathLike]) -> None:
        """Close the file and move it to ``newpath``."""
        self.close()
        os.rename(self.filepath, newpath)

    @property
    def _file(self) -> BinaryIO:
        if self._fp is None:
            raise ValueError("file is not open")
        return self._fp

    def read(self, length: int) -> bytes:
        return self._file.read(length)

    def write(self, data: Union[bytes, str]) -> int:
        if isinstance(data, str):
            data = data.encode("utf-8")
        return self._file.write(data)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        return self._file.seek(offset, whence)

    def tell(self) -> int:
        return self._file.tell()

    def flush(self) -> None:
        self._file.flush()

    def size(self) -> int:
        return file_size(self.filepath)

    def readall(self) -> bytes:
        """Read as many bytes as the file holds, from the current position."""
        filesize = self.size()
        if filesize == 0:
            return b""
        return self._file.read(filesize)

    def readline(self) -> Optional[bytes]:
        """Read one line ended by LF, CRLF or CR, without the ending.

        Returns None at end of file when nothing was read.
        """
        fp = self._file
        line = bytearray()
        while True:
            ch = fp.read(1)
            if not ch:
                return bytes(line) if line else None
            if ch == b"\n":
                return bytes(line)
            if ch == b"\r":
                nxt = fp.read(1)
                if nxt and nxt != b"\n":
                    fp.seek(-1, os.SEEK_CUR)
                return bytes(line)
            line += ch

    def readrange(self, start: int = 0, end: int = 0) -> bytes:
        """Read bytes ``start`` to ``end`` inclusive; ``end`` 0 means the last."""
        filesize = self.size()
        if filesize == 0:
            return b""
        if end == 0 or end >= filesize:
            end = filesize - 1
        fp = self._file
        fp.seek(start, os.SEEK_SET)
        return fp.read(end - start + 1)

    def __enter__(self) -> "HFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()