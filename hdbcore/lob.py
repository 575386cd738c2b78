"""Large object fields: a reader as source for writing, a writer as destination for reading."""

from __future__ import annotations

from typing import IO, Any, Optional, Protocol, runtime_checkable


class LobError(Exception):
    """Raised when a large object cannot be scanned."""


@runtime_checkable
class LobScanner(Protocol):
    """A database value able to stream its large object content into a writer."""

    def scan(self, writer: IO[Any]) -> None: ...


class Lob:
    """A large object field backed by a reader and a writer."""

    def __init__(self, reader: Optional[IO[Any]] = None, writer: Optional[IO[Any]] = None) -> None:
        self.reader = reader
        self.writer = writer

    def __repr__(self) -> str:
        return f"Lob(reader={self.reader!r}, writer={self.writer!r})"

    def scan(self, src: Any) -> None:
        """Stream the content of src into the writer."""
        if self.writer is None:
            raise LobError(f"lob error: initial writer {self!r}")
        if not isinstance(src, LobScanner):
            raise TypeError(f"lob: invalid scan type {type(src).__name__}")
        src.scan(self.writer)

    def value(self) -> Optional[IO[Any]]:
        """Return the reader providing the content to store."""
        return self.reader


class NullLob:
    """A Lob that may be null."""

    def __init__(self, lob: Optional[Lob] = None, valid: bool = False) -> None:
        self.lob = lob
        self.valid = valid

    def scan(self, src: Any) -> None:
        """Scan src into the lob; a None source marks the value as null."""
        if src is None:
            self.valid = False
            return
        if self.lob is None:
            raise LobError("lob error: no lob to scan into")
        self.lob.scan(src)
        self.valid = True

    def value(self) -> Optional[IO[Any]]:
        """Return the lob reader, or None when null."""
        if not self.valid or self.lob is None:
            return None
        return self.lob.reader