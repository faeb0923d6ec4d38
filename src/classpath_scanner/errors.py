from __future__ import annotations

from pathlib import Path


class ScannerError(Exception):
    def __init__(self, message: str, code: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.path = path


class RootNotFoundError(ScannerError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Root path not found: {path}", "ROOT_NOT_FOUND", path)


class DirectoryUnreadableError(ScannerError):
    def __init__(self, path: Path | str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot list directory {path}{detail}", "DIRECTORY_UNREADABLE", path)


class ArchiveUnreadableError(ScannerError):
    def __init__(self, path: Path | str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Cannot open archive {path}{detail}", "ARCHIVE_UNREADABLE", path)


class EntryReadError(ScannerError):
    def __init__(self, archive: Path | str, entry_name: str, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Cannot read entry {entry_name} in {archive}{detail}",
            "ENTRY_READ_ERROR",
            archive,
        )
        self.entry_name = entry_name
