from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import sys
from typing import BinaryIO, Optional

_DATACLASS_KWARGS = {"slots": True} if sys.version_info >= (3, 10) else {}


class Provenance(str, Enum):
    FILE = "file"
    ARCHIVE = "archive"


class WalkState(Enum):
    WALKING_ROOTS = "walking_roots"
    WALKING_ARCHIVE = "walking_archive"


@dataclass(frozen=True, **_DATACLASS_KWARGS)
class WalkedFile:
    path: Path
    is_root: bool


@dataclass(**_DATACLASS_KWARGS)
class ArchiveEntry:
    name: str
    stream: BinaryIO
    size_bytes: int


@dataclass(**_DATACLASS_KWARGS)
class Artifact:
    """
    A single class-file byte stream handed to the caller.

    The caller owns ``stream`` and must close it; using the artifact as a
    context manager does that.
    """

    stream: BinaryIO
    name: str
    provenance: Provenance
    archive_path: Optional[Path] = None

    @property
    def is_file(self) -> bool:
        return self.provenance is Provenance.FILE

    @property
    def qualified_name(self) -> str:
        if self.archive_path is None:
            return self.name
        return f"{self.archive_path}!{self.name}"

    def read(self) -> bytes:
        return self.stream.read()

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "Artifact":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
