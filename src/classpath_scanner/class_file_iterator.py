from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Optional, Union

from .archive_walker import ArchiveWalker
from .config import ScannerSettings, split_class_path
from .file_walker import RootWalker
from .matching import is_archive_file, is_class_file
from .models import Artifact, Provenance, WalkState

logger = logging.getLogger(__name__)


class ClassFileIterator:
    """
    Iterate over every ``.class`` artifact reachable from a set of roots.

    Roots may be directories (walked recursively), plain ``.class`` files,
    or ``.jar`` archives. Only archives given directly as roots are opened;
    a jar found inside a directory is skipped, and a jar stored inside
    another jar comes back as an ordinary entry stream.

    ``next()`` returns one :class:`Artifact` per call, or ``None`` once
    everything has been walked. The caller owns each returned stream and
    must close it. At most one archive is open at a time; ``close()`` (or
    leaving the ``with`` block) releases it if iteration stops early.

    NOTICE: not safe to share between threads without external locking.
    """

    def __init__(self, roots: Iterable[Union[str, "os.PathLike[str]"]]) -> None:
        self._file_walker = RootWalker(roots)
        self._archive_walker: Optional[ArchiveWalker] = None
        self._state = WalkState.WALKING_ROOTS
        self._current: Optional[Artifact] = None
        self._closed = False
        self._summary: Dict[str, int] = {
            "files_returned": 0,
            "entries_returned": 0,
            "archives_opened": 0,
            "files_skipped": 0,
        }

    @classmethod
    def from_class_path(cls, class_path: str, separator: str = os.pathsep) -> "ClassFileIterator":
        """Build an iterator from a path-list string such as a Java class path."""
        return cls(split_class_path(class_path, separator))

    @classmethod
    def from_settings(cls, settings: ScannerSettings) -> "ClassFileIterator":
        return cls(settings.roots())

    @property
    def state(self) -> WalkState:
        return self._state

    @property
    def current(self) -> Optional[Artifact]:
        return self._current

    @property
    def name(self) -> Optional[str]:
        """Path of the current plain file, or the name of the current archive entry."""
        return self._current.name if self._current is not None else None

    @property
    def is_file(self) -> bool:
        """``True`` when the current artifact is a plain file, ``False`` for archive entries."""
        return self._current is not None and self._current.is_file

    @property
    def summary(self) -> Dict[str, int]:
        return dict(self._summary)

    def next(self) -> Optional[Artifact]:
        if self._closed:
            return None
        while True:
            if self._state is WalkState.WALKING_ROOTS:
                walked = self._file_walker.next()
                if walked is None:
                    self._current = None
                    return None
                if is_class_file(walked.path):
                    self._current = Artifact(
                        stream=open(walked.path, "rb"),
                        name=str(walked.path),
                        provenance=Provenance.FILE,
                    )
                    self._summary["files_returned"] += 1
                    return self._current
                if walked.is_root and is_archive_file(walked.path):
                    self._archive_walker = ArchiveWalker(walked.path)
                    self._summary["archives_opened"] += 1
                    self._state = WalkState.WALKING_ARCHIVE
                    continue
                logger.debug("Skipping %s", walked.path)
                self._summary["files_skipped"] += 1
                continue

            entry = self._archive_walker.next()
            if entry is None:
                self._release_archive()
                continue
            self._current = Artifact(
                stream=entry.stream,
                name=entry.name,
                provenance=Provenance.ARCHIVE,
                archive_path=self._archive_walker.path,
            )
            self._summary["entries_returned"] += 1
            return self._current

    def close(self) -> None:
        """Release the open archive, if any; later calls to ``next()`` return ``None``."""
        self._release_archive()
        self._current = None
        self._closed = True

    def _release_archive(self) -> None:
        if self._archive_walker is not None:
            self._archive_walker.close()
            self._archive_walker = None
        self._state = WalkState.WALKING_ROOTS

    def __iter__(self) -> "ClassFileIterator":
        return self

    def __next__(self) -> Artifact:
        artifact = self.next()
        if artifact is None:
            raise StopIteration
        return artifact

    def __enter__(self) -> "ClassFileIterator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
