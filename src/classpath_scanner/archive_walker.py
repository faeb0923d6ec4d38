from __future__ import annotations

import logging
import os
from pathlib import Path
import zipfile
from typing import List, Optional, Union

from .errors import ArchiveUnreadableError, EntryReadError
from .models import ArchiveEntry

logger = logging.getLogger(__name__)


class ArchiveWalker:
    """
    Walk the regular entries of one zip/jar archive, one entry per call.

    The archive handle is released as soon as ``next()`` reports the end, or
    earlier through ``close()`` / the context manager. Streams already handed
    out stay readable after the archive itself is closed; closing them is the
    caller's job.
    """

    def __init__(self, archive_path: Union[str, "os.PathLike[str]"]) -> None:
        self.path = Path(archive_path)
        try:
            self._zip: Optional[zipfile.ZipFile] = zipfile.ZipFile(self.path)
        except (zipfile.BadZipFile, UnicodeDecodeError, NotImplementedError, ValueError) as exc:
            logger.debug("Rejecting %s: not a valid archive: %s", self.path, exc)
            raise ArchiveUnreadableError(self.path, f"not a valid zip archive ({exc})") from exc
        except OSError as exc:
            logger.debug("Rejecting %s: %s", self.path, exc)
            raise ArchiveUnreadableError(self.path, str(exc)) from exc
        self._entries: List[zipfile.ZipInfo] = self._zip.infolist()
        self._position = 0
        self._current: Optional[ArchiveEntry] = None
        logger.debug("Opened archive %s (%d entries)", self.path, len(self._entries))

    @property
    def current(self) -> Optional[ArchiveEntry]:
        return self._current

    @property
    def closed(self) -> bool:
        return self._zip is None

    def next(self) -> Optional[ArchiveEntry]:
        """Return the next regular entry, or ``None`` after the last one."""
        while self._zip is not None and self._position < len(self._entries):
            info = self._entries[self._position]
            self._position += 1
            if info.is_dir():
                continue
            try:
                stream = self._zip.open(info)
            except (zipfile.BadZipFile, OSError, RuntimeError, NotImplementedError) as exc:
                logger.debug("Failed to open %s in %s: %s", info.filename, self.path, exc)
                raise EntryReadError(self.path, info.filename, str(exc)) from exc
            self._current = ArchiveEntry(name=info.filename, stream=stream, size_bytes=info.file_size)
            return self._current
        self._current = None
        self.close()
        return None

    def close(self) -> None:
        if self._zip is None:
            return
        self._zip.close()
        self._zip = None
        logger.debug("Closed archive %s", self.path)

    def __enter__(self) -> "ArchiveWalker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
