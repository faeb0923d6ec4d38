from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import DirectoryUnreadableError, RootNotFoundError
from .models import WalkedFile

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class RootWalker:
    """
    Lazily enumerate every plain file below an ordered list of roots.

    Traversal is depth-first and pre-order. A directory is listed only when
    it is reached, and its entries are visited in sorted name order. Each
    yielded file carries an ``is_root`` flag telling whether it was one of
    the roots itself rather than something found inside a root directory.
    """

    def __init__(self, roots: Iterable[PathLike]) -> None:
        paths = [Path(root) for root in roots]
        for path in paths:
            if not path.exists():
                logger.debug("Rejecting missing root %s", path)
                raise RootNotFoundError(path)
        # Work list is consumed from the end, so it holds entries reversed.
        self._pending: List[WalkedFile] = [WalkedFile(path, True) for path in reversed(paths)]
        self._current: Optional[WalkedFile] = None

    @property
    def current(self) -> Optional[WalkedFile]:
        return self._current

    @property
    def is_root_file(self) -> bool:
        return self._current is not None and self._current.is_root

    def next(self) -> Optional[WalkedFile]:
        """Return the next plain file, or ``None`` once every root is exhausted."""
        while self._pending:
            candidate = self._pending.pop()
            if candidate.path.is_dir():
                self._expand(candidate.path)
                continue
            self._current = candidate
            return candidate
        self._current = None
        return None

    def _expand(self, directory: Path) -> None:
        try:
            children = sorted(directory.iterdir(), key=lambda child: child.name)
        except OSError as exc:
            logger.debug("Failed to list %s: %s", directory, exc)
            raise DirectoryUnreadableError(directory, str(exc)) from exc
        logger.debug("Expanding %s (%d entries)", directory, len(children))
        self._pending.extend(WalkedFile(child, False) for child in reversed(children))
