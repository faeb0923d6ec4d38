"""Lazy enumeration of class files from directories, plain files and jar archives."""

import logging

from .archive_walker import ArchiveWalker
from .class_file_iterator import ClassFileIterator
from .config import ScannerSettings, split_class_path
from .errors import (
    ArchiveUnreadableError,
    DirectoryUnreadableError,
    EntryReadError,
    RootNotFoundError,
    ScannerError,
)
from .file_walker import RootWalker
from .models import Artifact, ArchiveEntry, Provenance, WalkedFile, WalkState

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArchiveEntry",
    "ArchiveUnreadableError",
    "ArchiveWalker",
    "Artifact",
    "ClassFileIterator",
    "DirectoryUnreadableError",
    "EntryReadError",
    "Provenance",
    "RootNotFoundError",
    "RootWalker",
    "ScannerError",
    "ScannerSettings",
    "WalkState",
    "WalkedFile",
    "split_class_path",
]
