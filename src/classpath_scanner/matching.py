from __future__ import annotations

from pathlib import PurePath

CLASS_SUFFIX = ".class"
ARCHIVE_SUFFIX = ".jar"


def is_class_file(name: str | PurePath) -> bool:
    """Exact, case-sensitive ``.class`` check on the file name."""
    return _file_name(name).endswith(CLASS_SUFFIX)


def is_archive_file(name: str | PurePath) -> bool:
    """Case-insensitive ``.jar`` check; only the suffix is compared."""
    return ends_with_ignore_case(_file_name(name), ARCHIVE_SUFFIX)


def ends_with_ignore_case(value: str, suffix: str) -> bool:
    if len(value) < len(suffix):
        return False
    return value[len(value) - len(suffix):].casefold() == suffix.casefold()


def _file_name(name: str | PurePath) -> str:
    return name.name if isinstance(name, PurePath) else name
