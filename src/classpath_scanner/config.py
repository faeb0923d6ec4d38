from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

CLASS_PATH_ENV = "CLASSPATH_SCANNER_PATH"
FALLBACK_CLASS_PATH_ENV = "CLASSPATH"


def split_class_path(value: Optional[str], separator: str = os.pathsep) -> List[Path]:
    """
    Split a path-list string into root paths.

    Order and duplicates are kept as given; empty segments are dropped.
    """
    if not value:
        return []
    return [Path(segment) for segment in value.split(separator) if segment]


@dataclass
class ScannerSettings:
    """
    Where the default roots come from.

    ``class_path`` is an explicit path-list string; pass it directly or use
    :meth:`from_env` to read it from the environment (and a ``.env`` file).
    """

    class_path: Optional[str] = None
    separator: str = os.pathsep

    @classmethod
    def from_env(
        cls,
        load_env_file: bool = True,
        env_file: Optional[Union[str, Path]] = None,
    ) -> "ScannerSettings":
        """
        Read the class path from the environment.

        ``CLASSPATH_SCANNER_PATH`` wins whenever it is set, even to an empty
        string (which yields no roots); ``CLASSPATH`` is used only when it is
        unset.
        """
        if load_env_file:
            load_dotenv(env_file)
        class_path = os.getenv(CLASS_PATH_ENV)
        if class_path is None:
            class_path = os.getenv(FALLBACK_CLASS_PATH_ENV)
        return cls(class_path=class_path)

    def roots(self) -> List[Path]:
        return split_class_path(self.class_path, self.separator)
