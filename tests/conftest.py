"""
Pytest configuration and fixtures
"""
from pathlib import Path
import sys
import zipfile

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


CLASS_MAGIC = b"\xca\xfe\xba\xbe"


def write_class(path: Path, payload: bytes = b"") -> Path:
    """Write a minimal class-file stand-in (magic header plus payload)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(CLASS_MAGIC + payload)
    return path


def write_jar(path: Path, entries: dict[str, bytes], directories: tuple[str, ...] = ()) -> Path:
    """Create a jar with explicit directory entries followed by file entries."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as zf:
        for directory in directories:
            zf.writestr(zipfile.ZipInfo(directory.rstrip("/") + "/"), b"")
        for name, payload in entries.items():
            zf.writestr(name, payload)
    return path


@pytest.fixture
def class_tree(tmp_path: Path) -> Path:
    """
    dirA/
      Alpha.class
      readme.txt
      pkg/Beta.class
    """
    root = tmp_path / "dirA"
    write_class(root / "Alpha.class", b"alpha")
    write_class(root / "pkg" / "Beta.class", b"beta")
    (root / "readme.txt").write_text("not a class\n")
    return root


@pytest.fixture
def sample_jar(tmp_path: Path) -> Path:
    return write_jar(
        tmp_path / "fileB.jar",
        {
            "com/example/One.class": CLASS_MAGIC + b"one",
            "com/example/Two.class": CLASS_MAGIC + b"two",
            "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\n",
        },
        directories=("com/", "com/example/", "META-INF/"),
    )


@pytest.fixture
def make_jar():
    return write_jar


@pytest.fixture
def make_class():
    return write_class
