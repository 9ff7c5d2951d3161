"""
Shared fixtures for dirdedupe tests.
Creates isolated temporary directories with controlled test files.
"""
import os
import random
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'dirdedupe' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from dirdedupe.core.models import FileDescriptor


def random_bytes(seed: int, size: int) -> bytes:
    """Deterministic pseudo-random content."""
    return random.Random(seed).randbytes(size)


def write_file(path: Path, data: bytes, mtime: float = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


def describe(path: Path) -> FileDescriptor:
    """Descriptor for an existing file, the way the scanner builds it."""
    st = path.stat()
    return FileDescriptor(
        path=str(path),
        size=st.st_size,
        modified_time=st.st_mtime,
        modified_time_ns=st.st_mtime_ns,
        creation_time=getattr(st, "st_birthtime", st.st_ctime),
    )


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for deduplication scenarios:
    - 2 identical files (duplicates) of 1KB
    - 2 identical files (duplicates) of 2KB
    - 2 unique files of the same size (1500 bytes, different content)
    - 1 empty file
    - 1 hidden file (same content as dup1)
    - 1 file in a subdirectory (same content as dup1)
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = write_file(temp_dir / "dup1_a.txt", content_a, mtime=1_000_000)
    files["dup1_b"] = write_file(temp_dir / "dup1_b.txt", content_a, mtime=1_000_100)

    content_b = b"B" * 2048
    files["dup2_a"] = write_file(temp_dir / "dup2_a.txt", content_b, mtime=1_000_200)
    files["dup2_b"] = write_file(temp_dir / "dup2_b.txt", content_b, mtime=1_000_300)

    files["unique1"] = write_file(temp_dir / "unique1.txt", b"C" * 1500, mtime=1_000_400)
    files["unique2"] = write_file(temp_dir / "unique2.txt", b"D" * 1500, mtime=1_000_500)

    files["empty"] = write_file(temp_dir / "empty.txt", b"", mtime=1_000_600)

    files["hidden"] = write_file(temp_dir / ".hidden.txt", content_a, mtime=1_000_700)

    files["sub_dup"] = write_file(temp_dir / "subdir" / "dup_in_subdir.txt", content_a, mtime=1_000_800)

    return files
