"""File-system helpers and identifier hashing."""

from __future__ import annotations

import os
from pathlib import Path

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def file_exists(path: str | os.PathLike) -> bool:
    """Whether anything exists at path; errors other than "not found" propagate."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def dir_exists(path: str | os.PathLike) -> bool:
    """Whether path exists and is a directory; other errors propagate."""
    try:
        info = os.stat(path)
    except FileNotFoundError:
        return False
    return os.path.isdir(path) if info else False


def expand_path(path: str) -> str:
    """Expand a leading '~' to the current user's home directory."""
    if path.startswith("~"):
        rest = path[1:].lstrip("/\\")
        return os.path.normpath(os.path.join(str(Path.home()), rest))
    return path


def write_to_file(data: bytes | str, path: str) -> None:
    """Write data to path, creating parent directories as needed."""
    target = Path(expand_path(str(path)))
    target.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        data = data.encode("utf-8")
    target.write_bytes(data)


def hash_string(s: str) -> str:
    """Lowercase hexadecimal FNV-1a 64-bit hash of s."""
    value = _FNV64_OFFSET
    for byte in s.encode("utf-8"):
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return f"{value:x}"