"""Reading and writing unsigned 32-bit values through sysfs attribute files."""

from __future__ import annotations

import os
import re
from typing import Union

_M32 = 0xFFFFFFFF
_NUMBER = re.compile(rb"\s*([+-]?\d+)")

PathLike = Union[str, "os.PathLike[str]"]


def read_value(path: PathLike) -> int:
    """Read an unsigned 32-bit decimal value from ``path``.

    Raises OSError if the file cannot be opened and ValueError if it does
    not start with a decimal number.
    """
    with open(path, "rb") as handle:
        text = handle.read()
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"no decimal value in {os.fspath(path)!r}")
    return int(match.group(1)) & _M32


def write_value(path: PathLike, value: int) -> int:
    """Write ``value`` as an unsigned 32-bit decimal; return the characters written."""
    text = str(value & _M32)
    with open(path, "w", encoding="ascii") as handle:
        handle.write(text)
    return len(text)


def print_version(path: PathLike) -> None:
    """Read a version register from ``path`` and print it in hexadecimal."""
    version = read_value(path)
    print(f"[User] Version: 0x{version:x}")


def gen_fname(class_path: str, minor: int, reg: str) -> str:
    """Build the attribute path ``<class_path><minor>/<reg>``."""
    return f"{class_path}{minor}/{reg}"