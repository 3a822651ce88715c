"""Writing, reading, measuring and copying small text files."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

SAMPLE_TEXT = "Hello, this is a test file."
DEFAULT_PATH = "output.txt"


def write_sample(path: PathLike = DEFAULT_PATH) -> None:
    """Write the sample sentence to ``path``, replacing any existing content."""
    Path(path).write_text(SAMPLE_TEXT)


def read_text(path: PathLike = DEFAULT_PATH) -> str:
    """Return the whole content of ``path``; raises FileNotFoundError if absent."""
    with open(path, newline="") as handle:
        return handle.read()


def count_characters(path: PathLike = DEFAULT_PATH) -> int:
    """Number of characters in ``path``, line endings included as stored."""
    return len(read_text(path))


def copy_file(source: PathLike = DEFAULT_PATH, destination: PathLike = "copy.txt") -> Path:
    """Copy ``source`` to ``destination`` and return the destination path."""
    return Path(shutil.copyfile(source, destination))