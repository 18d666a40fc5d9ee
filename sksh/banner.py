"""Start-up banner printed from a text file."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from sksh.text import read_lines

BANNER_FILE = "banner.txt"


def print_banner(
    path: str | os.PathLike[str] = BANNER_FILE, out: TextIO | None = None
) -> bool:
    """Copy the banner file to *out* followed by a newline.

    A file that cannot be opened is silently skipped; returns whether the
    banner was printed.
    """
    target = sys.stdout if out is None else out
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        return False
    with handle:
        for line in read_lines(handle):
            target.write(line)
    target.write("\n")
    target.flush()
    return True