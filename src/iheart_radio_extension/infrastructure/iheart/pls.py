"""Minimal PLS playlist reader.

Only the first entry matters: the value of the first line that starts with
exactly ``File1=`` is the stream URL. It is returned verbatim.
"""

from __future__ import annotations

import re
from typing import Final

PLS_ENTRY_PREFIX: Final[str] = "File1="

# Only CRLF, CR and LF end a line; other separators belong to the value
_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def parse_pls(content: str) -> str | None:
    """Return the ``File1=`` value, or ``None`` when the playlist has none."""
    for line in _LINE_BREAK.split(content):
        if line.startswith(PLS_ENTRY_PREFIX):
            return line[len(PLS_ENTRY_PREFIX) :]
    return None
