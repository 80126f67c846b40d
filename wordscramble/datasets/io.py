from __future__ import annotations
from pathlib import Path
from typing import List


def read_words(p: Path | str) -> List[str]:
    """
    Read a newline-delimited UTF-8 word file.

    Each entry is stripped and lowercased; blank lines (including the empty
    entry after a trailing newline) are dropped. File order is kept.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        return [w for w in (ln.strip().lower() for ln in f) if w]
