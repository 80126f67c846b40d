"""
Start word list auditor.

What this module does:
- Check a start word file before it ships (the game refuses to run without it).
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters,
  one word per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import audit_wordlist, pretty_summary
    rep = audit_wordlist("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib
import logging

from wordscramble.engine.rules import MIN_WORD_LENGTH

logger = logging.getLogger(__name__)


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one start word file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable root word
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # non-blank lines that broke a formatting rule
    blank_lines: int     # interior blank lines (a single trailing newline is fine)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    lines = path.read_text(encoding="utf-8").splitlines()
    for raw in lines:
        w = raw.strip()
        if not w:
            blank += 1
            continue
        # must already be lowercase, alphabetic, and long enough to play with
        if w == w.lower() and w.isalpha() and w.isascii() and len(w) >= min_length:
            valid.append(w)
        else:
            invalid += 1

    return valid, invalid, blank


def audit_wordlist(path: str | Path, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Audit a start word file.

    Parameters
    ----------
    path : str | Path
        Newline-delimited start word file.
    min_length : int
        Root words shorter than this leave nothing to play; flagged as invalid.

    Returns
    -------
    Dict
        JSON-serializable WordlistReport. `passed` is strict: the file must
        exist, be non-empty, and hold no invalid, blank, or duplicate lines.
    """
    p = Path(path)

    if not p.exists():
        rep = WordlistReport(str(path), False, min_length, 0, 0, 0, 0, "",
                             issues=[f"start word file not found: {path}"])
        logger.warning("Wordlist audit failed: %s", rep.issues[0])
        return asdict(rep)

    words, invalid, blank = _load_and_check(p, min_length)
    rep = WordlistReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        blank_lines=blank,
        sha256=_sha256_file(p),
    )

    if rep.count == 0:
        rep.issues.append("start word file contains 0 valid words")
    if invalid:
        rep.issues.append(f"{invalid} invalid line(s)")
    if blank:
        rep.issues.append(f"{blank} blank line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append("start word file contains duplicate lines")

    rep.passed = not rep.issues
    for issue in rep.issues:
        logger.warning("Wordlist audit %s: %s", p, issue)
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/docs.

    Example:
        start.txt | words=64 (uniq=64, min_len=3, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"{name} | words={report['count']} (uniq={report['unique_count']}, "
        f"min_len={report['min_length']}, sha={sha}) | {status}"
    )
