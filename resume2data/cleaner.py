"""
Shared text clean-ups and the "is this readable?" gate.
"""
from __future__ import annotations
import re

_READABLE   = re.compile(r"""[A-Za-z0-9 .,;:'"!?()-]""")
_NEWLINES   = re.compile(r"\r\n?")
_PDF_ESCAPE = re.compile(r"\\(\d{3}|.)")
_UNPRINT    = re.compile(r"[^\x20-\x7E\n\t]")
_HSPACE     = re.compile(r"[^\S\n]+")

READABLE_RATIO = 0.7
RESUME_WORDS = ("experience", "education", "skills", "project",
                "work", "job", "professional")


# ───────────────────────────────────────── readability ──
def is_readable_text(text: str) -> bool:
    """True when text looks like human-readable résumé content."""
    if not text:
        return False
    ratio = len(_READABLE.findall(text)) / len(text)
    if ratio > READABLE_RATIO:
        return True
    lower = text.lower()
    return any(w in lower for w in RESUME_WORDS)


# ───────────────────────────────────────── normaliser ──
def clean_text(text: str) -> str:
    """
    Normalise extracted PDF text.

    Line endings become LF, PDF string escapes (``\\123``, ``\\n``) and
    non-printable characters are dropped, horizontal whitespace collapses
    to one space, and blank lines disappear. Running it twice is a no-op.
    """
    text = _NEWLINES.sub("\n", text or "")
    text = _PDF_ESCAPE.sub(" ", text)
    text = _UNPRINT.sub("", text)
    text = _HSPACE.sub(" ", text)
    lines = (ln.strip() for ln in text.split("\n"))
    return "\n".join(ln for ln in lines if ln)
