"""
Section segmentation.

A section runs from its header to the nearest later occurrence of any other
known header word. Header words that show up inside a section body (say
"projects" in a job bullet) cut the section short; that is a known
limitation of working on plain text.
"""
from __future__ import annotations
import re
from typing import Dict, Iterable, List, Optional, Tuple

# aliases tried (in order) when looking for a given section
SECTION_HEADERS: Dict[str, Tuple[str, ...]] = {
    "summary": ("SUMMARY", "PROFESSIONAL SUMMARY", "PROFILE", "ABOUT",
                "OBJECTIVE", "CAREER OBJECTIVE"),
    "skills": ("SKILLS", "TECHNICAL SKILLS", "CORE COMPETENCIES", "KEY SKILLS",
               "EXPERTISE", "TECHNOLOGIES"),
    "experience": ("EXPERIENCE", "WORK EXPERIENCE", "EMPLOYMENT",
                   "PROFESSIONAL EXPERIENCE", "WORK HISTORY", "CAREER HISTORY"),
    "education": ("EDUCATION", "ACADEMIC BACKGROUND", "EDUCATIONAL QUALIFICATIONS",
                  "ACADEMIC QUALIFICATIONS", "ACADEMIC HISTORY"),
    "projects": ("PROJECTS", "PROJECT EXPERIENCE", "PERSONAL PROJECTS",
                 "KEY PROJECTS", "ACADEMIC PROJECTS", "PORTFOLIO"),
}

# every header that can end a section; "technologies" and "portfolio" are left
# out because they turn up inside project bodies far more often than as headers
ALL_SECTION_HEADERS: Tuple[str, ...] = (
    "summary", "professional summary", "profile", "about", "objective",
    "career objective",
    "experience", "work experience", "employment", "employment history",
    "work history", "career history",
    "education", "academic background", "academic history", "qualifications",
    "skills", "technical skills", "key skills", "core competencies", "expertise",
    "projects", "project experience", "personal projects", "key projects",
    "academic projects",
    "certifications", "awards", "achievements", "honors", "publications",
    "languages", "interests", "activities", "references",
    "volunteer", "volunteering", "community service",
)

_EDGE_RE = re.compile(r"^[\s:;\-–]+|[\s:]+$")


def _words(header: str, sep: str = r"\s+") -> str:
    return sep.join(re.escape(w) for w in header.split())


_HSEP = r"[ \t]+"

# header shapes, strictest first: own line, line start + colon, line start,
# word + colon, bare word
_SHAPES = (
    lambda h: rf"^[ \t]*{_words(h, _HSEP)}[ \t]*:?[ \t]*$",
    lambda h: rf"^[ \t]*{_words(h, _HSEP)}[ \t]*:",
    lambda h: rf"^[ \t]*{_words(h, _HSEP)}\b",
    lambda h: rf"\b{_words(h)}:",
    lambda h: rf"\b{_words(h)}\b",
)


def _find_header(text: str, aliases: Iterable[str]) -> Optional[Tuple[str, int]]:
    aliases = list(aliases)
    for shape in _SHAPES:
        for alias in aliases:
            m = re.search(shape(alias), text, re.I | re.M)
            if m:
                return alias.lower(), m.end()
    return None


def section_end(text: str, start: int, skip: str = "") -> int:
    """Position of the nearest other header strictly after `start`."""
    end = len(text)
    for header in ALL_SECTION_HEADERS:
        if header == skip:
            continue
        for m in re.finditer(rf"\b{_words(header)}\b", text[start:end], re.I):
            if m.start() > 0:
                end = start + m.start()
                break
    return end


def extract_section(text: str, aliases: Iterable[str]) -> Optional[str]:
    """
    Return the text owned by the first header found among `aliases`.

    None means no alias occurs in the text at all.
    """
    if not text:
        return None
    found = _find_header(text, aliases)
    if found is None:
        return None
    alias, start = found
    end = section_end(text, start, skip=alias)
    return _EDGE_RE.sub("", text[start:end])


def section_spans(text: str) -> List[Tuple[str, str]]:
    """(name, span) for every registered section present in `text`."""
    spans = []
    for name, aliases in SECTION_HEADERS.items():
        span = extract_section(text, aliases)
        if span is not None:
            spans.append((name, span))
    return spans
