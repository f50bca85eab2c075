"""
Rule-based résumé parser.
Turns cleaned résumé text into a ResumeData record: contact block, summary,
categorised skills, experience, education and projects.
"""

from __future__ import annotations
import logging
import re
from typing import Callable, Dict, List, TypeVar

from .cleaner import is_readable_text
from .config import MIN_TEXT_LENGTH, SUMMARY_MAX_CHARS
from .entries import (
    find_location,
    parse_education,
    parse_experience,
    parse_project,
    split_education,
    split_experience,
    split_projects,
)
from .schema_resume import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeData,
    Skill,
    SkillCategory,
)
from .sections import SECTION_HEADERS, extract_section

log = logging.getLogger(__name__)

EMAIL = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE = re.compile(r"(?<![\w+])(?:\+\d{1,3}[-. ]?)?(?:\(\d{3}\)|\d{3})[-. ]?\d{3}[-. ]?\d{4}\b")
NAME = re.compile(r"^[A-Z][a-z]+(?: [A-Z][a-z]+){1,2}$")
WEBSITE = re.compile(r"\b(?:https?://\S+|(?:www\.)?linkedin\.com/in/\S+|(?:www\.)?github\.com/\S+)")

_LABEL = re.compile(r"^\s*(?:[•*\-]\s*)?([A-Za-z][A-Za-z &/+#.]{0,40}?)\s*[:→](?!//)\s*(.*)$")
_ITEM_SPLIT = re.compile(r"[,|•;\n]")
_TOKEN_SPLIT = re.compile(r"[•*,;|\n]|(?:^|\s)[-–]+(?=\s|$)", re.M)

# checked in this order; anything unmatched lands in "Technical"
SKILL_BUCKETS = (
    ("Programming Languages", re.compile(
        r"(?<![\w+#])(?:java|python|javascript|typescript|c\+\+|c#|ruby|php|go|golang"
        r"|rust|swift|kotlin|scala|perl|bash|html5?|css3?|sql)(?![\w+#])", re.I)),
    ("Frameworks", re.compile(
        r"(?<![\w.])(?:react|angular|vue|node(?:\.js)?|express|django|flask|fastapi"
        r"|spring|laravel|next\.js|gatsby|rails)(?!\w)", re.I)),
    ("Tools", re.compile(
        r"(?<![\w.])(?:aws|azure|gcp|docker|kubernetes|jenkins|git|github|gitlab|jira"
        r"|confluence|terraform|linux|ci/cd)(?!\w)", re.I)),
    ("Soft Skills", re.compile(
        r"\b(?:communication|leadership|teamwork|problem.solving|critical.thinking"
        r"|management|collaboration)", re.I)),
)
DEFAULT_BUCKET = "Technical"

T = TypeVar("T")


# ───────────────────────────────────────── personal info ──
def _find_name(lines: List[str]) -> str:
    for ln in lines[:5]:
        if 2 < len(ln) < 40 and "@" not in ln and not re.search(r"\d", ln) and NAME.match(ln):
            return ln
    for ln in lines[:3]:
        if 2 < len(ln) < 40 and "@" not in ln and not re.match(r"\d", ln):
            return ln
    return ""


def extract_personal_info(text: str) -> PersonalInfo:
    info = PersonalInfo()
    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]

    if m := EMAIL.search(text):
        info.email = m.group()
    if m := PHONE.search(text):
        info.phone = m.group().strip()

    info.name = _find_name(lines)
    if info.name:
        idx = next(i for i, ln in enumerate(lines) if info.name in ln)
        if idx + 1 < len(lines):
            title = lines[idx + 1]
            if (len(title) < 50 and "@" not in title and not re.match(r"\d", title)
                    and not EMAIL.search(title) and not PHONE.search(title)):
                info.title = title

    info.location = find_location(text)
    if m := WEBSITE.search(text):
        info.website = m.group().rstrip(".,;)")

    summary = extract_section(text, SECTION_HEADERS["summary"])
    if summary and len(summary) >= 20:
        info.summary = summary[:SUMMARY_MAX_CHARS]
    return info


# ───────────────────────────────────────── skills ──
def _items(body: str) -> List[str]:
    return [s.strip() for s in _ITEM_SPLIT.split(body) if 0 < len(s.strip()) < 30]


def _explicit_categories(section: str) -> Dict[str, List[str]]:
    """`Label: a, b, c` blocks; unlabeled lines continue the previous label."""
    cats: Dict[str, List[str]] = {}
    current = None
    for ln in section.split("\n"):
        if m := _LABEL.match(ln):
            current = m.group(1).strip()
            cats.setdefault(current, []).extend(_items(m.group(2)))
        elif current is not None:
            cats[current].extend(_items(ln))
    return cats


def _bucketed(section: str) -> Dict[str, List[str]]:
    cats: Dict[str, List[str]] = {name: [] for name, _ in SKILL_BUCKETS}
    cats[DEFAULT_BUCKET] = []
    for token in _TOKEN_SPLIT.split(section):
        token = (token or "").strip()
        if not 0 < len(token) <= 30:
            continue
        bucket = next((name for name, rx in SKILL_BUCKETS if rx.search(token)), DEFAULT_BUCKET)
        cats[bucket].append(token)
    return cats


def parse_skills_section(section: str) -> List[SkillCategory]:
    cats = _explicit_categories(section)
    if not any(cats.values()):
        cats = _bucketed(section)
    return [
        SkillCategory(name=name, skills=[Skill(name=s) for s in skills])
        for name, skills in cats.items() if skills
    ]


def extract_skills(text: str) -> List[SkillCategory]:
    section = extract_section(text, SECTION_HEADERS["skills"])
    if not section:
        return []
    log.debug("Found skills section: %s...", section[:100])
    skills = parse_skills_section(section)
    log.info("Extracted %d skill categories", len(skills))
    return skills


# ───────────────────────────────────────── entries ──
def extract_experience(text: str) -> List[Experience]:
    section = extract_section(text, SECTION_HEADERS["experience"])
    if not section:
        return []
    jobs = [parse_experience(chunk) for chunk in split_experience(section)]
    jobs = [j for j in jobs if j.company or j.position]
    log.info("Extracted %d experiences", len(jobs))
    return jobs


def extract_education(text: str) -> List[Education]:
    section = extract_section(text, SECTION_HEADERS["education"])
    if not section:
        return []
    entries = [parse_education(e.strip()) for e in split_education(section)
               if len(e.strip()) > 10]
    entries = [e for e in entries if e.institution or e.degree]
    log.info("Extracted %d education entries", len(entries))
    return entries


def extract_projects(text: str) -> List[Project]:
    section = extract_section(text, SECTION_HEADERS["projects"])
    if not section:
        return []
    projects = [parse_project(e.strip()) for e in split_projects(section)
                if len(e.strip()) > 10]
    projects = [p for p in projects if p.name]
    log.info("Extracted %d projects", len(projects))
    return projects


# ───────────────────────────────────────── entry point ──
def _guarded(extract: Callable[[str], T], text: str, default: T) -> T:
    try:
        return extract(text)
    except Exception:
        log.exception("%s failed, leaving the section empty", extract.__name__)
        return default


def extract_structured_resume(text: str) -> ResumeData:
    """
    Best-effort structured record from résumé text.

    Empty, short or unreadable text yields an all-default ResumeData rather
    than an error.
    """
    if not text or len(text) < MIN_TEXT_LENGTH or not is_readable_text(text):
        log.warning("Invalid text content for resume extraction")
        return ResumeData()

    return ResumeData(
        personal_info=_guarded(extract_personal_info, text, PersonalInfo()),
        skills=_guarded(extract_skills, text, []),
        experience=_guarded(extract_experience, text, []),
        education=_guarded(extract_education, text, []),
        projects=_guarded(extract_projects, text, []),
    )
