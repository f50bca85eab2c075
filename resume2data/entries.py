"""
Per-entry heuristics.

An *entry* is one job, one degree or one project inside its section. The
helpers here split a section into entries and turn each entry into a typed
record using nothing but regexes over the entry's lines. None of them raise
on odd input; they leave fields at their zero value instead.
"""
from __future__ import annotations
import re
from typing import List, Optional, Pattern, Sequence, Tuple

from .schema_resume import Education, Experience, Project
from .sections import ALL_SECTION_HEADERS

MONTH = (r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
         r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\.?")
_DASH = r"(?:-|–|—|to)"
_OPEN = r"Present|Current|Ongoing|Now"

MONTH_RANGE_RE   = re.compile(rf"\b({MONTH}\s+\d{{4}})\s*{_DASH}\s*({MONTH}\s+\d{{4}}|{_OPEN})\b", re.I)
NUMERIC_RANGE_RE = re.compile(rf"\b(\d{{1,2}}/\d{{4}})\s*{_DASH}\s*(\d{{1,2}}/\d{{4}}|{_OPEN})\b", re.I)
YEAR_RANGE_RE    = re.compile(rf"\b(\d{{4}})\s*{_DASH}\s*(\d{{4}}|{_OPEN})\b", re.I)
DATE_RANGES      = (MONTH_RANGE_RE, NUMERIC_RANGE_RE, YEAR_RANGE_RE)
ANY_RANGE_RE     = re.compile("|".join(f"(?:{p.pattern})" for p in DATE_RANGES), re.I)
DATE_HINT_RE     = re.compile(rf"\b{MONTH}\s+\d{{4}}|\b\d{{4}}\b", re.I)

CLASS_OF_RE  = re.compile(r"\bClass\s+of\s+(\d{4})\b", re.I)
GRADUATED_RE = re.compile(r"\bGraduat(?:ed|ion)(?:\s+in)?:?\s+(\d{4})\b", re.I)

# "City, ST" is tried before the looser "Words, Words"
LOCATION_CODE_RE = re.compile(r"\b([A-Z][A-Za-z.'-]*(?: [A-Z][A-Za-z.'-]*)*, ?[A-Z]{2})\b")
LOCATION_RE      = re.compile(r"\b([A-Z][A-Za-z.'-]*(?: [A-Z][A-Za-z.'-]*)*, ?[A-Z][a-z]+(?: [A-Z][a-z]+)*)\b")

BULLET_RE = re.compile(r"^\s*(?:[•●▪◦‣∙·*\-–]\s*|\d{1,2}[.)]\s+)(.+)$")
BLANK_RE  = re.compile(r"\n\s*\n")
URL_RE    = re.compile(r"https?://[^\s)>\]]+")

EMPLOYER_RE    = re.compile(r"\b(?:Inc\b\.?|LLC\b|Ltd\b\.?|Corp\b\.?|Corporation\b|Company\b)", re.I)
POSITION_AT_RE = re.compile(r"^(.+?)\s+(?:at|@|\||-|–)\s+(.+)$", re.I)

DEGREE_RE = re.compile(
    r"\b(?:(?:Bachelor|Master|Associate)(?:'?s)?\b|Doctor(?:ate)?\b|Ph\.?\s?D\b\.?|MBA\b"
    r"|[ABM]\.\s?(?:Sc|Tech|S|A|E)\b\.?|Diploma\b)[^,\n]*", re.I)
INSTITUTION_RE = re.compile(r"\b(?:University|College|Institute|School|Academy|Polytechnic)\b", re.I)
FIELD_RE       = re.compile(r"\bin\s+([^,\n]+)", re.I)
FROM_AT_RE     = re.compile(r"\s+(?:from|at)\s+([^,\n]+)", re.I)
_TRAILING_DATE = re.compile(rf"[\s,|(\-–]*(?:\b{MONTH}\s+)?\b(?:19|20)\d{{2}}\b.*$", re.I)

TECH_RE = re.compile(
    r"(?:\bTechnolog(?:y|ies)|\bTech\s+Stack|\bTools)(?:\s+used)?\s*:\s*([^\n]+)"
    r"|^[ \t]*(?:Technolog(?:y|ies)|Tech\s+Stack|Tools)(?:\s+used)?[ \t]+([^\n]+)"
    r"|\bBuilt\s+(?:with|using)\s+([^\n]+)", re.I | re.M)
TECH_LINE_RE = re.compile(r"^(?:Technolog|Tech\s+Stack|Tools|Built\s+(?:with|using))", re.I)
NOT_DESC_RE  = re.compile(r"^[•●▪*\-–\d.]")


# ───────────────────────────────────────── shared helpers ──
def _lines(text: str) -> List[str]:
    return [ln.strip() for ln in (text or "").split("\n") if ln.strip()]


def bullet_text(line: str) -> Optional[str]:
    """Text of a bullet line with its marker stripped; None for plain lines."""
    m = BULLET_RE.match(line)
    return m.group(1).strip() if m else None


def extract_achievements(lines: Sequence[str]) -> List[str]:
    """Bullet lines of at least 5 characters; [""] when there are none."""
    bullets = [bullet_text(ln) for ln in lines]
    return [b for b in bullets if b and len(b) >= 5] or [""]


def find_date_range(text: str, patterns: Sequence[Pattern] = DATE_RANGES) -> Tuple[str, str]:
    for pattern in patterns:
        if m := pattern.search(text or ""):
            return m.group(1).strip(), m.group(2).strip()
    return "", ""


def find_location(text: str) -> str:
    """First "City, Region" looking fragment that is not a section header."""
    text = text or ""
    coded = list(LOCATION_CODE_RE.finditer(text))
    found = sorted(coded + list(LOCATION_RE.finditer(text)), key=lambda m: m.start())
    for m in found:
        # an overlapping "City, XX" is the tighter reading of the same words
        m = next((c for c in coded if c.start() < m.end() and m.start() < c.end()), m)
        head = m.group(1).split(",")[0].strip().lower()
        if head not in ALL_SECTION_HEADERS:
            return m.group(1).strip()
    return ""


def _trim_degree(s: str) -> str:
    s = FROM_AT_RE.split(s)[0]
    return _TRAILING_DATE.sub("", s).strip(" ,|-–")


# ───────────────────────────────────────── experience ──
def _short(line: str) -> bool:
    return 3 <= len(line.strip()) <= 60


def split_experience(section: str) -> List[str]:
    """
    Cut an experience section into one chunk per job.

    A job starts with two consecutive short, non-bullet lines (title and
    employer) lying more than 20 characters past the previous such pair.
    Fewer than two of those: fall back to blank-line blocks, then to
    splitting at each date range.
    """
    spans, pos = [], 0
    for ln in section.split("\n"):
        spans.append((pos, ln))
        pos += len(ln) + 1

    starts: List[int] = []
    last_end = 0
    for (a, first), (b, second) in zip(spans, spans[1:]):
        if not (_short(first) and _short(second)):
            continue
        if bullet_text(first) is not None or bullet_text(second) is not None:
            continue
        if not starts or a - last_end > 20:
            starts.append(a)
        last_end = b + len(second)

    if len(starts) >= 2:
        bounds = starts + [len(section)]
        return [section[x:y] for x, y in zip(bounds, bounds[1:])]

    blocks = BLANK_RE.split(section)
    if len(blocks) <= 1:
        positions = [m.start() for m in ANY_RANGE_RE.finditer(section)]
        if len(positions) > 1:
            # leading lines (title, employer) stay with the first job
            bounds = [0] + positions[1:] + [len(section)]
            blocks = [section[x:y] for x, y in zip(bounds, bounds[1:])]
    return [b for b in blocks if len(b.strip()) > 20]


def parse_experience(text: str) -> Experience:
    exp = Experience()
    lines = _lines(text)
    if len(lines) < 2:
        return exp

    first, second = lines[0], lines[1]
    m = POSITION_AT_RE.match(first)
    if m and not ANY_RANGE_RE.search(first):
        exp.position, exp.company = m.group(1).strip(), m.group(2).strip()
    elif DATE_HINT_RE.search(second):
        candidates = [ln for ln in lines[2:5] if bullet_text(ln) is None]
        if EMPLOYER_RE.search(first):
            exp.company = first
            exp.position = next((ln for ln in candidates
                                 if len(ln) < 50 and not DATE_HINT_RE.search(ln)), "")
        else:
            exp.position = first
            exp.company = next((ln for ln in candidates
                                if (len(ln) < 50 and not DATE_HINT_RE.search(ln))
                                or EMPLOYER_RE.search(ln)), "")
    else:
        exp.position, exp.company = first, second

    start, end = find_date_range(text)
    if start:
        exp.start_date, exp.end_date = start, end
    exp.location = find_location(text)
    exp.achievements = extract_achievements(lines)

    header = {exp.company, exp.position} - {""}
    desc = [ln for ln in lines[1:]
            if ln not in header
            and bullet_text(ln) is None
            and not ANY_RANGE_RE.search(ln)
            and not (exp.location and exp.location in ln)]
    exp.description = " ".join(desc).strip()
    return exp


# ───────────────────────────────────────── education ──
def split_education(section: str) -> List[str]:
    """
    Blank-line blocks; a single block is cut wherever a second degree line
    or a second institution line would land in the same entry.
    """
    blocks = BLANK_RE.split(section)
    if len(blocks) > 1:
        return blocks

    entries: List[str] = []
    cur: List[str] = []
    has_degree = has_school = False
    for ln in section.split("\n"):
        is_degree = bool(DEGREE_RE.search(ln))
        is_school = not is_degree and bool(INSTITUTION_RE.search(ln))
        if cur and ((is_degree and has_degree) or (is_school and has_school)):
            entries.append("\n".join(cur))
            cur, has_degree, has_school = [], False, False
        cur.append(ln)
        has_degree |= is_degree
        has_school |= is_school
    if cur:
        entries.append("\n".join(cur))
    return entries


def _field_of_study(line: str) -> str:
    m = FIELD_RE.search(line)
    return _trim_degree(m.group(1)) if m else ""


def _plain(line: str) -> bool:
    return (bullet_text(line) is None and not DEGREE_RE.search(line)
            and not ANY_RANGE_RE.search(line) and not DATE_HINT_RE.fullmatch(line))


def parse_education(text: str) -> Education:
    edu = Education()
    lines = _lines(text)
    if not lines:
        return edu

    used = {0}
    if m := DEGREE_RE.search(lines[0]):
        edu.degree = _trim_degree(m.group())
        edu.field = _field_of_study(lines[0])
        if inst := FROM_AT_RE.search(lines[0]):
            edu.institution = _TRAILING_DATE.sub("", inst.group(1)).strip()
        else:
            rest = list(enumerate(lines))[1:]
            pick = (next(((i, ln) for i, ln in rest if INSTITUTION_RE.search(ln)), None)
                    or next(((i, ln) for i, ln in rest if _plain(ln)), None))
            if pick:
                used.add(pick[0])
                edu.institution = _TRAILING_DATE.sub("", pick[1]).strip(" ,|-–")
    else:
        edu.institution = _TRAILING_DATE.sub("", lines[0]).strip(" ,|-–") or lines[0]
        for i, ln in enumerate(lines[1:], 1):
            if m := DEGREE_RE.search(ln):
                used.add(i)
                edu.degree = _trim_degree(m.group())
                edu.field = _field_of_study(ln)
                break

    start, end = find_date_range(text, (MONTH_RANGE_RE, YEAR_RANGE_RE))
    if end:
        edu.start_date, edu.end_date = start, end
    elif m := (CLASS_OF_RE.search(text) or GRADUATED_RE.search(text)):
        edu.end_date = m.group(1)

    degree_line = min((i for i in used if DEGREE_RE.search(lines[i])), default=None)
    edu.location = find_location("\n".join(ln for i, ln in enumerate(lines) if i != degree_line))
    if edu.location:
        used.update(i for i, ln in enumerate(lines) if edu.location in ln)

    if len(lines) > 2:
        desc = [bullet_text(ln) or ln for i, ln in enumerate(lines)
                if i not in used
                and not ANY_RANGE_RE.search(ln)
                and not CLASS_OF_RE.search(ln) and not GRADUATED_RE.search(ln)
                and not DATE_HINT_RE.fullmatch(ln)]
        edu.description = " ".join(desc).strip()
    return edu


# ───────────────────────────────────────── projects ──
def split_projects(section: str) -> List[str]:
    """Blank-line blocks; otherwise a plain line right after a bullet opens a new project."""
    blocks = BLANK_RE.split(section)
    if len(blocks) > 1:
        return blocks

    entries: List[List[str]] = [[]]
    prev_bullet = False
    for ln in section.split("\n"):
        is_bullet = bullet_text(ln) is not None
        opens = (prev_bullet and not is_bullet and ln.strip()
                 and not TECH_LINE_RE.match(ln.strip()) and not URL_RE.match(ln.strip()))
        if opens:
            entries.append([])
        entries[-1].append(ln)
        prev_bullet = is_bullet
    return ["\n".join(e) for e in entries if e]


def parse_project(text: str) -> Project:
    proj = Project()
    lines = _lines(text)
    if not lines:
        return proj

    proj.name = bullet_text(lines[0]) or lines[0]

    if m := TECH_RE.search(text):
        proj.technologies = next(g for g in m.groups() if g).strip()
    if m := URL_RE.search(text):
        proj.link = m.group().rstrip(".,;")

    proj.start_date, proj.end_date = find_date_range(text)
    proj.achievements = extract_achievements(lines[1:])

    proj.description = next(
        (ln for ln in lines[1:]
         if not NOT_DESC_RE.match(ln)
         and not TECH_LINE_RE.match(ln)
         and not URL_RE.match(ln)), "")
    return proj
