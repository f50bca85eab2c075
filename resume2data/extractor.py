"""
PDF ➜ raw text
– tries pdfplumber, then pypdf, then a raw byte scrape, gating each on length & readability
– short-circuits with guidance when the PDF is image-only
– strips `(cid:N)` glyph artifacts
– suppresses verbose CropBox warnings from pdfplumber/pdfminer
"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, List
import io, re, logging, warnings

import pdfplumber
from pypdf import PdfReader

from .cleaner import clean_text, is_readable_text
from .config import LINE_Y_TOLERANCE, MIN_TEXT_LENGTH
from .scanned import SCANNED_PDF_MESSAGE, is_pdf_scanned

# silence noisy PDF logging
logging.getLogger("pdfplumber").setLevel(logging.ERROR)
logging.getLogger("pdfminer").setLevel(logging.ERROR)
logging.getLogger("pypdf").setLevel(logging.ERROR)
warnings.filterwarnings("ignore", category=UserWarning, module="pdfminer")

log = logging.getLogger(__name__)

_CID_RE     = re.compile(r"\(cid:\d+\)")
_STREAM_RE  = re.compile(r"stream\s(.*?)\sendstream", re.S)
_CONTENT_RE = re.compile(r"/(Contents|Text|Content)\s*\[(.*?)\]", re.S)
_OPERAND_RE = re.compile(r"/(T[icmfdrjJ]|Tx|TEXT)[^)]*\(([^)]+)\)")
_BINARY_RE  = re.compile(r"[^\x20-\x7E\n\r\t]")
_ESCAPE_RE  = re.compile(r"\\(\d{3}|.)")
_PARA_RE    = re.compile(r"\n\s*\n")

UNREADABLE_MESSAGE = (
    "Failed to parse PDF. The file may be password-protected, scanned, or in an "
    "unsupported format. Please try uploading a text-based PDF."
)


class UnreadableDocumentError(RuntimeError):
    """Raised once every strategy has run and none produced readable text."""

    def __init__(self, message: str = UNREADABLE_MESSAGE):
        super().__init__(message)


# ───────────────────────────────────────── strategies ──
def structured_text(data: bytes) -> str:
    """Walk pages with pdfplumber, rebuilding lines from word positions."""
    pages = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for i, page in enumerate(pdf.pages, 1):
            pages.append(_join_lines(page.extract_words()))
            log.debug("Extracted page %d/%d", i, len(pdf.pages))
    return _CID_RE.sub("", "\n".join(pages))


def _join_lines(words: List[Dict]) -> str:
    # pdfplumber's `top` grows downwards, so ascending top = top of page first
    lines: List[List[Dict]] = []
    last_top = None
    for w in sorted(words, key=lambda w: (w["top"], w["x0"])):
        if not w.get("text"):
            continue
        if last_top is None or abs(w["top"] - last_top) > LINE_Y_TOLERANCE:
            lines.append([])
        lines[-1].append(w)
        last_top = w["top"]
    return "\n".join(
        " ".join(w["text"] for w in sorted(ln, key=lambda w: w["x0"]))
        for ln in lines
    )


def alternate_text(data: bytes) -> str:
    """Whole-document extraction with pypdf."""
    reader = PdfReader(io.BytesIO(data))
    if reader.is_encrypted:
        reader.decrypt("")  # common case: encrypted with empty password
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def raw_object_text(data: bytes) -> str:
    """Last resort: pattern-match text fragments straight out of the byte stream."""
    raw = data.decode("latin-1")
    parts: List[str] = []

    for m in _STREAM_RE.finditer(raw):
        chunk = _BINARY_RE.sub(" ", m.group(1))
        if len(chunk) > 20 and "<?xml" not in chunk and "<rdf:" not in chunk:
            parts.append(chunk)

    for m in _CONTENT_RE.finditer(raw):
        chunk = _BINARY_RE.sub(" ", m.group(2))
        if len(chunk) > 20:
            parts.append(chunk)

    for m in _OPERAND_RE.finditer(raw):
        if len(m.group(2)) > 3:
            parts.append(_ESCAPE_RE.sub(" ", m.group(2)))

    combined = "\n".join(parts)
    if len(combined) > 1000:
        paragraphs = [p for p in _PARA_RE.split(combined)
                      if len(p) > 50 and is_readable_text(p)]
        readable = "\n\n".join(paragraphs)
        if len(readable) > 100:
            return readable
    return combined


# ───────────────────────────────────────── orchestrator ──
def _attempt(name: str, strategy, data: bytes) -> str:
    log.info("Trying %s extraction", name)
    try:
        return strategy(data) or ""
    except Exception as e:
        log.warning("%s extraction failed: %s", name, e)
        return ""


def _long_enough(text: str) -> bool:
    return len(text.strip()) >= MIN_TEXT_LENGTH


def extract_plain_text(data: bytes) -> str:
    """
    Extract normalised plain text from PDF bytes.

    Returns SCANNED_PDF_MESSAGE instead of text when the document has no
    text layer.

    Raises:
        UnreadableDocumentError: If no strategy produced readable text.
    """
    text = ""

    candidate = _attempt("pdfplumber", structured_text, data)
    if _long_enough(candidate):
        text = candidate
    else:
        log.info("pdfplumber extraction produced insufficient text")
        if is_pdf_scanned(data):
            log.info("PDF appears to be scanned, returning guidance message")
            return SCANNED_PDF_MESSAGE

        candidate = _attempt("pypdf", alternate_text, data)
        if _long_enough(candidate):
            text = candidate

    if not _long_enough(text) or not is_readable_text(text):
        candidate = _attempt("raw object", raw_object_text, data)
        if _long_enough(candidate) and is_readable_text(candidate):
            text = candidate

    if not _long_enough(text) or not is_readable_text(text):
        raise UnreadableDocumentError()

    text = clean_text(text)
    if len(text) < MIN_TEXT_LENGTH:
        raise UnreadableDocumentError()
    log.info("Text extraction complete (%d chars)", len(text))
    return text


def pdf_to_text(pdf_path: str | Path) -> str:
    return extract_plain_text(Path(pdf_path).read_bytes())
