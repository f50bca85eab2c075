"""
Scanned (image-only) PDF detection.

No OCR happens here: a PDF without a text layer is reported back to the
caller together with guidance pointing at manual entry.
"""
from __future__ import annotations
import logging
import re
from typing import List

from .config import SCANNED_MARKER_THRESHOLD

log = logging.getLogger(__name__)

# text-object names plus the show-text operators (named or applied to an operand)
_TEXT_MARKERS = re.compile(rb"/Text\b|/TJ\b|/Tj\b|\)\s*Tj\b|\]\s*TJ\b")

SCANNED_PDF_MESSAGE = (
    "This appears to be a scanned PDF. To extract text from scanned documents, "
    "please use the manual entry option to enter your resume information directly. "
    "Scanned PDFs contain images of text rather than actual text data that can be "
    "extracted automatically."
)


def count_text_markers(data: bytes) -> int:
    return len(_TEXT_MARKERS.findall(data or b""))


def is_pdf_scanned(data: bytes) -> bool:
    """A document with fewer than SCANNED_MARKER_THRESHOLD markers is image-only."""
    try:
        markers = count_text_markers(data)
    except Exception as e:
        log.warning("Scanned-PDF check failed: %s", e)
        return False
    log.debug("Found %d text-drawing markers", markers)
    return markers < SCANNED_MARKER_THRESHOLD


def scanned_pdf_guidance() -> List[str]:
    return [
        "Your PDF appears to be scanned or image-based, which means it contains "
        "pictures of text rather than actual text data.",
        "For best results with scanned documents:",
        "1. Use the 'Manual Entry' tab to enter your information directly",
        "2. Consider converting your scanned PDF to a text-based PDF using tools "
        "like Adobe Acrobat, Google Drive, or Microsoft OneNote",
        "3. If you have the original document (like a Word file), save it as a PDF "
        "directly instead of scanning a printed copy",
    ]
