"""
Shared fixtures: tiny hand-built PDFs so no binary files live in the repo.
"""
from __future__ import annotations

import pytest

SAMPLE_RESUME = (
    "John Smith\nSoftware Engineer\njohn@x.com\n(555) 123-4567\nAustin, TX\n"
    "SUMMARY\nBuilt scalable systems for five years.\n"
    "EXPERIENCE\nSoftware Engineer\nAcme Corp\nJan 2020 - Present\n- Shipped 3 major releases\n"
    "EDUCATION\nB.S. Computer Science\nState University\n2016 - 2020"
)


def _escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def make_pdf(lines: list[str]) -> bytes:
    """Single-page, uncompressed PDF drawing each line with Helvetica."""
    ops = []
    y = 740
    for ln in lines:
        ops.append(f"BT /F1 11 Tf 72 {y} Td ({_escape(ln)}) Tj ET")
        y -= 16
    content = ("\n".join(ops) or "q Q").encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for i, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % i + body + b"\nendobj\n"

    xref = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += b"%010d 00000 n \n" % off
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref)
    return bytes(out)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def resume_pdf() -> bytes:
    return make_pdf(SAMPLE_RESUME.split("\n"))


@pytest.fixture
def image_only_pdf() -> bytes:
    return make_pdf([])
