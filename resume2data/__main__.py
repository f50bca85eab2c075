"""
Parse a résumé PDF from the command line.

Usage:
    python -m resume2data resume.pdf
    python -m resume2data resume.pdf --text-only       # print the cleaned text
    python -m resume2data resume.pdf --sections        # print each detected section span
    python -m resume2data resume.pdf --log-level INFO
"""
from __future__ import annotations

import argparse
import json
import sys

from .config import configure_logging
from .extractor import UnreadableDocumentError, pdf_to_text
from .parser_rule import extract_structured_resume
from .scanned import SCANNED_PDF_MESSAGE, scanned_pdf_guidance
from .sections import section_spans


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="resume2data", description="Résumé PDF ➜ structured JSON")
    parser.add_argument("pdf", help="path to the résumé PDF")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--text-only", action="store_true", help="print the extracted text and stop")
    group.add_argument("--sections", action="store_true", help="print the detected section spans")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        text = pdf_to_text(args.pdf)
    except UnreadableDocumentError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"✗ Could not read {args.pdf}: {e}", file=sys.stderr)
        return 1

    if text == SCANNED_PDF_MESSAGE:
        print("\n".join(scanned_pdf_guidance()))
        return 2

    if args.text_only:
        print(text)
    elif args.sections:
        for name, span in section_spans(text):
            print(f"── {name} ──\n{span}\n")
    else:
        record = extract_structured_resume(text)
        print(json.dumps(record.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
