"""
resume2data: PDF résumé ➜ plain text ➜ structured record.
"""
import logging

from .extractor import UnreadableDocumentError, extract_plain_text, pdf_to_text
from .parser_rule import extract_structured_resume
from .scanned import SCANNED_PDF_MESSAGE
from .schema_resume import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeData,
    Skill,
    SkillCategory,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SCANNED_PDF_MESSAGE",
    "UnreadableDocumentError",
    "extract_plain_text",
    "extract_structured_resume",
    "pdf_to_text",
    "Education",
    "Experience",
    "PersonalInfo",
    "Project",
    "ResumeData",
    "Skill",
    "SkillCategory",
]
