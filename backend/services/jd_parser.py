"""JD field extraction: raw job-description text -> ParsedDocument.

Pipeline:
    raw text
      ├─ normalize_text()                    → LF-only text
      ├─ title: first line before Location / Reports to / Role Summary
      ├─ LABEL_FIELDS: "Label: value" scan (value on the label line or the next)
      ├─ WEIGHTAGE_PATTERNS: "<keyword> Weightage: NN%" anywhere
      └─ SECTION_FIELDS: find_section() → format_as_rich_text()

Every field resolves independently; a miss leaves it as None. The tables
below follow the usual JD template order (Role Summary → Responsibilities →
Required → Preferred → Success Criteria → Problem → What we look for), and
each section's end headings are the next section's start headings. A JD
that reorders its sections can make a field run into its neighbour.
"""

import logging
import re
from pathlib import Path

from models.schemas.parsed_document import ParsedDocument
from services.rich_text import format_as_rich_text
from services.section_parser import SectionSpec, find_field_value, find_section, normalize_text
from services.text_extractor import extract_raw_text

logger = logging.getLogger(__name__)

TITLE_SECTION = SectionSpec(
    start_headers=None,
    end_headers=("Location", "Reports to", "Role Summary"),
    # a heading-free document has no title, not a first-line guess
    require_end=True,
)

LABEL_FIELDS: dict[str, tuple[str, ...]] = {
    "location": ("Location:", "Location"),
    "job_type": ("Job Type:", "Employment Type:", "Job Type", "Employment Type"),
    "reports_to": ("Reports to:", "Reports To:", "Reporting to:", "Reports to", "Reporting to"),
}

WEIGHTAGE_PATTERNS: dict[str, re.Pattern] = {
    "resume_weightage": re.compile(
        r"Resume\s*(?:Weightage)?[:\s]*(\d+)\s*%?", re.IGNORECASE
    ),
    "problem_solutioning_weightage": re.compile(
        r"Problem\s*Solutioning\s*(?:Weightage)?[:\s]*(\d+)\s*%?", re.IGNORECASE
    ),
}

SECTION_FIELDS: dict[str, SectionSpec] = {
    "role_summary": SectionSpec(
        start_headers=("Role Summary", "Summary", "Overview"),
        end_headers=("Responsibilities", "Key Responsibilities", "Duties"),
    ),
    "responsibilities": SectionSpec(
        start_headers=("Responsibilities", "Key Responsibilities", "Duties", "Primary Responsibilities"),
        end_headers=("Required Experience", "Requirements", "Qualifications", "Required Qualifications"),
    ),
    "required_experience": SectionSpec(
        start_headers=("Required Experience", "Requirements", "Required Qualifications", "Minimum Qualifications"),
        end_headers=("Preferred Experience", "Preferred Qualifications", "Nice to Have", "Success Criteria"),
    ),
    "preferred_experience": SectionSpec(
        start_headers=("Preferred Experience", "Preferred Qualifications", "Nice to Have", "Desired Experience"),
        end_headers=("Success Criteria", "Resume Weightage", "Problem"),
    ),
    "success_criteria": SectionSpec(
        start_headers=("Success Criteria", "First Six Months", "Goals", "Key Metrics"),
        end_headers=("Resume Weightage", "Problem"),
    ),
    "problem_solutioning_questions": SectionSpec(
        start_headers=("Problem", "Problem 1", "Scenario", "Task"),
        end_headers=("What we look for", "Evaluation", "Format"),
    ),
    "evaluation_criteria": SectionSpec(
        start_headers=("What we look for", "Evaluation Criteria", "Assessment Criteria"),
        # None: no second closing heading, the section may run to the end
        end_headers=("Format", None),
    ),
}


def extract_title(text: str) -> str | None:
    section = find_section(text, TITLE_SECTION)
    if section is None:
        return None
    return section.split("\n", 1)[0].strip() or None


def extract_weightage(text: str, pattern: re.Pattern) -> int | None:
    match = pattern.search(text)
    return int(match.group(1)) if match else None


def extract_fields(text: str) -> ParsedDocument:
    """Extract every JD field from raw text. Never raises on a missing field."""
    normalized = normalize_text(text)
    fields: dict = {"title": extract_title(normalized)}

    for name, labels in LABEL_FIELDS.items():
        fields[name] = find_field_value(normalized, labels)

    for name, pattern in WEIGHTAGE_PATTERNS.items():
        fields[name] = extract_weightage(normalized, pattern)

    for name, spec in SECTION_FIELDS.items():
        section = find_section(normalized, spec)
        if section is None:
            logger.debug("Section %s not found", name)
            continue
        fields[name] = format_as_rich_text(section)

    parsed = ParsedDocument(**fields)
    logger.info("Extracted %d JD fields", len(parsed.populated_fields()))
    return parsed


def parse_document(source: bytes | str | Path, filename: str | None = None) -> ParsedDocument:
    """Convert a PDF/Word JD to text and extract its fields.

    Raises UnsupportedFormat or ExtractionFailed when no text can be obtained;
    there is no partial result in that case.
    """
    text = extract_raw_text(source, filename)
    return extract_fields(text)
