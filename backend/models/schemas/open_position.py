"""Open-position record payload built from a parsed JD."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from config import settings
from models.schemas.parsed_document import ParsedDocument
from models.schemas.rich_text import RichText


def _markup(value: RichText | None) -> str | None:
    return value.to_markup() if value is not None else None


class OpenPositionDraft(BaseModel):
    """Field values ready for the downstream record store.

    Rich-text bodies are stored as markup strings; title and weightages
    fall back to configured defaults when the document did not provide them.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    jd_document: str | None = None
    title: str
    location: str | None = None
    job_type: str | None = None
    reports_to: str | None = None
    role_summary: str | None = None
    responsibilities: str | None = None
    required_experience: str | None = None
    preferred_experience: str | None = None
    success_criteria: str | None = None
    resume_weightage: int
    problem_solutioning_weightage: int
    problem_solutioning_questions: str | None = None
    evaluation_criteria: str | None = None

    @classmethod
    def from_parsed(cls, parsed: ParsedDocument, document_id: str | None = None) -> "OpenPositionDraft":
        return cls(
            jd_document=document_id,
            title=parsed.title or settings.default_title,
            location=parsed.location,
            job_type=parsed.job_type,
            reports_to=parsed.reports_to,
            role_summary=_markup(parsed.role_summary),
            responsibilities=_markup(parsed.responsibilities),
            required_experience=_markup(parsed.required_experience),
            preferred_experience=_markup(parsed.preferred_experience),
            success_criteria=_markup(parsed.success_criteria),
            # 0 counts as missing, same as an absent value
            resume_weightage=parsed.resume_weightage or settings.default_resume_weightage,
            problem_solutioning_weightage=(
                parsed.problem_solutioning_weightage
                or settings.default_problem_solutioning_weightage
            ),
            problem_solutioning_questions=_markup(parsed.problem_solutioning_questions),
            evaluation_criteria=_markup(parsed.evaluation_criteria),
        )
