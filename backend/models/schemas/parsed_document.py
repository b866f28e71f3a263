"""Structured output of the JD parser.

Attribute names are snake_case; serialized names are camelCase so they line
up 1:1 with the open-position record schema (title, reportsTo, roleSummary...).
Every field is optional: extraction is best-effort and a miss is ``None``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas.rich_text import RichText


class ParsedDocument(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    location: str | None = None
    job_type: str | None = None
    reports_to: str | None = None
    role_summary: RichText | None = None
    responsibilities: RichText | None = None
    required_experience: RichText | None = None
    preferred_experience: RichText | None = None
    success_criteria: RichText | None = None
    resume_weightage: int | None = None  # 0-100 expected, not validated
    problem_solutioning_weightage: int | None = None
    problem_solutioning_questions: RichText | None = None
    evaluation_criteria: RichText | None = None

    def populated_fields(self) -> list[str]:
        return [name for name, value in self if value is not None]

    def to_payload(self) -> dict[str, Any]:
        """camelCase dict of the populated fields only."""
        return self.model_dump(by_alias=True, exclude_none=True)
