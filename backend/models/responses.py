from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas.open_position import OpenPositionDraft


class ParseResponse(BaseModel):
    data: dict[str, Any] = {}
    message: str = "JD parsed successfully"


class DraftResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    data: OpenPositionDraft
    parsed_fields: dict[str, Any] = {}
    message: str = "Open position draft created from JD"
