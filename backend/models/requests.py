from pydantic import BaseModel, Field

from config import settings


class ParseTextRequest(BaseModel):
    text: str = Field(..., max_length=settings.max_text_length, description="Raw job description text")
