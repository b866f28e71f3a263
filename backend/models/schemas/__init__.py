"""Pydantic contracts for the JD parser."""

from models.schemas.open_position import OpenPositionDraft
from models.schemas.parsed_document import ParsedDocument
from models.schemas.rich_text import ListBlock, ListItem, Paragraph, RichText

__all__ = [
    "ListBlock",
    "ListItem",
    "OpenPositionDraft",
    "Paragraph",
    "ParsedDocument",
    "RichText",
]
