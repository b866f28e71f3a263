"""Lightweight rich-text blocks: paragraphs and flat bulleted lists."""

from html import escape
from typing import Literal, Union

from pydantic import BaseModel


class ListItem(BaseModel):
    text: str


class Paragraph(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    text: str


class ListBlock(BaseModel):
    """A bulleted list. Lists never nest."""
    type: Literal["list"] = "list"
    items: list[ListItem] = []


Block = Union[Paragraph, ListBlock]


class RichText(BaseModel):
    """Ordered sequence of paragraph and list blocks."""
    blocks: list[Block] = []

    def to_markup(self) -> str:
        """Serialize to the storage markup, one element per line."""
        out: list[str] = []
        for block in self.blocks:
            if isinstance(block, ListBlock):
                out.append("<ul>")
                out.extend(f"<li>{escape(item.text, quote=False)}</li>" for item in block.items)
                out.append("</ul>")
            else:
                out.append(f"<p>{escape(block.text, quote=False)}</p>")
        return "\n".join(out)
