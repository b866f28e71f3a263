"""Turn a section's lines into paragraph and bulleted-list blocks."""

import re

from models.schemas.rich_text import ListBlock, ListItem, Paragraph, RichText
from services.section_parser import non_empty_lines

# Bullet markers recognized at the start of a line
BULLET_RE = re.compile(r"^[●•\-*]\s*")


def format_as_rich_text(text: str) -> RichText:
    """Group consecutive bullet lines into lists; every other line is a paragraph.

    Line order is preserved and no line is dropped.
    """
    blocks: list[Paragraph | ListBlock] = []
    current_list: ListBlock | None = None

    for line in non_empty_lines(text):
        if BULLET_RE.match(line):
            if current_list is None:
                current_list = ListBlock()
                blocks.append(current_list)
            current_list.items.append(ListItem(text=BULLET_RE.sub("", line, count=1)))
        else:
            current_list = None
            blocks.append(Paragraph(text=line))

    return RichText(blocks=blocks)
