"""Book title resolution."""

import os
from typing import Optional

HEADING_PREFIX = "# "


def extract_title_from_markdown(content: str) -> str:
    """Return the text of the first level-1 ATX heading, or "" if none.

    Only a literal "# " prefix counts: "#Title" and setext underlines are not
    headings here.
    """
    for line in content.split("\n"):
        line = line.strip()
        if line.startswith(HEADING_PREFIX):
            return line[len(HEADING_PREFIX):].strip()
    return ""


def strip_extension(path: str) -> str:
    """Return the file name of *path* without its final extension."""
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1:
        return name
    return name[:dot]


def resolve_title(explicit: Optional[str], markdown_text: str, markdown_path: str) -> str:
    """Pick the book title: explicit value, first H1, then the filename stem."""
    if explicit:
        return explicit

    title = extract_title_from_markdown(markdown_text)
    if title:
        return title

    return strip_extension(markdown_path)
