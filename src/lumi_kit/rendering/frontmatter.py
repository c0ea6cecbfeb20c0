"""Frontmatter adaptation for pre-authored agent documents.

Hand-written agent documents are installed as-is apart from the fields a
platform insists on. The author's prose is never rewritten: the adapter only
prepends a block or inserts one line, and returns the input unchanged when
the required field is already present or the document shape is not
recognized. Applying the adapter to its own output is a no-op.
"""

from lumi_kit.models.manifest import FrontmatterRequirement, PlatformRecord
from lumi_kit.rendering.markdown import FRONTMATTER_DELIMITER, trigger_field

DEFAULT_DESCRIPTION = "Lumi Agent"


def adapt_for_platform(
    document: str,
    platform: PlatformRecord,
    *,
    agent_name: str,
    description: str | None = None,
) -> str:
    """Patch a pre-authored document to satisfy a platform's frontmatter schema.

    Args:
        document: Authored markdown document
        platform: Target platform record
        agent_name: Agent code used for the trigger field
        description: Description for a synthesized frontmatter block

    Returns:
        The adapted document, or `document` itself when nothing is needed
    """
    if platform.frontmatter == FrontmatterRequirement.REQUIRED:
        return ensure_frontmatter(document, description or DEFAULT_DESCRIPTION)
    if platform.frontmatter == FrontmatterRequirement.TRIGGER:
        return ensure_trigger(document, agent_name)
    return document


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == FRONTMATTER_DELIMITER


def ensure_frontmatter(document: str, description: str) -> str:
    """Prepend a minimal frontmatter block unless the document starts with one."""
    first_line = document.split("\n", 1)[0]
    if _is_delimiter(first_line):
        return document

    newline = "\r\n" if first_line.endswith("\r") else "\n"
    header = newline.join(
        [
            FRONTMATTER_DELIMITER,
            f"description: {description}",
            "globs: ",
            "alwaysApply: false",
            FRONTMATTER_DELIMITER,
        ]
    )
    return f"{header}{newline}{newline}{document}"


def ensure_trigger(document: str, agent_name: str) -> str:
    """Insert a trigger field before the closing frontmatter delimiter.

    Documents whose first line is not the opening delimiter, or whose block is
    never closed, are returned unchanged.
    """
    lines = tuple(document.split("\n"))
    closing_index = _closing_delimiter_index(lines)
    if closing_index is None:
        return document

    if any(line.startswith("trigger:") for line in lines[1:closing_index]):
        return document

    # In CRLF documents every split line keeps its trailing \r
    ending = "\r" if lines[closing_index].endswith("\r") else ""
    patched = insert_line(lines, closing_index, trigger_field(agent_name) + ending)
    return "\n".join(patched)


def _closing_delimiter_index(lines: tuple[str, ...]) -> int | None:
    if not lines or not _is_delimiter(lines[0]):
        return None
    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            return index
    return None


def insert_line(lines: tuple[str, ...], index: int, line: str) -> tuple[str, ...]:
    """Return a new line sequence with `line` inserted at `index`."""
    return lines[:index] + (line,) + lines[index:]
