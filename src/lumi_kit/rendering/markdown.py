"""Markdown command documents with a frontmatter header."""

import re

from lumi_kit.models.agent import AgentDefinition, MenuItem
from lumi_kit.parsing.sections import section_span

FRONTMATTER_DELIMITER = "---"

# Full double-quoted title, colons included, as written in the source document.
SOURCE_TITLE_PATTERN = re.compile(r"^\s*title:\s*\"([^\"]+)\"")


def agent_trigger(name: str) -> str:
    """Lower-case an agent name and hyphenate its whitespace."""
    return "-".join(name.lower().split())


def trigger_field(trigger: str) -> str:
    return f'trigger: "{trigger}" | "lumi {trigger}"'


def source_title(source_text: str) -> str | None:
    """Return the quoted metadata title from a raw agent document, if any."""
    for line in section_span(source_text, "metadata"):
        match = SOURCE_TITLE_PATTERN.match(line)
        if match:
            return match.group(1)
    return None


def render_markdown(definition: AgentDefinition, source_text: str | None = None) -> str:
    """Render an agent definition as a markdown command document.

    The description prefers the quoted title from `source_text`, which keeps
    any colon the field extraction would have cut off.
    """
    metadata = definition.metadata
    persona = definition.persona

    description = metadata.title
    if source_text is not None:
        description = source_title(source_text) or description

    lines = [
        FRONTMATTER_DELIMITER,
        f"description: {description}",
        trigger_field(agent_trigger(metadata.name)),
        FRONTMATTER_DELIMITER,
        "",
        f"# {metadata.icon} {metadata.name}",
        "",
        "## YOUR ROLE",
        f"You are a **{persona.role}**.",
        "",
    ]

    if persona.identity:
        lines.extend([persona.identity, ""])

    if persona.principles:
        lines.append("## PRINCIPLES")
        lines.extend(f"- {principle}" for principle in persona.principles)
        lines.append("")

    if definition.menu:
        lines.append("## COMMANDS")
        lines.append("| Trigger | Description |")
        lines.append("|---------|-------------|")
        lines.extend(_command_row(item) for item in definition.menu)
        lines.append("")

    return "\n".join(lines) + "\n"


def _command_row(item: MenuItem) -> str:
    description = item.description.replace("|", "\\|")
    return f"| `{item.trigger}` | {description} |"
