"""Agent definition extraction.

Agent files use three top-level sections:

    metadata:
      name: "Docs Helper"
      title: "Documentation Helper"
      icon: "📚"
    persona:
      role: "Documentation Specialist"
      identity: "Writes docs people read."
      principles:
        - "Be concise"
        - "Cite sources"
    menu:
      - trigger: summarize
        description: "Summarize the repo"

Missing sections and fields fall back to defaults; extraction never raises.
"""

import logging
import re

from lumi_kit.models.agent import (
    DEFAULT_AGENT_ICON,
    DEFAULT_AGENT_NAME,
    DEFAULT_AGENT_ROLE,
    AgentDefinition,
    AgentMetadata,
    AgentPersona,
    MenuItem,
)
from lumi_kit.parsing.sections import (
    LIST_ITEM_PATTERN,
    Span,
    extract_fields,
    normalize_scalar,
    split_sections,
)

logger = logging.getLogger(__name__)

MENU_ITEM_PATTERN = re.compile(r"^\s*-\s*trigger:(.*)$")
MENU_DESCRIPTION_PATTERN = re.compile(r"^\s*description:(.*)$")
TRIGGER_TOKEN_PATTERN = re.compile(r"^\s*[\"']?([^\s\"']+)")


def extract_agent_definition(raw_text: str) -> AgentDefinition:
    """Parse an agent-definition document into an AgentDefinition."""
    sections = split_sections(raw_text)

    metadata_fields = extract_fields(sections.get("metadata", ()))
    name = metadata_fields.scalar("name") or DEFAULT_AGENT_NAME
    metadata = AgentMetadata(
        name=name,
        title=metadata_fields.scalar("title") or name,
        icon=metadata_fields.scalar("icon") or DEFAULT_AGENT_ICON,
    )

    persona_fields = extract_fields(sections.get("persona", ()))
    persona = AgentPersona(
        role=persona_fields.scalar("role") or DEFAULT_AGENT_ROLE,
        identity=persona_fields.scalar("identity") or "",
        principles=persona_fields.items("principles"),
    )

    return AgentDefinition(
        metadata=metadata,
        persona=persona,
        menu=extract_menu_items(sections.get("menu", ())),
    )


def extract_menu_items(span: Span) -> tuple[MenuItem, ...]:
    """Split a menu span into MenuItems on `- trigger:` lines.

    A description line belongs to the item whose block contains it. Lines
    before the first trigger are dropped.
    """
    blocks: list[list[str]] = []
    for line in span:
        if MENU_ITEM_PATTERN.match(line):
            blocks.append([line])
        elif blocks:
            blocks[-1].append(line)
        elif LIST_ITEM_PATTERN.match(line):
            logger.debug("Dropping menu entry without a trigger: %r", line.strip())

    items: list[MenuItem] = []
    seen: set[str] = set()
    for block in blocks:
        item = _parse_menu_block(block)
        if item is None:
            continue
        if item.trigger in seen:
            logger.debug("Dropping duplicate menu trigger: %s", item.trigger)
            continue
        seen.add(item.trigger)
        items.append(item)

    return tuple(items)


def _parse_menu_block(block: list[str]) -> MenuItem | None:
    head = MENU_ITEM_PATTERN.match(block[0])
    token = TRIGGER_TOKEN_PATTERN.match(head.group(1)) if head is not None else None
    if token is None:
        logger.debug("Dropping menu entry with an empty trigger")
        return None
    trigger = token.group(1)

    description = trigger
    for line in block[1:]:
        match = MENU_DESCRIPTION_PATTERN.match(line)
        if match:
            description = normalize_scalar(match.group(1)) or trigger
            break

    return MenuItem(trigger=trigger, description=description)
