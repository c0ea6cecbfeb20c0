"""Manifest parsing.

The manifest lists installable modules and target platforms:

    modules:
      - code: core
        name: "Core"
        path: "modules/core"

    platforms:
      claude:
        name: "Claude Code"
        folder: ".claude/commands/"
        extension: ".md"
        format: markdown

Parsing never fails. A missing or malformed section yields an empty
collection for that section, and missing record fields fall back to defaults,
so one broken entry cannot block installing the others.
"""

import logging
import re

from lumi_kit.models.manifest import (
    DEFAULT_EXTENSION,
    DEFAULT_FORMAT,
    FrontmatterRequirement,
    Manifest,
    ModuleRecord,
    PlatformRecord,
)
from lumi_kit.parsing.sections import (
    Span,
    extract_fields,
    indentation,
    split_list_blocks,
    split_sections,
)

logger = logging.getLogger(__name__)

PLATFORM_HEADER_PATTERN = re.compile(r"^\s*([A-Za-z_][\w-]*):\s*$")


def parse_manifest(raw_text: str) -> Manifest:
    """Parse manifest text into a Manifest."""
    sections = split_sections(raw_text)
    return Manifest(
        modules=_parse_modules(sections.get("modules", ())),
        platforms=_parse_platforms(sections.get("platforms", ())),
    )


def _parse_modules(span: Span) -> tuple[ModuleRecord, ...]:
    modules: list[ModuleRecord] = []
    seen: set[str] = set()

    for block in split_list_blocks(span):
        fields = extract_fields(block)
        code = fields.scalar("code")
        if not code:
            logger.debug("Skipping module entry without a code: %r", block[0].strip())
            continue
        if code in seen:
            logger.debug("Skipping duplicate module code: %s", code)
            continue
        seen.add(code)

        modules.append(
            ModuleRecord(
                code=code,
                name=fields.scalar("name") or code,
                path=fields.scalar("path") or f"modules/{code}",
                description=fields.scalar("description") or "",
            )
        )

    return tuple(modules)


def _parse_platforms(span: Span) -> dict[str, PlatformRecord]:
    content_lines = [line for line in span if line.strip() and not line.strip().startswith("#")]
    if not content_lines:
        return {}
    record_indent = min(indentation(line) for line in content_lines)

    blocks: list[tuple[str, list[str]]] = []
    for line in content_lines:
        header = PLATFORM_HEADER_PATTERN.match(line)
        if header is not None and indentation(line) == record_indent:
            blocks.append((header.group(1), []))
        elif blocks and indentation(line) > record_indent:
            blocks[-1][1].append(line)

    platforms: dict[str, PlatformRecord] = {}
    for key, lines in blocks:
        if key in platforms:
            logger.debug("Skipping duplicate platform key: %s", key)
            continue
        platforms[key] = _build_platform(key, tuple(lines))

    return platforms


def _build_platform(key: str, block: Span) -> PlatformRecord:
    fields = extract_fields(block)
    return PlatformRecord(
        key=key,
        name=fields.scalar("name") or key,
        folder=fields.scalar("folder") or f".{key}/commands/",
        extension=fields.scalar("extension") or DEFAULT_EXTENSION,
        format=fields.scalar("format") or DEFAULT_FORMAT,
        frontmatter=_parse_frontmatter_requirement(key, fields.scalar("frontmatter")),
    )


def _parse_frontmatter_requirement(key: str, value: str | None) -> FrontmatterRequirement:
    if not value:
        return FrontmatterRequirement.NONE
    try:
        return FrontmatterRequirement(value.lower())
    except ValueError:
        logger.debug("Ignoring unknown frontmatter requirement %r for platform %s", value, key)
        return FrontmatterRequirement.NONE
