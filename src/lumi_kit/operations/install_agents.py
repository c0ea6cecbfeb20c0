"""Installation of pre-authored agent documents.

Unlike module installs, these documents are already written as markdown
commands. They are copied into each platform's folder after the
FrontmatterAdapter adds whatever fields the platform requires.
"""

import logging
from pathlib import Path

from lumi_kit.context import LumiContext
from lumi_kit.exceptions import UnsupportedFormatError
from lumi_kit.io.run_record import agent_run_record
from lumi_kit.io.text_io import TextSource
from lumi_kit.models.manifest import Manifest, PlatformFormat, PlatformRecord
from lumi_kit.operations.install_modules import InstallReport, PlatformFailure, resolve_platforms
from lumi_kit.rendering import adapt_for_platform
from lumi_kit.rendering.render import resolve_format

logger = logging.getLogger(__name__)

SHARED_DIR = ".lumi-agent"
DEFAULTS_DIR = "defaults"

AGENT_DESCRIPTIONS = {
    "docs": "Generate technical documentation for the codebase",
    "git": "Git workflow helper with semantic commits",
    "review": "Code review assistant with best practices",
}

SHARED_TEMPLATES = (
    "docs-template.md",
    "commit-template.md",
    "review-checklist.md",
    "component.md",
    "flow.md",
    "api.md",
)
SHARED_PROMPTS = ("analyze-code.md", "generate-docs.md", "semantic-commit.md")

PLACEHOLDER_AGENT = "# Agent Template\n\nNo template available.\n"
PLACEHOLDER_TEMPLATE = "# Template\n"
PLACEHOLDER_PROMPT = "# Prompt\n"


def agent_template_path(agent_code: str) -> str:
    return f"agents/lumi-agent-{agent_code}.md"


def read_agent_document(
    templates: TextSource | None, defaults: TextSource, agent_code: str
) -> str:
    """Read an agent document, falling back to the bundled default.

    Only the known agent codes have bundled defaults; any other code without a
    template gets a placeholder document.
    """
    path = agent_template_path(agent_code)
    if templates is not None:
        text = templates.read(path)
        if text is not None:
            return text
        logger.debug("No template for %s in custom templates", agent_code)

    if agent_code in AGENT_DESCRIPTIONS:
        default = defaults.read(f"{DEFAULTS_DIR}/{path}")
        if default is not None:
            return default

    return PLACEHOLDER_AGENT


def _read_shared(
    templates: TextSource | None, defaults: TextSource, name: str, placeholder: str
) -> str:
    if templates is not None:
        text = templates.read(f"shared/{name}")
        if text is not None:
            return text
    default = defaults.read(f"{DEFAULTS_DIR}/shared/{name}")
    if default is not None:
        return default
    return placeholder


def agent_destination(platform: PlatformRecord, agent_code: str) -> Path:
    return Path(platform.folder) / f"lumi-agent-{agent_code}{platform.extension}"


def install_agents(
    ctx: LumiContext,
    *,
    target: Path,
    manifest: Manifest,
    agent_codes: list[str],
    platform_keys: list[str],
    templates: TextSource | None = None,
) -> InstallReport:
    """Install pre-authored agent documents and shared resources into `target`.

    Pre-authored documents are markdown; a platform with any other output
    format is reported as a failure and skipped.

    Args:
        ctx: Application context
        target: Project directory
        manifest: Parsed manifest supplying the platforms
        agent_codes: Agents to install (docs, git, review, ...)
        platform_keys: Platforms to install for
        templates: Optional source overriding the bundled documents

    Raises:
        UnknownPlatformError: If a platform key is not in the manifest
    """
    platforms = resolve_platforms(manifest, platform_keys)
    documents = {code: read_agent_document(templates, ctx.data, code) for code in agent_codes}

    written: list[Path] = []
    failures: list[PlatformFailure] = []

    for platform in platforms:
        failure = _require_markdown(platform)
        if failure is not None:
            logger.info("Skipping platform %s: %s", platform.key, failure.message)
            failures.append(failure)
            continue

        for code, document in documents.items():
            adapted = adapt_for_platform(
                document,
                platform,
                agent_name=code,
                description=AGENT_DESCRIPTIONS.get(code),
            )
            _write(ctx, target, agent_destination(platform, code), adapted, written)

    for name in SHARED_TEMPLATES:
        text = _read_shared(templates, ctx.data, name, PLACEHOLDER_TEMPLATE)
        _write(ctx, target, Path(SHARED_DIR) / "templates" / name, text, written)

    for name in SHARED_PROMPTS:
        text = _read_shared(templates, ctx.data, name, PLACEHOLDER_PROMPT)
        _write(ctx, target, Path(SHARED_DIR) / "prompts" / name, text, written)

    record = agent_run_record([platform.key for platform in platforms], agent_codes, ctx.now())
    _write(ctx, target, Path(SHARED_DIR) / "config.json", record, written)

    return InstallReport(written=tuple(written), failures=tuple(failures))


def _require_markdown(platform: PlatformRecord) -> PlatformFailure | None:
    try:
        output_format = resolve_format(platform)
    except UnsupportedFormatError as e:
        return PlatformFailure(platform_key=platform.key, message=str(e))
    if output_format != PlatformFormat.MARKDOWN:
        message = str(UnsupportedFormatError(platform.key, platform.format))
        return PlatformFailure(platform_key=platform.key, message=message)
    return None


def _write(ctx: LumiContext, target: Path, relative: Path, text: str, written: list[Path]) -> None:
    ctx.sink.write(target / relative, text)
    logger.debug("Wrote %s", relative)
    written.append(relative)
