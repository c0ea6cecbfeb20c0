"""Format dispatch for agent rendering."""

from collections.abc import Callable

from lumi_kit.exceptions import UnsupportedFormatError
from lumi_kit.models.agent import AgentDefinition
from lumi_kit.models.manifest import PlatformFormat, PlatformRecord
from lumi_kit.rendering.markdown import render_markdown
from lumi_kit.rendering.toml import render_toml

Renderer = Callable[[AgentDefinition, str | None], str]

RENDERERS: dict[PlatformFormat, Renderer] = {
    PlatformFormat.MARKDOWN: render_markdown,
    PlatformFormat.TOML: lambda definition, _source_text: render_toml(definition),
}


def resolve_format(platform: PlatformRecord) -> PlatformFormat:
    """Map a platform's format tag onto a PlatformFormat.

    Raises:
        UnsupportedFormatError: If no renderer exists for the tag
    """
    try:
        return PlatformFormat(platform.format.lower())
    except ValueError:
        raise UnsupportedFormatError(platform.key, platform.format) from None


def render_agent(
    definition: AgentDefinition,
    platform: PlatformRecord,
    *,
    source_text: str | None = None,
) -> str:
    """Render an agent definition for one platform.

    Output depends only on the arguments, so re-running an install with the
    same inputs reproduces the same text.

    Args:
        definition: Extracted agent definition
        platform: Target platform record
        source_text: Raw agent document, used for its full quoted title

    Raises:
        UnsupportedFormatError: If the platform's format has no renderer
    """
    return RENDERERS[resolve_format(platform)](definition, source_text)
