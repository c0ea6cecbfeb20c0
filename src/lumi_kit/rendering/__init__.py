"""Turn agent definitions and pre-authored documents into platform artifacts."""

from lumi_kit.rendering.frontmatter import adapt_for_platform as adapt_for_platform
from lumi_kit.rendering.render import render_agent as render_agent
