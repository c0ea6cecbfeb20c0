"""lumi-kit: install Lumi agents into AI-assistant platform folders.

Import from submodules:
- version: __version__
- parsing: parse_manifest, extract_agent_definition
- rendering: render_agent, adapt_for_platform
- operations: install_modules, install_agents
"""

from lumi_kit.version import __version__ as __version__
