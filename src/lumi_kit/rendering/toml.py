"""TOML command documents (Gemini CLI style)."""

import tomli_w

from lumi_kit.models.agent import AgentDefinition


def render_toml(definition: AgentDefinition) -> str:
    """Render an agent definition as a `description` + `prompt` TOML document.

    Only the role and identity reach the prompt. Principles and menu items
    have no place in this format and are left out.
    """
    metadata = definition.metadata
    persona = definition.persona

    prompt_lines = [
        f"# {metadata.name}",
        "",
        "## YOUR ROLE",
        f"You are a **{persona.role}**.",
        "",
    ]
    if persona.identity:
        prompt_lines.extend([persona.identity, ""])

    document = {
        "description": f"{metadata.icon} {metadata.title}",
        "prompt": "\n".join(prompt_lines) + "\n",
    }
    return tomli_w.dumps(document, multiline_strings=True)
