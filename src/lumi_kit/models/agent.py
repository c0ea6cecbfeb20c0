"""Agent definition models."""

from dataclasses import dataclass, field

DEFAULT_AGENT_NAME = "Lumi Agent"
DEFAULT_AGENT_ICON = "🌟"
DEFAULT_AGENT_ROLE = "AI Assistant"


@dataclass(frozen=True)
class AgentMetadata:
    """Identity of an agent as shown to the user."""

    name: str = DEFAULT_AGENT_NAME
    title: str = DEFAULT_AGENT_NAME
    icon: str = DEFAULT_AGENT_ICON


@dataclass(frozen=True)
class AgentPersona:
    """How the agent describes itself to the assistant."""

    role: str = DEFAULT_AGENT_ROLE
    identity: str = ""
    principles: tuple[str, ...] = ()


@dataclass(frozen=True)
class MenuItem:
    """One command the agent exposes."""

    trigger: str
    description: str


@dataclass(frozen=True)
class AgentDefinition:
    """Structured result of extracting one agent-definition document."""

    metadata: AgentMetadata = field(default_factory=AgentMetadata)
    persona: AgentPersona = field(default_factory=AgentPersona)
    menu: tuple[MenuItem, ...] = ()
