"""Manifest models: installable modules and target platforms."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class PlatformFormat(Enum):
    """Output document formats with a renderer."""

    MARKDOWN = "markdown"
    TOML = "toml"


class FrontmatterRequirement(Enum):
    """Minimum frontmatter schema a platform expects on pre-authored documents."""

    NONE = "none"
    REQUIRED = "required"  # Document must start with a frontmatter block
    TRIGGER = "trigger"  # Existing frontmatter block must carry a trigger field


DEFAULT_FORMAT = PlatformFormat.MARKDOWN.value
DEFAULT_EXTENSION = ".md"


@dataclass(frozen=True)
class ModuleRecord:
    """Installable module entry from the manifest."""

    code: str
    name: str
    path: str
    description: str = ""


@dataclass(frozen=True)
class PlatformRecord:
    """Target platform entry from the manifest.

    `format` keeps the raw tag from the manifest text. Mapping it onto
    PlatformFormat happens at render time so one platform with an unknown tag
    does not invalidate the rest of the manifest.
    """

    key: str
    name: str
    folder: str
    extension: str = DEFAULT_EXTENSION
    format: str = DEFAULT_FORMAT
    frontmatter: FrontmatterRequirement = FrontmatterRequirement.NONE


@dataclass(frozen=True)
class Manifest:
    """Registry of installable modules and target platforms.

    Read-only once parsed; lookups return None for absent entries.
    """

    modules: tuple[ModuleRecord, ...]
    platforms: Mapping[str, PlatformRecord]

    def __post_init__(self) -> None:
        object.__setattr__(self, "platforms", MappingProxyType(dict(self.platforms)))

    def lookup_module(self, code: str) -> ModuleRecord | None:
        for module in self.modules:
            if module.code == code:
                return module
        return None

    def lookup_platform(self, key: str) -> PlatformRecord | None:
        return self.platforms.get(key)

    def module_codes(self) -> list[str]:
        return [module.code for module in self.modules]

    def platform_keys(self) -> list[str]:
        return list(self.platforms)
