"""User configuration loading and saving.

The config is loaded once at the CLI entry point and carried in LumiContext.
A missing file means "use defaults"; a present but invalid file is an error.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from lumi_kit.models.config import LumiConfig

CONFIG_ENV_VAR = "LUMI_CONFIG"


class ConfigOps(ABC):
    """Abstract interface for user config access."""

    @abstractmethod
    def load(self) -> LumiConfig:
        """Load the config, returning defaults when none exists.

        Raises:
            ValueError: If the config exists but is malformed or invalid
        """
        ...

    @abstractmethod
    def save(self, config: LumiConfig) -> None:
        """Persist the config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Path of the config file, for messages."""
        ...


class FilesystemConfigOps(ConfigOps):
    """Reads and writes ~/.lumi/config.toml (or $LUMI_CONFIG)."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def load(self) -> LumiConfig:
        config_path = self.path()
        if not config_path.exists():
            return LumiConfig()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from None

        try:
            return LumiConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid config in {config_path}:\n{e}") from None

    def save(self, config: LumiConfig) -> None:
        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        data = config.model_dump(exclude_none=True)
        config_path.write_text(tomli_w.dumps(data), encoding="utf-8")

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return Path.home() / ".lumi" / "config.toml"


class InMemoryConfigOps(ConfigOps):
    """Config held in memory, for tests."""

    def __init__(self, config: LumiConfig | None = None) -> None:
        self._config = config

    def load(self) -> LumiConfig:
        if self._config is None:
            return LumiConfig()
        return self._config

    def save(self, config: LumiConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/lumi/config.toml")
