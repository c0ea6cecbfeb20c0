"""User configuration model."""

from pydantic import BaseModel, ConfigDict, Field


class LumiConfig(BaseModel):
    """Settings from ~/.lumi/config.toml, all optional."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_name: str = Field(default="Developer", min_length=1)
    communication_language: str = Field(default="English", min_length=1)
    output_folder: str = Field(default="docs", min_length=1)
    checkpoint_enabled: bool = True
    default_platform: str | None = None
