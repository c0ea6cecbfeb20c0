"""Run records written once per install."""

import json
from datetime import datetime
from pathlib import Path

import yaml

from lumi_kit.models.config import LumiConfig
from lumi_kit.version import __version__


def module_run_record(
    config: LumiConfig,
    project_root: Path,
    modules: list[str],
    platforms: list[str],
    created_at: datetime,
) -> str:
    """Build `_lumi/config.yaml` for a module install."""
    data = {
        "user_name": config.user_name,
        "communication_language": config.communication_language,
        "output_folder": config.output_folder,
        "checkpoint_enabled": config.checkpoint_enabled,
        "project": {"root": str(project_root)},
        "modules": modules,
        "platforms": platforms,
        "created_at": created_at.isoformat(),
    }
    header = f"# Lumi Configuration\n# Generated by lumi-kit v{__version__}\n\n"
    return header + yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def agent_run_record(platforms: list[str], agents: list[str], created_at: datetime) -> str:
    """Build `.lumi-agent/config.json` for an agent install."""
    data = {
        "version": __version__,
        "platforms": platforms,
        "agents": agents,
        "createdAt": created_at.isoformat(),
    }
    return json.dumps(data, indent=2) + "\n"
