"""Module installation: render each module's agents for the chosen platforms."""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from lumi_kit.context import LumiContext
from lumi_kit.exceptions import UnknownModuleError, UnknownPlatformError, UnsupportedFormatError
from lumi_kit.io.run_record import module_run_record
from lumi_kit.io.text_io import TextSource
from lumi_kit.models.agent import AgentDefinition
from lumi_kit.models.manifest import Manifest, ModuleRecord, PlatformRecord
from lumi_kit.parsing import extract_agent_definition, parse_manifest
from lumi_kit.rendering import render_agent

logger = logging.getLogger(__name__)

MANIFEST_PATH = "manifest.yaml"
LUMI_DIR = "_lumi"
AGENT_SUFFIX = ".agent.yaml"


@dataclass(frozen=True)
class PlatformFailure:
    """A platform that could not be installed; other platforms still were."""

    platform_key: str
    message: str


@dataclass(frozen=True)
class InstallReport:
    """Outcome of one install run.

    Paths in `written` are relative to the target directory.
    """

    written: tuple[Path, ...]
    failures: tuple[PlatformFailure, ...]


@dataclass(frozen=True)
class AgentSource:
    """One agent file of a module, parsed once per run."""

    module: ModuleRecord
    base_name: str
    raw_text: str
    definition: AgentDefinition


def load_manifest(source: TextSource) -> Manifest:
    """Read and parse the manifest.

    Raises:
        FileNotFoundError: If the source has no manifest
    """
    text = source.read(MANIFEST_PATH)
    if text is None:
        raise FileNotFoundError(f"Manifest not found: {MANIFEST_PATH}")
    return parse_manifest(text)


def resolve_platforms(manifest: Manifest, platform_keys: list[str]) -> list[PlatformRecord]:
    """Look up every requested platform.

    Raises:
        UnknownPlatformError: If a key is not in the manifest
    """
    platforms = []
    for key in platform_keys:
        platform = manifest.lookup_platform(key)
        if platform is None:
            raise UnknownPlatformError(key, manifest.platform_keys())
        platforms.append(platform)
    return platforms


def resolve_modules(manifest: Manifest, module_codes: list[str]) -> list[ModuleRecord]:
    """Look up every requested module.

    Raises:
        UnknownModuleError: If a code is not in the manifest
    """
    modules = []
    for code in module_codes:
        module = manifest.lookup_module(code)
        if module is None:
            raise UnknownModuleError(code, manifest.module_codes())
        modules.append(module)
    return modules


def agent_destination(platform: PlatformRecord, base_name: str) -> Path:
    return Path(platform.folder) / f"lumi-{base_name}{platform.extension}"


def install_modules(
    ctx: LumiContext,
    *,
    target: Path,
    manifest: Manifest,
    module_codes: list[str],
    platform_keys: list[str],
) -> InstallReport:
    """Install modules for one or more platforms into `target`.

    For every module, raw agent files, templates and workflows are copied
    under `_lumi/`. Every agent is rendered once per platform into the
    platform's folder. A platform whose format has no renderer is reported
    in the result and skipped; the remaining platforms are still installed.

    Raises:
        UnknownPlatformError: If a platform key is not in the manifest
        UnknownModuleError: If a module code is not in the manifest
    """
    platforms = resolve_platforms(manifest, platform_keys)
    modules = resolve_modules(manifest, module_codes)

    written: list[Path] = []
    agents: list[AgentSource] = []

    for module in modules:
        module_agents = _read_module_agents(ctx.data, module)
        for agent in module_agents:
            relative = Path(LUMI_DIR) / "agents" / f"{agent.base_name}{AGENT_SUFFIX}"
            _write(ctx, target, relative, agent.raw_text, written)
        agents.extend(module_agents)
        _copy_module_tree(ctx, target, f"{module.path}/templates", "templates", written)
        _copy_module_tree(ctx, target, f"{module.path}/workflows", "workflows", written)

    failures: list[PlatformFailure] = []
    for platform in platforms:
        try:
            rendered = [
                (agent, render_agent(agent.definition, platform, source_text=agent.raw_text))
                for agent in agents
            ]
        except UnsupportedFormatError as e:
            logger.info("Skipping platform %s: %s", platform.key, e)
            failures.append(PlatformFailure(platform_key=platform.key, message=str(e)))
            continue

        for agent, text in rendered:
            _write(ctx, target, agent_destination(platform, agent.base_name), text, written)

    record = module_run_record(
        ctx.config,
        target,
        [module.code for module in modules],
        [platform.key for platform in platforms],
        ctx.now(),
    )
    _write(ctx, target, Path(LUMI_DIR) / "config.yaml", record, written)

    return InstallReport(written=tuple(written), failures=tuple(failures))


def _read_module_agents(source: TextSource, module: ModuleRecord) -> list[AgentSource]:
    agents_dir = f"{module.path}/agents"
    agents = []
    for file_name in source.list_files(agents_dir):
        if "/" in file_name or not file_name.endswith(AGENT_SUFFIX):
            continue
        raw_text = source.read(f"{agents_dir}/{file_name}")
        if raw_text is None:
            logger.debug("Agent file disappeared: %s/%s", agents_dir, file_name)
            continue
        agents.append(
            AgentSource(
                module=module,
                base_name=file_name.removesuffix(AGENT_SUFFIX),
                raw_text=raw_text,
                definition=extract_agent_definition(raw_text),
            )
        )
    return agents


def _copy_module_tree(
    ctx: LumiContext, target: Path, source_dir: str, dest_dir: str, written: list[Path]
) -> None:
    for relative_name in ctx.data.list_files(source_dir):
        text = ctx.data.read(f"{source_dir}/{relative_name}")
        if text is None:
            continue
        destination = Path(LUMI_DIR) / dest_dir / PurePosixPath(relative_name)
        _write(ctx, target, destination, text, written)


def _write(ctx: LumiContext, target: Path, relative: Path, text: str, written: list[Path]) -> None:
    ctx.sink.write(target / relative, text)
    logger.debug("Wrote %s", relative)
    written.append(relative)
