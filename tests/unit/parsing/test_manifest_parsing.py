"""Tests for manifest parsing."""

import pytest

from lumi_kit.models.manifest import (
    FrontmatterRequirement,
    Manifest,
    ModuleRecord,
    PlatformRecord,
)
from lumi_kit.parsing import parse_manifest

MANIFEST = """\
modules:
  - code: core
    name: "Core"
    path: "modules/core"
  - code: extras

platforms:
  claude:
    name: "Claude Code"
    folder: ".claude/commands/"
    extension: ".md"
    format: markdown
  gemini:
    name: "Gemini CLI"
    folder: ".gemini/commands/"
    extension: ".toml"
    format: toml
  antigravity:
    frontmatter: trigger
  bare:
"""


def test_parse_modules_in_order_with_defaults() -> None:
    """Test modules keep manifest order and missing fields use defaults."""
    manifest = parse_manifest(MANIFEST)

    assert manifest.modules == (
        ModuleRecord(code="core", name="Core", path="modules/core"),
        ModuleRecord(code="extras", name="extras", path="modules/extras"),
    )


def test_parse_platforms() -> None:
    """Test platform fields are read from their block."""
    manifest = parse_manifest(MANIFEST)

    assert manifest.lookup_platform("gemini") == PlatformRecord(
        key="gemini",
        name="Gemini CLI",
        folder=".gemini/commands/",
        extension=".toml",
        format="toml",
    )
    assert manifest.platform_keys() == ["claude", "gemini", "antigravity", "bare"]


def test_platform_defaults() -> None:
    """Test a platform with no fields gets every default."""
    manifest = parse_manifest(MANIFEST)

    assert manifest.lookup_platform("bare") == PlatformRecord(
        key="bare",
        name="bare",
        folder=".bare/commands/",
        extension=".md",
        format="markdown",
        frontmatter=FrontmatterRequirement.NONE,
    )


def test_platform_frontmatter_requirement() -> None:
    """Test the frontmatter requirement is parsed into its enum."""
    manifest = parse_manifest(MANIFEST)

    platform = manifest.lookup_platform("antigravity")
    assert platform is not None
    assert platform.frontmatter == FrontmatterRequirement.TRIGGER


def test_unknown_frontmatter_requirement_falls_back_to_none() -> None:
    """Test an unrecognized requirement does not fail the parse."""
    manifest = parse_manifest("platforms:\n  odd:\n    frontmatter: sometimes\n")

    platform = manifest.lookup_platform("odd")
    assert platform is not None
    assert platform.frontmatter == FrontmatterRequirement.NONE


def test_unknown_platform_lookup_returns_none() -> None:
    """Test looking up a platform that is not in the manifest."""
    manifest = parse_manifest(MANIFEST)

    assert manifest.lookup_platform("cursor") is None


def test_unknown_module_lookup_returns_none() -> None:
    """Test looking up a module that is not in the manifest."""
    manifest = parse_manifest(MANIFEST)

    assert manifest.lookup_module("missing") is None
    assert manifest.lookup_module("core") is not None


def test_missing_sections_yield_empty_collections() -> None:
    """Test an empty or unrelated document parses to an empty manifest."""
    for text in ("", "name: something\nversion: 2\n", "garbage without structure"):
        manifest = parse_manifest(text)
        assert manifest.modules == ()
        assert manifest.platforms == {}


def test_malformed_modules_section_keeps_platforms() -> None:
    """Test a broken modules section does not prevent reading platforms."""
    text = "modules: [oops\n  not a list\nplatforms:\n  claude:\n    name: Claude\n"

    manifest = parse_manifest(text)

    assert manifest.modules == ()
    assert manifest.platform_keys() == ["claude"]


def test_module_without_code_is_skipped() -> None:
    """Test list items without a code field are ignored."""
    text = "modules:\n  - name: Nameless\n  - code: real\n"

    manifest = parse_manifest(text)

    assert manifest.module_codes() == ["real"]


def test_duplicate_codes_and_keys_keep_first() -> None:
    """Test module codes and platform keys stay unique."""
    text = (
        "modules:\n"
        "  - code: core\n"
        "    name: First\n"
        "  - code: core\n"
        "    name: Second\n"
        "platforms:\n"
        "  claude:\n"
        "    name: First\n"
        "  claude:\n"
        "    name: Second\n"
    )

    manifest = parse_manifest(text)

    assert [module.name for module in manifest.modules] == ["First"]
    platform = manifest.lookup_platform("claude")
    assert platform is not None
    assert platform.name == "First"


def test_platforms_are_read_only() -> None:
    """Test the parsed platform mapping cannot be changed."""
    manifest = parse_manifest(MANIFEST)

    cursor = PlatformRecord(key="cursor", name="Cursor", folder=".cursor/rules/")

    with pytest.raises(TypeError):
        manifest.platforms["cursor"] = cursor  # type: ignore[index]


def test_manifest_copies_platform_mapping() -> None:
    """Test later changes to the input dict do not reach the manifest."""
    platforms = {"claude": PlatformRecord(key="claude", name="Claude", folder=".claude/")}
    manifest = Manifest(modules=(), platforms=platforms)

    platforms.clear()

    assert manifest.lookup_platform("claude") is not None
