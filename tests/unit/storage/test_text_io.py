"""Tests for the filesystem text source and sink."""

from pathlib import Path

from lumi_kit.io.text_io import FilesystemTextSink, FilesystemTextSource, bundled_data_source


def test_source_reads_and_lists_recursively(tmp_path: Path) -> None:
    (tmp_path / "workflows" / "flow").mkdir(parents=True)
    (tmp_path / "workflows" / "flow" / "workflow.yaml").write_text("name: flow\n", encoding="utf-8")
    (tmp_path / "workflows" / "readme.md").write_text("# Flows\n", encoding="utf-8")

    source = FilesystemTextSource(tmp_path)

    assert source.list_files("workflows") == ["flow/workflow.yaml", "readme.md"]
    assert source.read("workflows/readme.md") == "# Flows\n"


def test_source_missing_paths(tmp_path: Path) -> None:
    source = FilesystemTextSource(tmp_path)

    assert source.read("nope.md") is None
    assert source.list_files("nope") == []


def test_sink_creates_parent_directories(tmp_path: Path) -> None:
    destination = tmp_path / ".claude" / "commands" / "lumi-docs.md"

    FilesystemTextSink().write(destination, "# Docs\n")

    assert destination.read_text(encoding="utf-8") == "# Docs\n"


def test_sink_overwrites(tmp_path: Path) -> None:
    destination = tmp_path / "a.md"
    sink = FilesystemTextSink()

    sink.write(destination, "old")
    sink.write(destination, "new")

    assert destination.read_text(encoding="utf-8") == "new"


def test_bundled_data_ships_manifest() -> None:
    source = bundled_data_source()

    assert source.read("manifest.yaml") is not None
    assert "docs.agent.yaml" in source.list_files("modules/core/agents")
