"""Text source and sink collaborators.

The parsing and rendering code never touches the filesystem. Installs read
raw documents through a TextSource and persist results through a TextSink,
so tests can substitute in-memory implementations.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class TextSource(ABC):
    """Resolves logical paths (`modules/core/agents/x.agent.yaml`) to text."""

    @abstractmethod
    def read(self, path: str) -> str | None:
        """Return the text at `path`, or None if it does not exist."""
        ...

    @abstractmethod
    def list_files(self, directory: str) -> list[str]:
        """List files under `directory`, recursively.

        Returns:
            Sorted POSIX paths relative to `directory`; empty if the directory
            does not exist
        """
        ...


class TextSink(ABC):
    """Persists rendered text at destination paths."""

    @abstractmethod
    def write(self, path: Path, text: str) -> None:
        """Write `text` to `path`, replacing any previous content.

        Raises:
            OSError: If the text cannot be written
        """
        ...


class FilesystemTextSource(TextSource):
    """Reads documents below a root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def read(self, path: str) -> str | None:
        file_path = self._root / path
        if not file_path.is_file():
            return None
        return file_path.read_text(encoding="utf-8")

    def list_files(self, directory: str) -> list[str]:
        base = self._root / directory
        if not base.is_dir():
            return []
        return sorted(
            candidate.relative_to(base).as_posix()
            for candidate in base.rglob("*")
            if candidate.is_file()
        )


class FilesystemTextSink(TextSink):
    """Writes documents to disk, creating parent directories as needed."""

    def write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")


def bundled_data_source() -> FilesystemTextSource:
    """Source over the manifest, modules and default documents shipped with lumi-kit."""
    return FilesystemTextSource(Path(__file__).parent.parent / "data")
