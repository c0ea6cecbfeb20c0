"""Application context with dependency injection.

LumiContext holds the collaborators an install needs (bundled data, output
sink, config) and is created once at the CLI entry point, then threaded
through commands via Click's context object.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from lumi_kit.io.config import ConfigOps, FilesystemConfigOps, InMemoryConfigOps
from lumi_kit.io.text_io import FilesystemTextSink, TextSink, TextSource, bundled_data_source
from lumi_kit.models.config import LumiConfig


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class LumiContext:
    """Immutable context holding all dependencies for lumi-kit operations.

    Attributes:
        data: Source for the manifest, modules and bundled default documents
        sink: Destination for rendered and copied documents
        config_ops: Access to the user config file
        config: User config, loaded once at startup
        now: Clock used for run record timestamps
        debug: Whether --debug was passed
    """

    data: TextSource
    sink: TextSink
    config_ops: ConfigOps
    config: LumiConfig
    now: Callable[[], datetime] = field(default=_utc_now)
    debug: bool = False

    @staticmethod
    def for_test(
        data: TextSource | None = None,
        sink: TextSink | None = None,
        config: LumiConfig | None = None,
        now: datetime | None = None,
        debug: bool = False,
    ) -> "LumiContext":
        """Create a test context.

        Unspecified collaborators default to the bundled data, a real
        filesystem sink, in-memory config and a fixed clock.
        """
        fixed_now = now or datetime(2025, 1, 1, tzinfo=UTC)
        config_ops = InMemoryConfigOps(config)
        return LumiContext(
            data=data or bundled_data_source(),
            sink=sink or FilesystemTextSink(),
            config_ops=config_ops,
            config=config_ops.load(),
            now=lambda: fixed_now,
            debug=debug,
        )


def create_context(*, debug: bool) -> LumiContext:
    """Create the production context.

    Raises:
        ValueError: If the user config exists but is invalid
    """
    config_ops = FilesystemConfigOps()
    return LumiContext(
        data=bundled_data_source(),
        sink=FilesystemTextSink(),
        config_ops=config_ops,
        config=config_ops.load(),
        debug=debug,
    )
