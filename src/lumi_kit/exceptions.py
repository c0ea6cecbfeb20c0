"""Exceptions raised by lumi-kit."""


class LumiKitError(Exception):
    """Base class for lumi-kit errors shown to the user without a traceback."""


class UnsupportedFormatError(LumiKitError):
    """Raised when a platform declares an output format with no renderer."""

    def __init__(self, platform_key: str, format_tag: str) -> None:
        self.platform_key = platform_key
        self.format_tag = format_tag
        super().__init__(f"Unsupported format '{format_tag}' for platform '{platform_key}'")


class UnknownPlatformError(LumiKitError):
    """Raised when a requested platform key is not in the manifest."""

    def __init__(self, platform_key: str, available: list[str]) -> None:
        self.platform_key = platform_key
        self.available = available
        super().__init__(
            f"Unknown platform: {platform_key}. Available: {', '.join(available) or '(none)'}"
        )


class UnknownModuleError(LumiKitError):
    """Raised when a requested module code is not in the manifest."""

    def __init__(self, module_code: str, available: list[str]) -> None:
        self.module_code = module_code
        self.available = available
        super().__init__(
            f"Unknown module: {module_code}. Available: {', '.join(available) or '(none)'}"
        )
