"""pageslug Configuration Management."""

from pydantic import BaseModel, Field


class HashConfig(BaseModel):
    """Configuration for the content hasher."""
    chunk_size_bytes: int = Field(default=64 * 1024, description="Read size when hashing files")


class RenderConfig(BaseModel):
    """Configuration for page template rendering."""
    default_page_base_name: str = Field(
        default="index",
        description="Page name used when no --in template is given",
    )
    encoding: str = Field(default="utf-8", description="Encoding for templates and output")
    autoescape: bool = Field(default=True, description="HTML-escape rendered values")


class WatchConfig(BaseModel):
    """Configuration for the directory watcher."""
    recursive_suffix: str = Field(default="/...", description="Argument suffix marking a recursive watch")
    ignored_event_types: list[str] = Field(
        default_factory=lambda: ["opened", "closed_no_write"],
        description="Access-only events that do not count as a change",
    )
    join_timeout_seconds: float = Field(default=5.0, description="Max wait for an observer thread to stop")


class LoggingConfig(BaseModel):
    """Configuration for process logging."""
    level: str = Field(default="INFO", description="Level used without --verbose")
    format: str = Field(default="%(asctime)s [%(name)s] %(levelname)s: %(message)s")


class PageSlugConfig(BaseModel):
    """Root configuration for pageslug."""
    hash: HashConfig = Field(default_factory=HashConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    watch: WatchConfig = Field(default_factory=WatchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Global default config
_config: PageSlugConfig | None = None


def get_config() -> PageSlugConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = PageSlugConfig()
    return _config


def set_config(config: PageSlugConfig | None) -> None:
    """Set the global configuration instance (``None`` restores defaults)."""
    global _config
    _config = config
