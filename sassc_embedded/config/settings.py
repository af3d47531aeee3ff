import os
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


__all__ = ["Settings", "get_settings", "load_paths", "reset_load_paths"]


class Settings(BaseSettings):
    """
    Process-wide configuration for the compatibility layer.

    Values are read from environment variables. ``SASS_PATH`` keeps the name
    the legacy compiler used for its default load paths; everything else is
    prefixed with ``SASSC_EMBEDDED_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SASSC_EMBEDDED_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    sass_path: str = Field(
        default="",
        validation_alias=AliasChoices("SASS_PATH", "SASSC_EMBEDDED_SASS_PATH"),
        description="Default load paths, separated by os.pathsep",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level for the sassc_embedded loggers",
    )

    json_logs: bool = Field(
        default=False,
        description="Render log records as JSON instead of console output",
    )

    @property
    def load_paths(self) -> list[str]:
        return [path for path in self.sass_path.split(os.pathsep) if path]


@lru_cache
def get_settings() -> Settings:
    return Settings()


_load_paths: list[str] | None = None


def load_paths() -> list[str]:
    """Return the mutable list of process-wide default load paths.

    The list is seeded from ``SASS_PATH`` on first access. Callers may append
    to it; every subsequent render sees the additions.
    """
    global _load_paths
    if _load_paths is None:
        _load_paths = list(get_settings().load_paths)
    return _load_paths


def reset_load_paths() -> None:
    """Drop the cached settings and load paths (mainly used in tests)."""
    global _load_paths
    _load_paths = None
    get_settings.cache_clear()
