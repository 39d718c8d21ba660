"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration:
- where the campus DOT file lives
- how the node index is sized
- how logging is formatted

Configuration can be overridden via environment variables:
- PATHFINDER_GRAPH_DATA_DIR=/path/to/data
- PATHFINDER_GRAPH_DOT_FILE=campus.dot
- PATHFINDER_GRAPH_INDEX_CAPACITY=64
- PATHFINDER_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with PATHFINDER_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    dot_file: str = "campus.dot"
    index_capacity: int = Field(default=32, ge=1)
    load_factor: float = Field(default=0.75, gt=0, le=1)

    @property
    def dot_path(self) -> Path:
        """Full path to the campus DOT file."""
        return self.data_dir / self.dot_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PATHFINDER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.dot_path)

    Environment variables prefixed with PATHFINDER_.
    """

    model_config = SettingsConfigDict(env_prefix="PATHFINDER_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
