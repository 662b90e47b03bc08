"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
store backend and file locations, graph building policy, map rendering
and logging.

Configuration can be overridden via environment variables:
- RF_STORE_BACKEND=memory
- RF_STORE_DATA_DIR=/path/to/data
- RF_GRAPH_SKIP_DANGLING_ROUTES=true
- RF_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseSettings):
    """Location/route store configuration.

    Environment variables prefixed with RF_STORE_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_STORE_")

    backend: Literal["csv", "memory"] = "csv"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    locations_file: str = "locations.csv"
    routes_file: str = "routes.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def routes_path(self) -> Path:
        """Full path to routes CSV file."""
        return self.data_dir / self.routes_file


class GraphConfig(BaseSettings):
    """Graph building configuration.

    Environment variables prefixed with RF_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_GRAPH_")

    # When False, a route pointing at an unknown location fails the build.
    skip_dangling_routes: bool = False


class RenderingConfig(BaseSettings):
    """Network map rendering configuration.

    Environment variables prefixed with RF_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_RENDER_")

    output_dir: Path = Field(default_factory=lambda: Path.cwd() / "output")
    map_file: str = "network.html"
    map_height_px: int = 560
    edge_color: str = "#9ca3af"
    path_color: str = "#3b82f6"
    node_color: str = "#1f2937"

    @property
    def map_path(self) -> Path:
        return self.output_dir / self.map_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RF_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.store.locations_path)
        print(config.graph.skip_dangling_routes)

    Environment variables prefixed with RF_.
    """

    model_config = SettingsConfigDict(env_prefix="RF_")

    store: StoreConfig = Field(default_factory=StoreConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
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
