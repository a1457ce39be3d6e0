"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
- data file locations for the network loader
- planning parameters (repair threshold, budgets, fleet size)
- map rendering output
- logging

Configuration can be overridden via environment variables:
- UNP_GRAPH_DATA_DIR=/path/to/data
- UNP_PLAN_REPAIR_BUDGET=750
- UNP_PLAN_DEFAULT_TIME_BUCKET=EVENING
- UNP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with UNP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="UNP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    nodes_file: str = "nodes.csv"
    existing_roads_file: str = "existing_roads.csv"
    potential_roads_file: str = "potential_roads.csv"
    traffic_file: str = "traffic_data.csv"

    @property
    def nodes_path(self) -> Path:
        """Full path to the nodes CSV file."""
        return self.data_dir / self.nodes_file

    @property
    def existing_roads_path(self) -> Path:
        """Full path to the existing roads CSV file."""
        return self.data_dir / self.existing_roads_file

    @property
    def potential_roads_path(self) -> Path:
        """Full path to the potential roads CSV file."""
        return self.data_dir / self.potential_roads_file

    @property
    def traffic_path(self) -> Path:
        """Full path to the traffic flows CSV file."""
        return self.data_dir / self.traffic_file


class PlannerConfig(BaseSettings):
    """Planning parameters for the optimizers.

    Environment variables prefixed with UNP_PLAN_.
    """

    model_config = SettingsConfigDict(env_prefix="UNP_PLAN_")

    repair_condition_threshold: int = Field(default=8, ge=1, le=11)
    repair_cost_scale: int = Field(default=10, ge=1, le=1000)
    repair_budget: float = Field(default=1000.0, ge=0)
    total_vehicles: int = Field(default=60, ge=0)
    default_time_bucket: Literal["MORNING", "AFTERNOON", "EVENING", "NIGHT"] = (
        "MORNING"
    )


class RenderingConfig(BaseSettings):
    """Network map rendering configuration.

    Environment variables prefixed with UNP_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="UNP_RENDER_")

    output_file: str = "network.html"
    zoom_start: int = 1


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with UNP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="UNP_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations are accessed via attributes:

        config = get_config()
        print(config.graph.nodes_path)
        print(config.planner.repair_budget)

    Environment variables prefixed with UNP_.
    """

    model_config = SettingsConfigDict(env_prefix="UNP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    planner: PlannerConfig = Field(default_factory=PlannerConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def map_output_path(self) -> Path:
        """Where the network map is written."""
        return self.output_dir / self.rendering.output_file


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
