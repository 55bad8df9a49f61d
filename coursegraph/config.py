"""
Configuration for layout geometry and the service.

`LayoutConfig` holds the spacing constants used by the layout engine.
`Settings` loads overrides from environment variables (prefix `COURSEGRAPH_`)
with .env file support.
"""

from functools import lru_cache
from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import LayoutDirection


DEFAULT_NODE_WIDTH = 240
DEFAULT_NODE_HEIGHT = 84
DEFAULT_HORIZONTAL_GAP = 40
DEFAULT_VERTICAL_GAP = 80


class LayoutConfig(BaseModel):
    """Node dimensions and gaps, in pixels."""
    model_config = ConfigDict(frozen=True)

    node_width: float = DEFAULT_NODE_WIDTH
    node_height: float = DEFAULT_NODE_HEIGHT
    horizontal_gap: float = DEFAULT_HORIZONTAL_GAP
    vertical_gap: float = DEFAULT_VERTICAL_GAP

    @property
    def column_step(self) -> float:
        return self.node_width + self.horizontal_gap

    @property
    def row_step(self) -> float:
        return self.node_height + self.vertical_gap


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COURSEGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Layout geometry
    node_width: float = DEFAULT_NODE_WIDTH
    node_height: float = DEFAULT_NODE_HEIGHT
    horizontal_gap: float = DEFAULT_HORIZONTAL_GAP
    vertical_gap: float = DEFAULT_VERTICAL_GAP
    default_direction: LayoutDirection = LayoutDirection.TOP_TO_BOTTOM

    # Application
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR
    host: str = "127.0.0.1"
    port: int = 8765

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            node_width=self.node_width,
            node_height=self.node_height,
            horizontal_gap=self.horizontal_gap,
            vertical_gap=self.vertical_gap,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
