"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support,
e.g. ``FLAPCORE_GAME__SPEED=2`` or ``FLAPCORE_SIMULATOR__FPS=30``.
"""

from functools import lru_cache

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseModel):
    """Simulation tunables, fixed for a controller's lifetime."""

    # Playfield
    height: float = Field(default=800, gt=0)
    width: float = Field(default=400, gt=0)
    ground_height: float = Field(default=20, ge=0)

    # Pipes
    pipe_width: float = Field(default=50, gt=0)
    pipe_gap: float = 170  # Placeholder, gap is always randomized
    min_top_for_top_pipe: float = Field(default=50, ge=0)
    max_top_for_top_pipe: float = Field(default=350, ge=0)
    generate_new_pipe_percent: float = Field(default=0.7, gt=0.0, lt=1.0)
    speed: float = Field(default=1, gt=0)

    # Bird
    bird_x: float = Field(default=40, ge=0)
    bird_size: float = Field(default=40, gt=0)

    # Physics
    gravity: float = 1.5
    jump_velocity: float = Field(default=10, gt=0)
    slow_velocity_by: float = Field(default=0.3, ge=0)

    @model_validator(mode="after")
    def _check_pipe_bounds(self) -> "GameSettings":
        if self.min_top_for_top_pipe > self.max_top_for_top_pipe:
            raise ValueError("min_top_for_top_pipe must not exceed max_top_for_top_pipe")
        if self.max_top_for_top_pipe > self.height:
            raise ValueError("max_top_for_top_pipe must lie inside the playfield")
        if self.pipe_width >= self.width:
            raise ValueError("pipe_width must be smaller than the playfield width")
        return self


class SimulatorSettings(BaseModel):
    """Desktop simulator window settings."""

    fps: int = Field(default=60, gt=0)
    scale: int = Field(default=1, ge=1)
    title: str = "flapcore"
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLAPCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    game: GameSettings = Field(default_factory=GameSettings)
    simulator: SimulatorSettings = Field(default_factory=SimulatorSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
