"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested groups use a double underscore, e.g. BOUNCESTACK_BALL__GRAVITY=0.2.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlayfieldSettings(BaseModel):
    """Size of the simulated area."""

    width: float = Field(default=400.0, gt=0)
    height: float = Field(default=600.0, gt=0)


class BallSettings(BaseModel):
    """Ball kinematics."""

    radius: float = Field(default=15.0, gt=0)
    gravity: float = Field(default=0.1, gt=0)

    # Respawn point (x is always the playfield center)
    spawn_y: float = 100.0
    spawn_dy: float = 2.0


class PlatformSettings(BaseModel):
    """Moving platform and tower layout."""

    width: float = Field(default=150.0, ge=0)
    height: float = Field(default=20.0, gt=0)
    speed: float = 3.0

    # First platform sits this far above the bottom edge
    base_offset: float = 50.0
    # Vertical distance between stacked platforms
    step: float = Field(default=50.0, gt=0)
    # Camera travel per lock
    camera_shift: float = 50.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BOUNCESTACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "headless"] = "simulator"
    debug: bool = False
    log_file: Optional[Path] = None

    # Frame timing
    fps: int = Field(default=60, gt=0)
    max_steps_per_frame: int = Field(default=5, ge=1)
    headless_frames: int = Field(default=600, ge=0)
    # Lock the platform every N headless frames, 0 disables
    headless_lock_interval: int = Field(default=0, ge=0)

    # Simulator window
    window_scale: int = Field(default=1, ge=1)
    window_title: str = "BounceStack"

    # Nested settings
    playfield: PlayfieldSettings = Field(default_factory=PlayfieldSettings)
    ball: BallSettings = Field(default_factory=BallSettings)
    platform: PlatformSettings = Field(default_factory=PlatformSettings)

    @property
    def is_simulator(self) -> bool:
        """Check if running with the pygame window."""
        return self.env == "simulator"

    @property
    def tick_seconds(self) -> float:
        """Length of one fixed simulation step."""
        return 1.0 / self.fps


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
