"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested groups use a double underscore, e.g.
``TERMARCADE_DISPLAY__TICK_MS=33``.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseModel):
    """Terminal front-end settings."""

    # Frame pacing (40ms = 25 fps)
    tick_ms: int = Field(default=40, gt=0)
    # Below this much time left in a tick, busy-wait instead of sleeping
    tick_margin_ms: int = Field(default=5, ge=0)

    # Log column width in cells (0 hides it)
    log_width: int = Field(default=50, ge=0)
    log_lines: int = Field(default=500, gt=0)

    # Terminals send no key-up events; a key counts as released after
    # this many ticks without a repeat.
    key_release_ticks: int = Field(default=6, gt=0)
    # Until the first repeat arrives, wait this long instead (800ms covers
    # the usual 500-660ms auto-repeat delay).
    key_repeat_delay_ticks: int = Field(default=20, gt=0)


class GameSettings(BaseModel):
    """Runner game settings."""

    game_seed: str = "Seed chosen by a fair dice roll."
    solution_seed: str = "This is a funny random seed !!!!"

    # Colour of the autopilot ghost
    ghost_color: tuple[int, int, int] = (110, 40, 40)

    # Restart the runner after a game over
    reset_on_game_over: bool = True


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TERMARCADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    log_file: Optional[Path] = None

    display: DisplaySettings = Field(default_factory=DisplaySettings)
    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
