"""Runtime settings.

Values are read from environment variables prefixed with ``RAYBOARD_``::

    RAYBOARD_VALIDATE_MOVES=0   # State.apply trusts its caller
    RAYBOARD_SORT_MOVES=0       # keep generation order instead of (from, to)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RAYBOARD_")

    # State.apply checks the move against legal_moves() before playing it.
    validate_moves: bool = True

    # Legal moves are returned ordered by from-square, then to-square.
    sort_moves: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once from the environment."""
    return Settings()
