"""
Mod configuration settings.
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime settings (environment variables prefixed MSM_)."""

    # Mod
    ENABLED: bool = True
    DEBUG_LOGGING: bool = False

    # Family configuration file
    CONFIG_PATH: str = "config/MaxSpecialModifiers.json"

    # Keropok progression
    COMPLETION_THRESHOLD: int = 6
    GUARANTEED_KILL_COUNT: int = 5

    # Selection modes ("single" or "all")
    KEROPOK_MODE: str = "single"
    ORANG_BUNIAN_MODE: str = "all"
    AWAKENED_MODE: str = "all"

    # Randomness
    RANDOM_SEED: Optional[int] = None

    class Config:
        env_file = ".env"
        env_prefix = "MSM_"
