"""Kernel configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Kernel settings loaded from environment variables (``PLANEKIT_*``).

    Priority: environment variables > .env file > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="PLANEKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Collision
    rect_edge_tolerance: float = 0.75  # inset applied to each edge in rect overlap tests

    # Point simplification
    chop_min: float = 35.0  # segments at or below this length are merged
    chop_max: float = 240.0  # segments above this length get an extra point
    rope_coeff: float = 1.0  # exponent applied to the parametric position

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
