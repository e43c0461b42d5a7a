"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "VitalPlan — Personal Metrics & Plan Engine"
    VERSION: str = "0.1.0"

    DEBUG: bool = False

    # Dev server (scripts/run_dev.py)
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = True

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "vitalplan"
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

    # Target calculator safety clamp (kcal)
    CALORIE_FLOOR_KCAL: float = 1200.0
    CALORIE_CEILING_KCAL: float = 5000.0

    # Plan generation: None means rule-ranked tie-breaks only
    PLAN_SEED: Optional[int] = None

    # Features hidden from free users by the presentation layer
    PREMIUM_FEATURES: List[str] = ["wellness_insights", "plan_regeneration", "long_window_analytics"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
