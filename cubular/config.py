from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, Field


class Settings(BaseSettings):
    """Library settings, read from the environment or a local .env file"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Scrambling
    scramble_intensity: int = Field(default=50, ge=1, alias="CUBULAR_SCRAMBLE_INTENSITY")

    # Logging
    log_level: str = Field(default="WARNING", alias="CUBULAR_LOG_LEVEL")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if v is None or v == "":
            return "WARNING"
        level = str(v).upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level '{v}'")
        return level


settings = Settings()
