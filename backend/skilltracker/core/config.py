from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Local single-user store; any SQLAlchemy URL works.
    database_url: str = "sqlite:///skilltracker.db"
    log_level: str = "INFO"

    # Keys of the two JSON collections in the key/value table
    skills_key: str = "skill-tracker-skills"
    logs_key: str = "skill-tracker-logs"

    cors_origins: list[str] = ["*"]

    # Allow empty env strings for the log level
    @field_validator("log_level", mode="before")
    @classmethod
    def _empty_to_default(cls, v):
        if v in ("", None, "null", "None"):
            return "INFO"
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
