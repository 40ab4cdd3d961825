from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="VACCINATION_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Vaccination Booking"
    LOG_LEVEL: str = "WARNING"

    # Console
    PROMPT: str = "Enter instruction \t"

    # Booking rules
    # Порог можно только повысить: записываются лишь те, кто строго старше 18
    ELIGIBILITY_AGE: int = Field(default=18, ge=18)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"Неизвестный уровень логирования: {v}")
        return level
