"""
Application settings - CORS, logging and workflow switches
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    app_name: str = "Procurement Management System"
    version: str = "1.0.0"

    cors_origins: str = "*"
    log_level: str = "INFO"

    # Reject requisitions whose total differs from the sum of their line items
    enforce_requisition_totals: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


app_settings = AppSettings()
