"""Configuration for the holiday sources, read from the environment."""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class SourceSettings(BaseSettings):
    """Holiday source settings (``BUSINESSDAYS_*`` variables or ``.env``)."""

    public_holiday_endpoint: str = "https://public-holiday.p.rapidapi.com"
    public_holiday_host: str = "public-holiday.p.rapidapi.com"
    public_holiday_api_key: str = ""
    request_timeout: float = 30.0
    calendar_credentials_file: str = ""

    model_config = SettingsConfigDict(
        env_prefix="BUSINESSDAYS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
