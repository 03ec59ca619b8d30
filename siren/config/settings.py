from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class SirenSettings(BaseSettings):
    """
    Process-wide codec settings managed by Pydantic.
    Reads from SIREN_* environment variables and/or .env file.
    """
    # JSON text output; None writes a single compact line
    JSON_INDENT: Optional[int] = None

    # HTTP
    MEDIA_TYPE: str = "application/vnd.siren+json"
    ETAG_WEAK: bool = False

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_prefix="SIREN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
        )

settings = SirenSettings()
