from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Static defaults for credential resolution using Pydantic Settings.

    The credentials themselves (GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, ...)
    are not fields here: they are re-read on every resolution, while this
    object is cached for the life of the process.
    """

    # --- Core Settings ---
    app_name: str = "gcal-oauth"
    debug: bool = False  # If True, forces DEBUG logging
    log_level: str = "INFO"

    # --- Credentials Lookup ---
    default_redirect_uri: str = "http://localhost:3000/oauth2callback"
    credentials_filename: str = "gcp-oauth.keys.json"
    # Directory searched for the keys file when GOOGLE_OAUTH_CREDENTIALS is unset
    project_root: Path = Field(default_factory=Path.cwd)

    # --- Google OAuth endpoints ---
    google_authorize_endpoint: str = "https://accounts.google.com/o/oauth2/v2/auth"
    google_token_endpoint: str = "https://oauth2.googleapis.com/token"

    # --- Configuration ---
    model_config = SettingsConfigDict(
        env_file=".env",  # Look for a file named .env
        env_file_encoding="utf-8",
        env_prefix="GCAL_OAUTH_",  # e.g. GCAL_OAUTH_DEBUG, GCAL_OAUTH_PROJECT_ROOT
        extra="ignore",  # Don't crash if .env has extra keys we don't know about
    )


@lru_cache
def get_settings() -> Settings:
    """
    Returns a cached instance of Settings.
    Only static defaults live here, so caching never hides a change to the
    client id, secret or keys file between calls.
    """
    return Settings()
