"""Keys file location and the remediation text shown when nothing resolves."""

import os
from pathlib import Path
from typing import Mapping, Optional

from gcal_oauth.config import Settings, get_settings

CREDENTIALS_PATH_ENV = "GOOGLE_OAUTH_CREDENTIALS"


def get_keys_file_path(
    environ: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
) -> Path:
    """Return the absolute path of the OAuth keys file.

    GOOGLE_OAUTH_CREDENTIALS wins when set; otherwise the default file name
    inside the configured project root is used.
    """
    environ = os.environ if environ is None else environ
    settings = settings or get_settings()

    override = environ.get(CREDENTIALS_PATH_ENV)
    if override:
        try:
            return Path(override).expanduser().resolve()
        except RuntimeError:
            # ~user with no known home directory; use the path as written
            return Path(override).resolve()
    return (settings.project_root / settings.credentials_filename).resolve()


def generate_credentials_error_message(
    environ: Optional[Mapping[str, str]] = None,
    settings: Optional[Settings] = None,
    keys_path: Optional[Path] = None,
) -> str:
    """Build a human-readable hint listing every way to supply credentials."""
    settings = settings or get_settings()
    keys_path = keys_path or get_keys_file_path(environ, settings)

    return (
        "OAuth credentials not found. Please provide credentials using one of these methods:\n"
        "\n"
        "1. Environment variables (no JSON file needed):\n"
        "   export GOOGLE_CLIENT_ID=\"your-client-id\"\n"
        "   export GOOGLE_CLIENT_SECRET=\"your-client-secret\"\n"
        f"   Optionally: export GOOGLE_REDIRECT_URI=\"{settings.default_redirect_uri}\"\n"
        "\n"
        "2. Credentials file via environment variable:\n"
        f"   export {CREDENTIALS_PATH_ENV}=\"/path/to/{settings.credentials_filename}\"\n"
        "\n"
        "3. Default file path:\n"
        f"   Place your {settings.credentials_filename} file at {keys_path}\n"
        "\n"
        "Download the keys file from the Google Cloud Console "
        "(APIs & Services > Credentials > OAuth 2.0 Client IDs, type \"Desktop app\")."
    )
