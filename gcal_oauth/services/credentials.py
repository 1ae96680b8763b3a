"""Credential resolution for the Google OAuth client.

Credentials come from one of two sources, tried in order:
- Environment variables (GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET)
- A JSON keys file (GOOGLE_OAUTH_CREDENTIALS or the default path)

Nothing is cached: each call re-reads the environment and the file, so edits
made between calls are picked up.
"""

import enum
import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

import anyio
from pydantic import ValidationError

from gcal_oauth.config import Settings, get_settings
from gcal_oauth.core.errors import (
    CredentialsError,
    CredentialsFileNotFoundError,
    CredentialsFileReadError,
    CredentialsParseError,
    CredentialsUnavailableError,
    InvalidFormatError,
    MissingConfigError,
)
from gcal_oauth.core.paths import (
    generate_credentials_error_message,
    get_keys_file_path,
)
from gcal_oauth.schemas.credentials import (
    DirectCredentials,
    InstalledAppCredentials,
    OAuthCredentials,
)

logger = logging.getLogger(__name__)

CLIENT_ID_ENV = "GOOGLE_CLIENT_ID"
CLIENT_SECRET_ENV = "GOOGLE_CLIENT_SECRET"
REDIRECT_URI_ENV = "GOOGLE_REDIRECT_URI"

INVALID_FORMAT_MESSAGE = (
    'Invalid credentials file format. Expected either "installed" object '
    "or direct client_id/client_secret fields."
)


class CredentialSource(str, enum.Enum):
    ENVIRONMENT = "environment"
    FILE = "file"


class CredentialResolver:
    """Resolve OAuth client credentials from the environment or a keys file."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        keys_path: Optional[Callable[[], Path]] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize the resolver.

        Args:
            environ: Environment mapping to read. Defaults to os.environ,
                looked up on every call.
            keys_path: Zero-argument callable returning the keys file path.
                Defaults to get_keys_file_path() over the same environment.
            settings: Static defaults. Defaults to get_settings().
        """
        self._environ = environ
        self._keys_path = keys_path
        self.settings = settings or get_settings()

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def keys_file_path(self) -> Path:
        if self._keys_path is not None:
            return self._keys_path()
        return get_keys_file_path(self.environ, self.settings)

    def resolve_from_environment(self) -> OAuthCredentials:
        """Build credentials from GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET.

        Raises:
            MissingConfigError: If either variable is absent or empty
        """
        environ = self.environ
        client_id = environ.get(CLIENT_ID_ENV)
        client_secret = environ.get(CLIENT_SECRET_ENV)
        redirect_uri = (
            environ.get(REDIRECT_URI_ENV) or self.settings.default_redirect_uri
        )

        if not client_id or not client_secret:
            raise MissingConfigError(
                f"Missing required environment variables: "
                f"{CLIENT_ID_ENV}, {CLIENT_SECRET_ENV}"
            )

        return OAuthCredentials(
            client_id=client_id,
            client_secret=client_secret,
            redirect_uris=(redirect_uri,),
        )

    async def resolve_from_file(self) -> OAuthCredentials:
        """Read and normalize the JSON keys file.

        Raises:
            CredentialsFileNotFoundError: If the file does not exist
            CredentialsFileReadError: If the file cannot be read
            CredentialsParseError: If the contents are not valid JSON
            InvalidFormatError: If the JSON matches no accepted shape
        """
        path = self.keys_file_path()
        logger.debug(f"[CREDENTIALS] Reading keys file: {path}")

        try:
            raw = await anyio.Path(path).read_bytes()
        except FileNotFoundError as e:
            raise CredentialsFileNotFoundError(
                f"Credentials file not found: {path}"
            ) from e
        except OSError as e:
            raise CredentialsFileReadError(
                f"Could not read credentials file {path}: {e}"
            ) from e

        try:
            document = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise CredentialsParseError(
                f"Credentials file {path} is not valid UTF-8: {e}"
            ) from e
        except json.JSONDecodeError as e:
            raise CredentialsParseError(
                f"Credentials file {path} is not valid JSON: {e}"
            ) from e

        return self.parse_keys_document(document)

    def parse_keys_document(self, document: Any) -> OAuthCredentials:
        """Normalize a parsed keys file into OAuthCredentials.

        Accepted shapes, checked in order:
        1. {"installed": {"client_id", "client_secret", "redirect_uris"}}
        2. {"client_id", "client_secret", "redirect_uris"?}
        """
        if not isinstance(document, dict):
            raise InvalidFormatError(INVALID_FORMAT_MESSAGE)

        try:
            if document.get("installed"):
                block = document["installed"]
                if not isinstance(block, dict):
                    raise InvalidFormatError(INVALID_FORMAT_MESSAGE)
                keys = InstalledAppCredentials.model_validate(
                    {**block, "redirect_uris": block.get("redirect_uris") or []}
                )
            elif document.get("client_id") and document.get("client_secret"):
                keys = DirectCredentials.model_validate(
                    {
                        "client_id": document["client_id"],
                        "client_secret": document["client_secret"],
                        "redirect_uris": document.get("redirect_uris") or [],
                    }
                )
            else:
                raise InvalidFormatError(INVALID_FORMAT_MESSAGE)
        except ValidationError as e:
            raise InvalidFormatError(f"{INVALID_FORMAT_MESSAGE} {e}") from e

        return OAuthCredentials(
            client_id=keys.client_id,
            client_secret=keys.client_secret,
            redirect_uris=tuple(keys.redirect_uris)
            or (self.settings.default_redirect_uri,),
        )

    async def resolve_with_source(self) -> tuple[CredentialSource, OAuthCredentials]:
        """Try the environment, then the keys file, exactly once each.

        Returns:
            The winning source and the credentials it produced

        Raises:
            CredentialsUnavailableError: If both sources fail
        """
        try:
            credentials = self.resolve_from_environment()
            logger.info("[CREDENTIALS] Loaded OAuth client from environment")
            return CredentialSource.ENVIRONMENT, credentials
        except CredentialsError as env_error:
            logger.warning(f"[CREDENTIALS] Environment unusable: {env_error}")
            try:
                credentials = await self.resolve_from_file()
                logger.info("[CREDENTIALS] Loaded OAuth client from keys file")
                return CredentialSource.FILE, credentials
            except CredentialsError as file_error:
                logger.error(f"[CREDENTIALS] Keys file unusable: {file_error}")
                hint = generate_credentials_error_message(
                    self.environ, self.settings, keys_path=self.keys_file_path()
                )
                raise CredentialsUnavailableError(
                    f"{hint}\n\nOriginal errors:\nEnv: {env_error}\nFile: {file_error}",
                    env_error=env_error,
                    file_error=file_error,
                ) from file_error

    async def resolve_with_fallback(self) -> OAuthCredentials:
        _, credentials = await self.resolve_with_source()
        return credentials
