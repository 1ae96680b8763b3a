"""Google OAuth client credential loading."""

from gcal_oauth.core.errors import (
    ClientInitializationError,
    CredentialsError,
    CredentialsFileNotFoundError,
    CredentialsFileReadError,
    CredentialsLoadError,
    CredentialsParseError,
    CredentialsUnavailableError,
    IncompleteCredentialsError,
    InvalidFormatError,
    MissingConfigError,
)
from gcal_oauth.oauth import build_client, initialize_oauth2_client, load_credentials
from gcal_oauth.schemas.credentials import ClientCredentials, OAuthCredentials
from gcal_oauth.services.credentials import CredentialResolver, CredentialSource

__all__ = [
    "ClientCredentials",
    "ClientInitializationError",
    "CredentialResolver",
    "CredentialSource",
    "CredentialsError",
    "CredentialsFileNotFoundError",
    "CredentialsFileReadError",
    "CredentialsLoadError",
    "CredentialsParseError",
    "CredentialsUnavailableError",
    "IncompleteCredentialsError",
    "InvalidFormatError",
    "MissingConfigError",
    "OAuthCredentials",
    "build_client",
    "initialize_oauth2_client",
    "load_credentials",
]
