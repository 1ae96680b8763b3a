"""Error types raised while resolving OAuth client credentials."""

from typing import Optional


class CredentialsError(Exception):
    """Base class for every credential resolution failure."""


class MissingConfigError(CredentialsError):
    """Required environment variables are absent or empty."""


class InvalidFormatError(CredentialsError):
    """The keys file parsed, but matches none of the accepted shapes."""


class CredentialsFileNotFoundError(CredentialsError, FileNotFoundError):
    """The keys file does not exist."""


class CredentialsFileReadError(CredentialsError):
    """The keys file exists but could not be read."""


class CredentialsParseError(CredentialsError, ValueError):
    """The keys file is not valid JSON."""


class CredentialsUnavailableError(CredentialsError):
    """Neither the environment nor the keys file produced credentials.

    Keeps both underlying errors so callers can inspect them individually.
    """

    def __init__(
        self,
        message: str,
        env_error: Optional[BaseException] = None,
        file_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.env_error = env_error
        self.file_error = file_error


class ClientInitializationError(CredentialsError):
    """The OAuth2 client handle could not be built."""


class CredentialsLoadError(CredentialsError):
    """The minimal client id/secret record could not be loaded."""


class IncompleteCredentialsError(CredentialsLoadError):
    """Resolution succeeded but the id or secret came back empty."""
