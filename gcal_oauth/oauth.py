"""OAuth client setup for Google authentication.

This module builds the Authlib OAuth2 client from resolved credentials and
exposes the two entry points callers use: initialize_oauth2_client() and
load_credentials().
"""

import logging
from typing import Optional

from authlib.integrations.httpx_client import AsyncOAuth2Client
from pydantic import ValidationError

from gcal_oauth.config import get_settings
from gcal_oauth.core.errors import (
    ClientInitializationError,
    CredentialsError,
    CredentialsLoadError,
    IncompleteCredentialsError,
)
from gcal_oauth.schemas.credentials import ClientCredentials, OAuthCredentials
from gcal_oauth.services.credentials import CredentialResolver

logger = logging.getLogger(__name__)


def build_client(credentials: OAuthCredentials) -> AsyncOAuth2Client:
    """Create the OAuth2 client handle.

    The first redirect URI is used as the default for the client. Only
    construction happens here; no request is sent to Google.
    """
    settings = get_settings()
    return AsyncOAuth2Client(
        client_id=credentials.client_id,
        client_secret=credentials.client_secret,
        redirect_uri=credentials.redirect_uri,
        authorization_endpoint=settings.google_authorize_endpoint,
        token_endpoint=settings.google_token_endpoint,
    )


async def initialize_oauth2_client(
    resolver: Optional[CredentialResolver] = None,
) -> AsyncOAuth2Client:
    """Resolve credentials and return a configured OAuth2 client.

    Resolution is always live (environment, then keys file). Tests supply a
    resolver over a fake environment and a temporary keys path.

    Raises:
        ClientInitializationError: If no credentials could be resolved
    """
    try:
        resolver = resolver or CredentialResolver()
        credentials = await resolver.resolve_with_fallback()
    except (CredentialsError, ValidationError) as e:
        raise ClientInitializationError(f"Error loading OAuth keys: {e}") from e

    logger.info(
        f"[OAUTH] Client initialized (redirect_uri={credentials.redirect_uri})"
    )
    return build_client(credentials)


async def load_credentials(
    resolver: Optional[CredentialResolver] = None,
) -> ClientCredentials:
    """Return only the client id and secret, without redirect URIs.

    Raises:
        CredentialsLoadError: If no credentials could be resolved
        IncompleteCredentialsError: If the id or secret is empty
    """
    try:
        resolver = resolver or CredentialResolver()
        credentials = await resolver.resolve_with_fallback()
    except (CredentialsError, ValidationError) as e:
        raise CredentialsLoadError(f"Error loading credentials: {e}") from e

    if not credentials.client_id or not credentials.client_secret:
        raise IncompleteCredentialsError(
            "Error loading credentials: "
            "Client ID or Client Secret missing in credentials."
        )

    return ClientCredentials(
        client_id=credentials.client_id,
        client_secret=credentials.client_secret,
    )
