"""Check which OAuth credentials would be used: python -m gcal_oauth"""

import argparse
import asyncio
import os
import sys
from typing import Optional, Sequence

from gcal_oauth.config import get_settings
from gcal_oauth.core.errors import CredentialsError
from gcal_oauth.core.logging import configure_logging
from gcal_oauth.core.paths import CREDENTIALS_PATH_ENV
from gcal_oauth.services.credentials import CredentialResolver


def mask_secret(secret: str) -> str:
    # Short secrets are hidden entirely; longer ones keep 2 chars at each end
    if len(secret) < 8:
        return "*" * len(secret)
    return secret[:2] + "*" * (len(secret) - 4) + secret[-2:]


async def check_credentials(resolver: CredentialResolver) -> int:
    try:
        source, credentials = await resolver.resolve_with_source()
    except CredentialsError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"Source        : {source.value}")
    print(f"Client ID     : {credentials.client_id}")
    print(f"Client Secret : {mask_secret(credentials.client_secret)}")
    print("Redirect URIs :")
    for uri in credentials.redirect_uris:
        print(f" - {uri}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gcal_oauth",
        description="Resolve Google OAuth client credentials and report the result.",
    )
    parser.add_argument(
        "--keys-file",
        help=f"Path to the OAuth keys file (overrides {CREDENTIALS_PATH_ENV})",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.verbose:
        settings = settings.model_copy(update={"debug": True})
    configure_logging(settings)

    environ = dict(os.environ)
    if args.keys_file:
        environ[CREDENTIALS_PATH_ENV] = args.keys_file

    resolver = CredentialResolver(environ=environ, settings=settings)
    return asyncio.run(check_credentials(resolver))


if __name__ == "__main__":
    sys.exit(main())
