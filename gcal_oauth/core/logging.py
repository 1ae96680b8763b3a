import logging

from gcal_oauth.config import Settings


def configure_logging(settings: Settings) -> None:
    """Set up root logging for command-line use."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
