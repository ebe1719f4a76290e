"""voip-api - Typed request clients for a SOAP telecom provisioning API."""

from .platform.clients.x911 import X911Client
from .platform.observability import configure_logging
from .platform.settings import Settings


def configure(settings: Settings | None = None) -> Settings:
    """Load settings and configure logging for the process."""
    settings = settings or Settings()
    configure_logging(settings)
    return settings


__all__ = ["Settings", "X911Client", "configure"]
