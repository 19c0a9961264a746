"""Bootstrap — wires settings into logging and the database singleton.

Invariants:
    - Called once by the host process before any session is requested
    - Logging configured before the first log line of init

Design Decisions:
    - Plain function instead of a framework lifespan: the host (API server,
      worker, script) owns its own event loop and shutdown
"""

import logging

from batcave.config import Settings, get_settings
from batcave.infrastructure.database import DatabaseSessionManager, init_db
from batcave.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def bootstrap(settings: Settings | None = None) -> DatabaseSessionManager:
    """Configure logging and initialize the database session manager."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("Batcave data layer initialized")
    return manager
