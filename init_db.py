"""Create the database schema and the bootstrap administrator."""

import structlog

from dashboard_ac.backend.src.core.config import get_settings
from dashboard_ac.backend.src.core.logging import configure_logging
from dashboard_ac.backend.src.db import create_all, session_scope
from dashboard_ac.backend.src.services.seed import seed_initial_admin

LOGGER = structlog.get_logger(__name__)


def init_db() -> None:
    configure_logging()
    LOGGER.info("init_db_started", database_url=get_settings().database_url)
    create_all()
    with session_scope() as session:
        result = seed_initial_admin(session)
    LOGGER.info("init_db_finished", admin_created=result.user_created)


if __name__ == "__main__":
    init_db()
