"""
Database initialization.
"""
import logging
from typing import Optional

from sqlalchemy.engine import Engine

from studybuddy.db.base import Base, engine as default_engine
import studybuddy.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet.

    Args:
        bind: Engine to create the tables on, defaults to the configured one
    """
    bind = bind or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"Database tables ready on {bind.url.render_as_string(hide_password=True)}")
