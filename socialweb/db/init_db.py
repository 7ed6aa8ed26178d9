"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all() runs.
"""

import logging

from sqlalchemy.engine import Engine

from socialweb.db.session import engine as default_engine
from socialweb.models.base import Base
from socialweb.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(bind: Engine | None = None) -> None:
    """
    Create all tables based on SQLAlchemy models.
    """
    bind = bind or default_engine
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)
