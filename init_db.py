"""Initialize the database by creating all tables defined in the models"""
import logging

from database import Base, engine
from logging_config import setup_logging
import models  # noqa: F401  registers the tables on Base.metadata

logger = logging.getLogger(__name__)


def init_db():
    """Create every table that does not exist yet"""
    logger.info("Creating tables on the database...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created successfully!")


if __name__ == "__main__":
    setup_logging()
    init_db()
