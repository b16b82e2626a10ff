"""Create the default author that posts fall back to."""
import logging

import config
from database import SessionLocal
from logging_config import setup_logging
from models import User

logger = logging.getLogger(__name__)


def create_author(db, username: str = "Admin", email: str = "admin@example.com"):
    """Create the default author unless a user with that id already exists"""
    existing = db.query(User).filter(User.id == config.DEFAULT_AUTHOR_ID).first()
    if existing:
        logger.info("Author %s already exists: %s", existing.id, existing.username)
        return existing

    author = User(id=config.DEFAULT_AUTHOR_ID, username=username, email=email)
    db.add(author)
    db.commit()
    db.refresh(author)
    logger.info("Author created successfully: %s / %s", author.username, author.email)
    return author


if __name__ == "__main__":
    setup_logging()
    session = SessionLocal()
    try:
        create_author(session)
    finally:
        session.close()
