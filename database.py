import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

import config

logger = logging.getLogger(__name__)


def make_engine(url: str, echo: bool = False):
    """Create an engine; in-memory SQLite shares one connection across sessions"""
    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(url,
                             echo=echo,
                             connect_args={"check_same_thread": False},
                             poolclass=StaticPool)
    return create_engine(url, echo=echo)


def display_url(url) -> str:
    """Database URL with the password masked"""
    return make_url(url).render_as_string(hide_password=True)


engine = make_engine(config.DATABASE_URL, echo=config.SQL_ECHO)

logger.info("Connecting to: %s", display_url(engine.url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Provide a database session and close it when the caller is done"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
