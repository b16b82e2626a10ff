# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Environment variables are set before any application module is imported,
# since config.py reads them at import time.
# =============================================================================

import io
import os
import tempfile

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PUBLIC_DIR", os.path.join(ROOT_DIR, "public"))
os.environ.setdefault("DEFAULT_AUTHOR_ID", "1")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "blog-tests.log"))

import pytest
from fastapi import UploadFile

import models
from create_author import create_author
from database import SessionLocal, engine
from storage import LocalStorage


@pytest.fixture
def db():
    """Fresh in-memory database per test."""
    models.Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        models.Base.metadata.drop_all(bind=engine)


@pytest.fixture
def author(db):
    """The default author posts fall back to."""
    return create_author(db)


@pytest.fixture
def other_author(db):
    user = models.User(username="Jane Doe", email="jane@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def storage(tmp_path):
    """Blob store in a temporary directory."""
    return LocalStorage(str(tmp_path / "public"))


@pytest.fixture
def post(db, author):
    return models.Post.add(db, {"title": "Hello", "content": "World"})


@pytest.fixture
def tags(db):
    created = [models.Tag(title=title, slug=title.lower()) for title in ("Python", "SQL", "Web", "Tips")]
    db.add_all(created)
    db.commit()
    return [tag.id for tag in created]


@pytest.fixture
def category(db):
    created = models.Category(title="News", slug="news")
    db.add(created)
    db.commit()
    db.refresh(created)
    return created


@pytest.fixture
def make_upload():
    """Build an UploadFile the way FastAPI hands it to a route."""
    def _make(filename="photo.jpg", data=b"\x89PNG fake image bytes"):
        return UploadFile(file=io.BytesIO(data), filename=filename)
    return _make
