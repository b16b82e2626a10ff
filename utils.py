"""Slug and filename helpers."""
import os
import re
import secrets
import string
import unicodedata
from typing import Optional

from sqlalchemy.orm import Session

ALPHABET = string.ascii_letters + string.digits


def slugify(text: str, separator: str = "-") -> str:
    """Turn a title into a lowercase ASCII slug"""
    text = unicodedata.normalize("NFKD", text or "")
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = re.sub(r"[^a-z0-9]+", separator, text)
    return text.strip(separator)


def unique_slug(db: Session, model, title: str) -> str:
    """Slug for title that no row of model uses yet, suffixed -1, -2... on collision"""
    base_slug = slugify(title) or "untitled"

    def taken(candidate):
        return db.query(model.id).filter(model.slug == candidate).first() is not None

    slug = base_slug
    counter = 1
    while taken(slug):
        slug = f"{base_slug}-{counter}"
        counter += 1
    return slug


def random_name(length: int = 10) -> str:
    """Random alphanumeric string from a cryptographically secure source"""
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


def image_filename(original_filename: Optional[str], length: int = 10) -> str:
    """Random base name carrying over the extension of the uploaded file"""
    extension = os.path.splitext(original_filename or "")[1].lower()
    return random_name(length) + extension
