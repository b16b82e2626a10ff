"""SQLAlchemy models for posts, comments and their categories, tags and authors."""
import enum
import logging
from datetime import datetime
from typing import Iterable, Mapping, Optional, Union

from sqlalchemy import (Column, DateTime, ForeignKey, Integer, String, Table,
                        Text, delete, insert, select)
from sqlalchemy.orm import Session

import config
from database import Base
from schemas import PostFields
from storage import LocalStorage, upload_path
from utils import image_filename, unique_slug

logger = logging.getLogger(__name__)

NO_IMAGE_URL = "/img/no-image.png"


class PostStatus(enum.IntEnum):
    """Publication status of a post."""
    DRAFT = 0
    PUBLIC = 1


class CommentStatus(enum.IntEnum):
    """Moderation status of a comment."""
    DISALLOWED = 0
    ALLOWED = 1


post_tags = Table(
    "post_tags",
    Base.metadata,
    Column("post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class RecordMixin:
    """Single-row persistence shared by the entities."""

    def save(self, db: Session):
        """Persist the current field values"""
        db.add(self)
        db.commit()
        db.refresh(self)
        return self

    def delete(self, db: Session):
        """Delete the row"""
        db.delete(self)
        db.commit()


class User(Base):
    """Author of posts and comments."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False)


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False)


class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False)


class Post(RecordMixin, Base):
    """Blog post. Owns its image blob, its tag associations and its comments."""
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    content = Column(Text, nullable=True)
    image = Column(String(255), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(Integer, nullable=False, default=PostStatus.DRAFT)
    is_featured = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, default=datetime.now)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    @classmethod
    def add(cls, db: Session,
            fields: Union[PostFields, Mapping],
            author_id: Optional[int] = None) -> "Post":
        """Create a post from the allow-listed fields and persist it.

        The slug is derived from the title once, here. ``author_id`` is the
        acting user; without one the configured default author is used.
        """
        if not isinstance(fields, PostFields):
            fields = PostFields(**fields)
        post = cls(**fields.merged_fields())
        post.author_id = author_id if author_id is not None else config.DEFAULT_AUTHOR_ID
        post.slug = unique_slug(db, cls, post.title)
        post.save(db)
        logger.info("Created post %s (%s)", post.id, post.slug)
        return post

    def edit(self, db: Session, fields: Union[PostFields, Mapping]) -> "Post":
        """Overwrite the supplied allow-listed fields, keeping the rest"""
        if not isinstance(fields, PostFields):
            fields = PostFields(**fields)
        for name, value in fields.merged_fields().items():
            setattr(self, name, value)
        return self.save(db)

    def remove(self, db: Session, storage: LocalStorage):
        """Delete the image blob, then the post with its tag links and comments"""
        storage.delete(upload_path(self.image))
        post_id = self.id
        db.execute(delete(post_tags).where(post_tags.c.post_id == post_id))
        db.execute(delete(Comment).where(Comment.post_id == post_id))
        self.delete(db)
        logger.info("Removed post %s", post_id)

    def upload_image(self, db: Session, storage: LocalStorage, image) -> Optional["Post"]:
        """Store an uploaded image under a random name, replacing any previous one.

        ``image`` is an ``UploadFile`` or anything with ``filename`` and a
        readable ``file``. Nothing happens when it is None.
        """
        if image is None:
            return None

        storage.delete(upload_path(self.image))

        filename = image_filename(image.filename)
        storage.put(upload_path(filename), image.file.read())
        self.image = filename
        return self.save(db)

    def get_image(self) -> str:
        """Public path of the image, or the placeholder when there is none"""
        if self.image:
            return LocalStorage.url(upload_path(self.image))
        return NO_IMAGE_URL

    def set_category(self, db: Session, category_id: Optional[int]):
        if category_id is None:
            return None
        self.category_id = category_id
        return self.save(db)

    def set_tags(self, db: Session, tag_ids: Optional[Iterable[int]]):
        """Make the post's tags exactly tag_ids"""
        if tag_ids is None:
            return None

        wanted = set(tag_ids)
        current = set(db.scalars(
            select(post_tags.c.tag_id).where(post_tags.c.post_id == self.id)))

        removed = current - wanted
        added = wanted - current
        if removed:
            db.execute(delete(post_tags).where(post_tags.c.post_id == self.id,
                                               post_tags.c.tag_id.in_(sorted(removed))))
        if added:
            db.execute(insert(post_tags),
                       [{"post_id": self.id, "tag_id": tag_id} for tag_id in sorted(added)])
        db.commit()
        logger.debug("Post %s tags: +%s -%s", self.id, sorted(added), sorted(removed))
        return self

    def set_draft(self, db: Session):
        self.status = PostStatus.DRAFT
        return self.save(db)

    def set_public(self, db: Session):
        self.status = PostStatus.PUBLIC
        return self.save(db)

    def toggle_status(self, db: Session, value):
        """Set the status from a flag: falsy means draft, truthy means public.

        Despite the name this does not invert the current status.
        """
        if not value:
            return self.set_draft(db)
        return self.set_public(db)

    def set_featured(self, db: Session):
        self.is_featured = 1
        return self.save(db)

    def set_standard(self, db: Session):
        self.is_featured = 0
        return self.save(db)

    def toggle_featured(self, db: Session, value):
        """Set the featured flag from a flag, like toggle_status"""
        if not value:
            return self.set_standard(db)
        return self.set_featured(db)

    @property
    def is_public(self) -> bool:
        return self.status == PostStatus.PUBLIC

    @property
    def is_draft(self) -> bool:
        return self.status == PostStatus.DRAFT


class Comment(RecordMixin, Base):
    """Comment on a post, hidden until allowed."""
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    text = Column(Text, nullable=False)
    post_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    status = Column(Integer, nullable=False, default=CommentStatus.DISALLOWED)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def allow(self, db: Session):
        self.status = CommentStatus.ALLOWED
        logger.info("Comment %s allowed", self.id)
        return self.save(db)

    def dis_allow(self, db: Session):
        self.status = CommentStatus.DISALLOWED
        logger.info("Comment %s disallowed", self.id)
        return self.save(db)

    def toggle_status(self, db: Session):
        """Flip the comment between allowed and disallowed"""
        if self.status == CommentStatus.ALLOWED:
            return self.dis_allow(db)
        return self.allow(db)

    def remove(self, db: Session):
        self.delete(db)
