"""Explicit lookups of posts, comments and the records they point to."""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

import models


def get_post_by_id(db: Session, post_id: int) -> Optional[models.Post]:
    """Retrieve a post from the database by its ID"""
    return db.query(models.Post).filter(models.Post.id == post_id).first()


def get_post_by_slug(db: Session, slug: str) -> Optional[models.Post]:
    """Retrieve a post from the database by its slug"""
    return db.query(models.Post).filter(models.Post.slug == slug).first()


def get_comment_by_id(db: Session, comment_id: int) -> Optional[models.Comment]:
    """Retrieve a comment from the database by its ID"""
    return db.query(models.Comment).filter(models.Comment.id == comment_id).first()


def find_author_for(db: Session, post_id: int) -> Optional[models.User]:
    """Retrieve the author of a post"""
    return (db.query(models.User)
            .join(models.Post, models.Post.author_id == models.User.id)
            .filter(models.Post.id == post_id)
            .first())


def find_category_for(db: Session, post_id: int) -> Optional[models.Category]:
    """Retrieve the category of a post, None when it has none"""
    return (db.query(models.Category)
            .join(models.Post, models.Post.category_id == models.Category.id)
            .filter(models.Post.id == post_id)
            .first())


def list_tags_for(db: Session, post_id: int) -> List[models.Tag]:
    """Retrieve the tags linked to a post through the join table"""
    stmt = (select(models.Tag)
            .join(models.post_tags, models.post_tags.c.tag_id == models.Tag.id)
            .where(models.post_tags.c.post_id == post_id)
            .order_by(models.Tag.id))
    return list(db.scalars(stmt))


def list_comments_for(db: Session, post_id: int, allowed_only: bool = False) -> List[models.Comment]:
    """Retrieve the comments on a post, oldest first"""
    query = db.query(models.Comment).filter(models.Comment.post_id == post_id)
    if allowed_only:
        query = query.filter(models.Comment.status == models.CommentStatus.ALLOWED)
    return query.order_by(models.Comment.id).all()


def find_post_for_comment(db: Session, comment_id: int) -> Optional[models.Post]:
    """Retrieve the post a comment belongs to"""
    return (db.query(models.Post)
            .join(models.Comment, models.Comment.post_id == models.Post.id)
            .filter(models.Comment.id == comment_id)
            .first())


def find_author_for_comment(db: Session, comment_id: int) -> Optional[models.User]:
    """Retrieve the author of a comment"""
    return (db.query(models.User)
            .join(models.Comment, models.Comment.author_id == models.User.id)
            .filter(models.Comment.id == comment_id)
            .first())
