"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from qa_review.models.post import Post

__all__ = ["PostRepository", "escape_like"]


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` matches literally under a backslash escape."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def list_all(self) -> list[Post]:
        """Return every post in creation order."""
        result = self.session.execute(select(Post).order_by(Post.id.asc()))
        return list(result.scalars())

    def list_by_author(self, author: str) -> list[Post]:
        result = self.session.execute(
            select(Post).where(Post.author == author).order_by(Post.id.asc())
        )
        return list(result.scalars())

    def list_answered(self) -> list[Post]:
        """Return posts with at least one top-level reply."""
        result = self.session.execute(
            select(Post).where(Post.reply_count > 0).order_by(Post.id.asc())
        )
        return list(result.scalars())

    def search(self, keyword: str) -> list[Post]:
        """Return posts whose title or body contains ``keyword`` (case-insensitive)."""
        pattern = f"%{escape_like(keyword.lower())}%"
        result = self.session.execute(
            select(Post)
            .where(
                or_(
                    func.lower(Post.title).like(pattern, escape="\\"),
                    func.lower(Post.body).like(pattern, escape="\\"),
                )
            )
            .order_by(Post.id.asc())
        )
        return list(result.scalars())

    def create(self, *, author: str, title: str, body: str) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(author=author, title=title, body=body, reply_count=0)
        self.session.add(post)
        self.session.flush()
        return post

    def update_content(self, post_id: int, *, title: str, body: str) -> bool:
        result = self.session.execute(
            update(Post).where(Post.id == post_id).values(title=title, body=body)
        )
        return result.rowcount > 0

    def adjust_reply_count(self, post_id: int, delta: int) -> bool:
        """Shift the top-level reply counter in a single UPDATE statement."""
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id)
            .values(reply_count=Post.reply_count + delta)
        )
        return result.rowcount > 0

    def delete(self, post_id: int) -> bool:
        result = self.session.execute(delete(Post).where(Post.id == post_id))
        return result.rowcount > 0
