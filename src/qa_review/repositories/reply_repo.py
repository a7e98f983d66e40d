"""Data access helpers for replies and their like-sets."""
from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import Session

from qa_review.models.post import Post
from qa_review.models.reply import Reply, ReplyLike
from qa_review.schemas.reply import ReplySort

__all__ = ["ReplyRepository"]


class ReplyRepository:
    """Database access for reply rows, nesting counters and likes."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, reply_id: int) -> Reply | None:
        """Return a reply by identifier."""
        return self.session.get(Reply, reply_id)

    def create(
        self,
        *,
        post_id: int,
        author: str,
        body: str,
        parent_reply_id: int | None,
        is_private: bool,
    ) -> Reply:
        """Insert a reply and flush so its identifier is assigned."""
        reply = Reply(
            post_id=post_id,
            parent_reply_id=parent_reply_id,
            author=author,
            body=body,
            is_private=is_private,
            like_count=0,
            nested_reply_count=0,
        )
        self.session.add(reply)
        self.session.flush()
        return reply

    def _visible_to(self, viewer: str):
        return or_(
            Reply.is_private.is_(False),
            Reply.author == viewer,
            Post.author == viewer,
        )

    def _ordering(self, sort: ReplySort):
        if sort is ReplySort.LIKES:
            return (Reply.like_count.desc(), Reply.id.asc())
        return (Reply.id.asc(),)

    def list_top_level_visible(
        self, post_id: int, viewer: str, sort: ReplySort = ReplySort.OLDEST
    ) -> list[Reply]:
        """Return top-level replies on a post that ``viewer`` may see."""
        stmt = (
            select(Reply)
            .join(Post, Reply.post_id == Post.id)
            .where(
                Reply.post_id == post_id,
                Reply.parent_reply_id.is_(None),
                self._visible_to(viewer),
            )
            .order_by(*self._ordering(sort))
        )
        return list(self.session.execute(stmt).scalars())

    def list_children_visible(
        self, parent_reply_id: int, viewer: str, sort: ReplySort = ReplySort.OLDEST
    ) -> list[Reply]:
        """Return direct children of a reply that ``viewer`` may see."""
        stmt = (
            select(Reply)
            .join(Post, Reply.post_id == Post.id)
            .where(
                Reply.parent_reply_id == parent_reply_id,
                self._visible_to(viewer),
            )
            .order_by(*self._ordering(sort))
        )
        return list(self.session.execute(stmt).scalars())

    def update_body(self, reply_id: int, body: str) -> bool:
        result = self.session.execute(
            update(Reply).where(Reply.id == reply_id).values(body=body)
        )
        return result.rowcount > 0

    def adjust_nested_count(self, reply_id: int, delta: int) -> bool:
        """Shift the nested-reply counter in a single UPDATE statement."""
        result = self.session.execute(
            update(Reply)
            .where(Reply.id == reply_id)
            .values(nested_reply_count=Reply.nested_reply_count + delta)
        )
        return result.rowcount > 0

    def subtree_ids(self, reply_id: int) -> list[int]:
        """Return ``reply_id`` and the ids of every reply nested beneath it."""
        collected = [reply_id]
        frontier = [reply_id]
        while frontier:
            children = list(
                self.session.execute(
                    select(Reply.id).where(Reply.parent_reply_id.in_(frontier))
                ).scalars()
            )
            collected.extend(children)
            frontier = children
        return collected

    def ids_for_post(self, post_id: int) -> list[int]:
        return list(
            self.session.execute(select(Reply.id).where(Reply.post_id == post_id)).scalars()
        )

    def delete_many(self, reply_ids: Collection[int]) -> int:
        """Delete replies and their like rows; returns the number of replies removed."""
        if not reply_ids:
            return 0
        self.session.execute(delete(ReplyLike).where(ReplyLike.reply_id.in_(reply_ids)))
        result = self.session.execute(delete(Reply).where(Reply.id.in_(reply_ids)))
        return result.rowcount

    # Likes

    def has_like(self, reply_id: int, username: str) -> bool:
        return self.session.get(ReplyLike, (reply_id, username)) is not None

    def add_like(self, reply_id: int, username: str) -> None:
        self.session.add(ReplyLike(reply_id=reply_id, username=username))
        self.session.flush()

    def remove_like(self, reply_id: int, username: str) -> bool:
        result = self.session.execute(
            delete(ReplyLike).where(
                ReplyLike.reply_id == reply_id,
                ReplyLike.username == username,
            )
        )
        return result.rowcount > 0

    def list_likers(self, reply_id: int) -> list[str]:
        return list(
            self.session.execute(
                select(ReplyLike.username)
                .where(ReplyLike.reply_id == reply_id)
                .order_by(ReplyLike.username.asc())
            ).scalars()
        )

    def sync_like_count(self, reply_id: int) -> int:
        """Rewrite ``like_count`` from the like-set and return the new value."""
        count = self.session.execute(
            select(func.count()).select_from(ReplyLike).where(ReplyLike.reply_id == reply_id)
        ).scalar_one()
        self.session.execute(
            update(Reply).where(Reply.id == reply_id).values(like_count=count)
        )
        return count
