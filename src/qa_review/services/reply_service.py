"""Reply engine: answers, nested replies, visibility and likes."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from qa_review.core.errors import ConstraintError, NotFound
from qa_review.db.session import atomic
from qa_review.models.reply import Reply
from qa_review.repositories.post_repo import PostRepository
from qa_review.repositories.reply_repo import ReplyRepository
from qa_review.repositories.review_repo import ReviewRepository
from qa_review.schemas.common import Created
from qa_review.schemas.reply import ReplyRecord, ReplySort
from qa_review.services.sanitizer import clean_for_storage

logger = logging.getLogger(__name__)


class ReplyService:
    """Creates, lists, edits and deletes replies and maintains their like-sets.

    Private replies are visible only to their author and to the author of
    the post they belong to.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.posts = PostRepository(db)
        self.replies = ReplyRepository(db)
        self.reviews = ReviewRepository(db)

    def create_reply(
        self,
        post_id: int,
        author: str,
        body: str,
        *,
        parent_reply_id: int | None = None,
        is_private: bool = False,
    ) -> Created:
        """Answer a post, or reply to an existing reply.

        When ``parent_reply_id`` is given the new reply always joins the
        parent's post, whatever ``post_id`` says, and the parent's nested
        counter is incremented. Otherwise the post's reply counter is.

        Raises:
            ValidationError: If the body is empty or too short.
            NotFound: If the post does not exist.
            ConstraintError: If the parent reply does not exist.
            StorageError: If the insert or counter update fails; neither persists.
        """
        clean = clean_for_storage(body, field="Answer")
        with atomic(self.db):
            if parent_reply_id is not None:
                parent = self.replies.get_by_id(parent_reply_id)
                if parent is None:
                    raise ConstraintError(f"Parent reply {parent_reply_id} not found")
                post_id = parent.post_id
            elif self.posts.get_by_id(post_id) is None:
                raise NotFound(f"Post {post_id} not found")

            reply = self.replies.create(
                post_id=post_id,
                author=author,
                body=clean.text,
                parent_reply_id=parent_reply_id,
                is_private=is_private,
            )
            if parent_reply_id is not None:
                self.replies.adjust_nested_count(parent_reply_id, 1)
            else:
                self.posts.adjust_reply_count(post_id, 1)
        logger.info("Reply %d created on post %d by %s", reply.id, post_id, author)
        return Created(id=reply.id, warnings=clean.warnings)

    def get_reply(self, reply_id: int) -> ReplyRecord:
        return ReplyRecord.model_validate(self._require(reply_id))

    def list_top_level_replies(
        self, post_id: int, viewer: str, sort: ReplySort = ReplySort.OLDEST
    ) -> list[ReplyRecord]:
        """Return the post's top-level replies visible to ``viewer``.

        ``ReplySort.OLDEST`` keeps creation order; ``ReplySort.LIKES`` puts the
        most liked first and keeps creation order among equal counts.
        """
        return [
            ReplyRecord.model_validate(reply)
            for reply in self.replies.list_top_level_visible(post_id, viewer, ReplySort(sort))
        ]

    def list_nested_replies(
        self, parent_reply_id: int, viewer: str, sort: ReplySort = ReplySort.OLDEST
    ) -> list[ReplyRecord]:
        """Return one level of children of a reply visible to ``viewer``.

        Callers recurse for deeper levels.
        """
        self._require(parent_reply_id)
        return [
            ReplyRecord.model_validate(reply)
            for reply in self.replies.list_children_visible(
                parent_reply_id, viewer, ReplySort(sort)
            )
        ]

    def edit_reply(self, reply_id: int, new_body: str) -> bool:
        """Replace a reply's body; False when the reply does not exist."""
        clean = clean_for_storage(new_body, field="Answer")
        with atomic(self.db):
            return self.replies.update_body(reply_id, clean.text)

    def delete_reply(self, reply_id: int) -> bool:
        """Delete a reply together with everything nested beneath it.

        Likes on the deleted replies, reviews targeting them and those
        reviews' feedback go too. The parent's counter is decremented.

        Returns:
            False when the reply does not exist.
        """
        with atomic(self.db):
            reply = self.replies.get_by_id(reply_id)
            if reply is None:
                return False
            parent_reply_id, post_id = reply.parent_reply_id, reply.post_id

            subtree = self.replies.subtree_ids(reply_id)
            review_ids = self.reviews.ids_for_targets(reply_ids=subtree)
            self.reviews.delete_many(review_ids)
            self.replies.delete_many(subtree)

            if parent_reply_id is not None:
                self.replies.adjust_nested_count(parent_reply_id, -1)
            else:
                self.posts.adjust_reply_count(post_id, -1)
        logger.info("Reply %d deleted with %d descendants", reply_id, len(subtree) - 1)
        return True

    # Likes

    def add_like(self, reply_id: int, username: str) -> int:
        """Add ``username`` to the like-set; already liked is a no-op.

        Returns:
            The reply's like count afterwards.

        Raises:
            NotFound: If the reply does not exist.
            ConstraintError: If the user is the reply's author.
        """
        with atomic(self.db):
            reply = self._likeable(reply_id, username)
            if not self.replies.has_like(reply_id, username):
                self.replies.add_like(reply_id, username)
                return self.replies.sync_like_count(reply_id)
            return reply.like_count

    def remove_like(self, reply_id: int, username: str) -> int:
        """Remove ``username`` from the like-set; not liked is a no-op."""
        with atomic(self.db):
            reply = self._require(reply_id)
            if self.replies.remove_like(reply_id, username):
                return self.replies.sync_like_count(reply_id)
            return reply.like_count

    def toggle_like(self, reply_id: int, username: str) -> int:
        """Like the reply if ``username`` has not yet, otherwise unlike it."""
        if self.has_liked(reply_id, username):
            return self.remove_like(reply_id, username)
        return self.add_like(reply_id, username)

    def has_liked(self, reply_id: int, username: str) -> bool:
        return self.replies.has_like(reply_id, username)

    def list_likers(self, reply_id: int) -> list[str]:
        self._require(reply_id)
        return self.replies.list_likers(reply_id)

    def _require(self, reply_id: int) -> Reply:
        reply = self.replies.get_by_id(reply_id)
        if reply is None:
            raise NotFound(f"Reply {reply_id} not found")
        return reply

    def _likeable(self, reply_id: int, username: str) -> Reply:
        reply = self._require(reply_id)
        if reply.author == username:
            raise ConstraintError("Authors cannot like their own reply")
        return reply
