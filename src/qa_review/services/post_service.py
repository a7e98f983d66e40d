"""Service-level helpers for creating, editing and deleting posts."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from qa_review.core.errors import NotFound
from qa_review.db.session import atomic
from qa_review.repositories.post_repo import PostRepository
from qa_review.repositories.reply_repo import ReplyRepository
from qa_review.repositories.review_repo import ReviewRepository
from qa_review.schemas.common import Created
from qa_review.schemas.post import PostRecord
from qa_review.services.sanitizer import clean_question

logger = logging.getLogger(__name__)


class PostService:
    """Questions asked on the forum."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.posts = PostRepository(db)
        self.replies = ReplyRepository(db)
        self.reviews = ReviewRepository(db)

    def create_post(self, author: str, title: str, body: str) -> Created:
        """Create a post after running the title and body through the content policy.

        Raises:
            ValidationError: If the title or body is blank, too short or too long.
        """
        clean_title, clean_body = clean_question(title, body)
        with atomic(self.db):
            post = self.posts.create(author=author, title=clean_title.text, body=clean_body.text)
        logger.info("Post %d created by %s", post.id, author)
        return Created(id=post.id, warnings=clean_title.warnings + clean_body.warnings)

    def get_post(self, post_id: int) -> PostRecord:
        post = self.posts.get_by_id(post_id)
        if post is None:
            raise NotFound(f"Post {post_id} not found")
        return PostRecord.model_validate(post)

    def list_posts(self) -> list[PostRecord]:
        return [PostRecord.model_validate(post) for post in self.posts.list_all()]

    def list_posts_by_author(self, author: str) -> list[PostRecord]:
        return [PostRecord.model_validate(post) for post in self.posts.list_by_author(author)]

    def list_answered_posts(self) -> list[PostRecord]:
        return [PostRecord.model_validate(post) for post in self.posts.list_answered()]

    def search_posts(self, keyword: str) -> list[PostRecord]:
        """Return posts whose title or body contains ``keyword``, ignoring case."""
        return [PostRecord.model_validate(post) for post in self.posts.search(keyword)]

    def edit_post(self, post_id: int, title: str, body: str) -> bool:
        """Replace a post's title and body; False when the post does not exist."""
        clean_title, clean_body = clean_question(title, body)
        with atomic(self.db):
            return self.posts.update_content(
                post_id, title=clean_title.text, body=clean_body.text
            )

    def delete_post(self, post_id: int) -> bool:
        """Delete a post with its replies, likes, reviews and feedback.

        Returns:
            False when the post does not exist.
        """
        with atomic(self.db):
            if self.posts.get_by_id(post_id) is None:
                return False
            reply_ids = self.replies.ids_for_post(post_id)
            review_ids = self.reviews.ids_for_targets(post_ids=[post_id], reply_ids=reply_ids)
            self.reviews.delete_many(review_ids)
            self.replies.delete_many(reply_ids)
            self.posts.delete(post_id)
        logger.info(
            "Post %d deleted with %d replies and %d reviews",
            post_id,
            len(reply_ids),
            len(review_ids),
        )
        return True
