"""Models for answers, nested replies and their likes."""

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from qa_review.db.session import Base


class Reply(Base):
    """An answer to a post, or a reply nested under another reply.

    Top-level replies have ``parent_reply_id = NULL``. A nested reply always
    carries the ``post_id`` of its parent.
    """

    __tablename__ = "reply"
    __table_args__ = (
        Index("ix_reply_post_id", "post_id"),
        Index("ix_reply_parent_reply_id", "parent_reply_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    parent_reply_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("reply.id", ondelete="CASCADE"),
        nullable=True,
    )
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    is_private: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Denormalised counters; like_count always equals the reply_like row count.
    like_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    nested_reply_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)


class ReplyLike(Base):
    """Membership row in a reply's like-set."""

    __tablename__ = "reply_like"

    # Composite primary key prevents the same user liking a reply twice.
    reply_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reply.id", ondelete="CASCADE"),
        primary_key=True,
    )
    username: Mapped[str] = mapped_column(String(255), primary_key=True)
