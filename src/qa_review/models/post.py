"""SQLAlchemy model for questions posted to the forum."""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from qa_review.db.session import Base


class Post(Base):
    """A question asked by a student.

    ``reply_count`` tracks top-level replies only and is maintained by the
    reply engine; callers never write it directly.
    """

    __tablename__ = "post"
    __table_args__ = (Index("ix_post_author", "author"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    reply_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
