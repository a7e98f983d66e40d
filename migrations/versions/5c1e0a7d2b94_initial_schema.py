"""initial review schema

Revision ID: 5c1e0a7d2b94
Revises:
Create Date: 2026-10-19 09:12:41.310552

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "5c1e0a7d2b94"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create posts, replies, reviews, the reviewer registry and role tables."""
    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_author", "post", ["author"])

    op.create_table(
        "reply",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("parent_reply_id", sa.Integer(), nullable=True),
        sa.Column("author", sa.String(length=255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("is_private", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("nested_reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_reply_id"], ["reply.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_reply_post_id", "reply", ["post_id"])
    op.create_index("ix_reply_parent_reply_id", "reply", ["parent_reply_id"])

    op.create_table(
        "reply_like",
        sa.Column("reply_id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(["reply_id"], ["reply.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("reply_id", "username"),
    )

    op.create_table(
        "review",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=True),
        sa.Column("reply_id", sa.Integer(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("reviewer_name", sa.String(length=255), nullable=False),
        sa.Column("feedback_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("previous_review_id", sa.Integer(), nullable=True),
        sa.CheckConstraint(
            "(post_id IS NULL) <> (reply_id IS NULL)", name="ck_review_single_target"
        ),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["reply_id"], ["reply.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["previous_review_id"], ["review.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_review_post_id", "review", ["post_id"])
    op.create_index("ix_review_reply_id", "review", ["reply_id"])
    op.create_index("ix_review_reviewer_name", "review", ["reviewer_name"])

    op.create_table(
        "review_feedback",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("review_id", sa.Integer(), nullable=False),
        sa.Column("sender", sa.String(length=255), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("ordinal", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["review_id"], ["review.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("review_id", "ordinal", name="uq_review_feedback_ordinal"),
    )

    op.create_table(
        "reviewer_experience",
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("experience", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("username"),
    )

    op.create_table(
        "trusted_reviewer",
        sa.Column("student", sa.String(length=255), nullable=False),
        sa.Column("reviewer", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("student", "reviewer"),
    )
    op.create_table(
        "reviewer_weight",
        sa.Column("student", sa.String(length=255), nullable=False),
        sa.Column("reviewer", sa.String(length=255), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=False),
        sa.CheckConstraint("weight >= 0", name="ck_reviewer_weight_non_negative"),
        sa.PrimaryKeyConstraint("student", "reviewer"),
    )
    op.create_table(
        "reviewer_rating",
        sa.Column("student", sa.String(length=255), nullable=False),
        sa.Column("reviewer", sa.String(length=255), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("student", "reviewer"),
    )

    op.create_table(
        "user_account",
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint("username"),
    )
    op.create_table(
        "reviewer_request",
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="pending"),
        sa.PrimaryKeyConstraint("username"),
    )


def downgrade() -> None:
    """Drop every table created by this revision."""
    op.drop_table("reviewer_request")
    op.drop_table("user_account")
    op.drop_table("reviewer_rating")
    op.drop_table("reviewer_weight")
    op.drop_table("trusted_reviewer")
    op.drop_table("reviewer_experience")
    op.drop_table("review_feedback")
    op.drop_index("ix_review_reviewer_name", table_name="review")
    op.drop_index("ix_review_reply_id", table_name="review")
    op.drop_index("ix_review_post_id", table_name="review")
    op.drop_table("review")
    op.drop_table("reply_like")
    op.drop_index("ix_reply_parent_reply_id", table_name="reply")
    op.drop_index("ix_reply_post_id", table_name="reply")
    op.drop_table("reply")
    op.drop_index("ix_post_author", table_name="post")
    op.drop_table("post")
