"""Repositories: the only code that issues SQL against the content store."""

from .post_repo import PostRepository
from .registry_repo import RegistryRepository
from .reply_repo import ReplyRepository
from .review_repo import ReviewRepository
from .user_repo import UserRepository

__all__ = [
    "PostRepository",
    "RegistryRepository",
    "ReplyRepository",
    "ReviewRepository",
    "UserRepository",
]
