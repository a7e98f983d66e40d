# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

os.environ.setdefault("DATABASE_URL", "sqlite://")

from qa_review.db.session import build_engine, create_tables, drop_tables
from qa_review.db.session import get_db as app_get_session
from qa_review.main import app as fastapi_app
from qa_review.schemas.review import ReviewTarget
from qa_review.services import PostService, ReplyService, ReviewService

TEST_DB_URL = "sqlite://"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """A fresh in-memory database per test; foreign keys are enforced."""
    engine = build_engine(TEST_DB_URL)
    create_tables(bind=engine)
    try:
        yield engine
    finally:
        drop_tables(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def client(app: FastAPI, db_session: Session) -> Iterator[TestClient]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        with TestClient(app, base_url="http://test") as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def posts(db_session: Session) -> PostService:
    return PostService(db_session)


@pytest.fixture()
def replies(db_session: Session) -> ReplyService:
    return ReplyService(db_session)


@pytest.fixture()
def reviews(db_session: Session) -> ReviewService:
    return ReviewService(db_session)


@pytest.fixture()
def post_id(posts: PostService) -> int:
    """A question asked by alice."""
    return posts.create_post("alice", "Recursion basics", "How does a recursive call return?").id


@pytest.fixture()
def make_reply(replies: ReplyService, post_id: int) -> Callable[..., int]:
    """Factory creating a reply on the default post and returning its id."""

    def _make(author: str = "bob", body: str = "Each call returns to its caller.", **kwargs) -> int:
        return replies.create_reply(post_id, author, body, **kwargs).id

    return _make


@pytest.fixture()
def make_review(reviews: ReviewService, post_id: int) -> Callable[..., int]:
    """Factory creating a review of the default post and returning its id."""

    def _make(reviewer: str, content: str = "Clear and well explained.") -> int:
        return reviews.create_review(ReviewTarget.POST, post_id, reviewer, content).id

    return _make
