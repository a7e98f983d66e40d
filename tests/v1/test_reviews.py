"""Tests for review, version and feedback endpoints."""

import pytest
from fastapi import status


@pytest.fixture()
def post_id(client) -> int:
    response = client.post(
        "/api/v1/posts/",
        json={"author": "alice", "title": "Big O", "body": "Is binary search logarithmic?"},
    )
    return response.json()["id"]


def _review(client, post_id: int, reviewer: str = "rev", content: str = "Well framed question."):
    return client.post(
        "/api/v1/reviews/",
        json={
            "target_kind": "post",
            "target_id": post_id,
            "reviewer_name": reviewer,
            "content": content,
        },
    )


def test_create_and_get_review(client, post_id) -> None:
    response = _review(client, post_id)
    assert response.status_code == status.HTTP_201_CREATED
    review_id = response.json()["id"]

    data = client.get(f"/api/v1/reviews/{review_id}").json()
    assert data["target_kind"] == "post"
    assert data["target_id"] == post_id
    assert data["previous_review_id"] is None


def test_review_missing_target(client) -> None:
    response = _review(client, 321)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_versioning(client, post_id) -> None:
    v1 = _review(client, post_id).json()["id"]

    response = client.post(f"/api/v1/reviews/{v1}/versions", json={"content": "Revised review text."})
    assert response.status_code == status.HTTP_201_CREATED
    v2 = response.json()["id"]

    chain = client.get(f"/api/v1/reviews/{v2}/versions").json()
    assert [r["id"] for r in chain] == [v2, v1]
    assert client.get(f"/api/v1/reviews/{v2}/previous").json()["id"] == v1
    assert client.get(f"/api/v1/reviews/{v1}/previous").status_code == status.HTTP_404_NOT_FOUND
    assert client.get(f"/api/v1/reviews/{v1}/latest").json()["id"] == v2

    again = client.post(f"/api/v1/reviews/{v1}/versions", json={"content": "A second revision."})
    assert again.status_code == status.HTTP_201_CREATED
    v3 = again.json()["id"]
    assert client.get(f"/api/v1/reviews/{v3}/previous").json()["id"] == v1

    latest = client.get(f"/api/v1/posts/{post_id}/reviews", params={"latest_only": True}).json()
    assert [r["id"] for r in latest] == [v2, v3]


def test_feedback_thread(client, post_id) -> None:
    review_id = _review(client, post_id).json()["id"]

    response = client.post(
        f"/api/v1/reviews/{review_id}/feedback",
        json={"sender": "alice", "message": "Thanks for the notes."},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {"ok": True}

    thread = client.get(f"/api/v1/reviews/{review_id}/feedback").json()
    assert [(f["ordinal"], f["sender"]) for f in thread] == [(1, "alice")]
    assert client.get(f"/api/v1/reviews/{review_id}").json()["feedback_count"] == 1

    blank = client.post(
        f"/api/v1/reviews/{review_id}/feedback",
        json={"sender": "alice", "message": " "},
    )
    assert blank.status_code == status.HTTP_400_BAD_REQUEST


def test_reviewer_profile(client, post_id) -> None:
    _review(client, post_id)
    updated = client.put("/api/v1/reviewers/rev/experience", json={"experience": "Former tutor."})
    assert updated.json() == {"ok": True}

    profile = client.get("/api/v1/reviewers/rev").json()
    assert profile == {"username": "rev", "experience": "Former tutor.", "review_count": 1}
    assert len(client.get("/api/v1/reviewers/rev/reviews").json()) == 1
