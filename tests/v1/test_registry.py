"""Tests for registry endpoints and per-student rankings."""

import pytest
from fastapi import status


@pytest.fixture()
def reviewed_post(client) -> int:
    post_id = client.post(
        "/api/v1/posts/",
        json={"author": "alice", "title": "Hashing", "body": "Why do hash maps resize?"},
    ).json()["id"]
    for reviewer in ("r1", "r2", "r3"):
        client.post(
            "/api/v1/reviews/",
            json={
                "target_kind": "post",
                "target_id": post_id,
                "reviewer_name": reviewer,
                "content": f"Notes from {reviewer}.",
            },
        )
    return post_id


def test_duplicate_trust_is_conflict(client) -> None:
    payload = {"student": "stu", "reviewer": "r1"}
    assert client.post("/api/v1/registry/trust", json=payload).status_code == status.HTTP_201_CREATED

    duplicate = client.post("/api/v1/registry/trust", json=payload)
    assert duplicate.status_code == status.HTTP_409_CONFLICT
    assert duplicate.json()["error"]["code"] == "E_DUPLICATE"

    assert client.get("/api/v1/registry/stu/trusted").json() == ["r1"]

    removed = client.delete("/api/v1/registry/trust", params=payload)
    assert removed.status_code == status.HTTP_204_NO_CONTENT
    assert client.delete("/api/v1/registry/trust", params=payload).status_code == status.HTTP_404_NOT_FOUND


def test_negative_weight_is_constraint_error(client) -> None:
    response = client.put(
        "/api/v1/registry/weights",
        json={"student": "stu", "reviewer": "r1", "weight": -2},
    )
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "E_CONSTRAINT"


def test_rankings(client, reviewed_post) -> None:
    client.put("/api/v1/registry/weights", json={"student": "stu", "reviewer": "r3", "weight": 9})
    client.put("/api/v1/registry/ratings", json={"student": "stu", "reviewer": "r2", "rating": 5})
    client.post("/api/v1/registry/trust", json={"student": "stu", "reviewer": "r1"})

    base = f"/api/v1/registry/stu/reviews/post/{reviewed_post}"
    by_weight = client.get(base).json()
    assert [r["reviewer_name"] for r in by_weight] == ["r3", "r1", "r2"]

    by_rating = client.get(base, params={"order": "rating"}).json()
    assert [r["reviewer_name"] for r in by_rating] == ["r2", "r1", "r3"]

    trusted = client.get(base, params={"order": "trusted"}).json()
    assert [r["reviewer_name"] for r in trusted] == ["r1"]

    assert client.get("/api/v1/registry/stu/reviewers").json() == ["r1", "r2", "r3"]
    assert client.get("/api/v1/registry/stu/top-reviewers").json() == ["r2"]
