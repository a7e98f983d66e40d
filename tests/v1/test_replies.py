"""Tests for reply and like endpoints."""

import pytest
from fastapi import status


@pytest.fixture()
def post_id(client) -> int:
    response = client.post(
        "/api/v1/posts/",
        json={"author": "alice", "title": "Pointers", "body": "What does a null pointer mean?"},
    )
    return response.json()["id"]


def _reply(client, post_id: int, **overrides):
    payload = {"post_id": post_id, "author": "bob", "body": "It points at nothing."}
    payload.update(overrides)
    return client.post("/api/v1/replies/", json=payload)


def test_create_reply_and_list(client, post_id) -> None:
    response = _reply(client, post_id)
    assert response.status_code == status.HTTP_201_CREATED
    reply_id = response.json()["id"]

    listed = client.get(f"/api/v1/posts/{post_id}/replies", params={"viewer": "dave"}).json()
    assert [r["id"] for r in listed] == [reply_id]
    assert client.get(f"/api/v1/posts/{post_id}").json()["reply_count"] == 1


def test_private_reply_hidden_from_others(client, post_id) -> None:
    _reply(client, post_id, author="carol", body="Private hint for alice.", is_private=True)

    hidden = client.get(f"/api/v1/posts/{post_id}/replies", params={"viewer": "dave"}).json()
    shown = client.get(f"/api/v1/posts/{post_id}/replies", params={"viewer": "alice"}).json()
    assert hidden == []
    assert len(shown) == 1


def test_nested_replies(client, post_id) -> None:
    parent = _reply(client, post_id).json()["id"]
    child = _reply(client, post_id, author="carol", body="Nested remark.", parent_reply_id=parent).json()["id"]

    children = client.get(f"/api/v1/replies/{parent}/children", params={"viewer": "alice"}).json()
    assert [r["id"] for r in children] == [child]
    assert client.get(f"/api/v1/replies/{parent}").json()["nested_reply_count"] == 1


def test_reply_to_missing_parent(client, post_id) -> None:
    response = _reply(client, post_id, parent_reply_id=404)
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "E_CONSTRAINT"


def test_like_cycle(client, post_id) -> None:
    reply_id = _reply(client, post_id).json()["id"]

    liked = client.post(f"/api/v1/replies/{reply_id}/like", json={"username": "alice"})
    assert liked.status_code == status.HTTP_200_OK
    assert liked.json() == {"reply_id": reply_id, "like_count": 1}

    assert client.get(f"/api/v1/replies/{reply_id}/likes").json() == ["alice"]

    toggled = client.post(f"/api/v1/replies/{reply_id}/like/toggle", json={"username": "alice"})
    assert toggled.json()["like_count"] == 0

    client.post(f"/api/v1/replies/{reply_id}/like", json={"username": "carol"})
    removed = client.delete(f"/api/v1/replies/{reply_id}/like", params={"username": "carol"})
    assert removed.json()["like_count"] == 0


def test_self_like_rejected(client, post_id) -> None:
    reply_id = _reply(client, post_id).json()["id"]
    response = client.post(f"/api/v1/replies/{reply_id}/like", json={"username": "bob"})
    assert response.status_code == 422


def test_edit_and_delete_reply(client, post_id) -> None:
    reply_id = _reply(client, post_id).json()["id"]

    edited = client.put(f"/api/v1/replies/{reply_id}", json={"body": "It refers to no object."})
    assert edited.status_code == status.HTTP_204_NO_CONTENT

    assert client.delete(f"/api/v1/replies/{reply_id}").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/v1/replies/{reply_id}").status_code == status.HTTP_404_NOT_FOUND
    assert client.get(f"/api/v1/posts/{post_id}").json()["reply_count"] == 0


def test_replies_sorted_by_likes(client, post_id) -> None:
    first = _reply(client, post_id).json()["id"]
    second = _reply(client, post_id, author="carol", body="It has no target.").json()["id"]
    client.post(f"/api/v1/replies/{second}/like", json={"username": "alice"})
    child = _reply(client, post_id, author="dave", body="Check before use.", parent_reply_id=first)
    liked_child = _reply(client, post_id, author="erin", body="Or use optionals.", parent_reply_id=first)
    client.post(f"/api/v1/replies/{liked_child.json()['id']}/like", json={"username": "alice"})

    listed = client.get(
        f"/api/v1/posts/{post_id}/replies", params={"viewer": "alice", "sort": "likes"}
    ).json()
    assert [r["id"] for r in listed] == [second, first]

    children = client.get(
        f"/api/v1/replies/{first}/children", params={"viewer": "alice", "sort": "likes"}
    ).json()
    assert [r["id"] for r in children] == [liked_child.json()["id"], child.json()["id"]]


def test_unknown_sort_rejected(client, post_id) -> None:
    response = client.get(
        f"/api/v1/posts/{post_id}/replies", params={"viewer": "alice", "sort": "newest"}
    )
    assert response.status_code == 422
