import asyncio
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import Settings
from app.db.progress import ProgressStore
from app.main import create_app
from app.models.progress import Progress, ReviewedFlashcard


def test_progress_requires_session(client: TestClient) -> None:
    assert client.get("/api/progress").status_code == 401
    assert client.post("/api/progress/quiz", json={"quizId": "q1", "score": 80}).status_code == 401
    assert client.post("/api/progress/flashcard", json={"cardId": "c1"}).status_code == 401


def test_fresh_progress_has_zero_counters(client: TestClient, register_user) -> None:
    user_id = register_user().json()["user"]["id"]

    resp = client.get("/api/progress")
    assert resp.status_code == 200
    progress = resp.json()["progress"]
    assert progress["userId"] == user_id
    assert progress["quizzesCompleted"] == 0
    assert progress["quizScores"] == []
    assert progress["flashcardsReviewed"] == 0
    assert progress["reviewedFlashcards"] == []
    assert progress["streak"] == 0
    assert progress["lastActive"]


def test_record_quiz_appends_in_call_order(client: TestClient, register_user) -> None:
    register_user()
    submissions = [("phishing-101", 80), ("passwords", 65.5), ("phishing-101", 100)]

    for quiz_id, score in submissions:
        resp = client.post("/api/progress/quiz", json={"quizId": quiz_id, "score": score})
        assert resp.status_code == 200

    progress = resp.json()["progress"]
    assert progress["quizzesCompleted"] == 3
    assert [(s["quizId"], s["score"]) for s in progress["quizScores"]] == submissions
    completed = [datetime.fromisoformat(s["completedAt"]) for s in progress["quizScores"]]
    assert completed == sorted(completed)


def test_record_quiz_accepts_any_score(client: TestClient, register_user) -> None:
    register_user()
    resp = client.post("/api/progress/quiz", json={"quizId": "unknown-quiz", "score": -42})
    assert resp.status_code == 200
    assert resp.json()["progress"]["quizScores"][0]["score"] == -42


def test_flashcard_rereview_is_idempotent(client: TestClient, register_user, count_rows) -> None:
    register_user()

    first = client.post("/api/progress/flashcard", json={"cardId": "card-7"}).json()["progress"]
    second = client.post("/api/progress/flashcard", json={"cardId": "card-7"}).json()["progress"]

    assert first["flashcardsReviewed"] == 1
    assert second["flashcardsReviewed"] == 1
    assert len(second["reviewedFlashcards"]) == 1
    assert second["reviewedFlashcards"][0]["cardId"] == "card-7"
    first_seen = datetime.fromisoformat(first["reviewedFlashcards"][0]["lastReviewed"])
    second_seen = datetime.fromisoformat(second["reviewedFlashcards"][0]["lastReviewed"])
    assert second_seen >= first_seen
    assert count_rows(ReviewedFlashcard) == 1


def test_flashcard_distinct_cards_are_counted(client: TestClient, register_user) -> None:
    register_user()
    for card_id in ["a", "b", "a", "c", "b"]:
        resp = client.post("/api/progress/flashcard", json={"cardId": card_id})
        assert resp.status_code == 200

    progress = resp.json()["progress"]
    assert progress["flashcardsReviewed"] == 3
    assert [c["cardId"] for c in progress["reviewedFlashcards"]] == ["a", "b", "c"]


def test_progress_is_scoped_per_user(client: TestClient, register_user) -> None:
    register_user()
    client.post("/api/progress/quiz", json={"quizId": "q1", "score": 90})
    client.cookies.clear()

    register_user(name="Bob", email="bob@example.com")
    progress = client.get("/api/progress").json()["progress"]
    assert progress["quizzesCompleted"] == 0


def test_missing_progress_is_recreated(client: TestClient, app, register_user, count_rows) -> None:
    register_user()

    async def _drop_progress() -> None:
        async with app.state.sessionmaker() as db:
            await db.execute(delete(Progress))
            await db.commit()

    client.portal.call(_drop_progress)
    assert count_rows(Progress) == 0

    resp = client.post("/api/progress/flashcard", json={"cardId": "card-1"})
    assert resp.status_code == 200
    assert resp.json()["progress"]["flashcardsReviewed"] == 1
    assert count_rows(Progress) == 1


def test_login_touches_last_active(client: TestClient, register_user) -> None:
    register_user()
    before = datetime.fromisoformat(client.get("/api/progress").json()["progress"]["lastActive"])

    client.post("/api/auth/login", json={"email": "alice@example.com", "password": "Sup3r-secret"})
    after = datetime.fromisoformat(client.get("/api/progress").json()["progress"]["lastActive"])
    assert after >= before


def test_store_failure_is_a_generic_500(client: TestClient, register_user, monkeypatch) -> None:
    register_user()

    async def _boom(self, user_id, now):
        raise SQLAlchemyError("connection refused to db-internal-host:5432")

    monkeypatch.setattr(ProgressStore, "get_or_create", _boom)

    resp = client.get("/api/progress")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Server error", "error": "InternalError"}
    assert "db-internal-host" not in resp.text


@pytest.fixture(name="file_client")
def file_client_fixture(tmp_path):
    # a file database gives every session its own connection
    settings = Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'cyberguard.db'}",
        secret_key="test-secret-key",
        log_level="WARNING",
    )
    with TestClient(create_app(settings)) as client:
        yield client


def _review_concurrently(client: TestClient, user_id: str, card_ids: list[str]) -> tuple[int, int]:
    sessionmaker = client.app.state.sessionmaker

    async def _review(card_id: str) -> None:
        async with sessionmaker() as db:
            await ProgressStore(db).upsert_flashcard(user_id, card_id, datetime.now(timezone.utc))

    async def _run() -> tuple[int, int]:
        await asyncio.gather(*(_review(card_id) for card_id in card_ids))
        async with sessionmaker() as db:
            rows = await db.scalar(select(func.count()).select_from(ReviewedFlashcard))
            counter = await db.scalar(select(Progress.flashcards_reviewed).where(Progress.user_id == user_id))
        return rows, counter

    return client.portal.call(_run)


def test_concurrent_reviews_of_one_card_count_once(file_client: TestClient) -> None:
    resp = file_client.post(
        "/api/auth/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "Sup3r-secret"},
    )
    user_id = resp.json()["user"]["id"]

    rows, counter = _review_concurrently(file_client, user_id, ["card-1"] * 5)
    assert rows == 1
    assert counter == 1


def test_concurrent_reviews_of_different_cards_all_count(file_client: TestClient) -> None:
    resp = file_client.post(
        "/api/auth/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "Sup3r-secret"},
    )
    user_id = resp.json()["user"]["id"]

    card_ids = [f"card-{i}" for i in range(5)]
    rows, counter = _review_concurrently(file_client, user_id, card_ids)
    assert rows == 5
    assert counter == 5

    progress = file_client.get("/api/progress").json()["progress"]
    assert progress["flashcardsReviewed"] == 5
    assert sorted(c["cardId"] for c in progress["reviewedFlashcards"]) == card_ids
