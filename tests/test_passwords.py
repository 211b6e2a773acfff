import pytest
from fastapi.testclient import TestClient

from app.services.passwords import (
    FALLBACK_CHARS,
    LOWERCASE,
    NUMBERS,
    SYMBOLS,
    UPPERCASE,
    check_strength,
    generate_password,
)


@pytest.mark.parametrize(
    "password, score, strength",
    [
        ("", 0, "Weak"),
        ("abc", 1, "Weak"),
        ("abcdef12", 2, "Weak"),
        ("abcdefghijk1", 3, "Moderate"),
        ("Abcdefgh1234", 4, "Strong"),
        ("Abcdefgh1234!", 5, "Strong"),
    ],
)
def test_check_strength(password: str, score: int, strength: str) -> None:
    result = check_strength(password)
    assert result.score == score
    assert result.strength == strength


def test_check_strength_lists_each_criterion() -> None:
    result = check_strength("abc")
    assert [c.label for c in result.checks] == [
        "At least 12 characters",
        "Contains uppercase letter",
        "Contains lowercase letter",
        "Contains number",
        "Contains special character",
    ]
    assert [c.passed for c in result.checks] == [False, False, True, False, False]


def test_space_counts_as_special_character() -> None:
    assert check_strength("a b").checks[4].passed


def test_generate_without_symbols() -> None:
    for _ in range(200):
        password = generate_password(length=20, symbols=False)
        assert len(password) == 20
        assert not any(ch in SYMBOLS for ch in password)


def test_generate_covers_every_selected_class() -> None:
    for _ in range(200):
        password = generate_password(length=4)
        assert any(ch in UPPERCASE for ch in password)
        assert any(ch in LOWERCASE for ch in password)
        assert any(ch in NUMBERS for ch in password)
        assert any(ch in SYMBOLS for ch in password)


def test_generate_single_class() -> None:
    password = generate_password(length=32, uppercase=False, lowercase=False, symbols=False)
    assert password.isdigit()
    assert len(password) == 32


def test_generate_falls_back_when_nothing_selected() -> None:
    password = generate_password(length=24, uppercase=False, lowercase=False, numbers=False, symbols=False)
    assert len(password) == 24
    assert set(password) <= set(FALLBACK_CHARS)


def test_check_endpoint(client: TestClient) -> None:
    resp = client.post("/api/password/check", json={"password": "Abcdefgh1234!"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["score"] == 5
    assert body["strength"] == "Strong"
    assert len(body["checks"]) == 5


def test_generate_endpoint_defaults(client: TestClient) -> None:
    resp = client.get("/api/password/generate")
    assert resp.status_code == 200
    assert len(resp.json()["password"]) == 16


def test_generate_endpoint_flags(client: TestClient) -> None:
    resp = client.get(
        "/api/password/generate",
        params={"length": 20, "symbols": "false", "uppercase": "no"},
    )
    password = resp.json()["password"]
    assert len(password) == 20
    assert not any(ch in SYMBOLS for ch in password)
    # anything other than the literal "false" leaves a class enabled
    assert any(ch in UPPERCASE for ch in password)


def test_generate_endpoint_rejects_bad_length(client: TestClient) -> None:
    assert client.get("/api/password/generate", params={"length": 2}).status_code == 422
    assert client.get("/api/password/generate", params={"length": 1000}).status_code == 422
