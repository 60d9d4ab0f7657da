from fastapi.testclient import TestClient
from conftest import make_settings
from mon_ai.core.default_vocabulary import DEFAULT_VOCABULARY
from mon_ai.main import create_app


def test_default_vocabulary_is_seeded(test_client):
    response = test_client.get("/api/vocab")

    assert response.status_code == 200
    data = response.json()
    assert data["i"] == "အဲ"
    assert data["wait for"] == "မၚ်"
    assert len(data) == len(DEFAULT_VOCABULARY)


def test_learn_new_word_then_repeat(test_client):
    response = test_client.post("/api/vocab", json={"word": "Hello", "translation": "foo"})
    assert response.status_code == 201
    assert response.json() == {"word": "hello", "translation": "foo", "learned": True}

    response = test_client.post("/api/vocab", json={"word": "Hello", "translation": "foo"})
    assert response.status_code == 200
    assert response.json() == {"word": "hello", "translation": "foo", "learned": False}


def test_learned_word_is_listed_lowercase(test_client):
    test_client.post("/api/vocab", json={"word": "Run", "translation": "ပြာ"})

    data = test_client.get("/api/vocab").json()
    assert data["run"] == "ပြာ"
    assert "Run" not in data


def test_existing_word_keeps_first_translation(test_client):
    first = test_client.post("/api/vocab", json={"word": "cat", "translation": "first"})
    second = test_client.post("/api/vocab", json={"word": "CAT", "translation": "second"})

    assert first.json()["learned"] is True
    assert second.status_code == 200
    assert second.json() == {"word": "cat", "translation": "first", "learned": False}
    assert test_client.get("/api/vocab").json()["cat"] == "first"


def test_seeded_word_is_not_relearned(test_client):
    response = test_client.post("/api/vocab", json={"word": "Go", "translation": "other"})

    assert response.status_code == 200
    assert response.json() == {"word": "go", "translation": "အာ", "learned": False}


def test_learn_requires_both_fields(test_client):
    response = test_client.post("/api/vocab", json={"word": "dog"})
    assert response.status_code == 400
    assert response.json() == {"error": "translation is required"}

    response = test_client.post("/api/vocab", json={"word": "", "translation": ""})
    assert response.status_code == 400
    assert response.json() == {"error": "word and translation are required"}


def test_update_word(test_client):
    response = test_client.put("/api/vocab/I", json={"translation": "updated"})

    assert response.status_code == 200
    assert response.json() == {"word": "i", "translation": "updated"}
    assert test_client.get("/api/vocab").json()["i"] == "updated"


def test_update_phrase_with_space(test_client):
    response = test_client.put("/api/vocab/Look%20For", json={"translation": "x"})

    assert response.status_code == 200
    assert response.json() == {"word": "look for", "translation": "x"}


def test_update_missing_word_returns_404_without_creating(test_client):
    response = test_client.put("/api/vocab/nowhere", json={"translation": "x"})

    assert response.status_code == 404
    assert response.json() == {"error": "Word not found"}
    assert "nowhere" not in test_client.get("/api/vocab").json()


def test_update_requires_translation(test_client):
    response = test_client.put("/api/vocab/i", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "translation is required"}


def test_delete_word(test_client):
    response = test_client.delete("/api/vocab/BANANA")

    assert response.status_code == 200
    assert response.json() == {"deleted": True, "word": "banana"}
    assert "banana" not in test_client.get("/api/vocab").json()


def test_delete_missing_word_returns_404(test_client):
    response = test_client.delete("/api/vocab/nowhere")

    assert response.status_code == 404
    assert response.json() == {"error": "Word not found"}


def test_seeding_is_idempotent_across_restarts(tmp_path):
    settings = make_settings(tmp_path)

    with TestClient(create_app(settings)) as client:
        client.put("/api/vocab/you", json={"translation": "custom"})

    with TestClient(create_app(settings)) as client:
        data = client.get("/api/vocab").json()

    assert data["i"] == "အဲ"
    assert data["you"] == "custom"
    assert len(data) == len(DEFAULT_VOCABULARY)


def test_learn_coerces_numeric_word(test_client):
    response = test_client.post("/api/vocab", json={"word": 5, "translation": "x"})

    assert response.status_code == 201
    assert response.json() == {"word": "5", "translation": "x", "learned": True}


def test_learn_rejects_non_string_word(test_client):
    response = test_client.post("/api/vocab", json={"word": ["go"], "translation": "x"})

    assert response.status_code == 400
    assert response.json() == {"error": "word must be a string"}
