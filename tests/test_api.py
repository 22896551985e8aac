"""Tests for the HTTP endpoints."""

import logging

import pytest
from fastapi.testclient import TestClient

from playfair.core.config import Settings, get_settings
from playfair.dependencies import get_engine
from playfair.main import app

PREFIX = "/api/v1"


class TestCipherEndpoints:
    """Test suite for the encrypt, decrypt and key-square endpoints."""

    @pytest.fixture
    def client(self):
        with TestClient(app) as client:
            yield client
        app.dependency_overrides.clear()

    def test_encrypt(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"keyword": "playfair example", "plaintext": "hide the gold in the tree stump"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ciphertext"] == "bmodzbxdnabekudmuixmmouvif"
        assert body["pad"] == "x"
        assert body["key_square"] == "playfirexmbcdghknoqstuvwz"

    def test_encrypt_with_pad(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"keyword": "", "plaintext": "abc", "pad": "q"},
        )

        assert response.status_code == 200
        assert response.json()["pad"] == "q"

    def test_encrypt_rejects_long_pad(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"keyword": "", "plaintext": "abc", "pad": "xy"},
        )

        assert response.status_code == 422

    def test_encrypt_pad_outside_square(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"keyword": "", "plaintext": "abc", "pad": "!"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "KeySquareLookupError"

    def test_decrypt(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"keyword": "playfair example", "ciphertext": "bmodzbxdnabekudmuixmmouvif"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["plaintext"] == "hidethegoldinthetrexestump"
        assert body["keyword"] == "playfair example"
        assert "playfair example" in body["explanation"]

    def test_decrypt_odd_length(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"keyword": "playfair", "ciphertext": "oddnumberofchar"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "OddLengthError"
        assert body["details"] == {"length": 15}

    def test_text_too_long(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=10)

        response = client.post(
            f"{PREFIX}/encrypt",
            json={"keyword": "", "plaintext": "a" * 11},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "TextTooLongError"

    def test_default_pad_from_settings(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(default_pad_letter="q")

        response = client.post(f"{PREFIX}/encrypt", json={"keyword": "", "plaintext": "a"})

        assert response.status_code == 200
        assert response.json()["pad"] == "q"

    def test_key_square(self, client):
        response = client.get(f"{PREFIX}/key-square", params={"keyword": "playfair example"})

        assert response.status_code == 200
        body = response.json()
        assert body["letters"] == "playfirexmbcdghknoqstuvwz"
        assert body["rows"] == ["playf", "irexm", "bcdgh", "knoqs", "tuvwz"]

    def test_unexpected_error_is_logged(self, caplog):
        def broken_engine():
            raise RuntimeError("engine unavailable")

        app.dependency_overrides[get_engine] = broken_engine

        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                with caplog.at_level(logging.ERROR, logger="playfair.main"):
                    response = client.get(f"{PREFIX}/key-square", params={"keyword": "abc"})
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "InternalServerError"
        assert "engine unavailable" in body["message"]
        assert "Unhandled error on GET /api/v1/key-square" in caplog.text
