"""Tests for app assembly and the server entry point."""

from unittest.mock import patch

import pytest
from starlette.testclient import TestClient

from spotrate.api.server import create_app, main
from spotrate.rates.table import RateTable


@pytest.fixture(autouse=True)
def _no_dotenv():
    with patch("spotrate.core.config.load_dotenv"):
        yield


class TestCreateApp:
    def test_seeds_from_configured_file(self, monkeypatch, seed_file):
        monkeypatch.setenv("SEED_RATE_FILE", str(seed_file))
        app = create_app()

        table = app.state.rate_table
        assert isinstance(table, RateTable)
        assert len(table.snapshot()) == 7

    def test_missing_seed_file_is_fatal(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SEED_RATE_FILE", str(tmp_path / "nope.json"))
        with pytest.raises(FileNotFoundError):
            create_app()

    def test_uses_given_table(self, seeded_table):
        app = create_app(seeded_table)
        assert app.state.rate_table is seeded_table

    def test_cors_headers(self, seeded_table):
        client = TestClient(create_app(seeded_table))
        resp = client.get("/health", headers={"Origin": "https://example.com"})
        assert resp.headers["access-control-allow-origin"] == "*"


class TestMain:
    def test_runs_uvicorn_with_config(self, monkeypatch, seed_file):
        monkeypatch.setenv("SEED_RATE_FILE", str(seed_file))
        monkeypatch.setenv("PORT", "9123")
        monkeypatch.setenv("HOST", "127.0.0.1")

        with patch("uvicorn.run") as mock_run:
            main()

        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 9123
        assert isinstance(args[0].state.rate_table, RateTable)
