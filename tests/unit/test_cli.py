"""Tests for the brixie command line."""

import pytest
from typer.testing import CliRunner

from brixie import VERSION
from brixie.cli import app as app_module
from brixie.cli.app import app

from conftest import SAMPLE_COLOR, SAMPLE_PART, SAMPLE_SET, RecordingHandler, make_client, paged

runner = CliRunner()


@pytest.fixture
def serve(monkeypatch: pytest.MonkeyPatch):
    """Route CLI commands to a mocked transport answering with the given handler."""
    def _serve(handler: RecordingHandler) -> RecordingHandler:
        monkeypatch.setattr(app_module, "create_client", lambda settings: make_client(handler, api_key=settings.api_key))
        return handler
    return _serve


class TestCli:

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.stdout

    def test_missing_api_key(self, serve):
        handler = serve(RecordingHandler(json_body=paged()))
        result = runner.invoke(app, ["sets"])
        assert result.exit_code == 1
        assert "No Rebrickable API key" in result.stdout
        assert handler.requests == []

    def test_sets(self, serve):
        handler = serve(RecordingHandler(json_body=paged(SAMPLE_SET, count=3, next_url="https://x/?page=2")))
        result = runner.invoke(app, ["--api-key", "k", "sets", "--search", "car", "--min-year", "1990", "--page-size", "5000"])

        assert result.exit_code == 0, result.stdout
        assert "8880-1" in result.stdout
        assert "--page 2" in result.stdout
        params = handler.last_request.url.params
        assert params["key"] == "k"
        assert params["search"] == "car"
        assert params["min_year"] == "1990"
        assert params["page_size"] == "1000"
        assert "max_year" not in params

    def test_api_key_from_environment(self, serve, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("BRIXIE_API_KEY", "env-key")
        handler = serve(RecordingHandler(json_body=paged(SAMPLE_COLOR)))
        result = runner.invoke(app, ["colors"])

        assert result.exit_code == 0, result.stdout
        assert "Trans-Red" in result.stdout
        assert handler.last_request.url.params["key"] == "env-key"

    def test_set_details(self, serve):
        serve(RecordingHandler(json_body=SAMPLE_SET))
        result = runner.invoke(app, ["--api-key", "k", "set", "8880-1"])

        assert result.exit_code == 0, result.stdout
        assert "Super Car" in result.stdout
        assert "1343" in result.stdout

    def test_part_details(self, serve):
        handler = serve(RecordingHandler(json_body=SAMPLE_PART))
        result = runner.invoke(app, ["--api-key", "k", "part", "3001"])

        assert result.exit_code == 0, result.stdout
        assert "BrickLink" in result.stdout
        assert handler.last_request.url.path.endswith("/parts/3001/")

    def test_part_details_keep_brackets(self, serve):
        part = dict(SAMPLE_PART, part_num="3001[b]", print_of="3001[i]", external_ids={"Brick[i]Link": ["[red]x"]})
        serve(RecordingHandler(json_body=part))
        result = runner.invoke(app, ["--api-key", "k", "part", "3001"])

        assert result.exit_code == 0, result.stdout
        assert "3001[b]" in result.stdout
        assert "3001[i]" in result.stdout
        assert "Brick[i]Link" in result.stdout
        assert "[red]x" in result.stdout

    def test_sets_table_keeps_brackets(self, serve):
        serve(RecordingHandler(json_body=paged(dict(SAMPLE_SET, set_num="88[b]"))))
        result = runner.invoke(app, ["--api-key", "k", "sets"])

        assert result.exit_code == 0, result.stdout
        assert "88[b]" in result.stdout

    def test_parts_category(self, serve):
        handler = serve(RecordingHandler(json_body=paged(SAMPLE_PART)))
        result = runner.invoke(app, ["--api-key", "k", "parts", "--category", "11"])

        assert result.exit_code == 0, result.stdout
        assert handler.last_request.url.params["part_cat_id"] == "11"

    def test_themes(self, serve):
        serve(RecordingHandler(json_body=paged({"id": 1, "name": "Technic", "parent_id": None})))
        result = runner.invoke(app, ["--api-key", "k", "themes"])

        assert result.exit_code == 0, result.stdout
        assert "Technic" in result.stdout

    def test_authentication_error(self, serve):
        serve(RecordingHandler(status=401, json_body={"detail": "Invalid token."}))
        result = runner.invoke(app, ["--api-key", "bad", "themes"])

        assert result.exit_code == 1
        assert "BRIXIE_API_KEY" in result.stdout

    def test_rate_limit_suggests_retry(self, serve):
        serve(RecordingHandler(status=429, content=b""))
        result = runner.invoke(app, ["--api-key", "k", "colors"])

        assert result.exit_code == 1
        assert "try again" in result.stdout
