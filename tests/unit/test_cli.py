"""Tests for the minfraud command-line entry point."""

import json

import httpx
import pytest

from minfraud.cli import EXIT_INVALID_INPUT, EXIT_SERVICE_ERROR, main
from minfraud.config import Settings
from tests.conftest import StubService, load_fixture, read_fixture_text, service_content_type


@pytest.fixture
def settings() -> Settings:
    return Settings(account_id=6, license_key="0123456789", host="localhost", port=8443, use_https=False)


@pytest.fixture
def request_file(tmp_path):
    path = tmp_path / "request.json"
    path.write_text(read_fixture_text("full-request"), encoding="utf-8")
    return path


class TestCli:
    def test_score(self, settings, request_file, capsys):
        stub = StubService(200, read_fixture_text("score-response"), service_content_type("score"))

        code = main(["score", str(request_file)], settings=settings, transport=httpx.MockTransport(stub))

        assert code == 0
        assert json.loads(capsys.readouterr().out) == load_fixture("score-response")
        assert json.loads(stub.last_request.content) == load_fixture("full-request")
        assert stub.last_request.url.path == "/minfraud/v2.0/score"

    def test_insights_with_overrides(self, settings, request_file, capsys):
        stub = StubService(200, read_fixture_text("insights-response"), service_content_type("insights"))

        code = main(
            ["insights", str(request_file), "--host", "other.test", "--port", "9000", "--locale", "fr"],
            settings=settings,
            transport=httpx.MockTransport(stub),
        )

        assert code == 0
        assert stub.last_request.url == "http://other.test:9000/minfraud/v2.0/insights"
        assert json.loads(capsys.readouterr().out)["risk_score"] == 0.01

    def test_yaml_request(self, settings, tmp_path, capsys):
        path = tmp_path / "request.yaml"
        path.write_text("device:\n  ip_address: 81.2.69.160\nevent:\n  transaction_id: t12\n")
        stub = StubService(200, read_fixture_text("score-response"), service_content_type("score"))

        code = main(["score", str(path)], settings=settings, transport=httpx.MockTransport(stub))

        assert code == 0
        assert json.loads(stub.last_request.content) == {
            "device": {"ip_address": "81.2.69.160"},
            "event": {"transaction_id": "t12"},
        }

    def test_invalid_request_file(self, settings, tmp_path, capsys):
        path = tmp_path / "request.json"
        path.write_text(json.dumps({"device": {"ip_address": "81.2.69.160"}, "order": {"currency": "usd"}}))
        stub = StubService(200, read_fixture_text("score-response"), service_content_type("score"))

        code = main(["score", str(path)], settings=settings, transport=httpx.MockTransport(stub))

        assert code == EXIT_INVALID_INPUT
        assert "order.currency" in capsys.readouterr().err
        assert stub.requests == []

    def test_missing_file(self, settings, tmp_path, capsys):
        code = main(["score", str(tmp_path / "nope.json")], settings=settings)
        assert code == EXIT_INVALID_INPUT
        assert "Could not read" in capsys.readouterr().err

    def test_not_an_object(self, settings, tmp_path):
        path = tmp_path / "request.json"
        path.write_text("[1, 2, 3]")
        assert main(["score", str(path)], settings=settings) == EXIT_INVALID_INPUT

    def test_service_error(self, settings, request_file, capsys):
        body = json.dumps({"code": "AUTHORIZATION_INVALID", "error": "bad key"})
        stub = StubService(401, body, "application/json")

        code = main(["score", str(request_file)], settings=settings, transport=httpx.MockTransport(stub))

        assert code == EXIT_SERVICE_ERROR
        assert "AuthenticationError: bad key" in capsys.readouterr().err

    def test_missing_credentials(self, request_file, capsys):
        code = main(["score", str(request_file)], settings=Settings())
        assert code == EXIT_INVALID_INPUT
        assert "MINFRAUD_ACCOUNT_ID" in capsys.readouterr().err
