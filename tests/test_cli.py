"""
Tests for the zkpret-api CLI.
"""

import httpx
import pytest
import typer
from typer.testing import CliRunner

from zkpret_api import cli

runner = CliRunner()


def _response(method: str, url: str, status_code: int, payload) -> httpx.Response:
    return httpx.Response(status_code, json=payload, request=httpx.Request(method, url))


class TestCheck:
    """Tests for the `check` command."""

    def test_healthy_service(self, monkeypatch):
        payload = {
            "status": "healthy",
            "service": "zk-pret-core-engine",
            "version": "3.6.0",
            "features": ["GLEIF Verification", "Composed Proofs"],
        }
        calls = []

        def fake_get(url, timeout):
            calls.append(url)
            return _response("GET", url, 200, payload)

        monkeypatch.setattr(cli.httpx, "get", fake_get)

        result = runner.invoke(cli.app, ["check", "--url", "http://svc:9000/"])
        assert result.exit_code == 0
        assert calls == ["http://svc:9000/api/health"]
        assert "Status: healthy" in result.output
        assert "GLEIF Verification" in result.output

    def test_unreachable_service(self, monkeypatch):
        def fake_get(url, timeout):
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(cli.httpx, "get", fake_get)

        result = runner.invoke(cli.app, ["check"])
        assert result.exit_code == 1
        assert "unreachable" in result.output

    def test_non_json_health(self, monkeypatch):
        monkeypatch.setattr(
            cli.httpx,
            "get",
            lambda url, timeout: httpx.Response(
                200, text="maintenance", request=httpx.Request("GET", url)
            ),
        )
        result = runner.invoke(cli.app, ["check"])
        assert result.exit_code == 1
        assert "did not return JSON: maintenance" in result.output


class TestProve:
    """Tests for the `prove` command."""

    def test_posts_fields(self, monkeypatch):
        sent = {}

        def fake_post(url, json, timeout):
            sent.update(url=url, json=json, timeout=timeout)
            return _response("POST", url, 200, {"success": True})

        monkeypatch.setattr(cli.httpx, "post", fake_post)

        result = runner.invoke(
            cli.app,
            ["prove", "corporate", "-f", "companyName=Acme Ltd", "-f", "cin=U12345"],
        )
        assert result.exit_code == 0
        assert sent["url"] == "http://127.0.0.1:8000/api/corporate"
        assert sent["json"] == {"companyName": "Acme Ltd", "cin": "U12345"}
        assert sent["timeout"] > 4
        assert '"success": true' in result.output

    def test_validation_failure_exit_code(self, monkeypatch):
        monkeypatch.setattr(
            cli.httpx,
            "post",
            lambda url, json, timeout: _response(
                "POST", url, 400, {"error": "Company name is required"}
            ),
        )
        result = runner.invoke(cli.app, ["prove", "gleif"])
        assert result.exit_code == 1
        assert "HTTP 400" in result.output

    def test_non_json_error_page(self, monkeypatch):
        """A proxy error page is printed as text instead of crashing."""
        monkeypatch.setattr(
            cli.httpx,
            "post",
            lambda url, json, timeout: httpx.Response(
                502, text="<html>Bad Gateway</html>", request=httpx.Request("POST", url)
            ),
        )
        result = runner.invoke(cli.app, ["prove", "gleif", "-f", "companyName=Acme"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "HTTP 502" in result.output
        assert "Bad Gateway" in result.output

    def test_unknown_type(self):
        result = runner.invoke(cli.app, ["prove", "kyc"])
        assert result.exit_code == 2
        assert "Unknown proof type" in result.output


class TestMisc:
    """Tests for helper commands."""

    def test_types_lists_all(self):
        result = runner.invoke(cli.app, ["types"])
        assert result.exit_code == 0
        assert "process-integrity" in result.output
        assert "5000-8000ms" in result.output

    def test_version(self):
        result = runner.invoke(cli.app, ["version"])
        assert "zkpret-api v3.6.0" in result.output

    def test_parse_fields(self):
        assert cli.parse_fields(["a=1", "b=x=y"]) == {"a": "1", "b": "x=y"}

    def test_parse_fields_rejects_bare_value(self):
        with pytest.raises(typer.BadParameter):
            cli.parse_fields(["novalue"])
