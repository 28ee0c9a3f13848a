"""Tests for the CLI entry points."""

import json

import httpx
import respx
from click.testing import CliRunner

from citation_harvester.cli.main import cli

API = "https://api.github.com/repos/octocat/Hello-World"


def mock_hello_world(router, status=200):
    router.get(API).mock(
        return_value=httpx.Response(
            status,
            json={
                "name": "Hello-World",
                "homepage": None,
                "html_url": "https://github.com/octocat/Hello-World",
                "updated_at": "2011-01-26T19:14:43Z",
                "description": "My first repository on GitHub!",
            },
        )
    )
    router.get(f"{API}/contributors").mock(
        return_value=httpx.Response(200, json=[{"login": "octocat"}])
    )
    router.get("https://api.github.com/users/octocat").mock(
        return_value=httpx.Response(200, json={"name": "The Octocat", "email": None})
    )
    router.get(f"{API}/releases").mock(return_value=httpx.Response(200, json=[]))


class TestCLI:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Citation Harvester" in result.output

    def test_fetch_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["fetch", "--help"])
        assert result.exit_code == 0
        assert "--format" in result.output
        assert "--output-dir" in result.output
        assert "--api-url" in result.output
        assert "--version-fallback" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_check(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "github.com/apple/swift", "example.com/a/b"])
        assert result.exit_code == 0
        assert "apple/swift" in result.output
        assert "unsupported" in result.output

    def test_fetch(self):
        runner = CliRunner()
        with respx.mock(assert_all_called=False) as respx_mock:
            mock_hello_world(respx_mock)
            result = runner.invoke(cli, ["fetch", "github.com/octocat/Hello-World"])

        assert result.exit_code == 0, result.output
        assert "Hello-World" in result.output
        assert "The Octocat" in result.output

    def test_fetch_exports_json(self, tmp_path):
        runner = CliRunner()
        with respx.mock(assert_all_called=False) as respx_mock:
            mock_hello_world(respx_mock)
            result = runner.invoke(
                cli,
                ["fetch", "github.com/octocat/Hello-World", "--output-dir", str(tmp_path)],
            )

        assert result.exit_code == 0, result.output
        data = json.loads((tmp_path / "Hello-World.json").read_text())
        assert data["url"] == "https://github.com/octocat/Hello-World"

    def test_fetch_failure_exit_code(self):
        runner = CliRunner()
        with respx.mock(assert_all_called=False) as respx_mock:
            mock_hello_world(respx_mock, status=404)
            result = runner.invoke(cli, ["fetch", "github.com/octocat/Hello-World"])

        assert result.exit_code == 1
        assert "404" in result.output

    def test_fetch_unsupported_url(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["fetch", "example.com/a/b"])
        assert result.exit_code == 1
        assert "Unsupported" in result.output
