"""Tests for the `octns lookup` and `octns reverse` commands."""

from __future__ import annotations

import json

import httpx
import pytest
import respx
from click.testing import CliRunner

from octns.cli import cli

ALICE = "octALICE0000000000000000000000000000000000000"
REGISTRY = ["--registry-url", "http://registry.test"]


@pytest.mark.usefixtures("_isolated_cwd")
class TestLookup:
    def test_found(self, cli_runner: CliRunner, registry_mock: respx.MockRouter) -> None:
        registry_mock.get("/api/domain/lookup/alice.oct").respond(
            200, json={"domain": "alice.oct", "address": ALICE}
        )
        result = cli_runner.invoke(cli, [*REGISTRY, "lookup", "alice.oct"])
        assert result.exit_code == 0
        assert "OK  lookup" in result.stdout
        assert ALICE in result.stdout

    def test_quiet_prints_bare_address(
        self, cli_runner: CliRunner, registry_mock: respx.MockRouter
    ) -> None:
        registry_mock.get("/api/domain/lookup/alice.oct").respond(
            200, json={"domain": "alice.oct", "address": ALICE}
        )
        result = cli_runner.invoke(cli, [*REGISTRY, "-q", "lookup", "alice.oct"])
        assert result.stdout.strip() == ALICE

    def test_not_found(self, cli_runner: CliRunner, registry_mock: respx.MockRouter) -> None:
        registry_mock.get("/api/domain/lookup/bob.oct").respond(404)
        result = cli_runner.invoke(cli, [*REGISTRY, "lookup", "bob.oct"])
        assert result.exit_code == 1
        assert "Domain bob.oct not found" in result.stderr
        assert "WARNING" not in result.stderr

    def test_registry_down_warns(
        self, cli_runner: CliRunner, registry_mock: respx.MockRouter
    ) -> None:
        registry_mock.get("/api/domain/lookup/bob.oct").mock(
            side_effect=httpx.ConnectError("refused")
        )
        result = cli_runner.invoke(cli, [*REGISTRY, "lookup", "bob.oct"])
        assert result.exit_code == 1
        assert "WARNING: Registry unavailable" in result.stderr

    def test_invalid_format_skips_registry(
        self, cli_runner: CliRunner, registry_mock: respx.MockRouter
    ) -> None:
        result = cli_runner.invoke(cli, [*REGISTRY, "lookup", "ab.oct"])
        assert result.exit_code == 1
        assert "Invalid domain format" in result.stderr
        assert registry_mock.calls.call_count == 0

    def test_json_output(self, cli_runner: CliRunner, registry_mock: respx.MockRouter) -> None:
        registry_mock.get("/api/domain/lookup/alice.oct").respond(
            200, json={"domain": "alice.oct", "address": ALICE}
        )
        result = cli_runner.invoke(cli, [*REGISTRY, "--json", "lookup", "alice.oct"])
        payload = json.loads(result.stdout)
        assert payload["op"] == "lookup"
        assert payload["data"] == {"domain": "alice.oct", "address": ALICE}

    def test_registry_url_from_env(
        self,
        cli_runner: CliRunner,
        registry_mock: respx.MockRouter,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("OCTNS_REGISTRY__BASE_URL", "http://registry.test")
        registry_mock.get("/api/domain/lookup/alice.oct").respond(
            200, json={"domain": "alice.oct", "address": ALICE}
        )
        result = cli_runner.invoke(cli, ["-q", "lookup", "alice.oct"])
        assert result.exit_code == 0
        assert result.stdout.strip() == ALICE

    def test_registry_url_from_toml(
        self, cli_runner: CliRunner, registry_mock: respx.MockRouter
    ) -> None:
        with open("octns.toml", "w", encoding="utf-8") as fh:
            fh.write('[registry]\nbase_url = "http://registry.test/"\n')
        registry_mock.get("/api/domain/lookup/alice.oct").respond(
            200, json={"domain": "alice.oct", "address": ALICE}
        )
        result = cli_runner.invoke(cli, ["-q", "lookup", "alice.oct"])
        assert result.exit_code == 0
        assert result.stdout.strip() == ALICE

    def test_sends_user_agent(
        self, cli_runner: CliRunner, registry_mock: respx.MockRouter
    ) -> None:
        route = registry_mock.get("/api/domain/lookup/alice.oct").respond(
            200, json={"domain": "alice.oct", "address": ALICE}
        )
        cli_runner.invoke(cli, [*REGISTRY, "lookup", "alice.oct"])
        assert route.calls.last.request.headers["User-Agent"].startswith("octns/")


@pytest.mark.usefixtures("_isolated_cwd")
class TestReverse:
    def test_found(self, cli_runner: CliRunner, registry_mock: respx.MockRouter) -> None:
        registry_mock.get(f"/api/domain/reverse/{ALICE}").respond(
            200, json={"domain": "alice.oct", "address": ALICE}
        )
        result = cli_runner.invoke(cli, [*REGISTRY, "reverse", ALICE])
        assert result.exit_code == 0
        assert "alice.oct" in result.stdout

    def test_quiet_prints_bare_domain(
        self, cli_runner: CliRunner, registry_mock: respx.MockRouter
    ) -> None:
        registry_mock.get(f"/api/domain/reverse/{ALICE}").respond(
            200, json={"domain": "alice.oct"}
        )
        result = cli_runner.invoke(cli, [*REGISTRY, "-q", "reverse", ALICE])
        assert result.stdout.strip() == "alice.oct"

    def test_not_found(self, cli_runner: CliRunner, registry_mock: respx.MockRouter) -> None:
        registry_mock.get(f"/api/domain/reverse/{ALICE}").respond(404)
        result = cli_runner.invoke(cli, [*REGISTRY, "reverse", ALICE])
        assert result.exit_code == 1
        assert "No domain registered" in result.stderr
