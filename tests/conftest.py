"""Shared pytest fixtures and test doubles for octns tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
import respx
import structlog
from click.testing import CliRunner

from octns.infrastructure.ledger import BalanceInfo, SendResult, Transaction
from octns.infrastructure.registry import RegistryClient

REGISTRY_URL = "http://registry.test"


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo the root-handler changes the CLI makes via configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    octns_level = logging.getLogger("octns").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("octns").setLevel(octns_level)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry_mock() -> Iterator[respx.MockRouter]:
    """respx router scoped to the test registry URL.

    Unrouted requests fail the test, so an empty ``calls`` list proves
    no HTTP traffic happened.
    """
    with respx.mock(base_url=REGISTRY_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def registry(registry_mock: respx.MockRouter) -> Iterator[RegistryClient]:
    """RegistryClient pointed at the mocked registry."""
    client = RegistryClient(REGISTRY_URL)
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no octns config in the environment.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("OCTNS_CONFIG", raising=False)
    monkeypatch.delenv("OCTNS_REGISTRY__BASE_URL", raising=False)
    monkeypatch.delenv("OCTNS_LEDGER__MASTER_ADDRESS", raising=False)


# ---------------------------------------------------------------------------
# Ledger test double
# ---------------------------------------------------------------------------


@dataclass
class FakeLedger:
    """In-memory LedgerService that records every call.

    Set *fail_on* to a method name to make that call raise *error*.
    """

    nonce: int = 0
    send_result: SendResult = field(
        default_factory=lambda: SendResult(success=True, hash="0xabc")
    )
    fail_on: str | None = None
    error: Exception = field(default_factory=lambda: RuntimeError("ledger offline"))
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def _record(self, name: str, **kwargs: Any) -> None:
        self.calls.append((name, kwargs))
        if self.fail_on == name:
            raise self.error

    def fetch_balance(self, address: str) -> BalanceInfo:
        self._record("fetch_balance", address=address)
        return BalanceInfo(nonce=self.nonce, balance=100.0)

    def create_transaction(
        self,
        sender: str,
        recipient: str,
        amount: float,
        nonce: int,
        private_key: str,
        public_key: str,
        message: str | None = None,
    ) -> Transaction:
        self._record(
            "create_transaction",
            sender=sender,
            recipient=recipient,
            amount=amount,
            nonce=nonce,
            private_key=private_key,
            public_key=public_key,
            message=message,
        )
        return Transaction(
            sender=sender,
            recipient=recipient,
            amount=amount,
            nonce=nonce,
            message=message,
            signature="sig",
        )

    def send_transaction(self, transaction: Transaction) -> SendResult:
        self._record("send_transaction", transaction=transaction)
        return self.send_result

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def last(self, name: str) -> dict[str, Any]:
        for call_name, kwargs in reversed(self.calls):
            if call_name == name:
                return kwargs
        raise AssertionError(f"{name} was never called")


@pytest.fixture
def ledger() -> FakeLedger:
    """Ledger double reporting nonce 5 and a successful broadcast."""
    return FakeLedger(nonce=5)
