"""Ledger service contract: nonce lookup, transaction building, broadcast.

The ledger is an external collaborator: it owns signing, key derivation,
and network submission. octns only depends on the three calls below, so
any wallet backend (or a test double) can be plugged in.
"""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict


class BalanceInfo(BaseModel):
    """Account state as reported by the ledger."""

    model_config = ConfigDict(frozen=True, extra="allow")

    nonce: int
    balance: float = 0.0


class Transaction(BaseModel):
    """A signed (or signable) transfer built by the ledger service.

    Extra fields (signature, timestamp, fee) are carried through opaquely.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    sender: str
    recipient: str
    amount: float
    nonce: int
    message: str | None = None


class SendResult(BaseModel):
    """Broadcast outcome: a hash on success, an error message otherwise."""

    model_config = ConfigDict(frozen=True, extra="allow")

    success: bool
    hash: str | None = None
    error: str | None = None


class LedgerService(Protocol):
    """Calls the registration workflow makes against the ledger."""

    def fetch_balance(self, address: str) -> BalanceInfo: ...

    def create_transaction(
        self,
        sender: str,
        recipient: str,
        amount: float,
        nonce: int,
        private_key: str,
        public_key: str,
        message: str | None = None,
    ) -> Transaction: ...

    def send_transaction(self, transaction: Transaction) -> SendResult: ...
