"""RegistrationService: claim an unregistered ``.oct`` domain.

Pipeline: VALIDATE → CHECK → NONCE → BUILD → SUBMIT → PERSIST → RESPOND

The transaction is a zero-value transfer from the owner to the registry
master address, tagged ``register_domain:<domain>``. Once SUBMIT succeeds
the claim is on chain and cannot be undone; if PERSIST then fails the
off-chain index is stale, so :class:`PersistenceError` is raised instead of
being folded into a result. Callers retry with :meth:`persist_registration`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from octns.domain.errors import PersistenceError
from octns.domain.names import (
    INVALID_FORMAT_MESSAGE,
    is_valid_domain_format,
    registration_message,
)
from octns.domain.types import ErrorCode, LookupStatus, RegistrationRecord
from octns.services._helpers import mask, now_ms
from octns.services.base import BaseService
from octns.services.contracts import RegistrationData, dump_validated
from octns.services.result import ServiceResult

if TYPE_CHECKING:
    from octns.config.settings import OctnsSettings
    from octns.domain.types import RegistrationRequest
    from octns.infrastructure.ledger import LedgerService
    from octns.infrastructure.registry import RegistryClient

log = structlog.get_logger(__name__)

# Registration moves no funds.
REGISTRATION_AMOUNT = 0

# Public key derivation is the ledger's job; it receives an empty placeholder.
PUBLIC_KEY_PLACEHOLDER = ""

ALREADY_REGISTERED_MESSAGE = "Domain is already registered"
TRANSACTION_FAILED_MESSAGE = "Transaction failed"


class RegistrationService(BaseService):
    """Runs the register-domain workflow against a registry and a ledger.

    Args:
        registry: Client for lookups and record persistence.
        ledger: External signing and broadcast service.
        master_address: Recipient of registration transactions, taken from
            ``[ledger] master_address``.
    """

    def __init__(
        self,
        registry: RegistryClient,
        ledger: LedgerService,
        *,
        master_address: str,
    ) -> None:
        super().__init__(registry)
        self._ledger = ledger
        self.master_address = master_address

    @classmethod
    def from_settings(
        cls,
        settings: OctnsSettings,
        ledger: LedgerService,
        *,
        registry: RegistryClient | None = None,
    ) -> RegistrationService:
        """Build a service configured by ``[registry]`` and ``[ledger]``.

        Pass *registry* to reuse an open client; otherwise one is built from
        ``settings.registry`` and the caller owns closing ``service.registry``.
        """
        if registry is None:
            from octns.infrastructure.registry import RegistryClient

            registry = RegistryClient.from_config(settings.registry)
        return cls(registry, ledger, master_address=settings.ledger.master_address)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register_domain(self, request: RegistrationRequest) -> ServiceResult:
        """Register *request.domain* for *request.owner_address*.

        Returns a failed ServiceResult for every failure up to and including
        broadcast.

        Raises:
            PersistenceError: The transaction was broadcast but the registry
                did not store the record. ``exc.record`` holds the tx hash.
        """
        op = "register_domain"
        domain = request.domain
        warnings: list[str] = []
        bound = log.bind(domain=domain, owner=mask(request.owner_address))

        # ── VALIDATE ─────────────────────────────────────────────────
        if not is_valid_domain_format(domain):
            bound.info("registration.rejected", reason="invalid_format")
            return ServiceResult.failure(op, ErrorCode.INVALID_FORMAT, INVALID_FORMAT_MESSAGE)

        try:
            # ── CHECK ────────────────────────────────────────────────
            existing = self._registry.lookup_domain(domain)
            if existing.found:
                bound.info("registration.rejected", reason="already_registered")
                return ServiceResult.failure(
                    op,
                    ErrorCode.ALREADY_REGISTERED,
                    ALREADY_REGISTERED_MESSAGE,
                    detail={"address": existing.address},
                )
            if existing.status is LookupStatus.UNAVAILABLE:
                # Treated as not found; the registry settles any conflict.
                warnings.append(
                    f"Uniqueness check could not reach the registry ({existing.reason})"
                )

            # ── NONCE ────────────────────────────────────────────────
            balance = self._ledger.fetch_balance(request.owner_address)
            nonce = balance.nonce + 1

            # ── BUILD ────────────────────────────────────────────────
            transaction = self._ledger.create_transaction(
                request.owner_address,
                self.master_address,
                REGISTRATION_AMOUNT,
                nonce,
                request.private_key.get_secret_value(),
                PUBLIC_KEY_PLACEHOLDER,
                registration_message(domain),
            )

            # ── SUBMIT ───────────────────────────────────────────────
            sent = self._ledger.send_transaction(transaction)
        except Exception as exc:
            bound.error("registration.failed", error=str(exc), exc_info=True)
            return ServiceResult.failure(
                op,
                ErrorCode.REGISTRATION_FAILED,
                str(exc) or type(exc).__name__,
                warnings=warnings,
            )

        if not (sent.success and sent.hash):
            bound.warning("registration.tx_rejected", error=sent.error, nonce=nonce)
            return ServiceResult.failure(
                op,
                ErrorCode.TRANSACTION_FAILED,
                sent.error or TRANSACTION_FAILED_MESSAGE,
                detail={"nonce": nonce},
                warnings=warnings,
            )

        bound.info("registration.broadcast", tx_hash=sent.hash, nonce=nonce)

        # ── PERSIST ──────────────────────────────────────────────────
        record = RegistrationRecord(
            domain=domain,
            address=request.owner_address,
            tx_hash=sent.hash,
            registered_at=now_ms(),
        )
        self.persist_registration(record)

        # ── RESPOND ──────────────────────────────────────────────────
        bound.info("registration.complete", tx_hash=sent.hash)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                RegistrationData,
                {"domain": domain, "address": request.owner_address, "tx_hash": sent.hash},
            ),
            warnings=warnings,
        )

    def persist_registration(self, record: RegistrationRecord) -> None:
        """Store *record* in the registry index.

        Safe to call again with the record carried by a PersistenceError.
        """
        try:
            self._registry.store_registration(record)
        except PersistenceError:
            log.error(
                "registration.unindexed",
                domain=record.domain,
                tx_hash=record.tx_hash,
            )
            raise
