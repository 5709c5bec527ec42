"""Value types for lookups and registrations.

Lookups carry an explicit :class:`LookupStatus` so that a confirmed absence
(``NOT_FOUND``) stays distinguishable from a registry failure
(``UNAVAILABLE``), even though both report ``found=False``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, computed_field


class LookupStatus(StrEnum):
    """Outcome of a single registry lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"


class ErrorCode(StrEnum):
    """Codes carried in ``ServiceError.code``."""

    INVALID_FORMAT = "INVALID_FORMAT"
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    TRANSACTION_FAILED = "TRANSACTION_FAILED"
    REGISTRATION_FAILED = "REGISTRATION_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    DOMAIN_NOT_FOUND = "DOMAIN_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"


class LookupResult(BaseModel):
    """Forward or reverse lookup outcome. Never raised, always returned."""

    model_config = ConfigDict(frozen=True)

    status: LookupStatus
    address: str | None = None
    domain: str | None = None
    reason: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @classmethod
    def hit(cls, *, address: str, domain: str) -> LookupResult:
        return cls(status=LookupStatus.FOUND, address=address, domain=domain)

    @classmethod
    def miss(cls) -> LookupResult:
        return cls(status=LookupStatus.NOT_FOUND)

    @classmethod
    def unavailable(cls, reason: str) -> LookupResult:
        """A failed lookup, reported as not found by contract."""
        return cls(status=LookupStatus.UNAVAILABLE, reason=reason)


class RegistrationRecord(BaseModel):
    """Off-chain index entry for a registered domain.

    Serialized with camelCase aliases to match the registry's wire format:
    ``{domain, address, txHash, registeredAt}``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    domain: str
    address: str
    tx_hash: str = Field(alias="txHash")
    registered_at: int = Field(alias="registeredAt")  # epoch milliseconds

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class RegistrationRequest(BaseModel):
    """Input to one registration attempt.

    *private_key* is passed through to the ledger service untouched; it is
    never logged or serialized in clear.
    """

    model_config = ConfigDict(frozen=True)

    domain: str
    owner_address: str
    private_key: SecretStr
