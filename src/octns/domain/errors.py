"""Exceptions raised across the service boundary.

Most failures are reported as ``ServiceResult`` values. These exceptions
cover the cases that raise by contract: resolution failures from
``resolve_address_or_domain`` and persistence failures after an on-chain
commit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from octns.domain.types import ErrorCode

if TYPE_CHECKING:
    from octns.domain.types import RegistrationRecord


class NameServiceError(Exception):
    """Base class for octns errors."""

    code: ErrorCode = ErrorCode.REGISTRATION_FAILED


class InvalidInputError(NameServiceError):
    """Input is neither address-shaped nor a valid ``.oct`` domain."""

    code = ErrorCode.INVALID_INPUT

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__("Invalid address or domain format")


class DomainNotFoundError(NameServiceError):
    """A well-formed domain has no registry entry."""

    code = ErrorCode.DOMAIN_NOT_FOUND

    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"Domain {domain} not found")


class PersistenceError(NameServiceError):
    """The registry rejected or never received a registration record.

    When raised from ``register_domain`` the transaction is already on
    chain: *record* holds everything needed to retry persistence.
    """

    code = ErrorCode.PERSISTENCE_FAILED

    def __init__(
        self,
        message: str,
        *,
        record: RegistrationRecord | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.record = record
        self.status_code = status_code

    @property
    def tx_hash(self) -> str | None:
        return self.record.tx_hash if self.record is not None else None
