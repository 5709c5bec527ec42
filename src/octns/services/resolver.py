"""ResolverService: turn an address or a ``.oct`` domain into an address.

Resolution is a naming-layer concern only: the ledger is never consulted,
and an address-shaped input is trusted verbatim.
"""

from __future__ import annotations

import logging

from octns.domain.errors import DomainNotFoundError, InvalidInputError, NameServiceError
from octns.domain.names import (
    INVALID_FORMAT_MESSAGE,
    is_address_like,
    is_oct_domain,
    is_valid_domain_format,
    strip_suffix,
)
from octns.domain.types import ErrorCode, LookupStatus
from octns.services.base import BaseService
from octns.services.contracts import (
    CheckNameData,
    LookupData,
    ResolveData,
    dump_validated,
)
from octns.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ResolverService(BaseService):
    """Forward, reverse, and dual-mode resolution over the registry."""

    # ------------------------------------------------------------------
    # Dual-mode resolution
    # ------------------------------------------------------------------

    def resolve_address_or_domain(self, value: str) -> str:
        """Return the address for *value*, which may be an address or a domain.

        Raises:
            DomainNotFoundError: *value* is a valid domain with no entry.
            InvalidInputError: *value* is neither address- nor domain-shaped.
        """
        candidate = value.strip()

        if is_address_like(candidate):
            return candidate

        if is_oct_domain(candidate):
            hit = self._registry.lookup_domain(candidate)
            if hit.found and hit.address:
                logger.debug("Resolved %s -> %s", candidate, hit.address)
                return hit.address
            raise DomainNotFoundError(candidate)

        raise InvalidInputError(candidate)

    def resolve(self, value: str) -> ServiceResult:
        """Result-typed form of :meth:`resolve_address_or_domain`."""
        op = "resolve"
        candidate = value.strip()
        try:
            address = self.resolve_address_or_domain(candidate)
        except NameServiceError as exc:
            return ServiceResult.failure(op, exc.code, str(exc), detail={"input": candidate})

        via = "address" if address == candidate else "domain"
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                ResolveData, {"input": candidate, "address": address, "via": via}
            ),
        )

    # ------------------------------------------------------------------
    # Single-direction lookups
    # ------------------------------------------------------------------

    def lookup(self, domain: str) -> ServiceResult:
        """Forward lookup with format validation up front."""
        op = "lookup"
        domain = domain.strip()
        if not is_valid_domain_format(domain):
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_FORMAT,
                f"Invalid domain format: {domain!r}",
            )

        hit = self._registry.lookup_domain(domain)
        if not hit.found:
            return _not_found(op, f"Domain {domain} not found", hit.status, hit.reason)

        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(LookupData, {"domain": hit.domain, "address": hit.address}),
        )

    def reverse(self, address: str) -> ServiceResult:
        """Reverse lookup: which domain points at *address*."""
        op = "reverse"
        address = address.strip()
        if not address:
            return ServiceResult.failure(op, ErrorCode.INVALID_INPUT, "Address is empty")

        hit = self._registry.lookup_address(address)
        if not hit.found:
            return _not_found(op, f"No domain registered for {address}", hit.status, hit.reason)

        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(LookupData, {"domain": hit.domain, "address": hit.address}),
        )


def check_name(domain: str) -> ServiceResult:
    """Syntax-only validation of *domain*. Makes no network call."""
    domain = domain.strip()
    name = strip_suffix(domain)
    valid = is_valid_domain_format(domain)
    data = dump_validated(
        CheckNameData, {"domain": domain, "valid": valid, "name": name, "length": len(name)}
    )
    if valid:
        return ServiceResult(ok=True, op="check_name", data=data)
    return ServiceResult.failure(
        "check_name",
        ErrorCode.INVALID_FORMAT,
        INVALID_FORMAT_MESSAGE,
        detail=data,
    )


def _not_found(op: str, message: str, status: LookupStatus, reason: str | None) -> ServiceResult:
    warnings: list[str] = []
    if status is LookupStatus.UNAVAILABLE:
        warnings.append(f"Registry unavailable: {reason}")
    return ServiceResult.failure(
        op,
        ErrorCode.NOT_FOUND,
        message,
        detail={"status": str(status)},
        warnings=warnings,
    )
