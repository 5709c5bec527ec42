"""RegistryClient: HTTP access to the domain index.

Endpoints (relative to the configured base URL):

- ``GET  /api/domain/lookup/{domain}``   forward lookup
- ``GET  /api/domain/reverse/{address}`` reverse lookup
- ``POST /api/domain/register``          store a registration record

INVARIANT: Lookups never raise. A 404 is ``NOT_FOUND``; every other
failure (input, status, body, transport) is ``UNAVAILABLE``, and both report
``found=False``. Storing a record raises :class:`PersistenceError`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from octns import __version__
from octns.domain.errors import PersistenceError
from octns.domain.types import LookupResult

if TYPE_CHECKING:
    from types import TracebackType

    from octns.config.models import RegistryConfig
    from octns.domain.types import RegistrationRecord

logger = logging.getLogger(__name__)

LOOKUP_PATH = "/api/domain/lookup/{domain}"
REVERSE_PATH = "/api/domain/reverse/{address}"
REGISTER_PATH = "/api/domain/register"

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = f"octns/{__version__}"


class RegistryClient:
    """Thin wrapper over :class:`httpx.Client` for the registry service.

    Pass *client* to inject a preconfigured ``httpx.Client`` (tests, custom
    transports); otherwise one is created from *base_url* and owned here.
    No retries and no caching: every call is one round-trip.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._http = client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"User-Agent": DEFAULT_USER_AGENT, **(headers or {})},
        )

    @classmethod
    def from_config(cls, config: RegistryConfig) -> RegistryClient:
        """Build a client from the ``[registry]`` settings section."""
        return cls(
            config.base_url,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup_domain(self, domain: str) -> LookupResult:
        """Forward lookup: domain -> address."""
        return self._lookup(LOOKUP_PATH, key="domain", value=domain)

    def lookup_address(self, address: str) -> LookupResult:
        """Reverse lookup: address -> domain."""
        return self._lookup(REVERSE_PATH, key="address", value=address)

    def _lookup(self, template: str, *, key: str, value: str) -> LookupResult:
        try:
            # Lone surrogates from undecodable argv bytes cannot be UTF-8 quoted
            path = template.format(**{key: quote(value, safe="")})
        except UnicodeError:
            logger.warning("Refusing to look up undecodable %s %r", key, value)
            return LookupResult.unavailable("malformed input")

        try:
            response = self._http.get(path)
        except httpx.HTTPError as exc:
            logger.warning("Registry lookup failed for %s=%s: %s", key, value, exc)
            return LookupResult.unavailable(f"transport error: {exc}")

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("Registry has no entry for %s=%s", key, value)
            return LookupResult.miss()

        if not response.is_success:
            logger.warning(
                "Registry lookup for %s=%s returned HTTP %d", key, value, response.status_code
            )
            return LookupResult.unavailable(f"HTTP {response.status_code}")

        try:
            data: Any = response.json()
        except ValueError:
            logger.warning("Registry returned a non-JSON body for %s=%s", key, value)
            return LookupResult.unavailable("malformed response")

        entry = _parse_entry(data, key=key, value=value)
        if entry is None:
            logger.warning("Registry returned an incomplete entry for %s=%s", key, value)
            return LookupResult.unavailable("malformed response")
        return entry

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def store_registration(self, record: RegistrationRecord) -> None:
        """POST *record* to the registry index.

        Raises:
            PersistenceError: On a non-2xx status or any failure to send.
        """
        try:
            response = self._http.post(REGISTER_PATH, json=record.to_wire())
        except httpx.HTTPError as exc:
            logger.error("Failed to store registration for %s: %s", record.domain, exc)
            msg = f"Failed to store domain registration: {exc}"
            raise PersistenceError(msg, record=record) from exc
        except Exception as exc:
            # The record carries the tx hash; it must survive any failure here
            logger.exception("Unexpected error storing registration for %s", record.domain)
            msg = f"Failed to store domain registration: {exc!r}"
            raise PersistenceError(msg, record=record) from exc

        if not response.is_success:
            logger.error(
                "Registry rejected registration for %s with HTTP %d",
                record.domain,
                response.status_code,
            )
            raise PersistenceError(
                "Failed to store domain registration",
                record=record,
                status_code=response.status_code,
            )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> RegistryClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _parse_entry(data: Any, *, key: str, value: str) -> LookupResult | None:
    """Build a hit from a ``{address, domain}`` body.

    The field that was looked up may be omitted by the registry and is
    filled from the request; the other one is required.
    """
    if not isinstance(data, dict):
        return None
    entry = {"address": data.get("address"), "domain": data.get("domain")}
    if not entry[key]:
        entry[key] = value
    if not entry["address"] or not entry["domain"]:
        return None
    return LookupResult.hit(address=str(entry["address"]), domain=str(entry["domain"]))
