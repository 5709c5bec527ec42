"""BaseService — shared foundation for octns services.

Every service receives a :class:`RegistryClient` at construction time.
Services never build HTTP clients themselves, so tests inject clients
backed by mocked transports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from octns.infrastructure.registry import RegistryClient


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ResolverService(BaseService):
            def lookup(self, domain: str) -> ServiceResult:
                hit = self._registry.lookup_domain(domain)
                ...
    """

    def __init__(self, registry: RegistryClient) -> None:
        self._registry = registry

    @property
    def registry(self) -> RegistryClient:
        return self._registry
