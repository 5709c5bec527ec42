"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so that key
drift (``txHash`` vs ``tx_hash``) fails fast in tests.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class RegistrationData(BaseModel):
    """Payload contract for ``RegistrationService.register_domain``."""

    domain: str
    address: str
    tx_hash: str


class LookupData(BaseModel):
    """Payload contract for ``lookup`` and ``reverse``."""

    domain: str
    address: str


class ResolveData(BaseModel):
    """Payload contract for ``resolve``."""

    input: str
    address: str
    via: str  # "address" | "domain"


class CheckNameData(BaseModel):
    """Payload contract for ``check_name``."""

    domain: str
    valid: bool
    name: str
    length: int
