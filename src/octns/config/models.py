"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, octns.toml only contains
overrides. A deployment usually sets [registry] base_url and
[ledger] master_address.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from octns import __version__

DEFAULT_MASTER_ADDRESS = "oct1234567890abcdef1234567890abcdef12345678"


class RegistryConfig(BaseModel):
    """[registry] section."""

    model_config = {"frozen": True}

    base_url: str = "http://localhost:8080"
    timeout: float = Field(default=10.0, gt=0)
    user_agent: str = f"octns/{__version__}"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class LedgerConfig(BaseModel):
    """[ledger] section."""

    model_config = {"frozen": True}

    master_address: str = DEFAULT_MASTER_ADDRESS
