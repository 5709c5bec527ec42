"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from octns.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="lookup", data={"address": "octA"})
        assert result.ok is True
        assert result.op == "lookup"
        assert result.data == {"address": "octA"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="Not found")
        result = ServiceResult(ok=False, op="lookup", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure(
            "register_domain",
            "ALREADY_REGISTERED",
            "Domain is already registered",
            detail={"address": "octA"},
            warnings=["slow registry"],
        )
        assert result.ok is False
        assert result.data == {}
        assert result.warnings == ["slow registry"]
        assert result.error == ServiceError(
            code="ALREADY_REGISTERED",
            message="Domain is already registered",
            detail={"address": "octA"},
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="resolve", data={"address": "octA"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "resolve"
        assert parsed["data"]["address"] == "octA"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        error = ServiceError(code="E001", message="bad")
        assert error.detail == {}
