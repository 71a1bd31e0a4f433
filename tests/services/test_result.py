"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from warungctl.services.result import ServiceError, ServiceResult, failure


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="render", data={"path": "dist/index.html"})
        assert result.ok is True
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=False,
            op="order",
            data={"total": 20000},
            error=ServiceError(
                code="BELOW_MINIMUM_ORDER",
                message="Minimum order is Rp 25.000",
                detail={"minimum_order": 25000},
            ),
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["error"]["code"] == "BELOW_MINIMUM_ORDER"
        assert parsed["error"]["detail"]["minimum_order"] == 25000
        assert parsed["data"]["total"] == 20000

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="render")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestFailure:
    def test_builds_error_with_detail(self) -> None:
        result = failure("order", "BAD_EVENT", "Unknown event 'x'", event="x")
        assert result.ok is False
        assert result.error == ServiceError(
            code="BAD_EVENT", message="Unknown event 'x'", detail={"event": "x"}
        )
        assert result.data == {}
