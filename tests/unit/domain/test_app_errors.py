"""Unit tests for gateway error parsing (raw -> StructuredAppError | OpaqueError)."""

import json

import pytest

from folder_dialog.domain.errors import (
    AppError,
    AppErrorCode,
    OpaqueError,
    StructuredAppError,
    parse_gateway_error,
)

pytestmark = pytest.mark.unit


class _RpcClientError(Exception):
    def __init__(self, app_error):
        super().__init__("rpc failed")
        self.app_error = app_error


class TestStructured:
    def test_app_error(self):
        parsed = parse_gateway_error(AppError(AppErrorCode.NOT_FOUND, "missing"))
        assert parsed == StructuredAppError(
            code=AppErrorCode.NOT_FOUND, message="missing"
        )

    def test_mapping(self):
        parsed = parse_gateway_error({"code": "already_exists", "message": "dup"})
        assert parsed == StructuredAppError(
            code=AppErrorCode.ALREADY_EXISTS, message="dup"
        )

    def test_nested_error_mapping(self):
        parsed = parse_gateway_error({"error": {"code": "ALREADY_EXISTS"}})
        assert isinstance(parsed, StructuredAppError)
        assert parsed.code == AppErrorCode.ALREADY_EXISTS

    def test_json_string(self):
        raw = json.dumps({"code": "LIMIT_EXCEEDED", "message": "too many"})
        parsed = parse_gateway_error(raw)
        assert parsed.code == AppErrorCode.LIMIT_EXCEEDED

    def test_exception_carrying_app_error_json(self):
        raw = _RpcClientError(json.dumps({"code": "ALREADY_EXISTS"}))
        parsed = parse_gateway_error(raw)
        assert isinstance(parsed, StructuredAppError)
        assert parsed.code == AppErrorCode.ALREADY_EXISTS

    def test_unknown_code_is_still_structured(self):
        parsed = parse_gateway_error({"code": "BRAND_NEW"})
        assert parsed == StructuredAppError(code=AppErrorCode.UNKNOWN_ERROR, message="")


class TestOpaque:
    @pytest.mark.parametrize(
        "raw",
        [
            RuntimeError("boom"),
            "plain text",
            b"\x00\x01",
            {"message": "no code"},
            ["ALREADY_EXISTS"],
            None,
            json.dumps([1, 2]),
        ],
    )
    def test_uninterpretable_input(self, raw):
        parsed = parse_gateway_error(raw)
        assert isinstance(parsed, OpaqueError)
        assert parsed.cause is raw


def test_app_error_defaults_message_to_code():
    err = AppError(AppErrorCode.UNAUTHORIZED)
    assert err.message == "UNAUTHORIZED"
    assert err.to_payload() == {"code": "UNAUTHORIZED", "message": "UNAUTHORIZED"}
