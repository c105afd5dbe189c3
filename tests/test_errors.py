"""Tests for error classification."""

import pytest
from poof.client import (
    ApiErrorResponse,
    PoofError,
    AuthenticationError,
    PermissionError,
    PaymentRequiredError,
    RateLimitError,
    ValidationError,
    ServerError,
    RequestTimeoutError,
    classify,
)
from poof.core import ErrorCode


EXPECTED = {
    "authentication_error": AuthenticationError,
    "permission_denied": PermissionError,
    "payment_required": PaymentRequiredError,
    "rate_limit_exceeded": RateLimitError,
    "validation_error": ValidationError,
    "missing_image": ValidationError,
    "image_too_large": ValidationError,
    "upstream_error": ServerError,
    "internal_server_error": ServerError,
}


class TestClassify:
    """Test mapping error bodies to error classes."""

    @pytest.mark.parametrize("code,error_class", sorted(EXPECTED.items()))
    def test_known_codes(self, code, error_class):
        payload = ApiErrorResponse(
            code=code, message="Something", details="extra", request_id="req_1"
        )

        error = classify(payload, 400)

        assert type(error) is error_class
        assert isinstance(error, PoofError)
        assert error.code == code
        assert error.message == "Something"
        assert str(error) == "Something"
        assert error.status == 400
        assert error.request_id == "req_1"
        assert error.details == "extra"

    def test_every_error_code_is_mapped(self):
        for code in ErrorCode:
            error = classify(ApiErrorResponse(code=code.value, message="m"), 500)
            assert type(error) is not PoofError

    def test_unknown_code_is_generic(self):
        payload = ApiErrorResponse(code="quota_frozen", message="Frozen", request_id="r")

        error = classify(payload, 423)

        assert type(error) is PoofError
        assert error.code == "quota_frozen"
        assert error.status == 423

    def test_classify_is_repeatable(self):
        payload = ApiErrorResponse(
            code="rate_limit_exceeded", message="Slow down", request_id="r2"
        )

        first = classify(payload, 429)
        second = classify(payload, 429)

        assert first is not second
        assert first.to_dict() == second.to_dict()

    def test_from_response_matches_classify(self):
        payload = ApiErrorResponse(code="permission_denied", message="No")
        assert PoofError.from_response(payload, 403).to_dict() == classify(
            payload, 403
        ).to_dict()

    def test_optional_fields_absent(self):
        error = classify(ApiErrorResponse(code="missing_image", message="No image"), 400)
        assert error.request_id is None
        assert error.details is None


class TestErrorTypes:
    """Test error construction."""

    def test_timeout_error(self):
        error = RequestTimeoutError()
        assert isinstance(error, PoofError)
        assert error.code == "timeout"
        assert error.status == 408
        assert error.message == "Request timeout"

    def test_to_dict(self):
        error = ServerError("Boom", "internal_server_error", status=500, request_id="x")
        assert error.to_dict() == {
            "type": "ServerError",
            "message": "Boom",
            "code": "internal_server_error",
            "status": 500,
            "request_id": "x",
            "details": None,
        }
