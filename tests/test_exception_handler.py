"""test_exception_handler: 전역 예외 처리 핸들러 단위 테스트."""

import json

import pytest
from unittest.mock import MagicMock, patch
from middleware.exception_handler import (
    global_exception_handler,
    sanitize_validation_errors,
)


def test_sanitize_redacts_input():
    errors = [
        {
            "type": "value_error",
            "loc": ("body", "password"),
            "msg": "Value error, too long",
            "input": "SuperSecret1!",
            "ctx": {"error": ValueError("too long")},
        }
    ]

    sanitized = sanitize_validation_errors(errors)

    assert sanitized[0]["input"] == "<redacted>"
    assert sanitized[0]["ctx"] == {"error": "too long"}
    # 원본은 변경되지 않아야 함
    assert errors[0]["input"] == "SuperSecret1!"


@pytest.mark.asyncio
@patch("middleware.exception_handler.error_logger")
async def test_global_exception_handler(mock_error_logger):
    request = MagicMock()
    request.state = MagicMock()

    response = await global_exception_handler(request, RuntimeError("boom"))

    assert response.status_code == 500
    body = json.loads(response.body)
    assert body["error"] == "Internal Server Error"
    assert "trackingID" in body
    mock_error_logger.error.assert_called_once()
