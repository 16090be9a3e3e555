import json

import pytest
from fastapi.exceptions import RequestValidationError

from recipe_importer.app.main import extraction_exception_handler, validation_exception_handler
from recipe_importer.app.services.errors import MalformedResponse


@pytest.mark.asyncio
async def test_validation_handler_formats_errors():
    exc = RequestValidationError(
        errors=[
            {"loc": ("body", "input"), "msg": "field required"},
            {"loc": ("body", "prep_time_minutes"), "msg": "value is not a valid integer"},
        ]
    )
    response = await validation_exception_handler(None, exc)
    assert response.status_code == 422
    body = json.loads(response.body)
    assert body["error_code"] == "validation_error"
    assert body["message"] == "Invalid request payload."
    assert "job_id" in body and body["job_id"]
    assert {"field": "body.input", "message": "field required"} in body["details"]


@pytest.mark.asyncio
async def test_extraction_handler_formats_errors():
    response = await extraction_exception_handler(None, MalformedResponse())
    assert response.status_code == 502
    body = json.loads(response.body)
    assert body["error_code"] == "malformed_response"
    assert body["message"] == "Failed to parse recipe. Please try again or enter recipe manually."
    assert body["job_id"]
