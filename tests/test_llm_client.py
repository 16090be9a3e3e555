import json

import httpx
import pytest

from recipe_importer.app.core.config import Settings
from recipe_importer.app.services.errors import BackendConfigurationError, ExtractionFailure
from recipe_importer.app.services.llm_client import ChatCompletionBackend, extract_text


def _settings(**overrides) -> Settings:
    values = {"GEMINI_API_KEY": "test-key", "LLM_BASE_URL": "http://llm-proxy/v1"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_missing_key_is_configuration_error():
    with pytest.raises(BackendConfigurationError):
        ChatCompletionBackend(_settings(GEMINI_API_KEY=None))


@pytest.mark.asyncio
async def test_complete_posts_prompt(mock_http):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": [{"message": {"content": '{"title": "Soup"}'}}]})

    requests = mock_http(handler)

    backend = ChatCompletionBackend(_settings())
    text = await backend.complete("PROMPT")
    assert text == '{"title": "Soup"}'

    request = requests[0]
    assert str(request.url) == "http://llm-proxy/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body["messages"] == [{"role": "user", "content": "PROMPT"}]
    assert body["temperature"] == 0.0


@pytest.mark.asyncio
async def test_error_envelope_becomes_extraction_failure(mock_http):
    mock_http(lambda request: httpx.Response(200, json={"error": {"type": "quota", "message": "Quota exceeded"}}))

    with pytest.raises(ExtractionFailure):
        await extract_text("PROMPT", ChatCompletionBackend(_settings()))


@pytest.mark.asyncio
async def test_http_error_becomes_extraction_failure(mock_http):
    mock_http(lambda request: httpx.Response(503, text="unavailable"))

    with pytest.raises(ExtractionFailure):
        await extract_text("PROMPT", ChatCompletionBackend(_settings()))


@pytest.mark.asyncio
async def test_timeout_becomes_extraction_failure(mock_http):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    mock_http(handler)

    with pytest.raises(ExtractionFailure):
        await extract_text("PROMPT", ChatCompletionBackend(_settings(LLM_TIMEOUT_SECONDS=0.5)))


@pytest.mark.asyncio
async def test_missing_content_becomes_extraction_failure(mock_http):
    mock_http(lambda request: httpx.Response(200, json={"choices": [{"message": {}}]}))

    with pytest.raises(ExtractionFailure):
        await extract_text("PROMPT", ChatCompletionBackend(_settings()))
