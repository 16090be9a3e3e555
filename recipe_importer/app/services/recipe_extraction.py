"""End-to-end recipe extraction: mine content, prompt the backend, parse the reply."""

import logging
from typing import Any, Callable

from recipe_importer.app.schemas.recipe import ParseRecipeResponse
from recipe_importer.app.services.content_parsing import classify_input, mine_content
from recipe_importer.app.services.content_parsing.models import ContentKind
from recipe_importer.app.services.errors import InvalidInput
from recipe_importer.app.services.llm_client import CompletionBackend, extract_text
from recipe_importer.app.services.prompt_builder import build_prompt
from recipe_importer.app.services.response_parser import parse_recipe_response

logger = logging.getLogger(__name__)


async def extract_recipe(raw: Any, backend_factory: Callable[[], CompletionBackend]) -> ParseRecipeResponse:
    """Run the linear pipeline for one request.

    The backend is built only after the input is accepted, so a missing
    credential surfaces as BackendConfigurationError before any fetch.
    Mining problems degrade the prompt content; backend and parse failures
    propagate as ExtractionFailure / MalformedResponse.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidInput()
    backend = backend_factory()

    classified = classify_input(raw)
    source_url = classified.url if classified.kind != ContentKind.PLAIN_TEXT else None

    mined = await mine_content(raw, classified)
    logger.info("Content to parse from %s, length: %d", mined.source, len(mined.text))

    prompt = build_prompt(mined.text, source_url=source_url)
    text = await extract_text(prompt, backend)
    recipe = parse_recipe_response(text)
    return ParseRecipeResponse(recipe=recipe, source_url=source_url, content_source=mined.source)
