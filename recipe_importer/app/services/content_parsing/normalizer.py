"""Turn raw user input into the content string embedded in the extraction prompt."""

import logging
from typing import Optional

from recipe_importer.app.services.content_parsing.classifier import classify_input
from recipe_importer.app.services.content_parsing.miners import mine_web_page, mine_youtube_video
from recipe_importer.app.services.content_parsing.models import ClassifiedInput, ContentKind, MinedContent

logger = logging.getLogger(__name__)


async def mine_content(raw: str, classified: Optional[ClassifiedInput] = None) -> MinedContent:
    """Classify the input and mine it when it is a URL.

    Never raises: any miner failure, and any miner result that defers to the
    original input, yields ``raw`` unchanged. Callers that already classified
    the input pass the result in to skip classifying again.
    """
    if classified is None:
        classified = classify_input(raw)
    if classified.kind == ContentKind.PLAIN_TEXT:
        return MinedContent(text=raw, source="plain-text")

    try:
        if classified.kind == ContentKind.YOUTUBE_URL:
            mined = await mine_youtube_video(classified.video_id)
        else:
            logger.info("Fetching URL: %s", classified.url)
            mined = await mine_web_page(classified.url)
    except Exception:  # noqa: BLE001
        logger.exception("Content mining failed for %s; using raw input", classified.url)
        return MinedContent(text=raw, source="raw-url")

    if mined.source == "raw-url" or not mined.text:
        return MinedContent(text=raw, source="raw-url")
    return mined


async def normalize_content(raw: str) -> str:
    mined = await mine_content(raw)
    return mined.text
