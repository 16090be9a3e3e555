"""Classify raw input as plain text, a YouTube video URL, or a generic web URL."""

import logging
import re
from typing import Optional

from recipe_importer.app.services.content_parsing.models import ClassifiedInput, ContentKind

logger = logging.getLogger(__name__)

URL_RE = re.compile(r"^(https?://\S+)", re.I)
YOUTUBE_RE = re.compile(
    r"(?:youtube\.com/watch\?(?:\S*&)?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)"
    r"([A-Za-z0-9_-]{11})",
    re.I,
)


def extract_youtube_id(url: str) -> Optional[str]:
    match = YOUTUBE_RE.search(url)
    return match.group(1) if match else None


def classify_input(raw: str) -> ClassifiedInput:
    """Inspect the input string without touching the network.

    Only input that starts with an http(s) URL (surrounding whitespace ignored)
    counts as a URL; everything else is plain text.
    """
    match = URL_RE.match(raw.strip())
    if not match:
        return ClassifiedInput(kind=ContentKind.PLAIN_TEXT)

    url = match.group(1)
    video_id = extract_youtube_id(url)
    if video_id:
        logger.info("Detected YouTube video: %s", video_id)
        return ClassifiedInput(kind=ContentKind.YOUTUBE_URL, url=url, video_id=video_id)
    return ClassifiedInput(kind=ContentKind.GENERIC_URL, url=url)
