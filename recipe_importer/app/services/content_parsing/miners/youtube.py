"""Mine the title and description of a YouTube video from its watch page."""

import html as html_lib
import json
import logging
import re
from typing import Optional

from recipe_importer.app.services.content_parsing.html_fetcher import fetch_page, youtube_headers
from recipe_importer.app.services.content_parsing.models import MinedContent
from recipe_importer.app.services.content_parsing.strategies import first_success
from recipe_importer.app.services.errors import MiningSoftFailure

logger = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
OG_TITLE_RE = re.compile(r'<meta property="og:title" content="([^"]+)"')
OG_DESCRIPTION_RE = re.compile(r'<meta property="og:description" content="([^"]+)"')
INITIAL_DATA_RE = re.compile(r'(?:var\s+ytInitialData|window\["ytInitialData"\])\s*=\s*(?=\{)')
NO_DESCRIPTION_NOTE = "Note: No description found. Please paste the recipe from the video description manually."


def extract_title(html: str) -> str:
    match = OG_TITLE_RE.search(html)
    return html_lib.unescape(match.group(1)) if match else ""


def _load_initial_data(html: str) -> Optional[dict]:
    match = INITIAL_DATA_RE.search(html)
    if not match:
        return None
    try:
        data, _ = json.JSONDecoder().raw_decode(html, match.end())
    except (ValueError, RecursionError) as exc:
        logger.warning("Failed to parse ytInitialData: %s", exc)
        return None
    return data if isinstance(data, dict) else None


def description_from_initial_data(html: str) -> Optional[MinedContent]:
    """Read the full description from the embedded ytInitialData blob."""
    data = _load_initial_data(html)
    if data is None:
        return None

    contents = (
        data.get("contents", {})
        .get("twoColumnWatchNextResults", {})
        .get("results", {})
        .get("results", {})
        .get("contents")
    )
    if not isinstance(contents, list):
        return None

    for item in contents:
        if not isinstance(item, dict):
            continue
        renderer = item.get("videoSecondaryInfoRenderer") or {}
        attributed = renderer.get("attributedDescription")
        if attributed:
            description = attributed.get("content") or ""
            logger.info("Extracted YouTube description from ytInitialData, length: %d", len(description))
            return MinedContent(text=description, source="youtube-description") if description else None
    return None


def description_from_meta(html: str) -> Optional[MinedContent]:
    match = OG_DESCRIPTION_RE.search(html)
    if not match:
        return None
    description = html_lib.unescape(match.group(1))
    logger.info("Using meta description as fallback, length: %d", len(description))
    return MinedContent(text=description, source="youtube-meta")


DESCRIPTION_STRATEGIES = (description_from_initial_data, description_from_meta)


async def mine_youtube_video(video_id: str) -> MinedContent:
    """Build prompt content from a video's title and description.

    A failed fetch yields empty ``raw-url`` content so the caller keeps the
    original URL; a page without a description yields the title plus a note.
    """
    url = WATCH_URL.format(video_id=video_id)
    try:
        html = await fetch_page(url, youtube_headers())
    except MiningSoftFailure as exc:
        logger.warning("Failed to fetch YouTube page for %s: %s", video_id, exc)
        return MinedContent(text="", source="raw-url")

    title = extract_title(html)
    description = first_success(DESCRIPTION_STRATEGIES, html)
    if description is None:
        logger.warning("No description found in YouTube video %s", video_id)
        return MinedContent(text=f"Video Title: {title}\n\n{NO_DESCRIPTION_NOTE}", source="youtube-meta")

    return MinedContent(
        text=f"Video Title: {title}\n\nDescription:\n{description.text}",
        source=description.source,
    )
