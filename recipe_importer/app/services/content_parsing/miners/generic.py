"""Mine recipe content from an arbitrary web page."""

import json
import logging
import re
from typing import Any, Optional

from bs4 import BeautifulSoup

from recipe_importer.app.core.config import get_settings
from recipe_importer.app.services.content_parsing.html_fetcher import browser_headers, fetch_page
from recipe_importer.app.services.content_parsing.models import MinedContent
from recipe_importer.app.services.content_parsing.strategies import first_success
from recipe_importer.app.services.errors import MiningSoftFailure

logger = logging.getLogger(__name__)


def is_recipe_type(value: Any) -> bool:
    """Check whether a JSON-LD @type value names a Recipe."""
    types = value if isinstance(value, list) else [value]
    return any(isinstance(t, str) and t.lower() == "recipe" for t in types)


def find_recipe_object(data: Any, max_depth: Optional[int] = None, _depth: int = 0) -> Optional[dict]:
    """Locate a Recipe object in parsed JSON-LD.

    Handles a direct object, a wrapping array, and an ``@graph`` container.
    Recursion stops past ``max_depth`` levels.
    """
    if max_depth is None:
        max_depth = get_settings().jsonld_max_depth
    if _depth > max_depth:
        logger.debug("JSON-LD search hit depth limit %d", max_depth)
        return None

    if isinstance(data, list):
        for item in data:
            found = find_recipe_object(item, max_depth, _depth + 1)
            if found is not None:
                return found
    elif isinstance(data, dict):
        if is_recipe_type(data.get("@type")):
            return data
        if "@graph" in data:
            return find_recipe_object(data["@graph"], max_depth, _depth + 1)
    return None


def extract_jsonld_recipe(html: str) -> Optional[MinedContent]:
    soup = BeautifulSoup(html, "lxml")
    scripts = soup.find_all("script", attrs={"type": re.compile(r"application/ld\+json", re.I)})
    logger.info("Found %d JSON-LD script blocks", len(scripts))

    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            continue
        try:
            data = json.loads(raw_json)
        except (ValueError, RecursionError) as exc:
            logger.warning("JSON-LD block %d failed to parse: %s", idx, exc)
            continue

        recipe = find_recipe_object(data)
        if recipe is not None:
            logger.info("Found JSON-LD Recipe object in block %d", idx)
            return MinedContent(text=json.dumps(recipe, ensure_ascii=False), source="jsonld")

    if scripts:
        logger.info("JSON-LD found but no Recipe object detected, falling back to HTML text")
    return None


def extract_page_text(html: str) -> Optional[MinedContent]:
    """Visible page text with scripts and styles removed, whitespace collapsed."""
    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(["script", "style"]):
        tag.decompose()
    text = re.sub(r"\s+", " ", soup.get_text(" ")).strip()
    return MinedContent(text=text[: get_settings().page_text_max_chars], source="html-text")


PAGE_STRATEGIES = (extract_jsonld_recipe, extract_page_text)


async def mine_web_page(url: str) -> MinedContent:
    """Fetch a page and mine it; on fetch failure the URL itself is the content."""
    try:
        html = await fetch_page(url, browser_headers())
    except MiningSoftFailure as exc:
        logger.warning("Falling back to raw URL for %s: %s", url, exc)
        return MinedContent(text=url, source="raw-url")

    mined = first_success(PAGE_STRATEGIES, html)
    if mined is None:
        return MinedContent(text="", source="html-text")
    return mined
