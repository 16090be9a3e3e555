"""Parse and repair the generative backend's recipe JSON."""

import json
import logging
import re
from typing import Any, Optional

from recipe_importer.app.schemas.recipe import ParsedRecipe
from recipe_importer.app.services.errors import MalformedResponse

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Recipe"
DEFAULT_CATEGORY = "Other"
DURATION_RE = re.compile(
    r"(?:(?P<hours>\d+(?:\.\d+)?)\s*(?:h|hrs?|hours?)\s*(?:,|and)?\s*)?"
    r"(?:(?P<minutes>\d+(?:\.\d+)?)\s*(?:m|mins?|minutes?)?\.?)?",
    re.I,
)


def strip_code_fences(text: str) -> str:
    """Remove leading/trailing triple-backtick fences, optionally tagged ``json``."""
    cleaned = text.strip()
    cleaned = re.sub(r"^```[a-zA-Z0-9_-]*\s*", "", cleaned, count=1)
    cleaned = re.sub(r"\s*```$", "", cleaned, count=1)
    return cleaned.strip()


def _load_json_object(raw: str) -> Any:
    cleaned = strip_code_fences(raw)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        start = cleaned.find("{")
        end = cleaned.rfind("}")
        if start != -1 and end > start:
            return json.loads(cleaned[start : end + 1])
        raise


def _coerce_minutes(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(round(value))
    if isinstance(value, str):
        match = DURATION_RE.fullmatch(value.strip())
        if match and (match.group("hours") or match.group("minutes")):
            hours = float(match.group("hours") or 0)
            minutes = float(match.group("minutes") or 0)
            return int(round(hours * 60 + minutes))
        logger.warning("Ignoring unrecognized duration: %r", value)
    return None


def _coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, list):
        return "\n".join(str(item).strip() for item in value if item is not None and str(item).strip())
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    text = _coerce_text(value)
    if not text or text.lower() in {"null", "none", "undefined"}:
        return None
    return text


def parse_recipe_response(raw_text: str) -> ParsedRecipe:
    """Turn backend text into a ParsedRecipe.

    Ingredient and step line formats are taken as the model produced them.
    """
    try:
        data = _load_json_object(raw_text)
    except (ValueError, RecursionError) as exc:
        logger.error("Failed to parse AI response: %s", raw_text[:2000])
        raise MalformedResponse() from exc

    if isinstance(data, dict) and isinstance(data.get("recipe"), dict):
        data = data["recipe"]
    if not isinstance(data, dict):
        logger.error("AI response is not a JSON object: %s", raw_text[:2000])
        raise MalformedResponse()

    prep = _coerce_minutes(data.get("prep_time_minutes"))
    cook = _coerce_minutes(data.get("cook_time_minutes"))
    total = prep + cook if prep is not None and cook is not None else None

    recipe = ParsedRecipe(
        title=_optional_text(data.get("title")) or DEFAULT_TITLE,
        category=_optional_text(data.get("category")) or DEFAULT_CATEGORY,
        cuisine=_optional_text(data.get("cuisine")),
        servings=_optional_text(data.get("servings")),
        prep_time_minutes=prep,
        cook_time_minutes=cook,
        total_time_minutes=total,
        ingredients=_coerce_text(data.get("ingredients")) or "",
        steps=_coerce_text(data.get("steps")) or "",
        notes=_optional_text(data.get("notes")),
    )
    logger.info(
        "Parsed recipe %r: %d ingredient lines, %d step lines",
        recipe.title,
        len(recipe.ingredients.splitlines()),
        len(recipe.steps.splitlines()),
    )
    return recipe
