"""Content mining package.

Classifies raw input and mines usable recipe text from YouTube watch pages
and generic recipe pages (schema.org JSON-LD first, visible page text second).
"""

from recipe_importer.app.services.content_parsing.classifier import (
    classify_input,
    extract_youtube_id,
)
from recipe_importer.app.services.content_parsing.html_fetcher import (
    browser_headers,
    fetch_page,
    is_private_host,
    youtube_headers,
)
from recipe_importer.app.services.content_parsing.models import (
    ClassifiedInput,
    ContentKind,
    MinedContent,
)
from recipe_importer.app.services.content_parsing.normalizer import (
    mine_content,
    normalize_content,
)
from recipe_importer.app.services.content_parsing.strategies import first_success

__all__ = [
    # Models
    "ClassifiedInput",
    "ContentKind",
    "MinedContent",
    # Classification
    "classify_input",
    "extract_youtube_id",
    # Fetching
    "browser_headers",
    "fetch_page",
    "is_private_host",
    "youtube_headers",
    # Mining
    "first_success",
    "mine_content",
    "normalize_content",
]
