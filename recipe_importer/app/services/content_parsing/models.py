"""Pydantic models for input classification and content mining."""

import enum
from typing import Literal, Optional

from pydantic import BaseModel

ContentSource = Literal[
    "jsonld",
    "html-text",
    "youtube-description",
    "youtube-meta",
    "raw-url",
    "plain-text",
]


class ContentKind(str, enum.Enum):
    PLAIN_TEXT = "plain_text"
    YOUTUBE_URL = "youtube_url"
    GENERIC_URL = "generic_url"


class ClassifiedInput(BaseModel):
    """Outcome of inspecting raw user input."""

    kind: ContentKind
    url: Optional[str] = None
    video_id: Optional[str] = None


class MinedContent(BaseModel):
    """Text to embed in the extraction prompt, tagged with where it came from."""

    text: str
    source: ContentSource
