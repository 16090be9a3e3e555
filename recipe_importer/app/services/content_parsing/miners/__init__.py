"""Content miners for YouTube videos and generic recipe pages."""

from recipe_importer.app.services.content_parsing.miners.generic import mine_web_page
from recipe_importer.app.services.content_parsing.miners.youtube import mine_youtube_video

__all__ = [
    "mine_web_page",
    "mine_youtube_video",
]
