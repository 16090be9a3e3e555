from typing import Callable

from recipe_importer.app.services.llm_client import ChatCompletionBackend, CompletionBackend


def get_backend_factory() -> Callable[[], CompletionBackend]:
    return ChatCompletionBackend
