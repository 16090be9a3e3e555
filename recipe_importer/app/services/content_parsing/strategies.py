"""Ordered fallback evaluation for content mining strategies."""

import logging
from typing import Callable, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def first_success(strategies: Sequence[Callable[[str], Optional[T]]], html: str) -> Optional[T]:
    """Run strategies in order and return the first non-empty result.

    A strategy that raises a parsing/lookup error counts as a miss.
    """
    for strategy in strategies:
        name = getattr(strategy, "__name__", repr(strategy))
        try:
            result = strategy(html)
        except (ValueError, TypeError, KeyError, AttributeError, IndexError, RecursionError) as exc:
            logger.warning("Strategy %s failed: %s", name, exc)
            continue
        if result:
            logger.info("Strategy %s succeeded", name)
            return result
        logger.debug("Strategy %s found nothing", name)
    return None
