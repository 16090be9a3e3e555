"""Outbound page fetching for content mining."""

import ipaddress
import logging
from typing import Dict, Optional
from urllib.parse import urlparse

import httpx

from recipe_importer.app.core.config import get_settings
from recipe_importer.app.services.errors import MiningSoftFailure

logger = logging.getLogger(__name__)


def youtube_headers() -> Dict[str, str]:
    settings = get_settings()
    return {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }


def browser_headers() -> Dict[str, str]:
    """Full browser emulation for sites with bot protection."""
    settings = get_settings()
    return {
        "User-Agent": settings.scraper_user_agent,
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "image/avif,image/webp,image/apng,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
        "Sec-Ch-Ua": '"Not_A Brand";v="8", "Chromium";v="120", "Google Chrome";v="120"',
        "Sec-Ch-Ua-Mobile": "?0",
        "Sec-Ch-Ua-Platform": '"Windows"',
        "Sec-Fetch-Dest": "document",
        "Sec-Fetch-Mode": "navigate",
        "Sec-Fetch-Site": "none",
        "Sec-Fetch-User": "?1",
        "Upgrade-Insecure-Requests": "1",
    }


def is_private_host(host: str) -> bool:
    """Check if a host is private/localhost."""
    hostname = host.split(":")[0]
    try:
        ip = ipaddress.ip_address(hostname)
        return ip.is_private or ip.is_loopback
    except ValueError:
        return hostname.lower() in {"localhost"}


async def fetch_page(url: str, headers: Dict[str, str], timeout: Optional[float] = None) -> str:
    """GET a page and return its decoded body.

    Every failure (bad URL, blocked host, network error, timeout, non-2xx status)
    is raised as MiningSoftFailure so miners can fall back.
    """
    parsed_url = urlparse(url)
    if parsed_url.scheme not in {"http", "https"} or not parsed_url.netloc:
        raise MiningSoftFailure(f"Invalid URL: {url}")
    if is_private_host(parsed_url.hostname or ""):
        raise MiningSoftFailure("URL points to a private or disallowed host")

    if timeout is None:
        timeout = get_settings().fetch_timeout_seconds

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, headers=headers) as client:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("Failed to fetch URL %s: status %s", url, status)
        raise MiningSoftFailure(f"Site returned status {status}") from exc
    except httpx.TimeoutException as exc:
        logger.warning("Timed out fetching %s", url)
        raise MiningSoftFailure("Timed out fetching page") from exc
    except httpx.HTTPError as exc:
        logger.warning("Network error fetching %s: %s", url, exc)
        raise MiningSoftFailure(f"Network error: {exc}") from exc

    text = response.text
    logger.info("Successfully fetched %s, length: %d", url, len(text))
    return text
