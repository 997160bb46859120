from __future__ import annotations

import logging

import httpx

from .exceptions import InvalidHeaderError, InvalidURLError, UnreachableTargetError
from .settings import DEFAULT_TIMEOUT_MS, DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


def parse_absolute_url(raw: str) -> str:
    """Return the URL unchanged if it is an absolute http(s) URL.

    Unlike a browser address bar, no scheme is guessed: ``example.com`` is
    rejected rather than turned into ``https://example.com``.
    """
    value = (raw or "").strip()
    if not value:
        raise InvalidURLError(raw or "")
    try:
        parsed = httpx.URL(value)
    except (httpx.InvalidURL, ValueError, TypeError):
        raise InvalidURLError(value) from None
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidURLError(value)
    return value


async def fetch_html(
    url: str,
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    user_agent: str = DEFAULT_USER_AGENT,
    client: httpx.AsyncClient | None = None,
) -> str:
    """GET the page once and return its body as text.

    A caller-supplied client is used as-is and left open.
    """
    target = parse_absolute_url(url)
    headers = {
        "user-agent": user_agent,
        "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "accept-language": "en-US,en;q=0.6",
    }

    try:
        if client is not None:
            res = await client.get(
                target, headers=headers, timeout=timeout_ms / 1000, follow_redirects=True
            )
        else:
            async with httpx.AsyncClient(timeout=timeout_ms / 1000, follow_redirects=True) as own:
                res = await own.get(target, headers=headers)
    except UnicodeEncodeError:
        # httpx sends header values as ASCII.
        raise InvalidHeaderError("user-agent", user_agent) from None
    except httpx.InvalidURL:
        raise InvalidURLError(target) from None
    except httpx.HTTPError as e:
        logger.warning("Fetch failed for %s: %s", target, e)
        raise UnreachableTargetError(f"Unable to fetch {target}: {e}") from e

    if res.status_code < 200 or res.status_code >= 300:
        logger.warning("Fetch for %s returned status %s", target, res.status_code)
        raise UnreachableTargetError.for_status(res.status_code)

    return res.text
