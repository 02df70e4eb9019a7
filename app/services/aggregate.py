import asyncio
import json
import logging
from typing import Any, Optional

import httpx

from app.core.logging_setup import get_error_logger
from app.fetch import timed_fetcher
from app.fetch.base import FetchFailure, FetchOutcome
from app.schemas import PageData

logger = logging.getLogger(__name__)

def _absorb(outcome: FetchOutcome, label: str, url: str) -> Optional[Any]:
    """Parsed feed, or None with one error-log entry when fetch or parse failed."""
    if isinstance(outcome, FetchFailure):
        reason = f"{outcome.reason.value}: {outcome.detail}"
    else:
        try:
            return json.loads(outcome.body)
        except json.JSONDecodeError as e:
            reason = f"invalid JSON: {e}"
    logger.warning(f"{label} ({url}): {reason}")
    get_error_logger().error(label)
    return None

async def aggregate(
    news_url: str,
    phrase_url: str,
    timeout_ms: int,
    phrase_timeout_ms: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> PageData:
    """
    Fetch the news and phrase feeds concurrently and parse each as JSON.

    Both requests are started before either is awaited, each with its own
    timeout budget. A failed fetch or unparseable body leaves that field as
    None and writes one entry to the error log; the other field is unaffected.
    """
    if phrase_timeout_ms is None:
        phrase_timeout_ms = timeout_ms

    news_task = asyncio.create_task(timed_fetcher.fetch(news_url, timeout_ms, transport=transport))
    phrases_task = asyncio.create_task(timed_fetcher.fetch(phrase_url, phrase_timeout_ms, transport=transport))

    news = _absorb(await news_task, "no news", news_url)
    phrases = _absorb(await phrases_task, "no phrases", phrase_url)

    return PageData(news=news, phrases=phrases)
