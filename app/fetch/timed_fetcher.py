import asyncio
from typing import List, Optional

import httpx

from .base import FailureReason, FetchFailure, FetchOutcome, FetchRequest, FetchSuccess

async def _read_body(url: str, timeout_sec: float, transport: Optional[httpx.AsyncBaseTransport]) -> str:
    chunks: List[str] = []
    async with httpx.AsyncClient(timeout=timeout_sec, transport=transport) as client:
        async with client.stream("GET", url) as response:
            async for chunk in response.aiter_text():
                chunks.append(chunk)
    return "".join(chunks)

async def fetch(
    url: str,
    timeout_ms: int,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchOutcome:
    """
    Single GET with a hard deadline.

    The body read races the timeout; whichever finishes first settles the
    outcome and the other side is cancelled. The body is returned as-is
    regardless of status code, parsing is up to the caller. Never raises
    for transport problems and never retries.
    """
    timeout_sec = timeout_ms / 1000
    try:
        body = await asyncio.wait_for(_read_body(url, timeout_sec, transport), timeout=timeout_sec)
    except asyncio.TimeoutError:
        return FetchFailure(FailureReason.TIMEOUT, f"no response within {timeout_ms}ms")
    except httpx.TimeoutException as e:
        return FetchFailure(FailureReason.TIMEOUT, str(e) or type(e).__name__)
    except httpx.RemoteProtocolError as e:
        return FetchFailure(FailureReason.ABORTED_BY_PEER, str(e) or type(e).__name__)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        # transport failures, undecodable bodies, bad schemes
        return FetchFailure(FailureReason.NETWORK_ERROR, str(e) or type(e).__name__)
    return FetchSuccess(body)

async def fetch_request(
    request: FetchRequest,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchOutcome:
    return await fetch(request.url, request.timeout_ms, transport=transport)
