# src/streamshield/transport.py
from __future__ import annotations

import logging
from typing import Dict, Optional

import httpx

from .errors import NetworkError

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


async def post_json(
    url: str,
    *,
    params: Dict[str, str],
    body: bytes,
    timeout_s: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.Response:
    """POST pre-serialized JSON. The response status is left to the caller."""
    logger.debug("POST %s (%d bytes)", url, len(body))
    try:
        async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
            return await client.post(url, params=params, content=body, headers=JSON_HEADERS)
    except httpx.HTTPError as e:
        raise NetworkError(None, f"{type(e).__name__}: {e}") from e
