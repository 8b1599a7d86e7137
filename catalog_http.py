# catalog_http.py
#
# Single GET against the catalog server:
# - No retries, one round trip per call
# - Every failure is raised as a CatalogFetchError naming the resource

from __future__ import annotations

import logging
from typing import Any

import requests

from errors import DecodeError, HTTPStatusError, NetworkError

logger = logging.getLogger(__name__)


def get_json(url: str, *, resource: str, timeout: float | None = 15.0) -> Any:
    try:
        r = requests.get(url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        raise NetworkError(str(e) or type(e).__name__, resource=resource, url=url) from e

    if not (200 <= r.status_code < 300):
        snippet = (r.text or "").strip()
        snippet = snippet[:250] if snippet else "no response body"
        raise HTTPStatusError(
            f"HTTP {r.status_code}: {snippet}",
            resource=resource,
            url=url,
            status_code=r.status_code,
        )

    try:
        data = r.json()
    except ValueError as e:
        raise DecodeError(f"response is not valid JSON: {e}", resource=resource, url=url) from e

    logger.debug("GET %s -> %d (%d bytes)", url, r.status_code, len(r.content))
    return data
