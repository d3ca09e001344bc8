"""Resolve a scan target (URL or local path) to its text content."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import httpx

from .errors import AcquisitionError
from .utils import read_text_file

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0
URL_SCHEMES = ("http://", "https://")


def is_url(target: str) -> bool:
    return target.lower().startswith(URL_SCHEMES)


def fetch_content(
    target: str,
    client: Optional[httpx.Client] = None,
    timeout: float = REQUEST_TIMEOUT,
) -> str:
    """Return the text behind ``target``.

    Args:
        target: An ``http(s)://`` URL or a filesystem path.
        client: Optional httpx client to issue the request with. A
            short-lived client is created when omitted.
        timeout: Request timeout in seconds for URL targets.

    Raises:
        AcquisitionError: on transport errors, any non-200 response, or
            when the local file cannot be read.
    """

    logger.info("Fetching %s", target)
    if is_url(target):
        content = _fetch_url(target, client, timeout)
    else:
        content = _read_file(Path(target))
    logger.debug("Fetched %d characters from %s", len(content), target)
    return content


def _fetch_url(url: str, client: Optional[httpx.Client], timeout: float) -> str:
    if client is None:
        with httpx.Client(timeout=timeout) as owned:
            return _get(owned, url, timeout)
    return _get(client, url, timeout)


def _get(client: httpx.Client, url: str, timeout: float) -> str:
    try:
        response = client.get(url, follow_redirects=False, timeout=timeout)
    except httpx.HTTPError as exc:
        raise AcquisitionError(f"Failed to fetch URL: {exc}") from exc

    if response.status_code != 200:
        raise AcquisitionError(f"Failed to fetch URL: HTTP {response.status_code}")
    return response.text


def _read_file(path: Path) -> str:
    try:
        return read_text_file(path)
    except FileNotFoundError as exc:
        raise AcquisitionError(f"File not found: {path}") from exc
    except OSError as exc:
        raise AcquisitionError(f"Failed to read {path}: {exc.strerror or exc}") from exc
