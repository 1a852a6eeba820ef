"""Puzzle input download and the fetch-then-write workflow."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict, Field

from aocfetch.config.models import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from aocfetch.errors import DestinationExistsError, FetchError, OutputWriteError
from aocfetch.services.validation import FIRST_YEAR, LAST_DAY

logger = logging.getLogger(__name__)

_COOKIE_HINT_STATUSES = {400, 401, 403, 500}


class InputRequest(BaseModel):
    """Everything needed to fetch one day's input."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, le=LAST_DAY)
    year: int = Field(ge=FIRST_YEAR)
    cookie: str = Field(min_length=1, repr=False)
    output: Path


def input_url(year: int, day: int, *, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{year}/day/{day}/input"


def download_input(
    url: str,
    cookie: str,
    *,
    timeout_seconds: float | None = None,
    user_agent: str | None = None,
) -> bytes:
    """GET `url` with the session cookie and return the raw response body."""
    headers = {
        "User-Agent": user_agent or DEFAULT_USER_AGENT,
        "Cookie": f"session={cookie}",
    }

    logger.info("Connecting to: %s", url)
    try:
        response = requests.get(url, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise FetchError(f"Error connecting to {url}: {exc}") from exc

    if response.status_code == 404:
        raise FetchError(f"Puzzle input not found at {url} (HTTP 404); is the puzzle unlocked yet?")
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        message = f"Server error for {url}: {exc}"
        if response.status_code in _COOKIE_HINT_STATUSES:
            message += " (the session cookie may be invalid or expired; set it again with -c)"
        raise FetchError(message) from exc

    return response.content


def write_input(dest: Path, content: bytes) -> Path:
    """Write `content` verbatim to `dest`, which must not exist yet.

    The body goes to a ``.download`` sibling first and only replaces into
    `dest` once complete, so a failed write never leaves a partial file.
    """
    tmp_path = dest.with_suffix(dest.suffix + ".download")
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(content)
        if dest.exists():
            raise DestinationExistsError(f"Destination file already exists: {dest}")
        tmp_path.replace(dest)
    except OSError as exc:
        raise OutputWriteError(f"Unable to write to destination: {exc}") from exc
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
    return dest


def fetch_input(
    request: InputRequest,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout_seconds: Optional[float] = None,
    user_agent: Optional[str] = None,
) -> Path:
    """Download the requested input and store it at ``request.output``.

    The destination is checked before any network activity and is never
    overwritten.
    """
    if request.output.exists():
        raise DestinationExistsError(f"Destination file already exists: {request.output}")

    logger.info("Downloading day: %s", request.day)
    content = download_input(
        input_url(request.year, request.day, base_url=base_url),
        request.cookie,
        timeout_seconds=timeout_seconds,
        user_agent=user_agent,
    )
    path = write_input(request.output, content)
    logger.info("Wrote %s bytes to %s", len(content), path)
    return path


__all__ = ["InputRequest", "download_input", "fetch_input", "input_url", "write_input"]
