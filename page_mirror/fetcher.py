"""Page and asset downloading with per-asset failure isolation."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import requests

from .models import AssetCategory, DownloadFailure, DownloadResult, DownloadSuccess
from .utils import local_path_for

logger = logging.getLogger("page_mirror")


def fetch_page(
    session: requests.Session, url: str, timeout: Optional[float]
) -> str:
    """Fetch the root document; errors propagate to the caller.

    Without a declared charset requests falls back to ISO-8859-1 for
    ``text/*``, so the encoding is sniffed from the body instead.
    """
    resp = session.get(url, timeout=timeout)
    resp.raise_for_status()
    content_type = resp.headers.get("Content-Type", "").lower()
    if "charset" not in content_type:
        resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text


def download_asset(
    session: requests.Session,
    url: str,
    category: AssetCategory,
    output_dir: Path,
    timeout: Optional[float],
) -> DownloadResult:
    """Fetch one asset and write it under its category directory.

    Never raises for network or filesystem errors; they come back as a
    :class:`DownloadFailure`.
    """
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Failed to download %s: %s", url, exc)
        return DownloadFailure(url=url, category=category, reason=str(exc))

    local_path = local_path_for(category, url)
    destination = output_dir / local_path
    try:
        destination.write_bytes(resp.content)
    except OSError as exc:
        logger.warning("Failed to write %s to %s: %s", url, destination, exc)
        return DownloadFailure(url=url, category=category, reason=str(exc))

    logger.debug("Saved %s -> %s", url, destination)
    return DownloadSuccess(url=url, category=category, local_path=local_path)


async def download_all(
    session: requests.Session,
    assets: Iterable[Tuple[AssetCategory, str]],
    output_dir: Path,
    timeout: Optional[float],
) -> List[DownloadResult]:
    """Download every ``(category, url)`` pair concurrently.

    One worker thread per asset; waits for all of them to settle.
    """
    jobs = list(assets)
    if not jobs:
        return []
    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor(max_workers=len(jobs)) as executor:
        futures = [
            loop.run_in_executor(
                executor, download_asset, session, url, category, output_dir, timeout
            )
            for category, url in jobs
        ]
        return list(await asyncio.gather(*futures))
