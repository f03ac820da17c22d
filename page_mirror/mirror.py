"""High-level orchestration for mirroring a single page and its assets."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import requests

from .collector import collect_assets, parse_html
from .config import INDEX_FILENAME, MirrorConfig
from .fetcher import download_all, fetch_page
from .models import (
    AssetCategory,
    DownloadFailure,
    DownloadSuccess,
    MirrorError,
    MirrorState,
    MirrorSummary,
    SiteTarget,
)
from .rewriter import rewrite_document

logger = logging.getLogger("page_mirror")


def _enter(summary: MirrorSummary, state: MirrorState) -> None:
    logger.debug("%s: %s -> %s", summary.target.hostname, summary.state.value, state.value)
    summary.state = state


def prepare_output_dir(config: MirrorConfig, target: SiteTarget) -> Path:
    """Create the mirror root and its category subdirectories."""
    output_dir = config.output_root / target.output_dirname
    output_dir.mkdir(parents=True, exist_ok=True)
    for category in AssetCategory.mirrored():
        (output_dir / category.subdir).mkdir(exist_ok=True)
    return output_dir


def save_index(html: str, target: SiteTarget, index_path: Path) -> None:
    index_path.write_text(rewrite_document(html, target), encoding="utf-8")


async def mirror_page(
    url: str,
    config: MirrorConfig,
    session: Optional[requests.Session] = None,
) -> MirrorSummary:
    """Mirror ``url`` into ``config.output_root``.

    Raises :class:`MirrorError` when the output tree cannot be created,
    the page itself cannot be fetched or ``index.html`` cannot be written. Individual asset failures are
    recorded on the returned summary instead.
    """
    target = SiteTarget.from_url(url)
    if session is None:
        with requests.Session() as owned:
            return await _mirror(target, config, owned)
    return await _mirror(target, config, session)


async def _mirror(
    target: SiteTarget, config: MirrorConfig, session: requests.Session
) -> MirrorSummary:
    summary = MirrorSummary(
        target=target, output_dir=config.output_root / target.output_dirname
    )

    try:
        summary.output_dir = prepare_output_dir(config, target)
    except OSError as exc:
        _enter(summary, MirrorState.FAILED)
        logger.error("Could not create %s: %s", summary.output_dir, exc)
        raise MirrorError(f"Could not create output directory: {exc}") from exc

    _enter(summary, MirrorState.FETCHING_PAGE)
    logger.info("Fetching %s", target.href)
    try:
        html = await asyncio.to_thread(
            fetch_page, session, target.href, config.request_timeout
        )
    except requests.RequestException as exc:
        _enter(summary, MirrorState.FAILED)
        logger.error("Failed to fetch %s: %s", target.href, exc)
        raise MirrorError(f"Failed to fetch {target.href}: {exc}") from exc

    _enter(summary, MirrorState.COLLECTING)
    assets = collect_assets(parse_html(html), target)
    jobs = [
        (category, asset_url)
        for category in AssetCategory.mirrored()
        for asset_url in sorted(assets[category])
    ]
    logger.info("Found %d assets on %s", len(jobs), target.href)

    _enter(summary, MirrorState.DOWNLOADING)
    results = await download_all(
        session, jobs, summary.output_dir, config.request_timeout
    )
    summary.successes = [r for r in results if isinstance(r, DownloadSuccess)]
    summary.failures = [r for r in results if isinstance(r, DownloadFailure)]

    _enter(summary, MirrorState.REWRITING)
    index_path = summary.output_dir / INDEX_FILENAME
    try:
        await asyncio.to_thread(save_index, html, target, index_path)
    except OSError as exc:
        _enter(summary, MirrorState.FAILED)
        logger.error("Could not write %s: %s", index_path, exc)
        raise MirrorError(f"Could not write {index_path}: {exc}") from exc
    summary.index_path = index_path
    _enter(summary, MirrorState.DONE)
    logger.info(
        "Saved %s (%d/%d assets downloaded)",
        index_path,
        summary.succeeded,
        summary.total,
    )
    return summary
