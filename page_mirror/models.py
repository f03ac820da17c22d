"""Data models used throughout the mirror pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Union
from urllib.parse import urlparse

from .utils import sanitize_filename


class MirrorError(RuntimeError):
    """Fatal failure that aborts a mirror run."""


class AssetCategory(enum.Enum):
    """Kinds of static assets and where they live in the mirror."""

    STYLESHEET = ("css", 'link[rel="stylesheet"]', "href")
    SCRIPT = ("js", "script[src]", "src")
    IMAGE = ("images", "img[src]", "src")
    OTHER = ("other", None, None)

    def __init__(self, subdir: str, selector: Optional[str], attribute: Optional[str]):
        self.subdir = subdir
        self.selector = selector
        self.attribute = attribute

    @classmethod
    def mirrored(cls) -> Iterator["AssetCategory"]:
        """Categories that get a directory and are downloaded."""
        return (category for category in cls if category.selector)


class MirrorState(enum.Enum):
    INITIALIZING = "initializing"
    FETCHING_PAGE = "fetching page"
    COLLECTING = "collecting"
    DOWNLOADING = "downloading"
    REWRITING = "rewriting"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SiteTarget:
    """The page being mirrored."""

    href: str
    origin: str
    hostname: str

    @classmethod
    def from_url(cls, url: str) -> "SiteTarget":
        try:
            parsed = urlparse(url)
            port = parsed.port
        except ValueError as exc:
            raise MirrorError(f"Invalid URL {url!r}: {exc}") from exc
        if not parsed.scheme or not parsed.hostname:
            raise MirrorError(f"Not an absolute URL: {url!r}")
        hostname = parsed.hostname
        host = hostname if port is None else f"{hostname}:{port}"
        return cls(href=url, origin=f"{parsed.scheme}://{host}", hostname=hostname)

    @property
    def output_dirname(self) -> str:
        return sanitize_filename(self.hostname, fallback="site")


@dataclass(frozen=True)
class DownloadSuccess:
    """Asset fetched and written to disk."""

    url: str
    category: AssetCategory
    local_path: str


@dataclass(frozen=True)
class DownloadFailure:
    """Asset that could not be fetched or written."""

    url: str
    category: AssetCategory
    reason: str


DownloadResult = Union[DownloadSuccess, DownloadFailure]


@dataclass
class MirrorSummary:
    """Outcome of one mirror run."""

    target: SiteTarget
    output_dir: Path
    index_path: Optional[Path] = None
    state: MirrorState = MirrorState.INITIALIZING
    successes: List[DownloadSuccess] = field(default_factory=list)
    failures: List[DownloadFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.successes)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed
