"""Configuration objects and constants for the mirror."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_OUTPUT_DIRNAME = "downloaded_sites"
INDEX_FILENAME = "index.html"


@dataclass
class MirrorConfig:
    """Top-level settings that control fetching and output layout."""

    output_root: Path
    request_timeout: Optional[float] = 30.0


def default_output_root() -> Path:
    return Path.cwd() / DEFAULT_OUTPUT_DIRNAME
