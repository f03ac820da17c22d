"""Utility helpers for filename sanitization and local path derivation."""

from __future__ import annotations

import posixpath
import re
from typing import TYPE_CHECKING
from urllib.parse import unquote, urlparse

if TYPE_CHECKING:
    from .models import AssetCategory

ILLEGAL_CHARS_PATTERN = re.compile(r'[/?<>\\:*|"]')
CONTROL_CHARS_PATTERN = re.compile(r"[\x00-\x1f\x80-\x9f]")
RESERVED_PATTERN = re.compile(r"^\.+$")
WINDOWS_RESERVED_PATTERN = re.compile(
    r"^(con|prn|aux|nul|com[0-9]|lpt[0-9])(\..*)?$", re.IGNORECASE
)
WINDOWS_TRAILING_PATTERN = re.compile(r"[. ]+$")
MAX_FILENAME_BYTES = 255


def _truncate_utf8(value: str, limit: int) -> str:
    encoded = value.encode("utf-8")
    if len(encoded) <= limit:
        return value
    return encoded[:limit].decode("utf-8", "ignore")


def sanitize_filename(value: str, fallback: str = "asset") -> str:
    """Strip characters that are unsafe in a single path component.

    The result never contains a directory separator and is never empty;
    ``fallback`` is returned when nothing usable survives.
    """
    cleaned = ILLEGAL_CHARS_PATTERN.sub("", value)
    cleaned = CONTROL_CHARS_PATTERN.sub("", cleaned)
    cleaned = RESERVED_PATTERN.sub("", cleaned)
    cleaned = WINDOWS_RESERVED_PATTERN.sub("", cleaned)
    cleaned = WINDOWS_TRAILING_PATTERN.sub("", cleaned)
    cleaned = _truncate_utf8(cleaned, MAX_FILENAME_BYTES)
    return cleaned or fallback


def local_path_for(category: AssetCategory, url: str) -> str:
    """Return the mirror-relative path (``css/style.css``) for an asset URL.

    The basename is percent-decoded, so this is the name on disk; quote it
    before putting it back into markup.
    """
    try:
        path = urlparse(url).path
    except ValueError:
        path = url
    basename = unquote(posixpath.basename(path))
    return f"{category.subdir}/{sanitize_filename(basename)}"
