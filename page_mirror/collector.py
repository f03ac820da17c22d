"""Discover asset references in a parsed page."""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterator, Tuple

from bs4 import BeautifulSoup, Tag

from .models import AssetCategory, SiteTarget
from .resolver import resolve_url


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def iter_references(
    soup: BeautifulSoup, category: AssetCategory
) -> Iterator[Tuple[Tag, str]]:
    """Yield ``(element, raw_reference)`` for every non-empty reference."""
    if not category.selector:
        return
    for element in soup.select(category.selector):
        reference = element.get(category.attribute)
        if reference:
            yield element, reference


def scan(
    soup: BeautifulSoup, category: AssetCategory, target: SiteTarget
) -> FrozenSet[str]:
    """Return the deduplicated absolute URLs referenced for ``category``."""
    return frozenset(
        resolve_url(reference, target)
        for _, reference in iter_references(soup, category)
    )


def collect_assets(
    soup: BeautifulSoup, target: SiteTarget
) -> Dict[AssetCategory, FrozenSet[str]]:
    return {category: scan(soup, category, target) for category in AssetCategory}
