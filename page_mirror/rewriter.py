"""Point asset references in the page at their mirrored copies."""

from __future__ import annotations

from urllib.parse import quote

from .collector import iter_references, parse_html
from .models import AssetCategory, SiteTarget
from .resolver import resolve_url
from .utils import local_path_for


def rewrite_document(original_html: str, target: SiteTarget) -> str:
    """Return ``original_html`` with every asset attribute made local.

    Works on a fresh parse and does not look at download results, so an
    asset that failed to download still gets a (broken) local reference.
    """
    soup = parse_html(original_html)
    for category in AssetCategory.mirrored():
        for element, reference in iter_references(soup, category):
            element[category.attribute] = quote(
                local_path_for(category, resolve_url(reference, target))
            )
    return soup.decode()
