"""Turn raw asset references into absolute, fetchable URLs."""

from __future__ import annotations

from .models import SiteTarget


def resolve_url(reference: str, target: SiteTarget) -> str:
    """Resolve ``reference`` against the mirrored page's origin.

    Relative references are joined to the origin root, not to the page's
    own directory, so ``img/a.png`` on ``/blog/post`` maps to ``/img/a.png``.
    """
    if reference.startswith("//"):
        return f"https:{reference}"
    if reference.startswith("/"):
        return f"{target.origin}{reference}"
    if not reference.startswith("http"):
        return f"{target.origin}/{reference}"
    return reference
