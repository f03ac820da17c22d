from page_mirror.collector import collect_assets, parse_html, scan
from page_mirror.models import AssetCategory, SiteTarget

TARGET = SiteTarget.from_url("https://example.com/")

HTML = """
<html><head>
<link rel="stylesheet" href="/style.css">
<link rel="stylesheet" href="https://example.com/style.css">
<link rel="icon" href="/favicon.ico">
<link rel="stylesheet" href="">
<script src="//cdn.example.com/app.js"></script>
<script>var inline = 1;</script>
</head><body>
<img src="photo.jpg"><img src="/photo.jpg"><img alt="no source">
</body></html>
"""


def test_scan_deduplicates_by_resolved_url():
    soup = parse_html(HTML)
    assert scan(soup, AssetCategory.STYLESHEET, TARGET) == {"https://example.com/style.css"}
    assert scan(soup, AssetCategory.IMAGE, TARGET) == {"https://example.com/photo.jpg"}


def test_scan_skips_missing_attributes():
    soup = parse_html(HTML)
    assert scan(soup, AssetCategory.SCRIPT, TARGET) == {"https://cdn.example.com/app.js"}


def test_other_category_is_always_empty():
    assert scan(parse_html(HTML), AssetCategory.OTHER, TARGET) == frozenset()


def test_collect_assets_does_not_mutate_document():
    soup = parse_html(HTML)
    before = soup.decode()
    assets = collect_assets(soup, TARGET)
    assert set(assets) == set(AssetCategory)
    assert soup.decode() == before
