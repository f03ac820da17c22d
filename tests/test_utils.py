import pytest

from page_mirror.models import AssetCategory
from page_mirror.utils import local_path_for, sanitize_filename


@pytest.mark.parametrize(
    "value, expected",
    [
        ("style.css", "style.css"),
        ("bad:name.png", "badname.png"),
        ("../../etc/passwd", "....etcpasswd"),
        ("..", "asset"),
        ("", "asset"),
        ("CON", "asset"),
        ("lpt1.txt", "asset"),
        ("name. ", "name"),
        ('a<b>c|d?e*f"g\\h', "abcdefgh"),
        ("tab\tname.js", "tabname.js"),
    ],
)
def test_sanitize_filename(value, expected):
    assert sanitize_filename(value) == expected


@pytest.mark.parametrize("value", ["../../etc/passwd", "a/b\\c", "..", "/", "x/../y"])
def test_sanitize_filename_is_a_single_component(value):
    result = sanitize_filename(value)
    assert result
    assert "/" not in result and "\\" not in result
    assert result not in (".", "..")


def test_sanitize_filename_truncates_long_names():
    assert len(sanitize_filename("a" * 300 + ".png").encode("utf-8")) == 255


def test_local_path_for_uses_url_path_basename():
    assert local_path_for(AssetCategory.STYLESHEET, "https://example.com/a/b/style.css?v=3#x") == "css/style.css"
    assert local_path_for(AssetCategory.SCRIPT, "https://cdn.example.com/app.js") == "js/app.js"
    assert local_path_for(AssetCategory.IMAGE, "https://example.com/") == "images/asset"


def test_local_path_for_tolerates_unparseable_urls():
    assert local_path_for(AssetCategory.IMAGE, "https://[oops/a.png") == "images/a.png"


def test_local_path_for_decodes_percent_escapes():
    assert local_path_for(AssetCategory.IMAGE, "https://example.com/my%20photo.png") == "images/my photo.png"
    assert local_path_for(AssetCategory.SCRIPT, "https://example.com/a%2Fb.js") == "js/ab.js"
