from __future__ import annotations

from pathlib import Path

from sitesearch.extraction.pages import collect_pages, page_from_path


def _write(path: Path, text: str = "<html></html>") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_collect_pages_maps_layout_and_skips_non_content(tmp_path: Path) -> None:
    site = tmp_path / "site"
    _write(site / "index.html")
    _write(site / "404.html")
    _write(site / "comp" / "index.html")
    _write(site / "comp" / "1.0" / "intro.html", "<p>intro</p>")
    _write(site / "_" / "js" / "vendor.html")
    _write(site / "comp" / "1.0" / "styles.css", "body {}")

    pages = collect_pages(site)

    assert [page.pub_url for page in pages] == [
        "/comp/1.0/intro.html",
        "/comp/index.html",
        "/index.html",
    ]
    intro, component_home, root = pages
    assert (intro.component, intro.version, intro.stem) == ("comp", "1.0", "intro")
    assert intro.contents == "<p>intro</p>"
    assert (component_home.component, component_home.version, component_home.stem) == ("comp", "", "index")
    assert (root.component, root.version, root.stem) == ("", "", "index")


def test_collect_pages_missing_directory_returns_empty(tmp_path: Path) -> None:
    assert collect_pages(tmp_path / "missing") == []


def test_page_from_path_tolerates_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "comp" / "2.0" / "modules" / "deep.html"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"<p>caf\xe9</p>")

    page = page_from_path(tmp_path, path)

    assert page.pub_url == "/comp/2.0/modules/deep.html"
    assert page.version == "2.0"
    assert page.stem == "deep"
    assert page.contents.startswith("<p>caf")
