"""Discover rendered pages in a generated site directory."""

from __future__ import annotations

from pathlib import Path

from sitesearch.extraction.models import PageInput

_EXCLUDED_NAMES = {"404.html"}


def _is_page(relative: Path) -> bool:
    if relative.suffix.lower() != ".html":
        return False
    if relative.name in _EXCLUDED_NAMES:
        return False
    # Directories such as `_` hold UI bundles, not content.
    return not any(part.startswith("_") for part in relative.parts[:-1])


def page_from_path(site_dir: str | Path, path: str | Path) -> PageInput:
    """Map ``<component>/<version>/.../<stem>.html`` onto a page record."""

    root = Path(site_dir)
    file_path = Path(path)
    relative = file_path.relative_to(root)
    parts = relative.parts

    component = parts[0] if len(parts) > 1 else ""
    version = parts[1] if len(parts) > 2 else ""

    raw_bytes = file_path.read_bytes()
    return PageInput(
        contents=raw_bytes.decode("utf-8", errors="replace"),
        component=component,
        version=version,
        stem=file_path.stem,
        pub_url="/" + relative.as_posix(),
    )


def collect_pages(site_dir: str | Path) -> list[PageInput]:
    """Return every content page under ``site_dir`` ordered by relative path."""

    root = Path(site_dir)
    if not root.is_dir():
        return []
    paths = sorted(
        path for path in root.rglob("*") if path.is_file() and _is_page(path.relative_to(root))
    )
    return [page_from_path(root, path) for path in paths]
