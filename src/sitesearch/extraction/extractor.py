"""Extract title, anchored headings and body text from rendered pages."""

from __future__ import annotations

from dataclasses import dataclass
import html
import logging
from typing import Callable

from bs4 import BeautifulSoup, Tag

from sitesearch.extraction.models import ExtractedDocument, HeadingRef, PageInput
from sitesearch.extraction.normalization import clean_article_text, normalize_whitespace

logger = logging.getLogger(__name__)

ARTICLE_SELECTOR = "article.doc"
_SECTION_HEADINGS = ["h2", "h3", "h4", "h5", "h6"]


@dataclass(slots=True)
class ExtractionError(Exception):
    """Raised when the HTML parser itself fails on a page."""

    url: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (url={self.url})"


def _detach_heading(node: Tag) -> HeadingRef | None:
    """Remove a heading from the tree, keeping it only when it can be linked to."""

    node.extract()
    heading_id = node.get("id")
    if not heading_id:
        return None
    return HeadingRef(text=normalize_whitespace(node.get_text()), id=str(heading_id))


class PageExtractor:
    """Turn one rendered page into an indexable document.

    Only the article region is visited, so navigation, page TOC and other
    chrome never reach the index. A page lacking the region, its ``<h1>`` or
    heading ids still yields a document with empty fields.
    """

    def __init__(
        self,
        site_url: str | None = None,
        *,
        decode_entities: Callable[[str], str] = html.unescape,
        article_selector: str = ARTICLE_SELECTOR,
    ) -> None:
        self._site_url = (site_url or "").rstrip("/")
        self._decode_entities = decode_entities
        self._article_selector = article_selector

    @property
    def site_url(self) -> str:
        return self._site_url

    def page_url(self, page: PageInput) -> str:
        """Absolute url under the site url, or the published path when none is set."""

        return self._site_url + page.pub_url

    def extract(self, page: PageInput) -> ExtractedDocument:
        url = self.page_url(page)
        try:
            soup = BeautifulSoup(page.contents, "lxml")
        except Exception as exc:  # pragma: no cover - wrapper branch
            raise ExtractionError(url, f"HTML parsing failed: {exc}") from exc

        title = ""
        text = ""
        titles: list[HeadingRef] = []

        article = soup.select_one(self._article_selector)
        if article is None:
            logger.debug("No %s region in %s, indexing empty content", self._article_selector, url)
        else:
            h1 = article.find("h1")
            if h1 is not None:
                title = normalize_whitespace(h1.get_text())
                h1.extract()

            headings = article.find_all(_SECTION_HEADINGS)
            titles = [ref for ref in map(_detach_heading, headings) if ref is not None]
            text = clean_article_text(self._decode_entities(article.get_text()))

        return ExtractedDocument(
            text=text,
            title=title,
            component=page.component,
            version=page.version,
            name=page.stem,
            url=url,
            titles=titles,
        )


def extract_page(page: PageInput, site_url: str | None = None) -> ExtractedDocument:
    """Extract a single page with the default entity decoder."""

    return PageExtractor(site_url).extract(page)
