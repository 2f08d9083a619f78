"""Page extraction interfaces."""

from .extractor import ExtractionError, PageExtractor, extract_page
from .models import ExtractedDocument, HeadingRef, PageInput
from .pages import collect_pages, page_from_path

__all__ = [
    "ExtractedDocument",
    "ExtractionError",
    "HeadingRef",
    "PageExtractor",
    "PageInput",
    "collect_pages",
    "extract_page",
    "page_from_path",
]
