"""Site-wide orchestration: extract every page, assemble, package."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
import time
from typing import Sequence

from sitesearch.config import SiteSettings
from sitesearch.extraction.extractor import ExtractionError, PageExtractor
from sitesearch.extraction.models import ExtractedDocument, PageInput
from sitesearch.search.artifact import IndexFile, create_index_file
from sitesearch.search.indexer import EmptyIndex, IndexAssembler, SearchIndex

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    pages: int = 0
    indexed: int = 0
    headings: int = 0
    errors: int = 0
    duration_ms: int = 0
    artifact_path: str | None = None
    artifact_bytes: int = 0
    error_details: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, int | str | None | list[dict[str, str]]]:
        return {
            "pages": self.pages,
            "indexed": self.indexed,
            "headings": self.headings,
            "errors": self.errors,
            "duration_ms": self.duration_ms,
            "artifact_path": self.artifact_path,
            "artifact_bytes": self.artifact_bytes,
            "error_details": self.error_details,
        }


@dataclass(slots=True)
class BuildResult:
    result: SearchIndex | EmptyIndex
    index_file: IndexFile | None
    stats: BuildStats


class SiteIndexBuilder:
    """Builds the search asset for a whole site in a single ordered pass."""

    def __init__(self, extractor: PageExtractor, assembler: IndexAssembler) -> None:
        self._extractor = extractor
        self._assembler = assembler

    @classmethod
    def from_settings(cls, settings: SiteSettings) -> "SiteIndexBuilder":
        return cls(extractor=PageExtractor(settings.site_url), assembler=IndexAssembler())

    def build(self, pages: Sequence[PageInput], output_dir: str | Path | None = None) -> BuildResult:
        started = time.perf_counter()
        stats = BuildStats(pages=len(pages))

        documents: list[ExtractedDocument] = []
        for page in pages:
            try:
                documents.append(self._extractor.extract(page))
            except ExtractionError as exc:
                logger.error("Skipping page: %s", exc)
                stats.errors += 1
                stats.error_details.append({"url": exc.url, "error": exc.message})

        stats.indexed = len(documents)
        stats.headings = sum(len(document.titles) for document in documents)

        result = self._assembler.assemble(documents)
        index_file: IndexFile | None = None
        if isinstance(result, SearchIndex):
            index_file = create_index_file(result)
            stats.artifact_bytes = len(index_file.contents)
            if output_dir is not None:
                stats.artifact_path = str(index_file.write_to(output_dir))
        else:
            logger.warning("No pages to index, search index not generated")

        stats.duration_ms = int((time.perf_counter() - started) * 1000)
        return BuildResult(result=result, index_file=index_file, stats=stats)
