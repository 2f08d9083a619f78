"""Assemble a Lunr index and document store from extracted pages."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Iterator, Mapping, Sequence

from lunr import get_default_builder
from lunr.builder import Builder
from lunr.index import Index

from sitesearch.extraction.models import ExtractedDocument

logger = logging.getLogger(__name__)

REF_FIELD = "url"
FIELD_BOOSTS: dict[str, int] = {
    "title": 10,
    "name": 1,
    "text": 1,
    "component": 1,
}
METADATA_WHITELIST = ["position"]

IndexRecord = Mapping[str, Any]


@dataclass(slots=True)
class SearchIndex:
    """Built index plus the url-keyed store used to render hits."""

    index: Index
    store: dict[str, ExtractedDocument] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index.serialize(),
            "store": {url: document.to_dict() for url, document in self.store.items()},
        }


@dataclass(frozen=True, slots=True)
class EmptyIndex:
    """Result for a site with no pages; serializes to ``{}``."""

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {}


EMPTY_INDEX = EmptyIndex()


def _field_extractor(name: str) -> Callable[[IndexRecord], Any]:
    # Heading records only carry title and url.
    def extract(record: IndexRecord) -> Any:
        return record.get(name)

    return extract


def iter_index_records(documents: Sequence[ExtractedDocument]) -> Iterator[IndexRecord]:
    """Yield page records, each followed by its heading records, in input order."""

    for document in documents:
        yield document.to_dict()
        for heading in document.titles:
            yield {"title": heading.text, "url": f"{document.url}#{heading.id}"}


def build_store(documents: Sequence[ExtractedDocument]) -> dict[str, ExtractedDocument]:
    store: dict[str, ExtractedDocument] = {}
    for document in documents:
        if document.url in store:
            logger.warning("Duplicate page url %s, keeping the last extracted page", document.url)
        store[document.url] = document
    return store


class IndexAssembler:
    """Feeds extracted documents into a Lunr builder in one ordered pass."""

    def __init__(self, builder_factory: Callable[[], Builder] = get_default_builder) -> None:
        self._builder_factory = builder_factory

    def _configured_builder(self) -> Builder:
        builder = self._builder_factory()
        builder.ref(REF_FIELD)
        for name, boost in FIELD_BOOSTS.items():
            builder.field(name, boost=boost, extractor=_field_extractor(name))
        builder.metadata_whitelist = list(METADATA_WHITELIST)
        return builder

    def assemble(self, documents: Sequence[ExtractedDocument]) -> SearchIndex | EmptyIndex:
        if not documents:
            return EMPTY_INDEX

        builder = self._configured_builder()
        record_count = 0
        for record in iter_index_records(documents):
            builder.add(record)
            record_count += 1

        index = builder.build()
        logger.info("Indexed %d pages as %d records", len(documents), record_count)
        return SearchIndex(index=index, store=build_store(documents))


def build_search_index(documents: Sequence[ExtractedDocument]) -> SearchIndex | EmptyIndex:
    """Build the index with the default English Lunr pipeline."""

    return IndexAssembler().assemble(documents)
