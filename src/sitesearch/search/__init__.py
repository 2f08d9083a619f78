"""Search index assembly and packaging."""

from .artifact import IndexFile, create_index_file, read_index_file, serialize_index
from .indexer import EMPTY_INDEX, EmptyIndex, IndexAssembler, SearchIndex, build_search_index

__all__ = [
    "EMPTY_INDEX",
    "EmptyIndex",
    "IndexAssembler",
    "IndexFile",
    "SearchIndex",
    "build_search_index",
    "create_index_file",
    "read_index_file",
    "serialize_index",
]
