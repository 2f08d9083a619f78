"""Serialize and compress a built index into the published search asset."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Callable, Protocol
import zlib

logger = logging.getLogger(__name__)

INDEX_MEDIA_TYPE = "application/gzip"
INDEX_SRC_STEM = "search_index"
INDEX_OUT_PATH = "search_index.json.gz"
INDEX_PUB_URL = "/search_index.json.gz"


class SerializableIndex(Protocol):
    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready ``{index, store}`` payload."""


@dataclass(slots=True)
class IndexFile:
    """Site asset carrying the compressed index."""

    contents: bytes
    media_type: str = INDEX_MEDIA_TYPE
    src_stem: str = INDEX_SRC_STEM
    out_path: str = INDEX_OUT_PATH
    pub_url: str = INDEX_PUB_URL
    pub_root_path: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "mediaType": self.media_type,
            "contents": self.contents,
            "src": {"stem": self.src_stem},
            "out": {"path": self.out_path},
            "pub": {"url": self.pub_url, "rootPath": self.pub_root_path},
        }

    def write_to(self, directory: str | Path) -> Path:
        target = Path(directory) / self.out_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(self.contents)
        logger.info("Wrote search index to %s (%d bytes)", target, len(self.contents))
        return target


def serialize_index(result: SerializableIndex) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, separators=(",", ":"))


def encode_utf16(text: str) -> bytes:
    """Encode as little-endian UTF-16 code units, the layout the browser client inflates into."""

    return text.encode("utf-16-le", errors="surrogatepass")


def compress_index(
    result: SerializableIndex,
    *,
    compress: Callable[[bytes], bytes] = zlib.compress,
) -> bytes:
    return compress(encode_utf16(serialize_index(result)))


def create_index_file(
    result: SerializableIndex,
    *,
    compress: Callable[[bytes], bytes] = zlib.compress,
) -> IndexFile:
    return IndexFile(contents=compress_index(result, compress=compress))


def read_index_file(
    contents: bytes,
    *,
    decompress: Callable[[bytes], bytes] = zlib.decompress,
) -> dict[str, Any]:
    """Inflate and decode a published index back into its JSON payload."""

    text = decompress(contents).decode("utf-16-le", errors="surrogatepass")
    return json.loads(text)
