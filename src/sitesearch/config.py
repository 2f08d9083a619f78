"""Runtime configuration for search index generation."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping


DEFAULT_SITE_DIR = "build/site"


def _parse_site_url(raw_value: str) -> str | None:
    if not raw_value:
        return None
    if not raw_value.startswith(("http://", "https://", "/")):
        raise ValueError("SITESEARCH_SITE_URL must start with http://, https:// or /")
    return raw_value.rstrip("/")


@dataclass(frozen=True, slots=True)
class SiteSettings:
    """Validated settings for one index build."""

    site_dir: Path
    output_dir: Path
    site_url: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SiteSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        site_url = _parse_site_url(source.get("SITESEARCH_SITE_URL", "").strip())

        site_dir_raw = source.get("SITESEARCH_SITE_DIR", DEFAULT_SITE_DIR).strip()
        if not site_dir_raw:
            raise ValueError("SITESEARCH_SITE_DIR cannot be empty")

        output_dir_raw = source.get("SITESEARCH_OUTPUT_DIR", site_dir_raw).strip()
        if not output_dir_raw:
            raise ValueError("SITESEARCH_OUTPUT_DIR cannot be empty")

        return cls(site_dir=Path(site_dir_raw), output_dir=Path(output_dir_raw), site_url=site_url)
