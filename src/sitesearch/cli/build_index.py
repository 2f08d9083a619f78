"""CLI entrypoint for generating the client-side search index of a built site."""

from __future__ import annotations

import argparse
import json
import logging
import os

from dotenv import load_dotenv

from sitesearch.config import SiteSettings
from sitesearch.extraction.pages import collect_pages
from sitesearch.pipeline import SiteIndexBuilder

load_dotenv()

logger = logging.getLogger(__name__)

_OVERRIDES = {
    "site_url": "SITESEARCH_SITE_URL",
    "site_dir": "SITESEARCH_SITE_DIR",
    "output_dir": "SITESEARCH_OUTPUT_DIR",
}


def _settings_environ(args: argparse.Namespace) -> dict[str, str]:
    environ = dict(os.environ)
    for attribute, name in _OVERRIDES.items():
        value = getattr(args, attribute)
        if value is not None:
            environ[name] = value
    # An explicit --site-dir without --output-dir writes next to the pages.
    if args.site_dir is not None and args.output_dir is None:
        environ["SITESEARCH_OUTPUT_DIR"] = args.site_dir
    return environ


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build search_index.json.gz for a rendered documentation site")
    parser.add_argument("--site-dir", help="Rendered site directory (default: SITESEARCH_SITE_DIR or build/site)")
    parser.add_argument("--site-url", help="Base URL prepended to page paths (default: SITESEARCH_SITE_URL)")
    parser.add_argument("--output-dir", help="Directory for the index file (default: the site directory)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level name")
    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
    )

    try:
        settings = SiteSettings.from_env(_settings_environ(args))
    except ValueError as error:
        logger.error("Configuration error: %s", error)
        return 2

    if not settings.site_dir.is_dir():
        logger.error("Site directory does not exist: %s", settings.site_dir)
        return 1

    try:
        pages = collect_pages(settings.site_dir)
    except OSError as exc:
        logger.error("Failed to read pages from %s: %s", settings.site_dir, exc)
        return 1

    build = SiteIndexBuilder.from_settings(settings).build(pages, output_dir=settings.output_dir)

    print(json.dumps(build.stats.to_dict(), ensure_ascii=True, indent=2))
    return 0 if build.stats.errors == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
