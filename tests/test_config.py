from __future__ import annotations

from pathlib import Path

import pytest

from sitesearch.config import DEFAULT_SITE_DIR, SiteSettings


def test_settings_defaults_without_environment() -> None:
    settings = SiteSettings.from_env({})

    assert settings.site_url is None
    assert settings.site_dir == Path(DEFAULT_SITE_DIR)
    assert settings.output_dir == Path(DEFAULT_SITE_DIR)


def test_settings_trim_trailing_slash_and_follow_site_dir() -> None:
    settings = SiteSettings.from_env(
        {
            "SITESEARCH_SITE_URL": "https://docs.example.com/",
            "SITESEARCH_SITE_DIR": "public",
        }
    )

    assert settings.site_url == "https://docs.example.com"
    assert settings.site_dir == Path("public")
    assert settings.output_dir == Path("public")


def test_settings_accept_path_only_site_url() -> None:
    settings = SiteSettings.from_env({"SITESEARCH_SITE_URL": "/docs/", "SITESEARCH_OUTPUT_DIR": "out"})

    assert settings.site_url == "/docs"
    assert settings.output_dir == Path("out")


def test_settings_validate_site_url() -> None:
    with pytest.raises(ValueError, match="SITESEARCH_SITE_URL"):
        SiteSettings.from_env({"SITESEARCH_SITE_URL": "docs.example.com"})


def test_settings_reject_empty_directories() -> None:
    with pytest.raises(ValueError, match="SITESEARCH_SITE_DIR"):
        SiteSettings.from_env({"SITESEARCH_SITE_DIR": "  "})

    with pytest.raises(ValueError, match="SITESEARCH_OUTPUT_DIR"):
        SiteSettings.from_env({"SITESEARCH_OUTPUT_DIR": ""})
