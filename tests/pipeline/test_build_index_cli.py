from __future__ import annotations

import json
from pathlib import Path

from sitesearch.cli.build_index import main as build_index_main
from sitesearch.search.artifact import read_index_file


def _write_page(path: Path, *, title: str, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f'<html><body><nav>Menu</nav><article class="doc"><h1>{title}</h1><p>{body}</p></article></body></html>',
        encoding="utf-8",
    )


def test_cli_builds_index_for_site_directory(tmp_path: Path, capsys: object) -> None:
    site = tmp_path / "site"
    _write_page(site / "manual" / "1.0" / "index.html", title="Manual", body="Start here.")
    _write_page(site / "manual" / "1.0" / "faq.html", title="FAQ", body="Common questions.")

    exit_code = build_index_main(["--site-dir", str(site), "--site-url", "https://docs.example.com/"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["pages"] == 2
    assert payload["indexed"] == 2
    assert payload["errors"] == 0
    assert payload["artifact_path"] == str(site / "search_index.json.gz")

    artifact = read_index_file((site / "search_index.json.gz").read_bytes())
    assert sorted(artifact["store"]) == [
        "https://docs.example.com/manual/1.0/faq.html",
        "https://docs.example.com/manual/1.0/index.html",
    ]
    assert artifact["store"]["https://docs.example.com/manual/1.0/faq.html"]["text"] == "Common questions."


def test_cli_writes_to_separate_output_dir(tmp_path: Path, capsys: object) -> None:
    site = tmp_path / "site"
    out = tmp_path / "out"
    _write_page(site / "manual" / "index.html", title="Manual", body="Unversioned.")

    exit_code = build_index_main(["--site-dir", str(site), "--output-dir", str(out), "--site-url", "/"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["artifact_path"] == str(out / "search_index.json.gz")
    assert (out / "search_index.json.gz").is_file()


def test_cli_reports_empty_site_without_artifact(tmp_path: Path, capsys: object) -> None:
    site = tmp_path / "site"
    site.mkdir()

    exit_code = build_index_main(["--site-dir", str(site)])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload["pages"] == 0
    assert payload["artifact_path"] is None
    assert not (site / "search_index.json.gz").exists()


def test_cli_fails_for_missing_site_directory(tmp_path: Path) -> None:
    assert build_index_main(["--site-dir", str(tmp_path / "missing")]) == 1


def test_cli_rejects_invalid_site_url(tmp_path: Path) -> None:
    assert build_index_main(["--site-dir", str(tmp_path), "--site-url", "example.com"]) == 2
