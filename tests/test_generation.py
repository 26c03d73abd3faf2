"""End-to-end tests for rendering API descriptions into HTML pages.

These tests drive :func:`routedoc.generator.generate_site` and the CLI over a
temporary site with two documents and an index, then inspect the written HTML
with BeautifulSoup. They check that:

* table-of-contents links point at the anchors of their routes;
* the document links back to the index through a relative path, and the
  index links to every document the same way;
* unsupported content kinds render as an inline placeholder;
* a broken document is skipped without affecting its siblings.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup

from routedoc import cli
from routedoc.config import load_site_config
from routedoc.generator import generate_site
from routedoc.model import DocumentError

if typ.TYPE_CHECKING:
    from routedoc.config import SiteConfig

PETSTORE = """
title: Petstore
detail:
  type: text/markdown
  data: |
    The pet API. ~~Deprecated~~ endpoints are marked.
toc:
  sections:
    - key: pets
      title: Pets
    - key: admin
      title: Administration
      detail: {type: text/plain, data: "Staff <only>"}
routes:
  - title: List pets
    method: GET
    resource: /pets
    sections: [pets]
    detail:
      type: text/markdown
      data: |
        ```json
        [{"id": 1}]
        ```
  - method: DELETE
    resource: /pets/{id}
    sections: [pets, admin]
    detail: {type: text/rst, data: "*rst*"}
  - method: GET
    resource: /health
"""

BILLING = '{"title": "Billing", "routes": [{"method": "GET", "resource": "/invoices"}]}'


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Write two sources and a config placing documents in sibling folders."""
    (tmp_path / "api").mkdir()
    (tmp_path / "api" / "petstore.yaml").write_text(PETSTORE, encoding="utf-8")
    (tmp_path / "api" / "billing.json").write_text(BILLING, encoding="utf-8")
    public = tmp_path / "public"
    config_path = tmp_path / "routedoc.yaml"
    config_path.write_text(
        dedent(
            f"""
            defaults:
              output_dir: {public / "apis"}
              index_output: {public / "index.html"}
              index_title: Company APIs
            documents:
              petstore:
                source: api/petstore.yaml
              billing:
                source: api/billing.json
                output: {public / "finance" / "billing" / "index.html"}
                label: Billing API
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return load_site_config(config_path)


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_generate_site_writes_documents_and_index(
    site_config: SiteConfig, tmp_path: Path
) -> None:
    report = generate_site(site_config)
    public = tmp_path / "public"
    assert report.ok
    assert report.written == [
        public / "apis" / "petstore.html",
        public / "finance" / "billing" / "index.html",
        public / "index.html",
    ]
    assert all(path.exists() for path in report.written)


def test_toc_links_target_route_anchors(site_config: SiteConfig) -> None:
    report = generate_site(site_config)
    soup = _soup(report.documents[0].output)

    sections = soup.select(".toc-section")
    assert [s.select_one("h2").get_text(strip=True) for s in sections] == [
        "Pets",
        "Administration",
    ]
    pets_links = [a["href"] for a in sections[0].select("a")]
    assert pets_links == ["#list-pets", "#delete-pets-id"]
    assert [a["href"] for a in sections[1].select("a")] == ["#delete-pets-id"]
    for href in pets_links:
        assert soup.select_one(f"article{href}") is not None
    assert soup.select_one("article#get-health") is not None


def test_content_blocks_rendered_by_kind(site_config: SiteConfig) -> None:
    report = generate_site(site_config)
    soup = _soup(report.documents[0].output)

    assert soup.select_one(".suite-detail del").get_text() == "Deprecated"
    assert soup.select_one(".toc-section__detail").get_text() == "Staff <only>"
    block = soup.select_one("#list-pets .codehilite")
    assert block is not None
    assert block["data-language"] == "json"
    placeholder = soup.select_one("#delete-pets-id .route-detail").get_text()
    assert "Content type is not supported: text/rst" in placeholder


def test_documents_link_to_index_relatively(site_config: SiteConfig) -> None:
    report = generate_site(site_config)
    petstore, billing = report.documents
    assert petstore.suite.meta is not None
    assert petstore.suite.meta.index == "../index.html"
    assert billing.suite.meta is not None
    assert billing.suite.meta.index == "../../index.html"
    link = _soup(billing.output).select_one("a.suite-index-link")
    assert link is not None
    assert link["href"] == "../../index.html"


def test_index_lists_documents_in_configured_order(site_config: SiteConfig) -> None:
    report = generate_site(site_config)
    assert report.index is not None
    soup = _soup(report.index)
    links = [
        (a.get_text(strip=True), a["href"])
        for a in soup.select("a.index-entry__link")
    ]
    assert links == [
        ("Petstore", "apis/petstore.html"),
        ("Billing API", "finance/billing/index.html"),
    ]
    assert soup.select_one(".index-title").get_text() == "Company APIs"
    detail = soup.select_one(".index-entry__detail")
    assert detail is not None
    assert "The pet API." in detail.get_text()


def test_broken_document_does_not_stop_siblings(
    site_config: SiteConfig, tmp_path: Path
) -> None:
    (tmp_path / "api" / "petstore.yaml").write_text(
        "routes:\n  - title: No method\n    resource: /x\n", encoding="utf-8"
    )
    report = generate_site(site_config)

    assert not report.ok
    assert isinstance(report.failures["petstore"], DocumentError)
    assert [document.key for document in report.documents] == ["billing"]
    assert report.index is not None
    hrefs = [a["href"] for a in _soup(report.index).select("a.index-entry__link")]
    assert hrefs == ["finance/billing/index.html"]


def test_generate_selected_documents_only(site_config: SiteConfig) -> None:
    report = generate_site(site_config, ["billing"])
    assert [document.key for document in report.documents] == ["billing"]


def test_selected_run_keeps_existing_pages_in_index(site_config: SiteConfig) -> None:
    generate_site(site_config)
    report = generate_site(site_config, ["billing"])

    assert [document.key for document in report.documents] == ["billing"]
    assert report.index is not None
    links = [
        (a.get_text(strip=True), a["href"])
        for a in _soup(report.index).select("a.index-entry__link")
    ]
    assert links == [
        ("Petstore", "apis/petstore.html"),
        ("Billing API", "finance/billing/index.html"),
    ]


def test_selected_run_omits_pages_never_written(site_config: SiteConfig) -> None:
    report = generate_site(site_config, ["billing"])
    assert report.index is not None
    hrefs = [a["href"] for a in _soup(report.index).select("a.index-entry__link")]
    assert hrefs == ["finance/billing/index.html"]



def test_cli_generate_prints_written_paths(
    site_config: SiteConfig, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.generate(config=tmp_path / "routedoc.yaml")
    out = capsys.readouterr().out
    assert "petstore.html" in out
    assert out.count("wrote ") == 3


def test_cli_generate_exits_non_zero_on_failure(
    site_config: SiteConfig, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "api" / "billing.json").write_text("{", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.generate(config=tmp_path / "routedoc.yaml")
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert "* * * billing:" in out
    assert "wrote " in out


def test_cli_render_single_document(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "petstore.yaml"
    source.write_text(PETSTORE, encoding="utf-8")
    output = tmp_path / "out" / "pets.html"
    cli.render(str(source), output=output)
    assert output.exists()
    assert _soup(output).select_one("a.suite-index-link") is None
    assert "wrote" in capsys.readouterr().out


def test_cli_generate_reports_missing_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.generate(config=tmp_path / "absent.yaml")
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.startswith("* * * ")


def test_cli_generate_reports_unknown_document(
    site_config: SiteConfig, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.generate(config=tmp_path / "routedoc.yaml", document=["orders"])
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("* * * Unknown document 'orders'")
    assert "billing, petstore" in out


def test_cli_render_reports_unknown_pygments_style(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    source = tmp_path / "petstore.yaml"
    source.write_text(PETSTORE, encoding="utf-8")
    output = tmp_path / "pets.html"
    with pytest.raises(SystemExit) as excinfo:
        cli.render(str(source), output=output, pygments_style="no-such-style")
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.startswith("* * * ")
    assert not output.exists()
