"""🧪 Tests for the wiki updater."""

from pathlib import Path

import pytest
import yaml
from rich.console import Console

from sqlwiki.collector import collect_sources
from sqlwiki.docs import generate_documents
from sqlwiki.docs.models import Document
from sqlwiki.exceptions import DuplicatePageError
from sqlwiki.wiki import WikiUpdater, locate_wiki

START = "<!-- SQLWIKI INDEX START -->"
END = "<!-- SQLWIKI INDEX END -->"


def _publish(site, sql_dir):
    documents = generate_documents(collect_sources([sql_dir]))
    context = locate_wiki(site, "schema")
    return WikiUpdater(context, console=Console(quiet=True)).update(documents)


def _schema_nav(site) -> list:
    config = yaml.safe_load((site / "mkdocs.yml").read_text())
    return config["nav"][1]["Schema"]


def _region(site) -> str:
    content = (site / "docs" / "schema" / "index.md").read_text()
    return content.split(START + "\n", 1)[1].split(END, 1)[0]


class TestWikiUpdater:
    """Tests for WikiUpdater."""

    def test_writes_pages(self, site, sql_dir):
        result = _publish(site, sql_dir)

        users = site / "docs" / "schema" / "users.md"
        orders = site / "docs" / "schema" / "orders.md"
        assert users.read_text() == "```sql\nCREATE TABLE users (id INT);\n```\n\n"
        assert orders.read_text().startswith("# Orders\nOne row per order.\n\n```sql")
        assert result.files_created == ["users.md", "orders.md"]
        assert result.files_updated == []

    def test_index_region_replaced(self, site, sql_dir):
        _publish(site, sql_dir)
        content = (site / "docs" / "schema" / "index.md").read_text()

        assert _region(site) == "* [users](users.md)\n* [orders](orders.md)\n"
        assert "stale" not in content
        assert content.startswith("# Schema\n\nHand-written intro.\n\n")
        assert content.endswith(f"{END}\n\nFooter.\n")

    def test_navigation_entries(self, site, sql_dir):
        """Test heading becomes the title, name is the fallback, paths match files."""
        result = _publish(site, sql_dir)

        assert _schema_nav(site) == [
            {"Overview": "schema/index.md"},
            {"users": "schema/users.md"},
            {"Orders": "schema/orders.md"},
        ]
        assert result.nav_added == ["schema/users.md", "schema/orders.md"]
        for entry in _schema_nav(site):
            (path,) = entry.values()
            assert (site / "docs" / path).is_file()

    def test_rest_of_config_kept(self, site, sql_dir):
        _publish(site, sql_dir)
        config = yaml.safe_load((site / "mkdocs.yml").read_text())

        assert config["site_name"] == "Test Database"
        assert config["nav"][0] == {"Home": "index.md"}
        assert config["nav"][2] == {"About": "about.md"}

    def test_rerun_does_not_accumulate(self, site, sql_dir):
        """Test publishing twice keeps exactly one entry per file."""
        _publish(site, sql_dir)
        result = _publish(site, sql_dir)

        assert _region(site).count("* [") == 2
        assert len(_schema_nav(site)) == 3
        assert result.files_updated == ["users.md", "orders.md"]
        assert result.nav_added == []
        assert result.nav_updated == ["schema/users.md", "schema/orders.md"]

    def test_same_context_updated_twice(self, site, sql_dir):
        documents = generate_documents(collect_sources([sql_dir]))
        updater = WikiUpdater(locate_wiki(site, "schema"), console=Console(quiet=True))

        updater.update(documents)
        updater.update(documents)

        assert _region(site).count("* [") == 2
        assert len(_schema_nav(site)) == 3

    def test_documents_sorted_by_base_name(self, site, tmp_path):
        documents = [
            Document(Path("b/002-zeta.sql"), rendered_markdown=""),
            Document(Path("a/001-alpha.sql"), rendered_markdown=""),
        ]
        WikiUpdater(locate_wiki(site, "schema"), console=Console(quiet=True)).update(documents)

        assert _region(site) == "* [alpha](alpha.md)\n* [zeta](zeta.md)\n"

    def test_overwrites_existing_page(self, site, sql_dir):
        page = site / "docs" / "schema" / "users.md"
        page.write_text("old content that must go\n")

        _publish(site, sql_dir)

        assert "old content" not in page.read_text()

    def test_duplicate_names_rejected_before_writing(self, site, tmp_path):
        src = tmp_path / "dupes"
        src.mkdir()
        (src / "001-users.sql").write_text("SELECT 1;\n")
        (src / "users.sql").write_text("SELECT 2;\n")

        with pytest.raises(DuplicatePageError):
            _publish(site, src)

        assert not (site / "docs" / "schema" / "users.md").exists()
        assert "stale" in (site / "docs" / "schema" / "index.md").read_text()

    def test_crlf_index_untouched_outside_markers(self, site, sql_dir):
        """Test the hand-written part of a CRLF index page keeps its bytes."""
        index = site / "docs" / "schema" / "index.md"
        head = b"# Schema\r\n\r\nIntro.\r\n\r\n"
        tail = b"\r\nFooter\r\n"
        index.write_bytes(head + f"{START}\r\n{END}".encode() + tail)

        _publish(site, sql_dir)

        assert index.read_bytes() == (
            head
            + f"{START}\r\n* [users](users.md)\r\n* [orders](orders.md)\r\n{END}".encode()
            + tail
        )
