#!/usr/bin/env python3
"""
📖 sqlwiki CLI - Publish commented SQL files into a documentation site.

Usage:
    sqlwiki <path>... --site <root> --docs-path <subpath>
    sqlwiki --help             Show help
"""

import argparse
import sys
from pathlib import Path

import yaml
from rich.console import Console

from sqlwiki import __version__
from sqlwiki.exceptions import SqlWikiError

console = Console()
err_console = Console(stderr=True)


def publish_docs(
    paths: list[str],
    site: Path,
    docs_path: str,
    quiet: bool = False,
) -> None:
    """Extract docs from SQL files and merge them into a site.

    Args:
        paths: SQL files or directories to scan
        site: Site root directory
        docs_path: Documentation subpath under the site's docs root
        quiet: Only print errors
    """
    from sqlwiki.collector import collect_sources
    from sqlwiki.docs import generate_documents
    from sqlwiki.wiki import WikiUpdater, locate_wiki

    out = Console(quiet=True) if quiet else console

    try:
        sources = collect_sources(paths)
        out.print(f"📚 Extracting documentation from [cyan]{len(sources)}[/cyan] file(s)...")
        documents = generate_documents(sources)

        context = locate_wiki(site, docs_path)
        result = WikiUpdater(context, console=out).update(documents)
    except (SqlWikiError, OSError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    out.print()
    out.print(
        f"[bold]📊 Summary:[/bold] {len(result.files_created)} created | "
        f"{len(result.files_updated)} updated | {len(result.nav_added)} nav entries added"
    )


def main() -> None:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="sqlwiki",
        description="📖 sqlwiki - Publish SQL documentation comments into a wiki",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sqlwiki migrations/ -s site -d schema        Document every .sql file in migrations/
  sqlwiki 001-users.sql -s site -d schema/core Document a single file
        """,
    )
    parser.add_argument(
        "paths", nargs="+", metavar="PATH", help="SQL files or directories to scan"
    )
    parser.add_argument(
        "--site", "-s", type=Path, required=True, help="Site root (holds mkdocs.yml)"
    )
    parser.add_argument(
        "--docs-path",
        "-d",
        required=True,
        help="Directory under the docs root to publish into (e.g., 'schema')",
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only print errors"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args()

    publish_docs(args.paths, args.site, args.docs_path, quiet=args.quiet)


if __name__ == "__main__":
    main()
