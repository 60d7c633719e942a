"""📖 sqlwiki - Publish the documentation comments of SQL files into a wiki.

Quick Start:
    sqlwiki migrations/ --site site/ --docs-path schema

Library use:
    from sqlwiki.collector import collect_sources
    from sqlwiki.docs import generate_documents
    from sqlwiki.wiki import WikiUpdater, locate_wiki

    documents = generate_documents(collect_sources(["migrations/"]))
    WikiUpdater(locate_wiki("site/", "schema")).update(documents)
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
