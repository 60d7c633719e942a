"""🌐 Wiki Integration - Merge generated pages into a documentation site.

Usage:
    from sqlwiki.wiki import WikiUpdater, locate_wiki

    context = locate_wiki("site/", "schema")
    WikiUpdater(context).update(documents)
"""

from .locator import WikiContext, locate_wiki
from .nav import InvalidNavigationError, NavPage, NavSection, NavTree, merge_page
from .site import SiteConfig
from .updater import UpdateResult, WikiUpdater

__all__ = [
    "WikiContext",
    "locate_wiki",
    "NavPage",
    "NavSection",
    "NavTree",
    "InvalidNavigationError",
    "merge_page",
    "SiteConfig",
    "UpdateResult",
    "WikiUpdater",
]
