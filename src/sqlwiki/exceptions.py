"""🚨 Errors raised while publishing SQL docs into a wiki."""

from __future__ import annotations

from pathlib import Path


class SqlWikiError(Exception):
    """Base exception for sqlwiki operations."""

    pass


class PreconditionError(SqlWikiError):
    """The target site does not look the way the run needs it to."""

    pass


class SiteConfigNotFoundError(PreconditionError):
    """Raised when the site root has no recognizable configuration file."""

    def __init__(self, site_root: Path, candidates: list[str]):
        names = ", ".join(candidates)
        super().__init__(f"No site configuration ({names}) found in {site_root}")
        self.site_root = site_root


class DocsPathError(PreconditionError):
    """Raised when the documentation subpath is not an existing directory."""

    def __init__(self, path: Path):
        super().__init__(f"Documentation path is not a directory: {path}")
        self.path = path


class IndexNotFoundError(PreconditionError):
    """Raised when the documentation directory has no index page."""

    def __init__(self, path: Path):
        super().__init__(f"Index file not found: {path}")
        self.path = path


class IndexMarkersError(PreconditionError):
    """Raised when the index page lacks the generated-region markers."""

    def __init__(self, path: Path, start_marker: str, end_marker: str):
        super().__init__(
            f"Index file {path} must contain '{start_marker}' followed by '{end_marker}'"
        )
        self.path = path


class NavEntryNotFoundError(PreconditionError):
    """Raised when the index page is not referenced by the site navigation."""

    def __init__(self, index_path: str, config_path: Path):
        super().__init__(f"Index '{index_path}' not found in navigation of {config_path}")
        self.index_path = index_path


class DuplicatePageError(PreconditionError):
    """Raised when two source files would be written to the same page."""

    def __init__(self, name: str, sources: list[Path]):
        files = ", ".join(str(s) for s in sources)
        super().__init__(f"Page '{name}.md' would be generated from several files: {files}")
        self.name = name


class SourceDecodeError(SqlWikiError):
    """Raised when a source file is not valid UTF-8 text."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read {path} as UTF-8: {reason}")
        self.path = path
