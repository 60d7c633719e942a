"""📂 File Collector - Resolve input paths into the SQL files to document."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .config import SqlWikiSettings, get_settings


def collect_sources(
    paths: Iterable[Path | str],
    settings: SqlWikiSettings | None = None,
) -> list[Path]:
    """Collect source files from files and directories.

    Files are taken as given. Directories contribute their direct children
    with the source suffix, hidden files excluded. The result is free of
    duplicates and sorted by base filename, so the order of ``paths`` does
    not matter.

    Args:
        paths: Files or directories to scan
        settings: Optional settings override

    Returns:
        Sorted list of source files

    Raises:
        FileNotFoundError: If a path does not exist
    """
    settings = settings or get_settings()
    found: dict[Path, Path] = {}

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            for child in path.iterdir():
                if (
                    child.is_file()
                    and child.name.endswith(settings.source_suffix)
                    and not child.name.startswith(".")
                ):
                    found.setdefault(child.resolve(), child)
        elif path.is_file():
            found.setdefault(path.resolve(), path)
        else:
            raise FileNotFoundError(f"Source path not found: {path}")

    return sorted(found.values(), key=lambda p: (p.name, str(p)))
