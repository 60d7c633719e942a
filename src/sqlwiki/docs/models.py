"""📋 Documentation Models - Sections extracted from SQL sources.

A source file is split into alternating comment and code sections. Comment
sections become prose, code sections become fenced ``sql`` blocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class SectionKind(Enum):
    """Kind of text a section holds."""

    COMMENT = "comment"
    CODE = "code"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Section:
    """A maximal run of same-kind lines from one source file."""

    kind: SectionKind
    text: str


@dataclass
class Document:
    """Extracted and rendered documentation of one SQL file."""

    source_file: Path
    sections: list[Section] = field(default_factory=list)
    rendered_markdown: str = ""

    @property
    def base_name(self) -> str:
        return self.source_file.name
