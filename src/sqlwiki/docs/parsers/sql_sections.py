"""🔍 SQL Section Parser - Split SQL files into comment and code sections.

Documentation lives in block comments, each delimiter alone on its line:

Example:
    sql = '''
    /*
     # Users Table
     Stores user records.
    */
    CREATE TABLE users (id INT);
    '''

    sections = extract_sections(sql)
    # Returns:
    # [
    #   Section(kind=SectionKind.COMMENT, text=" # Users Table\\n Stores user records.\\n"),
    #   Section(kind=SectionKind.CODE, text="CREATE TABLE users (id INT);\\n"),
    # ]

Rendering these sections to markdown is one-way: the fenced output is not
meant to be parsed back into SQL.
"""

from __future__ import annotations

import io
import re
from collections.abc import Iterable, Iterator
from enum import Enum
from pathlib import Path

from ...exceptions import SourceDecodeError
from ..models import Section, SectionKind


class ExtractorState(Enum):
    """States of the section parser."""

    START = "start"
    BLOCK = "block"
    SQL = "sql"


class LineSource:
    """Pull-based line reader.

    Yields every line of the input (line endings kept) and then exactly one
    empty synthetic line, so the parser sees end-of-input as a line and can
    flush whatever section is still open.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._flushed = False

    def __iter__(self) -> LineSource:
        return self

    def __next__(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            if self._flushed:
                raise
            self._flushed = True
            return ""

    def pull(self) -> str | None:
        """Return the next line, or None once exhausted."""
        return next(self, None)


class SQLSectionParser:
    """Line-oriented state machine extracting documentation sections.

    Rules, per line:
    1. A line holding only ``--`` is skipped.
    2. A line holding only a one-line ``/* ... */`` remark is skipped.
    3. Otherwise the line is dispatched on the current state.
    """

    # Pattern for a bare line-comment marker
    EMPTY_LINE_COMMENT = re.compile(r"^\s*--\s*$")

    # Pattern for a block remark opened and closed on the same line
    ONE_LINE_REMARK = re.compile(r"^\s*/\*.*\*/\s*$")

    # Block comment delimiters, alone on their line
    BLOCK_OPEN = re.compile(r"^\s*/\*\s*$")
    BLOCK_CLOSE = re.compile(r"^\s*\*/\s*$")

    def __init__(self) -> None:
        self._state = ExtractorState.START
        self._buffer: list[str] = []
        self._sections: list[Section] = []

    @property
    def state(self) -> ExtractorState:
        return self._state

    def parse_file(self, path: Path | str) -> list[Section]:
        """Parse a SQL file into sections.

        Args:
            path: Path to the SQL file

        Returns:
            List of Section objects in source order

        Raises:
            SourceDecodeError: If the file is not valid UTF-8
        """
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return self.parse_lines(f)
        except UnicodeDecodeError as e:
            raise SourceDecodeError(Path(path), e.reason) from e

    def parse_string(self, sql: str) -> list[Section]:
        """Parse SQL text into sections.

        Args:
            sql: SQL content

        Returns:
            List of Section objects in source order
        """
        return self.parse_lines(io.StringIO(sql, newline=""))

    def parse_lines(self, lines: Iterable[str]) -> list[Section]:
        """Run the state machine over an iterable of lines."""
        self._state = ExtractorState.START
        self._buffer = []
        self._sections = []

        source = LineSource(lines)
        line = source.pull()
        while line is not None:
            if self._is_skipped(line):
                line = source.pull()
                continue

            redo = self._dispatch(line)
            if not redo:
                line = source.pull()

        return self._sections

    def _is_skipped(self, line: str) -> bool:
        return bool(
            self.EMPTY_LINE_COMMENT.match(line) or self.ONE_LINE_REMARK.match(line)
        )

    def _dispatch(self, line: str) -> bool:
        """Handle one line. Returns True when the line must be handled again."""
        end_of_input = line == ""

        if self._state is ExtractorState.START:
            if self.BLOCK_OPEN.match(line):
                self._state = ExtractorState.BLOCK
            elif line.strip():
                self._state = ExtractorState.SQL
                return True

        elif self._state is ExtractorState.BLOCK:
            if end_of_input or self.BLOCK_CLOSE.match(line):
                self._emit(SectionKind.COMMENT)
                self._state = ExtractorState.START
            else:
                self._buffer.append(line)

        elif self._state is ExtractorState.SQL:
            if end_of_input or self.BLOCK_OPEN.match(line):
                self._emit(SectionKind.CODE)
                self._state = ExtractorState.BLOCK
            else:
                self._buffer.append(line)

        return False

    def _emit(self, kind: SectionKind) -> None:
        self._sections.append(Section(kind=kind, text="".join(self._buffer)))
        self._buffer = []


def extract_sections(sql: str | Path) -> list[Section]:
    """Convenience function to extract sections from SQL.

    Args:
        sql: SQL string or path to SQL file

    Returns:
        List of Section objects
    """
    parser = SQLSectionParser()

    if isinstance(sql, Path):
        return parser.parse_file(sql)
    return parser.parse_string(sql)
