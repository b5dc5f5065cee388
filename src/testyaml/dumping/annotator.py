#!/usr/bin/env python3
"""
TESTYAML ANNOTATOR - Line Numbering
-----------------------------------
Decomposes raw input into NumberedLine models and formats them with a
right-aligned, zero-based index.

Splitting is done on "\\n" only. Carriage returns, tabs, BOMs and
trailing whitespace are left exactly as they arrived.

Author: TestYAML Team
Date: 2026-10-19
"""

from typing import List
from testyaml.core.models import NumberedLine

class LineAnnotator:
    """
    Turns the input text into the numbered-line block of the dump.
    """

    def __init__(self, index_width: int = 4):
        # Indices wider than this simply widen the field
        self.index_width = index_width

    def split_lines(self, raw_text: str) -> List[NumberedLine]:
        """
        Splits on the newline delimiter, keeping the empty trailing part.

        "" -> [""], "a\\nb\\n" -> ["a", "b", ""]
        """
        return [NumberedLine(index=i, text=part) for i, part in enumerate(raw_text.split("\n"))]

    def format_line(self, line: NumberedLine) -> str:
        return f"{line.index:>{self.index_width}d}: {line.text}"

    def render_block(self, lines: List[NumberedLine]) -> str:
        """Joins formatted lines, every line newline-terminated."""
        return "".join(self.format_line(line) + "\n" for line in lines)

    def annotate(self, raw_text: str) -> str:
        return self.render_block(self.split_lines(raw_text))
