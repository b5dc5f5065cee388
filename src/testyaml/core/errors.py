#!/usr/bin/env python3
"""
TESTYAML ERRORS
---------------
The one error kind of the dumper: the input is not well-formed YAML.

Author: TestYAML Team
Date: 2026-10-19
"""

from typing import Optional

class YamlParseError(ValueError):
    """
    Raised-and-caught marker for a rejected document.

    Line and column are zero-based and only present when the parser
    reported a position.
    """

    def __init__(self, problem: str, line: Optional[int] = None, column: Optional[int] = None):
        self.problem = problem
        self.line = line
        self.column = column
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.problem
        return f"{self.problem} (line {self.line}, column {self.column})"
