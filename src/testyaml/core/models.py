#!/usr/bin/env python3
"""
TESTYAML CORE MODELS
--------------------
Defines the data structures passed between the annotator, the loader
and the renderer. Nothing here outlives a single invocation.

Author: TestYAML Team
Date: 2026-10-19
"""

from dataclasses import dataclass
from typing import Optional, Any

from testyaml.core.errors import YamlParseError

@dataclass(frozen=True)
class NumberedLine:
    """
    One element of the input split on the newline character.

    The trailing empty string produced by a final newline is a line too.
    """
    index: int              # Zero-based position in source order
    text: str               # The literal line content, never trimmed

@dataclass
class ParseOutcome:
    """
    Discriminated result of parsing the input text.

    `ok` is the only success signal: a document that parses to `{}`,
    `[]`, `false`, `0` or `null` is still a success with a falsy value.
    """
    ok: bool
    value: Optional[Any] = None             # Meaningful only when ok is True
    error: Optional[YamlParseError] = None  # Set only when ok is False
    document_count: int = 0                 # Documents found in the stream

    @classmethod
    def success(cls, value: Any, document_count: int = 1) -> "ParseOutcome":
        return cls(ok=True, value=value, document_count=document_count)

    @classmethod
    def failure(cls, error: YamlParseError) -> "ParseOutcome":
        return cls(ok=False, error=error)
