#!/usr/bin/env python3
"""
TESTYAML DUMP CONTEXT
---------------------
The record of one dump run, filled in by the DumpPipeline stage by stage.

Author: TestYAML Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import List, Optional
from testyaml.core.models import NumberedLine, ParseOutcome

@dataclass
class DumpContext:
    """
    Holds the input text and everything derived from it.

    `output` is exactly what goes to standard output.
    """
    raw_text: str                                          # The unsplit input
    lines: List[NumberedLine] = field(default_factory=list)
    annotated: str = ""                                    # The numbered-line block
    outcome: Optional[ParseOutcome] = None
    rendered: str = ""                                     # Dump or the invalid message

    @property
    def is_valid(self) -> bool:
        return bool(self.outcome and self.outcome.ok)

    @property
    def output(self) -> str:
        return self.annotated + self.rendered
