#!/usr/bin/env python3
"""
TESTYAML DUMP PIPELINE
----------------------
Coordinates the three stages over an in-memory text value:

1. Annotate: number every "\\n"-separated line.
2. Parse: hand the ORIGINAL unsplit text to the loader.
3. Render: dump the value on success, or the fixed invalid message.

Author: TestYAML Team
Date: 2026-10-19
"""

import logging

from testyaml.dumping.annotator import LineAnnotator
from testyaml.dumping.loader import YamlLoader
from testyaml.dumping.renderer import StructureRenderer
from testyaml.dumping.context import DumpContext

logger = logging.getLogger("testyaml.pipeline")

INVALID_DOCUMENT_MESSAGE = "invalid YAML document"

class DumpPipeline:
    """Runs annotate, parse and render in that fixed order."""

    def __init__(self, annotator: LineAnnotator = None, loader: YamlLoader = None,
                 renderer: StructureRenderer = None):
        self.annotator = annotator or LineAnnotator()
        self.loader = loader or YamlLoader()
        self.renderer = renderer or StructureRenderer()

    def run(self, input_text: str) -> DumpContext:
        context = DumpContext(raw_text=input_text)

        # --- PHASE 1: LINE ANNOTATION ---
        context.lines = self.annotator.split_lines(input_text)
        context.annotated = self.annotator.render_block(context.lines)

        # --- PHASE 2: PARSE ---
        context.outcome = self.loader.load(input_text)

        # --- PHASE 3: RENDER ---
        # The outcome flag decides, never the truthiness of the value
        if context.outcome.ok:
            context.rendered = self.renderer.render(context.outcome.value) + "\n"
        else:
            context.rendered = INVALID_DOCUMENT_MESSAGE + "\n"

        logger.debug(f"Dumped {len(context.lines)} lines, valid={context.outcome.ok}")
        return context
