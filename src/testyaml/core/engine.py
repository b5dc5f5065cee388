#!/usr/bin/env python3
"""
TESTYAML ENGINE - Stream Orchestrator
-------------------------------------
Owns the byte boundary of the dumper. Standard input is read to
completion exactly once, decoded, handed to the DumpPipeline, and the
resulting text is written back out byte-for-byte.

Decoding uses `surrogateescape`, so input that is not valid UTF-8 still
prints verbatim in the numbered block.

Author: TestYAML Team
Date: 2026-10-19
"""

import logging
from typing import BinaryIO

from testyaml.dumping.pipeline import DumpPipeline
from testyaml.dumping.context import DumpContext

logger = logging.getLogger("testyaml.engine")

class DumpEngine:
    """
    Binds the pipeline to binary streams.
    """

    def __init__(self, encoding: str = "utf-8", pipeline: DumpPipeline = None):
        self.encoding = encoding
        self.errors = "surrogateescape"
        self.pipeline = pipeline or DumpPipeline()

    def read_input(self, stream: BinaryIO) -> str:
        """Reads the whole stream before any processing begins."""
        data = stream.read()
        logger.debug(f"Read {len(data)} bytes of input")
        return data.decode(self.encoding, self.errors)

    def write_output(self, text: str, stream: BinaryIO):
        stream.write(text.encode(self.encoding, self.errors))
        stream.flush()

    def dump_text(self, input_text: str) -> DumpContext:
        return self.pipeline.run(input_text)

    def dump_stream(self, stdin: BinaryIO, stdout: BinaryIO) -> DumpContext:
        """
        Full read -> annotate -> parse -> print cycle.
        """
        context = self.dump_text(self.read_input(stdin))
        self.write_output(context.output, stdout)
        if not context.is_valid:
            logger.info("Input was reported as an invalid YAML document")
        return context
