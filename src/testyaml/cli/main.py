#!/usr/bin/env python3
"""
TESTYAML CLI
------------
Entry point for the `testyaml` command: dumps standard input with line
numbers, then the parsed YAML structure or "invalid YAML document".

Standard output carries only the dump. Diagnostics go through a rich
console bound to standard error.

Author: TestYAML Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from typing import BinaryIO, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from testyaml.core.engine import DumpEngine

# Stderr only: stdout belongs to the dump
console = Console(stderr=True)

class YamlDumpCLI:
    """
    Thin wrapper that wires the process streams to the DumpEngine.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="testyaml",
            description="Print standard input with line numbers, then its parsed YAML structure.",
            epilog="Input is read from standard input only."
        )

    def _setup_logging(self):
        """Routes library logging to the stderr console, quiet by default."""
        logging.basicConfig(
            level=logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)]
        )

    def run(self, argv: Optional[Sequence[str]] = None,
            stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None) -> int:
        self.parser.parse_args(argv)
        self._setup_logging()

        engine = DumpEngine()
        engine.dump_stream(stdin or sys.stdin.buffer, stdout or sys.stdout.buffer)
        # Validity of the document never changes the exit status
        return 0

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Application entry point with interrupt handling."""
    try:
        return YamlDumpCLI().run(argv)
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        return 1

if __name__ == "__main__":
    sys.exit(main())
