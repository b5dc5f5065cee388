#!/usr/bin/env python3
"""
TESTYAML RENDERER - Recursive Structure Dump
--------------------------------------------
Walks the parsed value and renders mappings and sequences as labelled,
bracketed blocks with one `[key] => value` entry per item, nesting
inner containers one level deeper:

    Mapping
    (
        [name] => web
        [ports] => Sequence
            (
                [0] => 80
            )

    )

Author: TestYAML Team
Date: 2026-10-19
"""

from typing import Any, Iterator, List, Optional, Tuple

_EXHAUSTED = object()

class StructureRenderer:
    """
    Renders the tagged union produced by the loader: None, bool, numbers,
    strings, lists and dicts, arbitrarily nested.

    The walk keeps its own stack, so nesting depth is bounded only by
    memory. A container that appears again on its own path (anchors
    referring to themselves) is printed as RECURSION_MARKER.
    """

    MAPPING_LABEL = "Mapping"
    SEQUENCE_LABEL = "Sequence"
    RECURSION_MARKER = "*RECURSION*"

    def __init__(self, indent_step: int = 4):
        self.indent_step = indent_step

    def render(self, value: Any) -> str:
        """Returns the dump of `value`; containers end with ')\\n'."""
        opened = self._open_block(value, 0)
        if opened is None:
            return self.format_scalar(value)

        parts: List[str] = [opened[0]]
        on_path = {id(value)}
        stack: List[Tuple[Any, Iterator, int]] = [(value, opened[1], 0)]

        while stack:
            node, entries, indent = stack[-1]
            entry = next(entries, _EXHAUSTED)

            if entry is _EXHAUSTED:
                stack.pop()
                on_path.discard(id(node))
                parts.append(f"{' ' * indent})\n")
                if stack:
                    # Closes the parent's entry line
                    parts.append("\n")
                continue

            key, child = entry
            parts.append(f"{' ' * (indent + self.indent_step)}[{self.format_key(key)}] => ")

            child_indent = indent + 2 * self.indent_step
            child_block = self._open_block(child, child_indent)
            if child_block is None:
                parts.append(self.format_scalar(child) + "\n")
            elif id(child) in on_path:
                parts.append(self.RECURSION_MARKER + "\n")
            else:
                parts.append(child_block[0])
                on_path.add(id(child))
                stack.append((child, child_block[1], child_indent))

        return "".join(parts)

    def format_scalar(self, value: Any) -> str:
        # bool before numbers: True is an int
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, bytes):
            return value.decode("utf-8", "surrogateescape")
        return str(value)

    def format_key(self, key: Any) -> str:
        """Keys stay on one line; composite keys print as Sequence(a, b)."""
        if isinstance(key, (tuple, frozenset)):
            items = key if isinstance(key, tuple) else self._ordered(key)
            return f"{self.SEQUENCE_LABEL}({', '.join(self.format_key(item) for item in items)})"
        return self.format_scalar(key)

    def _ordered(self, members) -> list:
        """Sets have no source order; sort them so output is repeatable."""
        return sorted(members, key=lambda item: (type(item).__name__, repr(item)))

    def _open_block(self, value: Any, indent: int) -> Optional[Tuple[str, Iterator]]:
        """Header text and entry iterator for a container, None for a scalar."""
        if isinstance(value, dict):
            label, entries = self.MAPPING_LABEL, iter(list(value.items()))
        elif isinstance(value, (list, tuple)):
            label, entries = self.SEQUENCE_LABEL, enumerate(list(value))
        elif isinstance(value, (set, frozenset)):
            label, entries = self.SEQUENCE_LABEL, enumerate(self._ordered(value))
        else:
            return None
        return f"{label}\n{' ' * indent}(\n", entries
