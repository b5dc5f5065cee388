#!/usr/bin/env python3
"""
TESTYAML LOADER - The Parser Gate
---------------------------------
Interprets the unmodified input text as YAML through ruamel.yaml's safe
loader and reports the result as a ParseOutcome instead of raising.

Author: TestYAML Team
Date: 2026-10-19
"""

import logging
from typing import Any, List

from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from testyaml.core.errors import YamlParseError
from testyaml.core.models import ParseOutcome

logger = logging.getLogger("testyaml.loader")

class LastKeyWinsConstructor(SafeConstructor):
    """
    Safe constructor that accepts repeated mapping keys.

    A duplicate key is well-formed syntax; the later value replaces the
    earlier one, as libyaml-based loaders do.
    """

    def check_mapping_key(self, node, key_node, mapping, key, value) -> bool:
        return True

class YamlLoader:
    """
    Wraps a safe ruamel.yaml instance.

    The whole stream is consumed so that a broken second document rejects
    the input. The first document is the parsed value; a stream without
    documents parses to None.
    """

    def __init__(self):
        self.yaml = YAML(typ='safe', pure=True)
        self.yaml.Constructor = LastKeyWinsConstructor
        self.yaml.allow_duplicate_keys = True

    def load(self, raw_text: str) -> ParseOutcome:
        try:
            documents: List[Any] = list(self.yaml.load_all(raw_text))
        except YAMLError as e:
            error = self._to_parse_error(e)
            logger.info(f"Rejected YAML input: {error}")
            return ParseOutcome.failure(error)
        except ValueError as e:
            # Scalar construction (e.g. timestamps) reports through ValueError
            logger.info(f"Rejected YAML input during construction: {e}")
            return ParseOutcome.failure(YamlParseError(str(e)))
        except RecursionError:
            # The pure-Python parser descends once per nesting level
            logger.info("Rejected YAML input: nesting exceeds the interpreter stack")
            return ParseOutcome.failure(YamlParseError("document nested too deeply"))

        if len(documents) > 1:
            logger.debug(f"Stream holds {len(documents)} documents; dumping the first")

        value = documents[0] if documents else None
        return ParseOutcome.success(value, document_count=len(documents))

    def _to_parse_error(self, exc: YAMLError) -> YamlParseError:
        """Keeps the parser's own problem text and, when present, its mark."""
        problem = getattr(exc, 'problem', None) or str(exc)
        mark = getattr(exc, 'problem_mark', None) or getattr(exc, 'context_mark', None)
        if mark is None:
            return YamlParseError(problem)
        return YamlParseError(problem, line=mark.line, column=mark.column)
