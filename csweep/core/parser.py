"""Tree-sitter binding for the C grammar."""

import logging
from functools import cache
from pathlib import Path

import tree_sitter_c as tsc
from tree_sitter import Language, Parser, Tree

from csweep.core.errors import UnparsableFileError

logger = logging.getLogger(__name__)


@cache
def get_language() -> Language:
    """Load the C grammar. Fails loudly if the binding is broken."""
    return Language(tsc.language())


def create_parser() -> Parser:
    return Parser(get_language())


def parse_source(parser: Parser, source: bytes, path: Path) -> Tree:
    """
    Parse C source bytes into a syntax tree.

    Trees containing syntax errors are still returned: tree-sitter recovers
    and the walker simply sees ERROR nodes.

    Raises:
        UnparsableFileError: if the parser produced no tree
    """
    try:
        tree = parser.parse(source)
    except (ValueError, RuntimeError) as e:
        raise UnparsableFileError(path, str(e)) from e

    if tree is None:
        raise UnparsableFileError(path)

    if tree.root_node.has_error:
        logger.debug(f"Syntax errors in {path}, continuing with recovered tree")

    return tree
