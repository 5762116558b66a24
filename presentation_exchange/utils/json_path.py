"""JSON-Path related operations."""

import json
import logging

from typing import Any, Optional, Union

from jsonpath_ng import parse
from jsonpath_ng.jsonpath import JSONPath
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from ..error import PathSyntaxError

LOGGER = logging.getLogger(__name__)

JSON_PATH_ROOT = "$"


def to_json_path(path: str) -> JSONPath:
    """
    Compile a JSON-Path expression.

    Args:
        path: the JSON-Path expression, rooted at `$`

    Returns:
        The compiled expression

    Raises:
        PathSyntaxError: If the expression is not a rooted, parseable JSON-Path

    """
    if not isinstance(path, str) or not path.startswith(JSON_PATH_ROOT):
        raise PathSyntaxError(f"JSON-Path must start with '{JSON_PATH_ROOT}': {path}")
    if path != path.strip():
        raise PathSyntaxError(f"JSON-Path has surrounding whitespace: {path!r}")
    try:
        return parse(path)
    except (JsonPathLexerError, JsonPathParserError) as err:
        raise PathSyntaxError(f"Invalid JSON-Path {path}: {err}") from err


def is_valid(path: str) -> bool:
    """Check that the provided string is a JSON-Path."""
    try:
        to_json_path(path)
    except PathSyntaxError:
        return False
    return True


def extract(path: str, document: Union[str, bytes, dict, list]) -> Optional[str]:
    """
    Extract the content of a JSON document at a JSON-Path.

    Every value the expression matches is collected, in document order, and
    the list is returned as compact JSON text: a single match on
    `$.store.book[*].author` yields `'["X"]'`, never the bare `'"X"'`.

    Args:
        path: the JSON-Path expression
        document: the JSON text, or an already parsed JSON value

    Returns:
        JSON text of the list of matched values, or `None` when nothing matches

    Raises:
        PathSyntaxError: If the path is malformed
        ValueError: If the document text is not JSON

    """
    expression = to_json_path(path)
    parsed = json.loads(document) if isinstance(document, (str, bytes)) else document
    matches = [match.value for match in expression.find(parsed)]
    if not matches:
        LOGGER.debug("No value found at %s", path)
        return None
    return to_json_string(matches)


def to_json_string(node: Any) -> str:
    """Return compact JSON text for a JSON value."""
    return json.dumps(node, separators=(",", ":"))
