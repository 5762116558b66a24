"""Public entry points for presentation exchange decoding and JSON-Path use."""

from typing import Any, Mapping, Optional

from .definition.presentation_definition import PresentationDefinition
from .parser import DefaultJsonParser, JsonInput
from .submission.presentation_submission import PresentationSubmission
from .utils import json_path
from .utils.result import Result


async def decode_presentation_submission(
    input: JsonInput, settings: Optional[Mapping[str, Any]] = None
) -> Result[PresentationSubmission]:
    """Decode a presentation submission, bare or at any embed location."""
    return await DefaultJsonParser(settings).decode_presentation_submission(input)


async def decode_presentation_definition(
    input: JsonInput, settings: Optional[Mapping[str, Any]] = None
) -> Result[PresentationDefinition]:
    """Decode a presentation definition, bare or under `presentation_definition`."""
    return await DefaultJsonParser(settings).decode_presentation_definition(input)


def is_valid_json_path(path: str) -> bool:
    """Check that a string is a JSON-Path rooted at `$`."""
    return json_path.is_valid(path)


def extract_at_json_path(path: str, document) -> Optional[str]:
    """
    Extract the values a JSON-Path matches in a JSON document.

    Returns:
        JSON text of the list of matched values, or `None` when nothing matches

    Raises:
        PathSyntaxError: If the path is malformed
        ValueError: If the document text is not JSON

    """
    return json_path.extract(path, document)
