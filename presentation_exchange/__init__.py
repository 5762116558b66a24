"""Presentation Exchange object model and submission decoding."""

from .exchange import (
    decode_presentation_definition,
    decode_presentation_submission,
    extract_at_json_path,
    is_valid_json_path,
)
from .version import __version__

__all__ = [
    "__version__",
    "decode_presentation_definition",
    "decode_presentation_submission",
    "extract_at_json_path",
    "is_valid_json_path",
]
