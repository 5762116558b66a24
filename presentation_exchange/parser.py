"""Decoding of presentation definitions and submissions from JSON input."""

import codecs
import json
import logging

from abc import ABC, abstractmethod
from collections.abc import AsyncIterable
from typing import Any, Mapping, Optional, Union

from .config.settings import ALLOW_BARE_SUBMISSION, STREAM_ENCODING, Settings
from .core.error import BaseError
from .definition.presentation_definition import PresentationDefinition
from .submission.embed_location import PresentationSubmissionEmbedLocation
from .submission.presentation_submission import PresentationSubmission
from .utils.result import Result

LOGGER = logging.getLogger(__name__)

PRESENTATION_DEFINITION_KEY = "presentation_definition"

JsonInput = Union[str, bytes, bytearray, Any]


def _describe(err: Exception) -> str:
    return err.roll_up if isinstance(err, BaseError) else repr(err)


class JsonParser(ABC):
    """Decoder of presentation exchange objects."""

    @abstractmethod
    async def decode_presentation_definition(
        self, input: JsonInput
    ) -> Result[PresentationDefinition]:
        """
        Decode a presentation definition.

        The input is expected to be a JSON object that either holds the
        definition under `presentation_definition` or is the definition itself.
        """

    @abstractmethod
    async def decode_presentation_submission(
        self, input: JsonInput
    ) -> Result[PresentationSubmission]:
        """
        Decode a presentation submission.

        The input is expected to be a JSON object that either holds the
        submission at one of the embed locations or is the submission itself.
        """


class DefaultJsonParser(JsonParser):
    """Decoder trying every embed location of a presentation submission."""

    def __init__(self, settings: Optional[Mapping[str, Any]] = None):
        """Initialize DefaultJsonParser."""
        self._settings = Settings.with_defaults(settings)

    @property
    def settings(self) -> Settings:
        """Accessor for the parser settings."""
        return self._settings

    async def decode_presentation_definition(
        self, input: JsonInput
    ) -> Result[PresentationDefinition]:
        """
        Decode a presentation definition.

        Args:
            input: JSON text, bytes, a stream with an async `read()`, or an
                async iterable of byte chunks

        Returns:
            The definition, or the error that prevented decoding it

        """
        try:
            json_object = await self._read_object(input)
            candidate = json_object.get(PRESENTATION_DEFINITION_KEY)
            if isinstance(candidate, Mapping):
                LOGGER.info(
                    "Presentation definition found under %s",
                    PRESENTATION_DEFINITION_KEY,
                )
            else:
                candidate = json_object
            return Result.success(PresentationDefinition.deserialize(candidate))
        except Exception as err:
            LOGGER.warning(
                "Unable to decode presentation definition: %s", _describe(err)
            )
            return Result.failure(err)

    async def decode_presentation_submission(
        self, input: JsonInput
    ) -> Result[PresentationSubmission]:
        """
        Decode a presentation submission.

        Embed locations are tried in order and the first holding a valid
        submission wins. When none does, and bare submissions are allowed,
        the whole object is decoded as the submission.

        Args:
            input: JSON text, bytes, a stream with an async `read()`, or an
                async iterable of byte chunks

        Returns:
            The submission, or the error that prevented decoding it

        """
        try:
            json_object = await self._read_object(input)
            return Result.success(
                PresentationSubmission.deserialize(self._locate_submission(json_object))
            )
        except Exception as err:
            LOGGER.warning(
                "Unable to decode presentation submission: %s", _describe(err)
            )
            return Result.failure(err)

    def _locate_submission(self, json_object: Mapping) -> Mapping:
        for location in PresentationSubmissionEmbedLocation:
            LOGGER.debug("Trying %s embed location", location.name)
            submission = location.extract_from(json_object)
            if submission is not None:
                LOGGER.info("Presentation submission found at %s", location.name)
                return submission
        if not self._settings.get_bool(ALLOW_BARE_SUBMISSION, default=True):
            raise ValueError("No presentation submission found at any embed location")
        LOGGER.info("Decoding input as a bare presentation submission")
        return json_object

    async def _read_object(self, input: JsonInput) -> Mapping:
        text = await self._read_text(input)
        parsed = json.loads(text)
        if not isinstance(parsed, Mapping):
            raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
        return parsed

    async def _read_text(self, input: JsonInput) -> str:
        encoding = self._settings.get_str(STREAM_ENCODING, default="utf-8")
        if isinstance(input, str):
            return input
        if isinstance(input, (bytes, bytearray)):
            return bytes(input).decode(encoding)

        decoder = codecs.getincrementaldecoder(encoding)()
        chunks = []
        if hasattr(input, "read"):
            data = await input.read()
            chunks.append(data if isinstance(data, str) else decoder.decode(data))
        elif isinstance(input, AsyncIterable):
            async for chunk in input:
                chunks.append(decoder.decode(chunk))
        else:
            raise TypeError(f"Unsupported input type: {type(input).__name__}")
        chunks.append(decoder.decode(b"", final=True))
        return "".join(chunks)
