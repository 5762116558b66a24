"""Well known places where a presentation submission is embedded."""

import logging

from enum import Enum
from typing import Mapping, Optional

from ..error import ExtractionMiss
from ..models.base import BaseModelError
from .presentation_submission import PresentationSubmissionSchema

LOGGER = logging.getLogger(__name__)

PRESENTATION_SUBMISSION_KEY = "presentation_submission"


def _object_at(json: Mapping, *keys: str) -> Mapping:
    node = json
    for key in keys:
        if not isinstance(node, Mapping) or key not in node:
            raise ExtractionMiss(f"No object at {'.'.join(keys)}")
        node = node[key]
    if not isinstance(node, Mapping):
        raise ExtractionMiss(f"Value at {'.'.join(keys)} is not an object")
    return node


class PresentationSubmissionEmbedLocation(Enum):
    """
    Embed locations, tried in declaration order.

    https://identity.foundation/presentation-exchange/spec/v2.0.0/#embed-locations
    """

    OIDC = "oidc"
    VP = "vp"
    JWT = "jwt"
    DIDCOMMS = "didcomms"
    CHAPI = "chapi"

    def detect_root(self, json: Mapping) -> Mapping:
        """
        Select the object expected to hold the presentation submission.

        Args:
            json: the JSON object received

        Returns:
            The object under which `presentation_submission` is looked up

        Raises:
            ExtractionMiss: If this location's root is absent or not an object

        """
        if self in (
            PresentationSubmissionEmbedLocation.OIDC,
            PresentationSubmissionEmbedLocation.VP,
        ):
            return _object_at(json)
        if self is PresentationSubmissionEmbedLocation.JWT:
            return _object_at(json, "vp")
        if self is PresentationSubmissionEmbedLocation.DIDCOMMS:
            return _object_at(json, "presentations~attach", "data", "json")
        if self is PresentationSubmissionEmbedLocation.CHAPI:
            return _object_at(json, "data")
        raise TypeError(f"Unsupported embed location: {self}")

    def extract_from(self, json: Mapping) -> Optional[Mapping]:
        """
        Extract the presentation submission embedded at this location.

        Args:
            json: the JSON object received

        Returns:
            The submission object if it is found and passes schema validation,
            otherwise `None`

        """
        try:
            candidate = _object_at(self.detect_root(json), PRESENTATION_SUBMISSION_KEY)
            errors = PresentationSubmissionSchema().validate(candidate)
        except (ExtractionMiss, BaseModelError) as err:
            LOGGER.debug("No presentation submission at %s: %s", self.name, err)
            return None
        if errors:
            LOGGER.debug("Invalid presentation submission at %s: %s", self.name, errors)
            return None
        return candidate
