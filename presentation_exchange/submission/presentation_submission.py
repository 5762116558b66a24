"""Presentation submission: the holder's response manifest."""

from typing import Sequence

from marshmallow import EXCLUDE, fields

from ..error import StructuralValidationError
from ..models.base import BaseModel, BaseModelSchema
from ..valid import NON_EMPTY_STR_EXAMPLE, NON_EMPTY_STR_VALIDATE
from .descriptor_map import DescriptorMap, DescriptorMapSchema


class PresentationSubmission(BaseModel):
    """
    Presentation submission.

    Maps input descriptor ids to JSON-Paths in the holder's response. Whether
    those ids exist in the referenced presentation definition is not checked.
    """

    class Meta:
        """PresentationSubmission metadata."""

        schema_class = "PresentationSubmissionSchema"
        error_class = StructuralValidationError

    def __init__(
        self,
        *,
        id: str = None,
        definition_id: str = None,
        descriptor_maps: Sequence[DescriptorMap] = None,
    ):
        """Initialize PresentationSubmission."""
        self.id = id
        self.definition_id = definition_id
        self.descriptor_maps = tuple(descriptor_maps or ())


class PresentationSubmissionSchema(BaseModelSchema):
    """Single PresentationSubmission Schema."""

    class Meta:
        """PresentationSubmissionSchema metadata."""

        model_class = PresentationSubmission
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={"description": "ID", "example": NON_EMPTY_STR_EXAMPLE},
    )
    definition_id = fields.Str(
        required=True,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={"description": "Presentation definition ID"},
    )
    descriptor_maps = fields.List(
        fields.Nested(DescriptorMapSchema),
        required=True,
        data_key="descriptor_map",
    )
