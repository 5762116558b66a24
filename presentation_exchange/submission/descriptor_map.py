"""Descriptor map: where a holder's response satisfies one input descriptor."""

from marshmallow import EXCLUDE, fields, validates

from ..error import InvalidJsonPath, StructuralValidationError
from ..models.base import BaseModel, BaseModelSchema
from ..utils import json_path
from ..valid import (
    CLAIM_FORMAT_EXAMPLE,
    JSON_PATH_EXAMPLE,
    NON_EMPTY_STR_EXAMPLE,
    NON_EMPTY_STR_VALIDATE,
)


class DescriptorMap(BaseModel):
    """Single entry of the descriptor_map of a presentation submission."""

    class Meta:
        """DescriptorMap metadata."""

        schema_class = "DescriptorMapSchema"
        error_class = StructuralValidationError

    def __init__(
        self,
        *,
        id: str = None,
        fmt: str = None,
        path: str = None,
        path_nested: "DescriptorMap" = None,
    ):
        """Initialize DescriptorMap."""
        self.id = id
        self.fmt = fmt
        self.path = path
        self.path_nested = path_nested


class DescriptorMapSchema(BaseModelSchema):
    """Single DescriptorMap Schema."""

    class Meta:
        """DescriptorMapSchema metadata."""

        model_class = DescriptorMap
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={"description": "ID", "example": NON_EMPTY_STR_EXAMPLE},
    )
    fmt = fields.Str(
        required=True,
        data_key="format",
        metadata={"description": "Format", "example": CLAIM_FORMAT_EXAMPLE},
    )
    path = fields.Str(
        required=True,
        metadata={"description": "Path", "example": JSON_PATH_EXAMPLE},
    )
    path_nested = fields.Nested(
        lambda: DescriptorMapSchema(),
        required=False,
        metadata={"description": "Descriptor map of the embedded claim"},
    )

    @validates("path")
    def validate_path(self, value, **kwargs):
        """Reject a path that is not a JSON-Path."""
        if not json_path.is_valid(value):
            raise InvalidJsonPath(f"Descriptor map path {value} is not a JSON-Path")
