"""Input descriptor: one piece of evidence a verifier requires."""

from typing import Sequence

from marshmallow import EXCLUDE, fields

from ..error import StructuralValidationError
from ..models.base import BaseModel, BaseModelSchema
from ..valid import NON_EMPTY_STR_EXAMPLE, NON_EMPTY_STR_VALIDATE
from .claim_format import ClaimFormat, ClaimFormatSchema
from .constraints import Constraints, ConstraintsSchema


class InputDescriptor(BaseModel):
    """Input Descriptor."""

    class Meta:
        """InputDescriptor metadata."""

        schema_class = "InputDescriptorSchema"
        error_class = StructuralValidationError

    def __init__(
        self,
        *,
        id: str = None,
        name: str = None,
        purpose: str = None,
        fmt: ClaimFormat = None,
        constraints: Constraints = None,
        groups: Sequence[str] = None,
    ):
        """Initialize InputDescriptor."""
        self.id = id
        self.name = name
        self.purpose = purpose
        self.fmt = fmt
        self.constraints = constraints
        self.groups = tuple(groups) if groups is not None else None


class InputDescriptorSchema(BaseModelSchema):
    """Single InputDescriptor Schema."""

    class Meta:
        """InputDescriptorSchema metadata."""

        model_class = InputDescriptor
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={
            "description": "Unique within its presentation definition",
            "example": NON_EMPTY_STR_EXAMPLE,
        },
    )
    name = fields.Str(
        required=False,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={"description": "Name"},
    )
    purpose = fields.Str(
        required=False,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={"description": "Purpose"},
    )
    fmt = fields.Nested(ClaimFormatSchema, required=False, data_key="format")
    constraints = fields.Nested(ConstraintsSchema, required=True)
    groups = fields.List(
        fields.Str(validate=NON_EMPTY_STR_VALIDATE, metadata={"example": "A"}),
        required=False,
        data_key="group",
    )
