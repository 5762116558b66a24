"""Constraints property of an input descriptor."""

import logging

from enum import Enum
from typing import Optional, Sequence

from marshmallow import EXCLUDE, ValidationError, fields, post_load

from ..error import StructuralValidationError
from ..models.base import BaseModel, BaseModelSchema
from ..valid import (
    JSON_PATH_EXAMPLE,
    JSON_PATH_VALIDATE,
    LIMIT_DISCLOSURE_EXAMPLE,
    LIMIT_DISCLOSURE_VALIDATE,
    NON_EMPTY_LIST_VALIDATE,
    NON_EMPTY_STR_VALIDATE,
)

LOGGER = logging.getLogger(__name__)


class FieldConstraint(BaseModel):
    """Single item of the fields list of a Constraints object."""

    class Meta:
        """FieldConstraint metadata."""

        schema_class = "FieldConstraintSchema"
        error_class = StructuralValidationError

    def __init__(
        self,
        *,
        paths: Sequence[str] = None,
        id: str = None,
        name: str = None,
        purpose: str = None,
        _filter: dict = None,
        optional: bool = None,
        intent_to_retain: bool = None,
    ):
        """Initialize FieldConstraint."""
        if paths is not None and not paths:
            raise StructuralValidationError("FieldConstraint path must not be empty")
        self.paths = tuple(paths) if paths is not None else None
        self.id = id
        self.name = name
        self.purpose = purpose
        self._filter = _filter
        self.optional = optional
        self.intent_to_retain = intent_to_retain


class FieldConstraintSchema(BaseModelSchema):
    """Single FieldConstraint Schema."""

    class Meta:
        """FieldConstraintSchema metadata."""

        model_class = FieldConstraint
        unknown = EXCLUDE

    paths = fields.List(
        fields.Str(
            validate=JSON_PATH_VALIDATE, metadata={"example": JSON_PATH_EXAMPLE}
        ),
        required=False,
        validate=NON_EMPTY_LIST_VALIDATE,
        data_key="path",
        metadata={"description": "Candidate JSON-Paths, tried in order"},
    )
    id = fields.Str(
        required=False, validate=NON_EMPTY_STR_VALIDATE, metadata={"description": "ID"}
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
    _filter = fields.Dict(
        required=False,
        data_key="filter",
        metadata={"description": "JSON Schema the value at path must satisfy"},
    )
    optional = fields.Bool(required=False, metadata={"description": "Optional"})
    intent_to_retain = fields.Bool(
        required=False, metadata={"description": "Verifier intends to retain value"}
    )


class ConstraintsType(Enum):
    """Tag naming the shape of a Constraints value."""

    FIELDS = "fields"
    LIMIT_DISCLOSURE = "limit_disclosure"
    FIELDS_AND_DISCLOSURE = "fields_and_disclosure"


class Constraints(BaseModel):
    """
    Constraints property of an input descriptor.

    A Constraints value is exactly one of:

    - `Fields`: a non-empty list of field constraints
    - `LimitDisclosure`: one of the two constants `LimitDisclosure.REQUIRED`
      and `LimitDisclosure.PREFERRED`
    - `FieldsAndDisclosure`: both of the above

    Each variant carries its tag as `constraints_type`.
    """

    class Meta:
        """Constraints metadata."""

        schema_class = "ConstraintsSchema"
        error_class = StructuralValidationError

    constraints_type: ConstraintsType = None

    @staticmethod
    def of(
        field_constraints: Sequence[FieldConstraint] = None,
        limit_disclosure: "LimitDisclosure" = None,
    ) -> Optional["Constraints"]:
        """
        Combine optional fields and limit disclosure into a Constraints value.

        An empty list of field constraints counts as no field constraints.

        Args:
            field_constraints: the field constraints, if any
            limit_disclosure: the limit disclosure directive, if any

        Returns:
            The matching variant, or `None` when both inputs are absent

        """
        if field_constraints:
            if limit_disclosure:
                return FieldsAndDisclosure(field_constraints, limit_disclosure)
            return Fields(field_constraints)
        return limit_disclosure

    @staticmethod
    def fields(constraints: "Constraints") -> Sequence[FieldConstraint]:
        """Return the field constraints of any variant, empty if it has none."""
        tag = constraints.constraints_type
        if tag is ConstraintsType.FIELDS:
            return constraints.field_constraints
        if tag is ConstraintsType.FIELDS_AND_DISCLOSURE:
            return constraints.field_constraints
        if tag is ConstraintsType.LIMIT_DISCLOSURE:
            return ()
        raise TypeError(f"Unsupported constraints type: {tag}")

    @staticmethod
    def limit_disclosure(constraints: "Constraints") -> Optional["LimitDisclosure"]:
        """Return the limit disclosure of any variant, `None` if it has none."""
        tag = constraints.constraints_type
        if tag is ConstraintsType.FIELDS:
            return None
        if tag is ConstraintsType.FIELDS_AND_DISCLOSURE:
            return constraints.limit_disclosure
        if tag is ConstraintsType.LIMIT_DISCLOSURE:
            return constraints
        raise TypeError(f"Unsupported constraints type: {tag}")


class Fields(Constraints):
    """Constraints made of field constraints only."""

    constraints_type = ConstraintsType.FIELDS

    def __init__(self, field_constraints: Sequence[FieldConstraint]):
        """Initialize Fields."""
        if not field_constraints:
            raise StructuralValidationError("Field constraints are required")
        self.field_constraints = tuple(field_constraints)


class LimitDisclosure(Constraints):
    """
    Limit disclosure directive.

    Exactly two instances exist, `LimitDisclosure.REQUIRED` and
    `LimitDisclosure.PREFERRED`; obtain them by name or via `from_value`.
    """

    constraints_type = ConstraintsType.LIMIT_DISCLOSURE

    REQUIRED: "LimitDisclosure"
    PREFERRED: "LimitDisclosure"

    def __init__(self, value: str):
        """Initialize LimitDisclosure; only called to create the two constants."""
        self.value = value

    @classmethod
    def from_value(cls, value: str) -> "LimitDisclosure":
        """Return the constant for a wire value."""
        for constant in (cls.REQUIRED, cls.PREFERRED):
            if constant.value == value:
                return constant
        raise StructuralValidationError(f"Invalid limit disclosure value: {value}")

    def __copy__(self):
        """Keep the constant unique under copy."""
        return self

    def __deepcopy__(self, memo):
        """Keep the constant unique under deepcopy."""
        return self

    def __reduce__(self):
        """Keep the constant unique under pickle."""
        return (LimitDisclosure.from_value, (self.value,))


LimitDisclosure.REQUIRED = LimitDisclosure("required")
LimitDisclosure.PREFERRED = LimitDisclosure("preferred")


class FieldsAndDisclosure(Constraints):
    """Constraints made of field constraints and a limit disclosure directive."""

    constraints_type = ConstraintsType.FIELDS_AND_DISCLOSURE

    def __init__(
        self,
        field_constraints: Sequence[FieldConstraint],
        limit_disclosure: LimitDisclosure,
    ):
        """Initialize FieldsAndDisclosure."""
        if not field_constraints:
            raise StructuralValidationError("Field constraints are required")
        self.field_constraints = tuple(field_constraints)
        self.limit_disclosure = limit_disclosure


class ConstraintsSchema(BaseModelSchema):
    """Single Constraints Schema."""

    class Meta:
        """ConstraintsSchema metadata."""

        model_class = Constraints
        unknown = EXCLUDE

    _fields = fields.List(
        fields.Nested(FieldConstraintSchema),
        required=False,
        validate=NON_EMPTY_LIST_VALIDATE,
        data_key="fields",
    )
    limit_disclosure = fields.Str(
        required=False,
        validate=LIMIT_DISCLOSURE_VALIDATE,
        metadata={
            "description": "LimitDisclosure",
            "example": LIMIT_DISCLOSURE_EXAMPLE,
        },
    )

    def get_attribute(self, obj, attr, default):
        """Project the wire members out of whichever variant is dumped."""
        if attr == "_fields":
            return list(Constraints.fields(obj)) or None
        if attr == "limit_disclosure":
            limit_disclosure = Constraints.limit_disclosure(obj)
            return limit_disclosure.value if limit_disclosure else None
        return super().get_attribute(obj, attr, default)

    @post_load
    def make_model(self, data: dict, **kwargs):
        """Build the Constraints variant matching the members present."""
        limit_disclosure = data.get("limit_disclosure")
        constraints = Constraints.of(
            data.get("_fields"),
            LimitDisclosure.from_value(limit_disclosure) if limit_disclosure else None,
        )
        if constraints is None:
            raise ValidationError(
                "Either fields or limit_disclosure needs to be specified "
                "in the constraints"
            )
        LOGGER.debug("Loaded %s constraints", constraints.constraints_type.value)
        return constraints
