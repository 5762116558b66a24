"""Presentation definition: the verifier's full request."""

import logging

from typing import FrozenSet, Sequence

from marshmallow import EXCLUDE, fields

from ..error import (
    DuplicateInputDescriptorId,
    StructuralValidationError,
    UnreferencedGroup,
)
from ..models.base import BaseModel, BaseModelSchema
from ..valid import NON_EMPTY_STR_EXAMPLE, NON_EMPTY_STR_VALIDATE
from .claim_format import ClaimFormat, ClaimFormatSchema
from .input_descriptor import InputDescriptor, InputDescriptorSchema
from .submission_requirement import (
    SubmissionRequirement,
    SubmissionRequirementSchema,
)

LOGGER = logging.getLogger(__name__)


class PresentationDefinition(BaseModel):
    """https://identity.foundation/presentation-exchange/."""

    class Meta:
        """PresentationDefinition metadata."""

        schema_class = "PresentationDefinitionSchema"
        error_class = StructuralValidationError

    def __init__(
        self,
        *,
        id: str = None,
        name: str = None,
        purpose: str = None,
        fmt: ClaimFormat = None,
        submission_requirements: Sequence[SubmissionRequirement] = None,
        input_descriptors: Sequence[InputDescriptor] = None,
    ):
        """
        Initialize PresentationDefinition.

        Raises:
            DuplicateInputDescriptorId: If two input descriptors share an id
            UnreferencedGroup: If an input descriptor is tagged with a group
                that no submission requirement draws from

        """
        self.id = id
        self.name = name
        self.purpose = purpose
        self.fmt = fmt
        self.submission_requirements = (
            tuple(submission_requirements)
            if submission_requirements is not None
            else None
        )
        self.input_descriptors = (
            tuple(input_descriptors) if input_descriptors is not None else None
        )
        self._check_unique_ids()
        if self.submission_requirements is not None:
            self._check_group_references()

    def _check_unique_ids(self):
        seen = set()
        for descriptor in self.input_descriptors or ():
            if descriptor.id in seen:
                raise DuplicateInputDescriptorId(
                    f"Input descriptor id {descriptor.id} is not unique"
                )
            seen.add(descriptor.id)

    def _check_group_references(self):
        groups = self.all_groups()
        for descriptor in self.input_descriptors or ():
            for group in descriptor.groups or ():
                if group not in groups:
                    raise UnreferencedGroup(
                        f"Input descriptor {descriptor.id} is tagged with group "
                        f"{group} which no submission requirement uses"
                    )

    def all_groups(self) -> FrozenSet[str]:
        """Accessor for the groups drawn from by any submission requirement."""
        groups = set()
        for requirement in self.submission_requirements or ():
            groups |= requirement.all_groups()
        LOGGER.debug("Submission requirements reference groups %s", sorted(groups))
        return frozenset(groups)


class PresentationDefinitionSchema(BaseModelSchema):
    """Single Presentation Definition Schema."""

    class Meta:
        """PresentationDefinitionSchema metadata."""

        model_class = PresentationDefinition
        unknown = EXCLUDE

    id = fields.Str(
        required=True,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={
            "description": "Unique Resource Identifier",
            "example": NON_EMPTY_STR_EXAMPLE,
        },
    )
    name = fields.Str(
        required=False,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={
            "description": (
                "Human-friendly name that describes what the presentation definition"
                " pertains to"
            )
        },
    )
    purpose = fields.Str(
        required=False,
        validate=NON_EMPTY_STR_VALIDATE,
        metadata={
            "description": (
                "Describes the purpose for which the Presentation Definition's inputs"
                " are being requested"
            )
        },
    )
    fmt = fields.Nested(ClaimFormatSchema, required=False, data_key="format")
    input_descriptors = fields.List(
        fields.Nested(InputDescriptorSchema), required=False
    )
    submission_requirements = fields.List(
        fields.Nested(SubmissionRequirementSchema), required=False
    )
