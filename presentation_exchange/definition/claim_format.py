"""Claim format designations accepted by a verifier."""

from typing import Mapping

from marshmallow import EXCLUDE, RAISE, Schema, fields, pre_load

from ..error import StructuralValidationError
from ..models.base import BaseModel, BaseModelSchema
from ..valid import (
    CLAIM_FORMAT_VALIDATE,
    NON_EMPTY_LIST_VALIDATE,
    NON_EMPTY_STR_VALIDATE,
)


class ClaimFormatSupportSchema(Schema):
    """Algorithms or proof types supported for one claim format designation."""

    class Meta:
        """ClaimFormatSupportSchema metadata."""

        unknown = EXCLUDE

    alg = fields.List(
        fields.Str(validate=NON_EMPTY_STR_VALIDATE),
        required=False,
        validate=NON_EMPTY_LIST_VALIDATE,
        metadata={"description": "Supported algorithms", "example": ["EdDSA"]},
    )
    proof_type = fields.List(
        fields.Str(validate=NON_EMPTY_STR_VALIDATE),
        required=False,
        validate=NON_EMPTY_LIST_VALIDATE,
        metadata={
            "description": "Supported proof types",
            "example": ["Ed25519Signature2018"],
        },
    )


class ClaimFormat(BaseModel):
    """Claim formats, keyed by designation, that a verifier can process."""

    class Meta:
        """ClaimFormat metadata."""

        schema_class = "ClaimFormatSchema"
        error_class = StructuralValidationError

    def __init__(
        self,
        *,
        jwt: Mapping = None,
        jwt_vc: Mapping = None,
        jwt_vp: Mapping = None,
        ldp: Mapping = None,
        ldp_vc: Mapping = None,
        ldp_vp: Mapping = None,
        ac_vc: Mapping = None,
        ac_vp: Mapping = None,
        mso_mdoc: Mapping = None,
    ):
        """Initialize format."""
        self.jwt = jwt
        self.jwt_vc = jwt_vc
        self.jwt_vp = jwt_vp
        self.ldp = ldp
        self.ldp_vc = ldp_vc
        self.ldp_vp = ldp_vp
        self.ac_vc = ac_vc
        self.ac_vp = ac_vp
        self.mso_mdoc = mso_mdoc

    @property
    def designations(self) -> Mapping[str, Mapping]:
        """Accessor for the designations that are present, with their support."""
        return {key: value for key, value in vars(self).items() if value is not None}


class ClaimFormatSchema(BaseModelSchema):
    """Single ClaimFormat Schema."""

    class Meta:
        """ClaimFormatSchema metadata."""

        model_class = ClaimFormat
        unknown = RAISE

    jwt = fields.Nested(ClaimFormatSupportSchema, required=False)
    jwt_vc = fields.Nested(ClaimFormatSupportSchema, required=False)
    jwt_vp = fields.Nested(ClaimFormatSupportSchema, required=False)
    ldp = fields.Nested(ClaimFormatSupportSchema, required=False)
    ldp_vc = fields.Nested(ClaimFormatSupportSchema, required=False)
    ldp_vp = fields.Nested(ClaimFormatSupportSchema, required=False)
    ac_vc = fields.Nested(ClaimFormatSupportSchema, required=False)
    ac_vp = fields.Nested(ClaimFormatSupportSchema, required=False)
    mso_mdoc = fields.Nested(ClaimFormatSupportSchema, required=False)

    @pre_load
    def check_designations(self, data, **kwargs):
        """Reject designations outside the registered set."""
        if isinstance(data, dict):
            for designation in data:
                CLAIM_FORMAT_VALIDATE(designation)
        return data
