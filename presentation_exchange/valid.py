"""Validators for schema fields."""

from marshmallow.exceptions import ValidationError
from marshmallow.validate import Length, OneOf, Validator

from .utils import json_path


class NonEmptyString(Length):
    """Validate value as a string holding at least one character."""

    EXAMPLE = "citizenship_input_1"

    def __init__(self):
        """Initializer."""

        super().__init__(min=1, error="Value must be a non-empty string")


class NonEmptyList(Length):
    """Validate value as a list holding at least one item."""

    def __init__(self):
        """Initializer."""

        super().__init__(min=1, error="List must contain at least one item")


class JsonPath(Validator):
    """Validate value as a JSON-Path rooted at `$`."""

    EXAMPLE = "$.verifiableCredential[0]"

    def __call__(self, value):
        """Validate input value."""

        if not json_path.is_valid(value):
            raise ValidationError(f"Value {value} is not a JSON-Path")

        return value


class ClaimFormatDesignation(OneOf):
    """Validate value against the registered claim format designations."""

    EXAMPLE = "ldp_vc"
    CHOICES = (
        "jwt",
        "jwt_vc",
        "jwt_vp",
        "ldp",
        "ldp_vc",
        "ldp_vp",
        "ac_vc",
        "ac_vp",
        "mso_mdoc",
    )

    def __init__(self):
        """Initializer."""

        super().__init__(
            choices=ClaimFormatDesignation.CHOICES,
            error="Value {input} must be one of {choices}",
        )


class LimitDisclosureDirective(OneOf):
    """Validate value against limit disclosure directives."""

    EXAMPLE = "required"

    def __init__(self):
        """Initializer."""

        super().__init__(
            choices=["required", "preferred"],
            error="Value {input} must be one of {choices}",
        )


class SubmissionRule(OneOf):
    """Validate value against submission requirement rules."""

    EXAMPLE = "pick"

    def __init__(self):
        """Initializer."""

        super().__init__(
            choices=["all", "pick"], error="Value {input} must be one of {choices}"
        )


NON_EMPTY_STR_VALIDATE = NonEmptyString()
NON_EMPTY_STR_EXAMPLE = NonEmptyString.EXAMPLE

NON_EMPTY_LIST_VALIDATE = NonEmptyList()

JSON_PATH_VALIDATE = JsonPath()
JSON_PATH_EXAMPLE = JsonPath.EXAMPLE

CLAIM_FORMAT_VALIDATE = ClaimFormatDesignation()
CLAIM_FORMAT_EXAMPLE = ClaimFormatDesignation.EXAMPLE

LIMIT_DISCLOSURE_VALIDATE = LimitDisclosureDirective()
LIMIT_DISCLOSURE_EXAMPLE = LimitDisclosureDirective.EXAMPLE

SUBMISSION_RULE_VALIDATE = SubmissionRule()
SUBMISSION_RULE_EXAMPLE = SubmissionRule.EXAMPLE
