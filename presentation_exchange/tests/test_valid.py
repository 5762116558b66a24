from unittest import TestCase

from marshmallow import ValidationError

from ..valid import (
    CLAIM_FORMAT_VALIDATE,
    JSON_PATH_VALIDATE,
    LIMIT_DISCLOSURE_VALIDATE,
    NON_EMPTY_LIST_VALIDATE,
    NON_EMPTY_STR_VALIDATE,
    SUBMISSION_RULE_VALIDATE,
)


class TestValid(TestCase):
    def test_non_empty_str(self):
        NON_EMPTY_STR_VALIDATE("a")
        with self.assertRaises(ValidationError):
            NON_EMPTY_STR_VALIDATE("")

    def test_non_empty_list(self):
        NON_EMPTY_LIST_VALIDATE(["$.a"])
        with self.assertRaises(ValidationError):
            NON_EMPTY_LIST_VALIDATE([])

    def test_json_path(self):
        assert JSON_PATH_VALIDATE("$.verifiableCredential[0]") == (
            "$.verifiableCredential[0]"
        )
        for non_path in ("verifiableCredential[0]", "", "$.a["):
            with self.assertRaises(ValidationError):
                JSON_PATH_VALIDATE(non_path)

    def test_claim_format(self):
        for designation in ("jwt_vc", "ldp_vp", "mso_mdoc"):
            CLAIM_FORMAT_VALIDATE(designation)
        with self.assertRaises(ValidationError):
            CLAIM_FORMAT_VALIDATE("jwt_vc_json")

    def test_limit_disclosure(self):
        LIMIT_DISCLOSURE_VALIDATE("required")
        LIMIT_DISCLOSURE_VALIDATE("preferred")
        with self.assertRaises(ValidationError):
            LIMIT_DISCLOSURE_VALIDATE("REQUIRED")

    def test_submission_rule(self):
        SUBMISSION_RULE_VALIDATE("all")
        SUBMISSION_RULE_VALIDATE("pick")
        with self.assertRaises(ValidationError):
            SUBMISSION_RULE_VALIDATE("any")
