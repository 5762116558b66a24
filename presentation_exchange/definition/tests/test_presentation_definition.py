import json

from unittest import TestCase

from ...error import (
    DuplicateInputDescriptorId,
    InvariantViolation,
    StructuralValidationError,
    UnreferencedGroup,
)
from ..constraints import LimitDisclosure
from ..input_descriptor import InputDescriptor
from ..presentation_definition import PresentationDefinition
from ..submission_requirement import FromGroup, Rule, SubmissionRequirement

PRES_DEFINITION = """
    {
        "id": "32f54163-7166-48f1-93d8-ff217bdb0653",
        "name": "Citizenship check",
        "purpose": "We need to know your citizenship",
        "format": {
            "ldp_vp": {
                "proof_type": ["Ed25519Signature2018"]
            }
        },
        "submission_requirements": [
            {
                "name": "Citizenship Information",
                "rule": "pick",
                "count": 1,
                "from_nested": [
                    {
                        "name": "United States Citizenship Proofs",
                        "rule": "all",
                        "from": "A"
                    },
                    {
                        "name": "European Union Citizenship Proofs",
                        "rule": "pick",
                        "min": 1,
                        "max": 2,
                        "from": "B"
                    }
                ]
            }
        ],
        "input_descriptors": [
            {
                "id": "citizenship_input_1",
                "name": "US Passport",
                "group": ["A"],
                "constraints": {
                    "fields": [
                        {
                            "path": ["$.credentialSubject.birth_date"],
                            "filter": {
                                "type": "string",
                                "format": "date"
                            }
                        }
                    ]
                }
            },
            {
                "id": "citizenship_input_2",
                "name": "EU Driver's License",
                "group": ["B"],
                "constraints": {
                    "limit_disclosure": "preferred"
                }
            }
        ]
    }
"""


def descriptor(id, groups=None):
    return InputDescriptor(
        id=id, constraints=LimitDisclosure.REQUIRED, groups=groups
    )


class TestPresentationDefinition(TestCase):
    def test_round_trip(self):
        expected_result = json.loads(PRES_DEFINITION)
        actual_result = PresentationDefinition.deserialize(PRES_DEFINITION).serialize()
        assert expected_result == actual_result

    def test_all_groups(self):
        definition = PresentationDefinition.deserialize(PRES_DEFINITION)
        assert definition.all_groups() == {"A", "B"}
        assert len(definition.input_descriptors) == 2

    def test_minimal(self):
        definition = PresentationDefinition.deserialize({"id": "pd"})
        assert definition.input_descriptors is None
        assert definition.serialize() == {"id": "pd"}

    def test_duplicate_ids_x(self):
        with self.assertRaises(DuplicateInputDescriptorId):
            PresentationDefinition(
                id="pd", input_descriptors=[descriptor("d1"), descriptor("d1")]
            )

        pres_definition = json.loads(PRES_DEFINITION)
        pres_definition["input_descriptors"][1]["id"] = "citizenship_input_1"
        with self.assertRaises(DuplicateInputDescriptorId):
            PresentationDefinition.deserialize(pres_definition)

    def test_unreferenced_group_x(self):
        with self.assertRaises(UnreferencedGroup):
            PresentationDefinition(
                id="pd",
                input_descriptors=[descriptor("d1", ["g"])],
                submission_requirements=[
                    SubmissionRequirement(rule=Rule.ALL, _from=FromGroup("h"))
                ],
            )

        pres_definition = json.loads(PRES_DEFINITION)
        pres_definition["input_descriptors"][1]["group"] = ["C"]
        with self.assertRaises(InvariantViolation):
            PresentationDefinition.deserialize(pres_definition)

    def test_groups_unchecked_without_requirements(self):
        definition = PresentationDefinition(
            id="pd", input_descriptors=[descriptor("d1", ["g"])]
        )
        assert definition.all_groups() == frozenset()

    def test_structural_x(self):
        with self.assertRaises(StructuralValidationError):
            PresentationDefinition.deserialize({"name": "no id"})
        with self.assertRaises(StructuralValidationError):
            PresentationDefinition.deserialize(
                {"id": "pd", "input_descriptors": [{"id": "d1"}]}
            )

    def test_malformed_json_text_x(self):
        with self.assertRaises(StructuralValidationError) as context:
            PresentationDefinition.deserialize("{bad")
        assert isinstance(context.exception.__cause__, json.JSONDecodeError)
