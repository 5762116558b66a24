import json

from unittest import TestCase

from ...error import InvalidJsonPath, PathSyntaxError, StructuralValidationError
from ..descriptor_map import DescriptorMap

DESCRIPTOR_MAP = """
    {
        "id": "banking_input_2",
        "format": "jwt_vp",
        "path": "$.outerClaim[0]",
        "path_nested": {
            "id": "banking_input_2",
            "format": "ldp_vc",
            "path": "$.innerClaim[1]",
            "path_nested": {
                "id": "banking_input_2",
                "format": "jwt_vc",
                "path": "$.mostInnerClaim[2]"
            }
        }
    }
"""


class TestDescriptorMap(TestCase):
    def test_round_trip(self):
        expected_result = json.loads(DESCRIPTOR_MAP)
        descriptor_map = DescriptorMap.deserialize(DESCRIPTOR_MAP)
        assert descriptor_map.path_nested.path_nested.fmt == "jwt_vc"
        assert descriptor_map.path_nested.path_nested.path_nested is None
        assert descriptor_map.serialize() == expected_result

    def test_invalid_path_x(self):
        with self.assertRaises(InvalidJsonPath):
            DescriptorMap.deserialize(
                {"id": "d1", "format": "ldp_vc", "path": "outerClaim[0]"}
            )

    def test_invalid_nested_path_x(self):
        with self.assertRaises(PathSyntaxError):
            DescriptorMap.deserialize(
                {
                    "id": "d1",
                    "format": "ldp_vc",
                    "path": "$",
                    "path_nested": {"id": "d1", "format": "ldp_vc", "path": "def456"},
                }
            )

    def test_missing_member_x(self):
        for missing in ("id", "format", "path"):
            descriptor_map = {"id": "d1", "format": "ldp_vc", "path": "$.a"}
            del descriptor_map[missing]
            with self.assertRaises(StructuralValidationError):
                DescriptorMap.deserialize(descriptor_map)
