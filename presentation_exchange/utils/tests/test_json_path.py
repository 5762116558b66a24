import json

from unittest import TestCase

from jsonpath_ng.jsonpath import JSONPath

from ...error import PathSyntaxError, PresentationExchangeError
from .. import json_path as test_module

STORE = '{"store":{"book":[{"author":"John Smith"},{"author":"Jane Doe"}],"open":false}}'


class TestJsonPath(TestCase):
    def test_is_valid(self):
        assert test_module.is_valid("$")
        assert test_module.is_valid("$.a.b[0]")
        assert test_module.is_valid("$.verifiableCredential[0]")
        assert test_module.is_valid("$.store.book[*].author")
        assert test_module.is_valid("$.credentialSubject.dob")

    def test_is_valid_false(self):
        assert not test_module.is_valid("a.b")
        assert not test_module.is_valid(".a")
        assert not test_module.is_valid("")
        assert not test_module.is_valid("$.a[")
        assert not test_module.is_valid(None)
        assert not test_module.is_valid("$ ")
        assert not test_module.is_valid(" $.a")
        assert not test_module.is_valid("$.a\n")

    def test_to_json_path(self):
        assert isinstance(test_module.to_json_path("$.store.book[*].author"), JSONPath)

    def test_to_json_path_x(self):
        with self.assertRaises(PathSyntaxError) as context:
            test_module.to_json_path("$.a[")
        assert isinstance(context.exception, PresentationExchangeError)
        with self.assertRaises(PathSyntaxError):
            test_module.to_json_path("store.book")
        with self.assertRaises(PathSyntaxError):
            test_module.to_json_path("$.store.book ")

    def test_extract_returns_match_list(self):
        document = '{"store":{"book":[{"author":"X"}]}}'
        assert test_module.extract("$.store.book[*].author", document) == '["X"]'

    def test_extract_multiple_matches(self):
        assert (
            test_module.extract("$.store.book[*].author", STORE)
            == '["John Smith","Jane Doe"]'
        )

    def test_extract_object_and_falsy_values(self):
        assert json.loads(test_module.extract("$.store.book[0]", STORE)) == [
            {"author": "John Smith"}
        ]
        assert test_module.extract("$.store.open", STORE) == "[false]"

    def test_extract_parsed_document(self):
        assert test_module.extract("$.a", {"a": 1}) == "[1]"
        assert test_module.extract("$.a", b'{"a": "b"}') == '["b"]'

    def test_extract_no_match(self):
        assert test_module.extract("$.store.magazine", STORE) is None

    def test_extract_bad_path(self):
        with self.assertRaises(PathSyntaxError):
            test_module.extract("store.book", STORE)

    def test_extract_bad_document(self):
        with self.assertRaises(ValueError):
            test_module.extract("$.a", "{not json")

    def test_to_json_string(self):
        assert test_module.to_json_string({"name": "John", "age": 30}) == (
            '{"name":"John","age":30}'
        )
        assert test_module.to_json_string(["X"]) == '["X"]'
