from unittest import TestCase

from ...core.error import BaseError
from ...definition.constraints import ConstraintsSchema
from ..classloader import ClassLoader, ClassNotFoundError


class TestClassLoader(TestCase):
    def test_load_class(self):
        assert (
            ClassLoader.load_class(
                "presentation_exchange.definition.constraints.ConstraintsSchema"
            )
            is ConstraintsSchema
        )
        assert (
            ClassLoader.load_class(
                "ConstraintsSchema", "presentation_exchange.definition.constraints"
            )
            is ConstraintsSchema
        )

    def test_load_class_errors(self):
        with self.assertRaises(ClassNotFoundError):
            ClassLoader.load_class("ConstraintsSchema")
        with self.assertRaises(ClassNotFoundError):
            ClassLoader.load_class("presentation_exchange.not_a_module.Missing")
        with self.assertRaises(ClassNotFoundError):
            ClassLoader.load_class(
                "Missing", "presentation_exchange.definition.constraints"
            )
        with self.assertRaises(ClassNotFoundError):
            # module-level logger is not a class
            ClassLoader.load_class(
                "LOGGER", "presentation_exchange.definition.constraints"
            )

    def test_class_not_found_is_base_error(self):
        err = ClassNotFoundError("No class 'Missing'")
        assert isinstance(err, BaseError)
        assert err.message == "No class 'Missing'"
