"""Presentation Exchange error classes."""

from .models.base import BaseModelError


class PresentationExchangeError(BaseModelError):
    """Base class for Presentation Exchange related errors."""


class StructuralValidationError(PresentationExchangeError):
    """Raw data does not have the shape the model's schema requires."""


class InvariantViolation(PresentationExchangeError):
    """A constructed model breaks one of its cross-field invariants."""


class DuplicateInputDescriptorId(InvariantViolation):
    """Two input descriptors of one presentation definition share an id."""


class UnreferencedGroup(InvariantViolation):
    """An input descriptor is tagged with a group no submission requirement uses."""


class FromFromNestedConflict(InvariantViolation):
    """A submission requirement carries both `from` and `from_nested`."""


class FromFromNestedMissing(InvariantViolation):
    """A submission requirement carries neither `from` nor `from_nested`."""


class InvalidPickRule(InvariantViolation):
    """The count, min and max of a pick rule are inconsistent."""


class PathSyntaxError(PresentationExchangeError):
    """Malformed JSON-Path expression."""


class InvalidJsonPath(PathSyntaxError):
    """A descriptor map path is not a JSON-Path."""


class ExtractionMiss(PresentationExchangeError):
    """An embed location does not hold an object where its selector points."""
