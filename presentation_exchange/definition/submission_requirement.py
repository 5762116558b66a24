"""Submission requirements: which input descriptors a submission must satisfy."""

import logging

from enum import Enum
from typing import FrozenSet, Sequence

from marshmallow import EXCLUDE, fields, post_load, pre_load

from ..error import (
    FromFromNestedConflict,
    FromFromNestedMissing,
    InvalidPickRule,
    StructuralValidationError,
)
from ..models.base import BaseModel, BaseModelSchema
from ..valid import (
    NON_EMPTY_LIST_VALIDATE,
    NON_EMPTY_STR_VALIDATE,
    SUBMISSION_RULE_EXAMPLE,
    SUBMISSION_RULE_VALIDATE,
)

LOGGER = logging.getLogger(__name__)


class RuleType(Enum):
    """Wire value of the rule member of a submission requirement."""

    ALL = "all"
    PICK = "pick"


class Rule:
    """
    Selection rule of a submission requirement.

    A rule is either the constant `Rule.ALL` or a `Pick` carrying its
    cardinality; each carries its tag as `rule_type`.
    """

    rule_type: RuleType = None

    ALL: "All"

    @staticmethod
    def of(
        rule_type: RuleType,
        count: int = None,
        minimum: int = None,
        maximum: int = None,
    ) -> "Rule":
        """
        Build the rule named by a tag.

        Cardinality arguments are ignored for `RuleType.ALL`.

        Raises:
            InvalidPickRule: If the cardinality of a pick rule is inconsistent
            TypeError: On an unknown rule type

        """
        if rule_type is RuleType.ALL:
            return Rule.ALL
        if rule_type is RuleType.PICK:
            return Pick(count, minimum, maximum)
        raise TypeError(f"Unsupported rule type: {rule_type}")


class All(Rule):
    """Every input descriptor of the source must be satisfied."""

    rule_type = RuleType.ALL

    def __copy__(self):
        """Keep the constant unique under copy."""
        return self

    def __deepcopy__(self, memo):
        """Keep the constant unique under deepcopy."""
        return self

    def __reduce__(self):
        """Keep the constant unique under pickle."""
        return (Rule.of, (RuleType.ALL,))

    def __repr__(self) -> str:
        """Return a human readable representation of this rule."""
        return "<All()>"


Rule.ALL = All()


def _check_cardinal(name: str, value) -> None:
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise InvalidPickRule(f"Pick {name} must be an integer, got {value!r}")


class Pick(Rule):
    """A number of input descriptors of the source must be satisfied."""

    rule_type = RuleType.PICK

    def __init__(self, count: int = None, minimum: int = None, maximum: int = None):
        """
        Initialize Pick.

        Absent members are `None`; zero is a present value.

        Args:
            count: exact number of descriptors to satisfy, greater than zero
            minimum: lower bound, zero or more
            maximum: upper bound, zero or more and not below `minimum`

        Raises:
            InvalidPickRule: If the members are inconsistent

        """
        _check_cardinal("count", count)
        _check_cardinal("min", minimum)
        _check_cardinal("max", maximum)
        if count is not None and count <= 0:
            raise InvalidPickRule("Count must be greater than zero")
        if minimum is not None and minimum < 0:
            raise InvalidPickRule("Min must be greater than or equal to zero")
        if maximum is not None and maximum < 0:
            raise InvalidPickRule("Max must be greater than or equal to zero")
        if minimum is not None and maximum is not None and maximum < minimum:
            raise InvalidPickRule("Max must be greater than or equal to Min")
        self.count = count
        self.minimum = minimum
        self.maximum = maximum

    def __eq__(self, other) -> bool:
        """Compare picks by cardinality."""
        if type(other) is not type(self):
            return NotImplemented
        return (self.count, self.minimum, self.maximum) == (
            other.count,
            other.minimum,
            other.maximum,
        )

    def __hash__(self) -> int:
        """Hash by cardinality."""
        return hash((self.count, self.minimum, self.maximum))

    def __repr__(self) -> str:
        """Return a human readable representation of this rule."""
        return "<Pick(count={}, min={}, max={})>".format(
            self.count, self.minimum, self.maximum
        )


class FromType(Enum):
    """Wire key naming the source of a submission requirement."""

    GROUP = "from"
    NESTED = "from_nested"


class From:
    """Source of a submission requirement: a group, or nested requirements."""

    from_type: FromType = None


class FromGroup(From):
    """Input descriptors tagged with a group."""

    from_type = FromType.GROUP

    def __init__(self, group: str):
        """Initialize FromGroup."""
        if not isinstance(group, str) or not group:
            raise StructuralValidationError("Group must be a non-empty string")
        self.group = group

    def __eq__(self, other) -> bool:
        """Compare by group."""
        if type(other) is not type(self):
            return NotImplemented
        return self.group == other.group

    def __hash__(self) -> int:
        """Hash by group."""
        return hash(self.group)

    def __repr__(self) -> str:
        """Return a human readable representation of this source."""
        return f"<FromGroup(group={self.group!r})>"


class FromNested(From):
    """Nested submission requirements."""

    from_type = FromType.NESTED

    def __init__(self, nested: Sequence["SubmissionRequirement"]):
        """Initialize FromNested."""
        if not nested:
            raise StructuralValidationError("Nested submission requirements required")
        self.nested = tuple(nested)

    def __repr__(self) -> str:
        """Return a human readable representation of this source."""
        return f"<FromNested(nested={list(self.nested)!r})>"


class SubmissionRequirement(BaseModel):
    """Submission requirement of a presentation definition."""

    class Meta:
        """SubmissionRequirement metadata."""

        schema_class = "SubmissionRequirementSchema"
        error_class = StructuralValidationError

    def __init__(
        self,
        *,
        rule: Rule = None,
        _from: From = None,
        name: str = None,
        purpose: str = None,
    ):
        """Initialize SubmissionRequirement."""
        if not isinstance(rule, Rule):
            raise StructuralValidationError("Submission requirement needs a rule")
        if not isinstance(_from, From):
            raise FromFromNestedMissing(
                "Submission requirement needs from or from_nested"
            )
        self.rule = rule
        self._from = _from
        self.name = name
        self.purpose = purpose

    def all_groups(self) -> FrozenSet[str]:
        """
        Collect every group this requirement draws from, at any nesting depth.

        Returns:
            The flat set of group labels

        """
        groups = set()
        pending = [self]
        while pending:
            requirement = pending.pop()
            source = requirement._from
            if source.from_type is FromType.GROUP:
                groups.add(source.group)
            elif source.from_type is FromType.NESTED:
                pending.extend(source.nested)
            else:
                raise TypeError(f"Unsupported from type: {source.from_type}")
        return frozenset(groups)


class SubmissionRequirementSchema(BaseModelSchema):
    """Single SubmissionRequirement Schema."""

    class Meta:
        """SubmissionRequirementSchema metadata."""

        model_class = SubmissionRequirement
        unknown = EXCLUDE

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
    rule = fields.Str(
        required=True,
        validate=SUBMISSION_RULE_VALIDATE,
        metadata={"description": "Selection", "example": SUBMISSION_RULE_EXAMPLE},
    )
    count = fields.Int(
        strict=True,
        required=False,
        metadata={"description": "Count Value", "example": 1234},
    )
    minimum = fields.Int(
        strict=True,
        required=False,
        data_key="min",
        metadata={"description": "Min Value", "example": 1234},
    )
    maximum = fields.Int(
        strict=True,
        required=False,
        data_key="max",
        metadata={"description": "Max Value", "example": 1234},
    )
    _from = fields.Str(
        required=False,
        validate=NON_EMPTY_STR_VALIDATE,
        data_key="from",
        metadata={"description": "From group"},
    )
    from_nested = fields.List(
        fields.Nested(lambda: SubmissionRequirementSchema()),
        required=False,
        validate=NON_EMPTY_LIST_VALIDATE,
    )

    @pre_load
    def check_from(self, data, **kwargs):
        """Require exactly one of from and from_nested."""
        if isinstance(data, dict):
            if "from" in data and "from_nested" in data:
                raise FromFromNestedConflict(
                    "Both from and from_nested cannot be specified "
                    "in the submission requirement"
                )
            if "from" not in data and "from_nested" not in data:
                raise FromFromNestedMissing(
                    "Either from or from_nested needs to be specified "
                    "in the submission requirement"
                )
        return data

    def get_attribute(self, obj, attr, default):
        """Flatten the rule and the source into the requirement's members."""
        if attr == "rule":
            return obj.rule.rule_type.value
        if attr in ("count", "minimum", "maximum"):
            return getattr(obj.rule, attr, None)
        if attr == "_from":
            return obj._from.group if obj._from.from_type is FromType.GROUP else None
        if attr == "from_nested":
            if obj._from.from_type is FromType.NESTED:
                return list(obj._from.nested)
            return None
        return super().get_attribute(obj, attr, default)

    @post_load
    def make_model(self, data: dict, **kwargs):
        """Build the requirement from its rule and source members."""
        rule_type = RuleType(data.pop("rule"))
        count = data.pop("count", None)
        minimum = data.pop("minimum", None)
        maximum = data.pop("maximum", None)
        if rule_type is RuleType.ALL and (
            count is not None or minimum is not None or maximum is not None
        ):
            LOGGER.debug("Ignoring pick cardinality on an 'all' rule")
        rule = Rule.of(rule_type, count, minimum, maximum)

        if "_from" in data:
            source = FromGroup(data.pop("_from"))
        else:
            source = FromNested(data.pop("from_nested"))
        return SubmissionRequirement(rule=rule, _from=source, **data)
