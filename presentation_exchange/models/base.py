"""Model and schema base classes shared by definitions and submissions."""

import json
import logging

from abc import ABC
from typing import Optional, Type, TypeVar, Union, overload
from typing_extensions import Literal

from marshmallow import EXCLUDE, Schema, ValidationError, post_dump, post_load

from ..core.error import BaseError
from ..utils.classloader import ClassLoader

LOGGER = logging.getLogger(__name__)


def resolve_class(the_cls, relative_cls: Optional[type] = None) -> type:
    """
    Resolve a class, or the name of one declared beside `relative_cls`.

    Raises:
        ClassNotFoundError: If a named class could not be loaded
        TypeError: If `the_cls` is neither a class nor a name

    """
    if isinstance(the_cls, type):
        return the_cls
    if isinstance(the_cls, str):
        return ClassLoader.load_class(the_cls, relative_cls and relative_cls.__module__)
    raise TypeError(f"Cannot resolve a class from {type(the_cls).__name__}")


def resolve_meta_property(obj, prop_name: str, defval=None):
    """Look up `prop_name` on the nearest `Meta` along the primary base chain."""
    cls = obj if isinstance(obj, type) else type(obj)
    while cls is not object:
        meta = getattr(cls, "Meta", None)
        if meta is not None and hasattr(meta, prop_name):
            return getattr(meta, prop_name)
        cls = cls.__bases__[0]
    return defval


class BaseModelError(BaseError):
    """Model (de)serialization failed schema validation."""


ModelType = TypeVar("ModelType", bound="BaseModel")


class BaseModel(ABC):
    """
    Model whose wire form is described by a paired `BaseModelSchema`.

    `Meta.schema_class` names the schema and `Meta.error_class` the error
    raised when the wire form does not match it.
    """

    class Meta:
        """BaseModel metadata."""

        schema_class = None
        error_class = BaseModelError

    def __init__(self):
        """Initialize BaseModel."""
        if not self.Meta.schema_class:
            raise TypeError(
                f"Can't instantiate {self.__class__.__name__} with no schema_class"
            )

    @classmethod
    def _get_schema_class(cls) -> Type["BaseModelSchema"]:
        resolved = resolve_class(cls.Meta.schema_class, cls)
        if not issubclass(resolved, BaseModelSchema):
            raise TypeError(f"{resolved} is not a BaseModelSchema")
        return resolved

    @classmethod
    def _get_error_class(cls) -> Type[BaseModelError]:
        return resolve_meta_property(cls, "error_class", BaseModelError)

    @classmethod
    def _make_schema(cls, unknown: Optional[str] = None) -> "BaseModelSchema":
        schema_cls = cls._get_schema_class()
        return schema_cls(
            unknown=unknown or resolve_meta_property(schema_cls, "unknown", EXCLUDE)
        )

    @classmethod
    def deserialize(
        cls: Type[ModelType],
        obj: Union[str, bytes, dict],
        *,
        unknown: Optional[str] = None,
    ) -> ModelType:
        """
        Load a model instance from its wire form.

        Malformed JSON text and schema mismatches are raised as the model's
        `Meta.error_class`. Errors raised by model constructors or schema
        hooks that are not marshmallow validation errors propagate unchanged.

        Args:
            obj: The dict, or JSON text, to load
            unknown: Behaviour for unknown attributes

        """
        if isinstance(obj, (str, bytes)):
            try:
                obj = json.loads(obj)
            except ValueError as err:
                LOGGER.exception(f"{cls.__name__} JSON parse error:")
                raise cls._get_error_class()(
                    f"{cls.__name__} JSON parsing failed"
                ) from err

        try:
            return cls._make_schema(unknown).load(obj)
        except (AttributeError, ValidationError) as err:
            LOGGER.exception(f"{cls.__name__} schema validation error:")
            raise cls._get_error_class()(
                f"{cls.__name__} schema validation failed"
            ) from err

    @overload
    def serialize(self, *, as_string: Literal[True], unknown: str = None) -> str:
        ...

    @overload
    def serialize(self, *, unknown: str = None) -> dict:
        ...

    def serialize(
        self, *, as_string: bool = False, unknown: Optional[str] = None
    ) -> Union[str, dict]:
        """
        Dump this model to its wire form.

        Args:
            as_string: Return compact JSON text instead of a dict
            unknown: Behaviour for unknown attributes

        """
        schema = self._make_schema(unknown)
        try:
            if as_string:
                return schema.dumps(self, separators=(",", ":"))
            return schema.dump(self)
        except (AttributeError, ValidationError) as err:
            LOGGER.exception(f"{self.__class__.__name__} serialization error:")
            raise self._get_error_class()(
                f"{self.__class__.__name__} schema validation failed"
            ) from err

    @classmethod
    def from_json(
        cls: Type[ModelType], json_repr: Union[str, bytes], unknown: str = None
    ) -> ModelType:
        """Load a model instance from JSON text."""
        return cls.deserialize(json_repr, unknown=unknown)

    def to_json(self, unknown: str = None) -> str:
        """Dump this model as JSON text."""
        return json.dumps(self.serialize(unknown=unknown))

    def __repr__(self) -> str:
        """Show the model's attributes."""
        items = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"<{self.__class__.__name__}({items})>"


class BaseModelSchema(Schema):
    """
    Schema paired with a `BaseModel`.

    Loading builds the `Meta.model_class` instance; dumping leaves out the
    members whose value is in `Meta.skip_values`.
    """

    class Meta:
        """BaseModelSchema metadata."""

        model_class = None
        skip_values = [None]
        ordered = True

    def __init__(self, *args, **kwargs):
        """Initialize BaseModelSchema."""
        super().__init__(*args, **kwargs)
        if not self.Meta.model_class:
            raise TypeError(
                f"Can't instantiate {self.__class__.__name__} with no model_class"
            )

    @property
    def Model(self) -> type:
        """Accessor for the schema's model class."""
        return resolve_class(self.Meta.model_class, self.__class__)

    @post_load
    def make_model(self, data: dict, **kwargs):
        """Build the model instance from the loaded data."""
        return self.Model(**data)

    @post_dump
    def remove_skipped_values(self, data, **kwargs):
        """Drop members holding a skipped value."""
        skip_vals = resolve_meta_property(self, "skip_values", [])
        return {key: value for key, value in data.items() if value not in skip_vals}
