"""Resolve model and schema classes named by string in `Meta` declarations."""

from importlib import import_module
from typing import Optional

from ..core.error import BaseError


class ClassNotFoundError(BaseError):
    """Class not found error."""


class ClassLoader:
    """Loader of the classes a model or schema `Meta` refers to by name."""

    @classmethod
    def load_class(cls, class_name: str, default_module: Optional[str] = None) -> type:
        """
        Resolve a class name to the class itself.

        Args:
            class_name: a dotted class path, or a bare name within `default_module`
            default_module: module searched for bare class names

        Returns:
            The resolved class

        Raises:
            ClassNotFoundError: If the module or class cannot be resolved

        """
        mod_path, _, name = class_name.rpartition(".")
        mod_path = mod_path or default_module
        if not mod_path:
            raise ClassNotFoundError(f"No module given for class name: {class_name}")

        try:
            mod = import_module(mod_path)
        except ImportError as err:
            raise ClassNotFoundError(f"Module '{mod_path}' not found") from err

        resolved = getattr(mod, name, None)
        if not isinstance(resolved, type):
            raise ClassNotFoundError(f"No class '{name}' in module {mod_path}")
        return resolved
