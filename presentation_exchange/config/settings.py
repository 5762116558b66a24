"""Decoder and logging settings."""

from typing import Any, Iterator, Mapping, Optional

STREAM_ENCODING = "pres_exch.stream_encoding"
ALLOW_BARE_SUBMISSION = "pres_exch.allow_bare_submission"
LOG_LEVEL = "log.level"
LOG_CONFIG = "log.config"
LOG_FILE = "log.file"
LOG_JSON = "log.json"

DEFAULT_SETTINGS = {
    STREAM_ENCODING: "utf-8",
    ALLOW_BARE_SUBMISSION: True,
}

FALSE_STRINGS = ("false", "False", "0")


class Settings(Mapping[str, Any]):
    """String keyed settings read by the decoder and the logging configurator."""

    def __init__(self, values: Mapping[str, Any] = None):
        """Initialize Settings.

        Args:
            values: Initial settings; keys must be non-empty strings
        """
        self._values = {}
        if values:
            self.update(values)

    @classmethod
    def with_defaults(cls, values: Mapping[str, Any] = None) -> "Settings":
        """Create settings holding the decoder defaults, overridden by `values`."""
        return cls(DEFAULT_SETTINGS).extend(values or {})

    def get_value(self, *var_names: str, default: Optional[Any] = None) -> Any:
        """Fetch the first of `var_names` that is defined, or `default`."""
        for name in var_names:
            if name in self._values:
                return self._values[name]
        return default

    def get_bool(
        self, *var_names: str, default: Optional[bool] = None
    ) -> Optional[bool]:
        """Fetch a setting as a boolean; the strings in FALSE_STRINGS are false."""
        value = self.get_value(*var_names, default=default)
        if value is None:
            return None
        return bool(value) and value not in FALSE_STRINGS

    def get_str(self, *var_names: str, default: Optional[str] = None) -> Optional[str]:
        """Fetch a setting as a string."""
        value = self.get_value(*var_names, default=default)
        return None if value is None else str(value)

    def set_value(self, var_name: str, value: Any):
        """Store a setting.

        Raises:
            TypeError: If the setting name is not a string
            ValueError: If the setting name is empty
        """
        if not isinstance(var_name, str):
            raise TypeError("Setting name must be a string")
        if not var_name:
            raise ValueError("Setting name must be non-empty")
        self._values[var_name] = value

    def update(self, other: Mapping[str, Any]):
        """Store every setting of `other` in place."""
        for key, value in other.items():
            self.set_value(key, value)

    def extend(self, other: Mapping[str, Any]) -> "Settings":
        """Produce new settings holding these values overridden by `other`."""
        extended = Settings(self._values)
        extended.update(other)
        return extended

    def __getitem__(self, var_name: str) -> Any:
        """Fetch a defined setting by name."""
        if not isinstance(var_name, str):
            raise TypeError(f"Setting name {var_name!r} must be a string")
        if var_name not in self._values:
            raise KeyError(f"Undefined setting: {var_name}")
        return self._values[var_name]

    def __iter__(self) -> Iterator[str]:
        """Iterate setting names."""
        return iter(self._values)

    def __len__(self) -> int:
        """Count the defined settings."""
        return len(self._values)

    def __repr__(self) -> str:
        """Provide a human readable representation of these settings."""
        return f"<Settings({self._values!r})>"
