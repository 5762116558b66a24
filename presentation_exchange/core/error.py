"""Common exception classes."""

import re


def _one_line(exc: BaseException) -> str:
    text = str(exc.args[0]).strip() if exc.args else exc.__class__.__name__
    return re.sub(r"\n\s*", ". ", text)


class BaseError(Exception):
    """Generic exception class which other exceptions should inherit from."""

    @property
    def message(self) -> str:
        """Accessor for the error message."""
        return str(self.args[0]).strip() if self.args else ""

    @property
    def roll_up(self) -> str:
        """
        Accessor for this error and its `__cause__` chain as one sentence.

        A schema failure wrapped around a marshmallow error deep inside a
        nested model reads as a single line.
        """
        parts = []
        err = self
        while err is not None:
            parts.append(_one_line(err))
            err = err.__cause__
        return ". ".join(parts) + "."
