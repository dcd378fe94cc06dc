"""Error types raised by datekit."""

from numbers import Integral
from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """An argument failed validation.

    Covers malformed date strings, out-of-range day/month/year components
    and invalid cycle lengths.

    Attributes:
        message: Human readable reason.
        context: Offending argument(s), e.g. {"work_length": 0}.
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.context:
            return self.message
        ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} [{ctx}]"

    @classmethod
    def for_value(cls, name: str, value: Any, reason: str) -> "InvalidArgumentError":
        return cls(f"Invalid {name}: {reason}", context={name: value})


def check_integer(
    name: str, value: Any, minimum: int, maximum: Optional[int] = None
) -> int:
    """Validate an integral argument (numpy integers included, bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError.for_value(name, value, "expected an integer")
    if value < minimum:
        raise InvalidArgumentError.for_value(name, value, f"must be >= {minimum}")
    if maximum is not None and value > maximum:
        raise InvalidArgumentError.for_value(name, value, f"must be <= {maximum}")
    return int(value)
