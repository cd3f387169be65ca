"""The single error raised for anything that is not a valid IMEI.

Length mismatch, non-digit characters and a failed checksum all raise
:class:`InvalidImeiError`. ``reason`` narrows the cause for callers that
care; catching the umbrella type is always enough.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class InvalidReason(StrEnum):
    """Why an input was rejected, in the order checks are applied."""

    LENGTH = "length"
    NON_DIGIT = "non_digit"
    CHECKSUM = "checksum"


_REASON_TEXT: dict[InvalidReason, str] = {
    InvalidReason.LENGTH: "wrong number of characters",
    InvalidReason.NON_DIGIT: "only ASCII digits 0-9 are allowed",
    InvalidReason.CHECKSUM: "checksum does not match",
}


class InvalidImeiError(ValueError):
    """Input is not a valid IMEI.

    Attributes:
        value: The rejected input, exactly as given.
        reason: Which check rejected it.
    """

    def __init__(self, value: Any, reason: InvalidReason) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"invalid IMEI: {_REASON_TEXT[reason]}")

    def __reduce__(self) -> tuple[type[InvalidImeiError], tuple[Any, InvalidReason]]:
        return (type(self), (self.value, self.reason))
