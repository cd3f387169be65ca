"""IMEI checksum validation.

An IMEI is 15 ASCII digits. Reading left to right, every digit in an even
1-based position is doubled (and folded back into 0-9 by subtracting 9);
the sum of all digits must be divisible by 10.

INVARIANT: ``valid(t) == (diagnose(t) is None)`` for every input.
"""

from __future__ import annotations

from typing import Any

from imei.domain.errors import InvalidImeiError, InvalidReason

IMEI_LENGTH = 15
BODY_LENGTH = IMEI_LENGTH - 1
IMEI_PATTERN = r"^[0-9]{15}$"
IMEI_EXAMPLE = "522872587498800"

_ZERO = ord("0")


def _weighted_sum(digits: str) -> int | None:
    """Luhn-weighted digit sum, or None at the first non-ASCII-digit character."""
    total = 0
    for i, char in enumerate(digits):
        n = ord(char) - _ZERO
        if not 0 <= n <= 9:
            return None
        if (i + 1) % 2 == 0:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total


def valid(imei: Any) -> bool:
    """Return True if *imei* is a 15-digit string with a correct checksum."""
    if not isinstance(imei, str) or len(imei) != IMEI_LENGTH:
        return False
    total = _weighted_sum(imei)
    return total is not None and total % 10 == 0


def diagnose(imei: Any) -> InvalidReason | None:
    """Return the first reason *imei* is rejected, or None if it is valid.

    Checks run in the same order as :func:`valid`: length, then characters,
    then the checksum. Non-string input is reported as ``NON_DIGIT``.
    """
    if not isinstance(imei, str):
        return InvalidReason.NON_DIGIT
    if len(imei) != IMEI_LENGTH:
        return InvalidReason.LENGTH
    total = _weighted_sum(imei)
    if total is None:
        return InvalidReason.NON_DIGIT
    if total % 10 != 0:
        return InvalidReason.CHECKSUM
    return None


def check_digit(body: str) -> str:
    """Return the digit that completes a 14-digit *body* into a valid IMEI.

    Raises:
        InvalidImeiError: *body* is not exactly 14 ASCII digits.
    """
    if not isinstance(body, str):
        raise InvalidImeiError(body, InvalidReason.NON_DIGIT)
    if len(body) != BODY_LENGTH:
        raise InvalidImeiError(body, InvalidReason.LENGTH)
    total = _weighted_sum(body)
    if total is None:
        raise InvalidImeiError(body, InvalidReason.NON_DIGIT)
    # The check digit sits at an odd position, so it is never doubled.
    return str((10 - total % 10) % 10)
