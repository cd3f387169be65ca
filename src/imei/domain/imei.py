"""The validated IMEI value type.

INVARIANT: every ``Imei`` instance holds text that passed
:func:`imei.domain.checksum.valid`. Validation runs in ``__post_init__``,
so direct construction, :meth:`Imei.try_new`, ``dataclasses.replace``,
unpickling and the pydantic adapter all go through the same check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from imei.domain.checksum import diagnose
from imei.domain.errors import InvalidImeiError


def validate(text: str) -> None:
    """Raise :class:`InvalidImeiError` unless *text* is a valid IMEI.

    Use this to check input without building an :class:`Imei`.
    """
    reason = diagnose(text)
    if reason is not None:
        raise InvalidImeiError(text, reason)


@final
@dataclass(frozen=True, slots=True, order=True)
class Imei:
    """A 15-digit IMEI known to have a correct checksum.

    Equality, ordering and hashing follow the wrapped text. The text is
    held exactly as given: no trimming or other normalization.
    """

    value: str

    def __post_init__(self) -> None:
        validate(self.value)

    @classmethod
    def try_new(cls, text: str) -> Imei:
        """Build an ``Imei`` from *text*.

        Raises:
            InvalidImeiError: *text* is not a valid IMEI.
        """
        return cls(text)

    def into_inner(self) -> str:
        """Return the wrapped text. It carries no guarantee once unwrapped."""
        return self.value

    @property
    def tac(self) -> str:
        """Type Allocation Code: the first 8 digits."""
        return self.value[:8]

    @property
    def serial(self) -> str:
        """Serial number: digits 9 through 14."""
        return self.value[8:14]

    @property
    def check(self) -> str:
        """The trailing check digit."""
        return self.value[14]

    def __str__(self) -> str:
        return self.value

    def __reduce__(self) -> tuple[type[Imei], tuple[str]]:
        return (type(self), (self.value,))
