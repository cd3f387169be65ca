"""imei — IMEI checksum validation and a validated IMEI type."""

from __future__ import annotations

from imei.domain.checksum import check_digit, diagnose, valid
from imei.domain.errors import InvalidImeiError, InvalidReason
from imei.domain.imei import Imei, validate

__version__ = "0.1.0"

__all__ = [
    "Imei",
    "InvalidImeiError",
    "InvalidReason",
    "__version__",
    "check_digit",
    "diagnose",
    "valid",
    "validate",
]
