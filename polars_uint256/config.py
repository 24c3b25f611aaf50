from __future__ import annotations

import os

DIAGNOSTICS_ENV = "POLARS_UINT256_DIAGNOSTICS"
_FORMATS = ("hex", "decimal")


def diagnostic_format() -> str:
    """How operands are rendered in error messages.

    Read from env POLARS_UINT256_DIAGNOSTICS on every call: "hex" (default) or "decimal".
    """
    value = os.getenv(DIAGNOSTICS_ENV, "").strip().lower()
    if value in _FORMATS:
        return value
    return "hex"
