"""De/serialization modes."""
from __future__ import annotations

from enum import IntFlag


class DeSeriMode(IntFlag):
    NONE = 0
    # Run structural and bounds checks while decoding and encoding.
    PERFORM_VALIDATION = 1

    STRICT = PERFORM_VALIDATION


def has_mode(mode: DeSeriMode, flag: DeSeriMode) -> bool:
    return bool(mode & flag)
