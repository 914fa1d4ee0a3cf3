from __future__ import annotations

import math
import re

from ..core.exceptions import ValidationError

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_int(token: str) -> int:
    if not _INT_TOKEN.fullmatch(token):
        raise ValidationError(f"'{token}' is not a whole number")
    try:
        return int(token)
    except ValueError:
        # Past the interpreter's int-string digit limit
        raise ValidationError(f"whole number with {len(token)} characters is too long") from None


def parse_float(token: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise ValidationError(f"'{token}' is not a number") from None
    if not math.isfinite(value):
        raise ValidationError(f"'{token}' is not a finite number")
    return value
