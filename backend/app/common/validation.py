import math
import re

from app.common.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^\S+@\S+$")

# Largest value a BIGINT column holds
MAX_QUANTITY = 2**63 - 1


def require_text(value: str, label: str) -> str:
    """Return the stripped value, rejecting blank input."""
    if value is None or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def require_positive_int(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be a whole number")
    if value <= 0:
        raise ValidationError(f"{label} must be at least 1")
    if value > MAX_QUANTITY:
        raise ValidationError(f"{label} cannot exceed {MAX_QUANTITY}")
    return value


def require_non_negative(value: float, label: str) -> float:
    if not math.isfinite(value):
        raise ValidationError(f"{label} must be a finite number")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
    return float(value)
