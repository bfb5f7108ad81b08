from datetime import UTC, datetime


def _utc_now() -> datetime:
    """Return current UTC time as timezone-aware datetime."""
    return datetime.now(UTC)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into the closed range [low, high]."""
    return max(low, min(high, value))
