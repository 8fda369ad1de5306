"""
Duration units shared by license expiries, cooldowns, mute and session times.

The seconds-per-unit constants must match the auth backend exactly, including
the fixed "lifetime" sentinel, because persisted durations are compared
against them.
"""

from typing import List, Optional, Tuple
import logging

from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

SECONDS_PER_UNIT = {
    'second': 1,
    'minute': 60,
    'hour': 3600,
    'day': 86400,
    'week': 604800,
    'month': 2629743,
    'year': 31556926,
    'lifetime': 315569260,
}

LIFETIME_SECONDS = SECONDS_PER_UNIT['lifetime']

# Largest first, used when picking a display unit
_UNITS_DESCENDING = sorted(SECONDS_PER_UNIT.items(), key=lambda item: item[1], reverse=True)

UNIT_LABELS = {
    'second': 'Seconds',
    'minute': 'Minutes',
    'hour': 'Hours',
    'day': 'Days',
    'week': 'Weeks',
    'month': 'Months',
    'year': 'Years',
    'lifetime': 'Lifetime',
}


def parse_unit(raw) -> str:
    """
    Resolve a unit from a name or from its seconds value.

    Select boxes submit the seconds value ("86400"), API payloads and code
    use names ("day", "Days").

    Raises:
        ValueError: if raw does not name a known unit
    """
    if isinstance(raw, bool):
        raise ValueError(f"Unknown duration unit: {raw!r}")
    if isinstance(raw, int):
        for name, seconds in SECONDS_PER_UNIT.items():
            if seconds == raw:
                return name
        raise ValueError(f"Unknown duration unit: {raw!r}")

    text = str(raw or '').strip().lower()
    if text.isdigit():
        return parse_unit(int(text))
    if text in SECONDS_PER_UNIT:
        return text
    if text.endswith('s') and text[:-1] in SECONDS_PER_UNIT:
        return text[:-1]
    raise ValueError(f"Unknown duration unit: {raw!r}")


class DurationSpec(BaseModel):
    """A (magnitude, unit) pair before conversion to seconds."""

    model_config = ConfigDict(frozen=True)

    magnitude: int = 0
    unit: str = 'second'

    @field_validator('unit', mode='before')
    def _normalize_unit(cls, v):
        return parse_unit(v)

    @field_validator('magnitude', mode='before')
    def _clamp_magnitude(cls, v):
        """Negative magnitudes are clamped to zero rather than rejected."""
        if v is None:
            return 0
        v = int(v)
        if v < 0:
            logger.warning(f"DurationSpec: negative magnitude {v} clamped to 0")
            return 0
        return v


def to_seconds(spec: DurationSpec) -> int:
    """Absolute duration in seconds. Zero means "immediate", not "unset"."""
    return spec.magnitude * SECONDS_PER_UNIT[spec.unit]


def humanize(total_seconds: int) -> str:
    """
    Render a duration in the coarsest unit that fits.

    Exact multiples use the larger unit (86400 -> "1 day(s)"), anything at or
    above the lifetime sentinel renders as "Lifetime".
    """
    total_seconds = int(total_seconds)
    if total_seconds < 0:
        logger.debug(f"humanize: negative duration {total_seconds} clamped to 0")
        total_seconds = 0

    for name, seconds in _UNITS_DESCENDING:
        if total_seconds >= seconds:
            if name == 'lifetime':
                return 'Lifetime'
            return f"{total_seconds // seconds} {name}(s)"
    return f"{total_seconds} second(s)"


def humanize_delay(magnitude, unit) -> str:
    """Render a magnitude/unit pair, e.g. a chat delay or a mute length."""
    return humanize(to_seconds(DurationSpec(magnitude=magnitude, unit=unit)))


def unit_choices(max_unit: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    Choices for a unit select field, smallest unit first.

    Args:
        max_unit: Largest unit to offer (e.g. 'week' for session expiry)

    Returns:
        List of (seconds value as string, label) tuples
    """
    limit = SECONDS_PER_UNIT[parse_unit(max_unit)] if max_unit else LIFETIME_SECONDS
    return [
        (str(seconds), UNIT_LABELS[name])
        for name, seconds in SECONDS_PER_UNIT.items()
        if seconds <= limit
    ]


def coerce_magnitude(raw, default: int, allow_zero: bool = True) -> int:
    """
    Lenient parsing of numeric form input.

    Invalid, empty or negative input falls back to default instead of
    failing validation; with allow_zero=False a zero does too.
    """
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        logger.debug(f"coerce_magnitude: {raw!r} is not a number, using {default}")
        return default
    if value < 0 or (value == 0 and not allow_zero):
        logger.debug(f"coerce_magnitude: {value} out of range, using {default}")
        return default
    return value
