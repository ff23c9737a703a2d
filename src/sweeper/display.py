"""
Text formatting for the clock and the remaining-mines counter.
"""
import re

_CLOCK_PATTERN = re.compile(r"^(\d+):(\d+)$")

COUNTER_MIN = -99
COUNTER_MAX = 999


def format_clock(seconds: int) -> str:
    """Format whole seconds as zero-padded MM:SS (65 -> '01:05')."""
    if seconds < 0:
        raise ValueError(f"Elapsed time cannot be negative: {seconds}")
    minutes, seconds = divmod(int(seconds), 60)
    return f"{minutes:02d}:{seconds:02d}"


def parse_clock(text: str) -> int:
    """
    Parse MM:SS into whole seconds.

    Raises:
        ValueError: If the text is not digits:digits or seconds >= 60.
    """
    match = _CLOCK_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"Invalid clock value: {text!r}")
    minutes, seconds = int(match.group(1)), int(match.group(2))
    if seconds >= 60:
        raise ValueError(f"Seconds out of range in clock value: {text!r}")
    return minutes * 60 + seconds


def format_counter(value: int) -> str:
    """
    Format the remaining-mines counter as three characters.

    Negative values use a leading sign digit: -5 -> '-05', 10 -> '010'.
    Values outside -99..999 are clamped.
    """
    value = max(COUNTER_MIN, min(COUNTER_MAX, value))
    if value < 0:
        return f"-{-value:02d}"
    return f"{value:03d}"
