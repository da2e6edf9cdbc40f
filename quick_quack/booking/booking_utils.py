# Utility functions for booking functionality
import re
from datetime import datetime
from typing import Tuple
from .error_utils import TimeValidationError

TWELVE_HOUR_PATTERN = re.compile(r"am|pm", re.IGNORECASE)

def parse_time_string(time: str) -> Tuple[int, int]:
    """
    Parses a time string in either 12-hour ("1:30 PM") or 24-hour ("13:30") format.

    Input: time string as entered on the availability screens.

    Returns: (hours, minutes) tuple on the 24-hour clock.

    Raises TimeValidationError if the input matches neither format.
    """
    if not isinstance(time, str):
        raise TimeValidationError(f"Time must be a string, got {type(time).__name__}")
    time = time.strip()
    # Anything mentioning AM/PM is treated as 12-hour format, e.g. "12:00 AM" or "9:05pm"
    if TWELVE_HOUR_PATTERN.search(time):
        # Drop inner whitespace so "1:30PM" and "1:30 PM" both match
        compact = re.sub(r"\s+", "", time).upper()
        try:
            parsed = datetime.strptime(compact, "%I:%M%p")
        except ValueError:
            raise TimeValidationError(f"'{time}' is not a valid 12-hour time")
        return parsed.hour, parsed.minute

    parts = time.split(":")
    if len(parts) != 2:
        raise TimeValidationError(f"'{time}' is not a valid 24-hour time")
    try:
        hours, minutes = (int(part) for part in parts)
    except ValueError:
        raise TimeValidationError(f"'{time}' is not a valid 24-hour time")
    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        raise TimeValidationError(f"'{time}' is out of range")
    return hours, minutes
