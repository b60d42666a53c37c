# -*- coding: utf-8 -*-

from typing import Optional

from domain.models import DurationCheck

MIN_SECONDS = 1
MAX_SECONDS = 10 * 3600
SHORT_MAX_SECONDS = 3600
DEFAULT_SECONDS = 10

_DIGITS = "0123456789"


class InvalidDuration(ValueError):
    def __init__(self, text: str, max_seconds: int = MAX_SECONDS, message: Optional[str] = None):
        self.text = text
        self.max_seconds = max_seconds
        if message is None:
            message = (
                f"Duration must be between {MIN_SECONDS} and {max_seconds} seconds "
                f"(got {text!r})"
            )
        super().__init__(message)


def clamp_seconds(value: int, max_seconds: int = MAX_SECONDS) -> int:
    return min(max(int(value), MIN_SECONDS), max_seconds)


def clean_duration_input(raw: str, max_seconds: int = MAX_SECONDS) -> DurationCheck:
    """
    Best-effort sanitizer for the duration text field.
    Never fails: unparseable input falls back to "1".
    accepted is False when the digits had to be corrected.
    """
    digits = "".join(ch for ch in (raw or "") if ch in _DIGITS)
    if not digits:
        return DurationCheck(cleaned=str(MIN_SECONDS), accepted=False)

    cleaned = str(clamp_seconds(int(digits), max_seconds))
    return DurationCheck(cleaned=cleaned, accepted=cleaned == digits)


def parse_duration(text: str, max_seconds: int = MAX_SECONDS) -> int:
    s = (text or "").strip()
    # only plain ascii digits, no sign
    if not s or any(ch not in _DIGITS for ch in s):
        raise InvalidDuration(text, max_seconds)

    value = int(s)
    if not (MIN_SECONDS <= value <= max_seconds):
        raise InvalidDuration(text, max_seconds)
    return value


def format_display(seconds: int) -> str:
    sec = max(0, int(seconds))
    h = sec // 3600
    m = (sec % 3600) // 60
    s = sec % 60
    if h > 0:
        return f"{h:02d}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"
