"""Text helpers: counting Latin letters, base64 coding and simple timing."""

from __future__ import annotations

import base64
import binascii
import time
from datetime import datetime

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


def count_english_chars(text: str) -> int:
    """Return how many characters of ``text`` are ASCII letters A-Z or a-z."""
    return sum(1 for ch in text if "A" <= ch <= "Z" or "a" <= ch <= "z")


def encode_base64(text: str) -> str:
    """Encode the UTF-8 bytes of ``text`` as standard padded base64."""
    return base64.b64encode(text.encode(_ENCODING, _ERRORS)).decode("ascii")


def decode_base64(text: str) -> str:
    """Decode standard base64 into text; invalid input yields an empty string."""
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return ""
    return data.decode(_ENCODING, _ERRORS)


def now_as_formatted_string() -> str:
    """Return the current local time as ``YYYY-MM-DD_HH-MM-SS``."""
    return datetime.now().strftime(_TIMESTAMP_FORMAT)


class Timer:
    """Measures elapsed wall time in whole milliseconds."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def start(self) -> None:
        """Restart the measurement from now."""
        self._start = time.perf_counter_ns()

    def diff_milli(self) -> int:
        """Milliseconds elapsed since the last start."""
        return (time.perf_counter_ns() - self._start) // 1_000_000

    def print_diff_milli(self, action: str) -> None:
        """Print the elapsed time for ``action``."""
        print(f"Time it took for <{action}> was <{self.diff_milli()}> milliseconds.")