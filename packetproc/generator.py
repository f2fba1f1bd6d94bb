"""Generation of random id/text samples and sample files."""

from __future__ import annotations

import random

from .pair import Pair
from .textutils import encode_base64, now_as_formatted_string

UNICODE_RANGES: tuple[tuple[int, int], ...] = (
    (0x0041, 0x005A),  # A-Z
    (0x0061, 0x007A),  # a-z
    (0x0600, 0x06FF),  # Arabic and Persian
)

TEXT_LENGTH = 70
ID_RANGE_START = 100000
ID_RANGE_END = 1000000
RANDOM_FILE_PREFIX = "RandomSample"


def random_from_ranges() -> str:
    """Pick a random range, then a random character from within it."""
    start, end = random.choice(UNICODE_RANGES)
    return chr(random.randint(start, end))


def generate_string(max_length: int) -> str:
    """Build a random string of at most ``max_length`` UTF-8 bytes.

    Between 1 and ``max_length`` characters are drawn; if their encoding is
    longer than ``max_length`` bytes it is cut to that many bytes.
    """
    if max_length < 1:
        raise ValueError("max_length must be positive")
    length = random.randint(1, max_length)
    value = "".join(random_from_ranges() for _ in range(length))
    raw = value.encode("utf-8")
    if len(raw) > max_length:
        return raw[:max_length].decode("utf-8", "surrogateescape")
    return value


def generate_encoded_base64(length: int) -> str:
    """A random string of at most ``length`` bytes, base64 encoded."""
    return encode_base64(generate_string(length))


def generate_id(start: int, stop: int) -> int:
    """A random id in ``[start, stop - 1)``."""
    return random.randrange(start, stop - 1)


def new_random_pair_base64(start: int, end: int) -> Pair:
    """A pair with a random id from the range and random base64 text."""
    return Pair(id=generate_id(start, end), text=generate_encoded_base64(TEXT_LENGTH))


def generate_random_pairs_base64(n_samples: int) -> list[Pair]:
    """``n_samples`` random pairs with ids in the default range."""
    if n_samples < 0:
        raise ValueError("n_samples must not be negative")
    return [new_random_pair_base64(ID_RANGE_START, ID_RANGE_END) for _ in range(n_samples)]


def generate_random_sample_file_name() -> str:
    """A sample file name stamped with the current time."""
    return f"{RANDOM_FILE_PREFIX}_{now_as_formatted_string()}.txt"


def write_random_pairs_to_file(file_name: str, n_samples: int) -> None:
    """Write ``n_samples`` random pairs as ``id , base64`` lines."""
    samples = generate_random_pairs_base64(n_samples)
    with open(file_name, "w", encoding="utf-8", newline="\n") as file:
        file.writelines(f"{pair.id} , {pair.text}\n" for pair in samples)