"""The id and text record shared by the generator and the processor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    """An identifier together with its text."""

    id: int
    text: str