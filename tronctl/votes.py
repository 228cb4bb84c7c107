"""Amounts in sun and witness vote lists given on the command line."""

from __future__ import annotations

import math
import re
from typing import Iterable

from tronctl.address import base58_to_address

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


class ParseError(ValueError):
    """Raised when a command-line value cannot be parsed."""


def _parse_int64(text: str) -> int:
    if not _INT_RE.match(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def to_sun(value) -> int:
    """Convert a TRX amount to sun, truncating toward zero."""
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError as exc:
            raise ParseError(f"invalid amount {value!r}") from exc
    value = float(value)
    if not math.isfinite(value):
        raise ParseError(f"invalid amount {value!r}")
    return int(value * 1e6)


def parse_votes(vote_list: Iterable[str]) -> dict[str, int]:
    """Parse ``address:count`` entries into a mapping of witness to votes."""
    votes: dict[str, int] = {}
    for vote in vote_list:
        parts = vote.split(":")
        if len(parts) != 2:
            raise ParseError(f"invalid vote {vote}")
        key, count_text = parts
        if votes.get(key, 0) > 0:
            raise ParseError(f"vote colision {key}:{votes[key]} -> {vote}")
        try:
            witness = base58_to_address(key)
        except ValueError as exc:
            raise ParseError(f"invalid address {key}. {exc}") from exc
        try:
            count = _parse_int64(count_text)
        except ValueError as exc:
            raise ParseError(f"invalid vote count {count_text}. {exc}") from exc
        votes[str(witness)] = count
    return votes