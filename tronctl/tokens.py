"""Validation and scaling of TRC10 token issue parameters."""

from __future__ import annotations

import math
import re
import struct
from typing import Iterable

from tronctl.votes import ParseError

MAX_DECIMALS = 6
_MAX_TOKEN_NUM = 10**6
_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _parse_int(text: str, low: int, high: int) -> int:
    if not _INT_RE.match(text):
        raise ParseError(f"invalid syntax: {text!r}")
    number = int(text)
    if not low <= number <= high:
        raise ParseError(f"value out of range: {text!r}")
    return number


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ParseError(f"invalid syntax: {text!r}")
    try:
        number = float(text)
    except ValueError:
        raise ParseError(f"invalid syntax: {text!r}") from None
    if not math.isfinite(number):
        raise ParseError(f"value out of range: {text!r}")
    return number


def _to_float32(number: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        raise ParseError(f"value out of range: {number!r}") from None


def _pow10(decimals: int) -> float:
    return float(10**decimals)


def validate_decimals(decimals: int) -> int:
    """Return ``decimals`` if it is a valid token precision (0 to 6)."""
    if decimals > MAX_DECIMALS or decimals < 0:
        raise ParseError(f"decimals should be >= 0 &&  <= 6, found {decimals}")
    return decimals


def parse_ratio(ratio: str) -> tuple[int, int]:
    """Parse a TRX to token ratio into ``(trx_num, token_num)``.

    The ratio is either ``TRX:TOKEN`` with two integers, or a decimal
    number kept to six decimals and expressed over a power of ten.
    """
    colon = ratio.find(":")
    if colon > -1:
        trx_num = _parse_int(ratio[:colon], _INT32_MIN, _INT32_MAX)
        token_num = _parse_int(ratio[colon + 1 :], _INT32_MIN, _INT32_MAX)
        return trx_num, token_num

    value = _to_float32(_parse_float(ratio))
    p = _pow10(6)
    value = float(int(value * p)) / p
    token_num = 1
    while float(int(value)) != value and token_num <= _MAX_TOKEN_NUM:
        value *= 10
        token_num *= 10
    if token_num > _MAX_TOKEN_NUM:
        raise ParseError("invalid ratio")
    return int(value), token_num


def parse_frozen_supply(frozen_list: Iterable[str], decimals: int) -> dict[str, str]:
    """Parse ``DAYS:AMOUNT`` entries into a mapping of days to scaled amount."""
    validate_decimals(decimals)
    frozen: dict[str, str] = {}
    for entry in frozen_list:
        parts = entry.split(":")
        if len(parts) != 2:
            raise ParseError(f"invalid frozen supply {entry}")
        days, amount_text = parts
        if frozen.get(days):
            raise ParseError(
                f"frozen supply date colision {days}:{frozen[days]} -> {entry}"
            )
        try:
            amount = _parse_float(amount_text)
        except ParseError:
            raise ParseError(f"invalid frozen supply: {entry}") from None
        frozen[days] = str(int(amount * _pow10(decimals)))
    return frozen


def scale_total_supply(total_supply, decimals: int) -> int:
    """Return the total supply in the token's smallest unit."""
    validate_decimals(decimals)
    if isinstance(total_supply, str):
        total = _parse_int(total_supply, _INT64_MIN, _INT64_MAX)
    else:
        total = int(total_supply)
    return int(float(total) * _pow10(decimals))