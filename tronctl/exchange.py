"""Token amounts and expected returns for trades on bancor exchanges."""

from __future__ import annotations

import math

from tronctl.votes import ParseError

TRX_TOKEN_ID = "_"
TRX_DECIMALS = 6
_TRX_ALIASES = frozenset({"TRX", "0"})


class ExchangeError(ParseError):
    """Raised for invalid exchange amounts or tokens that do not match an exchange."""


def _to_amount(amount) -> float:
    if isinstance(amount, str):
        text = amount
        if not text or text != text.strip() or "_" in text:
            raise ExchangeError(f"invalid amount {amount!r}")
        try:
            amount = float(text)
        except ValueError:
            raise ExchangeError(f"invalid amount {text!r}") from None
    if isinstance(amount, bool):
        raise ExchangeError(f"invalid amount {amount!r}")
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise ExchangeError(f"invalid amount {amount!r}") from None
    if math.isnan(value):
        raise ExchangeError(f"invalid amount {amount!r}")
    return value


def normalize_exchange_token(token_id: str, amount) -> tuple[str, float]:
    """Return the exchange form of a token id and amount.

    TRX, given as ``TRX`` or ``0``, becomes ``_`` with its amount in sun.
    Any other token is returned unchanged; its amount still needs scaling
    by the token's own precision.
    """
    value = _to_amount(amount)
    if value <= 0:
        raise ExchangeError("invalid token amount")
    if token_id in _TRX_ALIASES:
        return TRX_TOKEN_ID, value * float(10**TRX_DECIMALS)
    return token_id, value


def expected_trade_amount(
    first_token: str,
    first_balance: int,
    second_token: str,
    second_balance: int,
    token_id: str,
    amount,
) -> int:
    """Return the amount expected back for selling ``amount`` of ``token_id``."""
    value = _to_amount(amount)
    if token_id == first_token:
        numerator = float(first_balance) + value
        denominator = float(second_balance)
    elif token_id == second_token:
        numerator = float(second_balance) + value
        denominator = float(first_balance)
    else:
        raise ExchangeError(
            f"Token ID provided does not match excahnge {first_token}/{second_token}"
        )
    if denominator == 0:
        if numerator > 0:
            return 0
        raise ExchangeError("exchange has no balance to trade against")
    ratio = numerator / denominator
    if ratio == 0:
        raise ExchangeError("exchange has no balance to trade against")
    return int(math.floor(value / ratio + 0.5))