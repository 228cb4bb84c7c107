"""Readable summaries of account balances and executed transactions."""

from __future__ import annotations

from typing import Any

SUN_PER_TRX = 1_000_000


def _text(value) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def balance_summary(
    address: str, account_type, balance: int, allowance: int, rewards: int
) -> dict[str, Any]:
    """Return an account's balance, allowance and rewards in TRX."""
    return {
        "address": str(address),
        "type": account_type,
        "balance": balance / SUN_PER_TRX,
        "allowance": allowance / SUN_PER_TRX,
        "rewards": rewards / SUN_PER_TRX,
    }


def transaction_result(
    tx_id, block_number: int, message, fee: int, net_fee: int, net_usage: int
) -> dict[str, Any]:
    """Return the outcome of an executed transaction and its receipt."""
    if isinstance(tx_id, (bytes, bytearray, memoryview)):
        tx_id = bytes(tx_id).hex()
    return {
        "txID": str(tx_id),
        "blockNumber": block_number,
        "message": _text(message),
        "receipt": {
            "fee": fee,
            "netFee": net_fee,
            "netUsage": net_usage,
        },
    }