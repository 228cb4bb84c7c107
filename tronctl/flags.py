"""Command-line value type holding a validated Tron address."""

from __future__ import annotations

from dataclasses import dataclass

from tronctl.address import Address, base58_to_address


@dataclass
class TronAddress:
    """A base58 address given on the command line."""

    address: str = ""

    TYPE = "tron-address"

    def __str__(self) -> str:
        return self.address

    def set(self, s: str) -> None:
        """Store ``s`` after checking that it is a valid base58 address."""
        try:
            base58_to_address(s)
        except ValueError as exc:
            raise ValueError(f"not a valid one address: {exc}") from exc
        self.address = s

    def get_address(self) -> Address | None:
        """Return the decoded address, or None if none is set or it is invalid."""
        try:
            return base58_to_address(self.address)
        except ValueError:
            return None