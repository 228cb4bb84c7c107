"""Network proposal parameters and readable summaries of proposal lists."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from tronctl.address import Address
from tronctl.votes import ParseError

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _int64(text: str) -> int:
    if not _INT_RE.match(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def _from_millis(ms: int) -> datetime:
    seconds = abs(ms) // 1000
    if ms < 0:
        seconds = -seconds
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def parse_proposals(proposal_list: Iterable[str]) -> dict[int, int]:
    """Parse ``ID:VALUE`` entries into a mapping of parameter id to value."""
    proposals: dict[int, int] = {}
    for proposal in proposal_list:
        parts = proposal.split(":")
        if len(parts) != 2:
            raise ParseError(f"invalid proposal {proposal}")
        id_text, value_text = parts
        try:
            param_id = _int64(id_text)
        except ValueError as exc:
            raise ParseError(f"invalid param ID: {id_text} {exc}") from exc
        if proposals.get(param_id, 0) > 0:
            raise ParseError(
                f"proposal colision {param_id}:{proposals[param_id]} -> {proposal}"
            )
        try:
            value = _int64(value_text)
        except ValueError as exc:
            raise ParseError(f"invalid vote count {value_text}. {exc}") from exc
        proposals[param_id] = value
    return proposals


def summarize_proposals(
    proposals: Iterable[Mapping[str, Any]], now: datetime, new_only: bool = False
) -> dict[str, Any]:
    """Summarize proposals, newest listed first.

    Each proposal is a mapping with ``proposal_id``, ``proposer_address``
    (raw address bytes), ``create_time`` and ``expiration_time`` (in
    milliseconds), ``parameters`` and ``approvals`` (raw address bytes).
    With ``new_only`` the proposals expired before ``now`` are left out.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    items = list(proposals)
    listed: list[dict[str, Any]] = []
    for proposal in items:
        expiration = _from_millis(int(proposal.get("expiration_time", 0)))
        expired = expiration < now
        if new_only and expired:
            continue
        listed.insert(
            0,
            {
                "ID": proposal.get("proposal_id", 0),
                "Proposer": str(Address(bytes(proposal.get("proposer_address", b"")))),
                "CreateTime": _from_millis(int(proposal.get("create_time", 0))),
                "ExpirationTime": expiration,
                "Expired": expired,
                "Parameters": dict(proposal.get("parameters") or {}),
                "Approvals": [
                    str(Address(bytes(a))) for a in proposal.get("approvals") or []
                ],
            },
        )
    return {
        "totalCount": len(items),
        "filterCount": len(listed),
        "proposals": listed,
    }