from datetime import datetime, timezone

import pytest

from tronctl.address import base58_to_address
from tronctl.proposals import parse_proposals, summarize_proposals
from tronctl.votes import ParseError

ADDR = "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"
OTHER = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"
NOW = datetime(2021, 6, 1, tzinfo=timezone.utc)


def _ms(dt):
    return int(dt.timestamp()) * 1000


def _proposal(pid, expiration, approvals=()):
    return {
        "proposal_id": pid,
        "proposer_address": bytes(base58_to_address(ADDR)),
        "create_time": _ms(datetime(2021, 1, 1, tzinfo=timezone.utc)),
        "expiration_time": _ms(expiration),
        "parameters": {pid: pid * 10},
        "approvals": [bytes(base58_to_address(a)) for a in approvals],
    }


def test_parse_proposals_pairs():
    assert parse_proposals(["1:100", "2:200"]) == {1: 100, 2: 200}


def test_parse_proposals_empty():
    assert parse_proposals([]) == {}


@pytest.mark.parametrize("entry", ["1", "1:2:3", "x:5", "1:y"])
def test_parse_proposals_invalid(entry):
    with pytest.raises(ParseError):
        parse_proposals([entry])


def test_parse_proposals_collision():
    with pytest.raises(ParseError, match="colision"):
        parse_proposals(["3:5", "3:6"])


def test_parse_proposals_zero_value_can_be_overwritten():
    assert parse_proposals(["3:0", "3:6"]) == {3: 6}


def test_summarize_orders_newest_first_and_counts():
    old = _proposal(1, datetime(2021, 2, 1, tzinfo=timezone.utc))
    new = _proposal(2, datetime(2021, 7, 1, tzinfo=timezone.utc), [OTHER])
    result = summarize_proposals([old, new], NOW)
    assert result["totalCount"] == 2
    assert result["filterCount"] == 2
    assert [p["ID"] for p in result["proposals"]] == [2, 1]
    assert [p["Expired"] for p in result["proposals"]] == [False, True]


def test_summarize_new_only_drops_expired():
    old = _proposal(1, datetime(2021, 2, 1, tzinfo=timezone.utc))
    new = _proposal(2, datetime(2021, 7, 1, tzinfo=timezone.utc))
    result = summarize_proposals([old, new], NOW, new_only=True)
    assert result["totalCount"] == 2
    assert result["filterCount"] == 1
    assert result["proposals"][0]["ID"] == 2


def test_summarize_addresses_and_times():
    expiration = datetime(2021, 7, 1, tzinfo=timezone.utc)
    proposal = _proposal(7, expiration, [OTHER, ADDR])
    proposal["expiration_time"] += 999
    entry = summarize_proposals([proposal], NOW)["proposals"][0]
    assert entry["Proposer"] == ADDR
    assert entry["Approvals"] == [OTHER, ADDR]
    assert entry["ExpirationTime"] == expiration
    assert entry["CreateTime"] == datetime(2021, 1, 1, tzinfo=timezone.utc)
    assert entry["Parameters"] == {7: 70}