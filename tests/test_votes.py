import pytest

from tronctl.votes import ParseError, parse_votes, to_sun

W1 = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"
W2 = "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"


def test_to_sun_one_trx():
    assert to_sun("1") == 1000000


def test_to_sun_truncates_toward_zero():
    assert to_sun(0.0000009) == 0
    assert to_sun(-0.0000009) == 0


def test_to_sun_accepts_number_and_string_alike():
    assert to_sun("2.5") == to_sun(2.5)


def test_to_sun_scales_linearly_for_whole_numbers():
    assert to_sun(7) == 7 * to_sun(1)


@pytest.mark.parametrize("bad", ["abc", "", "inf", "nan"])
def test_to_sun_rejects(bad):
    with pytest.raises(ParseError):
        to_sun(bad)


def test_parse_votes_maps_witness_to_count():
    votes = parse_votes([f"{W1}:10", f"{W2}:25"])
    assert votes == {W1: 10, W2: 25}


def test_parse_votes_empty():
    assert parse_votes([]) == {}


def test_parse_votes_collision():
    with pytest.raises(ParseError, match="colision"):
        parse_votes([f"{W1}:10", f"{W1}:5"])


def test_parse_votes_zero_count_can_be_overwritten():
    votes = parse_votes([f"{W1}:0", f"{W1}:5"])
    assert votes == {W1: 5}


@pytest.mark.parametrize("bad", [W1, f"{W1}:1:2", ""])
def test_parse_votes_bad_format(bad):
    with pytest.raises(ParseError, match="invalid vote"):
        parse_votes([bad])


def test_parse_votes_bad_address():
    with pytest.raises(ParseError, match="invalid address"):
        parse_votes(["nothing:3"])


@pytest.mark.parametrize("count", ["x", "1.5", "99999999999999999999"])
def test_parse_votes_bad_count(count):
    with pytest.raises(ParseError, match="invalid vote count"):
        parse_votes([f"{W1}:{count}"])