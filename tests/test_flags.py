import pytest

from tronctl.address import base58_to_address
from tronctl.flags import TronAddress

VALID = "TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1"


def test_set_valid_address():
    flag = TronAddress()
    flag.set(VALID)
    assert str(flag) == VALID
    assert flag.get_address() == base58_to_address(VALID)


def test_set_invalid_keeps_previous():
    flag = TronAddress()
    flag.set(VALID)
    with pytest.raises(ValueError):
        flag.set("not-an-address")
    assert flag.address == VALID


def test_get_address_when_empty():
    assert TronAddress().get_address() is None