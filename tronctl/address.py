"""Tron account addresses and their base58check, hex and base64 forms."""

from __future__ import annotations

import base64
import binascii
import hashlib

from Crypto.Hash import keccak

HASH_LENGTH = 32
ADDRESS_LENGTH = 21
ADDRESS_LENGTH_BASE58 = 34
TRON_BYTE_PREFIX = 0x7D

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {ch: i for i, ch in enumerate(_ALPHABET)}


def _double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(_ALPHABET[rem])
    leading = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading + "".join(reversed(digits))


def _b58decode(text: str) -> bytes:
    number = 0
    for ch in text:
        try:
            number = number * 58 + _INDEX[ch]
        except KeyError:
            raise ValueError(f"invalid base58 character {ch!r}") from None
    leading = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\x00" * leading + body


def encode_check(data: bytes) -> str:
    """Encode bytes as base58 with a four byte double-SHA256 checksum."""
    data = bytes(data)
    return _b58encode(data + _double_sha256(data)[:4])


def decode_check(s: str) -> bytes:
    """Decode a base58check string, verifying its checksum."""
    raw = _b58decode(s)
    if len(raw) < 4:
        raise ValueError("b58 check error")
    payload, checksum = raw[:-4], raw[-4:]
    if _double_sha256(payload)[:4] != checksum:
        raise ValueError("b58 check error")
    return payload


class Address(bytes):
    """The 21 byte address of a Tron account."""

    def to_hex(self) -> str:
        """Return the address as a 0x-prefixed hex string."""
        return "0x" + self.hex()

    def value(self) -> bytes:
        """Return the raw bytes, as stored in a database column."""
        return bytes(self)

    @classmethod
    def scan(cls, src) -> "Address":
        """Build an address from a raw database value."""
        if not isinstance(src, (bytes, bytearray)):
            raise TypeError(f"can't scan {type(src).__name__} into Address")
        if len(src) != ADDRESS_LENGTH:
            raise ValueError(
                f"can't scan bytes of len {len(src)} into Address, want {ADDRESS_LENGTH}"
            )
        return cls(src)

    def __str__(self) -> str:
        if not self:
            return ""
        if self[0] == 0:
            return str(int.from_bytes(self, "big"))
        return encode_check(bytes(self))

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"


def big_to_address(b: int) -> Address:
    """Return the address whose bytes are the big-endian value of ``b``."""
    raw = b.to_bytes((b.bit_length() + 7) // 8, "big") if b else b""
    if len(raw) > ADDRESS_LENGTH:
        raise ValueError(f"value needs {len(raw)} bytes, more than {ADDRESS_LENGTH}")
    return Address(raw.rjust(ADDRESS_LENGTH, b"\x00"))


def hex_to_address(s: str) -> Address | None:
    """Return the address for a hex string, or None if it is not valid hex."""
    if s.startswith(("0x", "0X")):
        s = s[2:]
    if len(s) % 2:
        s = "0" + s
    try:
        return Address(bytes.fromhex(s))
    except ValueError:
        return None


def base58_to_address(s: str) -> Address:
    """Return the address encoded in a base58check string."""
    return Address(decode_check(s))


def base64_to_address(s: str) -> Address:
    """Return the address encoded in a standard base64 string."""
    try:
        return Address(base64.b64decode(s, validate=True))
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 address: {exc}") from exc


def pubkey_to_address(pubkey: bytes) -> Address:
    """Derive the address of an uncompressed secp256k1 public key."""
    pubkey = bytes(pubkey)
    if len(pubkey) == 65 and pubkey[0] == 0x04:
        body = pubkey[1:]
    elif len(pubkey) == 64:
        body = pubkey
    else:
        raise ValueError("public key must be 64 or 65 uncompressed bytes")
    digest = keccak.new(digest_bits=256, data=body).digest()
    return Address(bytes([TRON_BYTE_PREFIX]) + digest[12:])