"""Contract ABI types and encoding of call parameters."""

from __future__ import annotations

import base64
import binascii
import json
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from Crypto.Hash import keccak

from tronctl.address import base58_to_address

_ARRAY_RE = re.compile(r"^(.*)\[(\d*)\]$")
_INT_RE = re.compile(r"^(u?int)(\d*)$")
_BYTES_RE = re.compile(r"^bytes(\d*)$")
_DECIMAL_RE = re.compile(r"^[+-]?[0-9]+$")
_WORD = 32


class AbiError(ValueError):
    """Raised for unknown types and values that cannot be encoded."""


@dataclass(frozen=True)
class AbiType:
    """A parsed ABI type.

    ``kind`` is one of int, uint, bool, address, string, bytes, fixedbytes,
    slice or array. ``size`` is the bit width of integers, the byte width of
    fixed bytes and the length of fixed arrays.
    """

    kind: str
    size: int = 0
    elem: AbiType | None = None
    name: str = ""

    def __str__(self) -> str:
        return self.name

    @property
    def is_dynamic(self) -> bool:
        if self.kind in ("string", "bytes", "slice"):
            return True
        if self.kind == "array":
            return self.elem.is_dynamic
        return False

    def _head_size(self) -> int:
        if self.kind == "array" and not self.is_dynamic:
            return self.size * self.elem._head_size()
        return _WORD


@dataclass(frozen=True)
class Argument:
    """A named, typed argument of a contract method."""

    name: str
    type: AbiType
    indexed: bool = False


def parse_type(type_str: str) -> AbiType:
    """Parse an ABI type name such as ``uint256``, ``bytes32`` or ``address[2]``."""
    text = type_str.strip()
    match = _ARRAY_RE.match(text)
    if match:
        elem = parse_type(match.group(1))
        if match.group(2) == "":
            return AbiType("slice", 0, elem, f"{elem}[]")
        length = int(match.group(2))
        return AbiType("array", length, elem, f"{elem}[{length}]")

    match = _INT_RE.match(text)
    if match:
        kind = match.group(1)
        size = int(match.group(2)) if match.group(2) else 256
        if size < 8 or size > 256 or size % 8:
            raise AbiError(f"unsupported arg type: {type_str}")
        return AbiType(kind, size, None, f"{kind}{size}")

    match = _BYTES_RE.match(text)
    if match:
        if not match.group(1):
            return AbiType("bytes", 0, None, "bytes")
        size = int(match.group(1))
        if size < 1 or size > 32:
            raise AbiError(f"unsupported arg type: {type_str}")
        return AbiType("fixedbytes", size, None, f"bytes{size}")

    if text in ("address", "bool", "string"):
        return AbiType(text, 0, None, text)
    raise AbiError(f"unsupported arg type: {type_str}")


def load_from_json(j_string: str) -> list[dict] | None:
    """Load a JSON list of single-entry ``{type: value}`` parameters."""
    if not j_string:
        return None
    try:
        data = json.loads(j_string)
    except json.JSONDecodeError as exc:
        raise AbiError(f"invalid parameter JSON: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(p, dict) for p in data):
        raise AbiError("parameter JSON must be a list of objects")
    return data


def signature(method: str) -> bytes:
    """Return the four byte selector of a method signature."""
    return keccak.new(digest_bits=256, data=method.encode("utf-8")).digest()[:4]


def _word(number: int) -> bytes:
    return (number % (1 << 256)).to_bytes(_WORD, "big")


def _pad_right(data: bytes) -> bytes:
    rem = len(data) % _WORD
    return data + b"\x00" * ((_WORD - rem) % _WORD)


def _encode_int(ty: AbiType, value: Any) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise AbiError(f"cannot use {type(value).__name__} as type {ty}")
    if ty.kind == "uint":
        low, high = 0, (1 << ty.size) - 1
    else:
        low, high = -(1 << (ty.size - 1)), (1 << (ty.size - 1)) - 1
    if not low <= value <= high:
        raise AbiError(f"value {value} out of range for {ty}")
    return _word(value)


def _as_bytes(ty: AbiType, value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise AbiError(f"cannot use {type(value).__name__} as type {ty}")
    return bytes(value)


def _encode(ty: AbiType, value: Any) -> bytes:
    kind = ty.kind
    if kind in ("int", "uint"):
        return _encode_int(ty, value)
    if kind == "bool":
        if not isinstance(value, bool):
            raise AbiError(f"cannot use {type(value).__name__} as type bool")
        return _word(int(value))
    if kind == "address":
        raw = _as_bytes(ty, value)
        if len(raw) != 20:
            raise AbiError(f"address must be 20 bytes, got {len(raw)}")
        return raw.rjust(_WORD, b"\x00")
    if kind == "fixedbytes":
        raw = _as_bytes(ty, value)
        if len(raw) != ty.size:
            raise AbiError(f"invalid size: {ty.size}/{len(raw)}")
        return raw.ljust(_WORD, b"\x00")
    if kind in ("bytes", "string"):
        if kind == "string":
            if not isinstance(value, str):
                raise AbiError(f"cannot use {type(value).__name__} as type string")
            raw = value.encode("utf-8")
        else:
            raw = _as_bytes(ty, value)
        return _word(len(raw)) + _pad_right(raw)
    if kind in ("slice", "array"):
        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise AbiError(f"cannot use {type(value).__name__} as type {ty}")
        items = list(value)
        if kind == "array":
            if len(items) != ty.size:
                raise AbiError(f"array {ty} needs {ty.size} items, got {len(items)}")
            return _encode_sequence([ty.elem] * len(items), items)
        return _word(len(items)) + _encode_sequence([ty.elem] * len(items), items)
    raise AbiError(f"unsupported arg type: {ty}")


def _encode_sequence(types: list[AbiType], values: list[Any]) -> bytes:
    head_length = sum(t._head_size() for t in types)
    heads: list[bytes] = []
    tails: list[bytes] = []
    offset = head_length
    for ty, value in zip(types, values):
        encoded = _encode(ty, value)
        if ty.is_dynamic:
            heads.append(_word(offset))
            tails.append(encoded)
            offset += len(encoded)
        else:
            heads.append(encoded)
    return b"".join(heads) + b"".join(tails)


def pack_values(arguments: list[Argument], values: list[Any]) -> bytes:
    """Encode values for the given arguments in the standard ABI layout."""
    if len(arguments) != len(values):
        raise AbiError(
            f"argument count mismatch: {len(values)} for {len(arguments)}"
        )
    return _encode_sequence([a.type for a in arguments], list(values))


def _to_address(value: Any) -> bytes:
    if not isinstance(value, str):
        raise AbiError(f"invalid address {value!r}")
    try:
        addr = base58_to_address(value)
    except ValueError as exc:
        raise AbiError(f"invalid address {value}: {exc}") from exc
    return bytes(addr)[-20:]


def _to_int(ty: AbiType, value: str) -> int:
    try:
        if ty.size > 64 and value.startswith("0x"):
            return int(value[2:], 16)
        if not _DECIMAL_RE.match(value):
            raise ValueError(value)
        return int(value, 10)
    except ValueError as exc:
        raise AbiError(f"invalid {ty} value {value!r}") from exc


def _to_bytes(ty: AbiType, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    try:
        data = binascii.unhexlify(value)
    except (binascii.Error, ValueError):
        try:
            data = base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise AbiError(f"cannot decode bytes {value!r}: {exc}") from exc
    if ty.kind == "bytes" or ty.size == 0:
        return data
    if len(data) != ty.size:
        raise AbiError(f"invalid size: {ty.size}/{len(data)}")
    return data


def _convert(ty: AbiType, value: Any, param: Mapping) -> Any:
    if ty.kind in ("slice", "array"):
        elem = ty.elem
        if elem.kind == "address":
            if not isinstance(value, (list, tuple)):
                raise AbiError(f"unable to convert array of addresses {param!r}")
            return [_to_address(item) for item in value]
        if elem.kind in ("int", "uint"):
            if not isinstance(value, (list, tuple)):
                raise AbiError(f"unable to convert array of unints {param!r}")
            return [_to_int(elem, i) if isinstance(i, str) else i for i in value]
        return value
    if ty.kind == "address":
        return _to_address(value)
    if ty.kind in ("int", "uint") and isinstance(value, str):
        return _to_int(ty, value)
    if ty.kind in ("bytes", "fixedbytes"):
        return _to_bytes(ty, value)
    return value


def get_padded_param(params: Iterable[Mapping]) -> bytes:
    """Encode ``{type: value}`` parameters, converting strings where needed."""
    arguments: list[Argument] = []
    values: list[Any] = []
    for param in params or []:
        if len(param) != 1:
            raise AbiError(f"invalid param {param!r}")
        ((type_name, value),) = param.items()
        try:
            ty = parse_type(type_name)
        except AbiError as exc:
            raise AbiError(f"invalid param {param!r}: {exc}") from exc
        arguments.append(Argument("", ty, False))
        values.append(_convert(ty, value, param))
    return pack_values(arguments, values)


def pack(method: str, params: Iterable[Mapping]) -> bytes:
    """Return the method selector followed by its encoded parameters."""
    return signature(method) + get_padded_param(params)


def _method_arguments(abi_entries: Iterable[Mapping], method: str, key: str) -> list[Argument]:
    for entry in abi_entries:
        if entry.get("name") != method:
            continue
        arguments = []
        for item in entry.get(key) or []:
            type_name = item.get("type", "")
            try:
                ty = parse_type(type_name)
            except AbiError as exc:
                raise AbiError(f"invalid param {type_name}: {exc}") from exc
            arguments.append(
                Argument(item.get("name", ""), ty, bool(item.get("indexed", False)))
            )
        return arguments
    raise AbiError("not found")


def get_parser(abi_entries: Iterable[Mapping], method: str) -> list[Argument]:
    """Return the output arguments of ``method`` from ABI entries."""
    return _method_arguments(abi_entries, method, "outputs")


def get_inputs_parser(abi_entries: Iterable[Mapping], method: str) -> list[Argument]:
    """Return the input arguments of ``method`` from ABI entries."""
    return _method_arguments(abi_entries, method, "inputs")