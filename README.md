# tronctl

Helpers for working with TRON accounts and transaction data:

- 21-byte TRON addresses with Base58Check, hex and Base64 conversion
- Solidity ABI encoding of method calls (`pack`, `get_padded_param`)
- a small YAML configuration file for the command-line tool
- parsing and validation of witness votes, proposal parameters,
  TRC10 issue parameters and exchange trades
- readable summaries of balances, transactions and proposal lists

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `tronctl` command.

Convert a Base58 address to its `0x` hex form:

```
tronctl utility base58-to-addr <BASE58_ADDRESS>
```

Convert a hex address back to Base58 (an empty line is printed if the
input is not valid hex):

```
tronctl utility addr-to-base58 <HEX_ADDRESS>
```

Read or change the stored configuration:

```
tronctl config get all
tronctl config get node
tronctl config set node 127.0.0.1
tronctl config set verbose true
```

The parameters are `node`, `ledger`, `verbose`, `nopretty`, `apiKey` and
`withTLS`; `get` also accepts `all`, which prints every value as JSON.
A node given without a port gets `:50051` appended. Boolean values
accept `1`, `t`, `true`, `0`, `f`, `false` and their capitalised forms.

Show the version (printed to standard error):

```
tronctl version
```

`tronctl utility metadata` and `tronctl utility metrics` exist but do
nothing yet. Invalid input makes a command print `Error: ...` and exit
with status 1.

## Library use

### Addresses

```python
from tronctl.address import Address, base58_to_address, hex_to_address

addr = base58_to_address("<BASE58_ADDRESS>")
print(addr.to_hex())   # 0x-prefixed hex form
print(str(addr))       # Base58Check form

same = Address.scan(addr.value())   # from the raw 21 bytes
```

`decode_check` and `base58_to_address` raise `ValueError` for strings
with a bad checksum; `Address.scan` raises `TypeError` for anything that
is not bytes and `ValueError` for anything that is not exactly 21 bytes.
`hex_to_address` returns `None` for invalid hex. `big_to_address`,
`base64_to_address` and `pubkey_to_address` (from an uncompressed
secp256k1 public key) are also available.

`tronctl.flags.TronAddress` holds a Base58 address given on the command
line: `set()` validates it and `get_address()` returns the decoded
`Address`, or `None`.

### ABI encoding

```python
from tronctl.abi import get_padded_param, load_from_json, pack, signature

data = get_padded_param([
    {"string": "Test Token"},
    {"uint8": "6"},
    {"uint256": "0xABCD"},
])

call = pack("transfer(address,uint256)", [
    {"address": "<BASE58_ADDRESS>"},
    {"uint256": "1000000"},
])

selector = signature("transfer(address,uint256)")   # first 4 bytes of Keccak-256

params = load_from_json('[{"bytes32": "0001020001020001020001020001020001020001020001020001020001020001"}]')
```

Each parameter is a single-entry `{type: value}` mapping. Integers may be
Python ints or decimal strings (`0x` hex strings for types wider than 64
bits); bytes may be hex or Base64 strings; addresses are Base58.
`parse_type`, `pack_values` and the `AbiType` and `Argument` classes are
the lower-level pieces. `get_parser` and `get_inputs_parser` return the
output or input `Argument`s of a method from a list of ABI entries given
as dicts. Errors raise `AbiError`.

### Configuration

```python
from tronctl.config import init_config, save_config, set_config_value, get_config_value

config = init_config(config_dir)                      # writes defaults if missing
config = set_config_value(config, "node", "127.0.0.1")  # returns a changed copy
save_config(config, config_dir / "config.default")
print(get_config_value(config, "node"))               # 127.0.0.1:50051
```

The configuration is stored as YAML in `config.default` inside the
configuration directory (`default_config_dir()`, normally
`~/.config/tronctl`). Unknown parameters and bad values raise
`ConfigError`.

### Parameter helpers

- `tronctl.votes.parse_votes(["<WITNESS_ADDRESS>:10"])` checks witness
  votes; `to_sun(1.5)` converts TRX to sun.
- `tronctl.proposals.parse_proposals(["1:100"])` parses proposal
  parameters; `summarize_proposals(proposals, now, new_only)` lists them
  newest first, optionally without the expired ones.
- `tronctl.tokens.validate_decimals`, `parse_ratio("0.5")`,
  `parse_frozen_supply(["30:1000"], 2)` and `scale_total_supply` prepare
  TRC10 issue arguments.
- `tronctl.exchange.normalize_exchange_token("TRX", 1.5)` converts TRX to
  its exchange form; `expected_trade_amount(...)` estimates the return of
  a bancor exchange trade.
- `tronctl.receipts.balance_summary` and `transaction_result` build the
  dicts shown for a balance or an executed transaction.
- `tronctl.model.AccountDetails` is a detailed account view;
  `to_json_dict()` gives it with its JSON field names.

Invalid input raises `ParseError` (or its subclass `ExchangeError`),
both `ValueError`s, with a message describing the problem.

## What this package does not do

It does not connect to a TRON node. There are no commands to query
balances or blocks, send TRX or tokens, vote, freeze, deploy or trigger
contracts, and there is no keystore: it neither stores keys nor signs
transactions. The `node`, `ledger` and `apiKey` settings are stored in
the configuration but nothing in the package uses them.