"""TRON addresses, ABI encoding, CLI configuration and parsing of transaction parameters."""

__version__ = "0.1.0"