from tronctl.address import base58_to_address
from tronctl.cli import build_parser, main

KNOWN_B58 = "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"


def test_parser_config_get():
    args = build_parser().parse_args(["config", "get", "node"])
    assert args.param == "node"


def test_base58_to_addr(capsys):
    assert main(["utility", "base58-to-addr", KNOWN_B58]) == 0
    out = capsys.readouterr().out.strip()
    assert out == base58_to_address(KNOWN_B58).to_hex()


def test_addr_to_base58_round_trip(capsys):
    hex_form = base58_to_address(KNOWN_B58).to_hex()
    assert main(["utility", "addr-to-base58", hex_form]) == 0
    assert capsys.readouterr().out.strip() == KNOWN_B58


def test_invalid_base58_reports_error(capsys):
    assert main(["utility", "base58-to-addr", "bad0address"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_config_set_then_get(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["config", "set", "node", "example.com"]) == 0
    assert main(["config", "get", "node"]) == 0
    assert capsys.readouterr().out.strip() == "example.com:50051"


def test_config_unknown_parameter(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["config", "get", "colour"]) == 1
    assert "parameter not found" in capsys.readouterr().err


def test_version_to_stderr(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().err.startswith("TronCTL.")


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "utility" in capsys.readouterr().out