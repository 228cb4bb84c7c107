import json

import pytest
import yaml

from tronctl.config import (
    CONFIG_FILE_NAME,
    DEFAULT_NODE_ADDR,
    Config,
    ConfigError,
    default_config_dir,
    get_config_value,
    init_config,
    load_config,
    save_config,
    set_config_value,
)


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "cfg.yaml"
    config = Config(node="example.com:1", ledger=True, api_key="placeholder")
    save_config(config, path)
    assert load_config(path) == config


def test_saved_yaml_keys(tmp_path):
    path = tmp_path / "cfg.yaml"
    save_config(Config(no_pretty=True, with_tls=True), path)
    data = yaml.safe_load(path.read_text())
    assert data["noPretty"] is True
    assert data["withTLS"] is True
    assert data["node"] == DEFAULT_NODE_ADDR


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent")


def test_load_malformed_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_init_config_writes_defaults(tmp_path):
    directory = tmp_path / "conf"
    config = init_config(directory)
    assert config == Config()
    assert load_config(directory / CONFIG_FILE_NAME) == Config()


def test_init_config_keeps_existing(tmp_path):
    save_config(Config(node="example.com:9", verbose=True), tmp_path / CONFIG_FILE_NAME)
    config = init_config(tmp_path)
    assert config.node == "example.com:9"
    assert config.verbose is True


def test_init_config_resets_empty_node(tmp_path):
    (tmp_path / CONFIG_FILE_NAME).write_text("ledger: true\n")
    assert init_config(tmp_path) == Config()


def test_default_config_dir_uses_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_config_dir() == tmp_path / ".config" / "tronctl"


def test_set_node_appends_port():
    config = set_config_value(Config(), "node", "example.com")
    assert config.node == "example.com:50051"


def test_set_node_with_port_unchanged():
    config = set_config_value(Config(), "node", "example.com:7")
    assert config.node == "example.com:7"


def test_set_bool_and_get():
    config = set_config_value(Config(), "ledger", "True")
    assert config.ledger is True
    assert get_config_value(config, "ledger") == "true"
    assert get_config_value(config, "withTLS") == "false"


def test_set_invalid_bool():
    with pytest.raises(ConfigError):
        set_config_value(Config(), "verbose", "maybe")


def test_unknown_parameter():
    with pytest.raises(ConfigError):
        set_config_value(Config(), "timeout", "5")
    with pytest.raises(ConfigError):
        get_config_value(Config(), "colour")


def test_get_all_is_json():
    config = Config(api_key="placeholder")
    data = json.loads(get_config_value(config, "all"))
    assert data["Node"] == config.node
    assert data["APIKey"] == "placeholder"