"""Tests for config layering: defaults, config file, env vars, programmatic."""

import json
import logging

from name_maker import config as config_module
from name_maker.config import (
    CliConfig,
    DefaultsConfig,
    NameMakerConfig,
    configure,
    get_config,
    reset_config,
)


class TestDefaults:
    def test_hardcoded_defaults(self):
        config = NameMakerConfig.load()
        assert config.defaults.amount == 1
        assert config.defaults.children == 0
        assert config.defaults.seed is None
        assert config.cli.mode == "human"
        assert not config.json_mode


class TestConfigFile:
    def test_file_values_applied(self):
        config_module.CONFIG_FILE.write_text(
            json.dumps(
                {"defaults": {"amount": 4, "seed": 9}, "cli": {"mode": "json"}}
            )
        )
        config = NameMakerConfig.load()
        assert config.defaults.amount == 4
        assert config.defaults.seed == 9
        assert config.json_mode

    def test_unknown_keys_ignored(self):
        config_module.CONFIG_FILE.write_text(
            json.dumps({"defaults": {"colour": "red", "children": 2}, "extra": 1})
        )
        config = NameMakerConfig.load()
        assert config.defaults.children == 2

    def test_corrupt_file_warns_and_uses_defaults(self, caplog):
        config_module.CONFIG_FILE.write_text("{not json")
        with caplog.at_level(logging.WARNING, logger="name_maker.config"):
            config = NameMakerConfig.load()
        assert config.defaults.amount == 1
        assert "Failed to load config" in caplog.text

    def test_invalid_mode_warns(self, caplog):
        config_module.CONFIG_FILE.write_text(json.dumps({"cli": {"mode": "xml"}}))
        with caplog.at_level(logging.WARNING, logger="name_maker.config"):
            config = NameMakerConfig.load()
        assert config.cli.mode == "human"
        assert "cli.mode" in caplog.text

    def test_negative_amount_warns(self, caplog):
        config_module.CONFIG_FILE.write_text(json.dumps({"defaults": {"amount": -3}}))
        with caplog.at_level(logging.WARNING, logger="name_maker.config"):
            config = NameMakerConfig.load()
        assert config.defaults.amount == 1

    def test_save_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        NameMakerConfig(
            defaults=DefaultsConfig(amount=7, children=1, seed=3),
            cli=CliConfig(mode="json"),
        ).save(path)
        loaded = NameMakerConfig.load(path)
        assert loaded.to_dict() == {
            "defaults": {"amount": 7, "children": 1, "seed": 3},
            "cli": {"mode": "json"},
        }


class TestEnvOverrides:
    def test_env_beats_file(self, monkeypatch):
        config_module.CONFIG_FILE.write_text(json.dumps({"defaults": {"amount": 4}}))
        monkeypatch.setenv("NAME_MAKER_AMOUNT", "6")
        monkeypatch.setenv("NAME_MAKER_CHILDREN", "2")
        monkeypatch.setenv("NAME_MAKER_SEED", "13")
        monkeypatch.setenv("NAME_MAKER_CLI_MODE", "json")
        config = NameMakerConfig.load()
        assert config.defaults.amount == 6
        assert config.defaults.children == 2
        assert config.defaults.seed == 13
        assert config.cli.mode == "json"

    def test_invalid_env_values_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("NAME_MAKER_AMOUNT", "lots")
        monkeypatch.setenv("NAME_MAKER_CHILDREN", "-1")
        monkeypatch.setenv("NAME_MAKER_SEED", "x")
        monkeypatch.setenv("NAME_MAKER_CLI_MODE", "yaml")
        with caplog.at_level(logging.WARNING, logger="name_maker.config"):
            config = NameMakerConfig.load()
        assert config.defaults.amount == 1
        assert config.defaults.children == 0
        assert config.defaults.seed is None
        assert config.cli.mode == "human"
        for var in ("NAME_MAKER_AMOUNT", "NAME_MAKER_CHILDREN", "NAME_MAKER_SEED"):
            assert var in caplog.text


class TestGlobalConfig:
    def test_cached(self):
        assert get_config() is get_config()

    def test_configure_overrides(self):
        custom = NameMakerConfig(defaults=DefaultsConfig(amount=10))
        configure(custom)
        assert get_config() is custom

    def test_reset_reloads(self):
        first = get_config()
        reset_config()
        assert get_config() is not first


class TestPartialFile:
    def test_bad_key_leaves_whole_file_unapplied(self, caplog):
        config_module.CONFIG_FILE.write_text(
            json.dumps(
                {"defaults": {"amount": 4, "children": -1}, "cli": {"mode": "json"}}
            )
        )
        with caplog.at_level(logging.WARNING, logger="name_maker.config"):
            config = NameMakerConfig.load()
        assert config.defaults.amount == 1
        assert config.defaults.children == 0
        assert config.cli.mode == "human"
        assert "defaults.children" in caplog.text

    def test_env_still_applies_after_bad_file(self, monkeypatch):
        config_module.CONFIG_FILE.write_text(
            json.dumps({"defaults": {"amount": 4}, "cli": {"mode": "xml"}})
        )
        monkeypatch.setenv("NAME_MAKER_CHILDREN", "3")
        config = NameMakerConfig.load()
        assert config.defaults.amount == 1
        assert config.defaults.children == 3
