"""Tests for model records and schema readers."""

import pytest

from constants import DEFAULT_CONFIG
from errors import MalformedOutputError
from model import AppConfig, HymoFSState, Module, ModuleRules, MountMode, merge_config
from model.schema import (
    parse_json_array,
    parse_json_object,
    read_bool,
    read_int,
    read_str,
    read_str_list,
)


class TestMergeConfig:
    """Test merge_config() precedence."""

    def test_remote_wins_for_present_keys(self):
        defaults = {"a": 1, "b": 2, "c": 3}
        remote = {"b": 20, "d": 40}
        merged = merge_config(defaults, remote)
        for key in ("a", "b", "c", "d"):
            expected = remote[key] if key in remote else defaults[key]
            assert merged[key] == expected

    def test_remote_null_still_wins(self):
        """Presence, not truthiness, decides."""
        assert merge_config({"logfile": "/x"}, {"logfile": None}) == {"logfile": None}

    def test_inputs_not_mutated(self):
        defaults = {"a": 1}
        merge_config(defaults, {"a": 2})
        assert defaults == {"a": 1}


class TestAppConfig:
    """Test AppConfig wire conversion."""

    def test_defaults_match_compiled_in(self):
        config = AppConfig.defaults()
        assert config.to_dict() == DEFAULT_CONFIG

    def test_defaults_are_independent_copies(self):
        first = AppConfig.defaults()
        first.partitions.append("mi_ext")
        assert AppConfig.defaults().partitions == []

    def test_partial_remote_filled_from_defaults(self):
        config = AppConfig.from_dict({"overlay_mode": "erofs", "partitions": ["my_custom"]})
        assert config.overlay_mode == "erofs"
        assert config.partitions == ["my_custom"]
        assert config.moduledir == DEFAULT_CONFIG["moduledir"]
        assert config.mountsource == DEFAULT_CONFIG["mountsource"]

    def test_unknown_keys_preserved(self):
        config = AppConfig.from_dict({"future_option": {"x": 1}})
        assert config.extras == {"future_option": {"x": 1}}
        assert config.to_dict()["future_option"] == {"x": 1}

    def test_null_optional_fields_written_as_null(self):
        config = AppConfig.from_dict({"logfile": None, "hymofs_debug": None})
        assert config.logfile is None
        data = config.to_dict()
        assert data["logfile"] is None
        assert data["hymofs_debug"] is None
        assert AppConfig.from_dict(data) == config

    def test_wrong_type_is_malformed(self):
        with pytest.raises(MalformedOutputError):
            AppConfig.from_dict({"disable_umount": "yes"})

    def test_partitions_must_be_strings(self):
        with pytest.raises(MalformedOutputError):
            AppConfig.from_dict({"partitions": ["ok", 3]})

    def test_field_names_exclude_extras(self):
        assert "extras" not in AppConfig.field_names()
        assert set(AppConfig.field_names()) == set(DEFAULT_CONFIG)


class TestModuleRules:
    """Test ModuleRules parsing."""

    def test_from_dict(self):
        rules = ModuleRules.from_dict({"default_mode": "magic", "paths": {"system/fonts": "overlay"}})
        assert rules.default_mode is MountMode.MAGIC
        assert rules.paths == {"system/fonts": MountMode.OVERLAY}

    def test_defaults_when_empty(self):
        rules = ModuleRules.from_dict({})
        assert rules.default_mode is MountMode.OVERLAY
        assert rules.paths == {}

    def test_unknown_default_mode(self):
        with pytest.raises(MalformedOutputError, match="default_mode"):
            ModuleRules.from_dict({"default_mode": "bind"})

    def test_unknown_path_mode(self):
        with pytest.raises(MalformedOutputError, match="system/app"):
            ModuleRules.from_dict({"paths": {"system/app": "copy"}})

    def test_to_dict(self):
        rules = ModuleRules(MountMode.HYMOFS, {"vendor/lib": MountMode.IGNORE})
        assert rules.to_dict() == {"default_mode": "hymofs", "paths": {"vendor/lib": "ignore"}}


class TestModule:
    """Test Module parsing."""

    def test_minimal_entry(self):
        module = Module.from_dict({"id": "m1"})
        assert module.id == "m1"
        assert module.mode == "auto"
        assert module.is_mounted is False
        assert module.enabled is None
        assert module.rules == ModuleRules()

    def test_full_entry(self):
        module = Module.from_dict({
            "id": "m1",
            "name": "Fonts",
            "version": "2.0",
            "author": "me",
            "description": "d",
            "mode": "magic",
            "is_mounted": True,
            "enabled": False,
            "source_path": "/data/adb/modules/m1",
            "rules": {"default_mode": "magic", "paths": {}},
        })
        assert module.name == "Fonts"
        assert module.enabled is False
        assert module.source_path == "/data/adb/modules/m1"
        assert module.rules.default_mode is MountMode.MAGIC

    def test_missing_id(self):
        with pytest.raises(MalformedOutputError, match="id"):
            Module.from_dict({"name": "no id"})

    def test_not_an_object(self):
        with pytest.raises(MalformedOutputError):
            Module.from_dict(["m1"])

    def test_to_dict_omits_unset_optionals(self):
        data = Module(id="m1").to_dict()
        assert "enabled" not in data
        assert "source_path" not in data


class TestHymoFSState:
    def test_from_dict(self):
        state = HymoFSState.from_dict({"loaded": True, "version": 12, "active_features": ["stealth"]})
        assert state.loaded is True
        assert state.version == 12
        assert state.active_features == ["stealth"]
        assert state.error_msg is None


class TestSchemaReaders:
    """Test model.schema readers."""

    def test_parse_json_object_rejects_array(self):
        with pytest.raises(MalformedOutputError):
            parse_json_object("[]")

    def test_parse_json_object_rejects_garbage(self):
        with pytest.raises(MalformedOutputError):
            parse_json_object("Permission denied")

    def test_parse_json_array_rejects_object(self):
        with pytest.raises(MalformedOutputError):
            parse_json_array("{}")

    def test_read_str_missing_required(self):
        with pytest.raises(MalformedOutputError):
            read_str({}, "name")

    def test_read_str_default(self):
        assert read_str({}, "name", "x") == "x"

    def test_read_str_nullable(self):
        assert read_str({"name": None}, "name", nullable=True) is None

    def test_read_bool_rejects_int(self):
        with pytest.raises(MalformedOutputError):
            read_bool({"flag": 1}, "flag")

    def test_read_int_rejects_bool(self):
        with pytest.raises(MalformedOutputError):
            read_int({"version": True}, "version")

    def test_read_str_list_returns_copy(self):
        source = {"items": ["a"]}
        result = read_str_list(source, "items")
        result.append("b")
        assert source["items"] == ["a"]
