"""Tests for ConfigStore - the in-memory settings store."""

import json
import threading

import pytest

from core.exceptions import ValidationError
from core.models import ConfigEntry
from secconfig.config import ConfigStore
from secconfig.core.config import SecurityConfig


class TestSeeding:
    """Test the built-in entries installed on construction."""
    
    def test_builtin_values(self, store, builtin_values):
        """Test a new store holds exactly the six built-in values."""
        assert store.get_all() == builtin_values
        assert len(store) == 6
    
    def test_builtin_order(self, store, builtin_values):
        """Test built-ins are kept in declaration order."""
        assert store.keys() == list(builtin_values)
    
    def test_builtin_metadata(self, store):
        """Test descriptions and mutability of built-in entries."""
        entry = store.get_metadata("detection.confidenceThreshold")
        
        assert entry == ConfigEntry(
            key="detection.confidenceThreshold",
            value=0.7,
            description="Minimum confidence for alerts",
            mutable=True
        )
        assert store.get_metadata("logging.level").description == "Log level"
        assert store.get_metadata("containment.threshold").description == "Threat level for auto-containment"
    
    def test_protected_builtins(self, store):
        """Test which built-ins are immutable."""
        immutable = [entry.key for entry in store.get_immutable()]
        mutable = [entry.key for entry in store.get_mutable()]
        
        assert immutable == ["detection.enabled", "containment.autoContain", "logging.enabled"]
        assert mutable == ["detection.confidenceThreshold", "containment.threshold", "logging.level"]
    
    def test_custom_defaults(self):
        """Test seeding from caller-supplied settings."""
        defaults = SecurityConfig(containment={"threshold": 5}, logging={"level": "debug"})
        store = ConfigStore(defaults=defaults)
        
        assert store.get("containment.threshold") == 5
        assert store.get("logging.level") == "debug"
        assert store.defaults == defaults
    
    def test_defaults_property_is_a_copy(self, store):
        """Test the defaults snapshot cannot be changed through the property."""
        store.defaults.containment.threshold = 99
        
        assert store.defaults.containment.threshold == 3


class TestReadWrite:
    """Test set, get, has and get_all."""
    
    def test_set_then_get(self, store):
        """Test a set value can be read back."""
        for key, value in [("a", 1), ("b.c", "text"), ("d", [1, 2]), ("e", {"x": None}), ("f", False)]:
            store.set(key, value)
            assert store.get(key) == value
    
    def test_get_unknown_key(self, store):
        """Test unknown keys return None or the supplied default."""
        assert store.get("missing") is None
        assert store.get("missing", "fallback") == "fallback"
    
    def test_set_defaults(self, store):
        """Test set without metadata creates a mutable entry with no description."""
        store.set("custom.flag", 42)
        
        entry = store.get_metadata("custom.flag")
        assert entry.mutable is True
        assert entry.description is None
    
    def test_set_overwrites_immutable_entry(self, store):
        """Test set replaces an immutable entry including its flags."""
        store.set("detection.enabled", False, "Overridden", True)
        
        entry = store.get_metadata("detection.enabled")
        assert entry.value is False
        assert entry.description == "Overridden"
        assert entry.mutable is True
    
    def test_set_can_lock_entry(self, store):
        """Test set can make a mutable key immutable."""
        store.set("logging.level", "error", mutable=False)
        
        assert store.update("logging.level", "debug") is False
        assert store.get("logging.level") == "error"
    
    def test_set_rejects_non_string_key(self, store):
        """Test a non-string key is a programming error."""
        with pytest.raises(ValidationError):
            store.set(123, "value")
    
    def test_has_matches_get_all(self, store):
        """Test has() agrees with the get_all() snapshot."""
        store.set("custom.flag", None)
        snapshot = store.get_all()
        
        for key in list(snapshot) + ["missing", "detection"]:
            assert store.has(key) == (key in snapshot)
            assert (key in store) == (key in snapshot)
    
    def test_dotted_keys_are_opaque(self, store):
        """Test section prefixes are not keys of their own."""
        assert not store.has("detection")
        assert store.get("logging") is None
    
    def test_get_all_is_a_snapshot(self, store):
        """Test get_all() is decoupled from later store mutation."""
        snapshot = store.get_all()
        store.set("custom.flag", 1)
        store.update("logging.level", "debug")
        snapshot["logging.enabled"] = False
        
        assert "custom.flag" not in snapshot
        assert snapshot["logging.level"] == "info"
        assert store.get("logging.enabled") is True


class TestMutabilityGuards:
    """Test update and delete against mutable and immutable entries."""
    
    def test_update_mutable(self, store):
        """Test update changes only the value of a mutable entry."""
        assert store.update("logging.level", "debug") is True
        
        entry = store.get_metadata("logging.level")
        assert entry.value == "debug"
        assert entry.description == "Log level"
        assert entry.mutable is True
    
    def test_update_immutable(self, store):
        """Test update is rejected for an immutable entry."""
        assert store.update("detection.enabled", False) is False
        assert store.get("detection.enabled") is True
    
    def test_update_unknown(self, store):
        """Test update does not create missing keys."""
        assert store.update("missing", 1) is False
        assert not store.has("missing")
    
    def test_update_keeps_order(self, store, builtin_values):
        """Test update keeps the entry in place."""
        store.update("containment.threshold", 7)
        
        assert store.keys() == list(builtin_values)
    
    def test_delete_mutable(self, store):
        """Test delete removes a mutable entry."""
        assert store.delete("containment.threshold") is True
        assert not store.has("containment.threshold")
        assert store.get_metadata("containment.threshold") is None
    
    def test_delete_immutable(self, store):
        """Test delete is rejected for an immutable entry."""
        assert store.delete("logging.enabled") is False
        assert store.has("logging.enabled")
    
    def test_delete_unknown(self, store):
        """Test delete of an unknown key reports failure."""
        assert store.delete("missing") is False
        assert len(store) == 6
    
    def test_metadata_entries_are_stable(self, store):
        """Test entries handed out earlier do not change on update."""
        before = store.get_metadata("logging.level")
        store.update("logging.level", "warn")
        
        assert before.value == "info"
        assert store.get_metadata("logging.level").value == "warn"


class TestExportImport:
    """Test JSON export and import."""
    
    def test_export_format(self, store, builtin_values):
        """Test export is a two-space indented JSON object of values."""
        exported = store.export_config()
        
        assert exported == json.dumps(builtin_values, indent=2)
        assert exported.startswith('{\n  "detection.enabled": true,')
        assert json.loads(exported) == builtin_values
    
    def test_export_has_no_metadata(self, store):
        """Test descriptions and flags are not exported."""
        exported = store.export_config()
        
        assert "description" not in exported
        assert "Enable threat detection" not in exported
        assert "mutable" not in exported
    
    def test_export_unserializable_value(self, store):
        """Test values JSON cannot represent are rendered as strings."""
        store.set("custom.obj", ConfigStore)

        data = json.loads(store.export_config())
        assert data["custom.obj"] == str(ConfigStore)
    
    def test_round_trip(self, store):
        """Test export then import into a fresh store reproduces the values."""
        store.set("custom.flag", 42, "test", True)
        store.set("custom.list", ["a", {"b": 1}], mutable=False)
        store.update("detection.confidenceThreshold", 0.9)
        
        fresh = ConfigStore()
        assert fresh.import_config(store.export_config()) is True
        
        assert fresh.get_all() == store.get_all()
        assert fresh.get_immutable() == []
        assert all(entry.description is None for entry in fresh.get_mutable())
    
    def test_import_unlocks_builtins(self, store):
        """Test imported keys overwrite immutable entries and become mutable."""
        assert store.import_config('{"detection.enabled": false}') is True
        
        entry = store.get_metadata("detection.enabled")
        assert entry.value is False
        assert entry.mutable is True
        assert entry.description is None
        assert store.delete("detection.enabled") is True
    
    def test_import_adds_new_keys(self, store):
        """Test import appends keys not yet in the store."""
        assert store.import_config('{"response.playbook": "isolate", "response.retries": 2}')
        
        assert store.keys()[-2:] == ["response.playbook", "response.retries"]
        assert store.get("response.retries") == 2
    
    def test_import_empty_object(self, store, builtin_values):
        """Test an empty object is accepted and changes nothing."""
        assert store.import_config("{}") is True
        assert store.get_all() == builtin_values
    
    @pytest.mark.parametrize("document", [
        "not valid json",
        '{"detection.enabled": ',
        "",
        "[1, 2]",
        '"text"',
        "42",
        "null",
        '{"a": ' + "[" * 100000 + "]" * 100000 + "}",
    ])
    def test_import_rejected(self, store, builtin_values, document):
        """Test malformed or non-object documents leave the store unchanged."""
        assert store.import_config(document) is False
        assert store.get_all() == builtin_values
        assert len(store.get_immutable()) == 3


class TestOverrideFiles:
    """Test load_file with JSON and YAML documents."""
    
    def test_load_json_file(self, store, tmp_path):
        """Test a JSON override file is applied like an import."""
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"logging.level": "debug", "custom.flag": True}))
        
        assert store.load_file(path) is True
        assert store.get("logging.level") == "debug"
        assert store.get_metadata("custom.flag").mutable is True
    
    def test_load_yaml_file(self, store, tmp_path):
        """Test a YAML override file is applied like an import."""
        path = tmp_path / "overrides.yaml"
        path.write_text("containment.threshold: 5\ncontainment.autoContain: false\n")
        
        assert store.load_file(str(path)) is True
        assert store.get("containment.threshold") == 5
        assert store.get_metadata("containment.autoContain").mutable is True
    
    def test_load_non_mapping(self, store, tmp_path, builtin_values):
        """Test a well-formed document that is not a mapping is rejected."""
        path = tmp_path / "overrides.yml"
        path.write_text("- one\n- two\n")
        
        assert store.load_file(path) is False
        assert store.get_all() == builtin_values
    
    def test_load_empty_yaml(self, store, tmp_path, builtin_values):
        """Test an empty YAML file is rejected without mutation."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        
        assert store.load_file(path) is False
        assert store.get_all() == builtin_values
    
    def test_load_missing_file(self, store, tmp_path):
        """Test a missing file raises ConfigurationError."""
        from core.exceptions import ConfigurationError
        
        with pytest.raises(ConfigurationError, match="Cannot read override file"):
            store.load_file(tmp_path / "missing.json")

    def test_load_non_utf8_file(self, store, tmp_path, builtin_values):
        """Test undecodable bytes raise ConfigurationError without mutation."""
        from core.exceptions import ConfigurationError

        path = tmp_path / "overrides.json"
        path.write_bytes(b'{"logging.level": "\xff"}')

        with pytest.raises(ConfigurationError, match="Cannot read override file") as exc_info:
            store.load_file(path)

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)
        assert store.get_all() == builtin_values

    def test_load_deeply_nested_file(self, store, tmp_path, builtin_values):
        """Test a document too deep to decode raises ConfigurationError."""
        from core.exceptions import ConfigurationError

        path = tmp_path / "overrides.json"
        path.write_text('{"a": ' + "[" * 100000 + "]" * 100000 + "}")

        with pytest.raises(ConfigurationError, match="Cannot parse override file"):
            store.load_file(path)

        assert store.get_all() == builtin_values

    @pytest.mark.parametrize("filename,content", [
        ("broken.json", '{"logging.level": '),
        ("broken.yaml", "logging.level: [debug\n"),
    ])
    def test_load_unparseable_file(self, store, tmp_path, builtin_values, filename, content):
        """Test a syntax error raises ConfigurationError without mutation."""
        from core.exceptions import ConfigurationError
        
        path = tmp_path / filename
        path.write_text(content)
        
        with pytest.raises(ConfigurationError) as exc_info:
            store.load_file(path)
        
        assert exc_info.value.config_key == str(path)
        assert exc_info.value.cause is not None
        assert store.get_all() == builtin_values


class TestReset:
    """Test reset to the built-in entries."""
    
    def test_reset_restores_builtins(self, store, builtin_values):
        """Test reset undoes every kind of change."""
        store.update("logging.level", "error")
        store.delete("containment.threshold")
        store.set("detection.enabled", False)
        store.set("custom.flag", 1)
        store.import_config('{"logging.enabled": false}')
        
        store.reset()
        
        assert store.get_all() == builtin_values
        assert [entry.key for entry in store.get_immutable()] == [
            "detection.enabled", "containment.autoContain", "logging.enabled"
        ]
        assert store.get_metadata("logging.enabled").description == "Enable logging"
    
    def test_reset_uses_store_defaults(self):
        """Test reset reseeds from the settings the store was built with."""
        store = ConfigStore(defaults=SecurityConfig(detection={"confidenceThreshold": 0.95}))
        store.update("detection.confidenceThreshold", 0.1)
        
        store.reset()
        
        assert store.get("detection.confidenceThreshold") == 0.95


class TestScenarios:
    """End-to-end usage scenarios."""
    
    def test_log_level_scenario(self, store):
        """Test updating the log level while detection stays protected."""
        assert store.get("logging.level") == "info"
        
        assert store.update("logging.level", "debug") is True
        assert store.get("logging.level") == "debug"
        
        assert store.update("detection.enabled", False) is False
        assert store.get("detection.enabled") is True
    
    def test_custom_flag_scenario(self, store):
        """Test the life cycle of a custom entry."""
        store.set("custom.flag", 42, "test", True)
        assert store.has("custom.flag")
        
        assert '"custom.flag": 42' in store.export_config()
        
        assert store.delete("custom.flag") is True
        assert not store.has("custom.flag")


class TestThreadSafety:
    """Test concurrent access to a shared store."""
    
    def test_concurrent_writes_and_reads(self, store):
        """Test writers and readers can run at the same time without errors."""
        errors = []
        
        def writer(worker_id: int):
            try:
                for i in range(200):
                    store.set(f"worker{worker_id}.key{i}", i)
                    store.update("containment.threshold", i)
                    store.delete(f"worker{worker_id}.key{i - 1}")
            except Exception as e:
                errors.append(e)
        
        def reader():
            try:
                for _ in range(200):
                    store.get_all()
                    store.get_mutable()
                    store.export_config()
            except Exception as e:
                errors.append(e)
        
        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        assert errors == []
        assert store.get("containment.threshold") == 199
        for n in range(4):
            assert store.get(f"worker{n}.key199") == 199
