"""Unit tests for the Configuration Manager."""

import json

import pytest

from doc_extraction.config import (
    ConfigurationError,
    ConfigurationManager,
    ExtractorConfig,
    ValidationResult,
)


class TestLoad:
    """Tests for loading configuration from dicts and files."""

    def test_load_from_dict(self):
        manager = ConfigurationManager()

        result = manager.load({
            "classification_labels": ["rule", "note"],
            "confidence_threshold": 0.7,
            "enable_table_extraction": False,
        })

        assert result.is_valid
        assert manager.is_loaded
        assert manager.configuration.classification_labels == ["rule", "note"]
        assert manager.configuration.confidence_threshold == 0.7
        assert manager.configuration.enable_table_extraction is False

    def test_missing_keys_use_defaults(self):
        manager = ConfigurationManager()

        manager.load({"confidence_threshold": 0.6})

        assert manager.configuration.classification_labels == ExtractorConfig().classification_labels
        assert manager.configuration.model_name == ExtractorConfig().model_name

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"model_name": "custom/model"}), encoding="utf-8")
        manager = ConfigurationManager()

        manager.load(path)

        assert manager.configuration.model_name == "custom/model"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationManager().load(tmp_path / "missing.json")

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{broken", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ConfigurationManager().load(path)


class TestValidation:
    """Tests for configuration validation."""

    @pytest.mark.parametrize("threshold", [-0.01, 1.01, "0.5", True])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load({"confidence_threshold": threshold})

        assert exc_info.value.validation_result is not None
        assert not exc_info.value.validation_result.is_valid

    @pytest.mark.parametrize("threshold", [0, 0.0, 1, 1.0])
    def test_boundary_thresholds_are_valid(self, threshold):
        manager = ConfigurationManager()

        manager.load({"confidence_threshold": threshold})

        assert manager.configuration.confidence_threshold == float(threshold)

    @pytest.mark.parametrize("labels", [[], "business_rule", ["ok", ""], ["ok", 3]])
    def test_invalid_labels(self, labels):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load({"classification_labels": labels})

    def test_labels_are_trimmed_and_deduplicated(self):
        manager = ConfigurationManager()

        result = manager.load({"classification_labels": [" rule ", "note", "rule"]})

        assert manager.configuration.classification_labels == ["rule", "note"]
        assert any("Duplicate" in w for w in result.warnings)

    def test_unknown_key_is_a_warning(self):
        result = ConfigurationManager().load({"colour": "blue"})

        assert result.is_valid
        assert any("colour" in w for w in result.warnings)

    def test_table_flag_must_be_bool(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load({"enable_table_extraction": "yes"})

    def test_model_name_must_be_non_empty(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load({"model_name": "  "})

    def test_all_errors_are_collected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load({
                "confidence_threshold": 2,
                "classification_labels": [],
                "model_name": "",
            })

        assert len(exc_info.value.validation_result.errors) == 3

    def test_invalid_configuration_is_not_applied(self):
        manager = ConfigurationManager()
        manager.load({"confidence_threshold": 0.3})

        with pytest.raises(ConfigurationError):
            manager.load({"confidence_threshold": 3})

        assert manager.configuration.confidence_threshold == 0.3

    def test_non_object_configuration(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load(["not", "a", "dict"])


class TestUpdateAndSave:
    """Tests for update, to_dict and save."""

    def test_update_keeps_other_values(self):
        manager = ConfigurationManager()
        manager.load({"classification_labels": ["a", "b"]})

        manager.update(confidence_threshold=0.9)

        assert manager.configuration.confidence_threshold == 0.9
        assert manager.configuration.classification_labels == ["a", "b"]

    def test_save_and_reload(self, tmp_path):
        manager = ConfigurationManager()
        manager.load({"classification_labels": ["x", "y"], "confidence_threshold": 0.65})

        path = manager.save(tmp_path / "saved" / "config.json")
        reloaded = ConfigurationManager()
        reloaded.load(path)

        assert reloaded.to_dict() == manager.to_dict()


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_errors_invalidate_warnings_do_not(self):
        result = ValidationResult(is_valid=True)

        result.add_warning("w1")
        assert result.is_valid

        result.add_error("e1")
        assert not result.is_valid
        assert result.errors == ["e1"]
        assert result.warnings == ["w1"]
