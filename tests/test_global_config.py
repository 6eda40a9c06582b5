"""Tests for the process-wide default configuration."""

import pytest

from knf import global_config
from knf.config import Config
from knf.core.exceptions import (
    EmptyFileError,
    GlobalNotLoadedError,
    MalformedError,
    NotFoundError,
    StoreNilError,
)
from knf.validators import Validator, empty


class TestGlobalLifecycle:
    """Test loading, replacing and resetting the global config."""

    def test_load_global(self, config_path):
        config = global_config.load_global(config_path)

        assert global_config.get_global() is config
        assert global_config.get_int("formating:test1") == 1

    def test_load_errors(self, empty_config_path, malformed_config_path):
        with pytest.raises(NotFoundError) as exc_info:
            global_config.load_global("/_not_exists_")
        assert str(exc_info.value) == "File /_not_exists_ does not exist"

        with pytest.raises(EmptyFileError):
            global_config.load_global(empty_config_path)

        with pytest.raises(MalformedError):
            global_config.load_global(malformed_config_path)

        assert global_config.get_global() is None

    def test_failed_load_keeps_previous(self, config_path):
        previous = global_config.load_global(config_path)

        with pytest.raises(NotFoundError):
            global_config.load_global("/_not_exists_")

        assert global_config.get_global() is previous

    def test_set_and_reset(self):
        config = Config.from_string("[a]\n x: 1\n")

        global_config.set_global(config)
        assert global_config.get_int("a:x") == 1

        global_config.reset_global()
        assert global_config.get_global() is None

    def test_reload(self, config_path):
        global_config.load_global(config_path)

        changes = global_config.reload()

        assert changes
        assert not any(changes.values())

    def test_reload_not_loaded(self):
        with pytest.raises(GlobalNotLoadedError) as exc_info:
            global_config.reload()

        assert str(exc_info.value) == "Global config is not loaded"


class TestGlobalAccessors:
    """Test module-level accessors."""

    def test_without_global(self):
        """Test every accessor degrades when nothing is loaded."""
        assert global_config.get_str("test") == ""
        assert global_config.get_int("test") == 0
        assert global_config.get_float("test") == 0.0
        assert global_config.get_bool("test") is False
        assert global_config.get_mode("test") == 0
        assert global_config.has_section("test") is False
        assert global_config.has_prop("test") is False
        assert global_config.sections() == []
        assert global_config.props("test") == []

    def test_defaults_without_global(self):
        assert global_config.get_str("string:test100", "fail") == "fail"
        assert global_config.get_bool("boolean:test100", True) is True
        assert global_config.get_int("integer:test100", 9999) == 9999
        assert global_config.get_float("integer:test100", 123.45) == 123.45
        assert global_config.get_mode("file-mode:test100", 0o755) == 0o755

    def test_with_global(self, config_path):
        global_config.load_global(config_path)

        assert global_config.get_str("macro:test3") == "Value is 100.50"
        assert global_config.get_float("integer:test6") == 123.4
        assert global_config.get_bool("boolean:test6") is True
        assert global_config.get_mode("file-mode:test2") == 0o644
        assert global_config.has_section("k") is True
        assert global_config.has_prop("k:t") is True
        assert global_config.sections()[-1] == "k"
        assert global_config.props("k") == ["t"]
        assert global_config.get_str("string:test6", "fail") == "fail"

    def test_validate_without_global(self):
        errors = global_config.validate([])

        assert len(errors) == 1
        assert isinstance(errors[0], StoreNilError)
        assert str(errors[0]) == "Global config struct is nil"

    def test_validate_with_global(self, config_path):
        global_config.load_global(config_path)

        errors = global_config.validate([
            Validator("string:test1", empty),
            Validator("string:test6", empty),
        ])

        assert [str(e) for e in errors] == ["Property string:test6 can't be empty"]
