import pytest

from posture_validator.config import (
    LOG_LEVEL_ENV_VAR,
    ConfigSchemaError,
    ValidatorOptions,
    load_options,
    resolve_logger,
    validate_config,
)
from posture_validator.utils.logger import SilentLogger


class TestValidateConfig:
    def test_accepts_empty_document(self) -> None:
        validate_config({})

    def test_accepts_full_document(self) -> None:
        validate_config({"log_level": "debug", "extension": ".tf"})

    def test_rejects_unknown_keys(self) -> None:
        with pytest.raises(ConfigSchemaError) as exc_info:
            validate_config({"target_type": "google_storage_bucket"})
        assert exc_info.value.errors[0].keyword == "additionalProperties"

    def test_rejects_bad_log_level(self) -> None:
        with pytest.raises(ConfigSchemaError) as exc_info:
            validate_config({"log_level": "verbose"})
        [error] = exc_info.value.errors
        assert error.path == "/log_level"
        assert error.keyword == "enum"

    def test_rejects_extension_without_dot(self) -> None:
        with pytest.raises(ConfigSchemaError):
            validate_config({"extension": "tf"})

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(ConfigSchemaError) as exc_info:
            validate_config(["log_level"])
        assert exc_info.value.errors[0].path == "/"

    def test_error_message_lists_every_problem(self) -> None:
        with pytest.raises(ConfigSchemaError) as exc_info:
            validate_config({"log_level": 1, "extension": 2})
        assert {e.path for e in exc_info.value.errors} == {"/log_level", "/extension"}
        assert "/log_level" in str(exc_info.value)
        assert "/extension" in str(exc_info.value)


class TestLoadOptions:
    def test_loads_yaml(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("log_level: warn\nextension: .hcl\n")
        options = load_options(path)
        assert options.log_level == "warn"
        assert options.extension == ".hcl"

    def test_empty_file_gives_defaults(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")
        options = load_options(path)
        assert options == ValidatorOptions()

    def test_invalid_file_raises(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("log_level: loud\n")
        with pytest.raises(ConfigSchemaError):
            load_options(path)


class TestResolveLogger:
    def test_explicit_logger_wins(self) -> None:
        logger = SilentLogger()
        assert resolve_logger(ValidatorOptions(log_level="debug", logger=logger)) is logger

    def test_options_level(self, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
        assert resolve_logger(ValidatorOptions(log_level="debug")).level == "debug"

    def test_environment_level(self, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "silent")
        assert isinstance(resolve_logger(ValidatorOptions()), SilentLogger)

    def test_invalid_environment_level_falls_back_to_info(self, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
        logger = resolve_logger(ValidatorOptions())
        assert logger.level == "info"
        assert not isinstance(logger, SilentLogger)
