import logging

import pytest

from summit_backend.config import Settings
from summit_backend.logging_config import APP_LOGGER, setup_logging


def test_settings_defaults():
    config = Settings(_env_file=None)

    assert config.api_prefix == "/fake"
    assert config.port == 8080
    assert config.log_file is None


def test_settings_parse_comma_separated_origins():
    config = Settings(_env_file=None, frontend_allowed_origins="http://a.test, http://b.test")

    assert config.frontend_allowed_origins == ("http://a.test", "http://b.test")


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUMMIT_API_PREFIX", "/summit")
    monkeypatch.setenv("SUMMIT_FRONTEND_ALLOWED_ORIGINS", '["http://map.test"]')

    config = Settings(_env_file=None)

    assert config.api_prefix == "/summit"
    assert config.frontend_allowed_origins == ("http://map.test",)


def test_settings_reject_invalid_port():
    with pytest.raises(ValueError):
        Settings(_env_file=None, port=0)


def test_settings_read_comma_separated_origins_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUMMIT_FRONTEND_ALLOWED_ORIGINS", "http://a.test,http://b.test")

    config = Settings(_env_file=None)

    assert config.frontend_allowed_origins == ("http://a.test", "http://b.test")


def test_settings_read_single_origin_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUMMIT_FRONTEND_ALLOWED_ORIGINS", "http://a.test")

    config = Settings(_env_file=None)

    assert config.frontend_allowed_origins == ("http://a.test",)


def test_settings_empty_origins_disable_cors(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SUMMIT_FRONTEND_ALLOWED_ORIGINS", "")

    config = Settings(_env_file=None)

    assert config.frontend_allowed_origins == ()


@pytest.fixture
def bare_logging(monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
    root = logging.getLogger()
    app_logger = logging.getLogger(APP_LOGGER)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(app_logger, "level", app_logger.level)
    return root


def test_setup_logging_adds_root_handler_once(bare_logging: logging.Logger):
    setup_logging("debug")
    setup_logging("warning")

    assert len(bare_logging.handlers) == 1
    assert bare_logging.level == logging.DEBUG


def test_setup_logging_always_applies_level_to_service_logger(bare_logging: logging.Logger):
    setup_logging("debug")
    setup_logging("warning")

    assert logging.getLogger(APP_LOGGER).level == logging.WARNING
    assert logging.getLogger("summit_backend.data.poi_repository").getEffectiveLevel() == logging.WARNING


def test_setup_logging_leaves_existing_root_handlers_alone(bare_logging: logging.Logger):
    existing = logging.NullHandler()
    bare_logging.addHandler(existing)

    setup_logging("error")

    assert bare_logging.handlers == [existing]
    assert logging.getLogger(APP_LOGGER).level == logging.ERROR
