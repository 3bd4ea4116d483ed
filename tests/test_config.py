# tests/test_config.py
import logging

from items_api.app.core import logging_config
from items_api.app.core.config import Settings, _env_flag
from items_api.app.core.exceptions import ItemNotFoundError


def test_env_flag(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "Yes")
    assert _env_flag("SOME_FLAG", "false") is True
    monkeypatch.setenv("SOME_FLAG", "0")
    assert _env_flag("SOME_FLAG", "true") is False
    monkeypatch.delenv("SOME_FLAG")
    assert _env_flag("SOME_FLAG", "true") is True


def test_settings_defaults_can_be_overridden():
    settings = Settings(api_port=9000, empty_list_is_error=False)
    assert settings.api_port == 9000
    assert settings.empty_list_is_error is False
    assert settings.project_name


def test_setup_logging_configures_root_once(monkeypatch, tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        logfile = tmp_path / "items.log"
        logging_config.setup_logging("debug", str(logfile))
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging_config.setup_logging("error")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_unknown_level_falls_back_to_info():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        logging_config.setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_resolve_level():
    assert logging_config.resolve_level("debug") == logging.DEBUG
    assert logging_config.resolve_level("Warning") == logging.WARNING
    assert logging_config.resolve_level("chatty") == logging.INFO


def test_uvicorn_loggers_propagate_to_root():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    access = logging.getLogger("uvicorn.access")
    saved_access = access.handlers[:], access.propagate
    root.handlers = []
    access.handlers = [logging.NullHandler()]
    access.propagate = False
    try:
        logging_config.setup_logging("info")
        assert access.handlers == []
        assert access.propagate is True
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        access.handlers, access.propagate = saved_access


def test_not_found_error_payload():
    assert ItemNotFoundError("abc").to_dict() == {
        "detail": "Item not found: abc",
        "code": "ITEM_NOT_FOUND",
        "details": {"item_id": "abc"},
    }
    assert ItemNotFoundError().to_dict() == {"detail": "No items found", "code": "ITEM_NOT_FOUND"}
