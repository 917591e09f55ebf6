"""Tests for return codes and logging setup."""

import logging

from account_service.app.core.logging_config import setup_logging
from account_service.app.core.status import ReturnCode


def test_return_code_values():
    assert [int(code) for code in ReturnCode] == [200, 201, 202, 400, 403, 404, 405, 500]
    assert ReturnCode(404) is ReturnCode.NOTFOUND


def test_setup_logging_only_configures_once(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("debug", str(tmp_path / "service.log"))
    handlers = list(root.handlers)
    setup_logging("error")

    try:
        assert root.level == logging.DEBUG
        assert root.handlers == handlers
        assert any(isinstance(h, logging.FileHandler) for h in handlers)
    finally:
        for handler in handlers:
            handler.close()
