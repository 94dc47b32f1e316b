import logging

from flyme_oauth.config import settings
from flyme_oauth.logger import LOGGER_NAME, setup_logger


def test_level_follows_debug_setting(monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", True)
    assert setup_logger().level == logging.DEBUG
    
    monkeypatch.setattr(settings, "DEBUG", False)
    assert setup_logger().level == logging.INFO

def test_explicit_debug_mode_wins(monkeypatch):
    monkeypatch.setattr(settings, "DEBUG", False)
    
    assert setup_logger(debug_mode=True).level == logging.DEBUG

def test_handler_added_once():
    setup_logger()
    setup_logger()
    
    logger = logging.getLogger(LOGGER_NAME)
    assert logger.name == "flyme_oauth"
    assert len(logger.handlers) == 1
