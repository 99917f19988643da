"""
Tests for transport configuration and logging setup.
"""
import io
import logging

import pytest

from fetch_request import HttpxTransport, configure_logging, get_log_level, resolve_transport_config

ENV_KEYS = ("FETCH_REQUEST_FOLLOW_REDIRECTS", "FETCH_REQUEST_TRUST_ENV", "FETCH_REQUEST_PROXY")


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_argument_beats_env_and_config(clean_env):
    clean_env.setenv("FETCH_REQUEST_PROXY", "http://env.local:3128")
    config = resolve_transport_config(proxy="http://arg.local:3128", config={"proxy": "http://cfg.local"})
    assert config.proxy == "http://arg.local:3128"


def test_config_mapping_used_without_env(clean_env):
    config = resolve_transport_config(config={"proxy": "http://cfg.local", "follow_redirects": "no"})
    assert config.proxy == "http://cfg.local"
    assert config.follow_redirects is False


def test_flag_spellings(clean_env):
    clean_env.setenv("FETCH_REQUEST_TRUST_ENV", "Yes")
    assert resolve_transport_config().trust_env is True
    clean_env.setenv("FETCH_REQUEST_TRUST_ENV", "off")
    assert resolve_transport_config().trust_env is False


def test_transport_config_defaults(clean_env):
    config = resolve_transport_config()
    assert config.follow_redirects is True
    assert config.trust_env is False
    assert config.proxy is None


def test_transport_config_from_env(clean_env):
    clean_env.setenv("FETCH_REQUEST_FOLLOW_REDIRECTS", "false")
    clean_env.setenv("FETCH_REQUEST_PROXY", "http://proxy.local:3128")
    config = resolve_transport_config(config={"trust_env": True})

    assert config.follow_redirects is False
    assert config.trust_env is True
    assert config.proxy == "http://proxy.local:3128"

    kwargs = HttpxTransport(config).get_client_kwargs()
    assert kwargs["proxy"] == "http://proxy.local:3128"
    assert kwargs["follow_redirects"] is False


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("FETCH_REQUEST_LOG_LEVEL", "debug")
    assert get_log_level() == "debug"
    monkeypatch.setenv("FETCH_REQUEST_LOG_LEVEL", "verbose")
    assert get_log_level() == "warn"


def test_configure_logging_writes_prefixed_lines():
    stream = io.StringIO()
    logger = configure_logging("info", stream=stream)
    handlers = [h for h in logger.handlers if getattr(h, "_fetch_request", False)]
    try:
        configure_logging("info", stream=stream)
        assert len([h for h in logger.handlers if getattr(h, "_fetch_request", False)]) == 1

        logging.getLogger("fetch_request.completion").info("hello")
        assert "[fetch-request] INFO fetch_request.completion: hello" in stream.getvalue()
    finally:
        for handler in handlers:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
