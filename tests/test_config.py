import logging

from extractorapp.api.config import (
    DEFAULT_BULK_TIMEOUT,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    configure_logging,
    load_settings,
)


def test_defaults():
    settings = load_settings({})
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.timeout == DEFAULT_TIMEOUT == 15
    assert settings.bulk_timeout == DEFAULT_BULK_TIMEOUT == 20
    assert settings.max_workers is None
    assert settings.episode_match == "name"
    assert settings.headers == {"User-Agent": DEFAULT_USER_AGENT}


def test_overrides():
    settings = load_settings({
        "EXTRACTOR_USER_AGENT": "TestAgent/1.0",
        "EXTRACTOR_TIMEOUT": "5",
        "EXTRACTOR_BULK_TIMEOUT": "7.5",
        "EXTRACTOR_MAX_WORKERS": "8",
        "EXTRACTOR_EPISODE_MATCH": "URL",
        "EXTRACTOR_LOG_LEVEL": "debug",
    })
    assert settings.user_agent == "TestAgent/1.0"
    assert settings.timeout == 5
    assert settings.bulk_timeout == 7.5
    assert settings.max_workers == 8
    assert settings.episode_match == "url"
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back_to_defaults():
    settings = load_settings({
        "EXTRACTOR_TIMEOUT": "soon",
        "EXTRACTOR_BULK_TIMEOUT": "-1",
        "EXTRACTOR_MAX_WORKERS": "many",
        "EXTRACTOR_EPISODE_MATCH": "fuzzy",
        "EXTRACTOR_LOG_LEVEL": "LOUD",
    })
    assert settings.timeout == DEFAULT_TIMEOUT
    assert settings.bulk_timeout == DEFAULT_BULK_TIMEOUT
    assert settings.max_workers is None
    assert settings.episode_match == "name"
    assert settings.log_level == "INFO"


def test_zero_workers_means_unbounded():
    assert load_settings({"EXTRACTOR_MAX_WORKERS": "0"}).max_workers is None


def test_configure_logging_quiets_urllib3():
    configure_logging(load_settings({}))
    assert logging.getLogger("urllib3").level == logging.WARNING
