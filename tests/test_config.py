import os
from unittest.mock import patch

import pytest

from boxoffice.config import DEFAULT_BASE_URL, load_config


@patch.dict(os.environ, {"KOBIS_API_KEY": "abc123"}, clear=True)
def test_load_config_defaults():
    config = load_config()

    assert config.kobis.api_key == "abc123"
    assert config.kobis.base_url == DEFAULT_BASE_URL
    assert config.kobis.request_timeout == 30
    assert config.log_level == "INFO"


@patch.dict(os.environ, {
    "KOBIS_API_KEY": "abc123",
    "KOBIS_BASE_URL": "http://localhost:8080/rest/",
    "KOBIS_TIMEOUT": "10",
    "LOG_LEVEL": "debug",
}, clear=True)
def test_load_config_overrides():
    config = load_config()

    assert config.kobis.base_url == "http://localhost:8080/rest"
    assert config.kobis.request_timeout == 10
    assert config.log_level == "debug"


@patch.dict(os.environ, {}, clear=True)
def test_load_config_missing_api_key():
    with pytest.raises(ValueError, match="KOBIS_API_KEY"):
        load_config()


@patch.dict(os.environ, {"KOBIS_API_KEY": "abc123", "KOBIS_TIMEOUT": "soon"}, clear=True)
def test_load_config_invalid_timeout():
    with pytest.raises(ValueError, match="KOBIS_TIMEOUT"):
        load_config()
