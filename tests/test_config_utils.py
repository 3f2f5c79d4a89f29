import logging

import pytest

from coinz.config_utils import (
    ConfigError,
    optional,
    require,
    require_float,
    require_log_level,
    require_positive_float,
)
from coinz.errors import CoinzError


def test_require_returns_value():
    assert require({'COINBASE_API_URL': 'https://api.coinbase.com'}, 'COINBASE_API_URL') == 'https://api.coinbase.com'


@pytest.mark.parametrize('config', [{}, {'KEY': None}, {'KEY': '   '}])
def test_require_rejects_missing_or_blank(config):
    with pytest.raises(ConfigError, match="setting KEY is not set"):
        require(config, 'KEY')


def test_optional_treats_blank_as_none():
    assert optional({'KEY': ''}, 'KEY') is None
    assert optional({}, 'KEY') is None
    assert optional({'KEY': 'coinz.log'}, 'KEY') == 'coinz.log'


def test_require_float():
    assert require_float({'COINZ_TIMEOUT': '15'}, 'COINZ_TIMEOUT') == 15.0
    with pytest.raises(ConfigError, match="is not a number"):
        require_float({'COINZ_TIMEOUT': 'soon'}, 'COINZ_TIMEOUT')


@pytest.mark.parametrize('value', ['0', '-1', 'nan'])
def test_require_positive_float_rejects(value):
    with pytest.raises(ConfigError, match="must be greater than 0"):
        require_positive_float({'COINZ_TIMEOUT': value}, 'COINZ_TIMEOUT')


def test_require_log_level():
    assert require_log_level({'LOG_LEVEL': 'debug'}, 'LOG_LEVEL') == logging.DEBUG
    assert require_log_level({'LOG_LEVEL': 'WARNING'}, 'LOG_LEVEL') == logging.WARNING
    with pytest.raises(ConfigError, match="logging level name"):
        require_log_level({'LOG_LEVEL': 'CHATTY'}, 'LOG_LEVEL')


def test_config_error_is_fatal_coinz_error():
    assert issubclass(ConfigError, CoinzError)
    assert issubclass(ConfigError, ValueError)
