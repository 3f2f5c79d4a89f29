"""Error kinds raised by coinz.

Every error is fatal to a run; ``main()`` reports it and exits non-zero.
"""

from __future__ import annotations


class CoinzError(Exception):
    pass


class ArgumentCountError(CoinzError, ValueError):
    pass


class BalanceParseError(CoinzError, ValueError):
    pass


class BalanceTooLowError(CoinzError, ValueError):
    pass


class SubpennyPrecisionError(CoinzError, ValueError):
    pass


class SymbolError(CoinzError, ValueError):
    pass


class NetworkError(CoinzError):
    """Connection failure, timeout or cancellation of the rates request."""


class HTTPStatusError(CoinzError):
    """The rates endpoint answered with a non-200 status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"request failed status={status_code} message={body}")
        self.status_code = status_code
        self.body = body


class ResponseParseError(CoinzError, ValueError):
    pass


class SymbolNotFoundError(CoinzError, LookupError):
    pass


class RateParseError(CoinzError, ValueError):
    pass
