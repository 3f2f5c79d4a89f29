"""Coinbase exchange-rates API client."""
import time
import json
import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional

import requests

from ..errors import HTTPStatusError, NetworkError, ResponseParseError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.coinbase.com"
DEFAULT_TIMEOUT = 15.0
CHUNK_SIZE = 8192


@dataclass(frozen=True)
class RatesResponse:
    currency: str
    rates: Dict[str, str]


class CoinbaseClient:
    """Wrapper for the public Coinbase v2 REST API.

    Each call makes exactly one HTTP request. There is no retry and no caching.
    """

    BASE_URL = DEFAULT_BASE_URL
    API_VERSION = "v2"

    def __init__(self, base_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize Coinbase API client.

        Args:
            base_url: Override for the API host (defaults to BASE_URL)
            timeout: Overall deadline in seconds for one request, body included
        """
        self.base_url = (base_url or self.BASE_URL).rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'User-Agent': 'Coinz/1.0'
        })

    def __enter__(self) -> "CoinbaseClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """
        Make a single GET request bounded by the client deadline.

        Args:
            endpoint: API endpoint (e.g., 'exchange-rates')
            params: Query parameters

        Returns:
            Raw response body

        Raises:
            NetworkError: On connection failure or when the deadline passes
            HTTPStatusError: If the status code is not 200
        """
        url = f"{self.base_url}/{self.API_VERSION}/{endpoint}"
        deadline = time.monotonic() + self.timeout

        logger.info(f"GET {url} params={params}")
        try:
            remaining = self._remaining(deadline)
            response = self.session.get(url, params=params, timeout=(remaining, remaining), stream=True)
            try:
                self._remaining(deadline)
                body = self._read_body(response, deadline)
            finally:
                response.close()
        except requests.exceptions.Timeout as e:
            logger.error(f"Request to {url} timed out: {e}")
            raise NetworkError(f"failed to request rates: timed out after {self.timeout:g}s") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise NetworkError(f"failed to request rates: {e}") from e

        if response.status_code != 200:
            text = body.decode('utf-8', errors='replace')
            logger.error(f"Request to {url} failed with status {response.status_code}")
            raise HTTPStatusError(response.status_code, text)

        return body

    @staticmethod
    def _remaining(deadline: float) -> float:
        """Seconds left before ``deadline``; raises Timeout once it has passed."""
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise requests.exceptions.Timeout("deadline exceeded")
        return remaining

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        chunks = []
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            self._remaining(deadline)
            if chunk:
                chunks.append(chunk)
        self._remaining(deadline)
        return b''.join(chunks)

    @staticmethod
    def parse_rates(body: bytes) -> RatesResponse:
        """Validate an exchange-rates body and return its currency and rates.

        A missing or null ``data.rates`` is reported separately from a body that
        is not JSON or has fields of the wrong type. An empty rates object is
        valid.
        """
        try:
            payload = json.loads(body)
        except ValueError as e:
            raise ResponseParseError(f"failed to unmarshal response body: {e}") from e

        if not isinstance(payload, dict):
            raise ResponseParseError(
                f"failed to unmarshal response body: expected object, got {type(payload).__name__}"
            )

        data = payload.get('data')
        if data is None:
            raise ResponseParseError("invalid response data rates do not exist")
        if not isinstance(data, dict):
            raise ResponseParseError(
                f"failed to unmarshal response body: 'data' must be an object, got {type(data).__name__}"
            )

        currency = data.get('currency')
        if currency is None:
            currency = ''
        elif not isinstance(currency, str):
            raise ResponseParseError(
                f"failed to unmarshal response body: 'currency' must be a string, got {currency!r}"
            )

        rates = data.get('rates')
        if rates is None:
            raise ResponseParseError("invalid response data rates do not exist")
        if not isinstance(rates, dict):
            raise ResponseParseError(
                f"failed to unmarshal response body: 'rates' must be an object, got {type(rates).__name__}"
            )
        for symbol, rate in rates.items():
            if not isinstance(rate, str):
                raise ResponseParseError(
                    f"failed to unmarshal response body: rate for {symbol!r} must be a string, got {rate!r}"
                )

        return RatesResponse(currency=currency, rates=dict(rates))

    # ==================== PUBLIC ENDPOINTS ====================

    def get_exchange_rates(self, currency: str = 'USD') -> RatesResponse:
        """
        Get exchange rates relative to a quote currency.

        Args:
            currency: Quote currency (e.g., 'USD')

        Returns:
            RatesResponse with the echoed currency and symbol -> rate strings
        """
        body = self._make_request('exchange-rates', {'currency': currency})
        result = self.parse_rates(body)
        logger.info(f"Received {len(result.rates)} rates quoted in {result.currency or currency}")
        return result
