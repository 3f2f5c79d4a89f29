"""Coinbase API client."""
from .client import CoinbaseClient, RatesResponse

__all__ = ['CoinbaseClient', 'RatesResponse']
