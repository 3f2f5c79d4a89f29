#!/usr/bin/env python3
"""Dry-run smoke test (no network).

Runs the full argument -> rates -> distribution -> output flow against a fake
Coinbase client. This is meant as a quick sanity check after refactors.

Usage:
    ./.venv/bin/python -m scripts.smoke_dry_run
"""

from __future__ import annotations

import io
from typing import Dict, Optional

from coinz.coinbase.client import RatesResponse
from coinz.errors import SymbolNotFoundError
from coinz.main import run


class FakeCoinbaseClient:
    def __init__(self, rates: Optional[Dict[str, str]] = None):
        self._rates = rates if rates is not None else {
            "BTC": "0.00002",
            "ETH": "0.003",
            "SOL": "0.0071",
        }
        self.calls = 0

    def get_exchange_rates(self, currency: str = "USD") -> RatesResponse:
        self.calls += 1
        return RatesResponse(currency=currency, rates=dict(self._rates))


def _run_even_split_smoke() -> None:
    out = io.StringIO()
    client = FakeCoinbaseClient()
    run(["100", "BTC", "ETH"], client, out)

    lines = out.getvalue().splitlines()
    assert lines == ["$70.00 => 0.0014 BTC", "$30.00 => 0.09 ETH"], lines
    assert client.calls == 1


def _run_uneven_split_smoke() -> None:
    out = io.StringIO()
    run(["0.05", "ETH", "SOL"], FakeCoinbaseClient(), out)

    lines = out.getvalue().splitlines()
    assert lines[0].startswith("Warning: balance '0.05'"), lines
    assert [line.split()[-1] for line in lines[1:]] == ["ETH", "SOL"], lines


def _run_missing_symbol_smoke() -> None:
    out = io.StringIO()
    try:
        run(["100", "BTC", "DOGE"], FakeCoinbaseClient(), out)
    except SymbolNotFoundError:
        pass
    else:
        raise AssertionError("expected SymbolNotFoundError for DOGE")
    assert out.getvalue() == ""


def main() -> None:
    _run_even_split_smoke()
    _run_uneven_split_smoke()
    _run_missing_symbol_smoke()
    print("smoke_dry_run: OK")


if __name__ == "__main__":
    main()
