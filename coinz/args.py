"""Command-line argument validation."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import List, Sequence, Tuple

from .distribution import SymbolSplit, format_plain, parse_decimal, round_bank
from .errors import (
    ArgumentCountError,
    BalanceParseError,
    BalanceTooLowError,
    SubpennyPrecisionError,
    SymbolError,
)

USAGE = "Usage: coinz <AMOUNT_USD> <symbol_1> <symbol_2>"

DEFAULT_SPLITS: Tuple[Decimal, ...] = (Decimal("0.7"), Decimal("0.3"))

SUBPENNY_FAQ = "https://www.sec.gov/divisions/marketreg/subpenny612faq.htm"


def parse_balance(text: str) -> Decimal:
    """Parse a USD balance: positive and at most two decimal places."""
    try:
        balance = parse_decimal(text)
    except (InvalidOperation, ValueError) as e:
        raise BalanceParseError(f"failed to parse balance '{text}': {e}") from e

    if balance <= 0:
        raise BalanceTooLowError(f"balance of {format_plain(balance)} is too low to trade")

    if balance != round_bank(balance):
        raise SubpennyPrecisionError(f"subpenny quoting is illegal {SUBPENNY_FAQ}  '{text}'")

    return balance


def build_splits(symbols: Sequence[str], fractions: Sequence[Decimal] = DEFAULT_SPLITS) -> List[SymbolSplit]:
    """Pair symbols with split fractions, keeping argument order."""
    if len(symbols) != len(fractions):
        raise ArgumentCountError(
            f"expected {len(fractions)} symbols, got {len(symbols)}"
        )

    splits: List[SymbolSplit] = []
    for symbol, fraction in zip(symbols, fractions):
        if not symbol or not symbol.strip():
            raise SymbolError(f"symbol must not be empty, got {symbol!r}")
        splits.append(SymbolSplit(symbol=symbol, split=fraction))
    return splits


def parse_args(argv: Sequence[str]) -> Tuple[Decimal, List[SymbolSplit]]:
    """Validate ``<balance> <symbol_1> <symbol_2>`` (program name excluded).

    Could be reworked to accept any number of symbol/fraction pairs summing to 1.
    """
    if len(argv) != 3:
        raise ArgumentCountError("incorrect number of arguments")

    balance = parse_balance(argv[0])
    splits = build_splits(argv[1:])
    return balance, splits
