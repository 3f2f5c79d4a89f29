"""Balance distribution across symbols.

These helpers are pure (no API calls) so they can be unit tested. All money and
rate values are ``Decimal``; products are computed exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext
from typing import Dict, Mapping, Sequence

from .errors import RateParseError, SymbolNotFoundError

PENNY_PLACE = 2
PENNY = Decimal(1).scaleb(-PENNY_PLACE)

# Signed digits with optional fraction and exponent; no whitespace, underscores or NaN/Infinity.
DECIMAL_RE = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


@dataclass(frozen=True)
class SymbolSplit:
    symbol: str
    split: Decimal


@dataclass(frozen=True)
class Distribution:
    funds: Decimal
    qty: Decimal


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def parse_decimal(text: str) -> Decimal:
    """Parse a plain decimal literal such as ``-12.50`` or ``1e2``."""
    if not isinstance(text, str) or not DECIMAL_RE.fullmatch(text):
        raise ValueError(f"invalid decimal literal {text!r}")
    return Decimal(text)


def format_plain(value: Decimal) -> str:
    # Fixed notation without trailing fractional zeros: 0.0014000 -> 0.0014, 3.5E+6 -> 3500000
    text = format(value, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text in ('', '-0'):
        text = '0'
    return text


def exact_mul(a: Decimal, b: Decimal) -> Decimal:
    """Multiply without rounding to the ambient context precision."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits(a) + _digits(b))
        return a * b


def round_bank(value: Decimal, places: int = PENNY_PLACE) -> Decimal:
    """Round half to even at ``places`` decimal places (0.125 -> 0.12, 0.135 -> 0.14)."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN)


def get_rate(rates: Mapping[str, str], symbol: str) -> Decimal:
    """Return the parsed rate for ``symbol``."""
    if symbol not in rates:
        raise SymbolNotFoundError(f"unable to find rate for symbol '{symbol}' not found")

    rate_str = rates[symbol]
    try:
        return parse_decimal(rate_str)
    except (InvalidOperation, ValueError) as e:
        raise RateParseError(f"failed to parse '{symbol}' rate of '{rate_str}': {e}") from e


def calculate_distribution(rate: Decimal, balance: Decimal, symbol_split: SymbolSplit) -> Distribution:
    """Calculate funds and quantity for a single split.

    ``funds`` is the balance share rounded half to even at the penny;
    ``qty`` is ``funds * rate`` at full precision.
    """
    funds = round_bank(exact_mul(balance, symbol_split.split))
    return Distribution(funds=funds, qty=exact_mul(funds, rate))


def calculate_distributions(
    rates: Mapping[str, str],
    balance: Decimal,
    splits: Sequence[SymbolSplit],
) -> Dict[str, Distribution]:
    """Calculate the distribution for every split, keyed by symbol.

    A symbol listed twice keeps the later split's result. Any failure aborts
    the calculation and nothing is returned.
    """
    distributions: Dict[str, Distribution] = {}
    for symbol_split in splits:
        rate = get_rate(rates, symbol_split.symbol)
        distributions[symbol_split.symbol] = calculate_distribution(rate, balance, symbol_split)
    return distributions
