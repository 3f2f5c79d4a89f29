"""Distribution output formatting."""
from decimal import Decimal
from typing import List, Mapping, Optional, Sequence

from .distribution import Distribution, SymbolSplit, format_plain


def format_distribution(distribution: Distribution, symbol: str) -> str:
    """Render ``$<funds> => <qty> <symbol>``."""
    return f"${distribution.funds:.2f} => {format_plain(distribution.qty)} {symbol}"


def distribution_strings(distributions: Mapping[str, Distribution], splits: Sequence[SymbolSplit]) -> List[str]:
    """One line per split, in the original argument order."""
    return [format_distribution(distributions[s.symbol], s.symbol) for s in splits]


def total_funds(distributions: Mapping[str, Distribution]) -> Decimal:
    total = Decimal(0)
    for distribution in distributions.values():
        total += distribution.funds
    return total


def split_warning(balance: Decimal, distributions: Mapping[str, Distribution]) -> Optional[str]:
    """Return a warning line when the funds do not add back up to the balance."""
    if total_funds(distributions) != balance:
        return f"Warning: balance '{format_plain(balance)}' can not be equally split"
    return None
