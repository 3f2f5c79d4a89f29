"""coinz: split a USD balance 70/30 across two symbols at live Coinbase rates.

Usage:
    coinz 100 BTC ETH
"""
import os
import sys
import logging
from typing import Any, Dict, Optional, Sequence, TextIO

from dotenv import load_dotenv

from .args import USAGE, parse_args
from .coinbase.client import DEFAULT_BASE_URL, CoinbaseClient
from .config_utils import optional, require, require_log_level, require_positive_float
from .distribution import calculate_distributions
from .errors import ArgumentCountError, CoinzError
from .report import distribution_strings, split_warning, total_funds

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config() -> Dict[str, Any]:
    """Build the run configuration from the environment."""
    return {
        'COINBASE_API_URL': os.getenv('COINBASE_API_URL', DEFAULT_BASE_URL),
        'COINZ_TIMEOUT': os.getenv('COINZ_TIMEOUT', '15'),
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'WARNING'),
        'COINZ_LOG_FILE': os.getenv('COINZ_LOG_FILE'),
    }


def configure_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)


def run(argv: Sequence[str], client: Any, out: Optional[TextIO] = None) -> None:
    """
    Validate arguments, fetch rates and print the distribution.

    Args:
        argv: Command-line arguments without the program name
        client: Object with a ``get_exchange_rates(currency)`` method
        out: Output stream (defaults to stdout)

    Nothing is written to ``out`` unless every stage succeeds.
    """
    if out is None:
        out = sys.stdout

    balance, splits = parse_args(argv)

    rates = client.get_exchange_rates('USD')
    distributions = calculate_distributions(rates.rates, balance, splits)

    warning = split_warning(balance, distributions)
    if warning:
        logger.info(f"Rounded funds total {total_funds(distributions)} across {len(distributions)} symbols")
        print(warning, file=out)

    print("\n".join(distribution_strings(distributions, splits)), file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    load_dotenv()
    config = load_config()

    try:
        configure_logging(
            require_log_level(config, 'LOG_LEVEL'),
            optional(config, 'COINZ_LOG_FILE'),
        )
        client = CoinbaseClient(
            base_url=require(config, 'COINBASE_API_URL'),
            timeout=require_positive_float(config, 'COINZ_TIMEOUT'),
        )
    except CoinzError as e:
        logger.critical(e)
        return 1

    try:
        with client:
            run(argv, client)
    except ArgumentCountError as e:
        print(USAGE)
        logger.critical(e)
        return 1
    except CoinzError as e:
        logger.critical(e)
        return 1
    except KeyboardInterrupt:
        logger.critical("rates request cancelled")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
