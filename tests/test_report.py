from decimal import Decimal

from coinz.distribution import Distribution, SymbolSplit
from coinz.report import distribution_strings, format_distribution, split_warning, total_funds


def test_format_distribution():
    dist = Distribution(funds=Decimal('70.00'), qty=Decimal('0.0014000'))
    assert format_distribution(dist, 'BTC') == '$70.00 => 0.0014 BTC'


def test_format_distribution_pads_funds_and_avoids_exponent():
    dist = Distribution(funds=Decimal('5'), qty=Decimal('3.5E+6'))
    assert format_distribution(dist, 'SHIB') == '$5.00 => 3500000 SHIB'


def test_format_distribution_zero_quantity():
    dist = Distribution(funds=Decimal('0.01'), qty=Decimal('0E-7'))
    assert format_distribution(dist, 'BTC') == '$0.01 => 0 BTC'


def test_format_distribution_keeps_integer_zeros():
    dist = Distribution(funds=Decimal('30.00'), qty=Decimal('100'))
    assert format_distribution(dist, 'USDC') == '$30.00 => 100 USDC'


def test_distribution_strings_follow_split_order():
    dists = {
        'ETH': Distribution(funds=Decimal('30.00'), qty=Decimal('0.09')),
        'BTC': Distribution(funds=Decimal('70.00'), qty=Decimal('0.0014')),
    }
    splits = [SymbolSplit('BTC', Decimal('0.7')), SymbolSplit('ETH', Decimal('0.3'))]

    assert distribution_strings(dists, splits) == [
        '$70.00 => 0.0014 BTC',
        '$30.00 => 0.09 ETH',
    ]
    assert distribution_strings(dists, list(reversed(splits))) == [
        '$30.00 => 0.09 ETH',
        '$70.00 => 0.0014 BTC',
    ]


def test_total_funds():
    dists = {
        'BTC': Distribution(funds=Decimal('0.04'), qty=Decimal('1')),
        'ETH': Distribution(funds=Decimal('0.02'), qty=Decimal('1')),
    }
    assert total_funds(dists) == Decimal('0.06')
    assert total_funds({}) == Decimal('0')


def test_split_warning_none_when_even():
    dists = {
        'BTC': Distribution(funds=Decimal('70.00'), qty=Decimal('0.0014')),
        'ETH': Distribution(funds=Decimal('30.00'), qty=Decimal('0.09')),
    }
    assert split_warning(Decimal('100'), dists) is None


def test_split_warning_when_uneven():
    dists = {
        'BTC': Distribution(funds=Decimal('0.04'), qty=Decimal('1')),
        'ETH': Distribution(funds=Decimal('0.02'), qty=Decimal('1')),
    }
    assert split_warning(Decimal('0.05'), dists) == "Warning: balance '0.05' can not be equally split"


def test_split_warning_prints_balance_in_plain_notation():
    dists = {'BTC': Distribution(funds=Decimal('0.04'), qty=Decimal('1'))}
    assert split_warning(Decimal('1E+2'), dists) == "Warning: balance '100' can not be equally split"
    assert split_warning(Decimal('100.50'), dists) == "Warning: balance '100.5' can not be equally split"
