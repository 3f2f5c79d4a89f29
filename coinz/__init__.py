"""Split a USD balance across crypto-asset symbols using live Coinbase rates."""

__version__ = "1.0.0"
