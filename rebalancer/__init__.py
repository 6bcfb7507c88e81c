"""
Portfolio Rebalancer - Suggests the buy/sell actions that bring holdings back to target weights.

Exports:
    PricedAsset: Abstract base class for holdings with an on-demand price
    Stock: Holding with a fixed price
    QuotedStock: Holding priced through a PriceSource
    PriceSource: Abstract base class for quote providers
    QuoteBook: In-memory PriceSource
    PriceUnavailableError: Raised when a quote is missing or unusable
    AllocationTarget: Desired fraction of portfolio value for one ticker
    AllocationPolicy: Ordered collection of allocation targets
    RebalanceAction: Suggested BUY/SELL with a share amount
    Rebalancer: Computes rebalance actions for holdings and a policy
    Portfolio: Holdings snapshot paired with its policy
    RebalancerConfig: Thresholds for trades and policy validation
"""

from .config import RebalancerConfig
from .models import AllocationTarget, PricedAsset, RebalanceAction, Stock
from .policy import AllocationPolicy
from .portfolio import Portfolio, Rebalancer
from .prices import PriceSource, PriceUnavailableError, QuoteBook, QuotedStock

__all__ = [
    "PricedAsset",
    "Stock",
    "QuotedStock",
    "PriceSource",
    "QuoteBook",
    "PriceUnavailableError",
    "AllocationTarget",
    "AllocationPolicy",
    "RebalanceAction",
    "Rebalancer",
    "Portfolio",
    "RebalancerConfig",
]
