"""Configuration constants for the portfolio rebalancer."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RebalancerConfig:
    """Thresholds used when validating policies and emitting actions."""

    TRADE_THRESHOLD: Decimal = Decimal("0.01")
    ALLOCATION_SUM_TOLERANCE: Decimal = Decimal("0.001")
