import logging
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from .config import RebalancerConfig
from .models import ActionType, PricedAsset, RebalanceAction
from .policy import AllocationPolicy

logger = logging.getLogger(__name__)


class Rebalancer:
    """Computes the trades that bring holdings back to a target allocation.

    Holdings whose ticker is not in the policy count towards the total value
    but never get an action. Policy tickers with no holding are skipped as
    well, so no action ever opens a new position.
    """

    def __init__(self, config: Optional[RebalancerConfig] = None) -> None:
        self.config = config or RebalancerConfig()

    def total_value(self, holdings: Iterable[PricedAsset]) -> Decimal:
        return sum(
            (asset.shares * asset.current_price() for asset in holdings),
            start=Decimal("0"),
        )

    def rebalance(
        self,
        holdings: Iterable[PricedAsset],
        policy: AllocationPolicy,
    ) -> list[RebalanceAction]:
        """Calculate the actions needed to rebalance holdings to the policy.

        Each holding's price is read once per call, so a moving feed can't
        change prices between the total and the per-ticker deviations.
        A matching holding priced at zero is skipped with a warning rather
        than sized to an infinite share amount.

        Args:
            holdings: Current positions. When a ticker appears more than
                once, the first position is the one traded.
            policy: Target allocation, iterated in order.

        Returns:
            List of RebalanceAction objects in policy order. Targets already
            within the trade threshold are omitted.
        """
        priced = [(asset, asset.current_price()) for asset in holdings]
        total = sum((asset.shares * price for asset, price in priced), start=Decimal("0"))
        logger.debug("Total portfolio value: %s", total)

        actions: list[RebalanceAction] = []

        for target in policy:
            target_value = total * target.target_percentage

            match = _find_holding(priced, target.ticker)
            if match is None:
                continue

            asset, price = match
            difference = target_value - asset.shares * price

            if abs(difference) <= self.config.TRADE_THRESHOLD:
                continue

            if price == 0:
                logger.warning(
                    "Skipping %s: price is zero, cannot size a %s deviation",
                    target.ticker, difference,
                )
                continue

            action: ActionType = "BUY" if difference > 0 else "SELL"
            rebalance_action = RebalanceAction(
                ticker=target.ticker,
                action=action,
                amount=abs(difference) / price,
                value=abs(difference),
            )
            logger.debug("Suggested action: %s", rebalance_action)
            actions.append(rebalance_action)

        return actions


def _find_holding(
    priced: Sequence[tuple[PricedAsset, Decimal]], ticker: str
) -> Optional[tuple[PricedAsset, Decimal]]:
    return next((entry for entry in priced if entry[0].ticker == ticker), None)


class Portfolio:
    """A snapshot of holdings paired with the policy they should follow."""

    def __init__(
        self,
        holdings: Iterable[PricedAsset],
        policy: AllocationPolicy,
        rebalancer: Optional[Rebalancer] = None,
    ) -> None:
        self.holdings: tuple[PricedAsset, ...] = tuple(holdings)
        self.policy = policy
        self.rebalancer = rebalancer or Rebalancer()

    def total_value(self) -> Decimal:
        return self.rebalancer.total_value(self.holdings)

    def current_allocation(self) -> dict[str, Decimal]:
        total = self.total_value()
        if total == 0:
            return {}

        allocation: dict[str, Decimal] = {}
        for asset in self.holdings:
            allocation[asset.ticker] = (
                allocation.get(asset.ticker, Decimal("0")) + asset.current_value() / total
            )
        return allocation

    def target_allocation(self) -> dict[str, Decimal]:
        allocation: dict[str, Decimal] = {}
        for target in self.policy:
            allocation.setdefault(target.ticker, target.target_percentage)
        return allocation

    def rebalance(self) -> list[RebalanceAction]:
        return self.rebalancer.rebalance(self.holdings, self.policy)

    def __repr__(self) -> str:
        return (
            f"Portfolio(holdings={[asset.ticker for asset in self.holdings]}, "
            f"total_value={self.total_value()}, "
            f"policy={self.policy!r})"
        )
