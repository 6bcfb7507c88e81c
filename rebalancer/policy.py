"""Target allocation policy."""

import logging
from decimal import Decimal
from typing import Iterable, Iterator, Mapping, Optional

from .config import RebalancerConfig
from .models import AllocationTarget

logger = logging.getLogger(__name__)


class AllocationPolicy:
    """An ordered, immutable sequence of allocation targets.

    Targets are expected to sum to 1.0. A policy that doesn't is still
    accepted; the mismatch is logged as a warning and rebalancing proceeds
    with the percentages as given. Duplicate tickers are kept and each entry
    is rebalanced on its own.
    """

    def __init__(
        self,
        targets: Iterable[AllocationTarget],
        config: Optional[RebalancerConfig] = None,
    ) -> None:
        self.config = config or RebalancerConfig()
        self._targets: tuple[AllocationTarget, ...] = tuple(targets)

        total = self.total_percentage
        logger.debug("Total allocation: %s", total)

        if not self.is_fully_allocated:
            logger.warning(
                "Target allocations sum to %s%%, not 100%%", total * 100
            )

    @classmethod
    def from_mapping(
        cls,
        allocation: Mapping[str, Decimal | int | float | str],
        config: Optional[RebalancerConfig] = None,
    ) -> "AllocationPolicy":
        """Build a policy from a ``{ticker: fraction}`` mapping, keeping its order."""
        return cls(
            (AllocationTarget(ticker, pct) for ticker, pct in allocation.items()),
            config=config,
        )

    @property
    def targets(self) -> tuple[AllocationTarget, ...]:
        return self._targets

    @property
    def tickers(self) -> list[str]:
        return [target.ticker for target in self._targets]

    @property
    def total_percentage(self) -> Decimal:
        return sum(
            (target.target_percentage for target in self._targets),
            start=Decimal("0"),
        )

    @property
    def is_fully_allocated(self) -> bool:
        """True when the targets sum to 1.0 within the configured tolerance."""
        deviation = abs(self.total_percentage - Decimal("1"))
        return deviation <= self.config.ALLOCATION_SUM_TOLERANCE

    def __iter__(self) -> Iterator[AllocationTarget]:
        return iter(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def __getitem__(self, index: int) -> AllocationTarget:
        return self._targets[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AllocationPolicy):
            return NotImplemented
        return self._targets == other._targets

    def __hash__(self) -> int:
        return hash(self._targets)

    def __repr__(self) -> str:
        allocation = {t.ticker: str(t.target_percentage) for t in self._targets}
        return f"AllocationPolicy({allocation})"
