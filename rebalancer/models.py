"""Data models for the portfolio rebalancer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Literal

ActionType = Literal["BUY", "SELL"]


def to_decimal(value: Decimal | int | float | str, name: str) -> Decimal:
    """Convert a numeric input to a finite Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"{name} must be a number, got {value!r}") from None

    if not result.is_finite():
        raise ValueError(f"{name} must be finite, got {value!r}")
    return result


def validate_ticker(ticker: str) -> None:
    if not isinstance(ticker, str) or not ticker.strip():
        raise ValueError(f"Ticker must be a non-empty string, got {ticker!r}")


class PricedAsset(ABC):
    """A held position whose price is resolved on demand."""

    ticker: str
    shares: Decimal

    @abstractmethod
    def current_price(self) -> Decimal:
        """Return the latest available price per share."""

    def current_value(self) -> Decimal:
        return self.shares * self.current_price()


@dataclass(frozen=True)
class Stock(PricedAsset):
    """A holding with a fixed price, e.g. a snapshot or a test double."""

    ticker: str
    shares: Decimal
    price: Decimal

    def __post_init__(self) -> None:
        validate_ticker(self.ticker)
        shares = to_decimal(self.shares, "shares")
        price = to_decimal(self.price, "price")
        if shares < 0:
            raise ValueError(f"Shares for {self.ticker} must be non-negative, got {shares}")
        if price < 0:
            raise ValueError(f"Price for {self.ticker} must be non-negative, got {price}")
        object.__setattr__(self, "shares", shares)
        object.__setattr__(self, "price", price)

    def current_price(self) -> Decimal:
        return self.price


@dataclass(frozen=True)
class AllocationTarget:
    """Desired fraction of total portfolio value for one ticker."""

    ticker: str
    target_percentage: Decimal

    def __post_init__(self) -> None:
        validate_ticker(self.ticker)
        pct = to_decimal(self.target_percentage, "target_percentage")
        if pct < 0 or pct > 1:
            raise ValueError(
                f"Allocation for {self.ticker} must be between 0 and 1, got {pct}"
            )
        object.__setattr__(self, "target_percentage", pct)


@dataclass(frozen=True)
class RebalanceAction:
    """A suggested trade.

    ``amount`` is the number of shares to transact; ``value`` is the
    currency deviation those shares correct.
    """

    ticker: str
    action: ActionType
    amount: Decimal
    value: Decimal

    def __str__(self) -> str:
        return (
            f"{self.action} {self.amount:.2f} {self.ticker} "
            f"(${self.value:.2f})"
        )
