"""Price sources and holdings priced through them."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional

from .models import PricedAsset, validate_ticker, to_decimal


class PriceUnavailableError(ValueError):
    """Raised when a price source has no usable quote for a ticker."""

    def __init__(self, ticker: str, reason: str = "no quote available") -> None:
        super().__init__(f"Price for {ticker} unavailable: {reason}")
        self.ticker = ticker


class PriceSource(ABC):
    """Abstract base class for quote providers."""

    @abstractmethod
    def get_price(self, ticker: str) -> Decimal:
        """Return the latest price for ``ticker``.

        Raises:
            PriceUnavailableError: If no finite, non-negative quote exists.
        """
        pass


class QuoteBook(PriceSource):
    """In-memory quotes, updated by whatever feed the caller wires in."""

    def __init__(self, quotes: Optional[Mapping[str, Decimal | int | float | str]] = None) -> None:
        self._quotes: dict[str, Decimal] = {}
        for ticker, price in (quotes or {}).items():
            self.update(ticker, price)

    def update(self, ticker: str, price: Decimal | int | float | str) -> None:
        validate_ticker(ticker)
        value = to_decimal(price, "price")
        if value < 0:
            raise ValueError(f"Price for {ticker} must be non-negative, got {value}")
        self._quotes[ticker] = value

    def remove(self, ticker: str) -> Optional[Decimal]:
        return self._quotes.pop(ticker, None)

    def get_price(self, ticker: str) -> Decimal:
        try:
            return self._quotes[ticker]
        except KeyError:
            raise PriceUnavailableError(ticker) from None

    def __contains__(self, ticker: object) -> bool:
        return ticker in self._quotes

    def __len__(self) -> int:
        return len(self._quotes)


@dataclass(frozen=True)
class QuotedStock(PricedAsset):
    """A holding whose price is read from a PriceSource on every lookup."""

    ticker: str
    shares: Decimal
    source: PriceSource

    def __post_init__(self) -> None:
        validate_ticker(self.ticker)
        shares = to_decimal(self.shares, "shares")
        if shares < 0:
            raise ValueError(f"Shares for {self.ticker} must be non-negative, got {shares}")
        object.__setattr__(self, "shares", shares)

    def current_price(self) -> Decimal:
        price = self.source.get_price(self.ticker)
        try:
            price = to_decimal(price, "price")
        except ValueError as e:
            raise PriceUnavailableError(self.ticker, str(e)) from e
        if price < 0:
            raise PriceUnavailableError(self.ticker, f"negative quote {price}")
        return price
