"""
DOMAIN MODELS — PORTFOLIO & INVESTOR

A portfolio holds references to Stock objects, so a price change on a held
stock shows up in the portfolio value. No market data fetching.
"""

from typing import Iterable, List, Optional

from market_demo.domain.models.stock import Stock


class Portfolio:
    """
    Ordered collection of stocks.
    """

    def __init__(self, stocks: Iterable[Stock]):
        self.stocks: List[Stock] = list(stocks)

    def portfolio_value(self) -> float:
        return sum((stock.price for stock in self.stocks), 0.0)

    def replace_stocks(self, stocks: Iterable[Stock]) -> None:
        """Swap the whole holding list."""
        self.stocks = list(stocks)

    def __len__(self) -> int:
        return len(self.stocks)


class Investor:
    """
    Investor with an optional portfolio.

    ``Investor(name)`` is the primary constructor; ``Investor.with_stocks``
    chains to it and builds the portfolio in one step.
    """

    def __init__(self, name: str):
        self.name = name
        self.portfolio: Optional[Portfolio] = None

    @classmethod
    def with_stocks(cls, name: str, stocks: Iterable[Stock]) -> "Investor":
        investor = cls(name)
        investor.portfolio = Portfolio(stocks)
        return investor

    def assign_portfolio(self, portfolio: Optional[Portfolio]) -> None:
        self.portfolio = portfolio

    def portfolio_value(self) -> float:
        """Value of the held portfolio, 0.0 when none is assigned"""
        if self.portfolio is None:
            return 0.0
        return self.portfolio.portfolio_value()
