"""
DOMAIN MODELS — STOCKS

Listed stocks and their one-line description.
"""

from market_demo.utils.formatting import format_rupees


class Stock:
    """A listed stock identified by its ticker."""

    def __init__(self, ticker: str, price: float):
        self.ticker = ticker
        self.price = price

    def describe(self) -> str:
        return f"{self.ticker}: {format_rupees(self.price)}"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ticker={self.ticker!r}, price={self.price!r})"


class TechStock(Stock):
    """
    Technology-sector stock.
    Adds the company name to the stored state and to the description.
    """

    def __init__(self, ticker: str, price: float, company_name: str):
        super().__init__(ticker, price)
        self.company_name = company_name

    def describe(self) -> str:
        return f"{self.company_name} ({self.ticker}): {format_rupees(self.price)}"
