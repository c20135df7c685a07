"""
DOMAIN MODELS — VALUE TYPES

Plain value records. Assignment in Python aliases, so copies are made
explicitly with ``copy()``; a copy never shares state with its source.
"""

from dataclasses import dataclass, replace


@dataclass
class StockTransaction:
    """Shares bought in one stock."""
    stock_name: str
    shares_bought: int

    def update_shares(self, count: int) -> None:
        """Add ``count`` shares to this transaction only."""
        self.shares_bought += count

    def copy(self) -> "StockTransaction":
        return replace(self)

    def summary(self) -> str:
        return f"Updated shares for {self.stock_name}: {self.shares_bought} shares"


@dataclass
class StockLocation:
    """Exchange building coordinates."""
    latitude: float
    longitude: float

    def copy(self) -> "StockLocation":
        return replace(self)

    def describe(self, label: str) -> str:
        return f"{label}: {float(self.latitude)!r}, {float(self.longitude)!r}"
