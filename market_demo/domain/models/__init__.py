"""
Domain Models
Pure in-memory objects; console output goes through injectable sinks.
"""

from market_demo.domain.models.stock import Stock, TechStock
from market_demo.domain.models.portfolio import Portfolio, Investor
from market_demo.domain.models.broker import Broker
from market_demo.domain.models.market_app import StockMarketApp
from market_demo.domain.models.exchange import NSE
from market_demo.domain.models.stock_value import StockValue
from market_demo.domain.models.transaction import StockTransaction, StockLocation
from market_demo.domain.models.regulator import SEBI

__all__ = [
    "Stock",
    "TechStock",
    "Portfolio",
    "Investor",
    "Broker",
    "StockMarketApp",
    "NSE",
    "StockValue",
    "StockTransaction",
    "StockLocation",
    "SEBI",
]
