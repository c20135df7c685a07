"""
DOMAIN MODELS — USER FUNDS

Construction with negative funds produces no instance.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StockMarketApp:
    """Trading app session holding the user's funds - Immutable"""
    user_funds: float

    def __post_init__(self):
        if self.user_funds < 0:
            raise ValueError("User funds cannot be negative")

    @classmethod
    def create(cls, funds: float) -> Optional["StockMarketApp"]:
        """
        Build an app for ``funds``.

        Returns None instead of raising when funds are negative.
        """
        if funds < 0:
            logger.debug(f"Rejected StockMarketApp with negative funds: {funds}")
            return None
        return cls(user_funds=funds)
