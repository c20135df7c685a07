"""
DOMAIN MODELS — OBSERVED PRICE

Every assignment to ``StockValue.price`` runs, in order:
will-set hooks (new value), the mutation, did-set hooks (old, new).
Equal values are not coalesced.
"""

import logging
from typing import Callable, List, Optional

from market_demo.utils.formatting import format_rupees
from market_demo.utils.notifications import MessageSink, console_sink

logger = logging.getLogger(__name__)

DEFAULT_PRICE = 1000.0

WillSetHook = Callable[[float], None]
DidSetHook = Callable[[float, float], None]


class StockValue:
    """Stock price with change notifications."""

    def __init__(self, price: Optional[float] = None, sink: MessageSink = console_sink):
        self._price = DEFAULT_PRICE if price is None else price
        self._sink = sink
        self._will_set: List[WillSetHook] = [self._announce_will_set]
        self._did_set: List[DidSetHook] = [self._announce_did_set]

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, new_value: float) -> None:
        for hook in self._will_set:
            hook(new_value)
        old_value = self._price
        self._price = new_value
        logger.debug(f"StockValue price {old_value} -> {new_value}")
        for hook in self._did_set:
            hook(old_value, new_value)

    def observe(
        self,
        will_set: Optional[WillSetHook] = None,
        did_set: Optional[DidSetHook] = None,
    ) -> None:
        """Add observers; they run after the built-in announcement of their phase."""
        if will_set is not None:
            self._will_set.append(will_set)
        if did_set is not None:
            self._did_set.append(did_set)

    def _announce_will_set(self, new_value: float) -> None:
        self._sink(f"The stock price will change to {format_rupees(new_value)}")

    def _announce_did_set(self, old_value: float, new_value: float) -> None:
        self._sink(f"The stock price changed from {format_rupees(old_value)} to {format_rupees(new_value)}")
