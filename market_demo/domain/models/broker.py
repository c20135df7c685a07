"""
DOMAIN MODELS — BROKER LIFECYCLE

Ownership of a broker is explicit: whoever constructs it is the first owner,
``retain()`` adds owners and ``release()`` drops them. When the last owner
releases, the teardown hook runs once, synchronously, on the releasing call.
"""

import logging
from typing import Callable, List

from market_demo.utils.notifications import MessageSink, console_sink

logger = logging.getLogger(__name__)


class Broker:
    """Broker handling a number of active clients."""

    def __init__(self, name: str, active_clients: int, sink: MessageSink = console_sink):
        self.name = name
        self.active_clients = active_clients
        self._sink = sink
        self._owners = 1
        self._torn_down = False
        self._teardown_listeners: List[Callable[["Broker"], None]] = []

        self._sink(f"{name} is handling {active_clients} clients.")

    @property
    def is_active(self) -> bool:
        return not self._torn_down

    @property
    def owner_count(self) -> int:
        return self._owners

    def add_teardown_listener(self, listener: Callable[["Broker"], None]) -> None:
        """Register a callback invoked after the teardown message."""
        self._teardown_listeners.append(listener)

    def retain(self) -> "Broker":
        if self._torn_down:
            raise RuntimeError(f"Broker {self.name} has already been torn down")
        self._owners += 1
        return self

    def release(self) -> None:
        if self._torn_down:
            raise RuntimeError(f"Broker {self.name} has already been torn down")
        self._owners -= 1
        if self._owners == 0:
            self._teardown()

    def _teardown(self) -> None:
        # Mark first so a failing listener cannot trigger a second teardown.
        self._torn_down = True
        logger.debug(f"Tearing down broker {self.name} ({self.active_clients} clients)")
        self._sink(f"{self.name} is no longer handling clients.")
        for listener in self._teardown_listeners:
            listener(self)

    def __enter__(self) -> "Broker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # An explicit release inside the block may already have torn it down.
        if not self._torn_down:
            self.release()

    def __repr__(self) -> str:
        return f"Broker(name={self.name!r}, active_clients={self.active_clients}, owners={self._owners})"
