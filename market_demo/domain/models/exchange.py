"""
DOMAIN MODELS — EXCHANGE

NSE is sealed: it cannot be subclassed, its instances carry no state and the
funds constant cannot be rebound, so ``show_funds`` behaves the same for
every caller.
"""

from typing import ClassVar, Final, Optional, final

from market_demo.utils.formatting import format_rupees
from market_demo.utils.notifications import MessageSink, console_sink


class _ConstantsMeta(type):
    """Rejects rebinding or deleting class-level constants."""

    _constants = frozenset({"TOTAL_FUNDS"})

    def __setattr__(cls, name, value):
        if name in cls._constants:
            raise AttributeError(f"{cls.__name__}.{name} is a constant")
        super().__setattr__(name, value)

    def __delattr__(cls, name):
        if name in cls._constants:
            raise AttributeError(f"{cls.__name__}.{name} is a constant")
        super().__delattr__(name)


@final
class NSE(metaclass=_ConstantsMeta):
    """National Stock Exchange."""

    TOTAL_FUNDS: Final[float] = 50000000.0

    __slots__ = ()

    _shared: ClassVar[Optional["NSE"]] = None

    def __init_subclass__(cls, **kwargs):
        raise TypeError("NSE cannot be subclassed")

    @classmethod
    def shared(cls) -> "NSE":
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def funds_message(self) -> str:
        return f"Total NSE Funds: {format_rupees(NSE.TOTAL_FUNDS)}"

    def show_funds(self, sink: MessageSink = console_sink) -> None:
        sink(self.funds_message())
