"""
Console walkthrough of the stock-market domain model.

Each section builds its objects, prints the lines it produces and leaves
nothing behind for the next section.
"""

import argparse
import logging
from typing import Callable, Dict, Iterable, List, Optional

from market_demo.config import settings
from market_demo.core.logging import setup_logging
from market_demo.domain.models import (
    NSE,
    SEBI,
    Broker,
    Investor,
    Portfolio,
    Stock,
    StockLocation,
    StockMarketApp,
    StockTransaction,
    StockValue,
    TechStock,
)
from market_demo.utils.formatting import format_rupees
from market_demo.utils.notifications import MessageSink, console_sink, telegram_sink

logger = logging.getLogger(__name__)


def show_inheritance(sink: MessageSink) -> None:
    tcs_stock = TechStock(ticker="TCS", price=3500.0, company_name="Tata Consultancy Services")
    sink(tcs_stock.describe())


def show_initialization(sink: MessageSink) -> None:
    reliance = Stock(ticker="RELIANCE", price=2400.0)
    infosys = Stock(ticker="INFY", price=1600.0)

    portfolio = Portfolio(stocks=[reliance, infosys])
    sink(f"Portfolio Value: {format_rupees(portfolio.portfolio_value())}")

    investor = Investor.with_stocks("Amitesh", [reliance, infosys])
    sink(f"{investor.name}'s Portfolio Value: {format_rupees(investor.portfolio_value())}")


def show_deinitialization(sink: MessageSink) -> None:
    broker = Broker(name="Satyendra", active_clients=15, sink=sink)
    if settings.TELEGRAM_ENABLED:
        notify = telegram_sink()
        broker.add_teardown_listener(lambda b: notify(f"{b.name} is no longer handling clients."))
    broker.release()


def show_failable(sink: MessageSink) -> None:
    valid_user = StockMarketApp.create(10000.0)
    invalid_user = StockMarketApp.create(-5000.0)

    if valid_user is not None:
        sink(f"Valid user funds: {format_rupees(valid_user.user_funds)}")
    if invalid_user is None:
        sink("Invalid user: initialization failed")


def show_final(sink: MessageSink) -> None:
    NSE.shared().show_funds(sink)


def show_observers(sink: MessageSink) -> None:
    stock_value = StockValue(sink=sink)
    stock_value.price = 1200.0
    stock_value.price = 1500.0


def show_mutating(sink: MessageSink) -> None:
    transaction = StockTransaction(stock_name="Infosys", shares_bought=10)
    transaction.update_shares(5)
    sink(transaction.summary())


def show_semantics(sink: MessageSink) -> None:
    bse_location_a = StockLocation(latitude=18.929, longitude=72.8355)
    bse_location_b = bse_location_a.copy()
    bse_location_b.latitude = 19.075

    sink(bse_location_a.describe("BSE Location A"))
    sink(bse_location_b.describe("BSE Location B"))

    sebi_a = SEBI()
    sebi_b = sebi_a
    sebi_b.rule = "Deregulate"

    sink(sebi_a.describe("SEBI A"))
    sink(sebi_b.describe("SEBI B"))


SECTIONS: Dict[str, Callable[[MessageSink], None]] = {
    "inheritance": show_inheritance,
    "initialization": show_initialization,
    "deinitialization": show_deinitialization,
    "failable": show_failable,
    "final": show_final,
    "observers": show_observers,
    "mutating": show_mutating,
    "semantics": show_semantics,
}


def run_demo(sink: MessageSink = console_sink, sections: Optional[Iterable[str]] = None) -> None:
    """Run the selected sections (all by default) in their canonical order."""
    selected = set(SECTIONS) if sections is None else set(sections)
    unknown = selected - set(SECTIONS)
    if unknown:
        raise ValueError(f"Unknown demo sections: {', '.join(sorted(unknown))}")

    for name, section in SECTIONS.items():
        if name in selected:
            logger.debug(f"Running demo section: {name}")
            section(sink)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Walk through the stock-market domain model.")
    parser.add_argument(
        "--section",
        action="append",
        choices=list(SECTIONS),
        help="Section to run (repeatable, default: all)",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    run_demo(console_sink, args.section)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
