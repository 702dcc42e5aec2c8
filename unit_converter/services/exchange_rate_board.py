"""Simulated exchange rate board.

Rates are derived from the static currency table; nothing is fetched.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from unit_converter.interfaces import PresenterProtocol
from unit_converter.models import CurrencyCode, RateSnapshot

from .rate_table import RateTable

logger = logging.getLogger(__name__)

# Board id -> currency quoted in CNY
BOARD_CURRENCIES = {
    "usd-cny": CurrencyCode.USD,
    "eur-cny": CurrencyCode.EUR,
    "gbp-cny": CurrencyCode.GBP,
    "jpy-cny": CurrencyCode.JPY,
}

QUOTE_CURRENCY = CurrencyCode.CNY


class ExchangeRateBoard:
    """Publishes CNY quotes for the major currencies to a presenter."""

    def __init__(
        self,
        presenter: PresenterProtocol,
        rate_table: RateTable | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.presenter = presenter
        self.rate_table = rate_table or RateTable()
        self._clock = clock
        self.last_snapshot: RateSnapshot | None = None

    def snapshot(self) -> RateSnapshot:
        """Build the current board without publishing it."""
        quote_rate = self.rate_table.currency_rate(QUOTE_CURRENCY)
        rates = {
            board_id: round(quote_rate / self.rate_table.currency_rate(code), 4)
            for board_id, code in BOARD_CURRENCIES.items()
        }
        return RateSnapshot(rates=rates, updated_at=self._clock())

    def refresh(self) -> RateSnapshot:
        """Rebuild the board and hand it to the presenter.

        Returns:
            The published snapshot
        """
        snapshot = self.snapshot()
        self.last_snapshot = snapshot
        logger.debug(f"Exchange rate board refreshed at {snapshot.updated_label}")
        self.presenter.show_rates(snapshot)
        return snapshot
