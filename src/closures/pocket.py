import logging
from typing import Optional

from .exceptions import InsufficientFundsError, OutOfStockError, ValidationError
from .settings import PocketSettings

logger = logging.getLogger(__name__)


class Pocket:
    """A pocket holding coins and trinkets.

    buy() trades ``buy_price`` coins for one trinket and sell() trades one
    trinket for ``sell_price`` coins. Unless ``enforce_non_negative`` is set
    the trades are applied unconditionally, so either count may go negative.
    """

    def __init__(self, start_coins: int, settings: Optional[PocketSettings] = None) -> None:
        self.settings = settings or PocketSettings()
        if self.settings.enforce_non_negative and start_coins < 0:
            raise ValidationError("Starting coins cannot be negative")
        self._coins = start_coins
        self._trinkets = 0

    def coins(self) -> int:
        return self._coins

    def trinkets(self) -> int:
        return self._trinkets

    def buy(self) -> None:
        price = self.settings.buy_price
        if self.settings.enforce_non_negative and price > self._coins:
            raise InsufficientFundsError(
                f"Cannot buy a trinket for {price} coins; only {self._coins} available."
            )
        self._coins -= price
        self._trinkets += 1
        logger.debug("Bought trinket for %d (coins: %d, trinkets: %d)", price, self._coins, self._trinkets)

    def sell(self) -> None:
        price = self.settings.sell_price
        if self.settings.enforce_non_negative and self._trinkets <= 0:
            raise OutOfStockError("Cannot sell a trinket; none remain in the pocket.")
        self._coins += price
        self._trinkets -= 1
        logger.debug("Sold trinket for %d (coins: %d, trinkets: %d)", price, self._coins, self._trinkets)


def pocket(start_coins: int, settings: Optional[PocketSettings] = None) -> Pocket:
    return Pocket(start_coins, settings)
