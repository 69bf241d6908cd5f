import logging
from typing import Union

logger = logging.getLogger(__name__)

Number = Union[int, float]


class PriceCalculator:
    """Computes discounted prices over a fixed base amount.

    The base amount is captured once; discount() never mutates it, so
    successive discounts do not compound.
    """

    def __init__(self, amount: Number) -> None:
        self._amount = amount

    @property
    def amount(self) -> Number:
        return self._amount

    def discount(self, rate: Number) -> Number:
        # Rate is a fraction by convention; out-of-range rates are not rejected.
        price = self._amount - self._amount * rate
        logger.debug("Discount computed: amount=%s rate=%s => %s", self._amount, rate, price)
        return price


def total(amount: Number) -> PriceCalculator:
    return PriceCalculator(amount)
