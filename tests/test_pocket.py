import pytest

from closures import pocket
from closures.exceptions import InsufficientFundsError, OutOfStockError, PocketError, ValidationError
from closures.settings import PocketSettings


def test_buy_and_sell():
    p = pocket(50)
    assert p.trinkets() == 0

    p.buy()
    assert p.coins() == 40
    assert p.trinkets() == 1

    p.buy()
    assert p.coins() == 30
    assert p.trinkets() == 2

    p.sell()
    assert p.coins() == 35
    assert p.trinkets() == 1


def test_default_policy_allows_negative_values():
    p = pocket(5)
    p.buy()
    assert p.coins() == -5
    assert p.trinkets() == 1

    p.sell()
    p.sell()
    assert p.coins() == 5
    assert p.trinkets() == -1


def test_strict_policy_rejects_buy_without_coins():
    p = pocket(15, PocketSettings(enforce_non_negative=True))
    p.buy()
    with pytest.raises(InsufficientFundsError) as exc:
        p.buy()

    assert "only 5 available" in str(exc.value)
    assert p.coins() == 5
    assert p.trinkets() == 1


def test_strict_policy_rejects_sell_without_trinkets():
    p = pocket(0, PocketSettings(enforce_non_negative=True))
    with pytest.raises(OutOfStockError):
        p.sell()
    assert p.coins() == 0
    assert p.trinkets() == 0


def test_strict_policy_allows_spending_exact_balance():
    p = pocket(10, PocketSettings(enforce_non_negative=True))
    p.buy()
    assert p.coins() == 0
    p.sell()
    assert p.coins() == 5
    assert p.trinkets() == 0


def test_strict_policy_rejects_negative_start():
    with pytest.raises(ValidationError):
        pocket(-1, PocketSettings(enforce_non_negative=True))


def test_trade_errors_share_base_class():
    assert issubclass(InsufficientFundsError, PocketError)
    assert issubclass(OutOfStockError, PocketError)


def test_custom_prices():
    p = pocket(100, PocketSettings(buy_price=30, sell_price=20))
    p.buy()
    p.sell()
    assert p.coins() == 90


def test_pockets_are_isolated():
    a = pocket(50)
    b = pocket(50)
    a.buy()
    assert b.coins() == 50
    assert b.trinkets() == 0


def test_policy_flag_must_be_boolean():
    with pytest.raises(ValidationError):
        PocketSettings(enforce_non_negative="no")
    with pytest.raises(ValidationError):
        PocketSettings(buy_price="10")
