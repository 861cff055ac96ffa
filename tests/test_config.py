from __future__ import annotations

from decimal import Decimal

import pytest

from pycart._money import exact_sum, format_amount, multiply, quantize, to_decimal
from pycart.config import CartConfig
from pycart.exceptions import CartConfigError


def test_defaults() -> None:
    config = CartConfig()

    assert config.currency == "USD"
    assert config.minor_unit_places == 2
    assert config.rounding == "ROUND_HALF_UP"
    assert config.format_price(Decimal("49.98")) == "$49.98"


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYCART_CURRENCY", "JPY")
    monkeypatch.setenv("PYCART_CURRENCY_SYMBOL", "¥")
    monkeypatch.setenv("PYCART_MINOR_UNIT_PLACES", "0")
    monkeypatch.setenv("PYCART_ROUNDING", "ROUND_HALF_EVEN")

    config = CartConfig.from_env()

    assert config.currency == "JPY"
    assert config.minor_unit_places == 0
    assert config.round_price(Decimal("2.5")) == Decimal("2")
    assert config.format_price(Decimal("1234")) == "¥1,234"


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYCART_CURRENCY", "JPY")
    monkeypatch.setenv("PYCART_MINOR_UNIT_PLACES", "0")

    config = CartConfig.from_env(currency="EUR", currency_symbol="€", minor_unit_places=2)

    assert config.currency == "EUR"
    assert config.minor_unit_places == 2


def test_from_env_rejects_non_integer_places(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYCART_MINOR_UNIT_PLACES", "two")

    with pytest.raises(CartConfigError):
        CartConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [{"minor_unit_places": -1}, {"rounding": "ROUND_SOMETIMES"}, {"currency": " "}],
)
def test_invalid_config_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(CartConfigError):
        CartConfig(**kwargs)  # type: ignore[arg-type]


def test_to_decimal_coercion() -> None:
    assert to_decimal(24.99) == Decimal("24.99")
    assert to_decimal(" 9.50 ") == Decimal("9.50")
    assert to_decimal(3) == Decimal(3)

    for bad in (True, "x", float("inf"), None):
        with pytest.raises(ValueError):
            to_decimal(bad)


def test_quantize_and_format() -> None:
    assert quantize(Decimal("0.005")) == Decimal("0.01")
    assert quantize(Decimal("0.005"), rounding="ROUND_HALF_EVEN") == Decimal("0.00")
    assert format_amount(Decimal("-3.5")) == "-$3.50"
    assert format_amount(Decimal("1234567.891")) == "$1,234,567.89"


def test_money_helpers_stay_exact_beyond_default_precision() -> None:
    big = Decimal("9" * 30 + ".995")

    assert quantize(big) == Decimal("1" + "0" * 30 + ".00")
    assert multiply(Decimal("0.01"), 10**40) == Decimal(10**38)
    assert exact_sum([Decimal("1E+40"), Decimal("0.01")]) == Decimal("1" + "0" * 39 + ".01")
    assert exact_sum([]) == Decimal(0)
    assert format_amount(Decimal("1" + "0" * 30)) == "$1," + ",".join(["000"] * 10) + ".00"
