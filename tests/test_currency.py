from __future__ import annotations

from lom.domain.currency import Currency


def test_of_combines_denominations() -> None:
    purse = Currency.of(gold=2, silver=15, copper=47)
    assert purse.total_copper == 21547
    assert str(purse) == "2g 15s 47c"


def test_string_drops_empty_higher_denominations() -> None:
    assert str(Currency.of(silver=3, copper=4)) == "3s 4c"
    assert str(Currency(7)) == "7c"
    assert str(Currency()) == "0c"
    assert str(Currency.of(gold=1)) == "1g 0s 0c"


def test_from_copper_normalizes_denominations() -> None:
    for gold, silver, copper in [(0, 0, 0), (1, 0, 0), (0, 99, 99), (3, 42, 7), (12, 1, 50)]:
        purse = Currency.from_copper(Currency.of(gold, silver, copper).total_copper)
        assert (purse.gold, purse.silver, purse.copper) == (gold, silver, copper)


def test_overflowing_denominations_carry_upward() -> None:
    purse = Currency.of(silver=150, copper=250)
    assert (purse.gold, purse.silver, purse.copper) == (1, 52, 50)


def test_subtraction_never_goes_negative() -> None:
    assert (Currency(5) - Currency(9)).total_copper == 0
    assert (Currency(9) - Currency(5)).total_copper == 4


def test_addition_and_ordering() -> None:
    assert Currency(30) + Currency(70) == Currency.of(silver=1)
    assert Currency(1) < Currency(2)
    assert max(Currency(3), Currency(10), Currency(4)) == Currency(10)


def test_scaled_rounds_and_clamps() -> None:
    assert Currency(100).scaled(0.5) == Currency(50)
    assert Currency(3).scaled(0.5) == Currency(2)
    assert Currency(100).scaled(-1.0) == Currency(0)
