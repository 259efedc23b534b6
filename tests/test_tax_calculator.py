"""Tests for tax rate selection and integer rounding."""

from __future__ import annotations

import pytest
from salestax.domain import Item, TaxRules
from salestax.receipt.tax_calculator import (
    calculate_tax,
    combined_rate_percent,
    make_tax_calculator,
    raw_tax_cents,
    round_up_to_unit,
    tax_amount,
)


def _item(name: str, price_cents: int) -> Item:
    return Item(quantity=1, name=name, price_cents=price_cents)


@pytest.mark.parametrize(
    ("name", "rate"),
    [
        ("book", 0),
        ("music CD", 10),
        ("imported box of chocolates", 5),
        ("imported bottle of perfume", 15),
    ],
)
def test_combined_rate(name: str, rate: int) -> None:
    assert combined_rate_percent(_item(name, 1000)) == rate


@pytest.mark.parametrize(
    ("name", "price_cents", "expected"),
    [
        ("book", 1000, 1000),
        ("music CD", 1000, 1100),
        ("imported box of chocolates", 1000, 1050),
        ("imported bottle of perfume", 1000, 1150),
        ("music CD", 1499, 1649),
        ("imported box of chocolates", 2799, 2939),
        ("imported bottle of perfume", 4750, 5465),
    ],
)
def test_calculate_tax_returns_unit_price_with_tax(name: str, price_cents: int, expected: int) -> None:
    assert calculate_tax(_item(name, price_cents)) == expected


def test_calculate_tax_ignores_quantity() -> None:
    item = Item(quantity=3, name="imported boxes of chocolates", price_cents=1125)

    assert calculate_tax(item) == 1185


def test_fractional_cents_ceil_without_floats() -> None:
    # 1212 * 15% = 181.8 -> 182 -> 185
    assert raw_tax_cents(1212, 15) == 182
    assert tax_amount(_item("imported perfume", 1212)) == 185


def test_zero_price_has_zero_tax() -> None:
    assert tax_amount(_item("imported bottle of perfume", 0)) == 0
    assert calculate_tax(_item("imported bottle of perfume", 0)) == 0


@pytest.mark.parametrize(("amount", "expected"), [(712, 715), (718, 720), (701, 705), (1, 5), (4, 5), (99, 100)])
def test_round_up_to_unit(amount: int, expected: int) -> None:
    assert round_up_to_unit(amount) == expected


@pytest.mark.parametrize("amount", [715, 700, 0])
def test_round_up_to_unit_is_idempotent(amount: int) -> None:
    assert round_up_to_unit(amount) == amount
    assert round_up_to_unit(round_up_to_unit(amount + 1)) == round_up_to_unit(amount + 1)


@pytest.mark.parametrize("rate", [0, 5, 10, 15])
def test_rounded_tax_bounds(rate: int) -> None:
    for price_cents in range(0, 5001):
        exact_ceiling = -(-price_cents * rate // 100)
        assert raw_tax_cents(price_cents, rate) == exact_ceiling

        rounded = round_up_to_unit(raw_tax_cents(price_cents, rate))
        assert rounded % 5 == 0
        assert exact_ceiling <= rounded < exact_ceiling + 5


def test_zero_rate_is_zero_tax() -> None:
    for price_cents in (0, 1, 99, 1249, 10**9):
        assert round_up_to_unit(raw_tax_cents(price_cents, 0)) == 0


def test_custom_rules_are_bound_into_calculator() -> None:
    rules = TaxRules(basic_rate_percent=20, import_duty_percent=0, rounding_unit_cents=10)
    calculator = make_tax_calculator(rules)

    # 999 * 20% = 199.8 -> 200
    assert calculator(_item("music CD", 999)) == 1199
    # 1001 * 20% = 200.2 -> 201 -> 210
    assert calculator(_item("music CD", 1001)) == 1211
    assert calculator(_item("imported book", 1000)) == 1000


def test_default_calculator_matches_calculate_tax() -> None:
    item = _item("imported bottle of perfume", 2799)

    assert make_tax_calculator()(item) == calculate_tax(item) == 3219
