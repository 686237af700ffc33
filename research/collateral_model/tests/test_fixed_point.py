"""Fixed point helpers"""
import builtins
from dataclasses import dataclass

import pytest

from collateral_model.src.constants import SCALE, UINT256_MAX
from collateral_model.src.errors import ArithmeticError, InvalidAmountError, InvalidPriceError
from collateral_model.src.fixed_point import (
    apply_bps,
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    parse_amount,
    pro_rata,
    to_base_value,
    to_token_amount,
)
from conftest import LAND_INDEX_PRICE

@dataclass
class ConversionCase:
    """Token amount and the base value it converts to at LAND_INDEX_PRICE"""
    description: str
    token_amount: int
    base_value: int

CONVERSION_CASES = [
    ConversionCase("Full borrow limit of 1 ETH at 60%", 15_069_824_916_285_384, 400_000_000_000_000_000),
    ConversionCase("Half of it", 7_534_912_458_142_692, 200_000_000_000_000_000),
    ConversionCase("One whole ETH", LAND_INDEX_PRICE, SCALE),
    ConversionCase("Single token unit rounds down", 1, 26),
]

@pytest.mark.parametrize("case", CONVERSION_CASES, ids=lambda c: c.description)
def test_to_base_value(case):
    assert to_base_value(case.token_amount, LAND_INDEX_PRICE) == case.base_value

def test_conversions_floor_in_both_directions():
    """Converting back and forth never returns more than we started with"""
    for tokens in [1, 27, 999_999, 15_069_824_916_285_385, 10**24 + 7]:
        base = to_base_value(tokens, LAND_INDEX_PRICE)
        assert to_token_amount(base, LAND_INDEX_PRICE) <= tokens
    for base in [1, 26, 10**17 + 3, 10**21]:
        tokens = to_token_amount(base, LAND_INDEX_PRICE)
        assert to_base_value(tokens, LAND_INDEX_PRICE) <= base

@pytest.mark.parametrize("price", [0, -1])
def test_conversions_reject_bad_price(price):
    with pytest.raises(InvalidPriceError):
        to_base_value(1, price)
    with pytest.raises(InvalidPriceError):
        to_token_amount(1, price)

def test_apply_bps():
    assert apply_bps(SCALE, 4000) == 400_000_000_000_000_000
    assert apply_bps(750_000_000_000_000_000, 4000) == 300_000_000_000_000_000
    assert apply_bps(1, 5000) == 0
    assert apply_bps(SCALE, 10_000) == SCALE

def test_pro_rata():
    assert pro_rata(500_000_000_000_000_000, 250_000_000_000_000_000, SCALE) == 125_000_000_000_000_000
    assert pro_rata(7, 3, 3) == 7
    assert pro_rata(5, 1, 3) == 1
    with pytest.raises(ArithmeticError):
        pro_rata(5, 1, 0)

def test_checked_arithmetic():
    assert checked_add(1, 2) == 3
    assert checked_sub(5, 5) == 0
    assert checked_mul(UINT256_MAX, 1) == UINT256_MAX
    assert checked_div(7, 2) == 3

    with pytest.raises(ArithmeticError):
        checked_add(UINT256_MAX, 1)
    with pytest.raises(ArithmeticError):
        checked_sub(1, 2)
    with pytest.raises(ArithmeticError):
        checked_mul(2**200, 2**100)
    with pytest.raises(ArithmeticError):
        checked_div(1, 0)

def test_project_arithmetic_error_is_not_the_builtin():
    assert not issubclass(ArithmeticError, builtins.ArithmeticError)

@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (42, 42),
    ("15069824916285384", 15_069_824_916_285_384),
    (" 7 ", 7),
    (str(UINT256_MAX), UINT256_MAX),
])
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected

@pytest.mark.parametrize("value", [-1, "-1", "1e18", "0x10", "", "1_000", "²", 1.5, True, None, [1]])
def test_parse_amount_rejects(value):
    with pytest.raises(InvalidAmountError):
        parse_amount(value)

def test_parse_amount_rejects_overflow():
    with pytest.raises(InvalidAmountError):
        parse_amount(UINT256_MAX + 1)
