"""Fixed point arithmetic shared by the engine and its collaborators.

All amounts are non-negative integers scaled by SCALE. Division truncates,
which for non-negative operands is floor division.
"""
from typing import Union

from .errors import ArithmeticError, InvalidAmountError, InvalidPriceError
from .constants import SCALE, BPS_SCALE, UINT256_MAX


def checked_add(a: int, b: int) -> int:
    """Add with overflow checking"""
    result = a + b
    if result > UINT256_MAX:
        raise ArithmeticError("Arithmetic overflow in addition")
    return result

def checked_sub(a: int, b: int) -> int:
    """Subtract with underflow checking"""
    if b > a:
        raise ArithmeticError("Arithmetic underflow in subtraction")
    return a - b

def checked_mul(a: int, b: int) -> int:
    """Multiply with overflow checking"""
    result = a * b
    if result > UINT256_MAX:
        raise ArithmeticError("Arithmetic overflow in multiplication")
    return result

def checked_div(a: int, b: int) -> int:
    """Divide with zero checking"""
    if b == 0:
        raise ArithmeticError("Division by zero")
    return a // b

def parse_amount(value: Union[int, str]) -> int:
    """Parse an amount given as an int or a base-10 integer string"""
    if isinstance(value, bool):
        raise InvalidAmountError(f"Amount must be an integer, got {value!r}")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidAmountError(f"Amount must be a decimal integer string, got {value!r}")
        amount = int(text)
    else:
        raise InvalidAmountError(f"Amount must be an int or str, got {type(value).__name__}")

    if amount < 0:
        raise InvalidAmountError(f"Amount must be non-negative, got {amount}")
    if amount > UINT256_MAX:
        raise InvalidAmountError(f"Amount {amount} does not fit in 256 bits")
    return amount

def _require_price(price: int) -> None:
    if price <= 0:
        raise InvalidPriceError(f"Oracle price must be positive, got {price}")

def to_base_value(token_amount: int, price: int) -> int:
    """Convert synthetic token units into base currency units

    price is tokens minted per one unit of base currency, scaled by SCALE.
    """
    _require_price(price)
    return checked_mul(token_amount, SCALE) // price

def to_token_amount(base_value: int, price: int) -> int:
    """Inverse of to_base_value, also floored"""
    _require_price(price)
    return checked_mul(base_value, price) // SCALE

def apply_bps(amount: int, bps: int) -> int:
    """amount * bps / 10000, floored"""
    return checked_mul(amount, bps) // BPS_SCALE

def pro_rata(total: int, part: int, whole: int) -> int:
    """total * part / whole, floored. Returns total when part == whole."""
    if part == whole:
        return total
    return checked_div(checked_mul(total, part), whole)
