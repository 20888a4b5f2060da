from .config import Settings, settings
from .intro import calculate_average, factorial, fizz_buzz, maximum
from .logic import (
    calculate_discount,
    can_drive,
    fetch_data,
    get_coupons,
    is_price_in_range,
    is_valid_username,
    validate_user_input,
)
from .models import Coupon, DrivingAgeRule
from .stack import EmptyStackError, Stack

__all__ = [
    "Coupon",
    "DrivingAgeRule",
    "EmptyStackError",
    "Settings",
    "Stack",
    "calculate_average",
    "calculate_discount",
    "can_drive",
    "factorial",
    "fetch_data",
    "fizz_buzz",
    "get_coupons",
    "is_price_in_range",
    "is_valid_username",
    "maximum",
    "settings",
    "validate_user_input",
]
