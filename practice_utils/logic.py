import asyncio
import logging
import math
from typing import Any, List, Union
from .config import settings
from .models import Coupon
from .storage import COUPONS, COUPONS_BY_CODE, MIN_DRIVING_AGE

logger = logging.getLogger(__name__)

INVALID_PRICE = "Invalid price"
INVALID_DISCOUNT_CODE = "Invalid discount code"
INVALID_USERNAME = "Invalid username"
INVALID_AGE = "Invalid age"
INVALID_COUNTRY_CODE = "Invalid country code"
VALIDATION_SUCCESSFUL = "Validation successful"

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 255
MIN_AGE = 18
MAX_AGE = 100

LOGIN_NAME_MIN_LENGTH = 5
LOGIN_NAME_MAX_LENGTH = 15


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid amount; NaN compares false both ways
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    return not math.isnan(value)


def get_coupons() -> List[Coupon]:
    return list(COUPONS)


def calculate_discount(price: Any, code: Any) -> Union[float, str]:
    """
    Apply the coupon matching `code` to `price`.

    Returns the price unchanged when no coupon matches, or an "Invalid ..."
    message when the arguments have the wrong type or the price is negative.
    """
    if not is_number(price) or price < 0:
        logger.debug("Rejected price %r", price)
        return INVALID_PRICE

    if not isinstance(code, str):
        logger.debug("Rejected discount code %r", code)
        return INVALID_DISCOUNT_CODE

    coupon = COUPONS_BY_CODE.get(code)
    if coupon is None:
        return price

    return price - price * coupon.discount


def validate_user_input(username: Any, age: Any) -> str:
    errors: List[str] = []

    if (
        not isinstance(username, str)
        or not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH
    ):
        errors.append(INVALID_USERNAME)

    if not is_number(age) or not MIN_AGE <= age <= MAX_AGE:
        errors.append(INVALID_AGE)

    if errors:
        logger.debug("User input rejected: %s", errors)
        return ", ".join(errors)

    return VALIDATION_SUCCESSFUL


def is_price_in_range(price: float, min_price: float, max_price: float) -> bool:
    return min_price <= price <= max_price


def is_valid_username(username: Any) -> bool:
    if not isinstance(username, str):
        return False
    return LOGIN_NAME_MIN_LENGTH <= len(username) <= LOGIN_NAME_MAX_LENGTH


def can_drive(age: Any, country_code: Any) -> Union[bool, str]:
    if not is_number(age):
        logger.debug("Rejected age %r", age)
        return INVALID_AGE

    if not isinstance(country_code, str) or country_code not in MIN_DRIVING_AGE:
        logger.debug("Unknown country code %r", country_code)
        return INVALID_COUNTRY_CODE

    return age >= MIN_DRIVING_AGE[country_code]


async def fetch_data() -> List[int]:
    """Placeholder for a real data source; resolves to a fresh list on each call."""
    logger.debug("Fetching data (delay=%ss)", settings.fetch_delay_seconds)
    await asyncio.sleep(settings.fetch_delay_seconds)
    return [1, 2, 3]
