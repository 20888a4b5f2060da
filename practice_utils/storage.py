from types import MappingProxyType
from typing import Mapping, Tuple
from .models import Coupon, DrivingAgeRule

# ---------------------------
# Fixed lookup tables
# ---------------------------

COUPONS: Tuple[Coupon, ...] = (
    Coupon(code="SAVE10", discount=0.1),
    Coupon(code="SAVE20", discount=0.2),
    Coupon(code="DISCOUNT50OFF", discount=0.5),
)

# code -> Coupon
COUPONS_BY_CODE: Mapping[str, Coupon] = MappingProxyType(
    {coupon.code: coupon for coupon in COUPONS}
)

DRIVING_AGE_RULES: Tuple[DrivingAgeRule, ...] = (
    DrivingAgeRule(countryCode="US", minAge=16),
    DrivingAgeRule(countryCode="UK", minAge=17),
)

# countryCode -> minimum driving age
MIN_DRIVING_AGE: Mapping[str, int] = MappingProxyType(
    {rule.countryCode: rule.minAge for rule in DRIVING_AGE_RULES}
)
