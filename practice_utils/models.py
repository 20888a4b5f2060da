from pydantic import BaseModel, ConfigDict, Field


class Coupon(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    discount: float = Field(gt=0, lt=1)  # fraction of the price, e.g. 0.1 for 10%


class DrivingAgeRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    countryCode: str = Field(min_length=1)  # e.g. US, UK
    minAge: int = Field(ge=0)
