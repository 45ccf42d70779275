import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from pydantic import BaseModel, ConfigDict, field_validator
from typing import List, Dict, Any

CENT = Decimal("0.01")


def coerce_int(value: Any) -> int:
    """
    Parse a form/JSON value the way a numeric <input> is read.
    Decimals are truncated toward zero; blanks, text, NaN and inf become 0.
    Unlike JS parseInt, trailing junk is not skipped: "3abc" is 0, not 3.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return 0
    if not math.isfinite(number):
        return 0
    return int(number)


def coerce_float(value: Any) -> float:
    """Same as coerce_int but keeps the fractional part."""
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def quantize_money(amount: Any) -> Decimal:
    """
    Round to cents, half up. Floats go through str() so 0.1 stays 0.1.
    Precision grows with the amount, so very large totals never raise.
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount or 0))
    if not amount.is_finite():
        return Decimal("0.00")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


class PackageTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    package_id:        str
    name:              str
    hotel_per_night:   float
    vehicle_per_day:   float
    guide_per_day:     float
    itinerary_section: str


class Activity(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity_id: str
    name:        str
    price:       float


class EstimateRequest(BaseModel):
    package_id:         str = "premium"
    days:               int = 1
    travelers:          int = 1
    airfare_per_person: float = 0.0
    activities:         List[str] = []

    @field_validator("days", "travelers", mode="before")
    @classmethod
    def _at_least_one(cls, v):
        return max(1, coerce_int(v))

    @field_validator("airfare_per_person", mode="before")
    @classmethod
    def _not_negative(cls, v):
        return max(0.0, coerce_float(v))

    @field_validator("activities", mode="before")
    @classmethod
    def _unique_ids(cls, v):
        if not v:
            return []
        if isinstance(v, str):
            v = [v]
        # a checkbox can only be ticked once
        return list(dict.fromkeys(str(a) for a in v))


class EstimateResult(BaseModel):
    rooms:            int
    hotel_total:      Decimal
    vehicle_total:    Decimal
    guide_total:      Decimal
    activities_total: Decimal
    ground_total:     Decimal
    airfare_total:    Decimal
    grand_total:      Decimal


class EstimateResponse(BaseModel):
    package_id:         str
    package_name:       str
    days:               int
    travelers:          int
    airfare_per_person: float
    rates:              Dict[str, float]
    activities:         List[Activity]
    result:             EstimateResult
    formatted:          Dict[str, str]


class Testimonial(BaseModel):
    quote:  str
    author: str
    meta:   str


class CarouselSnapshot(BaseModel):
    index:            int
    slide:            Testimonial
    dots:             List[bool]
    autoplay:         bool
    interval_seconds: int
    slides:           List[Testimonial]
