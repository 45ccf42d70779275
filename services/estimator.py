# Estimator — trip cost breakdown for the estimator page
# One hotel room per two travelers (rounded up), vehicle and guide
# billed per day, activities once per person. Airfare is kept out
# of the ground total and only added to the grand total.

import logging
from decimal import Decimal, localcontext
from typing import Iterable
from config import TRAVELERS_PER_ROOM
from models.schemas import (
    Activity, EstimateRequest, EstimateResponse, EstimateResult, PackageTier,
    coerce_float, coerce_int, quantize_money,
)
from services.breakdown import format_usd
from services.catalog import get_tier, resolve_activities

logger = logging.getLogger(__name__)


def _money(value) -> Decimal:
    return Decimal(str(value))


def calculate_estimate(
    tier:               PackageTier,
    days,
    travelers,
    airfare_per_person,
    activities:         Iterable[Activity] = ()
) -> EstimateResult:
    """
    Pure pricing calculation.
    Raw inputs are read as numbers (non-numeric → 0) and clamped:
    days ≥ 1, travelers ≥ 1, airfare ≥ 0.
    """
    days      = max(1, coerce_int(days))
    travelers = max(1, coerce_int(travelers))
    airfare   = max(0.0, coerce_float(airfare_per_person))

    # Integer ceiling; counts can be arbitrarily large
    rooms = -(-travelers // TRAVELERS_PER_ROOM)

    # Selected activities are a set
    unique = {a.activity_id: a for a in activities}

    with localcontext() as ctx:
        # Enough digits that products of big counts stay exact
        ctx.prec = 40 + len(str(days)) + len(str(travelers))

        activities_per_person = sum(
            (_money(a.price) for a in unique.values()), Decimal(0)
        )

        # Each line is rounded to cents; the totals are sums of the rounded lines
        hotel_total      = quantize_money(_money(tier.hotel_per_night) * days * rooms)
        vehicle_total    = quantize_money(_money(tier.vehicle_per_day) * days)
        guide_total      = quantize_money(_money(tier.guide_per_day) * days)
        activities_total = quantize_money(activities_per_person * travelers)
        airfare_total    = quantize_money(_money(airfare) * travelers)

        ground_total = hotel_total + vehicle_total + guide_total + activities_total
        grand_total  = ground_total + airfare_total

    return EstimateResult(
        rooms=rooms,
        hotel_total=hotel_total,
        vehicle_total=vehicle_total,
        guide_total=guide_total,
        activities_total=activities_total,
        ground_total=ground_total,
        airfare_total=airfare_total,
        grand_total=grand_total
    )


def estimate_for_request(req: EstimateRequest) -> EstimateResponse:
    """
    Resolve the tier + activities of a request and price it.
    Raises KeyError if the package id is not in the catalog.
    """
    tier       = get_tier(req.package_id)
    activities = resolve_activities(req.activities)
    result     = calculate_estimate(
        tier, req.days, req.travelers, req.airfare_per_person, activities
    )

    logger.debug(
        "Estimate %s: %d days, %d travelers → %s",
        tier.package_id, req.days, req.travelers, result.grand_total
    )

    rates = {
        "hotel_per_night": tier.hotel_per_night,
        "vehicle_per_day": tier.vehicle_per_day,
        "guide_per_day":   tier.guide_per_day,
    }
    formatted = {k: format_usd(v) for k, v in rates.items()}
    formatted["airfare_per_person"] = format_usd(req.airfare_per_person)
    formatted.update({
        k: format_usd(v) for k, v in result.model_dump().items() if k != "rooms"
    })

    return EstimateResponse(
        package_id=tier.package_id,
        package_name=tier.name,
        days=req.days,
        travelers=req.travelers,
        airfare_per_person=req.airfare_per_person,
        rates=rates,
        activities=activities,
        result=result,
        formatted=formatted
    )
