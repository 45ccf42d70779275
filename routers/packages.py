from fastapi import APIRouter, HTTPException
from services.catalog import get_tier, list_tiers, list_activities

router = APIRouter(prefix="/api", tags=["packages"])


@router.get("/packages")
def get_packages():
    """Return all package tiers with their daily/nightly rates."""
    return [
        {
            "package_id":        tier.package_id,
            "name":              tier.name,
            "hotel_per_night":   tier.hotel_per_night,
            "vehicle_per_day":   tier.vehicle_per_day,
            "guide_per_day":     tier.guide_per_day,
            "itinerary_section": tier.itinerary_section,
        }
        for tier in list_tiers()
    ]


@router.get("/packages/{package_id}")
def get_package(package_id: str):
    """Get details for a specific package tier."""
    try:
        return get_tier(package_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Package '{package_id}' not found")


@router.get("/activities")
def get_activities():
    """Optional add-ons, priced once per traveler."""
    return list_activities()
