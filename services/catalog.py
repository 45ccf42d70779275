# Catalog — typed lookups over the package tiers and activities
# defined in data/packages.py.

from typing import Iterable, List, Optional
from data.packages import PACKAGE_TIERS, ACTIVITIES
from models.schemas import PackageTier, Activity


def get_tier(package_id: str) -> PackageTier:
    """Raises KeyError for an unknown package id."""
    pkg = PACKAGE_TIERS[package_id]
    return PackageTier(package_id=package_id, **pkg)


def list_tiers() -> List[PackageTier]:
    return [get_tier(pid) for pid in PACKAGE_TIERS]


def get_activity(activity_id: str) -> Optional[Activity]:
    act = ACTIVITIES.get(activity_id)
    if act is None:
        return None
    return Activity(activity_id=activity_id, name=act["name"], price=act["price"])


def list_activities() -> List[Activity]:
    return [get_activity(aid) for aid in ACTIVITIES]


def resolve_activities(activity_ids: Iterable[str]) -> List[Activity]:
    """Map checkbox ids to activities. Unknown ids are skipped, repeats collapse."""
    resolved = []
    for aid in dict.fromkeys(activity_ids):
        act = get_activity(aid)
        if act is not None:
            resolved.append(act)
    return resolved
