from typing import List
from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse
from models.schemas import EstimateRequest, EstimateResponse
from services.breakdown import render_breakdown
from services.estimator import estimate_for_request
from services.pages import SitePages, get_site_pages

router = APIRouter(tags=["estimator"])


def _estimate(req: EstimateRequest) -> EstimateResponse:
    try:
        return estimate_for_request(req)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Package '{req.package_id}' not found")


@router.post("/api/estimate", response_model=EstimateResponse)
def estimate(req: EstimateRequest):
    """
    Price a trip. Numeric fields are clamped rather than rejected:
    days and travelers to at least 1, airfare to at least 0.
    """
    return _estimate(req)


@router.post("/estimator.html", response_class=HTMLResponse)
def estimate_form(
    pkg:      str = Form("premium"),
    days:     str = Form(""),
    people:   str = Form(""),
    airfare:  str = Form(""),
    activity: List[str] = Form([]),
    pages:    SitePages = Depends(get_site_pages)
):
    """
    Form post from estimator.html. Re-renders the page with the
    breakdown placed inside #result.
    """
    resp = _estimate(EstimateRequest(
        package_id         = pkg,
        days               = days,
        travelers          = people,
        airfare_per_person = airfare,
        activities         = activity
    ))

    page = pages.resolve("estimator.html")
    if page is None:
        raise HTTPException(status_code=404, detail="estimator.html not found")
    return pages.render_file(page, result_html=render_breakdown(resp))
