# Breakdown — USD formatting + the HTML fragment shown in #result
# on estimator.html after a form post.

from html import escape
from config import ESTIMATE_NOTE
from models.schemas import EstimateResponse, quantize_money


def format_usd(amount) -> str:
    """1234.5 → '$1,234.50' (cents rounded half up)"""
    amount = quantize_money(amount)
    if amount < 0:
        return "-" + format_usd(-amount)
    return f"${amount:,.2f}"


def _line(label: str, value: str, label_cls: str = "", value_cls: str = "font-medium") -> str:
    attr = f' class="{label_cls}"' if label_cls else ""
    return (
        f"<div{attr}>{escape(label)}</div>"
        f'<div class="text-right {value_cls}">{escape(value)}</div>'
    )


def render_breakdown(resp: EstimateResponse) -> str:
    r     = resp.result
    f     = resp.formatted
    days  = resp.days
    rooms = r.rooms

    rows = [
        _line(f"Hotel ({f['hotel_per_night']}/night × {days} × {rooms} rooms)", f["hotel_total"]),
        _line(f"Vehicle ({f['vehicle_per_day']}/day × {days})", f["vehicle_total"]),
        _line(f"Guide ({f['guide_per_day']}/day × {days})", f["guide_total"]),
        _line("Activities (per person one-time)", f["activities_total"]),
        '<div class="col-span-2 h-px bg-slate-200 my-1"></div>',
        _line("Estimated Ground Total", f["ground_total"], "font-semibold", "font-semibold"),
        _line(f"Airfare ({f['airfare_per_person']} × {resp.travelers})", f["airfare_total"]),
        '<div class="col-span-2 h-px bg-slate-200 my-1"></div>',
        _line("Grand Total", f["grand_total"], "text-lg font-bold", "text-lg font-bold"),
    ]

    summary = (
        f"<strong>Package:</strong> {escape(resp.package_id.upper())} • "
        f"<strong>Days:</strong> {days} • "
        f"<strong>Travelers:</strong> {resp.travelers} • "
        f"<strong>Rooms:</strong> {rooms}"
    )

    return (
        '<div class="space-y-1">'
        f"<div>{summary}</div>"
        '<div class="mt-3 grid grid-cols-2 gap-2 text-slate-700">'
        + "".join(rows)
        + "</div>"
        f'<p class="text-xs text-slate-500 mt-2">{escape(ESTIMATE_NOTE)}</p>'
        "</div>"
    )
