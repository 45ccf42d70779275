from decimal import Decimal

from data.packages import ACTIVITIES, PACKAGE_TIERS
from data.testimonials import TESTIMONIALS


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_list_packages(client):
    res = client.get("/api/packages")
    assert res.status_code == 200
    ids = [p["package_id"] for p in res.json()]
    assert ids == list(PACKAGE_TIERS)


def test_get_package(client):
    res = client.get("/api/packages/luxury")
    assert res.status_code == 200
    assert res.json()["itinerary_section"] == "luxury-20"


def test_get_unknown_package_is_404(client):
    res = client.get("/api/packages/backpacker")
    assert res.status_code == 404
    assert "backpacker" in res.json()["detail"]


def test_list_activities(client):
    res = client.get("/api/activities")
    assert res.status_code == 200
    assert {a["activity_id"] for a in res.json()} == set(ACTIVITIES)


def test_estimate_json(client):
    res = client.post("/api/estimate", json={
        "package_id": "premium",
        "days": 5,
        "travelers": 3,
        "airfare_per_person": 200,
        "activities": ["rafting", "cooking_class"],
    })
    assert res.status_code == 200
    body = res.json()
    assert body["result"]["rooms"] == 2
    assert Decimal(body["result"]["grand_total"]) == 2965
    assert body["formatted"]["grand_total"] == "$2,965.00"


def test_estimate_json_clamps_bad_numbers(client):
    res = client.post("/api/estimate", json={"package_id": "luxury", "days": "abc", "travelers": 0, "airfare_per_person": -9})
    assert res.status_code == 200
    body = res.json()
    assert body["days"] == 1
    assert body["travelers"] == 1
    assert Decimal(body["result"]["airfare_total"]) == 0


def test_estimate_unknown_package_is_404(client):
    res = client.post("/api/estimate", json={"package_id": "nope"})
    assert res.status_code == 404


def test_estimator_form_renders_breakdown(client):
    res = client.post("/estimator.html", data={
        "pkg": "premium",
        "days": "5",
        "people": "3",
        "airfare": "200",
        "activity": ["rafting", "cooking_class"],
    })
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "$2,965.00" in res.text
    assert "<strong>Rooms:</strong> 2" in res.text
    assert "<nav>Hamro Nav</nav>" in res.text


def test_estimator_form_with_empty_fields(client):
    res = client.post("/estimator.html", data={"pkg": "luxury", "days": "", "people": "", "airfare": ""})
    assert res.status_code == 200
    assert "<strong>Days:</strong> 1" in res.text


def test_testimonials_snapshot(client):
    res = client.get("/api/testimonials", params={"start": len(TESTIMONIALS) + 1, "reduced_motion": "true"})
    assert res.status_code == 200
    body = res.json()
    assert body["index"] == 1
    assert body["autoplay"] is False
    assert body["dots"] == [i == 1 for i in range(len(TESTIMONIALS))]


def test_home_page_is_rendered(client):
    res = client.get("/")
    assert res.status_code == 200
    assert "<nav>Hamro Nav</nav>" in res.text
    assert "data-whatsapp-button" in res.text


def test_home_page_slide_query(client):
    res = client.get("/", params={"slide": 1})
    assert TESTIMONIALS[1]["meta"] in res.text


def test_unknown_route_falls_back_to_index(client):
    res = client.get("/some/client/route")
    assert res.status_code == 200
    assert "<title>Home</title>" in res.text


def test_static_asset_served_as_is(client):
    res = client.get("/assets/style.css")
    assert res.status_code == 200
    assert res.text == "body { color: #333; }"
    assert "text/css" in res.headers["content-type"]


def test_partials_are_served_raw(client):
    res = client.get("/partials/header.html")
    assert res.text == "<nav>Hamro Nav</nav>"


def test_missing_index_is_404(client, site_dir):
    (site_dir / "index.html").unlink()
    res = client.get("/nowhere")
    assert res.status_code == 404


def test_estimate_json_with_huge_traveler_count(client):
    travelers = int("9" * 400)
    res = client.post("/api/estimate", json={"package_id": "premium", "days": 2, "travelers": travelers})
    assert res.status_code == 200
    body = res.json()
    assert body["travelers"] == travelers
    assert body["result"]["rooms"] == (travelers + 1) // 2
    assert body["formatted"]["grand_total"].startswith("$")


def test_estimator_form_totals_add_up(client):
    res = client.post("/estimator.html", data={
        "pkg": "premium", "days": "1", "people": "3", "airfare": "0.015",
    })
    assert res.status_code == 200
    # ground 140*2 + 85 + 45 = 410.00, airfare 0.045 → 0.05
    assert "$410.00" in res.text
    assert "$0.05" in res.text
    assert "$410.05" in res.text
