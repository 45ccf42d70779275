from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from main import app
from services.pages import SitePages, get_site_pages

PAGE = """<!doctype html>
<html><head><title>{title}</title></head>
<body>
<div id="header-mount"></div>
{body}
<div id="footer-mount"></div>
</body></html>
"""


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    (root / "partials").mkdir(parents=True)
    (root / "assets").mkdir()
    (root / "partials" / "header.html").write_text("<nav>Hamro Nav</nav>", encoding="utf-8")
    (root / "partials" / "footer.html").write_text(
        '<footer>&copy; <span id="year"></span> Hamro Vacation</footer>', encoding="utf-8"
    )
    (root / "index.html").write_text(
        PAGE.format(title="Home", body='<div id="testimonial-mount"></div>'), encoding="utf-8"
    )
    (root / "estimator.html").write_text(
        PAGE.format(title="Estimator", body='<div id="result"></div>'), encoding="utf-8"
    )
    (root / "assets" / "style.css").write_text("body { color: #333; }", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("do not serve", encoding="utf-8")
    return root


@pytest.fixture
def pages(site_dir: Path) -> SitePages:
    return SitePages(site_dir, "15550001111", today=lambda: date(2030, 1, 1))


@pytest.fixture
def client(pages: SitePages):
    app.dependency_overrides[get_site_pages] = lambda: pages
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
