# Site Pages — assembles the static HTML pages before they are served
#   1. header/footer partials → #header-mount / #footer-mount
#   2. current year          → #year (lives in the footer partial)
#   3. testimonials slider   → #testimonial-mount (home page)
#   4. estimate breakdown    → #result (estimator page, after a form post)
#   5. floating WhatsApp button before </body>

import logging
import re
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Callable, Optional, Tuple, Union
from config import SITE_DIR, WHATSAPP_NUMBER
from services.carousel import TestimonialCarousel

logger = logging.getLogger(__name__)

WHATSAPP_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="h-5 w-5 text-white" fill="currentColor" '
    'viewBox="0 0 24 24" aria-hidden="true"><path d="M12 .5A11.5 11.5 0 0 0 2.1 18.42L.5 23.5l5.26-1.55'
    'A11.5 11.5 0 1 0 12 .5Zm0 2a9.5 9.5 0 0 1 8.17 14.5l-.28.46a1 1 0 0 0-.12.24l-.72 1.76-1.87-.59'
    'a1 1 0 0 0-.76.06 9.5 9.5 0 1 1-4.3-17.43Z"/></svg>'
)

WHATSAPP_CLASSES = (
    "fixed bottom-5 right-4 z-50 inline-flex items-center gap-2 rounded-full bg-emerald-500 "
    "px-4 py-2 text-sm font-semibold text-white shadow-lg shadow-emerald-900/30 transition "
    "hover:-translate-y-0.5 hover:bg-emerald-400 sm:bottom-6 sm:right-6"
)


def _open_tag_pattern(element_id: str) -> "re.Pattern":
    return re.compile(
        r"<(?P<tag>[a-zA-Z][\w-]*)\b[^>]*\sid=[\"']" + re.escape(element_id) + r"[\"'][^>]*>",
        re.IGNORECASE,
    )


def _content_span(html: str, element_id: str) -> Optional[Tuple[int, int]]:
    """
    (start, end) of the inner HTML of the first element with the given id.
    Same-name tags nested inside are counted so the matching close tag is found.
    """
    opening = _open_tag_pattern(element_id).search(html)
    if opening is None or opening.group(0).endswith("/>"):
        return None

    tag   = re.escape(opening.group("tag"))
    token = re.compile(rf"<(/?){tag}(?![\w-])[^>]*>", re.IGNORECASE)
    depth = 1
    for t in token.finditer(html, opening.end()):
        if t.group(1):
            depth -= 1
            if depth == 0:
                return opening.end(), t.start()
        elif not t.group(0).endswith("/>"):
            depth += 1
    return None


def has_element(html: str, element_id: str) -> bool:
    return _content_span(html, element_id) is not None


def fill_element(html: str, element_id: str, inner: str) -> str:
    """Replace the content of the first element with the given id. No-op if absent."""
    span = _content_span(html, element_id)
    if span is None:
        return html
    start, end = span
    return html[:start] + inner + html[end:]


def insert_before_body_end(html: str, snippet: str) -> str:
    idx = html.lower().rfind("</body>")
    if idx == -1:
        return html + snippet
    return html[:idx] + snippet + html[idx:]


class SitePages:
    def __init__(
        self,
        site_dir:        Union[str, Path],
        whatsapp_number: str,
        today:           Optional[Callable[[], date]] = None
    ):
        self.root            = Path(site_dir).resolve()
        self.whatsapp_number = whatsapp_number
        self.today           = today or date.today

    def resolve(self, path: str) -> Optional[Path]:
        """URL path → file under the site root, or None if missing / outside it."""
        candidate = (self.root / path.lstrip("/")).resolve()
        if not candidate.is_relative_to(self.root):
            logger.warning("Refusing path outside site root: %s", path)
            return None
        if candidate.is_dir():
            candidate = candidate / "index.html"
        return candidate if candidate.is_file() else None

    def _partial(self, name: str) -> Optional[str]:
        path = self.root / "partials" / name
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Partial not found: %s", path)
            return None

    def whatsapp_button(self) -> str:
        return (
            f'<a href="https://wa.me/{self.whatsapp_number}" target="_blank" rel="noopener" '
            f'class="{WHATSAPP_CLASSES}" aria-label="Chat on WhatsApp" data-whatsapp-button="true">'
            f"{WHATSAPP_ICON} WhatsApp</a>"
        )

    def render(
        self,
        html:           str,
        *,
        slide:          int = 0,
        reduced_motion: bool = False,
        result_html:    Optional[str] = None
    ) -> str:
        for mount, name in (("header-mount", "header.html"), ("footer-mount", "footer.html")):
            if has_element(html, mount):
                partial = self._partial(name)
                if partial is not None:
                    html = fill_element(html, mount, partial)

        # Year must run after the footer is in place
        html = fill_element(html, "year", str(self.today().year))

        if has_element(html, "testimonial-mount"):
            carousel = TestimonialCarousel(start=slide, reduced_motion=reduced_motion)
            html     = fill_element(html, "testimonial-mount", carousel.render())

        if result_html is not None:
            html = fill_element(html, "result", result_html)

        if "data-whatsapp-button" not in html:
            html = insert_before_body_end(html, self.whatsapp_button())

        return html

    def render_file(self, path: Path, **kwargs) -> str:
        return self.render(path.read_text(encoding="utf-8"), **kwargs)


@lru_cache
def get_site_pages() -> SitePages:
    """FastAPI dependency; tests override it with a temporary site."""
    return SitePages(SITE_DIR, WHATSAPP_NUMBER)
