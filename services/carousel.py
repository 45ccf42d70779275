# Carousel — testimonials slider state for the home page
# Each instance owns its slides and index; nothing is shared
# between requests.

from html import escape
from typing import List, Optional, Sequence
from config import TESTIMONIAL_INTERVAL_SECONDS
from data.testimonials import TESTIMONIALS
from models.schemas import CarouselSnapshot, Testimonial


class TestimonialCarousel:
    def __init__(
        self,
        slides:           Optional[Sequence[Testimonial]] = None,
        start:            int = 0,
        reduced_motion:   bool = False,
        interval_seconds: int = TESTIMONIAL_INTERVAL_SECONDS
    ):
        if slides is None:
            slides = [Testimonial(**t) for t in TESTIMONIALS]
        if not slides:
            raise ValueError("carousel needs at least one slide")
        self.slides           = list(slides)
        self.reduced_motion   = reduced_motion
        self.interval_seconds = interval_seconds
        self.index            = 0
        self.go_to(start)

    @property
    def current(self) -> Testimonial:
        return self.slides[self.index]

    @property
    def autoplay_enabled(self) -> bool:
        return not self.reduced_motion and self.interval_seconds > 0

    def go_to(self, index: int) -> Testimonial:
        """Jump to a slide, wrapping in both directions."""
        self.index = index % len(self.slides)
        return self.current

    def next(self) -> Testimonial:
        return self.go_to(self.index + 1)

    def prev(self) -> Testimonial:
        return self.go_to(self.index - 1)

    def dots(self) -> List[bool]:
        return [i == self.index for i in range(len(self.slides))]

    def snapshot(self) -> CarouselSnapshot:
        return CarouselSnapshot(
            index=self.index,
            slide=self.current,
            dots=self.dots(),
            autoplay=self.autoplay_enabled,
            interval_seconds=self.interval_seconds,
            slides=self.slides
        )

    def render(self) -> str:
        """
        Panel markup for #testimonial-mount. Prev/next and the dots are
        plain links carrying ?slide=N so the slider works without JS.
        """
        slide  = self.current
        count  = len(self.slides)
        prev_i = (self.index - 1) % count
        next_i = (self.index + 1) % count

        dots = "".join(
            f'<a href="?slide={i}" data-testimonial-dot data-active="{str(active).lower()}" '
            f'aria-pressed="{str(active).lower()}" aria-label="Show testimonial {i + 1}"></a>'
            for i, active in enumerate(self.dots())
        )

        return (
            f'<div data-testimonial-panel data-autoplay="{str(self.autoplay_enabled).lower()}" '
            f'data-interval="{self.interval_seconds}">'
            f"<blockquote data-testimonial-quote>{escape(slide.quote)}</blockquote>"
            f"<p data-testimonial-author>{escape(slide.author)}</p>"
            f"<p data-testimonial-meta>{escape(slide.meta)}</p>"
            "</div>"
            '<nav class="testimonial-controls">'
            f'<a href="?slide={prev_i}" data-testimonial-prev aria-label="Previous testimonial">&larr;</a>'
            f"{dots}"
            f'<a href="?slide={next_i}" data-testimonial-next aria-label="Next testimonial">&rarr;</a>'
            "</nav>"
        )
