from fastapi import APIRouter
from models.schemas import CarouselSnapshot
from services.carousel import TestimonialCarousel

router = APIRouter(prefix="/api", tags=["testimonials"])


@router.get("/testimonials", response_model=CarouselSnapshot)
def get_testimonials(start: int = 0, reduced_motion: bool = False):
    """Current slide (index wraps), dot states and autoplay settings."""
    return TestimonialCarousel(start=start, reduced_motion=reduced_motion).snapshot()
