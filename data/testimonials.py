# Short testimonials cycled on the home page.

TESTIMONIALS = [
    {
        "quote":  '"We felt cared for the entire time—every transfer, guide, and detail just happened."',
        "author": "- The Jensen family, Vermont",
        "meta":   "Family Journey · 24-Day Premium Plan",
    },
    {
        "quote":  '"Wellness days, culture, and adventure were paced perfectly. We came home rested and inspired."',
        "author": "- Priya & Jordan, California",
        "meta":   "Wellness Escape · 20-Day Luxury Plan",
    },
    {
        "quote":  '"The surprises were so thoughtful—calligraphed itineraries, helicopter champagne, the works."',
        "author": "- Camille & Aaron, Toronto",
        "meta":   "Anniversary Journey · Custom 18-Day Itinerary",
    },
]
