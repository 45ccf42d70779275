# Package tiers and optional activities for the cost estimator.
# Rates are in USD. Each tier points at the itinerary section
# that describes it on packages.html.

PACKAGE_TIERS = {
    "premium": {
        "name":              "Premium 20-Day Journey",
        "hotel_per_night":   140,
        "vehicle_per_day":   85,
        "guide_per_day":     45,
        "itinerary_section": "premium-20",
    },
    "luxury": {
        "name":              "Luxury 20-Day Journey",
        "hotel_per_night":   320,
        "vehicle_per_day":   150,
        "guide_per_day":     70,
        "itinerary_section": "luxury-20",
    },
}

# One-time, per-person prices
ACTIVITIES = {
    "mountain_flight": {"name": "Everest Mountain Flight",    "price": 250},
    "paragliding":     {"name": "Pokhara Paragliding",        "price": 110},
    "rafting":         {"name": "Trishuli River Rafting",     "price": 60},
    "jungle_safari":   {"name": "Chitwan Jungle Safari",      "price": 150},
    "cooking_class":   {"name": "Newari Cooking Class",       "price": 45},
    "helicopter_tour": {"name": "Helicopter Champagne Tour",  "price": 1200},
}
