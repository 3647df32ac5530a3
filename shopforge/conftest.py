"""Shared page fixtures for shopforge tests.

Provides:
- Well-formed landing and product page JSON (as dicts and as models)
- A landing page with every optional section populated
"""

import copy
from typing import Any

import pytest

from shopforge.schema import LandingPage, ProductPage, load_page

# =============================================================================
# Sample Data
# =============================================================================

LANDING_DATA: dict[str, Any] = {
    "pageType": "landing",
    "title": "Morning Ritual Coffee",
    "landing": {
        "nav": {
            "logo": "Morning Ritual",
            "links": [
                {"label": "Menu", "href": "#features"},
                {"label": "Pricing", "href": "#pricing"},
                {"label": "Reviews", "href": "#testimonials"},
            ],
            "ctaLabel": "Order ahead",
            "accentColor": "#c2410c",
        },
        "hero": {
            "headline": "Coffee worth waking up for",
            "subheadline": "Small-batch roasts brewed by people who care.",
            "primaryCta": "Find a cafe",
            "secondaryCta": "See the menu",
            "backgroundImage": "https://loremflickr.com/1600/900/coffee,cafe",
        },
        "features": {
            "sectionLabel": "WHY US",
            "heading": "Crafted from bean to cup",
            "features": [
                {"icon": "☕", "title": "Fresh roasts", "description": "Roasted weekly in house."},
                {"icon": "🌱", "title": "Direct trade", "description": "Sourced from partner farms."},
                {"icon": "🥐", "title": "Baked daily", "description": "Pastries from our own oven."},
            ],
        },
        "pricing": {
            "sectionLabel": "SUBSCRIPTIONS",
            "heading": "Beans at your door",
            "tiers": [
                {
                    "name": "Taster",
                    "price": "$12",
                    "period": "month",
                    "features": ["1 bag"],
                    "ctaLabel": "Start",
                    "highlighted": False,
                },
                {
                    "name": "Regular",
                    "price": "$22",
                    "period": "month",
                    "features": ["2 bags", "Free shipping"],
                    "ctaLabel": "Subscribe",
                    "highlighted": True,
                },
                {
                    "name": "Roaster",
                    "price": "$40",
                    "period": "month",
                    "features": ["4 bags", "Free shipping", "Cupping notes"],
                    "ctaLabel": "Go big",
                    "highlighted": False,
                },
            ],
        },
        "testimonials": {
            "sectionLabel": "REGULARS",
            "heading": "What our regulars say",
            "testimonials": [
                {
                    "quote": "Best flat white in town.",
                    "name": "Ana",
                    "role": "Designer",
                    "avatar": "https://loremflickr.com/96/96/portrait,face",
                },
                {
                    "quote": "My mornings depend on it.",
                    "name": "Ben",
                    "role": "Nurse",
                    "avatar": "https://loremflickr.com/96/96/portrait,face",
                },
                {
                    "quote": "The subscription is a steal.",
                    "name": "Chloe",
                    "role": "Student",
                    "avatar": "https://loremflickr.com/96/96/portrait,face",
                },
            ],
        },
        "ctaBanner": {
            "headline": "Start your ritual today",
            "subtext": "First bag on us.",
            "ctaLabel": "Claim offer",
        },
        "footer": {
            "logo": "Morning Ritual",
            "columns": [
                {"heading": "Visit", "links": [{"label": "Locations", "href": "#"}]},
                {"heading": "Shop", "links": [{"label": "Beans", "href": "#"}]},
                {"heading": "About", "links": [{"label": "Story", "href": "#"}]},
            ],
            "copyright": "© 2025 Morning Ritual. All rights reserved.",
        },
    },
}

LANDING_EXTRAS: dict[str, Any] = {
    "faq": {
        "sectionLabel": "FAQ",
        "heading": "Questions",
        "items": [{"question": "Do you deliver?", "answer": "Yes, nationwide."}],
    },
    "stats": {
        "heading": "By the numbers",
        "items": [{"label": "Cups a day", "value": "2k+"}],
    },
    "newsletter": {
        "heading": "Join the list",
        "subtext": "Roast drops and events.",
        "placeholder": "you@example.com",
        "buttonLabel": "Subscribe",
    },
    "team": {
        "heading": "Meet the roasters",
        "members": [
            {
                "name": "Dee",
                "role": "Head roaster",
                "bio": "Ten years behind the drum.",
                "avatar": "https://loremflickr.com/128/128/portrait,professional",
            }
        ],
    },
    "logoBar": {"heading": "As featured in", "logos": ["Daily Grind", "Bean Weekly"]},
}

PRODUCT_DATA: dict[str, Any] = {
    "pageType": "product",
    "title": "Aurora Headphones",
    "product": {
        "nav": {
            "logo": "Aurora",
            "links": [
                {"label": "Details", "href": "#details"},
                {"label": "Reviews", "href": "#reviews"},
            ],
            "ctaLabel": "Buy",
            "accentColor": "#22c55e",
        },
        "productSection": {
            "title": "Aurora ANC Headphones",
            "description": "Wireless headphones with adaptive noise cancelling.",
            "price": "$199",
            "originalPrice": "$249",
            "images": [
                "https://loremflickr.com/1200/1200/headphones,audio",
                "https://loremflickr.com/800/800/headphones,music",
                "https://loremflickr.com/800/800/headphones,studio",
                "https://loremflickr.com/800/800/headphones,travel",
                "https://loremflickr.com/800/800/headphones,case",
            ],
            "colors": ["#000000", "#ffffff"],
            "sizes": ["One size"],
            "ctaLabel": "Add to cart",
        },
        "reviews": {
            "heading": "Customer reviews",
            "summaryText": "Loved by commuters",
            "averageRating": 4.8,
            "reviewCount": 128,
            "reviews": [
                {"name": "Eli", "avatar": "https://loremflickr.com/96/96/portrait,face", "rating": 5, "title": "Silence", "text": "Blocks the train."},
                {"name": "Fay", "avatar": "https://loremflickr.com/96/96/portrait,face", "rating": 4, "title": "Comfy", "text": "Wear them all day."},
                {"name": "Gus", "avatar": "https://loremflickr.com/96/96/portrait,face", "rating": 3, "title": "Good", "text": "Bass could be deeper."},
                {"name": "Hal", "avatar": "https://loremflickr.com/96/96/portrait,face", "rating": 5, "title": "Great", "text": "Battery lasts forever."},
            ],
        },
        "relatedProducts": {
            "heading": "You may also like",
            "items": [
                {"title": "Aurora Buds", "image": "https://loremflickr.com/600/600/earbuds", "price": "$129"},
                {"title": "Travel Case", "image": "https://loremflickr.com/600/600/case", "price": "$29"},
            ],
        },
    },
}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def landing_data() -> dict[str, Any]:
    """Well-formed landing page JSON with every required section."""
    return copy.deepcopy(LANDING_DATA)


@pytest.fixture
def landing_data_with_extras(landing_data) -> dict[str, Any]:
    """Landing page JSON with every optional section populated."""
    landing_data["landing"].update(copy.deepcopy(LANDING_EXTRAS))
    return landing_data


@pytest.fixture
def product_data() -> dict[str, Any]:
    """Well-formed product page JSON."""
    return copy.deepcopy(PRODUCT_DATA)


@pytest.fixture
def landing_page(landing_data) -> LandingPage:
    """Landing page model."""
    return load_page(landing_data)


@pytest.fixture
def product_page(product_data) -> ProductPage:
    """Product page model."""
    return load_page(product_data)
