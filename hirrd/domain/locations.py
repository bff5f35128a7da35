"""
Location filter options — states and union territories per country,
from the ISO 3166-2 subdivision data shipped with pycountry.
"""

import pycountry


def get_locations(country_code: str) -> list[str]:
    """Resolve a country code to its location filter options, sorted by name."""
    subdivisions = pycountry.subdivisions.get(country_code=country_code.upper())
    if not subdivisions:
        raise ValueError(f"Unknown country or no subdivisions: {country_code}")
    return sorted(subdivision.name for subdivision in subdivisions)
