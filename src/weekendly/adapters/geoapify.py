"""Geoapify Places adapter - HTTP client for nearby place lookups."""

import logging

import requests

from weekendly.core.places import PlaceRecord, expand_categories, filter_within_radius

logger = logging.getLogger(__name__)

API_BASE = "https://api.geoapify.com"
METERS_PER_DEGREE = 111320
SEARCH_LIMIT = 50


class PlaceLookupError(Exception):
    """Raised when the places API request fails."""

    pass


def _format_address(props: dict) -> str:
    if props.get("formatted"):
        return props["formatted"]
    keys = ("address_line1", "address_line2", "city", "postcode", "country")
    parts = [props[k] for k in keys if props.get(k)]
    return ", ".join(parts) if parts else "Address not available"


def feature_to_place(feature: dict) -> PlaceRecord | None:
    """Convert a GeoJSON feature from the API into a PlaceRecord."""
    try:
        lng, lat = feature["geometry"]["coordinates"][:2]
    except (KeyError, TypeError, ValueError):
        return None

    props = feature.get("properties", {})
    contact = props.get("contact") or {}
    return PlaceRecord(
        name=props.get("name", ""),
        address=_format_address(props),
        lat=float(lat),
        lng=float(lng),
        categories=list(props.get("categories", [])),
        place_id=props.get("place_id", ""),
        phone=props.get("phone") or contact.get("phone"),
        website=props.get("website") or contact.get("website"),
        opening_hours=props.get("opening_hours"),
    )


class GeoapifyPlacesAdapter:
    """
    Geoapify Places API adapter.

    Implements PlaceLookup protocol. Only does I/O and response parsing;
    turning places into activities happens in the core.
    """

    def __init__(self, api_key: str, timeout: float = 10.0, session: requests.Session | None = None):
        if not api_key:
            raise PlaceLookupError("Missing Geoapify API key. Set GEOAPIFY_API_KEY in config/weekendly.conf")
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()

    def _get(self, path: str, params: dict) -> dict:
        try:
            resp = self._session.get(
                f"{API_BASE}{path}",
                params={**params, "apiKey": self.api_key},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            logger.warning(f"Geoapify request to {path} failed: {e}")
            raise PlaceLookupError(f"Place lookup failed: {e}") from e

    def search(
        self,
        lat: float,
        lng: float,
        radius_meters: int = 5000,
        categories: list[str] | None = None,
    ) -> list[PlaceRecord]:
        """Places within the radius, nearest first, at most 20."""
        delta = radius_meters / METERS_PER_DEGREE
        rect = f"rect:{lng - delta},{lat - delta},{lng + delta},{lat + delta}"

        data = self._get(
            "/v2/places",
            {
                "filter": rect,
                "categories": ",".join(expand_categories(categories)),
                "limit": SEARCH_LIMIT,
            },
        )

        features = data.get("features")
        if not isinstance(features, list):
            logger.warning("Geoapify response had no features")
            return []

        places = [p for p in (feature_to_place(f) for f in features) if p is not None]
        return filter_within_radius(places, lat, lng, radius_meters)

    def reverse_geocode(self, lat: float, lng: float) -> str:
        """Formatted address for a coordinate, or "lat, lng" when unknown."""
        fallback = f"{lat:.4f}, {lng:.4f}"
        try:
            data = self._get("/v1/geocode/reverse", {"lat": lat, "lon": lng})
        except PlaceLookupError:
            return fallback

        features = data.get("features") or []
        if not features:
            return fallback
        return features[0].get("properties", {}).get("formatted") or fallback
