"""Tests for the Geoapify places adapter."""

from unittest.mock import MagicMock

import pytest
import requests

from weekendly.adapters.geoapify import GeoapifyPlacesAdapter, PlaceLookupError, feature_to_place


def _feature(name, lat, lng, **props):
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lng, lat]},
        "properties": {"name": name, "place_id": f"id-{name}", **props},
    }


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def adapter(session):
    return GeoapifyPlacesAdapter("test-key", session=session)


def _respond(session, payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    session.get.return_value = response
    return response


class TestFeatureToPlace:
    def test_parses_properties(self):
        place = feature_to_place(
            _feature(
                "Cafe",
                40.7,
                -74.0,
                categories=["catering.cafe"],
                formatted="1 Main St, NYC",
                contact={"phone": "555"},
            )
        )
        assert (place.lat, place.lng) == (40.7, -74.0)
        assert place.address == "1 Main St, NYC"
        assert place.phone == "555"

    def test_builds_address_from_parts(self):
        place = feature_to_place(_feature("X", 1, 2, address_line1="1 Main St", city="Springfield"))
        assert place.address == "1 Main St, Springfield"

    def test_missing_address(self):
        assert feature_to_place(_feature("X", 1, 2)).address == "Address not available"

    def test_bad_geometry(self):
        assert feature_to_place({"properties": {"name": "X"}}) is None


class TestGeoapifyPlacesAdapter:
    def test_requires_key(self):
        with pytest.raises(PlaceLookupError):
            GeoapifyPlacesAdapter("")

    def test_search_builds_request(self, adapter, session):
        _respond(session, {"features": []})

        adapter.search(40.0, -74.0, radius_meters=1000, categories=["cafe"])

        url = session.get.call_args.args[0]
        params = session.get.call_args.kwargs["params"]
        assert url.endswith("/v2/places")
        assert params["apiKey"] == "test-key"
        assert params["categories"] == "catering.cafe,catering.ice_cream"
        assert params["filter"].startswith("rect:")
        assert params["limit"] == 50

    def test_search_filters_and_sorts(self, adapter, session):
        _respond(
            session,
            {
                "features": [
                    _feature("far", 40.03, -74.0),
                    _feature("near", 40.001, -74.0),
                    _feature("outside", 41.0, -74.0),
                    {"geometry": None},
                ]
            },
        )

        places = adapter.search(40.0, -74.0, radius_meters=5000)

        assert [p.name for p in places] == ["near", "far"]

    def test_search_without_features(self, adapter, session):
        _respond(session, {"error": "nope"})
        assert adapter.search(40.0, -74.0) == []

    def test_http_error_raises(self, adapter, session):
        response = _respond(session, {})
        response.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")

        with pytest.raises(PlaceLookupError, match="401"):
            adapter.search(40.0, -74.0)

    def test_connection_error_raises(self, adapter, session):
        session.get.side_effect = requests.ConnectionError("offline")
        with pytest.raises(PlaceLookupError):
            adapter.search(40.0, -74.0)

    def test_reverse_geocode(self, adapter, session):
        _respond(session, {"features": [{"properties": {"formatted": "Times Square, NYC"}}]})
        assert adapter.reverse_geocode(40.758, -73.9855) == "Times Square, NYC"

    def test_reverse_geocode_fallback(self, adapter, session):
        session.get.side_effect = requests.Timeout("slow")
        assert adapter.reverse_geocode(40.75801, -73.98551) == "40.7580, -73.9855"
