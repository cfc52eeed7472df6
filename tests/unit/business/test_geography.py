"""Tests for the geography point codec."""

import pytest

from venture_cms.business.geography import (
    decode_point,
    decode_point_or_default,
    encode_point,
)

CENTER = (13.6218, 123.1948)


class TestEncodePoint:
    """Tests for encode_point."""

    def test_longitude_first(self):
        assert encode_point(13.6218, 123.1948) == "POINT(123.1948 13.6218)"

    def test_integers_encoded_as_floats(self):
        assert encode_point(0, -180) == "POINT(-180.0 0.0)"


class TestDecodePoint:
    """Tests for decode_point."""

    def test_decodes_wkt(self):
        assert decode_point("POINT(123.1948 13.6218)") == (13.6218, 123.1948)

    def test_decodes_ewkt_with_srid(self):
        assert decode_point("SRID=4326;POINT(123.1948 13.6218)") == (13.6218, 123.1948)

    def test_tolerates_spacing_and_case(self):
        assert decode_point("point ( -73.5  45.5 )") == (45.5, -73.5)

    def test_decodes_scientific_notation(self):
        assert decode_point("POINT(1e-05 -2.5E-7)") == (-2.5e-07, 1e-05)

    @pytest.mark.parametrize(
        "text",
        ["not-a-point", "", "POINT(123.1948)", "POINT(a b)", "LINESTRING(0 0, 1 1)", None, 13.6],
    )
    def test_rejects_malformed(self, text):
        assert decode_point(text) is None

    def test_default_on_malformed(self):
        assert decode_point_or_default("not-a-point", CENTER) == CENTER

    def test_default_not_used_for_valid_text(self):
        assert decode_point_or_default("POINT(0 0)", CENTER) == (0.0, 0.0)


class TestRoundTrip:
    """decode(encode(lat, lon)) returns the same pair."""

    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [
            (13.6218, 123.1948),
            (-90.0, -180.0),
            (90.0, 180.0),
            (0.0, 0.0),
            (1e-05, -1e-07),
            (-33.868820490000004, 151.20929550000001),
            (0.1 + 0.2, 179.99999999999997),
        ],
    )
    def test_lossless(self, latitude, longitude):
        assert decode_point(encode_point(latitude, longitude)) == (latitude, longitude)
