"""
Tests for the per-format coordinate parsers.
"""

import pytest

from geocoord.core.coords import parsers
from geocoord.core.coords.utm import get_utm_zone_bounds
from geocoord.core.errors import (
    ConversionError,
    MalformedFieldError,
    NotRecognizedError,
    RangeError,
)
from geocoord.models.coords import CoordinateFormat


class TestParseDecimal:
    """Tests for decimal degrees parsing."""

    @pytest.mark.parametrize(
        "text, lat, lon",
        [
            ("19.856, 99.817", 19.856, 99.817),
            ("19.856 99.817", 19.856, 99.817),
            ("-33.857, 151.215", -33.857, 151.215),
            ("40.713, -74.006", 40.713, -74.006),
            ("-33.857, -70.506", -33.857, -70.506),
            ("45, 90", 45.0, 90.0),
            ("90, 0", 90.0, 0.0),
            ("-90, 0", -90.0, 0.0),
            ("0, 180", 0.0, 180.0),
            ("0, -180", 0.0, -180.0),
        ],
    )
    def test_valid(self, text: str, lat: float, lon: float) -> None:
        """Test valid decimal coordinates pass through unchanged."""
        result = parsers.parse_decimal(text)
        assert result.format == CoordinateFormat.DECIMAL
        assert result.location.latitude == lat
        assert result.location.longitude == lon
        assert result.original == text

    def test_no_rounding(self) -> None:
        """Test full precision is kept."""
        result = parsers.parse_decimal("19.85612345678, 99.81798765432")
        assert result.location.latitude == 19.85612345678
        assert result.location.longitude == 99.81798765432

    def test_latitude_out_of_range(self) -> None:
        """Test latitude above 90 is rejected, not clamped."""
        with pytest.raises(RangeError, match="Latitude out of range") as exc_info:
            parsers.parse_decimal("91, 0")
        assert exc_info.value.details["field"] == "latitude"
        assert exc_info.value.details["value"] == 91.0

    def test_longitude_out_of_range(self) -> None:
        """Test longitude above 180 is rejected."""
        with pytest.raises(RangeError, match="Longitude out of range"):
            parsers.parse_decimal("0, 181")

    @pytest.mark.parametrize("text", ["", "Big Ben London", "19.856"])
    def test_not_decimal(self, text: str) -> None:
        """Test non-decimal strings."""
        with pytest.raises(NotRecognizedError):
            parsers.parse_decimal(text)


class TestParseDMS:
    """Tests for degrees-minutes-seconds parsing."""

    @pytest.mark.parametrize(
        "text, lat, lon",
        [
            ("19°51'22\"N 99°49'0\"E", 19.856111, 99.816667),
            ("19d51m22sN 99d49m0sE", 19.856111, 99.816667),
            ("19 51 22 N 99 49 0 E", 19.856111, 99.816667),
            ("33°51'25\"S 151°12'55\"E", -33.857, 151.215),
            ("40°42'46\"N 74°0'22\"W", 40.713, -74.006),
            ("38°53'23.5\"N 77°2'6.5\"W", 38.8899, -77.0351),
            ("19°51'22\"n, 99°49'0\"e", 19.856111, 99.816667),
        ],
    )
    def test_valid(self, text: str, lat: float, lon: float) -> None:
        """Test DMS conversion to decimal degrees."""
        result = parsers.parse_dms(text)
        assert result.format == CoordinateFormat.DMS
        assert result.location.latitude == pytest.approx(lat, abs=0.001)
        assert result.location.longitude == pytest.approx(lon, abs=0.001)

    def test_latitude_degrees_over_90(self) -> None:
        """Test latitude degrees above 90."""
        with pytest.raises(RangeError):
            parsers.parse_dms("91°0'0\"N 0°0'0\"E")

    def test_longitude_degrees_over_180(self) -> None:
        """Test longitude degrees above 180."""
        with pytest.raises(RangeError):
            parsers.parse_dms("10°0'0\"N 181°0'0\"E")

    def test_minutes_60(self) -> None:
        """Test minutes must be below 60."""
        with pytest.raises(RangeError, match="minutes"):
            parsers.parse_dms("45°60'0\"N 90°0'0\"E")

    def test_seconds_60(self) -> None:
        """Test seconds must be below 60."""
        with pytest.raises(RangeError, match="seconds"):
            parsers.parse_dms("45°0'60\"N 90°0'0\"E")

    def test_total_latitude_over_90(self) -> None:
        """Test 90 degrees plus minutes is still rejected."""
        with pytest.raises(RangeError):
            parsers.parse_dms("90°30'0\"N 0°0'0\"E")

    @pytest.mark.parametrize(
        "text",
        ["-19°51'22\"S 99°49'0\"E", "-19°51'22\"N 99°49'0\"E", "19°51'22\"N -99°49'0\"W"],
    )
    def test_signed_degrees_with_direction(self, text: str) -> None:
        """Test a sign combined with a hemisphere letter is rejected."""
        with pytest.raises(MalformedFieldError, match="Conflicting sign"):
            parsers.parse_dms(text)

    def test_not_dms(self) -> None:
        """Test non-DMS input."""
        with pytest.raises(NotRecognizedError):
            parsers.parse_dms("19.856, 99.817")


class TestParseUTM:
    """Tests for UTM parsing."""

    def test_zone_47_north(self) -> None:
        """Test a point on the zone 47 central meridian."""
        result = parsers.parse_utm("47N 500000 2200000")
        assert result.format == CoordinateFormat.UTM
        assert 5 <= result.location.latitude <= 21
        assert 97 <= result.location.longitude <= 106
        assert result.location.longitude == pytest.approx(99.0, abs=1e-9)

    def test_zone_18_north(self) -> None:
        """Test zone 18 north."""
        result = parsers.parse_utm("18N 500000 4500000")
        min_lon, max_lon = get_utm_zone_bounds(18)
        assert min_lon <= result.location.longitude <= max_lon
        assert result.location.latitude == pytest.approx(40.65, abs=0.01)

    def test_zone_56_south(self) -> None:
        """Test a band letter before N selects the southern hemisphere."""
        result = parsers.parse_utm("56H 500000 6250000")
        assert result.location.latitude < 0
        assert result.location.latitude == pytest.approx(-33.87, abs=0.05)
        assert result.location.longitude == pytest.approx(153.0, abs=1e-9)

    def test_lowercase_band(self) -> None:
        """Test the band letter is case-insensitive."""
        upper = parsers.parse_utm("47Q 485986 2197460")
        lower = parsers.parse_utm("47q 485986 2197460")
        assert upper.location == lower.location

    @pytest.mark.parametrize("text", ["0N 500000 5000000", "61N 500000 5000000"])
    def test_invalid_zone(self, text: str) -> None:
        """Test zones outside 1-60."""
        with pytest.raises(MalformedFieldError, match="Invalid UTM zone") as exc_info:
            parsers.parse_utm(text)
        assert exc_info.value.details["field"] == "zone"

    def test_northing_overflows_to_invalid_latitude(self) -> None:
        """Test an impossible northing yields a conversion error."""
        with pytest.raises(ConversionError):
            parsers.parse_utm("1N 500000 99999999")

    def test_unparseable_number(self) -> None:
        """Test a numeric field that does not fit in a float."""
        with pytest.raises(MalformedFieldError):
            parsers.parse_utm("47N 500000 " + "9" * 400)

    @pytest.mark.parametrize("text", ["", "18N 5000000", "47 500000 2200000"])
    def test_not_utm(self, text: str) -> None:
        """Test non-UTM input."""
        with pytest.raises(NotRecognizedError):
            parsers.parse_utm(text)


class TestParseMGRS:
    """Tests for MGRS parsing."""

    @pytest.mark.parametrize(
        "text",
        ["18SUJ2337106519", "18SUJ23370651", "18SUJ233065", "18SUJ2306", "18SUJ23"],
    )
    def test_valid_precisions(self, text: str) -> None:
        """Test MGRS references from 1 m to 10 km."""
        result = parsers.parse_mgrs(text)
        assert result.format == CoordinateFormat.MGRS
        # Washington DC area
        assert 38 <= result.location.latitude <= 40
        assert -78 <= result.location.longitude <= -76

    def test_lowercase(self) -> None:
        """Test lower-case references decode like upper-case ones."""
        upper = parsers.parse_mgrs("18SUJ2337106519")
        lower = parsers.parse_mgrs("18suj2337106519")
        assert upper.location == lower.location
        assert lower.original == "18suj2337106519"

    def test_hawaii(self) -> None:
        """Test a single-digit zone."""
        result = parsers.parse_mgrs("4QFJ12345678")
        assert 19 <= result.location.latitude <= 23
        assert -160 <= result.location.longitude <= -154

    def test_undecodable_square(self) -> None:
        """Test a 100 km square letter that does not exist in the zone."""
        with pytest.raises(ConversionError):
            parsers.parse_mgrs("18SAJ2337106519")

    @pytest.mark.parametrize(
        "text",
        ["", "18S", "18SIJ1234567890", "18SOJ1234567890", "18SUJ123456789", "61ABC1234567890"],
    )
    def test_not_mgrs(self, text: str) -> None:
        """Test strings rejected by the MGRS pattern."""
        with pytest.raises(NotRecognizedError):
            parsers.parse_mgrs(text)
