"""Tests for coded-field lookups and entry interpretation."""

import pytest

from astroweather.interpret.fields import (
    CLOUD_COVER,
    COLUMNS,
    LIFTED_INDEX,
    RELATIVE_HUMIDITY,
    SEEING,
    TRANSPARENCY,
    UNDEFINED,
    WIND_SPEED,
    cloud_cover_label,
    interpret_entry,
    lifted_index_label,
    relative_humidity_label,
    seeing_label,
    temperature_label,
    transparency_label,
    wind_label,
    wind_speed_label,
)
from astroweather.models.forecast import ForecastResponse

ALL_LOOKUPS = [
    cloud_cover_label,
    seeing_label,
    transparency_label,
    wind_speed_label,
    lifted_index_label,
    relative_humidity_label,
]


class TestOutOfDomain:
    @pytest.mark.parametrize("lookup", ALL_LOOKUPS)
    @pytest.mark.parametrize("code", [-1000, -11, -5, 17, 100, 10**9])
    def test_undefined(self, lookup, code):
        assert lookup(code) == UNDEFINED

    @pytest.mark.parametrize(
        "lookup", [cloud_cover_label, seeing_label, transparency_label, wind_speed_label]
    )
    def test_zero_is_undefined_for_dense_tables(self, lookup):
        assert lookup(0) == UNDEFINED

    def test_just_past_dense_tables(self):
        assert cloud_cover_label(len(CLOUD_COVER)) == UNDEFINED
        assert seeing_label(len(SEEING)) == UNDEFINED
        assert transparency_label(len(TRANSPARENCY)) == UNDEFINED
        assert wind_speed_label(len(WIND_SPEED)) == UNDEFINED

    def test_gaps_in_lifted_index(self):
        for code in (-9, -5, 0, 1, 3, 11, 14):
            assert lifted_index_label(code) == UNDEFINED


class TestDocumentedCodes:
    def test_cloud_cover(self):
        assert cloud_cover_label(1) == "0-6 %"
        assert cloud_cover_label(5) == "44-56 %"
        assert cloud_cover_label(9) == "94-100 %"

    def test_seeing(self):
        assert seeing_label(1) == "<0.5"
        assert seeing_label(3) == "0.75-1"
        assert seeing_label(8) == ">2.5"

    def test_transparency(self):
        assert transparency_label(1) == "<0.3"
        assert transparency_label(4) == "0.5-0.6"
        assert transparency_label(8) == ">1"

    def test_wind_speed(self):
        assert wind_speed_label(1) == "Below 0.3m/s (calm)"
        assert wind_speed_label(8) == "Over 32.6m/s (hurricane)"

    def test_lifted_index(self):
        assert lifted_index_label(-10) == "below -7"
        assert lifted_index_label(-1) == "-3 to 0"
        assert lifted_index_label(2) == "0 to 4"
        assert lifted_index_label(15) == "over 11"
        assert len(LIFTED_INDEX) == 8

    def test_relative_humidity(self):
        assert relative_humidity_label(-4) == "0-5 %"
        assert relative_humidity_label(0) == "20-25 %"
        assert relative_humidity_label(11) == "75-80 %"
        assert relative_humidity_label(15) == "95-99 %"
        assert relative_humidity_label(16) == "100 %"
        assert sorted(RELATIVE_HUMIDITY) == list(range(-4, 17))

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            LIFTED_INDEX[3] = "x"  # type: ignore[index]

    def test_wind_and_temperature(self):
        assert wind_label("SE", 2) == "SE 0.3-3.4m/s (light)"
        assert wind_label("N", 42) == "N undefined"
        assert temperature_label(-3) == "-3 C"


class TestInterpretEntry:
    def test_first_entry(self, astro_forecast: ForecastResponse):
        r = interpret_entry(astro_forecast.series[0])
        assert r.timepoint == 72
        assert r.cloud_cover == "94-100 %"
        assert r.seeing == "0.75-1"
        assert r.transparency == "0.5-0.6"
        assert r.lifted_index == "0 to 4"
        assert r.humidity == "75-80 %"
        assert r.temperature == "9 C"
        assert r.wind == "SE 0.3-3.4m/s (light)"
        assert r.precipitation == "none"

    def test_row_order(self, astro_forecast: ForecastResponse):
        row = interpret_entry(astro_forecast.series[0]).as_row()
        assert len(row) == len(COLUMNS)
        assert row == [
            "72",
            "94-100 %",
            "0 to 4",
            "9 C",
            "0.75-1",
            "0.5-0.6",
            "75-80 %",
            "none",
            "SE 0.3-3.4m/s (light)",
        ]


EXPECTED_CLOUD_COVER = {
    1: "0-6 %", 2: "6-19 %", 3: "19-31 %", 4: "31-44 %", 5: "44-56 %",
    6: "56-69 %", 7: "69-81 %", 8: "81-94 %", 9: "94-100 %",
}
EXPECTED_SEEING = {
    1: "<0.5", 2: "0.5-0.75", 3: "0.75-1", 4: "1-1.25",
    5: "1.25-1.5", 6: "1.5-2", 7: "2-2.5", 8: ">2.5",
}
EXPECTED_TRANSPARENCY = {
    1: "<0.3", 2: "0.3-0.4", 3: "0.4-0.5", 4: "0.5-0.6",
    5: "0.6-0.7", 6: "0.7-0.85", 7: "0.85-1", 8: ">1",
}
EXPECTED_WIND_SPEED = {
    1: "Below 0.3m/s (calm)",
    2: "0.3-3.4m/s (light)",
    3: "3.4-8.0m/s (moderate)",
    4: "8.0-10.8m/s (fresh)",
    5: "10.8-17.2m/s (strong)",
    6: "17.2-24.5m/s (gale)",
    7: "24.5-32.6m/s (storm)",
    8: "Over 32.6m/s (hurricane)",
}
EXPECTED_LIFTED_INDEX = {
    -10: "below -7", -6: "-7 to -5", -4: "-5 to -3", -1: "-3 to 0",
    2: "0 to 4", 6: "4 to 8", 10: "8 to 11", 15: "over 11",
}
EXPECTED_RELATIVE_HUMIDITY = {
    -4: "0-5 %", -3: "5-10 %", -2: "10-15 %", -1: "15-20 %",
    0: "20-25 %", 1: "25-30 %", 2: "30-35 %", 3: "35-40 %",
    4: "40-45 %", 5: "45-50 %", 6: "50-55 %", 7: "55-60 %",
    8: "60-65 %", 9: "65-70 %", 10: "70-75 %", 11: "75-80 %",
    12: "80-85 %", 13: "85-90 %", 14: "90-95 %", 15: "95-99 %",
    16: "100 %",
}

FULL_TABLES = [
    (cloud_cover_label, EXPECTED_CLOUD_COVER),
    (seeing_label, EXPECTED_SEEING),
    (transparency_label, EXPECTED_TRANSPARENCY),
    (wind_speed_label, EXPECTED_WIND_SPEED),
    (lifted_index_label, EXPECTED_LIFTED_INDEX),
    (relative_humidity_label, EXPECTED_RELATIVE_HUMIDITY),
]


class TestFullTables:
    @pytest.mark.parametrize(
        "lookup,code,expected",
        [(fn, code, label) for fn, table in FULL_TABLES for code, label in table.items()],
    )
    def test_every_documented_code(self, lookup, code, expected):
        assert lookup(code) == expected

    @pytest.mark.parametrize("lookup,table", FULL_TABLES)
    def test_nothing_else_is_defined(self, lookup, table):
        defined = {code for code in range(-50, 51) if lookup(code) != UNDEFINED}
        assert defined == set(table)
