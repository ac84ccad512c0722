"""Tests for per-group plain-English rendering."""

from typing import get_args

import pytest

from explainer.protocol.constants import (
    CloudAmount,
    CloudGroupType,
    CloudTypeKind,
    ConvectiveType,
    DirectionType,
    DistanceModifier,
    DistanceUnit,
    KeywordType,
    PressureUnit,
    ReportPart,
    RunwayDesignator,
    SpeedUnit,
    VisibilityTrend,
    VisibilityType,
    WeatherCode,
    WeatherDescriptor,
    WeatherGroupType,
    WeatherQualifier,
    WindType,
)
from explainer.protocol.group_types import (
    CloudGroup,
    CloudType,
    CloudTypesGroup,
    Direction,
    Distance,
    Group,
    KeywordGroup,
    LayerForecastGroup,
    LightningGroup,
    LocationGroup,
    LowMidHighCloudGroup,
    MinMaxTemperatureGroup,
    MiscGroup,
    PrecipitationGroup,
    Pressure,
    PressureGroup,
    PressureTendencyGroup,
    ReportTime,
    ReportTimeGroup,
    Runway,
    RunwayStateGroup,
    SeaSurfaceGroup,
    Speed,
    Temperature,
    TemperatureGroup,
    TrendGroup,
    UnknownGroup,
    VicinityGroup,
    VisibilityGroup,
    WeatherGroup,
    WeatherPhenomena,
    WindGroup,
)
from explainer.services.renderer import format_report_time, render_group


def _deg(degrees):
    return Direction(DirectionType.VALUE_DEGREES, degrees)


def _ft(value):
    return Distance(value, DistanceUnit.FEET)


def _weather(*phenomena, type=WeatherGroupType.CURRENT):
    return WeatherGroup(type=type, phenomena=tuple(phenomena))


class TestHeaderGroups:
    def test_location(self):
        assert render_group(LocationGroup("KLAX")) == "ICAO airport code: KLAX"

    def test_report_time_with_day(self):
        group = ReportTimeGroup(ReportTime(hour=19, minute=53, day=9))
        assert render_group(group) == "Report time: day 9, 19:53 UTC"

    def test_report_time_without_day(self):
        group = ReportTimeGroup(ReportTime(hour=5, minute=7))
        assert render_group(group) == "Report time: 05:07 UTC"

    def test_format_report_time(self):
        assert format_report_time(ReportTime(0, 0, 31)) == "day 31, 00:00 UTC"


class TestKeywords:
    @pytest.mark.parametrize("keyword,expected", [
        (KeywordType.METAR, "Report type: METAR (weather observation report)"),
        (KeywordType.SPECI, "Unscheduled METAR (weather observation report)"),
        (KeywordType.TAF, "Report type: TAF (terminal aerodrome forecast)"),
        (KeywordType.AUTO, "Fully automated report with no human intervention"),
        (KeywordType.CAVOK, "Ceiling and visibility OK (visibility >10km, no clouds below 5000ft)"),
        (KeywordType.RMK, "The remarks are as follows"),
        (KeywordType.AO1, "Automated station without precipitation discriminator"),
        (KeywordType.AO2, "Automated station with precipitation discriminator"),
    ])
    def test_known_keywords(self, keyword, expected):
        assert render_group(KeywordGroup(keyword), ReportPart.HEADER, keyword.value) == expected

    @pytest.mark.parametrize("keyword", [
        KeywordType.NIL, KeywordType.AMD, KeywordType.COR, KeywordType.CNL,
        KeywordType.NOSPECI, KeywordType.MAINTENANCE_INDICATOR,
    ])
    def test_other_keywords_echo_raw_text(self, keyword):
        text = render_group(KeywordGroup(keyword), ReportPart.METAR, keyword.value)
        assert text == f"Keyword group: {keyword.value}"


class TestWind:
    def test_calm(self):
        assert render_group(WindGroup(type=WindType.SURFACE_WIND_CALM)) == "Wind: Calm"

    def test_direction_speed_gust(self):
        group = WindGroup(
            direction=_deg(270),
            wind_speed=Speed(10, SpeedUnit.KNOTS),
            gust_speed=Speed(18, SpeedUnit.KNOTS),
        )
        assert render_group(group) == "Wind: from 270 degrees at 10 knots, gusting to 18 knots"

    def test_variable_direction(self):
        group = WindGroup(
            direction=Direction(DirectionType.VARIABLE),
            wind_speed=Speed(3, SpeedUnit.METERS_PER_SECOND),
        )
        assert render_group(group) == "Wind: variable direction at 3 m/s"

    def test_direction_not_reported(self):
        group = WindGroup(
            direction=Direction(DirectionType.NOT_REPORTED),
            wind_speed=Speed(5, SpeedUnit.KILOMETERS_PER_HOUR),
        )
        assert render_group(group) == "Wind: at 5 km/h"

    def test_speed_not_converted(self):
        group = WindGroup(direction=_deg(90), wind_speed=Speed(12, SpeedUnit.MILES_PER_HOUR))
        assert render_group(group) == "Wind: from 90 degrees at 12 mph"

    def test_nothing_reported(self):
        group = WindGroup(direction=Direction(DirectionType.NOT_REPORTED))
        assert render_group(group) == "Wind: not reported"

    def test_variable_sector(self):
        group = WindGroup(
            type=WindType.SURFACE_WIND_WITH_VARIABLE_SECTOR,
            direction=_deg(250),
            wind_speed=Speed(8, SpeedUnit.KNOTS),
            var_sector_begin=_deg(210),
            var_sector_end=_deg(280),
        )
        assert render_group(group) == (
            "Wind: from 250 degrees at 8 knots, varying between 210 and 280 degrees"
        )

    def test_sector_only(self):
        group = WindGroup(
            type=WindType.VARIABLE_WIND_SECTOR,
            var_sector_begin=_deg(180),
            var_sector_end=_deg(240),
        )
        assert render_group(group) == "Wind: varying between 180 and 240 degrees"


class TestVisibility:
    def test_prevailing_statute_miles(self):
        group = VisibilityGroup(visibility=Distance(2, DistanceUnit.STATUTE_MILES))
        assert render_group(group) == "Visibility: 2 statute miles (3219 meters / 10560 feet)"

    def test_fractional_less_than(self):
        group = VisibilityGroup(visibility=Distance(
            0.25, DistanceUnit.STATUTE_MILES, DistanceModifier.LESS_THAN,
        ))
        assert render_group(group) == (
            "Visibility: less than 0.25 statute miles (402 meters / 1320 feet)"
        )

    def test_meters_more_than(self):
        group = VisibilityGroup(visibility=Distance(
            10000, DistanceUnit.METERS, DistanceModifier.MORE_THAN,
        ))
        assert render_group(group) == "Visibility: more than 10000 meters"

    def test_not_reported(self):
        assert render_group(VisibilityGroup()) == "Visibility: not reported"

    def test_tower(self):
        group = VisibilityGroup(
            type=VisibilityType.TOWER,
            visibility=Distance(1.5, DistanceUnit.STATUTE_MILES),
        )
        assert render_group(group) == (
            "Visibility from air traffic control tower is 1.5 statute miles "
            "(2414 meters / 7920 feet)"
        )

    def test_surface(self):
        group = VisibilityGroup(type=VisibilityType.SURFACE, visibility=Distance(800))
        assert render_group(group) == "Surface visibility is 800 meters"

    def test_runway(self):
        group = VisibilityGroup(type=VisibilityType.RUNWAY, visibility=Distance(2000))
        assert render_group(group) == "Runway visibility is 2000 meters"

    def test_trend_on_prevailing(self):
        group = VisibilityGroup(visibility=Distance(3000), trend=VisibilityTrend.NEUTRAL)
        assert render_group(group) == "Visibility: 3000 meters, with no change trend"


class TestRunwayVisualRange:
    def test_meters_with_trend(self):
        group = VisibilityGroup(
            type=VisibilityType.RVR,
            visibility=Distance(1200),
            runway=Runway(6, RunwayDesignator.LEFT),
            trend=VisibilityTrend.UPWARD,
        )
        assert render_group(group) == (
            "Runway visual range for runway 6 Left is 1200 meters "
            "(0.745645 statute miles), with increasing trend"
        )

    def test_feet(self):
        group = VisibilityGroup(
            type=VisibilityType.RVR,
            visibility=Distance(6000, DistanceUnit.FEET, DistanceModifier.MORE_THAN),
            runway=Runway(24),
        )
        assert render_group(group) == (
            "Runway visual range for runway 24 is more than 6000 feet "
            "(1829 meters / 1.13636 statute miles)"
        )

    def test_variable(self):
        group = VisibilityGroup(
            type=VisibilityType.VARIABLE_RVR,
            min_visibility=Distance(600, DistanceUnit.METERS, DistanceModifier.LESS_THAN),
            max_visibility=Distance(1000, DistanceUnit.METERS, DistanceModifier.MORE_THAN),
            trend=VisibilityTrend.DOWNWARD,
        )
        assert render_group(group) == (
            "Runway visual range is variable from less than 600 meters "
            "to more than 1000 meters "
            "(0.372823 statute miles to 0.621371 statute miles), with decreasing trend"
        )

    def test_variable_bound_not_reported(self):
        group = VisibilityGroup(
            type=VisibilityType.VARIABLE_RVR,
            min_visibility=Distance(600),
            runway=Runway(9, RunwayDesignator.CENTER),
        )
        assert render_group(group) == (
            "Runway visual range for runway 9 Center is variable from 600 meters "
            "to not reported (0.372823 statute miles to not reported)"
        )

    def test_not_reported(self):
        group = VisibilityGroup(
            type=VisibilityType.RVR,
            runway=Runway(6),
            trend=VisibilityTrend.NOT_REPORTED,
        )
        assert render_group(group) == "Runway visual range for runway 6 is not reported"


class TestClouds:
    @pytest.mark.parametrize("amount,expected", [
        (CloudAmount.NONE_CLR, "Sky: Clear"),
        (CloudAmount.NONE_SKC, "Sky: Clear"),
        (CloudAmount.NSC, "Sky: No significant clouds"),
        (CloudAmount.NCD, "Sky: No clouds detected"),
        (CloudAmount.NOT_REPORTED, "Sky: No clouds"),
    ])
    def test_no_clouds(self, amount, expected):
        assert render_group(CloudGroup(CloudGroupType.NO_CLOUDS, amount)) == expected

    def test_layer(self):
        group = CloudGroup(CloudGroupType.CLOUD_LAYER, CloudAmount.FEW, height=_ft(2500))
        assert render_group(group) == "Cloud layer: Few clouds (1/8 to 2/8 coverage) at 2500 feet"

    def test_layer_with_cumulonimbus(self):
        group = CloudGroup(
            CloudGroupType.CLOUD_LAYER,
            CloudAmount.BROKEN,
            height=_ft(1200),
            convective_type=ConvectiveType.CUMULONIMBUS,
        )
        assert render_group(group) == (
            "Cloud layer: Broken clouds (5/8 to 7/8 coverage) at 1200 feet (Cumulonimbus)"
        )

    def test_layer_without_height(self):
        group = CloudGroup(
            CloudGroupType.CLOUD_LAYER,
            CloudAmount.OVERCAST,
            convective_type=ConvectiveType.TOWERING_CUMULUS,
        )
        assert render_group(group) == "Cloud layer: Overcast (8/8 coverage) (Towering Cumulus)"

    def test_layer_convective_not_reported(self):
        group = CloudGroup(
            CloudGroupType.CLOUD_LAYER,
            CloudAmount.SCATTERED,
            height=_ft(3000),
            convective_type=ConvectiveType.NOT_REPORTED,
        )
        assert render_group(group) == (
            "Cloud layer: Scattered clouds (3/8 to 4/8 coverage) at 3000 feet"
        )

    def test_layer_amount_unknown(self):
        group = CloudGroup(CloudGroupType.CLOUD_LAYER, CloudAmount.NOT_REPORTED)
        assert render_group(group) == "Cloud layer: Unknown amount"

    def test_vertical_visibility(self):
        group = CloudGroup(
            CloudGroupType.VERTICAL_VISIBILITY,
            CloudAmount.OBSCURED,
            vertical_visibility=_ft(300),
        )
        assert render_group(group) == "Vertical visibility: 300 feet"

    def test_vertical_visibility_not_reported(self):
        group = CloudGroup(CloudGroupType.VERTICAL_VISIBILITY, CloudAmount.OBSCURED)
        assert render_group(group) == "Vertical visibility: not reported"

    def test_obscuration(self):
        group = CloudGroup(
            CloudGroupType.OBSCURATION,
            cloud_type=CloudType(CloudTypeKind.FOG, 8),
        )
        assert render_group(group) == "Obscuration: fog covering 8/8 of the sky"

    def test_obscuration_unknown_substance(self):
        group = CloudGroup(
            CloudGroupType.OBSCURATION,
            cloud_type=CloudType(CloudTypeKind.STRATUS, 3),
        )
        assert render_group(group) == "Obscuration: unknown covering 3/8 of the sky"

    def test_obscuration_without_detail(self):
        assert render_group(CloudGroup(CloudGroupType.OBSCURATION)) == "Obscuration"

    @pytest.mark.parametrize("cloud_type,raw", [
        (CloudGroupType.CEILING, "CIG 005"),
        (CloudGroupType.VARIABLE_CEILING, "CIG 005V010"),
        (CloudGroupType.CHINO, "CHINO"),
        (CloudGroupType.CLD_MISG, "CLD MISG"),
    ])
    def test_other_cloud_groups_echo_raw_text(self, cloud_type, raw):
        text = render_group(CloudGroup(cloud_type), ReportPart.RMK, raw)
        assert text == f"Cloud information: {raw}"


class TestTemperature:
    def test_with_humidity(self):
        group = TemperatureGroup(Temperature(20), Temperature(15), relative_humidity=73.0)
        assert render_group(group) == (
            "Temperature: 20°C (68°F), Dew point: 15°C (59°F) (RH: 73%)"
        )

    def test_below_zero(self):
        group = TemperatureGroup(Temperature(-5), Temperature(-10), relative_humidity=68.4)
        assert render_group(group) == (
            "Temperature: -5°C (23°F), Dew point: -10°C (14°F) (RH: 68%)"
        )

    def test_fahrenheit_rounded(self):
        group = TemperatureGroup(Temperature(21), Temperature(-1))
        assert render_group(group) == "Temperature: 21°C (70°F), Dew point: -1°C (30°F)"

    def test_air_not_reported(self):
        group = TemperatureGroup(Temperature(None), Temperature(12))
        assert render_group(group) == "Temperature: not reported, Dew point: 12°C (54°F)"

    def test_nothing_reported(self):
        group = TemperatureGroup()
        assert render_group(group) == "Temperature: not reported, Dew point: not reported"

    def test_tenths(self):
        group = TemperatureGroup(Temperature(18.9), Temperature(13.3))
        assert render_group(group) == (
            "Temperature: 18.9°C (66°F), Dew point: 13.3°C (56°F)"
        )


class TestPressure:
    def test_hectopascal(self):
        group = PressureGroup(Pressure(1013, PressureUnit.HECTOPASCAL))
        assert render_group(group) == "Pressure: 1013 hPa"

    def test_inches_hg_with_conversion(self):
        group = PressureGroup(Pressure(29.92, PressureUnit.INCHES_HG))
        assert render_group(group) == "Pressure: 29.92 inHg (1013 hPa)"

    def test_mm_hg(self):
        group = PressureGroup(Pressure(750, PressureUnit.MM_HG))
        assert render_group(group) == "Pressure: 750 mmHg"

    def test_not_reported(self):
        assert render_group(PressureGroup()) == "Pressure: not reported"


class TestWeather:
    def test_no_significant_weather(self):
        group = WeatherGroup(type=WeatherGroupType.NSW)
        assert render_group(group) == "Weather: No significant weather"

    def test_light_rain(self):
        group = _weather(WeatherPhenomena(WeatherQualifier.LIGHT, weather=(WeatherCode.RAIN,)))
        assert render_group(group) == "Weather: Light Rain "

    def test_moderate_snow(self):
        group = _weather(WeatherPhenomena(WeatherQualifier.MODERATE, weather=(WeatherCode.SNOW,)))
        assert render_group(group) == "Weather: Moderate Snow "

    def test_heavy_thunderstorm(self):
        group = _weather(WeatherPhenomena(
            WeatherQualifier.HEAVY,
            WeatherDescriptor.THUNDERSTORM,
            (WeatherCode.RAIN, WeatherCode.HAIL),
        ))
        assert render_group(group) == "Weather: Heavy Thunderstorm Rain Hail "

    def test_vicinity_showers(self):
        group = _weather(WeatherPhenomena(WeatherQualifier.VICINITY, WeatherDescriptor.SHOWERS))
        assert render_group(group) == "Weather: Vicinity Showers "

    def test_patches_of_fog(self):
        group = _weather(WeatherPhenomena(
            descriptor=WeatherDescriptor.PATCHES, weather=(WeatherCode.FOG,),
        ))
        assert render_group(group) == "Weather: Patches of Fog "

    def test_several_phenomena(self):
        group = _weather(
            WeatherPhenomena(WeatherQualifier.RECENT, WeatherDescriptor.THUNDERSTORM),
            WeatherPhenomena(weather=(WeatherCode.MIST,)),
            type=WeatherGroupType.RECENT,
        )
        assert render_group(group) == "Weather: Recent Thunderstorm Mist "

    def test_codes_without_words(self):
        group = _weather(WeatherPhenomena(weather=(WeatherCode.SQUALLS,)))
        assert render_group(group) == "Weather: "


class TestCloudTypes:
    def test_layers_one_per_line(self):
        group = CloudTypesGroup((
            CloudType(CloudTypeKind.STRATOCUMULUS, 6),
            CloudType(CloudTypeKind.ALTOCUMULUS, 2, _ft(12000)),
        ))
        assert render_group(group) == (
            "Obscuration / cloud layers:\n"
            "stratocumulus covering 6/8 of the sky\n"
            "altocumulus covering 2/8 of the sky at 12000 feet"
        )

    def test_unnamed_kind(self):
        group = CloudTypesGroup((CloudType(CloudTypeKind.ALTOCUMULUS_CASTELLANUS, 1),))
        assert render_group(group).splitlines()[1] == "unknown covering 1/8 of the sky"


class TestRawTextGroups:
    @pytest.mark.parametrize("group,raw,expected", [
        (TrendGroup(), "TEMPO", "Trend information: TEMPO"),
        (RunwayStateGroup(), "R24/290050", "Runway state: R24/290050"),
        (SeaSurfaceGroup(), "W15/S2", "Sea surface conditions: W15/S2"),
        (MinMaxTemperatureGroup(), "TX25/1012Z", "Min/Max temperature: TX25/1012Z"),
        (PrecipitationGroup(), "P0009", "Precipitation information: P0009"),
        (LayerForecastGroup(), "620304", "Layer forecast: 620304"),
        (PressureTendencyGroup(), "52012", "Pressure tendency: 52012"),
        (LowMidHighCloudGroup(), "8/578", "Low/Mid/High clouds: 8/578"),
        (LightningGroup(), "OCNL LTGIC", "Lightning: OCNL LTGIC"),
        (VicinityGroup(), "VIRGA", "Vicinity observations: VIRGA"),
        (MiscGroup(), "98096", "Additional information: 98096"),
        (UnknownGroup(), "XYZ123", "Unknown group: XYZ123"),
    ])
    def test_echo_raw_text(self, group, raw, expected):
        assert render_group(group, ReportPart.RMK, raw) == expected


# One instance of every group kind, used for whole-union checks
SAMPLES = [
    KeywordGroup(KeywordType.METAR),
    LocationGroup("EGLL"),
    ReportTimeGroup(ReportTime(12, 0, 1)),
    WindGroup(),
    VisibilityGroup(),
    CloudGroup(CloudGroupType.NO_CLOUDS),
    TemperatureGroup(),
    PressureGroup(),
    WeatherGroup(),
    CloudTypesGroup(),
    TrendGroup(),
    RunwayStateGroup(),
    SeaSurfaceGroup(),
    MinMaxTemperatureGroup(),
    PrecipitationGroup(),
    LayerForecastGroup(),
    PressureTendencyGroup(),
    LowMidHighCloudGroup(),
    LightningGroup(),
    VicinityGroup(),
    MiscGroup(),
    UnknownGroup(),
]


class TestDispatch:
    def test_samples_cover_every_kind(self):
        assert {type(g) for g in SAMPLES} == set(get_args(Group))

    @pytest.mark.parametrize("group", SAMPLES, ids=lambda g: type(g).__name__)
    def test_every_kind_renders(self, group):
        text = render_group(group, ReportPart.METAR, "RAW")
        assert isinstance(text, str)
        assert text

    @pytest.mark.parametrize("group", SAMPLES, ids=lambda g: type(g).__name__)
    def test_rendering_is_repeatable(self, group):
        assert render_group(group, ReportPart.METAR, "RAW") == render_group(
            group, ReportPart.METAR, "RAW",
        )

    def test_rejects_non_group(self):
        with pytest.raises(TypeError):
            render_group(object())

    def test_rejects_raw_string(self):
        with pytest.raises(TypeError):
            render_group("25005KT")

    def test_not_reported_values_carry_no_units(self):
        for group, prefix in [
            (VisibilityGroup(visibility=Distance(None, DistanceUnit.STATUTE_MILES)), "Visibility"),
            (PressureGroup(Pressure(None, PressureUnit.INCHES_HG)), "Pressure"),
            (CloudGroup(CloudGroupType.VERTICAL_VISIBILITY), "Vertical visibility"),
        ]:
            assert render_group(group) == f"{prefix}: not reported"
