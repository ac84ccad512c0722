"""Plain-English explanations of decoded METAR/TAF groups.

``render_group`` turns one group into one line (or, for cloud type lists,
several lines) of text.  Each group class has its own rendering function;
the dispatch table is checked against the ``Group`` union at import time so
a group class without a renderer is caught immediately.

Formatting conventions:
    - Primary values print in their native unit with source precision
      ("10 knots", "29.92 inHg", "0.25 statute miles").
    - Parenthetical metres, feet, degrees F and hPa print as whole numbers.
    - A value that was not reported prints "not reported" and no unit.
"""

from typing import Any, Callable, get_args

from ..protocol.constants import (
    CLOUD_AMOUNT_PHRASES,
    CLOUD_TYPE_NAMES,
    DESCRIPTOR_WORDS,
    DISTANCE_UNIT_NAMES,
    KEYWORD_SENTENCES,
    OBSCURATION_NAMES,
    PRESSURE_UNIT_NAMES,
    QUALIFIER_WORDS,
    RUNWAY_DESIGNATOR_NAMES,
    SPEED_UNIT_NAMES,
    VISIBILITY_TREND_NAMES,
    WEATHER_WORDS,
    CloudAmount,
    CloudGroupType,
    ConvectiveType,
    DirectionType,
    DistanceModifier,
    DistanceUnit,
    PressureUnit,
    ReportPart,
    TemperatureUnit,
    VisibilityType,
    WeatherGroupType,
    WindType,
)
from ..protocol.group_types import (
    CloudGroup,
    CloudType,
    CloudTypesGroup,
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
    PressureGroup,
    PressureTendencyGroup,
    ReportTime,
    ReportTimeGroup,
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
    WindGroup,
)

NOT_REPORTED = "not reported"

_MODIFIER_WORDS = {
    DistanceModifier.LESS_THAN: "less than ",
    DistanceModifier.MORE_THAN: "more than ",
}

_VISIBILITY_LEAD_INS = {
    VisibilityType.PREVAILING: "Visibility: ",
    VisibilityType.TOWER: "Visibility from air traffic control tower is ",
    VisibilityType.SURFACE: "Surface visibility is ",
    VisibilityType.RUNWAY: "Runway visibility is ",
}

_NO_CLOUDS_PHRASES = {
    CloudAmount.NONE_CLR: "Sky: Clear",
    CloudAmount.NONE_SKC: "Sky: Clear",
    CloudAmount.NSC: "Sky: No significant clouds",
    CloudAmount.NCD: "Sky: No clouds detected",
}

_CONVECTIVE_NAMES = {
    ConvectiveType.CUMULONIMBUS: "Cumulonimbus",
    ConvectiveType.TOWERING_CUMULUS: "Towering Cumulus",
}


def _num(value: float) -> str:
    """Shortest form of a source value: 10, 0.25, 29.92."""
    return f"{value:g}"


def format_report_time(time: ReportTime) -> str:
    """Format as "day 9, 19:53 UTC", dropping the day when absent."""
    prefix = f"day {time.day}, " if time.day is not None else ""
    return f"{prefix}{time.hour:02d}:{time.minute:02d} UTC"


def _speed_text(speed: Speed) -> str:
    return f"{_num(speed.value)} {SPEED_UNIT_NAMES[speed.unit]}"


def _distance_text(distance: Distance) -> str:
    if not distance.is_reported:
        return NOT_REPORTED
    modifier = _MODIFIER_WORDS.get(distance.modifier, "")
    return f"{modifier}{_num(distance.value)} {DISTANCE_UNIT_NAMES[distance.unit]}"


def _height_text(height: Distance) -> str:
    """ " at 2500 feet" for a reported height, otherwise empty."""
    if not height.is_reported:
        return ""
    return f" at {_num(height.value)} feet"


def _temperature_text(temperature: Temperature) -> str:
    if not temperature.is_reported:
        return NOT_REPORTED
    celsius = temperature.to_unit(TemperatureUnit.C)
    fahrenheit = temperature.to_unit(TemperatureUnit.F)
    return f"{_num(celsius)}°C ({round(fahrenheit)}°F)"


def _cloud_type_text(cloud_type: CloudType) -> str:
    name = CLOUD_TYPE_NAMES.get(cloud_type.kind, "unknown")
    return f"{name} covering {cloud_type.okta}/8 of the sky{_height_text(cloud_type.height)}"


# ---------------------------------------------------------------------------
# Per-kind renderers
# ---------------------------------------------------------------------------


def _render_keyword(group: KeywordGroup, report_part: ReportPart, raw: str) -> str:
    sentence = KEYWORD_SENTENCES.get(group.type)
    if sentence is None:
        return f"Keyword group: {raw}"
    return sentence


def _render_location(group: LocationGroup, report_part: ReportPart, raw: str) -> str:
    return f"ICAO airport code: {group.icao}"


def _render_report_time(group: ReportTimeGroup, report_part: ReportPart, raw: str) -> str:
    return f"Report time: {format_report_time(group.time)}"


def _render_wind(group: WindGroup, report_part: ReportPart, raw: str) -> str:
    """Direction, speed, gust and variable sector, each only when present.

    Calm wind short-circuits to "Wind: Calm".  Units are the group's own;
    speeds are never converted.
    """
    if group.type == WindType.SURFACE_WIND_CALM:
        return "Wind: Calm"

    clauses = []
    if group.direction.is_value:
        clauses.append(f"from {group.direction.degrees} degrees")
    elif group.direction.type == DirectionType.VARIABLE:
        clauses.append("variable direction")
    if group.wind_speed.is_reported:
        clauses.append(f"at {_speed_text(group.wind_speed)}")
    text = " ".join(clauses)

    extras = []
    if group.gust_speed.is_reported:
        extras.append(f"gusting to {_speed_text(group.gust_speed)}")
    if group.var_sector_begin.is_value and group.var_sector_end.is_value:
        extras.append(
            f"varying between {group.var_sector_begin.degrees} "
            f"and {group.var_sector_end.degrees} degrees"
        )
    for extra in extras:
        text = f"{text}, {extra}" if text else extra

    return f"Wind: {text or NOT_REPORTED}"


def _rvr_conversions(distance: Distance) -> str:
    """Metres and statute miles for an RVR value, skipping its own unit."""
    parts = []
    if distance.unit != DistanceUnit.METERS:
        meters = distance.to_unit(DistanceUnit.METERS)
        if meters is not None:
            parts.append(f"{round(meters)} meters")
    if distance.unit != DistanceUnit.STATUTE_MILES:
        miles = distance.to_unit(DistanceUnit.STATUTE_MILES)
        if miles is not None:
            parts.append(f"{miles:g} statute miles")
    return " / ".join(parts)


def _render_runway_visual_range(group: VisibilityGroup) -> str:
    text = "Runway visual range "
    if group.runway is not None:
        text += f"for runway {group.runway.number}"
        designator = RUNWAY_DESIGNATOR_NAMES.get(group.runway.designator)
        if designator:
            text += f" {designator}"
        text += " "

    if group.type == VisibilityType.VARIABLE_RVR:
        text += (
            f"is variable from {_distance_text(group.min_visibility)}"
            f" to {_distance_text(group.max_visibility)}"
        )
        min_conv = _rvr_conversions(group.min_visibility)
        max_conv = _rvr_conversions(group.max_visibility)
        if min_conv or max_conv:
            text += f" ({min_conv or NOT_REPORTED} to {max_conv or NOT_REPORTED})"
    else:
        text += f"is {_distance_text(group.visibility)}"
        if not group.visibility.is_reported:
            return text
        conversions = _rvr_conversions(group.visibility)
        if conversions:
            text += f" ({conversions})"
    return text


def _render_visibility(group: VisibilityGroup, report_part: ReportPart, raw: str) -> str:
    if group.type in (VisibilityType.RVR, VisibilityType.VARIABLE_RVR):
        text = _render_runway_visual_range(group)
    else:
        lead_in = _VISIBILITY_LEAD_INS.get(group.type, "Visibility: ")
        distance = group.visibility
        text = lead_in + _distance_text(distance)
        if distance.is_reported and distance.unit == DistanceUnit.STATUTE_MILES:
            meters = distance.to_unit(DistanceUnit.METERS)
            feet = distance.to_unit(DistanceUnit.FEET)
            text += f" ({round(meters)} meters / {round(feet)} feet)"

    trend = VISIBILITY_TREND_NAMES.get(group.trend)
    if trend:
        text += f", with {trend} trend"
    return text


def _render_cloud(group: CloudGroup, report_part: ReportPart, raw: str) -> str:
    if group.type == CloudGroupType.NO_CLOUDS:
        return _NO_CLOUDS_PHRASES.get(group.amount, "Sky: No clouds")

    if group.type == CloudGroupType.CLOUD_LAYER:
        text = "Cloud layer: " + CLOUD_AMOUNT_PHRASES.get(group.amount, "Unknown amount")
        text += _height_text(group.height)
        convective = _CONVECTIVE_NAMES.get(group.convective_type)
        if convective:
            text += f" ({convective})"
        return text

    if group.type == CloudGroupType.VERTICAL_VISIBILITY:
        if not group.vertical_visibility.is_reported:
            return f"Vertical visibility: {NOT_REPORTED}"
        return f"Vertical visibility: {_num(group.vertical_visibility.value)} feet"

    if group.type == CloudGroupType.OBSCURATION:
        if group.cloud_type is None:
            return "Obscuration"
        name = OBSCURATION_NAMES.get(group.cloud_type.kind, "unknown")
        return f"Obscuration: {name} covering {group.cloud_type.okta}/8 of the sky"

    return f"Cloud information: {raw}"


def _render_temperature(group: TemperatureGroup, report_part: ReportPart, raw: str) -> str:
    text = (
        f"Temperature: {_temperature_text(group.air_temperature)}, "
        f"Dew point: {_temperature_text(group.dew_point)}"
    )
    if group.relative_humidity is not None:
        text += f" (RH: {round(group.relative_humidity)}%)"
    return text


def _render_pressure(group: PressureGroup, report_part: ReportPart, raw: str) -> str:
    pressure = group.atmospheric_pressure
    if not pressure.is_reported:
        return f"Pressure: {NOT_REPORTED}"
    text = f"Pressure: {_num(pressure.value)} {PRESSURE_UNIT_NAMES[pressure.unit]}"
    if pressure.unit == PressureUnit.INCHES_HG:
        text += f" ({round(pressure.to_unit(PressureUnit.HECTOPASCAL))} hPa)"
    return text


def _render_weather(group: WeatherGroup, report_part: ReportPart, raw: str) -> str:
    """Qualifier, descriptor, then weather words, each followed by a space."""
    if group.type == WeatherGroupType.NSW:
        return "Weather: No significant weather"

    words = []
    for phenomena in group.phenomena:
        qualifier = QUALIFIER_WORDS.get(phenomena.qualifier)
        if qualifier:
            words.append(qualifier)
        descriptor = DESCRIPTOR_WORDS.get(phenomena.descriptor)
        if descriptor:
            words.append(descriptor)
        for code in phenomena.weather:
            word = WEATHER_WORDS.get(code)
            if word:
                words.append(word)
    return "Weather: " + "".join(f"{word} " for word in words)


def _render_cloud_types(group: CloudTypesGroup, report_part: ReportPart, raw: str) -> str:
    lines = ["Obscuration / cloud layers:"]
    lines.extend(_cloud_type_text(cloud_type) for cloud_type in group.cloud_types)
    return "\n".join(lines)


def _passthrough(label: str) -> Callable[[Any, ReportPart, str], str]:
    def render(group: Any, report_part: ReportPart, raw: str) -> str:
        return f"{label}: {raw}"
    return render


_RENDERERS: dict[type, Callable[[Any, ReportPart, str], str]] = {
    KeywordGroup: _render_keyword,
    LocationGroup: _render_location,
    ReportTimeGroup: _render_report_time,
    WindGroup: _render_wind,
    VisibilityGroup: _render_visibility,
    CloudGroup: _render_cloud,
    TemperatureGroup: _render_temperature,
    PressureGroup: _render_pressure,
    WeatherGroup: _render_weather,
    CloudTypesGroup: _render_cloud_types,
    TrendGroup: _passthrough("Trend information"),
    RunwayStateGroup: _passthrough("Runway state"),
    SeaSurfaceGroup: _passthrough("Sea surface conditions"),
    MinMaxTemperatureGroup: _passthrough("Min/Max temperature"),
    PrecipitationGroup: _passthrough("Precipitation information"),
    LayerForecastGroup: _passthrough("Layer forecast"),
    PressureTendencyGroup: _passthrough("Pressure tendency"),
    LowMidHighCloudGroup: _passthrough("Low/Mid/High clouds"),
    LightningGroup: _passthrough("Lightning"),
    VicinityGroup: _passthrough("Vicinity observations"),
    MiscGroup: _passthrough("Additional information"),
    UnknownGroup: _passthrough("Unknown group"),
}

_unrendered = set(get_args(Group)) - set(_RENDERERS)
if _unrendered:
    raise RuntimeError(
        "No renderer for group kinds: "
        + ", ".join(sorted(cls.__name__ for cls in _unrendered))
    )


def render_group(group: Group, report_part: ReportPart = ReportPart.UNKNOWN, raw: str = "") -> str:
    """Explain one group in plain English.

    Args:
        group: Any member of the Group union.
        report_part: Section of the report the group came from.
        raw: Original text of the group, echoed by the raw-text renderers.

    Returns:
        Explanation text; multi-line only for cloud type lists.

    Raises:
        TypeError: if group is not a member of the Group union.
    """
    renderer = _RENDERERS.get(type(group))
    if renderer is None:
        raise TypeError(f"Not a report group: {type(group).__name__}")
    return renderer(group, report_part, raw)
