"""METAR/TAF report parser.

Splits raw report text into groups, classifies each group into one of the
typed group dataclasses and collects report-level metadata (type, station,
time, flags, error).

Layout handled:
    [METAR|SPECI|TAF] [AMD|COR] LOCATION DDHHMMZ [NIL|AUTO|COR] [DDHH/DDHH]
    body groups ... [RMK remark groups ...]

Parsing stops at the first header error; groups recognised up to that
point are kept.  Body and remark groups never cause an error: anything
unrecognised becomes an UnknownGroup.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from .constants import (
    CloudAmount,
    CloudGroupType,
    CloudTypeKind,
    ConvectiveType,
    DirectionType,
    DistanceModifier,
    DistanceUnit,
    KeywordType,
    PRECIPITATION_CODES,
    PressureUnit,
    ReportError,
    ReportPart,
    ReportType,
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
from .group_types import (
    CloudGroup,
    CloudType,
    CloudTypesGroup,
    Direction,
    Distance,
    Group,
    GroupInfo,
    KeywordGroup,
    LayerForecastGroup,
    LightningGroup,
    LocationGroup,
    LowMidHighCloudGroup,
    MinMaxTemperatureGroup,
    MiscGroup,
    ParseResult,
    PrecipitationGroup,
    Pressure,
    PressureGroup,
    PressureTendencyGroup,
    ReportMetadata,
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
from .units import relative_humidity

logger = logging.getLogger(__name__)

_KEYWORDS = {k.value: k for k in KeywordType}

_REPORT_TYPE_KEYWORDS = {
    "METAR": ReportType.METAR,
    "SPECI": ReportType.METAR,
    "TAF": ReportType.TAF,
}

_FLAG_KEYWORDS = {
    KeywordType.SPECI: "is_speci",
    KeywordType.AUTO: "is_automated",
    KeywordType.NIL: "is_nil",
    KeywordType.CNL: "is_cancelled",
    KeywordType.AMD: "is_amended",
    KeywordType.COR: "is_correctional",
}

_SPEED_UNITS = {
    "KT": SpeedUnit.KNOTS,
    "MPS": SpeedUnit.METERS_PER_SECOND,
    "KMH": SpeedUnit.KILOMETERS_PER_HOUR,
}

_QUALIFIERS = {
    "-": WeatherQualifier.LIGHT,
    "+": WeatherQualifier.HEAVY,
    "VC": WeatherQualifier.VICINITY,
    "RE": WeatherQualifier.RECENT,
}

_DISTANCE_MODIFIERS = {
    "M": DistanceModifier.LESS_THAN,
    "P": DistanceModifier.MORE_THAN,
}

_WEATHER_CODES = "|".join(
    code.value for code in WeatherCode if code != WeatherCode.NOT_REPORTED
)
_DESCRIPTORS = "|".join(
    d.value for d in WeatherDescriptor if d != WeatherDescriptor.NONE
)
# Longest codes first so TCU is not read as T + CU, ACC not as AC + C
_CLOUD_TYPE_CODES = "|".join(sorted(
    (k.value for k in CloudTypeKind if k != CloudTypeKind.NOT_REPORTED),
    key=len, reverse=True,
))


def _parse_fraction(text: str) -> Optional[float]:
    """'3' -> 3, '1/4' -> 0.25; None for a zero denominator."""
    if "/" not in text:
        return int(text)
    numerator, denominator = text.split("/")
    if int(denominator) == 0:
        return None
    return int(numerator) / int(denominator)


def _parse_signed_temp(text: str) -> Optional[int]:
    """METAR temperature: '15' -> 15, 'M05' -> -5, '//' -> None."""
    if text is None or text.startswith("//"):
        return None
    if text.startswith("M"):
        return -int(text[1:])
    return int(text)


def _tenths_temp(sign: str, digits: str) -> float:
    """Remark temperature: sign digit 1 means below zero."""
    value = int(digits) / 10.0
    return -value if sign == "1" else value


@dataclass
class _Scan:
    """Mutable state while walking one report's groups."""
    tokens: list[str]
    pos: int = 0
    part: ReportPart = ReportPart.HEADER
    groups: list[GroupInfo] = field(default_factory=list)
    meta: dict = field(default_factory=dict)

    @property
    def done(self) -> bool:
        return self.pos >= len(self.tokens)

    @property
    def current(self) -> str:
        return self.tokens[self.pos]

    def peek(self, offset: int) -> Optional[str]:
        index = self.pos + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def add(self, group: Group, count: int = 1) -> None:
        raw = " ".join(self.tokens[self.pos:self.pos + count])
        self.groups.append(GroupInfo(group, self.part, raw))
        self.pos += count


class ReportParser:
    """Parse METAR/TAF text into metadata and classified groups.

    Stateless: one instance may parse any number of reports, from any
    number of threads.
    """

    LOCATION_PATTERN = re.compile(r"^[A-Z][A-Z0-9]{3}$")
    REPORT_TIME_PATTERN = re.compile(r"^(\d{2})(\d{2})(\d{2})Z$")
    TIME_SPAN_PATTERN = re.compile(r"^(\d{2})(\d{2})/(\d{2})(\d{2})$")
    TREND_PATTERN = re.compile(
        r"^(?:NOSIG|BECMG|TEMPO|INTER|FM\d{6}|TL\d{4}|AT\d{4}|PROB[34]0|\d{4}/\d{4})$"
    )

    WIND_PATTERN = re.compile(
        r"^(\d{3}|VRB|///)(\d{2,3}|//)(?:G(\d{2,3}))?(KT|MPS|KMH)$"
    )
    WIND_SECTOR_PATTERN = re.compile(r"^(\d{3})V(\d{3})$")

    VIS_METERS_PATTERN = re.compile(r"^(\d{4}|////)(NDV|NE|NW|SE|SW|N|E|S|W)?$")
    VIS_MILES_PATTERN = re.compile(r"^([PM])?(\d{1,2}|\d{1,2}/\d{1,2})SM$")
    VIS_MILES_WHOLE_PATTERN = re.compile(r"^\d$")
    VIS_MILES_FRACTION_PATTERN = re.compile(r"^([PM])?(\d/\d{1,2})SM$")
    VIS_KM_PATTERN = re.compile(r"^(\d{1,2})KM$")
    RVR_PATTERN = re.compile(
        r"^R(\d{2})([LCR])?/([PM])?(\d{4})(?:V([PM])?(\d{4}))?(FT)?/?([UDN])?$"
    )
    RVR_NOT_REPORTED_PATTERN = re.compile(r"^R(\d{2})([LCR])?/////$")

    CLOUD_LAYER_PATTERN = re.compile(r"^(FEW|SCT|BKN|OVC|///)(\d{3}|///)(CB|TCU|///)?$")
    VERTICAL_VIS_PATTERN = re.compile(r"^VV(\d{3}|///)$")
    NO_CLOUDS = {
        "CLR": CloudAmount.NONE_CLR,
        "SKC": CloudAmount.NONE_SKC,
        "NSC": CloudAmount.NSC,
        "NCD": CloudAmount.NCD,
    }

    TEMPERATURE_PATTERN = re.compile(r"^(M?\d{2}|//)/(M?\d{2}|//)?$")
    PRESSURE_PATTERN = re.compile(r"^([QA])(\d{4}|////)$")
    QFE_PATTERN = re.compile(r"^QFE(\d{3})(?:/\d{4})?$")
    WEATHER_PATTERN = re.compile(
        rf"^(\+|-|VC|RE)?({_DESCRIPTORS})?((?:{_WEATHER_CODES})*)$"
    )

    RUNWAY_STATE_PATTERN = re.compile(
        r"^(?:R\d{2}[LCR]?/(?:[0-9/]{6}|CLRD(?:\d{2}|//)|SNOCLO)|R/SNOCLO|SNOCLO)$"
    )
    SEA_SURFACE_PATTERN = re.compile(r"^W(M?\d{2}|//)/(S\d|S/|H\d{1,3}|H///)$")
    MIN_MAX_PATTERN = re.compile(r"^T[XN]M?\d{2}/\d{4}Z$")
    LAYER_FORECAST_PATTERN = re.compile(r"^[56]\d{5}$")

    # Remarks
    PRECISE_TEMP_PATTERN = re.compile(r"^T([01])(\d{3})(?:([01])(\d{3}))?$")
    SLP_PATTERN = re.compile(r"^SLP(\d{3}|NO)$")
    PRECIPITATION_PATTERN = re.compile(r"^(?:P(?:\d{4}|////)|[67](?:\d{4}|////)|4/\d{3}|93[13]\d{3})$")
    PRESSURE_TENDENCY_PATTERN = re.compile(r"^(?:5[0-8](?:\d{3}|///)|PRESRR|PRESFR)$")
    REMARK_MIN_MAX_PATTERN = re.compile(r"^(?:[12][01]\d{3}|4[01]\d{3}[01]\d{3})$")
    LOW_MID_HIGH_PATTERN = re.compile(r"^8/[0-9/]{3}$")
    LIGHTNING_PATTERN = re.compile(r"^LTG[A-Z]*$")
    LIGHTNING_FREQUENCIES = {"OCNL", "FRQ", "CONS"}
    VICINITY_PATTERN = re.compile(r"^(?:VIRGA|CBMAM|CB|TCU|ACC)$")
    MISC_PATTERN = re.compile(
        r"^(?:98\d{3}|FROIN|CC[A-Z]|(?:BLACK)?(?:BLU|WHT|GRN|YLO1|YLO2|AMB|RED)\+?)$"
    )
    CLOUD_TYPES_PATTERN = re.compile(rf"^(?:(?:{_CLOUD_TYPE_CODES})\d)+$")
    CLOUD_TYPE_ITEM_PATTERN = re.compile(rf"({_CLOUD_TYPE_CODES})(\d)")
    CEILING_PATTERN = re.compile(r"^(\d{3})(?:V(\d{3}))?$")
    REMARK_VIS_VALUE_PATTERN = re.compile(r"^\d{1,2}$|^\d/\d{1,2}$")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def split_groups(report: str) -> list[str]:
        """Split report text on whitespace, dropping the '=' end marker."""
        text = report.strip()
        if text.endswith("="):
            text = text[:-1]
        return text.split()

    def parse(self, report: str) -> ParseResult:
        """Parse one report.

        Args:
            report: Raw METAR or TAF text.

        Returns:
            ParseResult with metadata and groups in report order.
        """
        scan = _Scan(tokens=self.split_groups(report))
        if scan.done:
            logger.debug("Empty report")
            return ParseResult(ReportMetadata(error=ReportError.EMPTY_REPORT))

        error = self._parse_header(scan)
        if error != ReportError.NONE:
            logger.info(
                "Report error %s at group %d of %d",
                error.name, scan.pos + 1, len(scan.tokens),
            )
            scan.meta["error"] = error
            return ParseResult(ReportMetadata(**scan.meta), tuple(scan.groups))

        while not scan.done:
            if scan.current == KeywordType.RMK.value:
                scan.part = ReportPart.RMK
            if scan.part == ReportPart.RMK:
                self._parse_remark_group(scan)
            else:
                self._parse_body_group(scan)

        return ParseResult(ReportMetadata(**scan.meta), tuple(scan.groups))

    # ------------------------------------------------------------------
    # Header
    # ------------------------------------------------------------------

    def _add_keyword(self, scan: _Scan, keyword: KeywordType) -> None:
        flag = _FLAG_KEYWORDS.get(keyword)
        if flag:
            scan.meta[flag] = True
        scan.add(KeywordGroup(keyword))

    def _parse_header(self, scan: _Scan) -> ReportError:
        """Consume the header groups, returning the first error found."""
        report_type = _REPORT_TYPE_KEYWORDS.get(scan.current)
        if report_type is not None:
            scan.meta["type"] = report_type
            self._add_keyword(scan, _KEYWORDS[scan.current])
            while not scan.done and scan.current in ("AMD", "COR"):
                self._add_keyword(scan, _KEYWORDS[scan.current])
            if scan.done:
                return ReportError.UNEXPECTED_REPORT_END
            if not self.LOCATION_PATTERN.match(scan.current):
                return ReportError.EXPECTED_LOCATION
        elif not self.LOCATION_PATTERN.match(scan.current):
            return ReportError.EXPECTED_REPORT_TYPE_OR_LOCATION

        scan.meta["location"] = scan.current
        scan.add(LocationGroup(scan.current))
        if scan.done:
            return ReportError.UNEXPECTED_REPORT_END

        report_time = self._parse_report_time(scan.current)
        if report_time is not None:
            scan.meta["report_time"] = report_time
            scan.add(ReportTimeGroup(report_time))
        elif scan.meta.get("type") != ReportType.TAF:
            return ReportError.EXPECTED_REPORT_TIME

        while not scan.done and scan.current in ("NIL", "AUTO", "COR", "AMD", "CNL"):
            self._add_keyword(scan, _KEYWORDS[scan.current])

        if scan.meta.get("is_nil"):
            scan.part = self._body_part(scan)
            return ReportError.NONE
        if scan.done:
            return ReportError.UNEXPECTED_REPORT_END

        # An explicit METAR/SPECI keeps its type; its time spans are body trends
        declared = scan.meta.get("type", ReportType.UNKNOWN)
        if declared != ReportType.METAR and self.TIME_SPAN_PATTERN.match(scan.current):
            scan.meta["type"] = ReportType.TAF
            scan.part = ReportPart.TAF
            scan.add(TrendGroup())
        elif declared == ReportType.TAF:
            return ReportError.EXPECTED_TIME_SPAN

        scan.part = self._body_part(scan)
        return ReportError.NONE

    @staticmethod
    def _body_part(scan: _Scan) -> ReportPart:
        if scan.meta.get("type") == ReportType.TAF:
            return ReportPart.TAF
        return ReportPart.METAR

    def _parse_report_time(self, token: str) -> Optional[ReportTime]:
        match = self.REPORT_TIME_PATTERN.match(token)
        if not match:
            return None
        day, hour, minute = (int(g) for g in match.groups())
        if not (1 <= day <= 31 and hour <= 24 and minute <= 59):
            return None
        return ReportTime(hour=hour, minute=minute, day=day)

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------

    def _parse_body_group(self, scan: _Scan) -> None:
        token = scan.current

        keyword = _KEYWORDS.get(token)
        if keyword is not None and keyword != KeywordType.MAINTENANCE_INDICATOR:
            self._add_keyword(scan, keyword)
            return

        # "1 1/2SM": whole and fractional statute miles in two groups
        nxt = scan.peek(1)
        if nxt and self.VIS_MILES_WHOLE_PATTERN.match(token):
            fraction = self.VIS_MILES_FRACTION_PATTERN.match(nxt)
            if fraction:
                value = _parse_fraction(fraction.group(2))
                if value is not None:
                    value += int(token)
                scan.add(VisibilityGroup(
                    visibility=self._miles(value, fraction.group(1)),
                ), count=2)
                return

        sector = self.WIND_SECTOR_PATTERN.match(token)
        if sector:
            self._add_wind_sector(scan, sector)
            return

        for classify in (
            self._classify_trend,
            self._classify_wind,
            self._classify_visibility,
            self._classify_cloud,
            self._classify_temperature,
            self._classify_pressure,
            self._classify_runway_state,
            self._classify_sea_surface,
            self._classify_min_max,
            self._classify_layer_forecast,
            self._classify_weather,
        ):
            group = classify(token)
            if group is not None:
                scan.add(group)
                return

        logger.debug("Unrecognised group %r in %s", token, scan.part.name)
        scan.add(UnknownGroup())

    def _classify_trend(self, token: str) -> Optional[Group]:
        if self.TREND_PATTERN.match(token):
            return TrendGroup()
        return None

    def _classify_wind(self, token: str) -> Optional[Group]:
        match = self.WIND_PATTERN.match(token)
        if not match:
            return None
        direction_text, speed_text, gust_text, unit_text = match.groups()
        unit = _SPEED_UNITS[unit_text]

        if direction_text == "VRB":
            direction = Direction(DirectionType.VARIABLE)
        elif direction_text == "///":
            direction = Direction(DirectionType.NOT_REPORTED)
        else:
            direction = Direction(DirectionType.VALUE_DEGREES, int(direction_text))

        speed = Speed(None if speed_text == "//" else int(speed_text), unit)
        gust = Speed(int(gust_text) if gust_text else None, unit)

        if direction.degrees == 0 and speed.value == 0 and not gust.is_reported:
            return WindGroup(type=WindType.SURFACE_WIND_CALM, direction=direction, wind_speed=speed)
        return WindGroup(direction=direction, wind_speed=speed, gust_speed=gust)

    def _add_wind_sector(self, scan: _Scan, match: re.Match) -> None:
        """Variable sector; merged into an immediately preceding wind group."""
        begin = Direction(DirectionType.VALUE_DEGREES, int(match.group(1)))
        end = Direction(DirectionType.VALUE_DEGREES, int(match.group(2)))
        previous = scan.groups[-1] if scan.groups else None
        if (
            previous is not None
            and previous.report_part == scan.part
            and isinstance(previous.group, WindGroup)
            and previous.group.type == WindType.SURFACE_WIND
        ):
            wind = previous.group
            scan.groups[-1] = GroupInfo(
                WindGroup(
                    type=WindType.SURFACE_WIND_WITH_VARIABLE_SECTOR,
                    direction=wind.direction,
                    wind_speed=wind.wind_speed,
                    gust_speed=wind.gust_speed,
                    var_sector_begin=begin,
                    var_sector_end=end,
                ),
                previous.report_part,
                f"{previous.raw_string} {scan.current}",
            )
            scan.pos += 1
            return
        scan.add(WindGroup(
            type=WindType.VARIABLE_WIND_SECTOR,
            var_sector_begin=begin,
            var_sector_end=end,
        ))

    @staticmethod
    def _miles(value: Optional[float], modifier: Optional[str] = None) -> Distance:
        return Distance(
            value,
            DistanceUnit.STATUTE_MILES,
            _DISTANCE_MODIFIERS.get(modifier, DistanceModifier.NONE),
        )

    def _classify_visibility(self, token: str) -> Optional[Group]:
        match = self.VIS_METERS_PATTERN.match(token)
        if match:
            if match.group(1) == "////":
                return VisibilityGroup(visibility=Distance(None, DistanceUnit.METERS))
            meters = int(match.group(1))
            if meters == 9999:
                return VisibilityGroup(visibility=Distance(
                    10000, DistanceUnit.METERS, DistanceModifier.MORE_THAN,
                ))
            return VisibilityGroup(visibility=Distance(meters, DistanceUnit.METERS))

        match = self.VIS_MILES_PATTERN.match(token)
        if match:
            return VisibilityGroup(
                visibility=self._miles(_parse_fraction(match.group(2)), match.group(1)),
            )

        match = self.VIS_KM_PATTERN.match(token)
        if match:
            return VisibilityGroup(
                visibility=Distance(int(match.group(1)) * 1000, DistanceUnit.METERS),
            )

        match = self.RVR_NOT_REPORTED_PATTERN.match(token)
        if match:
            return VisibilityGroup(
                type=VisibilityType.RVR,
                runway=self._runway(match.group(1), match.group(2)),
                trend=VisibilityTrend.NOT_REPORTED,
            )

        match = self.RVR_PATTERN.match(token)
        if match:
            return self._rvr(match)
        return None

    @staticmethod
    def _runway(number: str, designator: Optional[str]) -> Runway:
        return Runway(int(number), RunwayDesignator(designator or ""))

    def _rvr(self, match: re.Match) -> VisibilityGroup:
        number, designator, mod1, value1, mod2, value2, feet, trend = match.groups()
        unit = DistanceUnit.FEET if feet else DistanceUnit.METERS
        first = Distance(
            int(value1), unit, _DISTANCE_MODIFIERS.get(mod1, DistanceModifier.NONE),
        )
        runway = self._runway(number, designator)
        trend = VisibilityTrend(trend) if trend else VisibilityTrend.NONE
        if value2 is None:
            return VisibilityGroup(
                type=VisibilityType.RVR, visibility=first, runway=runway, trend=trend,
            )
        second = Distance(
            int(value2), unit, _DISTANCE_MODIFIERS.get(mod2, DistanceModifier.NONE),
        )
        return VisibilityGroup(
            type=VisibilityType.VARIABLE_RVR,
            min_visibility=first,
            max_visibility=second,
            runway=runway,
            trend=trend,
        )

    def _classify_cloud(self, token: str) -> Optional[Group]:
        amount = self.NO_CLOUDS.get(token)
        if amount is not None:
            return CloudGroup(CloudGroupType.NO_CLOUDS, amount)

        match = self.CLOUD_LAYER_PATTERN.match(token)
        if match:
            amount_text, height_text, convective_text = match.groups()
            height = None if height_text == "///" else int(height_text) * 100
            return CloudGroup(
                CloudGroupType.CLOUD_LAYER,
                amount=CloudAmount(amount_text),
                height=Distance(height, DistanceUnit.FEET),
                convective_type=ConvectiveType(convective_text or ""),
            )

        match = self.VERTICAL_VIS_PATTERN.match(token)
        if match:
            height = None if match.group(1) == "///" else int(match.group(1)) * 100
            return CloudGroup(
                CloudGroupType.VERTICAL_VISIBILITY,
                amount=CloudAmount.OBSCURED,
                vertical_visibility=Distance(height, DistanceUnit.FEET),
            )
        return None

    def _classify_temperature(self, token: str) -> Optional[Group]:
        match = self.TEMPERATURE_PATTERN.match(token)
        if not match:
            return None
        air = _parse_signed_temp(match.group(1))
        dew = _parse_signed_temp(match.group(2))
        return TemperatureGroup(
            air_temperature=Temperature(air),
            dew_point=Temperature(dew),
            relative_humidity=relative_humidity(air, dew),
        )

    def _classify_pressure(self, token: str) -> Optional[Group]:
        match = self.PRESSURE_PATTERN.match(token)
        if match:
            prefix, digits = match.groups()
            if prefix == "Q":
                value = None if digits == "////" else int(digits)
                return PressureGroup(Pressure(value, PressureUnit.HECTOPASCAL))
            value = None if digits == "////" else int(digits) / 100.0
            return PressureGroup(Pressure(value, PressureUnit.INCHES_HG))

        match = self.QFE_PATTERN.match(token)
        if match:
            return PressureGroup(Pressure(int(match.group(1)), PressureUnit.MM_HG))
        return None

    def _classify_runway_state(self, token: str) -> Optional[Group]:
        if self.RUNWAY_STATE_PATTERN.match(token):
            return RunwayStateGroup()
        return None

    def _classify_sea_surface(self, token: str) -> Optional[Group]:
        if self.SEA_SURFACE_PATTERN.match(token):
            return SeaSurfaceGroup()
        return None

    def _classify_min_max(self, token: str) -> Optional[Group]:
        if self.MIN_MAX_PATTERN.match(token):
            return MinMaxTemperatureGroup()
        return None

    def _classify_layer_forecast(self, token: str) -> Optional[Group]:
        if self.LAYER_FORECAST_PATTERN.match(token):
            return LayerForecastGroup()
        return None

    def _classify_weather(self, token: str) -> Optional[Group]:
        """Weather phenomena such as -RA, +TSRAGR, VCSH, BR, RETS, NSW.

        Precipitation without an intensity sign is moderate.
        """
        if token == "NSW":
            return WeatherGroup(type=WeatherGroupType.NSW)

        match = self.WEATHER_PATTERN.match(token)
        if not match:
            return None
        qualifier_text, descriptor_text, codes_text = match.groups()
        if not descriptor_text and not codes_text:
            return None

        codes = tuple(
            WeatherCode(codes_text[i:i + 2]) for i in range(0, len(codes_text), 2)
        )
        qualifier = _QUALIFIERS.get(qualifier_text, WeatherQualifier.NONE)
        if qualifier == WeatherQualifier.NONE and PRECIPITATION_CODES.intersection(codes):
            qualifier = WeatherQualifier.MODERATE

        return WeatherGroup(
            type=WeatherGroupType.RECENT if qualifier == WeatherQualifier.RECENT
            else WeatherGroupType.CURRENT,
            phenomena=(WeatherPhenomena(
                qualifier=qualifier,
                descriptor=WeatherDescriptor(descriptor_text or ""),
                weather=codes,
            ),),
        )

    # ------------------------------------------------------------------
    # Remarks
    # ------------------------------------------------------------------

    def _parse_remark_group(self, scan: _Scan) -> None:
        token = scan.current

        keyword = _KEYWORDS.get(token)
        if keyword is not None:
            self._add_keyword(scan, keyword)
            return

        if self._parse_remark_phrase(scan):
            return

        for classify in (
            self._classify_precise_temperature,
            self._classify_sea_level_pressure,
            self._remark_matcher(self.PRECIPITATION_PATTERN, PrecipitationGroup),
            self._remark_matcher(self.PRESSURE_TENDENCY_PATTERN, PressureTendencyGroup),
            self._remark_matcher(self.REMARK_MIN_MAX_PATTERN, MinMaxTemperatureGroup),
            self._remark_matcher(self.LOW_MID_HIGH_PATTERN, LowMidHighCloudGroup),
            self._remark_matcher(self.LIGHTNING_PATTERN, LightningGroup),
            self._remark_matcher(self.VICINITY_PATTERN, VicinityGroup),
            self._remark_matcher(self.MISC_PATTERN, MiscGroup),
            self._classify_cloud_types,
        ):
            group = classify(token)
            if group is not None:
                scan.add(group)
                return

        logger.debug("Unrecognised group %r in %s", token, scan.part.name)
        scan.add(UnknownGroup())

    @staticmethod
    def _remark_matcher(
        pattern: re.Pattern, group_class: type,
    ) -> Callable[[str], Optional[Group]]:
        def classify(token: str) -> Optional[Group]:
            return group_class() if pattern.match(token) else None
        return classify

    def _parse_remark_phrase(self, scan: _Scan) -> bool:
        """Multi-word remarks: TWR/SFC VIS, CIG, CHINO, CLD MISG, OCNL LTG."""
        token, nxt = scan.current, scan.peek(1)

        if token in ("TWR", "SFC") and nxt == "VIS":
            value_text = scan.peek(2)
            if value_text and self.REMARK_VIS_VALUE_PATTERN.match(value_text):
                count = 3
                value = _parse_fraction(value_text)
                fraction = scan.peek(3)
                if (
                    "/" not in value_text
                    and fraction
                    and re.match(r"^\d/\d{1,2}$", fraction)
                ):
                    extra = _parse_fraction(fraction)
                    value = value + extra if extra is not None else None
                    count = 4
                vis_type = VisibilityType.TOWER if token == "TWR" else VisibilityType.SURFACE
                scan.add(VisibilityGroup(type=vis_type, visibility=self._miles(value)), count)
                return True

        if token == "CIG" and nxt:
            match = self.CEILING_PATTERN.match(nxt)
            if match:
                low, high = match.groups()
                cloud_type = (
                    CloudGroupType.VARIABLE_CEILING if high else CloudGroupType.CEILING
                )
                scan.add(CloudGroup(
                    cloud_type,
                    height=Distance(int(low) * 100, DistanceUnit.FEET),
                ), count=2)
                return True

        if token == "CLD" and nxt == "MISG":
            scan.add(CloudGroup(CloudGroupType.CLD_MISG), count=2)
            return True

        if token == "CHINO":
            scan.add(CloudGroup(CloudGroupType.CHINO))
            return True

        if token in self.LIGHTNING_FREQUENCIES and nxt and self.LIGHTNING_PATTERN.match(nxt):
            scan.add(LightningGroup(), count=2)
            return True

        return False

    def _classify_precise_temperature(self, token: str) -> Optional[Group]:
        """T01890133: air and dew point in tenths of a degree."""
        match = self.PRECISE_TEMP_PATTERN.match(token)
        if not match:
            return None
        air_sign, air_digits, dew_sign, dew_digits = match.groups()
        air = _tenths_temp(air_sign, air_digits)
        dew = _tenths_temp(dew_sign, dew_digits) if dew_digits else None
        return TemperatureGroup(
            air_temperature=Temperature(air),
            dew_point=Temperature(dew),
            relative_humidity=relative_humidity(air, dew),
        )

    def _classify_sea_level_pressure(self, token: str) -> Optional[Group]:
        """SLP138 -> 1013.8 hPa; SLP982 -> 998.2 hPa; SLPNO -> not reported."""
        match = self.SLP_PATTERN.match(token)
        if not match:
            return None
        if match.group(1) == "NO":
            return PressureGroup(Pressure(None, PressureUnit.HECTOPASCAL))
        tenths = int(match.group(1))
        base = 900.0 if tenths >= 500 else 1000.0
        return PressureGroup(Pressure(round(base + tenths / 10.0, 1), PressureUnit.HECTOPASCAL))

    def _classify_cloud_types(self, token: str) -> Optional[Group]:
        """SC6AC2: cloud types with okta amounts, lowest layer first."""
        if not self.CLOUD_TYPES_PATTERN.match(token):
            return None
        return CloudTypesGroup(tuple(
            CloudType(CloudTypeKind(code), int(okta))
            for code, okta in self.CLOUD_TYPE_ITEM_PATTERN.findall(token)
        ))
