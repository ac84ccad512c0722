"""Typed values produced by the report parser.

A report is an ordered list of groups.  Each group is one instance of the
dataclasses below; ``Group`` is the closed union of all of them.  Group
values are immutable and carry only decoded fields; the raw text lives in
``GroupInfo`` next to the group.

Measurements keep their native unit.  A measurement whose value is None
was not reported; zero is a reported value.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .constants import (
    CloudAmount,
    CloudGroupType,
    CloudTypeKind,
    ConvectiveType,
    DirectionType,
    DistanceModifier,
    DistanceUnit,
    KeywordType,
    PressureUnit,
    ReportError,
    ReportPart,
    ReportType,
    RunwayDesignator,
    SpeedUnit,
    TemperatureUnit,
    VisibilityTrend,
    VisibilityType,
    WeatherCode,
    WeatherDescriptor,
    WeatherGroupType,
    WeatherQualifier,
    WindType,
)
from .units import convert


# ---------------------------------------------------------------------------
# Measurements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Distance:
    value: Optional[float] = None
    unit: DistanceUnit = DistanceUnit.METERS
    modifier: DistanceModifier = DistanceModifier.NONE

    @property
    def is_reported(self) -> bool:
        return self.value is not None

    def to_unit(self, unit: DistanceUnit) -> Optional[float]:
        return convert(self.value, self.unit, unit)


@dataclass(frozen=True)
class Speed:
    value: Optional[float] = None
    unit: SpeedUnit = SpeedUnit.KNOTS

    @property
    def is_reported(self) -> bool:
        return self.value is not None

    def to_unit(self, unit: SpeedUnit) -> Optional[float]:
        return convert(self.value, self.unit, unit)


@dataclass(frozen=True)
class Temperature:
    value: Optional[float] = None
    unit: TemperatureUnit = TemperatureUnit.C

    @property
    def is_reported(self) -> bool:
        return self.value is not None

    def to_unit(self, unit: TemperatureUnit) -> Optional[float]:
        return convert(self.value, self.unit, unit)


@dataclass(frozen=True)
class Pressure:
    value: Optional[float] = None
    unit: PressureUnit = PressureUnit.HECTOPASCAL

    @property
    def is_reported(self) -> bool:
        return self.value is not None

    def to_unit(self, unit: PressureUnit) -> Optional[float]:
        return convert(self.value, self.unit, unit)


@dataclass(frozen=True)
class Direction:
    type: DirectionType = DirectionType.OMITTED
    degrees: Optional[int] = None

    @property
    def is_value(self) -> bool:
        return self.type == DirectionType.VALUE_DEGREES and self.degrees is not None


@dataclass(frozen=True)
class Runway:
    number: int
    designator: RunwayDesignator = RunwayDesignator.NONE


@dataclass(frozen=True)
class ReportTime:
    """Day of month (optional), hour and minute, all UTC."""
    hour: int
    minute: int
    day: Optional[int] = None


@dataclass(frozen=True)
class CloudType:
    """A cloud (or obscuring substance) covering ``okta`` eighths of the sky."""
    kind: CloudTypeKind
    okta: int
    height: Distance = field(default_factory=lambda: Distance(unit=DistanceUnit.FEET))


@dataclass(frozen=True)
class WeatherPhenomena:
    qualifier: WeatherQualifier = WeatherQualifier.NONE
    descriptor: WeatherDescriptor = WeatherDescriptor.NONE
    weather: tuple[WeatherCode, ...] = ()


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeywordGroup:
    type: KeywordType


@dataclass(frozen=True)
class LocationGroup:
    icao: str


@dataclass(frozen=True)
class ReportTimeGroup:
    time: ReportTime


@dataclass(frozen=True)
class WindGroup:
    type: WindType = WindType.SURFACE_WIND
    direction: Direction = field(default_factory=Direction)
    wind_speed: Speed = field(default_factory=Speed)
    gust_speed: Speed = field(default_factory=Speed)
    var_sector_begin: Direction = field(default_factory=Direction)
    var_sector_end: Direction = field(default_factory=Direction)


@dataclass(frozen=True)
class VisibilityGroup:
    """Prevailing, tower, surface or runway visibility, or runway visual range.

    Variable RVR uses min_visibility/max_visibility; every other type uses
    visibility.
    """
    type: VisibilityType = VisibilityType.PREVAILING
    visibility: Distance = field(default_factory=Distance)
    min_visibility: Distance = field(default_factory=Distance)
    max_visibility: Distance = field(default_factory=Distance)
    runway: Optional[Runway] = None
    trend: VisibilityTrend = VisibilityTrend.NONE


@dataclass(frozen=True)
class CloudGroup:
    type: CloudGroupType
    amount: CloudAmount = CloudAmount.NOT_REPORTED
    height: Distance = field(default_factory=lambda: Distance(unit=DistanceUnit.FEET))
    convective_type: ConvectiveType = ConvectiveType.NONE
    vertical_visibility: Distance = field(default_factory=lambda: Distance(unit=DistanceUnit.FEET))
    cloud_type: Optional[CloudType] = None


@dataclass(frozen=True)
class TemperatureGroup:
    air_temperature: Temperature = field(default_factory=Temperature)
    dew_point: Temperature = field(default_factory=Temperature)
    relative_humidity: Optional[float] = None


@dataclass(frozen=True)
class PressureGroup:
    atmospheric_pressure: Pressure = field(default_factory=Pressure)


@dataclass(frozen=True)
class WeatherGroup:
    type: WeatherGroupType = WeatherGroupType.CURRENT
    phenomena: tuple[WeatherPhenomena, ...] = ()


@dataclass(frozen=True)
class CloudTypesGroup:
    cloud_types: tuple[CloudType, ...] = ()


# Groups below are recognised but explained from their raw text only


@dataclass(frozen=True)
class TrendGroup:
    pass


@dataclass(frozen=True)
class RunwayStateGroup:
    pass


@dataclass(frozen=True)
class SeaSurfaceGroup:
    pass


@dataclass(frozen=True)
class MinMaxTemperatureGroup:
    pass


@dataclass(frozen=True)
class PrecipitationGroup:
    pass


@dataclass(frozen=True)
class LayerForecastGroup:
    pass


@dataclass(frozen=True)
class PressureTendencyGroup:
    pass


@dataclass(frozen=True)
class LowMidHighCloudGroup:
    pass


@dataclass(frozen=True)
class LightningGroup:
    pass


@dataclass(frozen=True)
class VicinityGroup:
    pass


@dataclass(frozen=True)
class MiscGroup:
    pass


@dataclass(frozen=True)
class UnknownGroup:
    pass


Group = Union[
    KeywordGroup,
    LocationGroup,
    ReportTimeGroup,
    WindGroup,
    VisibilityGroup,
    CloudGroup,
    TemperatureGroup,
    PressureGroup,
    WeatherGroup,
    CloudTypesGroup,
    TrendGroup,
    RunwayStateGroup,
    SeaSurfaceGroup,
    MinMaxTemperatureGroup,
    PrecipitationGroup,
    LayerForecastGroup,
    PressureTendencyGroup,
    LowMidHighCloudGroup,
    LightningGroup,
    VicinityGroup,
    MiscGroup,
    UnknownGroup,
]


# ---------------------------------------------------------------------------
# Parser output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GroupInfo:
    """One classified group with the report section and text it came from."""
    group: Group
    report_part: ReportPart
    raw_string: str


@dataclass(frozen=True)
class ReportMetadata:
    """Report-level facts gathered while parsing.

    ``error`` is normally a ReportError but may be any integer code.
    """
    type: ReportType = ReportType.UNKNOWN
    error: Union[ReportError, int] = ReportError.NONE
    location: str = ""
    report_time: Optional[ReportTime] = None
    is_speci: bool = False
    is_automated: bool = False
    is_nil: bool = False
    is_cancelled: bool = False
    is_amended: bool = False
    is_correctional: bool = False


@dataclass(frozen=True)
class ParseResult:
    metadata: ReportMetadata
    groups: tuple[GroupInfo, ...] = ()
