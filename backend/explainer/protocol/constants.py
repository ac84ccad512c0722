"""Enumerations shared by the report parser and the group renderer."""

from enum import Enum, IntEnum


class ReportType(IntEnum):
    """Report kind from the report header."""
    UNKNOWN = 0
    METAR = 1
    TAF = 2


class ReportError(IntEnum):
    """Report-level parse outcome. Parsers may also emit codes not listed here."""
    NONE = 0
    EMPTY_REPORT = 1
    EXPECTED_REPORT_TYPE_OR_LOCATION = 2
    EXPECTED_LOCATION = 3
    EXPECTED_REPORT_TIME = 4
    EXPECTED_TIME_SPAN = 5
    UNEXPECTED_REPORT_END = 6


class ReportPart(IntEnum):
    """Structural section of a report in which a group was found."""
    UNKNOWN = 0
    HEADER = 1
    METAR = 2
    TAF = 3
    RMK = 4


REPORT_TYPE_NAMES = {
    ReportType.METAR: "METAR",
    ReportType.TAF: "TAF",
}

ERROR_MESSAGES = {
    ReportError.NONE: "",
    ReportError.EMPTY_REPORT: "Empty report",
    ReportError.EXPECTED_REPORT_TYPE_OR_LOCATION: "Expected report type or location",
    ReportError.EXPECTED_LOCATION: "Expected location",
    ReportError.EXPECTED_REPORT_TIME: "Expected report time",
    ReportError.EXPECTED_TIME_SPAN: "Expected time span",
    ReportError.UNEXPECTED_REPORT_END: "Unexpected report end",
}

GENERIC_ERROR_MESSAGE = "Parsing error"


class KeywordType(Enum):
    METAR = "METAR"
    SPECI = "SPECI"
    TAF = "TAF"
    AMD = "AMD"
    NIL = "NIL"
    CNL = "CNL"
    COR = "COR"
    AUTO = "AUTO"
    CAVOK = "CAVOK"
    RMK = "RMK"
    MAINTENANCE_INDICATOR = "$"
    AO1 = "AO1"
    AO2 = "AO2"
    AO1A = "AO1A"
    AO2A = "AO2A"
    NOSPECI = "NOSPECI"


# ---------------------------------------------------------------------------
# Measurement units
# ---------------------------------------------------------------------------


class DistanceUnit(Enum):
    METERS = "m"
    STATUTE_MILES = "SM"
    FEET = "ft"


class DistanceModifier(Enum):
    NONE = "none"
    LESS_THAN = "less_than"
    MORE_THAN = "more_than"


class SpeedUnit(Enum):
    KNOTS = "KT"
    METERS_PER_SECOND = "MPS"
    KILOMETERS_PER_HOUR = "KMH"
    MILES_PER_HOUR = "MPH"


class TemperatureUnit(Enum):
    C = "C"
    F = "F"


class PressureUnit(Enum):
    HECTOPASCAL = "hPa"
    INCHES_HG = "inHg"
    MM_HG = "mmHg"


DISTANCE_UNIT_NAMES = {
    DistanceUnit.METERS: "meters",
    DistanceUnit.STATUTE_MILES: "statute miles",
    DistanceUnit.FEET: "feet",
}

SPEED_UNIT_NAMES = {
    SpeedUnit.KNOTS: "knots",
    SpeedUnit.METERS_PER_SECOND: "m/s",
    SpeedUnit.KILOMETERS_PER_HOUR: "km/h",
    SpeedUnit.MILES_PER_HOUR: "mph",
}

PRESSURE_UNIT_NAMES = {
    PressureUnit.HECTOPASCAL: "hPa",
    PressureUnit.INCHES_HG: "inHg",
    PressureUnit.MM_HG: "mmHg",
}


# ---------------------------------------------------------------------------
# Wind and visibility
# ---------------------------------------------------------------------------


class WindType(Enum):
    SURFACE_WIND = "surface_wind"
    SURFACE_WIND_CALM = "surface_wind_calm"
    VARIABLE_WIND_SECTOR = "variable_wind_sector"
    SURFACE_WIND_WITH_VARIABLE_SECTOR = "surface_wind_with_variable_sector"


class DirectionType(Enum):
    OMITTED = "omitted"
    NOT_REPORTED = "not_reported"
    VARIABLE = "variable"
    VALUE_DEGREES = "value_degrees"


class RunwayDesignator(Enum):
    NONE = ""
    LEFT = "L"
    CENTER = "C"
    RIGHT = "R"


RUNWAY_DESIGNATOR_NAMES = {
    RunwayDesignator.LEFT: "Left",
    RunwayDesignator.RIGHT: "Right",
    RunwayDesignator.CENTER: "Center",
}


class VisibilityType(Enum):
    PREVAILING = "prevailing"
    TOWER = "tower"
    SURFACE = "surface"
    RUNWAY = "runway"
    RVR = "rvr"
    VARIABLE_RVR = "variable_rvr"


class VisibilityTrend(Enum):
    NONE = "none"
    NOT_REPORTED = "not_reported"
    UPWARD = "U"
    NEUTRAL = "N"
    DOWNWARD = "D"


VISIBILITY_TREND_NAMES = {
    VisibilityTrend.UPWARD: "increasing",
    VisibilityTrend.DOWNWARD: "decreasing",
    VisibilityTrend.NEUTRAL: "no change",
}


# ---------------------------------------------------------------------------
# Clouds
# ---------------------------------------------------------------------------


class CloudGroupType(Enum):
    NO_CLOUDS = "no_clouds"
    CLOUD_LAYER = "cloud_layer"
    VERTICAL_VISIBILITY = "vertical_visibility"
    CEILING = "ceiling"
    VARIABLE_CEILING = "variable_ceiling"
    CHINO = "chino"
    CLD_MISG = "cld_misg"
    OBSCURATION = "obscuration"


class CloudAmount(Enum):
    NOT_REPORTED = "///"
    NCD = "NCD"
    NSC = "NSC"
    NONE_CLR = "CLR"
    NONE_SKC = "SKC"
    FEW = "FEW"
    SCATTERED = "SCT"
    BROKEN = "BKN"
    OVERCAST = "OVC"
    OBSCURED = "VV"


CLOUD_AMOUNT_PHRASES = {
    CloudAmount.FEW: "Few clouds (1/8 to 2/8 coverage)",
    CloudAmount.SCATTERED: "Scattered clouds (3/8 to 4/8 coverage)",
    CloudAmount.BROKEN: "Broken clouds (5/8 to 7/8 coverage)",
    CloudAmount.OVERCAST: "Overcast (8/8 coverage)",
}


class ConvectiveType(Enum):
    NONE = ""
    NOT_REPORTED = "///"
    TOWERING_CUMULUS = "TCU"
    CUMULONIMBUS = "CB"


class CloudTypeKind(Enum):
    """Cloud or obscuring substance reported with an okta amount."""
    NOT_REPORTED = "not_reported"
    CUMULONIMBUS = "CB"
    TOWERING_CUMULUS = "TCU"
    CUMULUS = "CU"
    CUMULUS_FRACTUS = "CF"
    STRATOCUMULUS = "SC"
    NIMBOSTRATUS = "NS"
    STRATUS = "ST"
    STRATUS_FRACTUS = "SF"
    ALTOSTRATUS = "AS"
    ALTOCUMULUS = "AC"
    ALTOCUMULUS_CASTELLANUS = "ACC"
    CIRRUS = "CI"
    CIRROSTRATUS = "CS"
    CIRROCUMULUS = "CC"
    BLOWING_SNOW = "BLSN"
    BLOWING_DUST = "BLDU"
    BLOWING_SAND = "BLSA"
    ICE_CRYSTALS = "IC"
    RAIN = "RA"
    DRIZZLE = "DZ"
    SNOW = "SN"
    ICE_PELLETS = "PL"
    SMOKE = "FU"
    FOG = "FG"
    MIST = "BR"
    HAZE = "HZ"
    VOLCANIC_ASH = "VA"


# Substances an obscuration group may name; anything else is "unknown"
OBSCURATION_NAMES = {
    CloudTypeKind.SNOW: "snow",
    CloudTypeKind.FOG: "fog",
    CloudTypeKind.SMOKE: "smoke",
    CloudTypeKind.VOLCANIC_ASH: "volcanic ash",
    CloudTypeKind.HAZE: "haze",
    CloudTypeKind.MIST: "mist",
}

CLOUD_TYPE_NAMES = {
    **OBSCURATION_NAMES,
    CloudTypeKind.CUMULONIMBUS: "cumulonimbus",
    CloudTypeKind.TOWERING_CUMULUS: "towering cumulus",
    CloudTypeKind.CUMULUS: "cumulus",
    CloudTypeKind.CUMULUS_FRACTUS: "cumulus fractus",
    CloudTypeKind.STRATOCUMULUS: "stratocumulus",
    CloudTypeKind.NIMBOSTRATUS: "nimbostratus",
    CloudTypeKind.STRATUS: "stratus",
    CloudTypeKind.STRATUS_FRACTUS: "stratus fractus",
    CloudTypeKind.ALTOSTRATUS: "altostratus",
    CloudTypeKind.ALTOCUMULUS: "altocumulus",
    CloudTypeKind.CIRRUS: "cirrus",
    CloudTypeKind.CIRROSTRATUS: "cirrostratus",
    CloudTypeKind.CIRROCUMULUS: "cirrocumulus",
}


# ---------------------------------------------------------------------------
# Weather phenomena
# ---------------------------------------------------------------------------


class WeatherGroupType(Enum):
    CURRENT = "current"
    RECENT = "recent"
    EVENT = "event"
    NSW = "nsw"
    PRECIPITATION_BEGINNING_ENDING = "precipitation_beginning_ending"


class WeatherQualifier(Enum):
    NONE = ""
    RECENT = "RE"
    VICINITY = "VC"
    LIGHT = "-"
    MODERATE = "moderate"
    HEAVY = "+"


class WeatherDescriptor(Enum):
    NONE = ""
    SHALLOW = "MI"
    PARTIAL = "PR"
    PATCHES = "BC"
    LOW_DRIFTING = "DR"
    BLOWING = "BL"
    SHOWERS = "SH"
    THUNDERSTORM = "TS"
    FREEZING = "FZ"


class WeatherCode(Enum):
    NOT_REPORTED = "//"
    DRIZZLE = "DZ"
    RAIN = "RA"
    SNOW = "SN"
    SNOW_GRAINS = "SG"
    ICE_CRYSTALS = "IC"
    ICE_PELLETS = "PL"
    HAIL = "GR"
    SMALL_HAIL = "GS"
    UNDETERMINED = "UP"
    MIST = "BR"
    FOG = "FG"
    SMOKE = "FU"
    VOLCANIC_ASH = "VA"
    DUST = "DU"
    SAND = "SA"
    HAZE = "HZ"
    SPRAY = "PY"
    DUST_WHIRLS = "PO"
    SQUALLS = "SQ"
    FUNNEL_CLOUD = "FC"
    SANDSTORM = "SS"
    DUSTSTORM = "DS"


PRECIPITATION_CODES = {
    WeatherCode.DRIZZLE,
    WeatherCode.RAIN,
    WeatherCode.SNOW,
    WeatherCode.SNOW_GRAINS,
    WeatherCode.ICE_CRYSTALS,
    WeatherCode.ICE_PELLETS,
    WeatherCode.HAIL,
    WeatherCode.SMALL_HAIL,
    WeatherCode.UNDETERMINED,
}

QUALIFIER_WORDS = {
    WeatherQualifier.LIGHT: "Light",
    WeatherQualifier.MODERATE: "Moderate",
    WeatherQualifier.HEAVY: "Heavy",
    WeatherQualifier.VICINITY: "Vicinity",
    WeatherQualifier.RECENT: "Recent",
}

DESCRIPTOR_WORDS = {
    WeatherDescriptor.SHALLOW: "Shallow",
    WeatherDescriptor.PARTIAL: "Partial",
    WeatherDescriptor.PATCHES: "Patches of",
    WeatherDescriptor.LOW_DRIFTING: "Low Drifting",
    WeatherDescriptor.BLOWING: "Blowing",
    WeatherDescriptor.SHOWERS: "Showers",
    WeatherDescriptor.THUNDERSTORM: "Thunderstorm",
    WeatherDescriptor.FREEZING: "Freezing",
}

# Codes without an entry here produce no word
WEATHER_WORDS = {
    WeatherCode.DRIZZLE: "Drizzle",
    WeatherCode.RAIN: "Rain",
    WeatherCode.SNOW: "Snow",
    WeatherCode.FOG: "Fog",
    WeatherCode.MIST: "Mist",
    WeatherCode.HAZE: "Haze",
    WeatherCode.SMOKE: "Smoke",
    WeatherCode.VOLCANIC_ASH: "Volcanic Ash",
    WeatherCode.DUST: "Dust",
    WeatherCode.SAND: "Sand",
    WeatherCode.HAIL: "Hail",
    WeatherCode.SMALL_HAIL: "Small Hail",
    WeatherCode.ICE_CRYSTALS: "Ice Crystals",
    WeatherCode.ICE_PELLETS: "Ice Pellets",
    WeatherCode.FUNNEL_CLOUD: "Funnel Cloud",
    WeatherCode.DUSTSTORM: "Dust Storm",
    WeatherCode.SANDSTORM: "Sand Storm",
}

KEYWORD_SENTENCES = {
    KeywordType.METAR: "Report type: METAR (weather observation report)",
    KeywordType.SPECI: "Unscheduled METAR (weather observation report)",
    KeywordType.TAF: "Report type: TAF (terminal aerodrome forecast)",
    KeywordType.AUTO: "Fully automated report with no human intervention",
    KeywordType.CAVOK: "Ceiling and visibility OK (visibility >10km, no clouds below 5000ft)",
    KeywordType.RMK: "The remarks are as follows",
    KeywordType.AO1: "Automated station without precipitation discriminator",
    KeywordType.AO2: "Automated station with precipitation discriminator",
}
