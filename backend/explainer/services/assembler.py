"""Report assembly: metadata plus per-group explanations in one result."""

import logging
from typing import Optional, Protocol, Sequence, Union

from ..protocol.constants import (
    ERROR_MESSAGES,
    GENERIC_ERROR_MESSAGE,
    REPORT_TYPE_NAMES,
    ReportError,
    ReportType,
)
from ..protocol.group_types import GroupInfo, ParseResult, ReportMetadata
from ..protocol.report_parser import ReportParser
from ..schemas.explanation import GroupExplanation, ReportExplanation
from .renderer import format_report_time, render_group

logger = logging.getLogger(__name__)


class Parser(Protocol):
    """Anything that turns report text into metadata and classified groups."""

    def parse(self, report: str) -> ParseResult: ...


def error_message(error: Union[ReportError, int]) -> str:
    """Human-readable message for a report error code; "" means no error."""
    return ERROR_MESSAGES.get(error, GENERIC_ERROR_MESSAGE)


def report_type_name(report_type: ReportType) -> str:
    return REPORT_TYPE_NAMES.get(report_type, "UNKNOWN")


def assemble(metadata: ReportMetadata, groups: Sequence[GroupInfo]) -> ReportExplanation:
    """Build the explanation of a parsed report.

    Args:
        metadata: Report-level facts from the parser.
        groups: Classified groups in report order.

    Returns:
        ReportExplanation with exactly one GroupExplanation per input group,
        in the same order.
    """
    explained = [
        GroupExplanation(
            raw_group=info.raw_string,
            explanation=render_group(info.group, info.report_part, info.raw_string),
        )
        for info in groups
    ]

    result = ReportExplanation(
        report_type=report_type_name(metadata.type),
        error=error_message(metadata.error),
        location=metadata.location,
        timestamp=(
            format_report_time(metadata.report_time)
            if metadata.report_time is not None
            else ""
        ),
        is_speci=metadata.is_speci,
        is_automated=metadata.is_automated,
        is_nil=metadata.is_nil,
        is_cancelled=metadata.is_cancelled,
        is_amended=metadata.is_amended,
        is_correctional=metadata.is_correctional,
        groups=explained,
    )
    logger.debug(
        "Explained %s report for %r: %d groups, error=%r",
        result.report_type, result.location, len(explained), result.error,
    )
    return result


def parse_and_explain(report: str, parser: Optional[Parser] = None) -> ReportExplanation:
    """Parse raw METAR/TAF text and explain every group.

    Args:
        report: Raw report text, e.g. "METAR KLAX 091953Z 25005KT 10SM ...".
        parser: Parser to use; defaults to the built-in ReportParser.

    Returns:
        The assembled ReportExplanation.  Parse problems are reported in
        its ``error`` field, never raised.
    """
    if parser is None:
        parser = ReportParser()
    parsed = parser.parse(report)
    return assemble(parsed.metadata, parsed.groups)
