#!/usr/bin/env python3
"""Command-line report explainer.

Usage:
    metar-explain --report "METAR KLAX 091953Z 25005KT 10SM FEW040 19/13 A2994"
    metar-explain --report "..." --format json --pretty
"""

import argparse
import logging
import sys
from typing import Optional

from .config import settings
from .schemas.explanation import ReportExplanation
from .services.assembler import parse_and_explain

MIN_RAW_WIDTH = 15
OUTPUT_FORMATS = ("text", "json")

# Report flags shown in text output, in display order
_FLAG_LABELS = [
    ("is_speci", "Is SPECI:    true"),
    ("is_automated", "Is Automated:true"),
    ("is_nil", "Is NIL:      true"),
    ("is_cancelled", "Is Cancelled:true"),
    ("is_amended", "Is Amended:  true"),
    ("is_correctional", "Is Correctnl:true"),
]


def format_text(result: ReportExplanation) -> str:
    """Metadata header followed by raw groups aligned with their explanations."""
    lines = [f"Report Type: {result.report_type}"]
    if result.error:
        lines.append(f"Parsing Issue: {result.error}")
    if result.location:
        lines.append(f"Location:    {result.location}")
    if result.timestamp:
        lines.append(f"Timestamp:   {result.timestamp}")
    for attr, label in _FLAG_LABELS:
        if getattr(result, attr):
            lines.append(label)

    lines.append("")
    lines.append("--- Groups ---")

    width = max([MIN_RAW_WIDTH] + [len(g.raw_group) for g in result.groups])
    indent = " " * (width + 2)
    for group in result.groups:
        first, *rest = group.explanation.split("\n")
        lines.append(f"{group.raw_group:<{width}}  {first}")
        lines.extend(f"{indent}{line}" for line in rest)
    return "\n".join(lines)


def format_json(result: ReportExplanation, pretty: bool = False) -> str:
    return result.model_dump_json(indent=2 if pretty else None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metar-explain",
        description="Explain a METAR or TAF report in plain English.",
    )
    parser.add_argument("-r", "--report", default="", help="METAR/TAF report to explain")
    parser.add_argument(
        "-f", "--format",
        type=str.lower,
        default=settings.output_format,
        help="Output format: text or json (default: %(default)s)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=settings.pretty_json,
        help="Pretty-print JSON output",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s: %(name)s - %(message)s",
        stream=sys.stderr,
    )

    if not args.report.strip():
        print("Error: Please provide a METAR/TAF report using the --report flag.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if args.format not in OUTPUT_FORMATS:
        print(
            f"Error: Invalid format '{args.format}'. Must be 'text' or 'json'.",
            file=sys.stderr,
        )
        return 1

    result = parse_and_explain(args.report)

    if args.format == "json":
        print(format_json(result, pretty=args.pretty))
    else:
        print(format_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
