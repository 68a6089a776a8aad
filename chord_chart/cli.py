"""Command line interface for chord-chart.

Usage:
    chord-chart render chart.txt --transpose 2
    chord-chart segment chart.txt -o chart.json --pretty
    chord-chart chord "C#m7/G" --transpose -1
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chord_chart.chart import ChordChartLine, ChordChartSpan, ChordLine, ChordSpan, LyricsLine, OtherSpan, render_span
from chord_chart.chart.view import ChartView
from chord_chart.converter import try_parse
from chord_chart.models import Chord
from chord_chart.pitch_class import chord_to_pitch_classes

logger = logging.getLogger(__name__)


def chord_to_dict(chord: Chord) -> dict[str, Any]:
    """Convert a Chord to a JSON-serializable dict."""
    result: dict[str, Any] = {
        "text": chord.to_text(),
        "root": chord.root,
        "suffix": chord.suffix,
        "bass": chord.bass,
    }
    try:
        result["harte"] = chord.to_harte()
    except ValueError:
        result["harte"] = None
    try:
        result["pitch_classes"] = sorted(chord_to_pitch_classes(chord))
    except ValueError:
        result["pitch_classes"] = None
    return result


def span_to_dict(span: ChordChartSpan, semitones: int = 0) -> dict[str, Any]:
    """Convert a span to a JSON-serializable dict.

    ``value`` is the source text; ``rendered`` is the span as it prints at
    ``semitones``, and ``chord`` describes the transposed chord.
    """
    if isinstance(span, ChordSpan):
        return {
            "type": span.type,
            "value": span.value,
            "rendered": render_span(span, semitones),
            "chord": chord_to_dict(span.chord.transpose(semitones)),
        }
    if isinstance(span, OtherSpan):
        return {"type": span.type, "value": span.value, "rendered": span.value}
    msg = f"Unknown span type: {type(span).__name__}"
    raise TypeError(msg)


def line_to_dict(line: ChordChartLine, semitones: int = 0) -> dict[str, Any]:
    """Convert a line to a JSON-serializable dict."""
    if isinstance(line, (ChordLine, LyricsLine)):
        return {
            "type": line.type,
            "spans": [span_to_dict(span, semitones) for span in line.spans],
        }
    msg = f"Unknown line type: {type(line).__name__}"
    raise TypeError(msg)


def read_chart(source: str) -> str:
    """Read chart text from a file path, or from stdin for "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_render(args: argparse.Namespace) -> int:
    view = ChartView(chart_id=args.input, text=read_chart(args.input))
    view.transpose = args.transpose
    sys.stdout.write(view.render())
    return 0


def cmd_segment(args: argparse.Namespace) -> int:
    view = ChartView(chart_id=args.input, text=read_chart(args.input))
    data = {"lines": [line_to_dict(line, args.transpose) for line in view.lines]}
    output = json.dumps(data, indent=2 if args.pretty else None, ensure_ascii=False)

    if args.output is None:
        sys.stdout.write(output + "\n")
    else:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info("Written to %s", args.output)
    return 0


def cmd_chord(args: argparse.Namespace) -> int:
    chord = try_parse(args.token)
    if chord is None:
        logger.error("Error: Not a chord symbol: %s", args.token)
        return 1

    data = chord_to_dict(chord.transpose(args.transpose))
    sys.stdout.write(json.dumps(data, ensure_ascii=False) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chord-chart",
        description="Segment and transpose plain-text chord charts",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Print a chart, transposed")
    render_parser.add_argument("input", help="Chart file to read, or - for stdin")
    render_parser.set_defaults(func=cmd_render)

    segment_parser = subparsers.add_parser("segment", help="Export a chart's lines and spans as JSON")
    segment_parser.add_argument("input", help="Chart file to read, or - for stdin")
    segment_parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    segment_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    segment_parser.set_defaults(func=cmd_segment)

    chord_parser = subparsers.add_parser("chord", help="Parse a single chord symbol")
    chord_parser.add_argument("token", help="Chord symbol, e.g. C#m7/G")
    chord_parser.set_defaults(func=cmd_chord)

    for sub in (render_parser, segment_parser, chord_parser):
        sub.add_argument(
            "-t", "--transpose",
            type=int,
            default=0,
            metavar="N",
            help="Transpose by N semitones (default: 0)",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        return args.func(args)
    except OSError as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
