"""CLI entrypoint for rewriting text against a known-character vocabulary."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Sequence

from easy_reader.corpus.repository import CorpusRepository
from easy_reader.io.tsv_io import write_resolutions_tsv
from easy_reader.models import Classification, TransformOptions
from easy_reader.oracle.protocol import PronunciationOracle
from easy_reader.oracle.table import TableOracle
from easy_reader.pipeline import ReaderSession, segments_to_records
from easy_reader.reporting.report_md import build_report_md
from easy_reader.validation import collect_classification_counts

DEFAULT_THRESHOLD = 1000


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the transform command.
    """

    parser = argparse.ArgumentParser(
        description="Replace characters outside a known vocabulary with same-sounding ones."
    )
    parser.add_argument(
        "--corpus",
        required=True,
        type=Path,
        help="Frequency-ranked corpus (.json array or one character per line).",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_THRESHOLD,
        help=f"Number of most frequent characters treated as known (default: {DEFAULT_THRESHOLD}).",
    )
    parser.add_argument(
        "--cross-tone",
        action="store_true",
        help="Allow substitutes that share the syllable but not the tone.",
    )
    parser.add_argument(
        "--highlight",
        action="store_true",
        help="Flag known characters with several pronunciations.",
    )
    parser.add_argument(
        "--oracle-table",
        type=Path,
        default=None,
        help="TSV pronunciation table to use instead of pypinyin.",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Input text file (default: stdin).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Plain-text output path (default: stdout).",
    )
    parser.add_argument(
        "--segments",
        type=Path,
        default=None,
        help="Write annotated segments as JSON to this path.",
    )
    parser.add_argument(
        "--resolutions",
        type=Path,
        default=None,
        help="Write per-character resolutions as TSV to this path.",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Write a markdown summary to this path.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _load_oracle(path: Path | None) -> PronunciationOracle | None:
    if path is None:
        return None
    if not path.exists():
        raise SystemExit(f"Pronunciation table not found: {path}")
    return TableOracle.from_path(path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.corpus.exists():
        raise SystemExit(f"Corpus not found: {args.corpus}")
    if args.input is not None and not args.input.exists():
        raise SystemExit(f"Input not found: {args.input}")

    corpus = CorpusRepository(args.corpus).characters
    session = ReaderSession.from_corpus(
        corpus,
        oracle=_load_oracle(args.oracle_table),
        threshold=args.threshold,
        options=TransformOptions(cross_tone=args.cross_tone, highlight_ambiguous=args.highlight),
    )

    text = args.input.read_text(encoding="utf-8") if args.input is not None else sys.stdin.read()
    result = session.transform(text)

    if args.output is not None:
        args.output.write_text(result.plain_text, encoding="utf-8")
    else:
        sys.stdout.write(result.plain_text)

    if args.segments is not None:
        args.segments.write_text(
            json.dumps(segments_to_records(result), ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
    if args.resolutions is not None:
        write_resolutions_tsv(result, output_path=args.resolutions)
    if args.report is not None:
        report_md = build_report_md(
            text,
            result,
            threshold=session.vocabulary.threshold,
            cross_tone=session.options.cross_tone,
        )
        args.report.write_text(report_md, encoding="utf-8")

    counts = collect_classification_counts(result)
    count_rows = [[item.value, str(counts[item])] for item in Classification]
    count_rows.append(["ambiguous", str(len(result.ambiguous))])
    print("\nDistinct characters by outcome:", file=sys.stderr)
    print(_format_table(["outcome", "count"], count_rows), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
