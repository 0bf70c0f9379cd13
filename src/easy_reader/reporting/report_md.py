"""Markdown report generation for transform summaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from easy_reader.engine.alternatives import serialize_alternatives
from easy_reader.models import Classification, TransformResult
from easy_reader.validation import collect_classification_counts, collect_occurrence_count


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(text: str, result: TransformResult, threshold: int, cross_tone: bool) -> str:
    """Build the markdown report for one transform.

    Args:
        text: Original input text.
        result: Annotated transform result.
        threshold: Vocabulary threshold used for the run.
        cross_tone: Whether cross-tone substitution was enabled.

    Returns:
        Full markdown content with summary tables.
    """

    counts = collect_classification_counts(result)
    count_rows = [(item.value, str(counts[item])) for item in Classification]

    replacement_rows = [
        (char, replacement.value, replacement.classification.value)
        for char, replacement in result.replacements.items()
    ]

    ambiguous_rows = [
        (
            char,
            "" if record.rank is None else str(record.rank),
            "yes" if record.common else "no",
            serialize_alternatives(record.alternatives).replace("|", "\\|"),
        )
        for char, record in result.ambiguous.items()
    ]

    settings_rows = [
        ("threshold", str(threshold)),
        ("cross_tone", "on" if cross_tone else "off"),
        ("logographic_characters", str(collect_occurrence_count(text))),
        ("distinct_replaced", str(len(result.replacements))),
        ("distinct_ambiguous", str(len(result.ambiguous))),
    ]

    sections = [
        "# Transform Report",
        "",
        "## Settings",
        _markdown_table(["setting", "value"], settings_rows),
        "",
        "## Replacements per classification",
        _markdown_table(["classification", "count"], count_rows),
        "",
        "## Replaced characters",
        _markdown_table(["char", "replacement", "classification"], replacement_rows),
        "",
        "## Ambiguous characters",
        _markdown_table(["char", "rank", "common", "alternatives"], ambiguous_rows),
    ]

    return "\n".join(sections) + "\n"
