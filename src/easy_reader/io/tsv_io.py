"""TSV writer for per-character resolution artifacts."""

from __future__ import annotations

from pathlib import Path

from easy_reader.engine.alternatives import serialize_alternatives
from easy_reader.models import TransformResult

TSV_HEADER = [
    "char",
    "replacement",
    "classification",
    "ambiguous_alternatives",
]


def write_resolutions_tsv(
    result: TransformResult, output_path: Path, include_header: bool = True
) -> None:
    """Write one row per distinct replaced or flagged character.

    Replaced characters come first in order of first occurrence, followed by
    flagged heteronyms. Heteronym rows leave ``replacement`` and
    ``classification`` empty; replacement rows leave the alternatives empty.

    Args:
        result: Annotated transform result to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for char, replacement in result.replacements.items():
            handle.write(
                "\t".join([char, replacement.value, replacement.classification.value, ""])
            )
            handle.write("\n")
        for char, record in result.ambiguous.items():
            handle.write("\t".join([char, "", "", serialize_alternatives(record.alternatives)]))
            handle.write("\n")
