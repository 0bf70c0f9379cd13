"""Pronunciation-aware character substitution for graded Chinese reading."""

from .models import (
    AmbiguityRecord,
    Classification,
    PronunciationAlternatives,
    Replacement,
    TransformOptions,
    TransformResult,
)
from .pipeline import ReaderSession, transform, transform_plain

__all__ = [
    "AmbiguityRecord",
    "Classification",
    "PronunciationAlternatives",
    "ReaderSession",
    "Replacement",
    "TransformOptions",
    "TransformResult",
    "transform",
    "transform_plain",
]
