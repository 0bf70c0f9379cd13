"""Helpers for numbered-tone pronunciation keys such as ``he2`` or ``le5``."""

from __future__ import annotations


def base_pronunciation(pronunciation: str) -> str:
    """Drop the trailing tone number from a numbered pronunciation.

    Args:
        pronunciation: Toned key, e.g. ``zhong1``.

    Returns:
        Tone-insensitive base syllable, e.g. ``zhong``. Keys without a trailing
        digit are returned unchanged.
    """

    if pronunciation and pronunciation[-1].isdigit():
        return pronunciation[:-1]
    return pronunciation


def distinct_bases(pronunciations: tuple[str, ...]) -> tuple[str, ...]:
    """Fold pronunciations to base syllables, deduplicated in first-seen order."""

    return tuple(dict.fromkeys(base_pronunciation(item) for item in pronunciations))
