"""Default pronunciation oracle backed by ``pypinyin``.

Pronunciations use ``Style.TONE3`` (tone number after the syllable) with the
neutral tone written as ``5``, e.g. ``he2`` or ``le5``.
"""

from __future__ import annotations

from functools import lru_cache

from pypinyin import Style, pinyin


@lru_cache(maxsize=None)
def _lookup(char: str, heteronym: bool) -> tuple[str, ...]:
    """Query pypinyin for one character.

    Args:
        char: Single character to look up.
        heteronym: Whether all readings should be returned.

    Returns:
        Distinct readings in pypinyin order; empty when the character has no
        known pronunciation.
    """

    result = pinyin(
        char,
        style=Style.TONE3,
        heteronym=heteronym,
        neutral_tone_with_five=True,
        errors=lambda _: [],
    )
    if not result or not result[0]:
        return ()
    return tuple(dict.fromkeys(item for item in result[0] if item))


class PypinyinOracle:
    """Pronunciation oracle answering from the pypinyin dictionaries.

    Lookups are memoized per character; only the first character of the
    argument is considered.
    """

    def primary_pronunciation(self, char: str) -> str | None:
        if not char:
            return None
        readings = _lookup(char[0], False)
        return readings[0] if readings else None

    def all_pronunciations(self, char: str) -> tuple[str, ...]:
        if not char:
            return ()
        return _lookup(char[0], True)

    @staticmethod
    def cache_info():
        """Expose the shared lookup cache statistics."""

        return _lookup.cache_info()
