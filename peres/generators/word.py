#!/usr/bin/env python3
"""
Word Assembly and Validation
============================
Flattens syllables into a segment sequence, checks it against the
word-level acceptability rules and renders it as text.

Rules (all must hold):
- cluster_count: fewer than 3 multi-phoneme segments
- cacophony: no vowel phoneme more than 3 times, no consonant more than 2 times
- adjacent_repeats: no two consecutive identical segments
- interior_glottal: no lone glottal consonant after the first segment
- complexity: fewer than 2 multi-phoneme segments

cluster_count is implied by complexity; both are kept so each threshold
can be tuned and tested on its own.
"""

from collections import Counter
from itertools import groupby
from typing import Iterable, List, Tuple

from .phonemes import Feature, Segment
from .syllable import Syllable

VOWEL_CHARS = frozenset('aeiou')

MAX_CLUSTERS = 3
MAX_COMPLEX_SEGMENTS = 2
MAX_VOWEL_REPEATS = 3
MAX_CONSONANT_REPEATS = 2

RENDER_STYLES = ('plain', 'segmented', 'syllabified')


def is_vowel_char(char: str) -> bool:
    return char in VOWEL_CHARS


def syllabify_text(text: str) -> str:
    """Insert '-' at every vowel/consonant change: 'stradush' -> 'str-a-d-u-sh'."""
    return '-'.join(''.join(run) for _, run in groupby(text, key=is_vowel_char))


class Word:
    """An immutable sequence of segments assembled from syllables."""

    def __init__(self, segments: Iterable[Segment]):
        self.segments: Tuple[Segment, ...] = tuple(segments)

    @classmethod
    def from_syllables(cls, syllables: Iterable[Syllable]) -> 'Word':
        return cls(seg for syllable in syllables for seg in syllable.segments())

    def __len__(self) -> int:
        return len(self.segments)

    def __repr__(self) -> str:
        return f"Word({self.render_segmented()!r})"

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _complex_segments(self) -> int:
        return sum(1 for seg in self.segments if len(seg) >= 2)

    def check_cluster_count(self) -> bool:
        return self._complex_segments() < MAX_CLUSTERS

    def check_cacophony(self) -> bool:
        counts = Counter(phoneme for seg in self.segments for phoneme in seg)
        for phoneme, count in counts.items():
            limit = MAX_VOWEL_REPEATS if phoneme.is_vowel else MAX_CONSONANT_REPEATS
            if count > limit:
                return False
        return True

    def check_adjacent_repeats(self) -> bool:
        return all(a != b for a, b in zip(self.segments, self.segments[1:]))

    def check_interior_glottal(self) -> bool:
        for seg in self.segments[1:]:
            if len(seg) == 1 and seg.first().has(Feature.GLOTTAL):
                return False
        return True

    def check_complexity(self) -> bool:
        return self._complex_segments() < MAX_COMPLEX_SEGMENTS

    def violations(self) -> List[str]:
        """Names of the failed rules, in rule order."""
        checks = (
            ('cluster_count', self.check_cluster_count),
            ('cacophony', self.check_cacophony),
            ('adjacent_repeats', self.check_adjacent_repeats),
            ('interior_glottal', self.check_interior_glottal),
            ('complexity', self.check_complexity),
        )
        return [name for name, check in checks if not check()]

    def validate(self) -> bool:
        return not self.violations()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self) -> str:
        return ''.join(seg.spelling for seg in self.segments)

    def render_segmented(self) -> str:
        return '-'.join(seg.spelling for seg in self.segments)

    def render_syllabified(self) -> str:
        return syllabify_text(self.render())

    def render_as(self, style: str = 'plain') -> str:
        renderers = {
            'plain': self.render,
            'segmented': self.render_segmented,
            'syllabified': self.render_syllabified,
        }
        if style not in renderers:
            raise ValueError(
                f"Unknown render style '{style}'. Available: {', '.join(RENDER_STYLES)}"
            )
        return renderers[style]()

    def __str__(self) -> str:
        return self.render()
