#!/usr/bin/env python3
"""
Syllable Generator
==================
Draws onset, nucleus and (for closed syllables) coda segments from the
phonology's weighted tables and keeps drawing until the candidate passes
the intra-syllable rule:

    s-cluster dissimilation: after an onset starting with /s/, the
    consonant closing the onset may not reappear at the start of the
    coda around a short vowel ("spap" is out, "spaap" is fine).

Rejection sampling has no natural bound, so every generator carries a
retry cap and raises GenerationExhausted when it is hit.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .distribution import WeightedDistribution
from .entropy import BitSource
from .phonemes import Feature, Segment, NULL_SEGMENT, PhonologyConfig

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000

S_FEATURES = Feature.FRICATIVE | Feature.ALVEOLAR | Feature.VOICELESS


class GenerationExhausted(RuntimeError):
    """Raised when no valid syllable was found within the retry cap."""

    def __init__(self, kind: str, attempts: int):
        super().__init__(f"No valid {kind} syllable after {attempts} attempts")
        self.kind = kind
        self.attempts = attempts


@dataclass(frozen=True)
class Syllable:
    """Onset (may be null), nucleus, coda (may be null)."""
    onset: Segment = NULL_SEGMENT
    nucleus: Segment = NULL_SEGMENT
    coda: Segment = NULL_SEGMENT

    @property
    def has_onset(self) -> bool:
        return not self.onset.is_null

    @property
    def has_coda(self) -> bool:
        return not self.coda.is_null

    @property
    def num_segments(self) -> int:
        return 1 + (1 if self.has_onset else 0) + (1 if self.has_coda else 0)

    def segments(self) -> Iterator[Segment]:
        """Present segments in order: onset, nucleus, coda."""
        if self.has_onset:
            yield self.onset
        yield self.nucleus
        if self.has_coda:
            yield self.coda

    @property
    def text(self) -> str:
        return ''.join(seg.spelling for seg in self.segments())


def s_cluster_rule(syllable: Syllable) -> bool:
    """
    True unless the syllable is s+...C1 V C2... with C1 == C2 and V short.

    Vacuously true for syllables without onset or coda.
    """
    if not syllable.has_onset or not syllable.has_coda:
        return True

    if not syllable.onset.first().has(S_FEATURES):
        return True

    if syllable.onset.last() != syllable.coda.first():
        return True

    return not syllable.nucleus.is_short_vowel()


def validate_syllable(syllable: Syllable) -> bool:
    return s_cluster_rule(syllable)


class SyllableGenerator:
    """
    Draws syllables from a phonology using a held bit source.

    Args:
        phonology: Loaded phonology tables
        bits: Bit source; not shared with other generators
        closed: Draw a coda as well (closed syllable) instead of leaving it null
        max_attempts: Invalid candidates tolerated before GenerationExhausted
    """

    def __init__(self, phonology: PhonologyConfig, bits: BitSource,
                 closed: bool = False, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.phonology = phonology
        self.bits = bits
        self.closed = closed
        self.max_attempts = max_attempts

        self.onsets: WeightedDistribution[Segment] = phonology.onset_distribution()
        self.nuclei: WeightedDistribution[Segment] = phonology.nucleus_distribution()
        self.codas: Optional[WeightedDistribution[Segment]] = (
            phonology.coda_distribution() if closed else None
        )

    @property
    def kind(self) -> str:
        return 'closed' if self.closed else 'open'

    def _candidate(self) -> Syllable:
        onset = self.onsets.draw(self.bits)
        nucleus = self.nuclei.draw(self.bits)
        coda = self.codas.draw(self.bits) if self.closed else NULL_SEGMENT
        return Syllable(onset, nucleus, coda)

    def generate(self) -> Syllable:
        """Draw candidates until one passes the intra-syllable rule."""
        for attempt in range(1, self.max_attempts + 1):
            syllable = self._candidate()
            if validate_syllable(syllable):
                return syllable
            logger.debug(f"Rejected {self.kind} syllable '{syllable.text}' (attempt {attempt})")

        logger.warning(f"Giving up on {self.kind} syllable after {self.max_attempts} attempts")
        raise GenerationExhausted(self.kind, self.max_attempts)

    def __repr__(self) -> str:
        return f"SyllableGenerator(kind={self.kind!r}, bits={self.bits!r})"
