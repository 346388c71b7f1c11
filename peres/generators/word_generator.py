#!/usr/bin/env python3
"""
Word Generator
==============
Drives the syllable generators to produce whole words.

A WordGenerator owns one bit source per syllable kind, so the open and
closed streams are independent and each replays exactly from its seed:

    from peres.generators import WordGenerator

    gen = WordGenerator(open_seed=0, closed_seed=1)
    result = gen.generate()
    result.text        # 'stradush'
    result.accepted    # True
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from .entropy import DeterministicBitSource
from .phonemes import PhonologyConfig, load_phonology
from .syllable import (
    DEFAULT_MAX_ATTEMPTS,
    GenerationExhausted,
    Syllable,
    SyllableGenerator,
)
from .word import Word

logger = logging.getLogger(__name__)

SYLLABLE_KINDS = ('open', 'closed')
DEFAULT_PATTERN = ('open', 'closed')


@dataclass
class GenerationResult:
    """Outcome of one word attempt."""
    word: Optional[Word]
    accepted: bool
    syllables: List[Syllable] = field(default_factory=list)
    violations: List[str] = field(default_factory=list)
    exhausted: bool = False
    error: str = ""

    @property
    def text(self) -> str:
        return self.word.render() if self.word is not None else ""

    def render(self, style: str = 'plain') -> str:
        return self.word.render_as(style) if self.word is not None else ""


@dataclass
class GenerationStats:
    """Running tally over generated words."""
    generated: int = 0
    accepted: int = 0
    rejected: int = 0
    exhausted: int = 0

    def record(self, result: GenerationResult) -> None:
        self.generated += 1
        if result.exhausted:
            self.exhausted += 1
        elif result.accepted:
            self.accepted += 1
        else:
            self.rejected += 1

    @property
    def rejection_ratio(self) -> float:
        if self.generated == 0:
            return 0.0
        return self.rejected / self.generated


def parse_pattern(pattern) -> tuple:
    """Accept 'open,closed' or a sequence of kinds; validate each entry."""
    if isinstance(pattern, str):
        pattern = [p.strip() for p in pattern.split(',') if p.strip()]
    kinds = tuple(pattern)
    if not kinds:
        raise ValueError("Syllable pattern must contain at least one syllable")
    for kind in kinds:
        if kind not in SYLLABLE_KINDS:
            raise ValueError(
                f"Unknown syllable kind '{kind}'. Available: {', '.join(SYLLABLE_KINDS)}"
            )
    return kinds


class WordGenerator:
    """
    Builds words from a syllable pattern using independently seeded
    open and closed syllable generators.

    Args:
        phonology: Phonology tables (defaults to the bundled English set)
        open_seed: Seed of the open-syllable bit source
        closed_seed: Seed of the closed-syllable bit source
        pattern: Syllable kinds in word order, e.g. ('open', 'closed')
        max_attempts: Retry cap per syllable
    """

    def __init__(self, phonology: PhonologyConfig = None, open_seed: int = 0,
                 closed_seed: int = 1, pattern: Sequence[str] = DEFAULT_PATTERN,
                 max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if phonology is None:
            phonology = load_phonology()

        self.phonology = phonology
        self.pattern = parse_pattern(pattern)
        self.syllable_generators = {
            'open': SyllableGenerator(
                phonology, DeterministicBitSource(open_seed),
                closed=False, max_attempts=max_attempts,
            ),
            'closed': SyllableGenerator(
                phonology, DeterministicBitSource(closed_seed),
                closed=True, max_attempts=max_attempts,
            ),
        }

    def generate(self) -> GenerationResult:
        """Generate and validate one word. Raises GenerationExhausted."""
        syllables = [self.syllable_generators[kind].generate() for kind in self.pattern]
        word = Word.from_syllables(syllables)
        violations = word.violations()

        if violations:
            logger.debug(f"Rejected '{word.render()}': {', '.join(violations)}")

        return GenerationResult(
            word=word,
            accepted=not violations,
            syllables=syllables,
            violations=violations,
        )

    def generate_many(self, count: int) -> Iterator[GenerationResult]:
        """Yield count results; exhausted attempts are reported, not raised."""
        for _ in range(count):
            try:
                yield self.generate()
            except GenerationExhausted as e:
                yield GenerationResult(word=None, accepted=False, exhausted=True, error=str(e))
