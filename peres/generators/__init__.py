#!/usr/bin/env python3
"""
Word Generators
===============
Provides the generation engine:
- WeightedDistribution: cumulative-frequency sampling
- DeterministicBitSource: reproducible seeded draws
- SyllableGenerator: open/closed syllables with the s-cluster rule
- Word / WordGenerator: word assembly, validation and rendering
- RootPatternGenerator: root + vowel pattern words
"""

from .distribution import WeightedDistribution
from .entropy import (
    BitSource,
    DeterministicBitSource,
    ZeroBitSource,
)
from .phonemes import (
    Feature,
    Phoneme,
    Segment,
    NULL_SEGMENT,
    PhonologyConfig,
    load_phonology,
    load_roots,
)
from .syllable import (
    Syllable,
    SyllableGenerator,
    GenerationExhausted,
    s_cluster_rule,
)
from .word import (
    Word,
    RENDER_STYLES,
    syllabify_text,
)
from .word_generator import (
    WordGenerator,
    GenerationResult,
    GenerationStats,
)
from .roots import RootPatternGenerator

__all__ = [
    # Sampling
    'WeightedDistribution',
    'BitSource',
    'DeterministicBitSource',
    'ZeroBitSource',
    # Phonology
    'Feature',
    'Phoneme',
    'Segment',
    'NULL_SEGMENT',
    'PhonologyConfig',
    'load_phonology',
    'load_roots',
    # Syllables
    'Syllable',
    'SyllableGenerator',
    'GenerationExhausted',
    's_cluster_rule',
    # Words
    'Word',
    'RENDER_STYLES',
    'syllabify_text',
    'WordGenerator',
    'GenerationResult',
    'GenerationStats',
    # Root patterns
    'RootPatternGenerator',
]
