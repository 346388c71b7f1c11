#!/usr/bin/env python3
"""
Peres - Invented Word Generator
===============================

Generates pronounceable invented words from a model of a language's
sound system: phonemes, weighted onset/nucleus/coda clusters and
phonotactic acceptability rules.

Quick Start
-----------
    from peres import WordGenerator

    gen = WordGenerator(open_seed=0, closed_seed=1)
    for result in gen.generate_many(5):
        print(result.text, result.accepted)

Modules
-------
    peres.generators - Sampling, syllables, words, root patterns
    peres.settings   - Application settings (configs/app.yaml)
    peres.cli        - Command-line interface

CLI Usage
---------
    python -m peres generate 10
    python -m peres generate 5 --style segmented --stats
    python -m peres roots 3
"""

__version__ = "0.2.0"
__author__ = "Peres"

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import settings

from .generators import (
    WeightedDistribution,
    DeterministicBitSource,
    ZeroBitSource,
    Feature,
    Phoneme,
    Segment,
    NULL_SEGMENT,
    Syllable,
    SyllableGenerator,
    GenerationExhausted,
    Word,
    WordGenerator,
    GenerationResult,
    GenerationStats,
    RootPatternGenerator,
    load_phonology,
    load_roots,
)
from .settings import load_app_config, get_setting

__all__ = [
    '__version__',
    'generators',
    'settings',
    'WeightedDistribution',
    'DeterministicBitSource',
    'ZeroBitSource',
    'Feature',
    'Phoneme',
    'Segment',
    'NULL_SEGMENT',
    'Syllable',
    'SyllableGenerator',
    'GenerationExhausted',
    'Word',
    'WordGenerator',
    'GenerationResult',
    'GenerationStats',
    'RootPatternGenerator',
    'load_phonology',
    'load_roots',
    'load_app_config',
    'get_setting',
]
