#!/usr/bin/env python3
"""
Phoneme Configuration Loader
============================
Phoneme records, segments and the onset/nucleus/coda weight tables,
loaded from YAML files in this directory.

Usage:
    from peres.generators.phonemes import load_phonology, load_roots

    english = load_phonology()
    onsets = english.onset_distribution()
    roots = load_roots()
"""

import enum
import yaml
from pathlib import Path
from typing import Dict, List, Tuple, Any, Iterator
from dataclasses import dataclass, field
from functools import lru_cache

from ..distribution import WeightedDistribution


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent

MAX_PHONEMES_PER_SEGMENT = 3


# =============================================================================
# Articulatory Features
# =============================================================================

class Feature(enum.IntFlag):
    """Closed set of articulatory properties a phoneme can carry."""
    # manner
    FRICATIVE = 0x1
    PLOSIVE = 0x2
    AFFRICATE = 0x4
    NASAL = 0x8
    APPROXIMANT = 0x10
    LATERAL = 0x20
    # place
    BILABIAL = 0x40
    LABIODENTAL = 0x80
    DENTAL = 0x100
    GLOTTAL = 0x200
    PALATAL = 0x400
    ALVEOLAR = 0x800
    POSTALVEOLAR = 0x1000
    VELAR = 0x2000
    LABIOVELAR = 0x4000
    # voicing
    VOICED = 0x10000
    VOICELESS = 0x20000
    # vowel length
    SHORT_VOWEL = 0x100000
    LONG_VOWEL = 0x200000

    # group masks
    MANNER = 0x3F
    PLACE = 0x7FC0
    VOICE = 0x30000
    VOWEL = 0x300000


def parse_features(names: List[str]) -> Feature:
    """Combine feature names (case-insensitive) into one flag value."""
    features = Feature(0)
    for name in names:
        try:
            features |= Feature[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown phoneme feature '{name}'") from None
    return features


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class Phoneme:
    """A phoneme. Identity is the symbol; features do not take part in equality."""
    symbol: str
    features: Feature = field(default=Feature(0), compare=False)

    def has(self, mask: Feature) -> bool:
        """True when every flag in mask is set."""
        return (self.features & mask) == mask

    @property
    def is_vowel(self) -> bool:
        return bool(self.features & Feature.VOWEL)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Segment:
    """
    A pronounceable cluster of up to three phonemes with its spelling.

    Two segments are equal when they hold the same phonemes in the same
    order; the spelling is only used for rendering.
    """
    spelling: str = field(compare=False)
    phonemes: Tuple[Phoneme, ...] = ()

    def __post_init__(self):
        if len(self.phonemes) > MAX_PHONEMES_PER_SEGMENT:
            raise ValueError(
                f"Segment '{self.spelling}' has {len(self.phonemes)} phonemes "
                f"(max {MAX_PHONEMES_PER_SEGMENT})"
            )

    def __len__(self) -> int:
        return len(self.phonemes)

    def __iter__(self) -> Iterator[Phoneme]:
        return iter(self.phonemes)

    @property
    def is_null(self) -> bool:
        return not self.phonemes

    def first(self) -> Phoneme:
        return self.phonemes[0]

    def last(self) -> Phoneme:
        return self.phonemes[-1]

    def is_short_vowel(self) -> bool:
        return len(self.phonemes) == 1 and self.phonemes[0].has(Feature.SHORT_VOWEL)

    def is_complex_cluster(self) -> bool:
        return len(self.phonemes) > 1

    def __str__(self) -> str:
        return self.spelling


NULL_SEGMENT = Segment("", ())

SegmentTable = List[Tuple[Segment, int]]


@dataclass
class PhonologyConfig:
    """Container for a loaded phonology: phonemes plus three weighted segment tables."""
    name: str
    phonemes: Dict[str, Phoneme]
    onsets: SegmentTable
    nuclei: SegmentTable
    codas: SegmentTable
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    def onset_distribution(self) -> WeightedDistribution[Segment]:
        return WeightedDistribution.from_pairs(self.onsets)

    def nucleus_distribution(self) -> WeightedDistribution[Segment]:
        return WeightedDistribution.from_pairs(self.nuclei)

    def coda_distribution(self) -> WeightedDistribution[Segment]:
        return WeightedDistribution.from_pairs(self.codas)

    def get_phoneme(self, symbol: str) -> Phoneme:
        try:
            return self.phonemes[symbol]
        except KeyError:
            raise ValueError(f"Unknown phoneme '{symbol}' in {self.name} phonology") from None

    def enabled(self, table: str) -> List[Segment]:
        """Segments of a table with nonzero weight."""
        return [seg for seg, weight in getattr(self, table) if weight > 0]


@dataclass
class RootsConfig:
    """Container for the root/vowel-pattern tables."""
    roots: List[str]
    patterns: List[str]
    weight: int
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Phoneme config not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _require(mapping: dict, key: str, source: str):
    value = mapping.get(key)
    if value is None:
        raise ValueError(f"{source} missing '{key}'")
    return value


def _build_table(entries: list, phonemes: Dict[str, Phoneme], source: str) -> SegmentTable:
    table = []
    for entry in entries:
        if len(entry) != 3:
            raise ValueError(f"{source}: expected [spelling, phonemes, weight], got {entry!r}")
        spelling, symbols, weight = entry
        members = []
        for symbol in symbols or []:
            if symbol not in phonemes:
                raise ValueError(f"{source}: unknown phoneme '{symbol}' in segment '{spelling}'")
            members.append(phonemes[symbol])
        if not isinstance(weight, int) or weight < 0:
            raise ValueError(f"{source}: invalid weight {weight!r} for segment '{spelling}'")
        segment = Segment(spelling or "", tuple(members)) if members else NULL_SEGMENT
        table.append((segment, weight))
    return table


def build_phonology(raw: Dict[str, Any], name: str = "custom") -> PhonologyConfig:
    """Build a PhonologyConfig from an already-parsed mapping."""
    source = f"{name}.yaml"
    phonemes = {
        symbol: Phoneme(str(symbol), parse_features(features or []))
        for symbol, features in _require(raw, 'phonemes', source).items()
    }
    return PhonologyConfig(
        name=name,
        phonemes=phonemes,
        onsets=_build_table(_require(raw, 'onsets', source), phonemes, source),
        nuclei=_build_table(_require(raw, 'nuclei', source), phonemes, source),
        codas=_build_table(_require(raw, 'codas', source), phonemes, source),
        raw=raw,
    )


@lru_cache(maxsize=4)
def load_phonology(name: str = 'english') -> PhonologyConfig:
    """Load a phonology (phonemes + onset/nucleus/coda tables) by name."""
    return build_phonology(_load_yaml(f'{name}.yaml'), name=name)


@lru_cache(maxsize=1)
def load_roots() -> RootsConfig:
    """Load the root strings and vowel patterns for root-pattern words."""
    raw = _load_yaml('roots.yaml')
    return RootsConfig(
        roots=[str(r) for r in _require(raw, 'roots', 'roots.yaml')],
        patterns=[str(p) for p in _require(raw, 'patterns', 'roots.yaml')],
        weight=int(raw.get('weight', 10)),
        raw=raw,
    )


def reload_configs():
    """Clear cached configurations so the next load re-reads the YAML files."""
    load_phonology.cache_clear()
    load_roots.cache_clear()


__all__ = [
    'Feature',
    'Phoneme',
    'Segment',
    'NULL_SEGMENT',
    'MAX_PHONEMES_PER_SEGMENT',
    'PhonologyConfig',
    'RootsConfig',
    'parse_features',
    'build_phonology',
    'load_phonology',
    'load_roots',
    'reload_configs',
    'PHONEMES_DIR',
]
