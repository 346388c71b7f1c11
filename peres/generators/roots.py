#!/usr/bin/env python3
"""
Root-Pattern Generator
======================
Joins a consonantal root to a two-slot vowel pattern, e.g. "*bq-ao".
No phonotactic filtering is applied.
"""

from typing import List

from .distribution import WeightedDistribution
from .entropy import BitSource, DeterministicBitSource
from .phonemes import RootsConfig, load_roots


class RootPatternGenerator:
    """Samples a root and a vowel pattern, each uniformly weighted."""

    def __init__(self, config: RootsConfig = None, bits: BitSource = None):
        if config is None:
            config = load_roots()
        if bits is None:
            bits = DeterministicBitSource(0)

        self.config = config
        self.bits = bits
        self.roots = WeightedDistribution.from_pairs((r, config.weight) for r in config.roots)
        self.patterns = WeightedDistribution.from_pairs((p, config.weight) for p in config.patterns)

    def generate(self) -> str:
        root = self.roots.draw(self.bits)
        pattern = self.patterns.draw(self.bits)
        return f"{root}-{pattern}"

    def generate_many(self, count: int) -> List[str]:
        return [self.generate() for _ in range(count)]
