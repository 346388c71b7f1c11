#!/usr/bin/env python3
"""
Entropy Module for Word Generation
==================================
Reproducible pseudo-random bit sources for the generators.

Every generator holds its own bit source. Two generators seeded
differently behave as independent streams, and re-running with the same
seeds replays the exact same words, which is what regression tests pin.

Usage:
    from peres.generators.entropy import DeterministicBitSource

    bits = DeterministicBitSource(seed=0)
    bits.get_bits(712)   # integer in [0, 712)
"""

from abc import ABC, abstractmethod

MASK_32 = 0xFFFFFFFF
MULTIPLIER = 0xDEADBF03
ROTATION = 13


class BitSource(ABC):
    """Source of bounded random integers."""

    @abstractmethod
    def get_bits(self, num: int) -> int:
        """Return an integer in [0, num)."""


class DeterministicBitSource(BitSource):
    """
    Seeded multiply-and-rotate generator over a 32-bit state.

    Each call advances the state as
    ``state = rotr32(0xDEADBF03 * (state + 1), 13)`` and returns
    ``state % num``. Not safe to share between concurrent callers.
    """

    def __init__(self, seed: int = 0):
        self._state = seed & MASK_32

    @property
    def state(self) -> int:
        return self._state

    def _advance(self) -> int:
        state = (MULTIPLIER * (self._state + 1)) & MASK_32
        state = ((state >> ROTATION) | (state << (32 - ROTATION))) & MASK_32
        self._state = state
        return state

    def get_bits(self, num: int) -> int:
        if num <= 0:
            raise ValueError(f"get_bits() bound must be positive, got {num}")
        return self._advance() % num

    def __repr__(self) -> str:
        return f"DeterministicBitSource(state={self._state:#010x})"


class ZeroBitSource(BitSource):
    """Always draws 0. Pins every sample to the first stored item."""

    def get_bits(self, num: int) -> int:
        if num <= 0:
            raise ValueError(f"get_bits() bound must be positive, got {num}")
        return 0
