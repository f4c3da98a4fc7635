"""Rarity tiers: selection weights, score multipliers and display colors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class RarityTier(StrEnum):
    """Rarity classification shared by every weighted trait catalog."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"


@dataclass(frozen=True)
class RarityConfig:
    """Constants attached to a single rarity tier.

    Attributes:
        name: Tier this config belongs to.
        weight: Relative selection weight (higher = more common).
        multiplier: Factor applied when scoring a trait of this tier.
        color: Display color for UI badges.
    """

    name: RarityTier
    weight: int
    multiplier: int
    color: str


RARITY_TIERS: MappingProxyType[RarityTier, RarityConfig] = MappingProxyType(
    {
        RarityTier.COMMON: RarityConfig(RarityTier.COMMON, 60, 1, "#9e9e9e"),
        RarityTier.UNCOMMON: RarityConfig(RarityTier.UNCOMMON, 25, 2, "#4caf50"),
        RarityTier.RARE: RarityConfig(RarityTier.RARE, 12, 5, "#2196f3"),
        RarityTier.LEGENDARY: RarityConfig(RarityTier.LEGENDARY, 3, 20, "#ffd700"),
    }
)
