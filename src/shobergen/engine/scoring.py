"""Rarity scoring for decoded genomes."""

from __future__ import annotations

import math

from shobergen.model.rarity import RARITY_TIERS, RarityTier

# Relative importance of each trait category in the rarity score.
CATEGORY_WEIGHTS: dict[str, int] = {
    "base_color": 30,
    "eye_style": 20,
    "accessory": 15,
    "mutation": 35,
}

MAX_RARITY_SCORE = 500

# Lower bounds, checked highest first.
_OVERALL_THRESHOLDS: tuple[tuple[int, RarityTier], ...] = (
    (300, RarityTier.LEGENDARY),
    (150, RarityTier.RARE),
    (80, RarityTier.UNCOMMON),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up."""
    return math.floor(value + 0.5)


def calculate_rarity_score(
    *,
    base_color: RarityTier,
    eye_style: RarityTier,
    accessory: RarityTier,
    mutation: RarityTier,
) -> int:
    """Weighted rarity score for one set of trait tiers.

    Each category's weight is multiplied by its tier multiplier and the sum is
    capped at 500. The uncapped maximum (all legendary) is 2000.

    Args:
        base_color: Tier of the base color.
        eye_style: Tier of the eye style.
        accessory: Tier of the accessory.
        mutation: Tier of the mutation.

    Returns:
        Integer score in [0, 500].
    """
    tiers = {
        "base_color": base_color,
        "eye_style": eye_style,
        "accessory": accessory,
        "mutation": mutation,
    }
    score = sum(
        RARITY_TIERS[RarityTier(tier)].multiplier * CATEGORY_WEIGHTS[category]
        for category, tier in tiers.items()
    )
    return min(round_half_up(score), MAX_RARITY_SCORE)


def get_overall_rarity(score: float) -> RarityTier:
    """Map a rarity score to its overall tier."""
    for threshold, tier in _OVERALL_THRESHOLDS:
        if score >= threshold:
            return tier
    return RarityTier.COMMON


def get_rarity_label(score: float) -> str:
    """Display label for a score, e.g. ``"Legendary"``."""
    return get_overall_rarity(score).value.capitalize()


def get_rarity_color(score: float) -> str:
    """Display color for a score's overall tier."""
    return RARITY_TIERS[get_overall_rarity(score)].color
