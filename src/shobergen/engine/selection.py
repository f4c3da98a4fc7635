"""Weighted random trait selection and random genome generation."""

from __future__ import annotations

import random
from collections.abc import Sequence

from shobergen.engine.codec import encode
from shobergen.model.catalog import (
    ACCESSORIES,
    ACCESSORY_COLORS,
    BASE_COLORS,
    EYE_STYLES,
    MUTATIONS,
    TraitDefinition,
)
from shobergen.model.rarity import RARITY_TIERS, RarityTier

# Weight multiplier for non-common traits on generation 0 shobers.
GEN0_BOOST = 1.5


def weighted_choice(pairs: Sequence[tuple[float, int]], rng: random.Random | None = None) -> int:
    """Cumulative-weight draw over ``(weight, index)`` pairs.

    Draws a uniform value in [0, total weight) and subtracts weights in order
    until the running value drops to zero or below.

    Args:
        pairs: Candidate weights paired with the index to return.
        rng: Random source. Defaults to the ``random`` module.

    Returns:
        The index of the selected pair.
    """
    if not pairs:
        raise ValueError("weighted_choice needs at least one candidate")
    rng = rng or random
    remaining = rng.random() * sum(weight for weight, _ in pairs)
    for weight, index in pairs:
        remaining -= weight
        if remaining <= 0:
            return index
    return pairs[-1][1]


def rarity_weights(
    catalog: Sequence[TraitDefinition],
    boost: float = 1.0,
    start: int = 0,
) -> list[tuple[float, int]]:
    """Tier weights for ``catalog[start:]`` keyed by catalog index.

    ``boost`` multiplies the weight of every non-common entry.
    """
    pairs: list[tuple[float, int]] = []
    for index in range(start, len(catalog)):
        tier = catalog[index].rarity
        weight = float(RARITY_TIERS[tier].weight)
        if tier != RarityTier.COMMON:
            weight *= boost
        pairs.append((weight, index))
    return pairs


def select_by_rarity(
    catalog: Sequence[TraitDefinition], rng: random.Random | None = None
) -> int:
    """Pick a catalog index weighted by each entry's rarity tier."""
    return weighted_choice(rarity_weights(catalog), rng)


def select_boosted(catalog: Sequence[TraitDefinition], rng: random.Random | None = None) -> int:
    """Like ``select_by_rarity`` with non-common weights scaled by ``GEN0_BOOST``."""
    return weighted_choice(rarity_weights(catalog, boost=GEN0_BOOST), rng)


def generate_random_dna(rng: random.Random | None = None) -> str:
    """Generate a genome with every weighted trait drawn by rarity."""
    rng = rng or random
    return encode(
        base_color=select_by_rarity(BASE_COLORS, rng),
        eye_style=select_by_rarity(EYE_STYLES, rng),
        accessory=select_by_rarity(ACCESSORIES, rng),
        accessory_color=rng.randrange(len(ACCESSORY_COLORS)),
        mutation=select_by_rarity(MUTATIONS, rng),
    )


def generate_gen0_dna(rng: random.Random | None = None) -> str:
    """Generate a genome for a newly minted generation 0 shober.

    Same as ``generate_random_dna`` but uncommon and rarer traits get 1.5x
    their usual weight. Common weights are unchanged.
    """
    rng = rng or random
    return encode(
        base_color=select_boosted(BASE_COLORS, rng),
        eye_style=select_boosted(EYE_STYLES, rng),
        accessory=select_boosted(ACCESSORIES, rng),
        accessory_color=rng.randrange(len(ACCESSORY_COLORS)),
        mutation=select_boosted(MUTATIONS, rng),
    )
