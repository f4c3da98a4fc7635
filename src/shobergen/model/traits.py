"""Decoded trait value types returned by the codec."""

from __future__ import annotations

from dataclasses import dataclass

from shobergen.model.catalog import TraitDefinition
from shobergen.model.rarity import RarityTier


@dataclass(frozen=True)
class DecodedTraits:
    """Traits resolved from a genome.

    Recomputed on demand; the genome string is the only stored form.
    """

    base_color: TraitDefinition
    belly_color: str
    eye_style: TraitDefinition
    accessory: TraitDefinition
    accessory_color: str
    mutation: TraitDefinition
    rarity_score: int
    overall_rarity: RarityTier


@dataclass(frozen=True)
class ShoberConfig:
    """Appearance settings consumed by the renderer."""

    base_color: str = "#d4a574"
    belly_color: str = "#f5e6d3"
    eye_style: str = "happy"
    accessory: str = "none"
    accessory_color: str = "#ff9800"


DEFAULT_SHOBER_CONFIG = ShoberConfig()
