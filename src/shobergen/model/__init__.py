"""Domain model: rarity tiers, trait catalogs, Genome, decoded traits."""

from shobergen.model.catalog import (
    ACCESSORIES,
    ACCESSORY_COLORS,
    BASE_COLORS,
    EYE_STYLES,
    MUTATIONS,
    TraitDefinition,
)
from shobergen.model.genome import (
    GENOME_LENGTH,
    PLACEHOLDER_GENOME,
    Gene,
    Genome,
    GenomeFormatError,
)
from shobergen.model.rarity import RARITY_TIERS, RarityConfig, RarityTier
from shobergen.model.traits import DEFAULT_SHOBER_CONFIG, DecodedTraits, ShoberConfig

__all__ = [
    "ACCESSORIES",
    "ACCESSORY_COLORS",
    "BASE_COLORS",
    "DEFAULT_SHOBER_CONFIG",
    "EYE_STYLES",
    "GENOME_LENGTH",
    "MUTATIONS",
    "PLACEHOLDER_GENOME",
    "RARITY_TIERS",
    "DecodedTraits",
    "Gene",
    "Genome",
    "GenomeFormatError",
    "RarityConfig",
    "RarityTier",
    "ShoberConfig",
    "TraitDefinition",
]
