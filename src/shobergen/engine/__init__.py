"""Genetics engine: genome codec, rarity scoring, random generation, breeding."""

from shobergen.engine.breeding import (
    BREEDING_COOLDOWNS,
    DEFAULT_BREEDING_COOLDOWN,
    BreedingCheck,
    BreedingResult,
    InheritanceSource,
    InheritedTraits,
    breed_shobers,
    calculate_child_mutation,
    can_breed,
    format_cooldown,
    get_breeding_cooldown,
    get_breeding_cost,
    get_suggested_stud_fee,
    mix_gene,
    mix_gene_with_mutation,
)
from shobergen.engine.codec import (
    DEFAULT_TRAITS,
    decode,
    dna_to_config,
    encode,
    is_placeholder,
    is_valid_genome,
)
from shobergen.engine.scoring import (
    calculate_rarity_score,
    get_overall_rarity,
    get_rarity_color,
    get_rarity_label,
)
from shobergen.engine.selection import (
    generate_gen0_dna,
    generate_random_dna,
    select_by_rarity,
    weighted_choice,
)

__all__ = [
    "BREEDING_COOLDOWNS",
    "DEFAULT_BREEDING_COOLDOWN",
    "DEFAULT_TRAITS",
    "BreedingCheck",
    "BreedingResult",
    "InheritanceSource",
    "InheritedTraits",
    "breed_shobers",
    "calculate_child_mutation",
    "calculate_rarity_score",
    "can_breed",
    "decode",
    "dna_to_config",
    "encode",
    "format_cooldown",
    "generate_gen0_dna",
    "generate_random_dna",
    "get_breeding_cooldown",
    "get_breeding_cost",
    "get_overall_rarity",
    "get_rarity_color",
    "get_rarity_label",
    "get_suggested_stud_fee",
    "is_placeholder",
    "is_valid_genome",
    "mix_gene",
    "mix_gene_with_mutation",
    "select_by_rarity",
    "weighted_choice",
]
