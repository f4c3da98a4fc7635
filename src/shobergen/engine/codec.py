"""Genome encoding and decoding.

Encoding never validates ranges: values are truncated to a byte and stored as
is. Decoding reduces each gene modulo its catalog length and falls back to
fixed defaults for placeholder or malformed genomes instead of raising, since
freshly minted shobers carry the placeholder until their DNA is generated.
"""

from __future__ import annotations

from shobergen.engine.scoring import calculate_rarity_score, get_overall_rarity
from shobergen.model.catalog import (
    ACCESSORIES,
    ACCESSORY_COLORS,
    BASE_COLORS,
    DEFAULT_BELLY_COLOR,
    EYE_STYLES,
    MUTATIONS,
)
from shobergen.model.genome import PLACEHOLDER_GENOME, Gene, Genome, GenomeFormatError
from shobergen.model.rarity import RarityTier
from shobergen.model.traits import DEFAULT_SHOBER_CONFIG, DecodedTraits, ShoberConfig

DEFAULT_RARITY_SCORE = 50

DEFAULT_TRAITS = DecodedTraits(
    base_color=BASE_COLORS[0],
    belly_color=BASE_COLORS[0].belly or DEFAULT_BELLY_COLOR,
    eye_style=EYE_STYLES[0],
    accessory=ACCESSORIES[0],
    accessory_color=ACCESSORY_COLORS[0],
    mutation=MUTATIONS[0],
    rarity_score=DEFAULT_RARITY_SCORE,
    overall_rarity=RarityTier.COMMON,
)


def encode(
    base_color: int,
    eye_style: int,
    accessory: int,
    accessory_color: int,
    mutation: int,
) -> str:
    """Encode five trait values into a 24 character genome.

    Values outside a catalog's range are accepted; the decoder resolves them
    with modulo. Values outside 0-255 are truncated to their low byte.

    Returns:
        24 lowercase hex characters.
    """
    return Genome.from_traits(base_color, eye_style, accessory, accessory_color, mutation).to_hex()


def parse_genome(dna: str | None) -> Genome | None:
    """Parse genome text, returning None for anything malformed."""
    if not dna:
        return None
    try:
        return Genome.from_hex(dna)
    except GenomeFormatError:
        return None


def is_placeholder(dna: str | None) -> bool:
    """True for missing DNA and the all-zero "not generated yet" genome."""
    return not dna or dna == PLACEHOLDER_GENOME


def is_valid_genome(dna: str | None) -> bool:
    """True if ``dna`` is a well formed genome that is not the placeholder."""
    return not is_placeholder(dna) and parse_genome(dna) is not None


def decode(dna: str | None) -> DecodedTraits:
    """Decode genome text into traits and a rarity score.

    Never raises. Empty, placeholder, wrong-length or non-hex input decodes to
    ``DEFAULT_TRAITS``.
    """
    genome = None if is_placeholder(dna) else parse_genome(dna)
    if genome is None:
        return DEFAULT_TRAITS

    base_color = BASE_COLORS[genome.gene(Gene.BASE_COLOR) % len(BASE_COLORS)]
    eye_style = EYE_STYLES[genome.gene(Gene.EYE_STYLE) % len(EYE_STYLES)]
    accessory = ACCESSORIES[genome.gene(Gene.ACCESSORY) % len(ACCESSORIES)]
    accessory_color = ACCESSORY_COLORS[genome.gene(Gene.ACCESSORY_COLOR) % len(ACCESSORY_COLORS)]
    mutation = MUTATIONS[genome.gene(Gene.MUTATION) % len(MUTATIONS)]

    rarity_score = calculate_rarity_score(
        base_color=base_color.rarity,
        eye_style=eye_style.rarity,
        accessory=accessory.rarity,
        mutation=mutation.rarity,
    )

    return DecodedTraits(
        base_color=base_color,
        belly_color=base_color.belly or DEFAULT_BELLY_COLOR,
        eye_style=eye_style,
        accessory=accessory,
        accessory_color=accessory_color,
        mutation=mutation,
        rarity_score=rarity_score,
        overall_rarity=get_overall_rarity(rarity_score),
    )


def dna_to_config(dna: str | None) -> ShoberConfig:
    """Decode a genome into the appearance settings used for rendering."""
    decoded = decode(dna)
    return ShoberConfig(
        base_color=decoded.base_color.hex or DEFAULT_SHOBER_CONFIG.base_color,
        belly_color=decoded.belly_color,
        eye_style=decoded.eye_style.id,
        accessory=decoded.accessory.id,
        accessory_color=decoded.accessory_color,
    )
