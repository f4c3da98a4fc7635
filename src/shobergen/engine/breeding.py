"""Breeding mechanics for shobers.

Handles gene mixing from two parents, mutation chances, breeding cooldowns,
generation calculation and the breeding economy (cost and stud fee).

Everything here is a pure computation. Callers must re-check eligibility and
commit the result (child, currency, cooldowns) atomically, otherwise two
concurrent requests can both pass ``can_breed`` before either commits.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import StrEnum

from shobergen.engine.codec import encode, parse_genome
from shobergen.engine.scoring import round_half_up
from shobergen.engine.selection import rarity_weights, weighted_choice
from shobergen.model.catalog import (
    ACCESSORIES,
    ACCESSORY_COLORS,
    BASE_COLORS,
    EYE_STYLES,
    MUTATIONS,
    TraitDefinition,
)
from shobergen.model.genome import Gene, Genome

logger = logging.getLogger(__name__)

HOUR_MS = 60 * 60 * 1000
MINUTE_MS = 60 * 1000

# Cooldown in milliseconds keyed by the parent's generation.
BREEDING_COOLDOWNS: dict[int, int] = {
    0: 4 * HOUR_MS,
    1: 3 * HOUR_MS,
    2: 2 * HOUR_MS,
    3: int(1.5 * HOUR_MS),
}
DEFAULT_BREEDING_COOLDOWN = 1 * HOUR_MS

# Per-trait chance that an inherited gene is replaced by a fresh weighted draw.
BASE_COLOR_MUTATION_CHANCE = 0.03
EYE_STYLE_MUTATION_CHANCE = 0.05
ACCESSORY_MUTATION_CHANCE = 0.05

# Mutation gene roll chances.
BASE_MUTATION_CHANCE = 0.05
ONE_PARENT_MUTATION_CHANCE = 0.15
BOTH_PARENTS_MUTATION_CHANCE = 0.30
DIRECT_MUTATION_INHERIT_CHANCE = 0.5

MIN_BREEDING_COST = 10
BASE_BREEDING_COST = 100
COST_DROP_PER_GENERATION = 15
MIN_STUD_FEE = 10

LISTED_FOR_SALE_REASON = "Shober is listed for sale"
COOLDOWN_ACTIVE_REASON = "Breeding cooldown active"


class InheritanceSource(StrEnum):
    """Where a child's trait value came from."""

    PARENT1 = "parent1"
    PARENT2 = "parent2"
    MUTATION = "mutation"


@dataclass(frozen=True)
class BreedingCheck:
    """Outcome of a breeding eligibility check."""

    can_breed: bool
    reason: str | None = None
    cooldown_remaining: int | None = None  # milliseconds


@dataclass(frozen=True)
class InheritedTraits:
    """Provenance of each mixed trait in a child genome."""

    base_color_from: InheritanceSource
    eye_style_from: InheritanceSource
    accessory_from: InheritanceSource
    accessory_color_from: InheritanceSource
    has_mutation: bool


@dataclass(frozen=True)
class BreedingResult:
    """Everything the caller needs to persist after a breeding."""

    child_dna: str
    child_generation: int
    cooldown_end1: str
    cooldown_end2: str
    inherited_traits: InheritedTraits


def get_breeding_cooldown(generation: int) -> int:
    """Cooldown in milliseconds for a parent of ``generation``.

    Unmapped generations, negative ones included, get the 1 hour default.
    """
    return BREEDING_COOLDOWNS.get(generation, DEFAULT_BREEDING_COOLDOWN)


def format_cooldown(ms: float) -> str:
    """Format a duration as ``"2h 5m"``, or ``"45m"`` when under an hour."""
    hours = int(ms // HOUR_MS)
    minutes = int((ms % HOUR_MS) // MINUTE_MS)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with milliseconds and a ``Z`` suffix."""
    text = moment.astimezone(UTC).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC."""
    moment = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment


def can_breed(
    cooldown_until: str | datetime | None,
    is_for_sale: bool | int,
    now: datetime | None = None,
) -> BreedingCheck:
    """Check whether a shober may breed right now.

    A for-sale listing blocks breeding regardless of cooldown. Otherwise a
    cooldown expiry in the future blocks it and reports the remaining time.
    An unparseable cooldown value counts as no active cooldown.

    Args:
        cooldown_until: When the current cooldown ends, or None.
        is_for_sale: Whether the shober is listed on the marketplace.
        now: Current time. Defaults to ``datetime.now(UTC)``.

    Returns:
        BreedingCheck describing eligibility.
    """
    if is_for_sale:
        return BreedingCheck(can_breed=False, reason=LISTED_FOR_SALE_REASON)

    if cooldown_until:
        now = parse_timestamp(now) if now is not None else datetime.now(UTC)
        try:
            ends = parse_timestamp(cooldown_until)
        except ValueError:
            logger.warning("Ignoring unparseable cooldown timestamp %r", cooldown_until)
            return BreedingCheck(can_breed=True)
        remaining = ends - now
        if remaining > timedelta(0):
            return BreedingCheck(
                can_breed=False,
                reason=COOLDOWN_ACTIVE_REASON,
                cooldown_remaining=int(remaining / timedelta(milliseconds=1)),
            )

    return BreedingCheck(can_breed=True)


def mix_gene(parent1_gene: int, parent2_gene: int, rng: random.Random | None = None) -> int:
    """Take one parent's gene with equal probability."""
    rng = rng or random
    return parent1_gene if rng.random() > 0.5 else parent2_gene


def mix_gene_with_mutation(
    parent1_gene: int,
    parent2_gene: int,
    catalog: Sequence[TraitDefinition],
    mutation_chance: float = 0.05,
    rng: random.Random | None = None,
) -> int:
    """Inherit a gene, then maybe replace it with a weighted draw from ``catalog``.

    The replacement draw covers the whole catalog, including the inherited value.
    """
    rng = rng or random
    result = mix_gene(parent1_gene, parent2_gene, rng)
    if rng.random() < mutation_chance:
        result = weighted_choice(rarity_weights(catalog), rng)
    return result


def calculate_child_mutation(
    parent1_mutation: int, parent2_mutation: int, rng: random.Random | None = None
) -> int:
    """Mutation gene for a child. Index 0 means no mutation.

    The roll chance is 5%, 15% when either parent is mutated and 30% when both
    are. With two mutated parents there is first a 50% chance to copy one of
    their mutations outright.
    """
    rng = rng or random
    chance = BASE_MUTATION_CHANCE

    if parent1_mutation > 0 or parent2_mutation > 0:
        chance = ONE_PARENT_MUTATION_CHANCE

    if parent1_mutation > 0 and parent2_mutation > 0:
        chance = BOTH_PARENTS_MUTATION_CHANCE
        if rng.random() < DIRECT_MUTATION_INHERIT_CHANCE:
            return mix_gene(parent1_mutation, parent2_mutation, rng)

    if rng.random() < chance:
        # Skip "none"; indices still refer to the full catalog.
        return weighted_choice(rarity_weights(MUTATIONS, start=1), rng)

    return 0


def _inheritance_source(child: int, parent1: int, parent2: int) -> InheritanceSource:
    if child == parent1:
        return InheritanceSource.PARENT1
    if child == parent2:
        return InheritanceSource.PARENT2
    return InheritanceSource.MUTATION


def _trait_index(genome: Genome, slot: Gene, catalog_size: int) -> int:
    return genome.gene(slot) % catalog_size


def breed_shobers(
    parent1_dna: str,
    parent2_dna: str,
    parent1_gen: int,
    parent2_gen: int,
    rng: random.Random | None = None,
    now: datetime | None = None,
) -> BreedingResult:
    """Breed two shobers and return the child's genome and bookkeeping.

    Malformed or placeholder parent genomes read as all-zero genes, matching
    what ``decode`` shows for them.

    Args:
        parent1_dna: First parent's genome.
        parent2_dna: Second parent's genome. May equal the first.
        parent1_gen: First parent's generation.
        parent2_gen: Second parent's generation.
        rng: Random source. Defaults to the ``random`` module.
        now: Breeding time used for cooldown ends. Defaults to now in UTC.

    Returns:
        BreedingResult with child DNA, generation, cooldown ends and provenance.
    """
    rng = rng or random
    now = parse_timestamp(now) if now is not None else datetime.now(UTC)
    child_generation = max(parent1_gen, parent2_gen) + 1

    p1 = parse_genome(parent1_dna) or Genome()
    p2 = parse_genome(parent2_dna) or Genome()

    p1_base = _trait_index(p1, Gene.BASE_COLOR, len(BASE_COLORS))
    p2_base = _trait_index(p2, Gene.BASE_COLOR, len(BASE_COLORS))
    p1_eyes = _trait_index(p1, Gene.EYE_STYLE, len(EYE_STYLES))
    p2_eyes = _trait_index(p2, Gene.EYE_STYLE, len(EYE_STYLES))
    p1_accessory = _trait_index(p1, Gene.ACCESSORY, len(ACCESSORIES))
    p2_accessory = _trait_index(p2, Gene.ACCESSORY, len(ACCESSORIES))
    p1_acc_color = _trait_index(p1, Gene.ACCESSORY_COLOR, len(ACCESSORY_COLORS))
    p2_acc_color = _trait_index(p2, Gene.ACCESSORY_COLOR, len(ACCESSORY_COLORS))
    p1_mutation = _trait_index(p1, Gene.MUTATION, len(MUTATIONS))
    p2_mutation = _trait_index(p2, Gene.MUTATION, len(MUTATIONS))

    child_base = mix_gene_with_mutation(
        p1_base, p2_base, BASE_COLORS, BASE_COLOR_MUTATION_CHANCE, rng
    )
    child_eyes = mix_gene_with_mutation(
        p1_eyes, p2_eyes, EYE_STYLES, EYE_STYLE_MUTATION_CHANCE, rng
    )
    child_accessory = mix_gene_with_mutation(
        p1_accessory, p2_accessory, ACCESSORIES, ACCESSORY_MUTATION_CHANCE, rng
    )
    child_acc_color = mix_gene(p1_acc_color, p2_acc_color, rng)
    child_mutation = calculate_child_mutation(p1_mutation, p2_mutation, rng)

    child_dna = encode(
        base_color=child_base,
        eye_style=child_eyes,
        accessory=child_accessory,
        accessory_color=child_acc_color,
        mutation=child_mutation,
    )

    inherited = InheritedTraits(
        base_color_from=_inheritance_source(child_base, p1_base, p2_base),
        eye_style_from=_inheritance_source(child_eyes, p1_eyes, p2_eyes),
        accessory_from=_inheritance_source(child_accessory, p1_accessory, p2_accessory),
        accessory_color_from=_inheritance_source(child_acc_color, p1_acc_color, p2_acc_color),
        has_mutation=child_mutation > 0,
    )

    cooldown1 = timedelta(milliseconds=get_breeding_cooldown(parent1_gen))
    cooldown2 = timedelta(milliseconds=get_breeding_cooldown(parent2_gen))

    logger.debug(
        "Bred gen %d child %s from %s x %s (mutation=%s)",
        child_generation,
        child_dna,
        parent1_dna,
        parent2_dna,
        inherited.has_mutation,
    )

    return BreedingResult(
        child_dna=child_dna,
        child_generation=child_generation,
        cooldown_end1=format_timestamp(now + cooldown1),
        cooldown_end2=format_timestamp(now + cooldown2),
        inherited_traits=inherited,
    )


def get_breeding_cost(parent1_gen: float, parent2_gen: float) -> int:
    """Breeding cost in coins: 100 for a gen 0 pair, 15 less per average generation, min 10."""
    avg_gen = (parent1_gen + parent2_gen) / 2
    cost = round_half_up(BASE_BREEDING_COST - avg_gen * COST_DROP_PER_GENERATION)
    return max(MIN_BREEDING_COST, cost)


def get_suggested_stud_fee(rarity_score: float, generation: int) -> int:
    """Suggested stud fee: half the rarity score, doubled for gen 0, min 10."""
    fee = round_half_up(rarity_score * 0.5)
    if generation == 0:
        fee *= 2
    return max(MIN_STUD_FEE, fee)
