"""Tests for breeding mechanics (shobergen.engine.breeding)."""

from __future__ import annotations

import random
import re
from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from shobergen.engine.breeding import (
    COOLDOWN_ACTIVE_REASON,
    LISTED_FOR_SALE_REASON,
    BreedingCheck,
    InheritanceSource,
    breed_shobers,
    calculate_child_mutation,
    can_breed,
    format_cooldown,
    format_timestamp,
    get_breeding_cooldown,
    get_breeding_cost,
    get_suggested_stud_fee,
    mix_gene,
    mix_gene_with_mutation,
)
from shobergen.engine.codec import decode, encode
from shobergen.model import BASE_COLORS, PLACEHOLDER_GENOME

HOUR_MS = 60 * 60 * 1000
NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
HEX24 = re.compile(r"^[0-9a-f]{24}$")


@pytest.fixture
def parent1_dna() -> str:
    """Parent with no mutation."""
    return encode(base_color=1, eye_style=2, accessory=3, accessory_color=4, mutation=0)


@pytest.fixture
def parent2_dna() -> str:
    """Second parent with no mutation and different traits."""
    return encode(base_color=5, eye_style=6, accessory=7, accessory_color=8, mutation=0)


class TestBreedingCooldowns:
    """Tests for the cooldown table and formatting."""

    @pytest.mark.parametrize(
        ("generation", "hours"),
        [(0, 4), (1, 3), (2, 2), (3, 1.5), (4, 1), (10, 1), (-1, 1), (10_000, 1)],
    )
    def test_cooldown_per_generation(self, generation: int, hours: float) -> None:
        """Mapped generations use the table, everything else the 1h default."""
        assert get_breeding_cooldown(generation) == hours * HOUR_MS

    @pytest.mark.parametrize(
        ("ms", "text"),
        [
            (2 * HOUR_MS, "2h 0m"),
            (1.5 * HOUR_MS, "1h 30m"),
            (45 * 60 * 1000, "45m"),
            (59 * 1000, "0m"),
            (0, "0m"),
        ],
    )
    def test_format_cooldown(self, ms: float, text: str) -> None:
        """Hours are omitted when zero."""
        assert format_cooldown(ms) == text


class TestCanBreed:
    """Tests for breeding eligibility."""

    def test_eligible_without_restrictions(self) -> None:
        """No cooldown and not for sale means eligible."""
        assert can_breed(None, False, now=NOW) == BreedingCheck(can_breed=True)

    def test_for_sale_blocks(self) -> None:
        """A for-sale listing blocks breeding."""
        check = can_breed(None, True, now=NOW)
        assert not check.can_breed
        assert check.reason == LISTED_FOR_SALE_REASON
        assert "for sale" in check.reason
        assert check.cooldown_remaining is None

    def test_for_sale_checked_before_cooldown(self) -> None:
        """For-sale wins even when a cooldown is also active."""
        check = can_breed(NOW + timedelta(hours=1), 1, now=NOW)
        assert check.reason == LISTED_FOR_SALE_REASON
        assert check.cooldown_remaining is None

    def test_active_cooldown_blocks(self) -> None:
        """A future cooldown end blocks breeding and reports the remaining time."""
        check = can_breed("2024-01-01T13:00:00.000Z", 0, now=NOW)
        assert not check.can_breed
        assert check.reason == COOLDOWN_ACTIVE_REASON
        assert "cooldown" in check.reason
        assert check.cooldown_remaining == HOUR_MS

    def test_expired_cooldown_allows(self) -> None:
        """A cooldown that already ended does not block."""
        assert can_breed(NOW - timedelta(minutes=1), False, now=NOW).can_breed

    def test_cooldown_ending_now_allows(self) -> None:
        """A cooldown ending exactly now has no time remaining."""
        assert can_breed(NOW, False, now=NOW).can_breed

    def test_naive_timestamps_are_utc(self) -> None:
        """Naive datetimes and strings are taken as UTC."""
        check = can_breed("2024-01-01T12:30:00", False, now=datetime(2024, 1, 1, 12, 0))
        assert check.cooldown_remaining == HOUR_MS // 2

    @pytest.mark.parametrize("value", ["not-a-date", "2024-13-45T99:00:00Z", "tomorrow"])
    def test_unparseable_cooldown_allows(self, value: str) -> None:
        """A cooldown value that is not a timestamp is treated as no cooldown."""
        with patch("shobergen.engine.breeding.logger") as log:
            check = can_breed(value, False, now=NOW)
        assert check == BreedingCheck(can_breed=True)
        log.warning.assert_called_once()

    def test_unparseable_cooldown_still_blocked_when_for_sale(self) -> None:
        """A bad cooldown value does not override the for-sale block."""
        assert can_breed("not-a-date", True, now=NOW).reason == LISTED_FOR_SALE_REASON

    def test_defaults_to_current_time(self) -> None:
        """Without ``now`` the wall clock is used."""
        future = datetime.now(UTC) + timedelta(hours=1)
        check = can_breed(future.isoformat(), False)
        assert not check.can_breed
        assert 0 < check.cooldown_remaining <= HOUR_MS


class TestGeneMixing:
    """Tests for mix_gene and mix_gene_with_mutation."""

    def test_mix_gene_picks_parent1_on_high_draw(self, scripted_rng) -> None:
        """Draws above 0.5 take parent 1's gene."""
        assert mix_gene(3, 9, scripted_rng([0.51])) == 3

    def test_mix_gene_picks_parent2_otherwise(self, scripted_rng) -> None:
        """Draws at or below 0.5 take parent 2's gene."""
        assert mix_gene(3, 9, scripted_rng([0.5])) == 9

    def test_no_mutation_keeps_inherited(self, scripted_rng) -> None:
        """A failed mutation roll keeps the inherited gene."""
        rng = scripted_rng([0.9, 0.5])
        assert mix_gene_with_mutation(2, 4, BASE_COLORS, 0.03, rng) == 2
        assert rng.remaining == 0

    def test_mutation_draws_from_whole_catalog(self, scripted_rng) -> None:
        """A successful roll replaces the gene with a weighted draw."""
        # Total weight 288; 0.99 * 288 = 285.12 runs past every entry but the last.
        rng = scripted_rng([0.9, 0.01, 0.99])
        assert mix_gene_with_mutation(0, 0, BASE_COLORS, 0.03, rng) == len(BASE_COLORS) - 1


class TestCalculateChildMutation:
    """Tests for the mutation gene rule."""

    def test_no_parent_mutation_base_chance_hit(self, scripted_rng) -> None:
        """Rolls under 5% mutate when neither parent is mutated."""
        assert calculate_child_mutation(0, 0, scripted_rng([0.04, 0.5])) == 1

    def test_no_parent_mutation_base_chance_miss(self, scripted_rng) -> None:
        """Rolls at 5% or above do not mutate."""
        assert calculate_child_mutation(0, 0, scripted_rng([0.06])) == 0

    def test_one_parent_raises_chance(self, scripted_rng) -> None:
        """One mutated parent raises the chance to 15%."""
        assert calculate_child_mutation(1, 0, scripted_rng([0.14, 0.0])) == 1
        assert calculate_child_mutation(0, 2, scripted_rng([0.16])) == 0

    def test_never_draws_none(self, scripted_rng) -> None:
        """The new-mutation draw skips index 0."""
        # Weights 12/3/3 over indices 1..3; 0.9 * 18 = 16.2 lands on index 3.
        assert calculate_child_mutation(0, 0, scripted_rng([0.0, 0.9])) == 3

    def test_both_parents_direct_inherit(self, scripted_rng) -> None:
        """Two mutated parents can pass one of their mutations on directly."""
        assert calculate_child_mutation(1, 2, scripted_rng([0.4, 0.9])) == 1
        assert calculate_child_mutation(1, 2, scripted_rng([0.4, 0.2])) == 2

    def test_both_parents_raised_roll(self, scripted_rng) -> None:
        """Without direct inheritance the roll chance is 30%."""
        assert calculate_child_mutation(1, 2, scripted_rng([0.6, 0.29, 0.9])) == 3
        assert calculate_child_mutation(1, 2, scripted_rng([0.6, 0.31])) == 0


class TestBreedShobers:
    """Tests for breed_shobers."""

    @pytest.mark.parametrize(
        ("gen1", "gen2", "child"), [(0, 0, 1), (2, 3, 4), (0, 5, 6), (7, 1, 8)]
    )
    def test_child_generation(
        self, parent1_dna: str, parent2_dna: str, gen1: int, gen2: int, child: int
    ) -> None:
        """Child generation is one more than the older parent."""
        result = breed_shobers(parent1_dna, parent2_dna, gen1, gen2, random.Random(1), NOW)
        assert result.child_generation == child

    def test_scripted_inheritance(self, parent1_dna: str, parent2_dna: str, scripted_rng) -> None:
        """Each trait comes from the parent the draws select."""
        rng = scripted_rng(
            [
                0.9, 0.9,  # base color: parent 1, no mutation
                0.1, 0.9,  # eye style: parent 2, no mutation
                0.9, 0.9,  # accessory: parent 1, no mutation
                0.1,  # accessory color: parent 2
                0.9,  # mutation gene: no roll
            ]
        )
        result = breed_shobers(parent1_dna, parent2_dna, 0, 0, rng, NOW)

        assert result.child_dna == encode(1, 6, 3, 8, 0)
        inherited = result.inherited_traits
        assert inherited.base_color_from == InheritanceSource.PARENT1
        assert inherited.eye_style_from == InheritanceSource.PARENT2
        assert inherited.accessory_from == InheritanceSource.PARENT1
        assert inherited.accessory_color_from == InheritanceSource.PARENT2
        assert inherited.has_mutation is False
        assert rng.remaining == 0

    def test_mutated_trait_provenance(
        self, parent1_dna: str, parent2_dna: str, scripted_rng
    ) -> None:
        """A trait matching neither parent is attributed to mutation."""
        rng = scripted_rng(
            [
                0.9, 0.01, 0.99,  # base color mutates to the last entry
                0.9, 0.9,
                0.9, 0.9,
                0.9,
                0.01, 0.0,  # mutation gene rolls sparkle
            ]
        )
        result = breed_shobers(parent1_dna, parent2_dna, 0, 0, rng, NOW)

        assert decode(result.child_dna).base_color == BASE_COLORS[-1]
        assert result.inherited_traits.base_color_from == InheritanceSource.MUTATION
        assert result.inherited_traits.has_mutation is True
        assert decode(result.child_dna).mutation.id == "sparkle"

    def test_cooldown_ends(self, parent1_dna: str, parent2_dna: str) -> None:
        """Cooldown ends are absolute ISO-8601 UTC timestamps per parent generation."""
        result = breed_shobers(parent1_dna, parent2_dna, 0, 3, random.Random(2), NOW)
        assert result.cooldown_end1 == "2024-01-01T16:00:00.000Z"
        assert result.cooldown_end2 == "2024-01-01T13:30:00.000Z"
        assert datetime.fromisoformat(result.cooldown_end1) == NOW + timedelta(hours=4)

    def test_self_breeding(self, parent1_dna: str) -> None:
        """A genome bred with itself still gives a valid child."""
        result = breed_shobers(parent1_dna, parent1_dna, 2, 2, random.Random(3), NOW)
        assert HEX24.match(result.child_dna)
        assert result.child_generation == 3

    def test_placeholder_parents(self) -> None:
        """Placeholder and malformed genomes breed as all-default genes."""
        result = breed_shobers(PLACEHOLDER_GENOME, "invalid", 0, 0, random.Random(4), NOW)
        assert HEX24.match(result.child_dna)
        assert result.child_generation == 1

    def test_child_genes_stay_in_catalog_range(self, parent1_dna: str) -> None:
        """Parents with wrapped bytes produce children with in-range indices."""
        wrapped = encode(255, 255, 255, 255, 255)
        rng = random.Random(5)
        for _ in range(100):
            child = breed_shobers(wrapped, parent1_dna, 1, 1, rng, NOW).child_dna
            assert int(child[0:2], 16) < len(BASE_COLORS)

    def test_mutation_rate_without_parent_mutations(
        self, parent1_dna: str, parent2_dna: str
    ) -> None:
        """Unmutated parents produce mutated children at roughly 5%."""
        rng = random.Random(1234)
        trials = 500
        mutated = sum(
            breed_shobers(parent1_dna, parent2_dna, 0, 0, rng, NOW).inherited_traits.has_mutation
            for _ in range(trials)
        )
        assert 0 < mutated / trials < 0.15

    def test_default_time_and_random(self, parent1_dna: str, parent2_dna: str) -> None:
        """breed_shobers works with no injected random source or clock."""
        before = datetime.now(UTC)
        result = breed_shobers(parent1_dna, parent2_dna, 1, 1)
        # Cooldown ends are truncated to whole milliseconds.
        floor = before.replace(microsecond=before.microsecond // 1000 * 1000)
        assert datetime.fromisoformat(result.cooldown_end1) >= floor + timedelta(hours=3)


class TestFormatTimestamp:
    """Tests for format_timestamp."""

    def test_milliseconds_and_z(self) -> None:
        """Timestamps carry milliseconds and a Z suffix."""
        moment = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=UTC)
        assert format_timestamp(moment) == "2024-05-06T07:08:09.123Z"

    def test_converts_to_utc(self) -> None:
        """Offsets are normalized to UTC."""
        shifted = datetime(2024, 1, 1, 16, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(shifted) == "2024-01-01T14:00:00.000Z"


class TestBreedingCost:
    """Tests for get_breeding_cost."""

    def test_gen0_pair(self) -> None:
        """Two generation 0 parents cost 100."""
        assert get_breeding_cost(0, 0) == 100

    @pytest.mark.parametrize(
        ("gen1", "gen2", "cost"), [(1, 1, 85), (0, 1, 93), (2, 3, 63), (6, 6, 10), (100, 100, 10)]
    )
    def test_known_costs(self, gen1: int, gen2: int, cost: int) -> None:
        """Cost drops 15 per average generation, rounding halves up, floored at 10."""
        assert get_breeding_cost(gen1, gen2) == cost

    def test_non_increasing(self) -> None:
        """Cost never rises as the average generation grows."""
        costs = [get_breeding_cost(g, g) for g in range(20)]
        assert costs == sorted(costs, reverse=True)
        assert min(costs) == 10


class TestStudFee:
    """Tests for get_suggested_stud_fee."""

    @pytest.mark.parametrize("score", [20, 21, 50, 100, 255, 500])
    def test_gen0_doubles(self, score: int) -> None:
        """Generation 0 studs charge double, above the fee floor."""
        assert get_suggested_stud_fee(score, 0) == 2 * get_suggested_stud_fee(score, 1)

    @pytest.mark.parametrize(("score", "generation"), [(0, 0), (0, 3), (5, 1), (15, 2)])
    def test_floor(self, score: int, generation: int) -> None:
        """Fees never drop below 10."""
        assert get_suggested_stud_fee(score, generation) == 10

    def test_rounds_half_up(self) -> None:
        """Half the score rounds up."""
        assert get_suggested_stud_fee(101, 1) == 51
