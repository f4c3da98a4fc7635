"""Trait catalogs.

Gene bytes map to entries by ``value % len(catalog)``, so the order of every
tuple below is part of the stored genome format. New entries may only be
appended; reordering or removing entries changes what existing genomes decode
to.
"""

from __future__ import annotations

from dataclasses import dataclass

from shobergen.model.rarity import RarityTier


@dataclass(frozen=True)
class TraitDefinition:
    """One selectable trait value.

    ``hex`` and ``belly`` are only set for base colors.
    """

    id: str
    name: str
    rarity: RarityTier
    hex: str | None = None
    belly: str | None = None


_C = RarityTier.COMMON
_U = RarityTier.UNCOMMON
_R = RarityTier.RARE
_L = RarityTier.LEGENDARY

BASE_COLORS: tuple[TraitDefinition, ...] = (
    TraitDefinition("classic_tan", "Classic Tan", _C, "#d4a574", "#f5e6d3"),
    TraitDefinition("red_sesame", "Red Sesame", _C, "#c67c4e", "#e8d4c4"),
    TraitDefinition("brown", "Chocolate", _C, "#8b5a2b", "#d4a574"),
    TraitDefinition("cream", "Cream", _U, "#f5e6d3", "#ffffff"),
    TraitDefinition("black_tan", "Black & Tan", _U, "#1a1a1a", "#d4a574"),
    TraitDefinition("grey", "Silver Grey", _U, "#a0a0a0", "#d0d0d0"),
    TraitDefinition("pure_white", "Pure White", _R, "#ffffff", "#f5f5f5"),
    TraitDefinition("midnight", "Midnight", _R, "#1a1a2e", "#16213e"),
    TraitDefinition("galaxy", "Galaxy", _L, "#1a0533", "#4a0080"),
    TraitDefinition("golden", "Golden", _L, "#ffd700", "#fff4b3"),
    TraitDefinition("rose_gold", "Rose Gold", _L, "#e8b4b8", "#ffd5d5"),
)

EYE_STYLES: tuple[TraitDefinition, ...] = (
    TraitDefinition("happy", "Happy", _C),
    TraitDefinition("sleepy", "Sleepy", _C),
    TraitDefinition("surprised", "Surprised", _U),
    TraitDefinition("wink", "Wink", _U),
    TraitDefinition("heart", "Heart Eyes", _R),
    TraitDefinition("star", "Star Eyes", _R),
    TraitDefinition("rainbow", "Rainbow", _L),
    TraitDefinition("galaxy", "Galaxy Eyes", _L),
)

ACCESSORIES: tuple[TraitDefinition, ...] = (
    TraitDefinition("none", "None", _C),
    TraitDefinition("collar", "Collar", _C),
    TraitDefinition("bandana", "Bandana", _C),
    TraitDefinition("bowtie", "Bowtie", _U),
    TraitDefinition("glasses", "Glasses", _U),
    TraitDefinition("hat", "Party Hat", _R),
    TraitDefinition("flower", "Flower", _R),
    TraitDefinition("headphones", "Headphones", _R),
    TraitDefinition("crown", "Crown", _L),
    TraitDefinition("halo", "Halo", _L),
    TraitDefinition("wizard_hat", "Wizard Hat", _L),
)

# Unweighted: every accessory color is equally likely.
ACCESSORY_COLORS: tuple[str, ...] = (
    "#e91e63",  # Pink
    "#9c27b0",  # Purple
    "#2196f3",  # Blue
    "#4caf50",  # Green
    "#ff9800",  # Orange
    "#f44336",  # Red
    "#795548",  # Brown
    "#333333",  # Black
    "#ffd700",  # Gold
    "#00bcd4",  # Cyan
)

# Index 0 ("none") means the genome carries no mutation.
MUTATIONS: tuple[TraitDefinition, ...] = (
    TraitDefinition("none", "None", _C),
    TraitDefinition("sparkle", "Sparkle", _R),
    TraitDefinition("glow", "Glow", _L),
    TraitDefinition("rainbow_shimmer", "Rainbow Shimmer", _L),
)

DEFAULT_BELLY_COLOR = "#f5e6d3"
