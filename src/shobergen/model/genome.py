"""Fixed-size genome value type.

A genome is 12 bytes rendered as 24 lowercase hex characters. Each byte is a
gene slot; slots without a trait today stay zero so future traits can claim
them without reformatting stored genomes.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum

GENOME_BYTES = 12
GENOME_LENGTH = GENOME_BYTES * 2
PLACEHOLDER_GENOME = "0" * GENOME_LENGTH


class GenomeFormatError(ValueError):
    """Exception raised when text cannot be parsed as a genome."""

    pass


class Gene(IntEnum):
    """Byte offset of each named gene slot."""

    BASE_COLOR = 0
    BELLY_COLOR = 1  # mirrors BASE_COLOR at encode time
    EYE_STYLE = 2
    ACCESSORY = 3
    ACCESSORY_COLOR = 4
    PATTERN = 5  # reserved
    MUTATION = 6
    # 7-11 reserved


@dataclass(frozen=True)
class Genome:
    """Immutable sequence of 12 gene bytes with named accessors."""

    genes: tuple[int, ...] = (0,) * GENOME_BYTES

    def __post_init__(self) -> None:
        if len(self.genes) != GENOME_BYTES:
            msg = f"Genome needs {GENOME_BYTES} genes, got {len(self.genes)}"
            raise GenomeFormatError(msg)
        if any(not 0 <= g <= 0xFF for g in self.genes):
            raise GenomeFormatError("Gene values must fit in one byte")

    @classmethod
    def from_traits(
        cls,
        base_color: int,
        eye_style: int,
        accessory: int,
        accessory_color: int,
        mutation: int,
    ) -> Genome:
        """Build a genome from raw trait values, truncating each to a byte."""
        genes = [0] * GENOME_BYTES
        genes[Gene.BASE_COLOR] = base_color & 0xFF
        genes[Gene.BELLY_COLOR] = base_color & 0xFF
        genes[Gene.EYE_STYLE] = eye_style & 0xFF
        genes[Gene.ACCESSORY] = accessory & 0xFF
        genes[Gene.ACCESSORY_COLOR] = accessory_color & 0xFF
        genes[Gene.MUTATION] = mutation & 0xFF
        return cls(tuple(genes))

    @classmethod
    def from_hex(cls, text: str) -> Genome:
        """Parse a 24 character hex string.

        Raises:
            GenomeFormatError: If the text has the wrong length or non-hex characters.
        """
        if not isinstance(text, str) or len(text) != GENOME_LENGTH:
            raise GenomeFormatError(f"Genome must be exactly {GENOME_LENGTH} hex characters")
        if any(c not in string.hexdigits for c in text):
            raise GenomeFormatError(f"Genome contains non-hex characters: {text!r}")
        return cls(tuple(int(text[i : i + 2], 16) for i in range(0, GENOME_LENGTH, 2)))

    def gene(self, slot: Gene) -> int:
        """Raw byte stored in ``slot``."""
        return self.genes[slot]

    @property
    def is_placeholder(self) -> bool:
        return not any(self.genes)

    def to_hex(self) -> str:
        return "".join(f"{g:02x}" for g in self.genes)

    def __str__(self) -> str:
        return self.to_hex()
