"""API endpoints for breeding eligibility, breeding and breeding economics.

The endpoints are stateless. Persisting the child, charging the cost and
setting cooldowns is left to the caller, which must do so atomically with its
own eligibility re-check.
"""

import logging
import random
from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, field_validator

from shobergen.api.deps import get_rng
from shobergen.engine import (
    InheritanceSource,
    breed_shobers,
    can_breed,
    decode,
    format_cooldown,
    get_breeding_cooldown,
    get_breeding_cost,
    get_suggested_stud_fee,
)
from shobergen.model import Genome

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/breeding", tags=["breeding"])


class EligibilityRequest(BaseModel):
    """Breeding-relevant state of one shober."""

    cooldown_until: datetime | None = Field(
        default=None, description="When the current breeding cooldown ends"
    )
    is_for_sale: bool = Field(default=False, description="Whether the shober is listed for sale")


class EligibilityResponse(BaseModel):
    """Result of a breeding eligibility check."""

    can_breed: bool
    reason: str | None = None
    cooldown_remaining: int | None = Field(
        default=None, description="Remaining cooldown in milliseconds"
    )
    cooldown_display: str | None = Field(default=None, description="Remaining cooldown, e.g. 1h 5m")


class BreedRequest(BaseModel):
    """Request body for breeding two shobers."""

    parent1_dna: str = Field(description="First parent's genome")
    parent2_dna: str = Field(description="Second parent's genome")
    parent1_generation: int = Field(default=0, ge=0, description="First parent's generation")
    parent2_generation: int = Field(default=0, ge=0, description="Second parent's generation")

    @field_validator("parent1_dna", "parent2_dna")
    @classmethod
    def validate_dna(cls, v: str) -> str:
        """Require a well formed 24 character hex genome."""
        return Genome.from_hex(v.strip()).to_hex()


class InheritedTraitsResponse(BaseModel):
    """Where each of the child's traits came from."""

    base_color_from: InheritanceSource
    eye_style_from: InheritanceSource
    accessory_from: InheritanceSource
    accessory_color_from: InheritanceSource
    has_mutation: bool


class BreedResponse(BaseModel):
    """Child genome and the bookkeeping the caller must persist."""

    child_dna: str
    child_generation: int
    child_rarity_score: int
    cooldown_end1: str = Field(description="ISO-8601 time when parent 1 may breed again")
    cooldown_end2: str = Field(description="ISO-8601 time when parent 2 may breed again")
    cost: int = Field(description="Breeding cost in coins")
    inherited_traits: InheritedTraitsResponse


class CostResponse(BaseModel):
    """Breeding cost for a pair."""

    cost: int


class StudFeeResponse(BaseModel):
    """Suggested stud fee for a shober."""

    fee: int


class CooldownResponse(BaseModel):
    """Breeding cooldown for a generation."""

    generation: int
    cooldown_ms: int
    display: str


@router.post("/eligibility", response_model=EligibilityResponse)
async def check_eligibility(request: EligibilityRequest) -> EligibilityResponse:
    """Check whether a shober may breed now."""
    check = can_breed(request.cooldown_until, request.is_for_sale)
    return EligibilityResponse(
        can_breed=check.can_breed,
        reason=check.reason,
        cooldown_remaining=check.cooldown_remaining,
        cooldown_display=(
            format_cooldown(check.cooldown_remaining)
            if check.cooldown_remaining is not None
            else None
        ),
    )


@router.post("/breed", response_model=BreedResponse)
async def breed(
    request: BreedRequest,
    rng: random.Random | None = Depends(get_rng),
) -> BreedResponse:
    """Breed two genomes. A genome may be bred with itself."""
    result = breed_shobers(
        request.parent1_dna,
        request.parent2_dna,
        request.parent1_generation,
        request.parent2_generation,
        rng=rng,
    )
    logger.info(
        "Bred gen %d child %s",
        result.child_generation,
        result.child_dna,
    )
    inherited = result.inherited_traits
    return BreedResponse(
        child_dna=result.child_dna,
        child_generation=result.child_generation,
        child_rarity_score=decode(result.child_dna).rarity_score,
        cooldown_end1=result.cooldown_end1,
        cooldown_end2=result.cooldown_end2,
        cost=get_breeding_cost(request.parent1_generation, request.parent2_generation),
        inherited_traits=InheritedTraitsResponse(
            base_color_from=inherited.base_color_from,
            eye_style_from=inherited.eye_style_from,
            accessory_from=inherited.accessory_from,
            accessory_color_from=inherited.accessory_color_from,
            has_mutation=inherited.has_mutation,
        ),
    )


@router.get("/cost", response_model=CostResponse)
async def breeding_cost(
    parent1_generation: int = Query(ge=0),
    parent2_generation: int = Query(ge=0),
) -> CostResponse:
    """Cost in coins to breed a pair of the given generations."""
    return CostResponse(cost=get_breeding_cost(parent1_generation, parent2_generation))


@router.get("/stud-fee", response_model=StudFeeResponse)
async def stud_fee(
    rarity_score: int = Query(ge=0, le=500),
    generation: int = Query(ge=0),
) -> StudFeeResponse:
    """Suggested stud fee for a shober."""
    return StudFeeResponse(fee=get_suggested_stud_fee(rarity_score, generation))


@router.get("/cooldown/{generation}", response_model=CooldownResponse)
async def breeding_cooldown(generation: int) -> CooldownResponse:
    """Cooldown a parent of ``generation`` gets after breeding."""
    cooldown_ms = get_breeding_cooldown(generation)
    return CooldownResponse(
        generation=generation,
        cooldown_ms=cooldown_ms,
        display=format_cooldown(cooldown_ms),
    )
