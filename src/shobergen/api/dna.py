"""API endpoints for genome decoding, encoding and generation."""

import logging
import random

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from shobergen.api.deps import get_rng
from shobergen.engine import (
    calculate_rarity_score,
    decode,
    dna_to_config,
    encode,
    generate_gen0_dna,
    generate_random_dna,
    get_overall_rarity,
    get_rarity_color,
    get_rarity_label,
    is_placeholder,
)
from shobergen.model import (
    ACCESSORIES,
    ACCESSORY_COLORS,
    BASE_COLORS,
    EYE_STYLES,
    MUTATIONS,
    RARITY_TIERS,
    RarityTier,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/dna", tags=["dna"])


class TraitResponse(BaseModel):
    """A catalog entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(description="Stable trait identifier")
    name: str = Field(description="Display name")
    rarity: RarityTier = Field(description="Rarity tier")
    hex: str | None = Field(default=None, description="Primary color (base colors only)")
    belly: str | None = Field(default=None, description="Belly color (base colors only)")


class ShoberConfigResponse(BaseModel):
    """Appearance settings for the renderer."""

    model_config = ConfigDict(from_attributes=True)

    base_color: str
    belly_color: str
    eye_style: str
    accessory: str
    accessory_color: str


class DecodedTraitsResponse(BaseModel):
    """Traits decoded from a genome."""

    model_config = ConfigDict(from_attributes=True)

    base_color: TraitResponse
    belly_color: str
    eye_style: TraitResponse
    accessory: TraitResponse
    accessory_color: str
    mutation: TraitResponse
    rarity_score: int = Field(description="Rarity score (0-500)")
    overall_rarity: RarityTier = Field(description="Overall rarity tier")


class DecodeRequest(BaseModel):
    """Request body for decoding a genome. Any string is accepted."""

    dna: str | None = Field(default=None, description="Genome string")


class DecodeResponse(BaseModel):
    """Decoded genome with its render config."""

    dna: str | None = Field(description="Genome that was decoded")
    is_placeholder: bool = Field(description="Whether the genome has not been generated yet")
    traits: DecodedTraitsResponse
    config: ShoberConfigResponse


class EncodeRequest(BaseModel):
    """Raw trait values. Out-of-range values wrap when decoded."""

    base_color: int = Field(default=0, description="Base color index")
    eye_style: int = Field(default=0, description="Eye style index")
    accessory: int = Field(default=0, description="Accessory index")
    accessory_color: int = Field(default=0, description="Accessory color index")
    mutation: int = Field(default=0, description="Mutation index")


class EncodeResponse(BaseModel):
    """Encoded genome."""

    dna: str = Field(description="24 character lowercase hex genome")


class GenerateRequest(BaseModel):
    """Request body for generating a new genome."""

    gen0: bool = Field(default=False, description="Use the boosted generation 0 odds")


class RarityRequest(BaseModel):
    """Tier of each scored trait category."""

    base_color: RarityTier
    eye_style: RarityTier
    accessory: RarityTier
    mutation: RarityTier


class RarityResponse(BaseModel):
    """Rarity score with its presentation values."""

    score: int = Field(description="Rarity score (0-500)")
    tier: RarityTier
    label: str
    color: str


class TierResponse(BaseModel):
    """Rarity tier constants."""

    model_config = ConfigDict(from_attributes=True)

    name: RarityTier
    weight: int
    multiplier: int
    color: str


class CatalogResponse(BaseModel):
    """The full trait catalog, in genome order."""

    tiers: list[TierResponse]
    base_colors: list[TraitResponse]
    eye_styles: list[TraitResponse]
    accessories: list[TraitResponse]
    accessory_colors: list[str]
    mutations: list[TraitResponse]


def _decode_response(dna: str | None) -> DecodeResponse:
    return DecodeResponse(
        dna=dna,
        is_placeholder=is_placeholder(dna),
        traits=DecodedTraitsResponse.model_validate(decode(dna)),
        config=ShoberConfigResponse.model_validate(dna_to_config(dna)),
    )


@router.post("/decode", response_model=DecodeResponse)
async def decode_dna(request: DecodeRequest) -> DecodeResponse:
    """Decode a genome. Malformed genomes decode to the default traits."""
    return _decode_response(request.dna)


@router.post("/encode", response_model=EncodeResponse)
async def encode_dna(request: EncodeRequest) -> EncodeResponse:
    """Encode raw trait values into a genome."""
    return EncodeResponse(dna=encode(**request.model_dump()))


@router.post("/generate", response_model=DecodeResponse)
async def generate_dna(
    request: GenerateRequest,
    rng: random.Random | None = Depends(get_rng),
) -> DecodeResponse:
    """Generate a new random genome and return it decoded."""
    dna = generate_gen0_dna(rng) if request.gen0 else generate_random_dna(rng)
    logger.info("Generated %s genome %s", "gen0" if request.gen0 else "random", dna)
    return _decode_response(dna)


@router.post("/rarity", response_model=RarityResponse)
async def score_rarity(request: RarityRequest) -> RarityResponse:
    """Score a set of trait tiers."""
    score = calculate_rarity_score(**request.model_dump())
    return RarityResponse(
        score=score,
        tier=get_overall_rarity(score),
        label=get_rarity_label(score),
        color=get_rarity_color(score),
    )


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    """List rarity tiers and every trait catalog."""
    return CatalogResponse(
        tiers=[TierResponse.model_validate(tier) for tier in RARITY_TIERS.values()],
        base_colors=[TraitResponse.model_validate(t) for t in BASE_COLORS],
        eye_styles=[TraitResponse.model_validate(t) for t in EYE_STYLES],
        accessories=[TraitResponse.model_validate(t) for t in ACCESSORIES],
        accessory_colors=list(ACCESSORY_COLORS),
        mutations=[TraitResponse.model_validate(t) for t in MUTATIONS],
    )
