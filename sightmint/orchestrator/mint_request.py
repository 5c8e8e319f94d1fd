"""
Maps a classified sighting onto the minting provider's NFT payload.

The attribute set is fixed: Species, Latitude, Longitude, Time Captured.
Only animal sightings can be turned into a request.
"""
from datetime import datetime, timezone
from typing import Optional

from sightmint.orchestrator.contracts import (
    ClassificationResult, MintAttribute, MintRequest, iso_timestamp,
)
from sightmint.orchestrator.errors import NonAnimalDetected

CHAIN = "solana"

# Sighting location is not captured yet; every NFT carries the same fix
SIGHTING_LATITUDE = "40.7468733"
SIGHTING_LONGITUDE = "-73.9947449"

PLACEHOLDER_IMAGE_URL = (
    "https://images.prestigeonline.com/wp-content/uploads/sites/6/2024/09/26220054/"
    "459118063_539597145247047_8853740358288590339_n.jpeg"
)


def recipient_address(owner_address: str, chain: str = CHAIN) -> str:
    return f"{chain}:{owner_address}"


def build_request(
    result: ClassificationResult,
    owner_address: str,
    *,
    image_url: str = PLACEHOLDER_IMAGE_URL,
    captured_at: Optional[datetime] = None,
    chain: str = CHAIN,
) -> MintRequest:
    if not result.is_animal:
        raise NonAnimalDetected(result.description)
    if not owner_address:
        raise ValueError("owner address is required to mint")

    captured_at = captured_at or datetime.now(timezone.utc)
    return MintRequest(
        recipient_address=recipient_address(owner_address, chain),
        name=f"{result.species} NFT",
        image=image_url,
        description=result.description,
        attributes=[
            MintAttribute("Species", result.species),
            MintAttribute("Latitude", SIGHTING_LATITUDE),
            MintAttribute("Longitude", SIGHTING_LONGITUDE),
            MintAttribute("Time Captured", iso_timestamp(captured_at)),
        ],
    )
